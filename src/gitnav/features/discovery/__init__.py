"""Public surface for repository discovery."""

from .adapters.ignore_rules import IgnoreRules
from .domain.models import RepositoryDescriptor
from .usecases.scanner import RepositoryScanner, ScannerPort, scan_repositories

__all__ = [
    "IgnoreRules",
    "RepositoryDescriptor",
    "RepositoryScanner",
    "ScannerPort",
    "scan_repositories",
]
