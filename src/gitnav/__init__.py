"""gitnav - jump to any git repository under a search root."""

__version__ = "0.3.0"

__all__ = ["__version__"]
