"""Application services exposed to the presentation layer."""

from gitnav.application.services.navigation_service import (
    DiscoveryRequest,
    DiscoveryResult,
    DiscoverySource,
    NavigationService,
    PipelineState,
)

__all__ = [
    "DiscoveryRequest",
    "DiscoveryResult",
    "DiscoverySource",
    "NavigationService",
    "PipelineState",
]
