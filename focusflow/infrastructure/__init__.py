"""Infrastructure layer for focusflow.

Adapters around the outside world:

    Storage:
        - JsonStorage: Low-level JSON file reading
        - TaskReader: Task document loading

    Capabilities:
        - resolve_capabilities: Startup choice of platform capabilities
        - AvailableCapabilities / UnavailableCapabilities
"""

from focusflow.infrastructure.capabilities import (
    AvailableCapabilities,
    CapabilityBackend,
    CapabilityProvider,
    PermissionResult,
    UnavailableCapabilities,
    resolve_capabilities,
)
from focusflow.infrastructure.storage import JsonStorage, TaskReader

__all__ = [
    # Storage
    "JsonStorage",
    "TaskReader",
    # Capabilities
    "CapabilityBackend",
    "CapabilityProvider",
    "PermissionResult",
    "AvailableCapabilities",
    "UnavailableCapabilities",
    "resolve_capabilities",
]
