"""Optional platform capabilities (notifications, calendar).

Which capabilities exist depends on the platform the app runs on. The
choice is made once at startup by ``resolve_capabilities`` and the result
is passed to whoever needs it; code never checks the platform ad hoc.
"""

import logging
from typing import Protocol

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class PermissionResult(BaseModel):
    """Outcome of a permission request."""

    granted: bool


class CapabilityBackend(Protocol):
    """Native module that actually asks the operating system."""

    def request_notification_permission(self) -> bool: ...

    def request_calendar_permission(self) -> bool: ...


class CapabilityProvider(Protocol):
    """What the rest of the app depends on."""

    @property
    def available(self) -> bool: ...

    def request_notifications(self) -> PermissionResult: ...

    def request_calendar(self) -> PermissionResult: ...


class AvailableCapabilities:
    """Capabilities backed by a native module.

    A backend failure is logged and reported as not granted.
    """

    def __init__(self, backend: CapabilityBackend) -> None:
        self._backend = backend

    @property
    def available(self) -> bool:
        return True

    def request_notifications(self) -> PermissionResult:
        try:
            return PermissionResult(granted=bool(self._backend.request_notification_permission()))
        except Exception as e:
            logger.error(f"Error requesting notification permissions: {e}")
            return PermissionResult(granted=False)

    def request_calendar(self) -> PermissionResult:
        try:
            return PermissionResult(granted=bool(self._backend.request_calendar_permission()))
        except Exception as e:
            logger.error(f"Error requesting calendar permissions: {e}")
            return PermissionResult(granted=False)


class UnavailableCapabilities:
    """Platforms without native capabilities; every request is denied."""

    @property
    def available(self) -> bool:
        return False

    def request_notifications(self) -> PermissionResult:
        return PermissionResult(granted=False)

    def request_calendar(self) -> PermissionResult:
        return PermissionResult(granted=False)


def resolve_capabilities(
    platform: str,
    backend: CapabilityBackend | None = None,
) -> AvailableCapabilities | UnavailableCapabilities:
    """Pick the capability variant for this run.

    Args:
        platform: Platform name, e.g. "ios", "android" or "web".
        backend: Native module, if one could be loaded.

    Returns:
        AvailableCapabilities when a backend exists on a native platform,
        UnavailableCapabilities otherwise.
    """
    if platform == "web" or backend is None:
        logger.info(f"Native capabilities unavailable on platform {platform!r}")
        return UnavailableCapabilities()
    return AvailableCapabilities(backend)
