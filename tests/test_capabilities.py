# tests/test_capabilities.py

from __future__ import annotations

import logging

from focusflow.infrastructure.capabilities import (
    AvailableCapabilities,
    UnavailableCapabilities,
    resolve_capabilities,
)

from .fakes import FakeCapabilityBackend


def test_web_is_always_unavailable() -> None:
    provider = resolve_capabilities("web", FakeCapabilityBackend())

    assert isinstance(provider, UnavailableCapabilities)
    assert provider.available is False
    assert provider.request_notifications().granted is False
    assert provider.request_calendar().granted is False


def test_missing_backend_is_unavailable() -> None:
    assert isinstance(resolve_capabilities("ios"), UnavailableCapabilities)


def test_native_backend_is_used() -> None:
    backend = FakeCapabilityBackend(notifications=True, calendar=False)

    provider = resolve_capabilities("android", backend)

    assert isinstance(provider, AvailableCapabilities)
    assert provider.available is True
    assert provider.request_notifications().granted is True
    assert provider.request_calendar().granted is False
    assert backend.calls == ["notifications", "calendar"]


def test_backend_failure_is_logged_and_denied(caplog) -> None:
    caplog.set_level(logging.ERROR, logger="focusflow")
    provider = AvailableCapabilities(FakeCapabilityBackend(error=RuntimeError("boom")))

    assert provider.request_notifications().granted is False
    assert provider.request_calendar().granted is False
    assert "Error requesting notification permissions: boom" in caplog.text
    assert "Error requesting calendar permissions: boom" in caplog.text
