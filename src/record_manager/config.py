"""Configuration loading and validation from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

_DEFAULT_CREATE_UPDATE_MINUTES = 30
_DEFAULT_READ_MINUTES = 5
_DEFAULT_DELETE_MINUTES = 30

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Timeouts:
    """Per-operation ceilings, in seconds."""

    create_update: int = _DEFAULT_CREATE_UPDATE_MINUTES * 60
    read: int = _DEFAULT_READ_MINUTES * 60
    delete: int = _DEFAULT_DELETE_MINUTES * 60


@dataclass(frozen=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    subscription_id: str
    import_guard: bool = True
    timeouts: Timeouts = field(default_factory=Timeouts)
    managed_identity_client_id: str | None = None


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ValueError(f"Required environment variable {name} is not set")
    return value


def _bool_env(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    if raw.lower() in _TRUE_VALUES:
        return True
    if raw.lower() in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got: {raw!r}")


def _minutes_env(name: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        minutes = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")
    if minutes < 1:
        raise ValueError(f"{name} must be a positive integer, got: {minutes}")
    return minutes * 60


def load_config() -> AppConfig:
    """Load and validate application configuration from environment variables."""
    subscription_id = _require_env("AZURE_SUBSCRIPTION_ID")
    import_guard = _bool_env("IMPORT_GUARD", True)

    timeouts = Timeouts(
        create_update=_minutes_env("CREATE_UPDATE_TIMEOUT_MINUTES", _DEFAULT_CREATE_UPDATE_MINUTES),
        read=_minutes_env("READ_TIMEOUT_MINUTES", _DEFAULT_READ_MINUTES),
        delete=_minutes_env("DELETE_TIMEOUT_MINUTES", _DEFAULT_DELETE_MINUTES),
    )

    return AppConfig(
        subscription_id=subscription_id,
        import_guard=import_guard,
        timeouts=timeouts,
        managed_identity_client_id=os.environ.get("AZURE_MANAGED_IDENTITY_CLIENT_ID") or None,
    )
