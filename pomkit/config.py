"""Configuration for pomkit via environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass
class PomkitConfig:
    """Timeouts, polling and logging settings. Times are in milliseconds."""

    default_timeout_ms: float | None = None
    fallback_timeout_ms: float = 10000
    poll_interval_ms: float = 500
    strict_collections: bool = False
    headless: bool = True
    log_level: str = "WARNING"
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> PomkitConfig:
        """Load config from environment variables."""
        return cls(
            default_timeout_ms=_env_float("POMKIT_DEFAULT_TIMEOUT_MS", None),
            fallback_timeout_ms=_env_float("POMKIT_FALLBACK_TIMEOUT_MS", 10000),
            poll_interval_ms=_env_float("POMKIT_POLL_INTERVAL_MS", 500),
            strict_collections=_env_bool("POMKIT_STRICT_COLLECTIONS", False),
            headless=_env_bool("POMKIT_HEADLESS", True),
            log_level=os.environ.get("POMKIT_LOG_LEVEL", "WARNING"),
            json_logs=_env_bool("POMKIT_JSON_LOGS", False),
        )


_config: PomkitConfig | None = None


def get_config() -> PomkitConfig:
    """Return the process-wide config, loading it from the environment once."""
    global _config
    if _config is None:
        _config = PomkitConfig.from_env()
    return _config


def set_config(config: PomkitConfig | None) -> None:
    """Replace the process-wide config. ``None`` reloads from the environment."""
    global _config
    _config = config
