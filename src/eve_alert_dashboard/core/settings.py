"""Dashboard configuration.

`DashboardConfig` carries the projection policy used by the pipeline itself.
`Settings` holds the outer-surface knobs (server, CLI) that may be overridden
from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

SOURCE_ENV = "EVE_DASHBOARD_SOURCE"
HTTP_TIMEOUT_ENV = "EVE_DASHBOARD_HTTP_TIMEOUT"
BASE_DIR_ENV = "EVE_DASHBOARD_BASE_DIR"
LOG_LEVEL_ENV = "EVE_DASHBOARD_LOG_LEVEL"

DEFAULT_SOURCE = "eve.json"
DEFAULT_HTTP_TIMEOUT = 10.0


@dataclass(frozen=True, slots=True)
class DashboardConfig:
    top_ips: int = 10
    top_signatures: int = 5
    unknown_signature: str = "Unknown"
    # Length of the YYYY-MM-DDTHH prefix used as the hourly bucket key.
    bucket_width: int = 13

    def with_limits(
        self,
        *,
        top_ips: int | None = None,
        top_signatures: int | None = None,
    ) -> DashboardConfig:
        """Return a copy with validated Top-N overrides applied."""
        cfg = self
        if top_ips is not None:
            if top_ips < 1:
                raise ValueError("top_ips must be >= 1")
            cfg = replace(cfg, top_ips=top_ips)
        if top_signatures is not None:
            if top_signatures < 1:
                raise ValueError("top_signatures must be >= 1")
            cfg = replace(cfg, top_signatures=top_signatures)
        return cfg


@dataclass(frozen=True, slots=True)
class Settings:
    source: str = DEFAULT_SOURCE
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    base_dir: Path | None = None
    log_level: str = "INFO"

    def resolved_base_dir(self) -> Path:
        return (self.base_dir or Path(os.getcwd())).resolve()


def _env_timeout() -> float:
    env = os.getenv(HTTP_TIMEOUT_ENV)
    if env is None or env == "":
        return DEFAULT_HTTP_TIMEOUT
    try:
        value = float(env)
    except ValueError as exc:
        raise ValueError(f"{HTTP_TIMEOUT_ENV} must be a number") from exc
    if value <= 0:
        raise ValueError(f"{HTTP_TIMEOUT_ENV} must be > 0")
    return value


def resolve_settings() -> Settings:
    """Return settings with environment overrides applied."""
    base_dir = os.getenv(BASE_DIR_ENV)
    return Settings(
        source=os.getenv(SOURCE_ENV) or DEFAULT_SOURCE,
        http_timeout=_env_timeout(),
        base_dir=Path(base_dir) if base_dir else None,
        log_level=(os.getenv(LOG_LEVEL_ENV) or "INFO").upper(),
    )
