from __future__ import annotations

from pathlib import Path

import pytest

from eve_alert_dashboard.core.settings import (
    DEFAULT_HTTP_TIMEOUT,
    DashboardConfig,
    resolve_settings,
)


def test_resolve_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "EVE_DASHBOARD_SOURCE",
        "EVE_DASHBOARD_HTTP_TIMEOUT",
        "EVE_DASHBOARD_BASE_DIR",
        "EVE_DASHBOARD_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = resolve_settings()
    assert settings.source == "eve.json"
    assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT
    assert settings.base_dir is None
    assert settings.log_level == "INFO"


def test_resolve_settings_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EVE_DASHBOARD_SOURCE", "https://sensor.local/eve.json")
    monkeypatch.setenv("EVE_DASHBOARD_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("EVE_DASHBOARD_BASE_DIR", str(tmp_path))
    monkeypatch.setenv("EVE_DASHBOARD_LOG_LEVEL", "debug")

    settings = resolve_settings()
    assert settings.source == "https://sensor.local/eve.json"
    assert settings.http_timeout == 2.5
    assert settings.resolved_base_dir() == tmp_path.resolve()
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_resolve_settings_invalid_timeout(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("EVE_DASHBOARD_HTTP_TIMEOUT", value)
    with pytest.raises(ValueError, match="EVE_DASHBOARD_HTTP_TIMEOUT"):
        resolve_settings()


def test_with_limits() -> None:
    cfg = DashboardConfig().with_limits(top_ips=3)
    assert (cfg.top_ips, cfg.top_signatures) == (3, 5)

    with pytest.raises(ValueError):
        DashboardConfig().with_limits(top_signatures=0)
