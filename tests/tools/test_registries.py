from __future__ import annotations

import json
from pathlib import Path

import pytest

from eve_alert_dashboard.core.pipeline import build_views
from eve_alert_dashboard.prompts.registry import review_messages
from eve_alert_dashboard.resources import registry as resources


def test_sample_eve_has_alerts_and_other_events() -> None:
    views = build_views(resources.SAMPLE_EVE)
    assert views.alert_count == 3
    assert [r.key for r in views.ports] == ["22", "80"]
    assert views.top_source_ips[0].key == "203.0.113.7"


def test_safe_resolve_rejects_escape(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVE_DASHBOARD_BASE_DIR", str(tmp_path))
    with pytest.raises(ValueError, match="escapes"):
        resources._safe_resolve("../outside.json")


def test_resolve_resource_path_checks_suffix(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVE_DASHBOARD_BASE_DIR", str(tmp_path))
    assert resources._resolve_resource_path("eve.json.gz") == (tmp_path / "eve.json.gz").resolve()
    with pytest.raises(ValueError, match="File type not allowed"):
        resources._resolve_resource_path("secrets.txt")


@pytest.mark.asyncio
async def test_eve_dashboard_resource(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, eve_text: str) -> None:
    monkeypatch.setenv("EVE_DASHBOARD_BASE_DIR", str(tmp_path))
    (tmp_path / "eve.json").write_text(eve_text, encoding="utf-8")

    out = await resources.eve_dashboard("eve.json")
    assert out["alert_count"] == 2
    assert out["ports"] == [{"port": "80", "count": 2}]


def test_review_messages_embeds_tool_arguments() -> None:
    messages = review_messages('/var/log/suricata/"eve".json', top_ips=3)
    assert messages[0]["role"] == "system"
    args = json.loads(messages[1]["content"].split("\n", 1)[1])
    assert args == {"source": '/var/log/suricata/"eve".json', "top_ips": 3, "top_signatures": 5}
