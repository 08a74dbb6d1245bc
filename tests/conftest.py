from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


def _alert(
    *,
    dest_port: Any = 80,
    src_ip: Any = "1.2.3.4",
    timestamp: Any = "2024-01-01T10:00:00Z",
    signature: Any = "SQLi",
    **extra: Any,
) -> dict[str, Any]:
    """Build an EVE alert event; pass None to omit a field."""
    event: dict[str, Any] = {"event_type": "alert"}
    if dest_port is not None:
        event["dest_port"] = dest_port
    if src_ip is not None:
        event["src_ip"] = src_ip
    if timestamp is not None:
        event["timestamp"] = timestamp
    if signature is not None:
        event["alert"] = {"signature": signature}
    event.update(extra)
    return event


@pytest.fixture
def make_alert() -> Callable[..., dict[str, Any]]:
    return _alert


@pytest.fixture
def eve_text() -> str:
    return (
        "\n".join(
            [
                json.dumps(_alert()),
                "{bad json",
                json.dumps(_alert(timestamp="2024-01-01T10:30:00Z")),
            ]
        )
        + "\n"
    )


@pytest.fixture
def write_eve() -> Callable[[Path, list[Any]], None]:
    def _write(path: Path, lines: list[Any]) -> None:
        text = "\n".join(line if isinstance(line, str) else json.dumps(line) for line in lines)
        path.write_text(text + "\n", encoding="utf-8")

    return _write
