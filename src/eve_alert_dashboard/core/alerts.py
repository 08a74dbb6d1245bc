"""Alert filtering and per-alert key derivation."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from .models import Record, is_record

ALERT_EVENT_TYPE = "alert"


def is_alert(record: object) -> bool:
    return is_record(record) and record.get("event_type") == ALERT_EVENT_TYPE


def filter_alerts(records: Iterable[object]) -> list[Record]:
    """Keep only EVE events whose event_type is "alert" (order preserved)."""
    return [r for r in records if is_alert(r)]


def is_absent(value: Any) -> bool:
    """Absence policy for the port and source-address dimensions.

    Missing, null, false, zero and empty values all count as "no value". A
    literal ``dest_port: 0`` is therefore dropped rather than counted.

    Empty lists and objects are absent too, unlike JavaScript truthiness
    where ``[]`` and ``{}`` would be kept as keys.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, list, dict)):
        return len(value) == 0
    return False


def key_text(value: Any) -> str:
    """Render a field value as a grouping key.

    Integral floats lose their fraction so that 80, 80.0 and "80" share a key.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, separators=(",", ":"), sort_keys=False)


def port_key(alert: Mapping[str, Any]) -> str | None:
    value = alert.get("dest_port")
    return None if is_absent(value) else key_text(value)


def source_ip_key(alert: Mapping[str, Any]) -> str | None:
    value = alert.get("src_ip")
    return None if is_absent(value) else key_text(value)


def time_bucket(alert: Mapping[str, Any], *, width: int = 13) -> str | None:
    """Hourly bucket: the YYYY-MM-DDTHH prefix of the timestamp."""
    ts = alert.get("timestamp")
    if not isinstance(ts, str) or len(ts) < width:
        return None
    return ts[:width]


def signature_key(alert: Mapping[str, Any], *, unknown: str = "Unknown") -> str:
    details = alert.get("alert")
    sig = details.get("signature") if is_record(details) else None
    if is_absent(sig):
        return unknown
    return key_text(sig)
