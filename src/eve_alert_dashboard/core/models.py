"""Core data models for the alert dashboard pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# A decoded EVE JSON event. Only a handful of fields matter to the pipeline.
Record = dict[str, Any]


class LineStatus(str, Enum):
    """How a non-empty log line decoded."""

    OK = "ok"
    MALFORMED = "malformed"
    NOT_OBJECT = "not_object"


@dataclass(frozen=True, slots=True)
class DecodedLine:
    """Outcome of decoding one non-empty log line."""

    line_no: int
    raw: str
    status: LineStatus
    record: Record | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class KeyCount:
    """Projected aggregate row: a grouping key and its occurrence count."""

    key: str
    count: int


@dataclass(frozen=True, slots=True)
class DashboardViews:
    """The four presentation-ready views computed from one alert set."""

    alert_count: int
    ports: tuple[KeyCount, ...]
    top_source_ips: tuple[KeyCount, ...]
    timeline: tuple[KeyCount, ...]
    top_signatures: tuple[KeyCount, ...]

    @classmethod
    def empty(cls) -> DashboardViews:
        return cls(alert_count=0, ports=(), top_source_ips=(), timeline=(), top_signatures=())


def is_record(value: object) -> bool:
    """True for decoded JSON objects."""
    return isinstance(value, Mapping)
