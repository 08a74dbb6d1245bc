"""Projection of count maps into ordered, size-bounded views."""

from __future__ import annotations

from collections.abc import Mapping

from .aggregate import AlertCounts
from .models import DashboardViews, KeyCount
from .settings import DashboardConfig

# Largest key that enumerates as an integer index in a JSON object.
_MAX_INDEX_KEY = 2**32 - 2


def _index_value(key: str) -> int | None:
    """Return the numeric value of a canonical non-negative integer key."""
    if not key.isdigit() or not key.isascii():
        return None
    if len(key) > 1 and key.startswith("0"):
        return None
    value = int(key)
    return value if value <= _MAX_INDEX_KEY else None


def enumerate_counts(counts: Mapping[str, int]) -> list[KeyCount]:
    """List counts in JSON-object enumeration order.

    Integer-like keys come first in ascending numeric order, followed by the
    remaining keys in first-seen order.
    """
    indexed: list[tuple[int, KeyCount]] = []
    named: list[KeyCount] = []
    for key, count in counts.items():
        row = KeyCount(key=key, count=count)
        idx = _index_value(key)
        if idx is None:
            named.append(row)
        else:
            indexed.append((idx, row))
    indexed.sort(key=lambda pair: pair[0])
    return [row for _, row in indexed] + named


def top_n(counts: Mapping[str, int], limit: int) -> list[KeyCount]:
    """Highest counts first; ties keep enumeration order."""
    if limit < 1:
        raise ValueError("limit must be >= 1")
    rows = sorted(enumerate_counts(counts), key=lambda r: r.count, reverse=True)
    return rows[:limit]


def port_view(counts: AlertCounts) -> list[KeyCount]:
    return enumerate_counts(counts.ports)


def source_ip_view(counts: AlertCounts, *, limit: int = 10) -> list[KeyCount]:
    return top_n(counts.source_ips, limit)


def timeline_view(counts: AlertCounts) -> list[KeyCount]:
    return sorted(enumerate_counts(counts.time_buckets), key=lambda r: r.key)


def signature_view(counts: AlertCounts, *, limit: int = 5) -> list[KeyCount]:
    return top_n(counts.signatures, limit)


def project(counts: AlertCounts, *, config: DashboardConfig | None = None) -> DashboardViews:
    """Apply every dimension's sort/limit policy."""
    config = config or DashboardConfig()
    return DashboardViews(
        alert_count=counts.total,
        ports=tuple(port_view(counts)),
        top_source_ips=tuple(source_ip_view(counts, limit=config.top_ips)),
        timeline=tuple(timeline_view(counts)),
        top_signatures=tuple(signature_view(counts, limit=config.top_signatures)),
    )
