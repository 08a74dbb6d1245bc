"""Single-pass alert aggregation into four independent count maps."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .alerts import port_key, signature_key, source_ip_key, time_bucket
from .settings import DashboardConfig


@dataclass(slots=True)
class AlertCounts:
    """Per-dimension occurrence counts for one pipeline run."""

    total: int = 0
    ports: Counter[str] = field(default_factory=Counter)
    source_ips: Counter[str] = field(default_factory=Counter)
    time_buckets: Counter[str] = field(default_factory=Counter)
    signatures: Counter[str] = field(default_factory=Counter)

    def add(self, alert: Mapping[str, Any], *, config: DashboardConfig) -> None:
        """Count one alert in every dimension it has a key for."""
        self.total += 1

        port = port_key(alert)
        if port is not None:
            self.ports[port] += 1

        ip = source_ip_key(alert)
        if ip is not None:
            self.source_ips[ip] += 1

        bucket = time_bucket(alert, width=config.bucket_width)
        if bucket is not None:
            self.time_buckets[bucket] += 1

        self.signatures[signature_key(alert, unknown=config.unknown_signature)] += 1


def aggregate_alerts(
    alerts: Iterable[Mapping[str, Any]],
    *,
    config: DashboardConfig | None = None,
) -> AlertCounts:
    """Build fresh count maps from an alert sequence."""
    config = config or DashboardConfig()
    counts = AlertCounts()
    for alert in alerts:
        counts.add(alert, config=config)
    return counts
