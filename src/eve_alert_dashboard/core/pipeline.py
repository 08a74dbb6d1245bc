"""Load-and-aggregate pipeline.

Raw text -> decoded records -> alerts -> count maps -> projected views. The
pipeline is pure; `AlertDashboard` holds the only piece of long-lived state,
the most recently loaded alert set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import httpx

from .aggregate import aggregate_alerts
from .alerts import filter_alerts
from .decoder import decode_records
from .models import DashboardViews, Record
from .projection import project
from .settings import DashboardConfig
from .source import SourceUnavailable, fetch_raw_text

logger = logging.getLogger(__name__)


def extract_alerts(text: str) -> list[Record]:
    return filter_alerts(decode_records(text))


def views_for_alerts(
    alerts: Iterable[Mapping[str, Any]],
    *,
    config: DashboardConfig | None = None,
) -> DashboardViews:
    config = config or DashboardConfig()
    return project(aggregate_alerts(alerts, config=config), config=config)


def build_views(text: str, *, config: DashboardConfig | None = None) -> DashboardViews:
    """Run the whole pipeline over raw EVE text."""
    return views_for_alerts(extract_alerts(text), config=config)


class AlertDashboard:
    """Current alert set for one EVE source, replaced wholesale on reload."""

    def __init__(
        self,
        source: str | Path,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.source = source
        self._timeout = timeout
        self._client = client
        self.alerts: tuple[Record, ...] = ()

    async def reload(self) -> int:
        """Fetch and decode the source again; return the new alert count.

        Loads are last-write-wins: whichever completes last sets `alerts`.
        An unavailable source leaves an empty alert set.
        """
        try:
            text = await fetch_raw_text(self.source, timeout=self._timeout, client=self._client)
        except SourceUnavailable as e:
            logger.error("Error loading %s: %s", self.source, e.reason)
            self.alerts = ()
            return 0

        alerts = tuple(extract_alerts(text))
        self.alerts = alerts
        logger.debug("Loaded %d alerts from %s", len(alerts), self.source)
        return len(alerts)

    def views(self, config: DashboardConfig | None = None) -> DashboardViews:
        return views_for_alerts(self.alerts, config=config)


async def load_dashboard(
    source: str | Path,
    *,
    config: DashboardConfig | None = None,
    timeout: float | None = None,
    client: httpx.AsyncClient | None = None,
) -> DashboardViews:
    """Load a source once and return its views (empty when unavailable)."""
    dashboard = AlertDashboard(source, timeout=timeout, client=client)
    await dashboard.reload()
    return dashboard.views(config)
