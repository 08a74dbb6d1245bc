"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from typing import Any

import httpx

from eve_alert_dashboard.core.pipeline import load_dashboard
from eve_alert_dashboard.core.presentation import DashboardResponse
from eve_alert_dashboard.core.settings import DashboardConfig, resolve_settings

HARD_LIMIT = 1000


def _limit(name: str, value: int | None) -> int | None:
    """Validate a Top-N override and clamp it to HARD_LIMIT."""
    if value is None:
        return None
    if value <= 0:
        raise ValueError(f"{name} must be > 0")
    return min(value, HARD_LIMIT)


async def alert_dashboard_impl(
    *,
    source: str | None = None,
    top_ips: int | None = None,
    top_signatures: int | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Implementation for the `alert_dashboard` MCP tool.

    Notes
    -----
    - source falls back to EVE_DASHBOARD_SOURCE, then "eve.json"
    - an unreachable source yields zero counts rather than an error
    """
    config = DashboardConfig().with_limits(
        top_ips=_limit("top_ips", top_ips),
        top_signatures=_limit("top_signatures", top_signatures),
    )
    settings = resolve_settings()

    views = await load_dashboard(
        source or settings.source,
        config=config,
        timeout=settings.http_timeout,
        client=client,
    )
    return DashboardResponse.from_views(views).model_dump()
