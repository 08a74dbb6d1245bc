"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (aggregate an EVE log into dashboard views)
- Resources: addressable data blobs (sample log, response schema, eve://{path})
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m eve_alert_dashboard.server.dashboard_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from eve_alert_dashboard.log_setup import configure_logging
from eve_alert_dashboard.prompts.registry import register_prompts
from eve_alert_dashboard.resources.registry import register_resources
from eve_alert_dashboard.tools.dashboard import alert_dashboard_impl

LOGGER = logging.getLogger(__name__)


mcp = FastMCP("eve-alerts", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def alert_dashboard(
    source: str | None = None,
    top_ips: int | None = None,
    top_signatures: int | None = None,
) -> dict[str, Any]:
    """Aggregate alerts from an EVE JSON log for charting.

    Parameters
    ----------
    source:
        Local path (plain or .gz) or http(s) URL of a Suricata eve.json log.
        Defaults to EVE_DASHBOARD_SOURCE, then "eve.json".
    top_ips:
        How many source addresses to return, busiest first (default 10).
    top_signatures:
        How many signatures to return, most frequent first (default 5).

    Returns
    -------
    dict:
        {"alert_count": int,
         "ports": [{"port", "count"}],
         "top_source_ips": [{"ip", "count"}],
         "timeline": [{"time", "count"}],
         "top_signatures": [{"name", "value"}]}
    """
    return await alert_dashboard_impl(
        source=source,
        top_ips=top_ips,
        top_signatures=top_signatures,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
