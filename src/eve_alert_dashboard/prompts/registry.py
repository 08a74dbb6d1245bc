"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

import json
from typing import Any

from mcp.server.fastmcp import FastMCP


def review_messages(source: str, top_ips: int = 10, top_signatures: int = 5) -> list[dict[str, Any]]:
    """Build the alert review conversation for a source."""
    return [
        {
            "role": "system",
            "content": (
                "You are a network security analyst. Work only from the aggregated counts "
                "returned by the alert_dashboard tool; do not speculate about events that "
                "are not in the data. Call out the busiest destination ports, the noisiest "
                "source addresses, hours with unusual spikes and the dominant signatures. "
                "If alert_count is 0, say that no alerts were loaded."
            ),
        },
        {
            "role": "user",
            "content": (
                "Call alert_dashboard with these arguments and summarize the result:\n"
                + json.dumps({"source": source, "top_ips": top_ips, "top_signatures": top_signatures})
            ),
        },
    ]


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def review_alert_dashboard(
        source: str = "eve.json",
        top_ips: int = 10,
        top_signatures: int = 5,
    ) -> list[dict[str, Any]]:
        """Summarize the alert dashboard for an EVE log."""
        return review_messages(source, top_ips=top_ips, top_signatures=top_signatures)
