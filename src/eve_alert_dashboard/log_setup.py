"""Logging setup shared by the MCP server and the CLI."""

from __future__ import annotations

import logging
import sys

from eve_alert_dashboard.core.settings import resolve_settings


def configure_logging(level_name: str | None = None) -> None:
    """Configure a reasonable default logging setup.

    Diagnostics go to stderr; stdout must remain clean for stdio transport
    and for the CLI's JSON output.
    """
    name = (level_name or resolve_settings().log_level).upper()
    level = getattr(logging, name, logging.INFO)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
