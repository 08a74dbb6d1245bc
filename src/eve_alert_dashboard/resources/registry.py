"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from eve_alert_dashboard.core.pipeline import load_dashboard
from eve_alert_dashboard.core.presentation import DashboardResponse
from eve_alert_dashboard.core.settings import BASE_DIR_ENV, resolve_settings

ALLOWED_FILE_SUFFIXES = {".json", ".jsonl", ".log"}

SAMPLE_EVE = "\n".join(
    [
        '{"timestamp":"2025-12-30T08:12:01.000000+0000","event_type":"alert","src_ip":"203.0.113.7",'
        '"dest_ip":"10.0.0.5","dest_port":80,"proto":"TCP","alert":{"signature_id":2006446,'
        '"signature":"ET WEB_SERVER Possible SQL Injection Attempt UNION SELECT","severity":1}}',
        '{"timestamp":"2025-12-30T08:40:17.000000+0000","event_type":"alert","src_ip":"198.51.100.23",'
        '"dest_ip":"10.0.0.5","dest_port":22,"proto":"TCP","alert":{"signature_id":2001219,'
        '"signature":"ET SCAN Potential SSH Scan","severity":2}}',
        '{"timestamp":"2025-12-30T09:03:44.000000+0000","event_type":"flow","src_ip":"10.0.0.5",'
        '"dest_ip":"10.0.0.1","dest_port":53,"proto":"UDP"}',
        '{"timestamp":"2025-12-30T09:05:09.000000+0000","event_type":"alert","src_ip":"203.0.113.7",'
        '"dest_ip":"10.0.0.5","dest_port":80,"proto":"TCP","alert":{"signature_id":2006446,'
        '"signature":"ET WEB_SERVER Possible SQL Injection Attempt UNION SELECT","severity":1}}',
    ]
) + "\n"


def _base_dir() -> Path:
    """Return the resolved base directory for file resources."""
    return resolve_settings().resolved_base_dir()


def _safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = _base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def _resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = _safe_resolve(path)
    suffix = _allowed_suffix(resolved)
    if suffix not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


async def eve_dashboard(path: str) -> dict[str, Any]:
    """Dashboard payload for a log under the base directory."""
    p = _resolve_resource_path(path)
    views = await load_dashboard(p)
    return DashboardResponse.from_views(views).model_dump()


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://eve-alerts/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Resources:\n"
            "- app://eve-alerts/help\n"
            "- app://eve-alerts/examples/sample-eve\n"
            "- app://eve-alerts/schemas/dashboard-response\n"
            f"- eve://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            f"\nBase directory: {_base_dir()}\n"
        )

    @mcp.resource("app://eve-alerts/examples/sample-eve")
    def sample_eve() -> str:
        """Return a tiny EVE JSON log for demos and tests."""
        return SAMPLE_EVE

    @mcp.resource("app://eve-alerts/schemas/dashboard-response")
    def dashboard_schema() -> dict[str, Any]:
        """Return the JSON schema for dashboard responses."""
        return DashboardResponse.model_json_schema()

    @mcp.resource("eve://{path}")
    async def eve_resource(path: str) -> dict[str, Any]:
        """Aggregate an EVE log from within EVE_DASHBOARD_BASE_DIR."""
        return await eve_dashboard(path)
