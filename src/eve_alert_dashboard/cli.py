from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence

from eve_alert_dashboard.core.models import DashboardViews, KeyCount
from eve_alert_dashboard.core.pipeline import load_dashboard
from eve_alert_dashboard.core.presentation import DashboardResponse
from eve_alert_dashboard.core.settings import DashboardConfig, resolve_settings
from eve_alert_dashboard.log_setup import configure_logging

BAR_WIDTH = 40


def _positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {s!r}") from e
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _section(title: str, rows: Sequence[KeyCount]) -> list[str]:
    out = [title, "-" * len(title)]
    if not rows:
        out.append("(no data)")
        return out
    width = max(len(r.key) for r in rows)
    peak = max(r.count for r in rows)
    for r in rows:
        bar = "#" * max(1, round(BAR_WIDTH * r.count / peak))
        out.append(f"{r.key.ljust(width)}  {r.count:>6}  {bar}")
    return out


def render_text(views: DashboardViews, *, config: DashboardConfig) -> str:
    """Plain-text rendering of the four dashboard sections."""
    lines = [f"Network Alert Dashboard ({views.alert_count} alerts)", ""]
    lines += _section("Alerts by Destination Port", views.ports) + [""]
    lines += _section(f"Top {config.top_ips} Source IPs", views.top_source_ips) + [""]
    lines += _section("Alerts Over Time", views.timeline) + [""]
    lines += _section("Top Alert Signatures", views.top_signatures)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entrypoint: aggregate an EVE log and print the dashboard."""
    p = argparse.ArgumentParser(description="Aggregate Suricata EVE JSON alerts.")
    p.add_argument("source", nargs="?", default=None, help="Path or http(s) URL (default: eve.json)")
    p.add_argument("--top-ips", type=_positive_int, default=10, help="Source addresses to show (default: 10)")
    p.add_argument(
        "--top-signatures", type=_positive_int, default=5, help="Signatures to show (default: 5)"
    )
    p.add_argument("--json", dest="as_json", action="store_true", help="Print the JSON payload")
    p.add_argument("--log-level", default=None, help="Logging level for diagnostics on stderr")

    args = p.parse_args(argv)

    try:
        settings = resolve_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    configure_logging(args.log_level or settings.log_level)
    config = DashboardConfig().with_limits(top_ips=args.top_ips, top_signatures=args.top_signatures)

    views = asyncio.run(
        load_dashboard(args.source or settings.source, config=config, timeout=settings.http_timeout)
    )

    if args.as_json:
        print(json.dumps(DashboardResponse.from_views(views).model_dump(), indent=2))
    else:
        print(render_text(views, config=config))


if __name__ == "__main__":
    main()
