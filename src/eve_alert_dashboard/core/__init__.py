"""Alert dashboard core: decoding, filtering, aggregation and projection."""

from __future__ import annotations

from .aggregate import AlertCounts, aggregate_alerts
from .alerts import filter_alerts, is_alert, is_absent
from .decoder import decode_records, iter_decoded
from .models import DashboardViews, DecodedLine, KeyCount, LineStatus, Record
from .pipeline import AlertDashboard, build_views, extract_alerts, load_dashboard
from .projection import project
from .settings import DashboardConfig, Settings, resolve_settings
from .source import DashboardError, SourceUnavailable, fetch_raw_text

__all__ = [
    "AlertCounts",
    "AlertDashboard",
    "DashboardConfig",
    "DashboardError",
    "DashboardViews",
    "DecodedLine",
    "KeyCount",
    "LineStatus",
    "Record",
    "Settings",
    "SourceUnavailable",
    "aggregate_alerts",
    "build_views",
    "decode_records",
    "extract_alerts",
    "fetch_raw_text",
    "filter_alerts",
    "is_absent",
    "is_alert",
    "iter_decoded",
    "load_dashboard",
    "project",
    "resolve_settings",
]
