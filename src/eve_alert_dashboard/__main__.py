"""Module entrypoint.

Allows:
    python -m eve_alert_dashboard
"""

from __future__ import annotations

from eve_alert_dashboard.server.dashboard_server import main

if __name__ == "__main__":
    main()
