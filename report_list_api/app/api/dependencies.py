"""
API dependencies.

The report store belongs to the application instance that created it
(``app.state.report_service``).  Handlers receive it through
``get_report_service`` instead of importing a module‑level object, so
every app built by ``create_app`` works on its own store.
"""

from fastapi import Request

from report_list_api.app.services.report_service import ReportService


def get_report_service(request: Request) -> ReportService:
    """Return the report store of the application serving ``request``."""
    return request.app.state.report_service
