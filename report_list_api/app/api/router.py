"""
Top‑level API router.

Aggregates the endpoint routers.  The report list is mounted under the
configured list mode (``/p01a04`` by default) so that the list widget
can address it as ``/api/{mode}``.
"""

from fastapi import APIRouter

from report_list_api.app.core.config import settings
from .endpoints import health, reports

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(reports.router, prefix=f"/{settings.list_mode}", tags=["reports"])
