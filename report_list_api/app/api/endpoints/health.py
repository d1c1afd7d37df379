"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends

from report_list_api.app.api.dependencies import get_report_service
from report_list_api.app.core.config import settings
from report_list_api.app.services.report_service import ReportService

router = APIRouter()


@router.get("/health")
async def health_check(service: ReportService = Depends(get_report_service)) -> dict:
    """Report service status and the number of stored reports."""
    return {
        "status": "ok",
        "service": settings.project_name,
        "records": service.count(),
    }
