"""
Report list endpoints.

These routes back the shared list page: search and pagination, detail
lookup, create, update, bulk delete and CSV download.  Handlers only
translate between HTTP and ``ReportService``; service errors are
converted to ``HTTPException`` here.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse

from report_list_api.app.api.dependencies import get_report_service
from report_list_api.app.core.config import settings
from report_list_api.app.core.exceptions import NotFoundError, ValidationError
from report_list_api.app.schemas.report import (
    CreateResult,
    DeleteResult,
    ReportCreate,
    ReportPage,
    ReportRead,
    ReportUpdate,
    UpdateResult,
)
from report_list_api.app.services.report_service import ReportService

router = APIRouter()


@router.get("", response_model=ReportPage)
async def list_reports(
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1),
    search: Optional[str] = Query(None),
    service: ReportService = Depends(get_report_service),
) -> ReportPage:
    """Return one page of reports.

    - **page**: zero‑based page index; pages past the end are empty.
    - **size**: page size, capped to `MAX_PAGE_SIZE` when that is set.
    - **search**: keep reports whose title or owner contains this text.
    """
    if settings.max_page_size and size > settings.max_page_size:
        size = settings.max_page_size
    try:
        return service.list(page=page, size=size, search=search)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e


# Declared before ``/{report_id}`` so that ``excel`` is not parsed as an id.
@router.get("/excel")
async def download_reports(
    search: Optional[str] = Query(None),
    service: ReportService = Depends(get_report_service),
) -> Response:
    """Download the report list as CSV, filtered like the list view."""
    content = service.export_csv(search=search)
    return Response(
        content=content,
        media_type="text/csv; charset=UTF-8",
        headers={"Content-Disposition": f"attachment; filename={settings.export_filename}"},
    )


@router.get("/{report_id}", response_model=ReportRead)
async def get_report(
    report_id: int,
    service: ReportService = Depends(get_report_service),
) -> ReportRead:
    """Retrieve a single report by its ID.  Raises 404 if it does not exist."""
    try:
        return service.get_by_id(report_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("", response_model=CreateResult)
async def create_report(
    report_in: ReportCreate,
    service: ReportService = Depends(get_report_service),
) -> CreateResult:
    """Create a report and return the id assigned to it."""
    report_id = service.create(report_in)
    return CreateResult(id=report_id)


@router.put("/{report_id}", response_model=UpdateResult)
async def update_report(
    report_id: int,
    report_in: ReportUpdate,
    service: ReportService = Depends(get_report_service),
) -> Union[UpdateResult, JSONResponse]:
    """Update the title and/or owner of a report.

    Only fields present in the body are changed.  A missing report
    yields 404 with ``status: "not_found"`` in the body.
    """
    updated = service.update(report_id, report_in)
    if updated is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"status": "not_found", "detail": str(NotFoundError(report_id))},
        )
    return UpdateResult()


@router.delete("", response_model=DeleteResult)
async def delete_reports(
    ids: List[int] = Body(...),
    service: ReportService = Depends(get_report_service),
) -> DeleteResult:
    """Delete the selected reports.

    ``count`` echoes the number of ids requested; unknown ids are
    ignored.
    """
    count = service.delete_many(ids)
    return DeleteResult(count=count)
