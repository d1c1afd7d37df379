"""
Main entrypoint for the Report List API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn report_list_api.app.main:app --reload

Each application owns one ``ReportService`` store, created and seeded
in ``create_app`` and kept on ``app.state``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .api.router import router as api_router
from .services.report_service import ReportService

logger = logging.getLogger(__name__)


def create_app(seed_count: Optional[int] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    seed_count : Optional[int]
        Number of synthetic reports to load into the new store.
        Defaults to ``settings.seed_count``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # The list page may be served from another origin during development.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    service = ReportService(default_reg_date=settings.default_reg_date)
    service.seed(settings.seed_count if seed_count is None else seed_count)
    app.state.report_service = service

    app.include_router(api_router, prefix=settings.api_prefix)

    logger.info("%s %s ready with %s reports", settings.project_name, settings.api_version, service.count())
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
