"""
Exceptions raised by the service layer.

Endpoints translate these into ``HTTPException`` responses; services
never build HTTP responses themselves.
"""


class ReportListError(Exception):
    """Base class for report list errors."""
    pass


class NotFoundError(ReportListError):
    """Raised when no report with the requested id exists."""

    def __init__(self, report_id: int) -> None:
        self.report_id = report_id
        super().__init__(f"Report {report_id} not found")


class ValidationError(ReportListError, ValueError):
    """Raised for arguments the store cannot work with (e.g. ``size <= 0``)."""
    pass
