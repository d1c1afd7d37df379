"""
Pydantic schemas for report records.

A report is a single row of the shared list page: an id assigned by
the store, a title, the owner it is assigned to and a registration
date.  JSON payloads use the camel‑case ``regDate`` and
``totalPages`` keys expected by the list widget; Python code uses
snake‑case attribute names.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

DATE_FORMAT = "%Y-%m-%d"


class ReportBase(BaseModel):
    title: str = Field(..., description="Human readable report title")
    owner: str = Field(..., description="Person the report is assigned to")

    model_config = {
        "populate_by_name": True,
    }


class ReportCreate(ReportBase):
    """Schema for creating a report.

    ``regDate`` may be omitted; the store then fills in its default
    registration date.  An ``id`` sent by the client is ignored.
    """

    reg_date: Optional[str] = Field(None, alias="regDate", description="Registration date, YYYY-MM-DD")

    @field_validator("reg_date")
    @classmethod
    def validate_reg_date(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        try:
            datetime.strptime(v, DATE_FORMAT)
        except ValueError:
            raise ValueError("regDate must be a date in YYYY-MM-DD format")
        return v


class ReportUpdate(BaseModel):
    """Schema for updating a report.

    All fields are optional; only provided values will be updated.
    ``id`` and ``regDate`` cannot be changed and are ignored if sent.
    """

    title: Optional[str] = None
    owner: Optional[str] = None

    def changes(self) -> dict:
        """Return the fields explicitly set to a value in the request."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ReportRead(ReportBase):
    """Schema for a stored report."""

    id: int
    reg_date: str = Field(..., alias="regDate")


class ReportPage(BaseModel):
    """One page of the (optionally filtered) report list."""

    content: List[ReportRead]
    page: int
    total_pages: int = Field(..., alias="totalPages")

    model_config = {
        "populate_by_name": True,
    }


class CreateResult(BaseModel):
    status: str = "success"
    id: int


class UpdateResult(BaseModel):
    status: str = "updated"


class DeleteResult(BaseModel):
    status: str = "deleted"
    count: int
