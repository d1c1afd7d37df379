"""
Service layer for the report list.

``ReportService`` owns the authoritative in‑memory collection of
reports and provides search, pagination, create, update, bulk delete
and CSV export.  One instance is created per application; every
operation runs under a single lock because records are mutated in
place and new ids are derived from the current contents of the store.

Records are kept in insertion order, which is also the order used for
listing and export.  Callers always receive copies, never the stored
objects themselves.
"""

from __future__ import annotations

import csv
import io
import logging
import math
import threading
from typing import Iterable, List, Optional

from report_list_api.app.core.exceptions import NotFoundError, ValidationError
from report_list_api.app.schemas.report import (
    ReportCreate,
    ReportPage,
    ReportRead,
    ReportUpdate,
)

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("id", "title", "owner", "regDate")


class ReportService:
    """In‑memory report store guarded by a single lock."""

    def __init__(self, default_reg_date: str = "2025-10-06") -> None:
        self.default_reg_date = default_reg_date
        self._lock = threading.Lock()
        self._reports: List[ReportRead] = []
        # Highest id ever assigned, so ids of deleted reports are not reused.
        self._last_id = 0

    def seed(self, count: int) -> None:
        """Fill an empty store with ``count`` synthetic reports."""
        with self._lock:
            if self._reports:
                logger.warning("Store already holds %s reports; skipping seed", len(self._reports))
                return
            for _ in range(count):
                report_id = self._next_id()
                self._reports.append(
                    ReportRead(
                        id=report_id,
                        title=f"보고서 {report_id}",
                        owner="홍길동",
                        reg_date=self.default_reg_date,
                    )
                )
        logger.info("Seeded report store with %s reports", count)

    def count(self) -> int:
        with self._lock:
            return len(self._reports)

    def list(self, page: int = 0, size: int = 10, search: Optional[str] = None) -> ReportPage:
        """Return one page of reports, optionally filtered by ``search``.

        A page past the end of the data is empty rather than an error.
        ``totalPages`` is ``ceil(matches / size)``, so it is 0 when
        nothing matches.
        """
        if page < 0:
            raise ValidationError("page must be >= 0")
        if size <= 0:
            raise ValidationError("size must be > 0")
        with self._lock:
            filtered = self._filter(search)
            start = page * size
            end = min(start + size, len(filtered))
            content = [report.model_copy() for report in filtered[min(start, end):end]]
            total_pages = math.ceil(len(filtered) / size)
        logger.debug(
            "Listed page %s (size %s, search %r): %s of %s matches",
            page, size, search, len(content), len(filtered),
        )
        return ReportPage(content=content, page=page, total_pages=total_pages)

    def get_by_id(self, report_id: int) -> ReportRead:
        """Return the report with ``report_id`` or raise ``NotFoundError``."""
        with self._lock:
            report = self._find(report_id)
            if report is None:
                raise NotFoundError(report_id)
            return report.model_copy()

    def create(self, data: ReportCreate) -> int:
        """Append a new report and return the id assigned to it."""
        with self._lock:
            report_id = self._next_id()
            self._reports.append(
                ReportRead(
                    id=report_id,
                    title=data.title,
                    owner=data.owner,
                    reg_date=data.reg_date or self.default_reg_date,
                )
            )
        logger.info("Created report %s", report_id)
        return report_id

    def update(self, report_id: int, data: ReportUpdate) -> Optional[ReportRead]:
        """Apply the fields present in ``data`` to an existing report.

        Returns the updated report, or ``None`` when no report has the
        given id; the store is left untouched in that case.
        """
        changes = data.changes()
        with self._lock:
            report = self._find(report_id)
            if report is None:
                logger.info("Update skipped, report %s not found", report_id)
                return None
            for name, value in changes.items():
                setattr(report, name, value)
            updated = report.model_copy()
        logger.info("Updated report %s (%s)", report_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    def delete_many(self, ids: Iterable[int]) -> int:
        """Remove every report whose id is in ``ids``.

        Unknown ids are ignored.  The return value is the number of ids
        requested, not the number of reports actually removed.
        """
        requested = list(ids)
        wanted = set(requested)
        with self._lock:
            before = len(self._reports)
            self._reports = [report for report in self._reports if report.id not in wanted]
            removed = before - len(self._reports)
        logger.info("Deleted %s of %s requested reports", removed, len(requested))
        return len(requested)

    def export_csv(self, search: Optional[str] = None) -> bytes:
        """Serialise the (optionally filtered) store as UTF‑8 CSV."""
        with self._lock:
            rows = [
                (report.id, report.title, report.owner, report.reg_date)
                for report in self._filter(search)
            ]
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_COLUMNS)
        writer.writerows(rows)
        logger.info("Exported %s reports to CSV (search %r)", len(rows), search)
        return buffer.getvalue().encode("utf-8")

    # The helpers below expect the caller to hold ``_lock``.

    def _filter(self, search: Optional[str]) -> List[ReportRead]:
        if not search:
            return list(self._reports)
        return [
            report for report in self._reports
            if search in report.title or search in report.owner
        ]

    def _find(self, report_id: int) -> Optional[ReportRead]:
        for report in self._reports:
            if report.id == report_id:
                return report
        return None

    def _next_id(self) -> int:
        current_max = max((report.id for report in self._reports), default=0)
        self._last_id = max(self._last_id, current_max) + 1
        return self._last_id
