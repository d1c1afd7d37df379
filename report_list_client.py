"""Report list API client.

A thin wrapper around the report list HTTP API, mirroring what the
browser list widget does: search and page through reports, open one,
create, edit, delete a selection and download the CSV export.  The
client uses the ``requests`` library internally.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  The client
never raises for HTTP or network errors.

Example::

    client = ReportListClient(base_url="http://localhost:8000")
    page, error = client.list_reports(page=0, size=10, search="보고서")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ReportListClient:
    """Client for the ``/api/{mode}`` report list endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        mode: str = "p01a04",
        api_prefix: str = "/api",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server URL, e.g. ``http://localhost:8000``.
            mode: List identifier used in the URL path.
            api_prefix: Path prefix the API is mounted under.
            api_key: Optional token sent as ``Authorization: Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.path = f"{api_prefix.rstrip('/')}/{mode}"
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _send(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc.response) if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract a readable message from an error response.

        FastAPI puts it under ``detail``; for request validation errors
        that is a list of error objects, which is joined into one line.
        Bodies that are not a JSON object fall back to the raw text.
        """
        try:
            err_json = response.json()
        except ValueError:
            return response.text
        if not isinstance(err_json, dict):
            return response.text
        detail = err_json.get("detail") or err_json.get("message")
        if isinstance(detail, list):
            return "; ".join(
                item.get("msg", str(item)) if isinstance(item, dict) else str(item)
                for item in detail
            )
        return str(detail) if detail else str(err_json)

    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform a request and decode the JSON body, if any."""
        response, error = self._send(method, path, params=params, json_body=json_body)
        if error:
            return None, error
        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError as exc:
            logger.error("Invalid JSON in response from %s: %s", path, exc)
            return None, {"status_code": response.status_code, "message": "Invalid JSON response"}

    # ------------------------------------------------------------------
    # Report operations
    # ------------------------------------------------------------------
    def list_reports(
        self, page: int = 0, size: int = 10, search: Optional[str] = None
    ) -> Tuple[Dict[str, Any], Optional[Error]]:
        """Retrieve one page of reports.

        Returns:
            A tuple ``(page, error)``.  ``page`` has the keys
            ``content``, ``page`` and ``totalPages``; on failure it is
            an empty page.
        """
        params: Dict[str, Any] = {"page": page, "size": size}
        if search:
            params["search"] = search
        data, error = self._request("GET", self.path, params=params)
        if error or not isinstance(data, dict):
            return {"content": [], "page": page, "totalPages": 0}, error
        return data, None

    def get_report(self, report_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single report by ID."""
        return self._request("GET", f"{self.path}/{report_id}")

    def create_report(
        self, title: str, owner: str, reg_date: Optional[str] = None
    ) -> Tuple[Optional[int], Optional[Error]]:
        """Create a report and return its new id."""
        payload: Dict[str, Any] = {"title": title, "owner": owner}
        if reg_date:
            payload["regDate"] = reg_date
        data, error = self._request("POST", self.path, json_body=payload)
        if error:
            return None, error
        if not isinstance(data, dict):
            return None, {"status_code": None, "message": "Unexpected response body"}
        return data.get("id"), None

    def update_report(
        self, report_id: int, *, title: Optional[str] = None, owner: Optional[str] = None
    ) -> Tuple[bool, Optional[Error]]:
        """Change the title and/or owner of a report.

        Only the arguments given are sent, so omitted fields keep their
        current value on the server.
        """
        payload: Dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        if owner is not None:
            payload["owner"] = owner
        data, error = self._request("PUT", f"{self.path}/{report_id}", json_body=payload)
        if error:
            return False, error
        return isinstance(data, dict) and data.get("status") == "updated", None

    def delete_reports(self, ids: List[int]) -> Tuple[int, Optional[Error]]:
        """Delete the given reports and return the count echoed by the server."""
        data, error = self._request("DELETE", self.path, json_body=list(ids))
        if error:
            return 0, error
        return data.get("count", 0) if isinstance(data, dict) else 0, None

    def download_csv(self, search: Optional[str] = None) -> Tuple[bytes, Optional[Error]]:
        """Download the CSV export as raw UTF‑8 bytes."""
        params = {"search": search} if search else None
        response, error = self._send("GET", f"{self.path}/excel", params=params)
        if error:
            return b"", error
        return response.content, None
