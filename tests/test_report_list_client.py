"""Tests for the report list API client."""

from unittest.mock import MagicMock

import pytest
import requests

from report_list_client import ReportListClient


def _response(status_code=200, json_data=None, content=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if content is None:
        content = b"" if json_data is None else b"{}"
    response.content = content
    response.text = content.decode("utf-8", errors="replace")
    response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return ReportListClient(base_url="http://localhost:8000/", session=session)


def _call_kwargs(session):
    return session.request.call_args.kwargs


def test_list_reports_sends_paging_and_search(api, session):
    page = {"content": [{"id": 1}], "page": 1, "totalPages": 4}
    session.request.return_value = _response(json_data=page)

    data, error = api.list_reports(page=1, size=5, search="보고서")

    assert error is None
    assert data == page
    kwargs = _call_kwargs(session)
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://localhost:8000/api/p01a04"
    assert kwargs["params"] == {"page": 1, "size": 5, "search": "보고서"}


def test_list_reports_failure_returns_empty_page(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    data, error = api.list_reports(page=2)

    assert data == {"content": [], "page": 2, "totalPages": 0}
    assert error == {"status_code": None, "message": "refused"}


def test_get_report_not_found(api, session):
    session.request.return_value = _response(404, {"detail": "Report 9 not found"})

    data, error = api.get_report(9)

    assert data is None
    assert error == {"status_code": 404, "message": "Report 9 not found"}
    assert _call_kwargs(session)["url"].endswith("/api/p01a04/9")


def test_create_report(api, session):
    session.request.return_value = _response(json_data={"status": "success", "id": 24})

    new_id, error = api.create_report("Monthly", "kim", reg_date="2025-01-01")

    assert (new_id, error) == (24, None)
    assert _call_kwargs(session)["json"] == {"title": "Monthly", "owner": "kim", "regDate": "2025-01-01"}


def test_update_report_sends_only_given_fields(api, session):
    session.request.return_value = _response(json_data={"status": "updated"})

    ok, error = api.update_report(3, owner="park")

    assert ok is True
    assert error is None
    kwargs = _call_kwargs(session)
    assert kwargs["method"] == "PUT"
    assert kwargs["json"] == {"owner": "park"}


def test_update_missing_report(api, session):
    session.request.return_value = _response(404, {"status": "not_found", "detail": "Report 3 not found"})

    ok, error = api.update_report(3, title="x")

    assert ok is False
    assert error["status_code"] == 404


def test_delete_reports(api, session):
    session.request.return_value = _response(json_data={"status": "deleted", "count": 2})

    count, error = api.delete_reports([1, 2])

    assert (count, error) == (2, None)
    kwargs = _call_kwargs(session)
    assert kwargs["method"] == "DELETE"
    assert kwargs["json"] == [1, 2]


def test_download_csv_returns_bytes(api, session):
    body = "id,title,owner,regDate\n1,보고서 1,홍길동,2025-10-06\n".encode("utf-8")
    session.request.return_value = _response(content=body)

    data, error = api.download_csv(search="보고서")

    assert error is None
    assert data == body
    kwargs = _call_kwargs(session)
    assert kwargs["url"].endswith("/api/p01a04/excel")
    assert kwargs["params"] == {"search": "보고서"}


def test_api_key_header(session):
    api = ReportListClient(base_url="http://x", api_key="secret", session=session)
    session.request.return_value = _response(json_data={"content": [], "page": 0, "totalPages": 0})

    api.list_reports()

    assert _call_kwargs(session)["headers"] == {"Authorization": "Bearer secret"}


def test_error_body_without_json(api, session):
    response = _response(500, content=b"boom")
    response.json.side_effect = ValueError("not json")
    session.request.return_value = response

    data, error = api.get_report(1)

    assert data is None
    assert error == {"status_code": 500, "message": "boom"}


def test_error_body_that_is_a_json_string(api, session):
    response = _response(502, json_data="Bad gateway", content=b'"Bad gateway"')
    session.request.return_value = response

    data, error = api.get_report(1)

    assert data is None
    assert error == {"status_code": 502, "message": '"Bad gateway"'}


def test_error_body_that_is_a_json_array(api, session):
    session.request.return_value = _response(500, json_data=["a", "b"], content=b'["a", "b"]')

    page, error = api.list_reports()

    assert page["content"] == []
    assert error["status_code"] == 500
    assert isinstance(error["message"], str)


def test_validation_error_detail_is_flattened(api, session):
    detail = [
        {
            "type": "greater_than_equal",
            "loc": ["query", "page"],
            "msg": "Input should be greater than or equal to 0",
            "input": "-1",
        },
        {
            "type": "int_parsing",
            "loc": ["query", "size"],
            "msg": "Input should be a valid integer",
            "input": "x",
        },
    ]
    session.request.return_value = _response(422, {"detail": detail})

    page, error = api.list_reports(page=-1)

    assert page["content"] == []
    assert error == {
        "status_code": 422,
        "message": "Input should be greater than or equal to 0; Input should be a valid integer",
    }


def test_create_with_unexpected_body(api, session):
    session.request.return_value = _response(json_data=["not", "an", "object"])

    new_id, error = api.create_report("t", "o")

    assert new_id is None
    assert error["message"] == "Unexpected response body"
