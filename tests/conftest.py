"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from report_list_api.app.main import create_app
from report_list_api.app.services.report_service import ReportService


@pytest.fixture
def service():
    """A store seeded with reports 1-5."""
    store = ReportService(default_reg_date="2025-10-06")
    store.seed(5)
    return store


@pytest.fixture
def empty_service():
    """A store with no reports"""
    return ReportService(default_reg_date="2025-10-06")


@pytest.fixture
def app():
    """An application with its own store of five seeded reports"""
    return create_app(seed_count=5)


@pytest.fixture
def client(app):
    """Test client bound to the fresh application"""
    return TestClient(app)
