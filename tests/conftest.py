"""
Pytest configuration and fixtures for testing.
"""
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = str(Path(__file__).resolve().parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from src.config import Settings
from src.database import RecordStore
from src.services.payroll_service import PayrollService

TEST_ADMIN_KEY = "test-admin-key"

EMPLOYEE_FIELDS = {
    "employee_code": "E1",
    "first_name": "Ann",
    "last_name": "Lee",
    "designation": "Eng",
    "department": "R&D",
    "email": "a@x.com",
    "bank_account": "123",
    "salary": 5000,
}

PAYROLL_FIELDS = {
    "employee_id": 1,
    "pay_period_start": "2024-01-01",
    "pay_period_end": "2024-01-31",
    "gross_pay": 5000,
    "deductions": 500,
}


def employee_fields(**overrides):
    """Valid employee input with selected fields replaced."""
    fields = dict(EMPLOYEE_FIELDS)
    fields.update(overrides)
    return fields


def payroll_fields(**overrides):
    """Valid payroll input with selected fields replaced."""
    fields = dict(PAYROLL_FIELDS)
    fields.update(overrides)
    return fields


@pytest.fixture
def data_file(tmp_path):
    """Path of the data file used by a test."""
    return tmp_path / "data" / "data.json"


@pytest.fixture
def store(data_file):
    """Record store on a temporary data file."""
    return RecordStore(data_file)


@pytest.fixture
def service(store):
    return PayrollService(store)


@pytest.fixture
def test_settings(data_file):
    """Settings with a known admin key and the temporary data file."""
    return Settings(ADMIN_KEY=TEST_ADMIN_KEY, DATA_FILE=data_file)


@pytest.fixture
def app(test_settings, store):
    from src.main import create_app

    return create_app(settings=test_settings, store=store)


@pytest.fixture
def client(app):
    """Create a test client; entering it runs the startup sequence."""
    from fastapi.testclient import TestClient

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_ADMIN_KEY}"}
