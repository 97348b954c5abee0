"""
Tests for the flat-file record store.
"""
import json

import pytest

from src.database import RecordStore
from src.exceptions import PersistenceError
from src.models import Document, Employee
from tests.conftest import employee_fields


def make_employee(employee_id=1, **overrides):
    return Employee(id=employee_id, created_at="2024-01-01T00:00:00.000Z", **employee_fields(**overrides))


def test_ensure_initialized_writes_empty_document(store, data_file):
    assert not data_file.exists()

    assert store.ensure_initialized() is True

    with open(data_file) as fh:
        raw = json.load(fh)
    assert raw == {"employees": [], "payrolls": [], "nextEmployeeId": 1, "nextPayrollId": 1}


def test_ensure_initialized_keeps_existing_file(store, data_file):
    store.ensure_initialized()
    document = store.load()
    document.employees.append(make_employee())
    document.next_employee_id = 2
    store.save(document)

    assert store.ensure_initialized() is False
    assert len(store.load().employees) == 1


def test_ensure_initialized_reports_write_failure(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file in the way")
    store = RecordStore(blocker / "data.json")

    with pytest.raises(PersistenceError, match="Failed to write data file"):
        store.ensure_initialized()


def test_load_missing_file_returns_empty_document(store):
    document = store.load()
    assert document.employees == []
    assert document.payrolls == []
    assert document.next_employee_id == 1
    assert document.next_payroll_id == 1


def test_load_corrupt_json_raises(store, data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("{not json")

    with pytest.raises(PersistenceError, match="corrupt"):
        store.load()


def test_load_invalid_layout_raises(store, data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(json.dumps({"employees": "nobody", "payrolls": []}))

    with pytest.raises(PersistenceError, match="corrupt"):
        store.load()


def test_save_round_trips_with_camel_case_counters(store, data_file):
    document = Document(employees=[make_employee()], next_employee_id=2)
    store.save(document)

    raw = json.loads(data_file.read_text())
    assert raw["nextEmployeeId"] == 2
    assert raw["nextPayrollId"] == 1
    assert raw["employees"][0]["employee_code"] == "E1"
    assert store.load() == document


def test_save_is_pretty_printed(store, data_file):
    store.save(Document())
    assert data_file.read_text().startswith('{\n  "employees": []')


def test_save_leaves_no_temp_files(store, data_file):
    store.save(Document())
    store.save(Document(next_payroll_id=5))
    assert [p.name for p in data_file.parent.iterdir()] == ["data.json"]


def test_failed_save_keeps_previous_file(store, data_file, monkeypatch):
    store.save(Document(employees=[make_employee()], next_employee_id=2))
    before = data_file.read_text()

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("src.database.os.replace", broken_replace)
    with pytest.raises(PersistenceError, match="Failed to write data file"):
        store.save(Document())

    assert data_file.read_text() == before
    assert [p.name for p in data_file.parent.iterdir()] == ["data.json"]


def test_transaction_saves_on_success(store):
    store.ensure_initialized()

    with store.transaction() as document:
        document.employees.append(make_employee())
        document.next_employee_id += 1

    reloaded = store.load()
    assert [emp.employee_code for emp in reloaded.employees] == ["E1"]
    assert reloaded.next_employee_id == 2


def test_transaction_discards_changes_on_error(store):
    store.ensure_initialized()

    with pytest.raises(RuntimeError):
        with store.transaction() as document:
            document.employees.append(make_employee())
            document.next_employee_id += 1
            raise RuntimeError("abort")

    reloaded = store.load()
    assert reloaded.employees == []
    assert reloaded.next_employee_id == 1
