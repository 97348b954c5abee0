"""
Tests for boundary validation of employee and payroll input.
"""
from decimal import Decimal

import pytest

from src.exceptions import ConflictError, NotFoundError, ValidationError
from src.models import Document, Employee
from src.validators import (
    EMPLOYEE_REQUIRED_FIELDS,
    PAYROLL_REQUIRED_FIELDS,
    ensure_unique_code,
    find_employee,
    parse_amount,
    parse_id,
    parse_path_id,
    validate_employee_create,
    validate_payroll_create,
)
from tests.conftest import employee_fields, payroll_fields


def make_document():
    employee = Employee(id=1, created_at="2024-01-01T00:00:00.000Z", **employee_fields())
    return Document(employees=[employee], nextEmployeeId=2)


@pytest.mark.parametrize("value,expected", [
    (5000, Decimal("5000")),
    (5000.5, Decimal("5000.5")),
    ("5000", Decimal("5000")),
    (" 12.30 ", Decimal("12.30")),
    (Decimal("7.25"), Decimal("7.25")),
])
def test_parse_amount_accepts_numbers_and_numeric_strings(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize("value", ["abc", "12,000", "", None, True, float("nan"), float("inf"), "Infinity", [100]])
def test_parse_amount_rejects_malformed_values(value):
    assert parse_amount(value) is None


@pytest.mark.parametrize("value", ["1e400", "-1e400", 1e308 * 10, Decimal("1e400"), "1e-400", Decimal("1e-400")])
def test_parse_amount_rejects_values_outside_float_range(value):
    assert parse_amount(value) is None


def test_parse_amount_keeps_large_finite_values():
    assert parse_amount("1e300") == Decimal("1e300")
    assert parse_amount("0") == Decimal("0")


@pytest.mark.parametrize("value,expected", [(1, 1), ("2", 2), (" 3 ", 3), (4.0, 4)])
def test_parse_id(value, expected):
    assert parse_id(value) == expected


@pytest.mark.parametrize("value", ["one", 1.5, True, None, {}])
def test_parse_id_rejects_non_integers(value):
    assert parse_id(value) is None


def test_parse_path_id():
    assert parse_path_id("7", "Employee not found") == 7
    with pytest.raises(NotFoundError, match="Payroll entry not found"):
        parse_path_id("abc", "Payroll entry not found")


def test_valid_employee_is_typed():
    data = validate_employee_create(employee_fields(salary="5000.50", first_name="  Ann "))
    assert data.salary == Decimal("5000.50")
    assert data.first_name == "Ann"
    assert data.employee_code == "E1"


@pytest.mark.parametrize("field", EMPLOYEE_REQUIRED_FIELDS)
def test_employee_missing_field(field):
    fields = employee_fields()
    del fields[field]
    with pytest.raises(ValidationError) as exc_info:
        validate_employee_create(fields)
    assert "All fields are required" in exc_info.value.message
    assert field in exc_info.value.message


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_employee_blank_field_counts_as_missing(blank):
    with pytest.raises(ValidationError, match="All fields are required"):
        validate_employee_create(employee_fields(email=blank))


@pytest.mark.parametrize("salary", [0, -1, "-100", "abc", True])
def test_employee_salary_must_be_positive(salary):
    with pytest.raises(ValidationError, match="Salary must be a positive number"):
        validate_employee_create(employee_fields(salary=salary))


def test_employee_body_must_be_an_object():
    with pytest.raises(ValidationError, match="JSON object"):
        validate_employee_create(["E1"])


def test_employee_fields_are_stringified():
    data = validate_employee_create(employee_fields(employee_code=42, bank_account=123456))
    assert data.employee_code == "42"
    assert data.bank_account == "123456"


def test_valid_payroll_is_typed():
    data = validate_payroll_create(payroll_fields(employee_id="1", gross_pay="5000", deductions="500"))
    assert data.employee_id == 1
    assert data.gross_pay == Decimal("5000")
    assert data.deductions == Decimal("500")
    assert data.pay_period_start == "2024-01-01"


@pytest.mark.parametrize("field", PAYROLL_REQUIRED_FIELDS)
def test_payroll_missing_field(field):
    fields = payroll_fields()
    del fields[field]
    with pytest.raises(ValidationError, match="are required"):
        validate_payroll_create(fields)


@pytest.mark.parametrize("deductions", [None, ""])
def test_payroll_deductions_default_to_zero(deductions):
    fields = payroll_fields(deductions=deductions)
    assert validate_payroll_create(fields).deductions == Decimal("0")

    del fields["deductions"]
    assert validate_payroll_create(fields).deductions == Decimal("0")


@pytest.mark.parametrize("gross_pay", [0, -5, "zero", "-0.01"])
def test_payroll_gross_pay_must_be_positive(gross_pay):
    with pytest.raises(ValidationError, match="Gross pay must be a positive number"):
        validate_payroll_create(payroll_fields(gross_pay=gross_pay))


@pytest.mark.parametrize("deductions", [-1, "-0.5", "lots"])
def test_payroll_deductions_must_be_non_negative(deductions):
    with pytest.raises(ValidationError, match="Deductions must be a non-negative number"):
        validate_payroll_create(payroll_fields(deductions=deductions))


def test_payroll_zero_deductions_allowed():
    assert validate_payroll_create(payroll_fields(deductions=0)).deductions == Decimal("0")


def test_payroll_employee_id_must_be_integer():
    with pytest.raises(ValidationError, match="employee_id must be an integer"):
        validate_payroll_create(payroll_fields(employee_id="abc"))


@pytest.mark.parametrize("value", ["2024-13-01", "01/01/2024", "20240101", "soon"])
def test_payroll_period_must_be_iso_date(value):
    with pytest.raises(ValidationError, match="pay_period_start must be a date"):
        validate_payroll_create(payroll_fields(pay_period_start=value))


def test_payroll_period_end_not_before_start():
    with pytest.raises(ValidationError, match="must not be before"):
        validate_payroll_create(payroll_fields(pay_period_start="2024-02-01", pay_period_end="2024-01-31"))


def test_single_day_period_allowed():
    data = validate_payroll_create(payroll_fields(pay_period_start="2024-01-15", pay_period_end="2024-01-15"))
    assert data.pay_period_end == "2024-01-15"


def test_duplicate_code_conflicts():
    document = make_document()
    with pytest.raises(ConflictError, match="Employee code already exists"):
        ensure_unique_code(document, "E1")
    ensure_unique_code(document, "E2")


def test_find_employee():
    document = make_document()
    assert find_employee(document, 1).employee_code == "E1"
    with pytest.raises(NotFoundError, match="Employee not found"):
        find_employee(document, 99)


@pytest.mark.parametrize("field,value,message", [
    ("salary", "1e400", "Salary must be a positive number"),
    ("salary", "1e-400", "Salary must be a positive number"),
])
def test_employee_salary_must_fit_a_float(field, value, message):
    with pytest.raises(ValidationError, match=message):
        validate_employee_create(employee_fields(**{field: value}))


@pytest.mark.parametrize("field,value,message", [
    ("gross_pay", "1e400", "Gross pay must be a positive number"),
    ("gross_pay", "1e-400", "Gross pay must be a positive number"),
    ("deductions", "1e400", "Deductions must be a non-negative number"),
    ("deductions", "1e-400", "Deductions must be a non-negative number"),
])
def test_payroll_amounts_must_fit_a_float(field, value, message):
    with pytest.raises(ValidationError, match=message):
        validate_payroll_create(payroll_fields(**{field: value}))


@pytest.mark.parametrize("start,end", [
    ("2024-01-10", "2024-1-5"),
    ("2024-1-1", "2024-01-31"),
])
def test_payroll_period_dates_must_be_zero_padded(start, end):
    with pytest.raises(ValidationError, match="must be a date in YYYY-MM-DD format"):
        validate_payroll_create(payroll_fields(pay_period_start=start, pay_period_end=end))


def test_payroll_period_order_is_by_calendar_date():
    data = validate_payroll_create(payroll_fields(pay_period_start="2023-12-31", pay_period_end="2024-01-01"))
    assert (data.pay_period_start, data.pay_period_end) == ("2023-12-31", "2024-01-01")

    with pytest.raises(ValidationError, match="must not be before"):
        validate_payroll_create(payroll_fields(pay_period_start="2024-01-01", pay_period_end="2023-12-31"))
