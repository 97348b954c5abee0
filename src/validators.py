"""
Boundary validation for employee and payroll input.

These functions are pure: they inspect raw request fields (or a loaded
document) and either return typed values or raise a domain error. Raw,
untyped input never reaches storage.
"""
import math
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional

from src.exceptions import ConflictError, NotFoundError, ValidationError
from src.models import Document, Employee
from src.schemas import EmployeeCreate, PayrollCreate

EMPLOYEE_REQUIRED_FIELDS = (
    "employee_code",
    "first_name",
    "last_name",
    "designation",
    "department",
    "email",
    "bank_account",
    "salary",
)

PAYROLL_REQUIRED_FIELDS = (
    "employee_id",
    "pay_period_start",
    "pay_period_end",
    "gross_pay",
)

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _missing_fields(fields: Mapping[str, Any], required) -> List[str]:
    return [name for name in required if _is_missing(fields.get(name))]


def _require_mapping(fields: Any) -> Mapping[str, Any]:
    if not isinstance(fields, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return fields


def parse_amount(value: Any) -> Optional[Decimal]:
    """
    Parse a numeric or numeric-string amount.

    Returns None for booleans, malformed strings and anything that is not
    a finite float once stored, so callers can treat them as failing their
    range check. A nonzero amount that underflows to 0.0 is rejected too.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not amount.is_finite():
        return None
    # amounts are stored as JSON numbers, i.e. doubles
    as_float = float(amount)
    if not math.isfinite(as_float) or (amount != 0 and as_float == 0.0):
        return None
    return amount


def parse_id(value: Any) -> Optional[int]:
    """Parse an integer id given as int, integral float or digit string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_path_id(value: str, not_found_message: str) -> int:
    """
    Parse an id taken from a URL path.

    A path that cannot name a record is reported as not found rather than
    as a bad request.
    """
    record_id = parse_id(value)
    if record_id is None:
        raise NotFoundError(not_found_message)
    return record_id


def parse_date(value: Any, field: str) -> date:
    """Parse a zero-padded YYYY-MM-DD date."""
    text = str(value).strip()
    try:
        if not DATE_PATTERN.fullmatch(text):
            raise ValueError(text)
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"{field} must be a date in YYYY-MM-DD format") from None


def validate_employee_create(fields: Any) -> EmployeeCreate:
    """Validate the fields of a new employee."""
    fields = _require_mapping(fields)

    missing = _missing_fields(fields, EMPLOYEE_REQUIRED_FIELDS)
    if missing:
        raise ValidationError(f"All fields are required (missing: {', '.join(missing)})")

    salary = parse_amount(fields["salary"])
    if salary is None or salary <= 0:
        raise ValidationError("Salary must be a positive number")

    text = {
        name: str(fields[name]).strip()
        for name in EMPLOYEE_REQUIRED_FIELDS if name != "salary"
    }
    return EmployeeCreate(salary=salary, **text)


def validate_payroll_create(fields: Any) -> PayrollCreate:
    """Validate the fields of a new payroll entry."""
    fields = _require_mapping(fields)

    if _missing_fields(fields, PAYROLL_REQUIRED_FIELDS):
        raise ValidationError(
            "employee_id, pay_period_start, pay_period_end, and gross_pay are required"
        )

    employee_id = parse_id(fields["employee_id"])
    if employee_id is None:
        raise ValidationError("employee_id must be an integer")

    start = parse_date(fields["pay_period_start"], "pay_period_start")
    end = parse_date(fields["pay_period_end"], "pay_period_end")
    if end < start:
        raise ValidationError("pay_period_end must not be before pay_period_start")

    gross_pay = parse_amount(fields["gross_pay"])
    if gross_pay is None or gross_pay <= 0:
        raise ValidationError("Gross pay must be a positive number")

    raw_deductions = fields.get("deductions")
    if _is_missing(raw_deductions):
        deductions = Decimal("0")
    else:
        deductions = parse_amount(raw_deductions)
        if deductions is None or deductions < 0:
            raise ValidationError("Deductions must be a non-negative number")

    return PayrollCreate(
        employee_id=employee_id,
        pay_period_start=start.isoformat(),
        pay_period_end=end.isoformat(),
        gross_pay=gross_pay,
        deductions=deductions,
    )


def ensure_unique_code(document: Document, employee_code: str) -> None:
    """Raise ConflictError if the employee code is already taken."""
    if document.has_employee_code(employee_code):
        raise ConflictError("Employee code already exists")


def find_employee(document: Document, employee_id: int) -> Employee:
    """Return the referenced employee or raise NotFoundError."""
    employee = document.get_employee(employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee
