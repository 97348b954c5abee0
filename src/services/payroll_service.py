"""
Payroll service: the operations behind every API endpoint.

Each mutating operation validates its input first, then runs exactly one
change inside ``RecordStore.transaction()``. If anything inside the
transaction raises, the document is not saved.
"""
import logging
from typing import Any, List, Mapping

from src.calculator import compute_net_pay
from src.database import RecordStore
from src.exceptions import NotFoundError
from src.models import Employee, Payroll, Payslip, PayslipEmployee, utc_timestamp
from src.validators import (
    ensure_unique_code,
    find_employee,
    validate_employee_create,
    validate_payroll_create,
)

logger = logging.getLogger(__name__)


class PayrollService:
    """Service for employee and payroll records."""

    def __init__(self, store: RecordStore):
        """Initialize the service.

        Args:
            store: Record store holding the data file
        """
        self.store = store

    def list_employees(self) -> List[Employee]:
        """Return all employees in insertion order."""
        return self.store.load().employees

    def create_employee(self, fields: Mapping[str, Any]) -> Employee:
        """Validate and add a new employee.

        Raises:
            ValidationError: A required field is missing or salary is not positive
            ConflictError: The employee code is already taken
            PersistenceError: The data file could not be read or written
        """
        data = validate_employee_create(fields)

        with self.store.transaction() as document:
            ensure_unique_code(document, data.employee_code)
            employee = Employee(
                id=document.next_employee_id,
                employee_code=data.employee_code,
                first_name=data.first_name,
                last_name=data.last_name,
                designation=data.designation,
                department=data.department,
                email=data.email,
                bank_account=data.bank_account,
                salary=float(data.salary),
                created_at=utc_timestamp(),
            )
            document.employees.append(employee)
            document.next_employee_id += 1

        logger.info("Created employee %s (id=%d)", employee.employee_code, employee.id)
        return employee

    def delete_employee(self, employee_id: int) -> int:
        """Delete an employee and every payroll entry that references it.

        Returns:
            int: Number of payroll entries removed along with the employee

        Raises:
            NotFoundError: No employee has this id
        """
        with self.store.transaction() as document:
            employee = find_employee(document, employee_id)
            document.employees.remove(employee)
            remaining = [p for p in document.payrolls if p.employee_id != employee_id]
            removed = len(document.payrolls) - len(remaining)
            document.payrolls = remaining

        logger.info(
            "Deleted employee %s (id=%d) and %d payroll entries",
            employee.employee_code, employee_id, removed
        )
        return removed

    def list_payrolls(self) -> List[Payroll]:
        """Return all payroll entries in insertion order."""
        return self.store.load().payrolls

    def create_payroll(self, fields: Mapping[str, Any]) -> Payroll:
        """Validate and add a new payroll entry with its computed net pay.

        Raises:
            ValidationError: A required field is missing or an amount is out of range
            NotFoundError: The referenced employee does not exist
            PersistenceError: The data file could not be read or written
        """
        data = validate_payroll_create(fields)
        net_pay = compute_net_pay(data.gross_pay, data.deductions)

        with self.store.transaction() as document:
            find_employee(document, data.employee_id)
            payroll = Payroll(
                id=document.next_payroll_id,
                employee_id=data.employee_id,
                pay_period_start=data.pay_period_start,
                pay_period_end=data.pay_period_end,
                gross_pay=float(data.gross_pay),
                deductions=float(data.deductions),
                net_pay=float(net_pay),
                created_at=utc_timestamp(),
            )
            document.payrolls.append(payroll)
            document.next_payroll_id += 1

        logger.info(
            "Created payroll entry %d for employee %d (net pay %s)",
            payroll.id, payroll.employee_id, net_pay
        )
        return payroll

    def get_payslip(self, payroll_id: int) -> Payslip:
        """Join a payroll entry with its employee's public fields.

        Raises:
            NotFoundError: The payroll entry or its employee does not exist
        """
        document = self.store.load()

        payroll = document.get_payroll(payroll_id)
        if payroll is None:
            raise NotFoundError("Payroll entry not found")

        employee = document.get_employee(payroll.employee_id)
        if employee is None:
            raise NotFoundError("Employee not found for this payroll entry")

        return Payslip(payroll=payroll, employee=PayslipEmployee.from_employee(employee))
