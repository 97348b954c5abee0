"""
Payslip view: a payroll entry joined with its employee's public fields.
"""
from pydantic import BaseModel

from .employee import Employee
from .payroll import Payroll


class PayslipEmployee(BaseModel):
    """Employee fields shown on a payslip. Salary is not disclosed."""
    id: int
    employee_code: str
    first_name: str
    last_name: str
    designation: str
    department: str
    email: str
    bank_account: str

    @classmethod
    def from_employee(cls, employee: Employee) -> 'PayslipEmployee':
        return cls(**employee.model_dump(include=set(cls.model_fields)))


class Payslip(BaseModel):
    """Read-only join of one payroll entry with its employee."""
    payroll: Payroll
    employee: PayslipEmployee
