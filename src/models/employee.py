"""
Employee model for the application.
"""
from pydantic import Field

from .base import Record


class Employee(Record):
    """An employee on the payroll."""
    id: int = Field(..., ge=1)
    employee_code: str = Field(..., description="Unique employee code")
    first_name: str
    last_name: str
    designation: str
    department: str
    email: str
    bank_account: str
    salary: float = Field(..., gt=0)
    created_at: str

    def __repr__(self):
        return f"<Employee(id={self.id}, employee_code={self.employee_code})>"
