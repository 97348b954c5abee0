"""
The persisted aggregate: every employee, every payroll entry and the id counters.
"""
from typing import List, Optional

from pydantic import Field

from .base import Record
from .employee import Employee
from .payroll import Payroll


class Document(Record):
    """
    Root of the data file.

    Counters are serialized under their camelCase names
    (``nextEmployeeId``, ``nextPayrollId``) and are never reused.
    """
    employees: List[Employee] = Field(default_factory=list)
    payrolls: List[Payroll] = Field(default_factory=list)
    next_employee_id: int = Field(1, alias='nextEmployeeId', ge=1)
    next_payroll_id: int = Field(1, alias='nextPayrollId', ge=1)

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return next((emp for emp in self.employees if emp.id == employee_id), None)

    def get_payroll(self, payroll_id: int) -> Optional[Payroll]:
        return next((p for p in self.payrolls if p.id == payroll_id), None)

    def has_employee_code(self, employee_code: str) -> bool:
        return any(emp.employee_code == employee_code for emp in self.employees)

    def to_json_dict(self) -> dict:
        """Serialize with the on-disk key names."""
        return self.model_dump(by_alias=True)
