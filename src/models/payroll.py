"""
Payroll entry model.
"""
from pydantic import Field

from .base import Record


class Payroll(Record):
    """A single pay period entry for one employee."""
    id: int = Field(..., ge=1)
    employee_id: int = Field(..., description="Reference to employee")
    pay_period_start: str = Field(..., description="First day of the pay period (YYYY-MM-DD)")
    pay_period_end: str = Field(..., description="Last day of the pay period (YYYY-MM-DD)")
    gross_pay: float = Field(..., gt=0)
    deductions: float = Field(0.0, ge=0)
    net_pay: float = Field(..., description="gross_pay - deductions, rounded to 2 places")
    created_at: str

    def __repr__(self):
        return f"<Payroll(id={self.id}, employee_id={self.employee_id}, net_pay={self.net_pay})>"
