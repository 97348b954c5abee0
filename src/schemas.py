"""
Pydantic schemas for validated input and API responses.
"""
from decimal import Decimal
from typing import Dict

from pydantic import BaseModel, Field


class EmployeeCreate(BaseModel):
    """Employee fields after boundary validation."""
    employee_code: str
    first_name: str
    last_name: str
    designation: str
    department: str
    email: str
    bank_account: str
    salary: Decimal = Field(..., gt=0)


class PayrollCreate(BaseModel):
    """Payroll fields after boundary validation."""
    employee_id: int
    pay_period_start: str
    pay_period_end: str
    gross_pay: Decimal = Field(..., gt=0)
    deductions: Decimal = Field(Decimal("0"), ge=0)


class ErrorResponse(BaseModel):
    """Schema for error responses."""
    error: str


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: str


class DeleteEmployeeResponse(BaseModel):
    message: str
    deleted_payrolls: int = Field(0, description="Number of payroll entries removed with the employee")


class ServiceInfo(BaseModel):
    name: str
    version: str
    endpoints: Dict[str, str]
