"""
Employee endpoints.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, status

from src.auth.dependencies import require_admin
from src.dependencies import get_json_body, get_payroll_service
from src.models import Employee
from src.schemas import DeleteEmployeeResponse, ErrorResponse
from src.services.payroll_service import PayrollService
from src.validators import parse_path_id

router = APIRouter(
    prefix="/api/employees",
    tags=["Employees"],
    responses={
        500: {"model": ErrorResponse, "description": "Data file could not be read or written"},
    },
)


@router.get("", response_model=List[Employee])
def list_employees(service: PayrollService = Depends(get_payroll_service)) -> List[Employee]:
    """List all employees in the order they were added."""
    return service.list_employees()


@router.post(
    "",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid field"},
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        409: {"model": ErrorResponse, "description": "Employee code already exists"},
    },
)
def create_employee(
    fields: Any = Depends(get_json_body),
    service: PayrollService = Depends(get_payroll_service),
) -> Employee:
    """Add a new employee."""
    return service.create_employee(fields)


@router.delete(
    "/{employee_id}",
    response_model=DeleteEmployeeResponse,
    dependencies=[Depends(require_admin)],
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Employee not found"},
    },
)
def delete_employee(
    employee_id: str,
    service: PayrollService = Depends(get_payroll_service),
) -> DeleteEmployeeResponse:
    """Delete an employee together with all of their payroll entries."""
    removed = service.delete_employee(parse_path_id(employee_id, "Employee not found"))
    return DeleteEmployeeResponse(
        message="Employee and associated payroll entries deleted successfully",
        deleted_payrolls=removed,
    )
