"""
Payroll entry endpoints.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, status

from src.auth.dependencies import require_admin
from src.dependencies import get_json_body, get_payroll_service
from src.models import Payroll
from src.schemas import ErrorResponse
from src.services.payroll_service import PayrollService

router = APIRouter(
    prefix="/api/payrolls",
    tags=["Payrolls"],
    responses={
        500: {"model": ErrorResponse, "description": "Data file could not be read or written"},
    },
)


@router.get("", response_model=List[Payroll])
def list_payrolls(service: PayrollService = Depends(get_payroll_service)) -> List[Payroll]:
    """List all payroll entries in the order they were created."""
    return service.list_payrolls()


@router.post(
    "",
    response_model=Payroll,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid field"},
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Employee not found"},
    },
)
def create_payroll(
    fields: Any = Depends(get_json_body),
    service: PayrollService = Depends(get_payroll_service),
) -> Payroll:
    """
    Create a payroll entry.

    Net pay is computed server side as gross pay minus deductions.
    """
    return service.create_payroll(fields)
