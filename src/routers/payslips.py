"""
Payslip endpoint.
"""
from fastapi import APIRouter, Depends

from src.dependencies import get_payroll_service
from src.models import Payslip
from src.schemas import ErrorResponse
from src.services.payroll_service import PayrollService
from src.validators import parse_path_id

router = APIRouter(prefix="/api/payslip", tags=["Payslips"])


@router.get(
    "/{payroll_id}",
    response_model=Payslip,
    responses={404: {"model": ErrorResponse, "description": "Payroll entry or employee not found"}},
)
def get_payslip(
    payroll_id: str,
    service: PayrollService = Depends(get_payroll_service),
) -> Payslip:
    """Return a payroll entry joined with its employee."""
    return service.get_payslip(parse_path_id(payroll_id, "Payroll entry not found"))
