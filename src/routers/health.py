"""
Service index and health check.
"""
from fastapi import APIRouter, Depends

from src import __version__
from src.config import Settings
from src.dependencies import get_settings
from src.models import utc_timestamp
from src.schemas import HealthResponse, ServiceInfo

router = APIRouter(tags=["Health"])


@router.get("/", response_model=ServiceInfo)
def home(settings: Settings = Depends(get_settings)) -> ServiceInfo:
    return ServiceInfo(
        name=settings.APP_NAME,
        version=__version__,
        endpoints={
            "health": "/api/health",
            "employees": "/api/employees",
            "payrolls": "/api/payrolls",
            "payslip": "/api/payslip/{payroll_id}",
        },
    )


@router.get("/api/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(status="OK", timestamp=utc_timestamp())
