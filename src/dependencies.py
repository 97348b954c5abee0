"""
FastAPI dependencies shared by the routers.
"""
import json
from typing import Any

from fastapi import Depends, Request

from src.config import Settings
from src.database import RecordStore
from src.exceptions import ValidationError
from src.services.payroll_service import PayrollService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_payroll_service(store: RecordStore = Depends(get_store)) -> PayrollService:
    return PayrollService(store)


async def get_json_body(request: Request) -> Any:
    """
    Decode the raw JSON request body.

    Routes that take this as a parameter dependency only read the body after
    their route-level dependencies (the admin gate) have passed. An empty
    body decodes to None and is rejected by the validators.

    Raises:
        ValidationError: If the body is not valid JSON
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError:
        raise ValidationError("Request body must be valid JSON") from None
