"""
Bearer token gate for mutating routes.

A single shared admin key is configured; requests must send it as
``Authorization: Bearer <key>``.
"""
import hmac
import logging
from typing import Optional

from fastapi import Depends, Header, Request

from src.config import Settings
from src.dependencies import get_settings
from src.exceptions import AuthError

logger = logging.getLogger(__name__)


def _extract_bearer(auth_header: Optional[str]) -> Optional[str]:
    """
    Extract bearer token from Authorization header.
    Returns None if header missing or malformed.
    """
    if not auth_header:
        return None

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]


def require_admin(
    request: Request,
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject the request with AuthError unless it carries the admin key."""
    token = _extract_bearer(authorization)
    if not token or not hmac.compare_digest(token.encode("utf-8"), settings.ADMIN_KEY.encode("utf-8")):
        client = request.client.host if request.client else "unknown"
        logger.warning("Rejected %s %s from %s: invalid or missing API key",
                       request.method, request.url.path, client)
        raise AuthError()
