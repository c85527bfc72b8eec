"""
Shared-secret API key authentication
"""
import secrets
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from app.core.config import Settings, get_settings
from app.core.errors import (INVALID_API_KEY_MESSAGE, MISSING_API_KEY_MESSAGE,
                             UnauthorizedError)
from app.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

API_KEY_HEADER = "x_api_key"

# auto_error=False: a missing header is reported by require_api_key itself
api_key_header = APIKeyHeader(
    name=API_KEY_HEADER,
    scheme_name="apiKeyAuth",
    description="Shared secret configured on the server",
    auto_error=False,
)


def check_api_key(supplied: Optional[str], expected: Optional[str]) -> None:
    """
    Compare a supplied key against the configured secret

    Args:
        supplied: Header value, None if the header was not sent
        expected: Configured secret, None if unset

    Raises:
        UnauthorizedError: If the key is missing or does not match
    """
    if not supplied:
        raise UnauthorizedError(MISSING_API_KEY_MESSAGE)

    # An unset secret never matches, which locks protected endpoints
    if not expected or not secrets.compare_digest(
        supplied.encode("utf-8"), expected.encode("utf-8")
    ):
        raise UnauthorizedError(INVALID_API_KEY_MESSAGE)


async def require_api_key(
    request: Request,
    api_key: Optional[str] = Depends(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    """Dependency guarding routes behind the shared secret"""
    try:
        check_api_key(api_key, settings.x_api_key)
    except UnauthorizedError as e:
        logger.warning(
            "Rejected request: %s",
            e.message,
            extra={"path": request.url.path, "key_supplied": bool(api_key)}
        )
        raise
