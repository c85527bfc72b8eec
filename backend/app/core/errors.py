"""
API error types and their JSON rendering
"""
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

MISSING_INPUT_MESSAGE = "Please provide an input"
INPUT_NOT_STRING_MESSAGE = "Input must be a string"
INVALID_BASE64_MESSAGE = "Please provide a valid Base64 input"
MISSING_API_KEY_MESSAGE = "Please provide an API key"
INVALID_API_KEY_MESSAGE = "Please provide a valid API key"
INVALID_BODY_MESSAGE = "Invalid request body"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    """Error surfaced to the caller as {"message": ...} with an HTTP status"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.headers = headers

    def to_dict(self) -> Dict[str, Any]:
        """Response body"""
        return {"message": self.message}


class BadRequestError(ApiError):
    """Missing or malformed request input"""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ApiError):
    """Missing or invalid credential"""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str):
        super().__init__(message, headers={"WWW-Authenticate": "ApiKey"})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError"""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=exc.headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON bodies are a client error, not 422"""
    logger.info(
        "Rejected malformed request body",
        extra={"errors": str(exc.errors())}
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_BODY_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application"""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
