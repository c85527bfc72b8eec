"""
FastAPI middleware for request context and logging
"""
import time
import uuid
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.errors import INTERNAL_ERROR_MESSAGE
from app.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to add request context to logs"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Add request context and log request/response"""
        # Reuse a caller-supplied id so logs can be correlated upstream
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        LoggingConfig.set_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
        )

        start_time = time.time()
        logger.info("Request started")

        try:
            response = await call_next(request)

            duration_ms = int((time.time() - start_time) * 1000)
            logger.info(
                "Request completed",
                extra={
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                }
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception as e:
            duration_ms = int((time.time() - start_time) * 1000)
            logger.error(
                "Request failed",
                exc_info=True,
                extra={
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "duration_ms": duration_ms,
                }
            )

            # Rendered here so the error response still carries the request id
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": INTERNAL_ERROR_MESSAGE},
                headers={REQUEST_ID_HEADER: request_id},
            )

        finally:
            LoggingConfig.clear_context()
