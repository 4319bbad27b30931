"""
Early rejection of oversized photo uploads.

Starlette parses (and spools) the whole multipart body before an endpoint
runs, so the streaming cutoff in LocalStorage only fires once everything has
been received. This middleware looks at the declared Content-Length of
POST .../foto requests and answers 400 before the body is read.

Requests without a Content-Length (chunked) still go through and are cut by
the streaming check.
"""

import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.errors import SizeLimitError

logger = logging.getLogger(__name__)

# Room for the multipart boundaries and part headers around the file itself
MULTIPART_OVERHEAD = 16 * 1024


class UploadSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject photo uploads whose Content-Length cannot fit under max_bytes"""

    def __init__(self, app: ASGIApp, max_bytes: int, path_suffix: str = "/foto"):
        super().__init__(app)
        self.max_bytes = max_bytes
        self.path_suffix = path_suffix

    def _declared_length(self, request: Request) -> int:
        value = request.headers.get("content-length", "")
        return int(value) if value.isdigit() else -1

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method != "POST" or not request.url.path.endswith(self.path_suffix):
            return await call_next(request)

        declared = self._declared_length(request)
        if declared > self.max_bytes + MULTIPART_OVERHEAD:
            error = SizeLimitError(
                "El archivo excede el tamaño máximo permitido.",
                details=f"Máximo {self.max_bytes} bytes."
            )
            logger.warning(
                f"{error.code}: declared body of {declared} bytes on {request.url.path}",
                extra={"error_code": error.code, "path": request.url.path},
            )
            return JSONResponse(status_code=error.status_code, content=error.to_response())

        return await call_next(request)
