

import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from pixelgallery.core.exceptions import NotAcceptableError, UnsupportedMediaTypeError


logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


class JSONNegotiationMiddleware(BaseHTTPMiddleware):
    """
    Enforce JSON on both sides of every request.

    - Accept, when sent, must allow application/json (or */*), else 406.
    - A request declaring a non-empty body must declare a JSON
      Content-Type, else 415.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        accept = request.headers.get("accept")
        if accept and "*/*" not in accept and JSON_MEDIA_TYPE not in accept:
            error = NotAcceptableError()
            return JSONResponse(status_code=error.status_code, content=error.to_payload())

        content_length = request.headers.get("content-length", "")
        has_body = content_length.isdigit() and int(content_length) > 0
        if has_body:
            content_type = request.headers.get("content-type", "")
            if JSON_MEDIA_TYPE not in content_type:
                logger.info(f"Rejected {request.method} {request.url.path} with content type {content_type!r}")
                error = UnsupportedMediaTypeError()
                return JSONResponse(status_code=error.status_code, content=error.to_payload())

        return await call_next(request)
