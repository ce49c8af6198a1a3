"""Exception handlers that shape every error response as JSON.

Two error classes reach clients:
- 404 for any (method, path) pair no route or static file answers:
  `{"error": "Route not found", "path": "/requested/path"}`
- 500 for any exception escaping a handler:
  `{"error": "Something went wrong!", "message": "<exception text>"}`

A 405 from routing or the static mount means the path exists but not for
this method; that is still an unmatched route and gets the 404 body. Other
HTTP errors raised by the framework (400, ...) keep their status and report
the framework's detail under `error`.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

UNMATCHED_STATUSES = {404, 405}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render framework HTTP errors as JSON.

    Args:
        request: Request that failed routing or raised `HTTPException`.
        exc: The raised exception.

    Returns:
        JSONResponse: 404 `{"error": "Route not found", "path": ...}` for
        unmatched routes, otherwise `{"error": <detail>}` with the original status.
    """
    if exc.status_code in UNMATCHED_STATUSES:
        return JSONResponse(
            status_code=404,
            content={"error": "Route not found", "path": request.url.path},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log an uncaught handler error and answer with a 500.

    Args:
        request: Request whose handler raised.
        exc: The uncaught exception; its text is passed through as `message`.

    Returns:
        JSONResponse: 500 `{"error": "Something went wrong!", "message": str(exc)}`.
    """
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Something went wrong!", "message": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the 404/500 JSON handlers on `app`."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
