"""Exception handlers that give every error response an ``error`` field."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_DATA = "Invalid data"


def _loc_to_field(loc: tuple) -> str:
    # drop the request part ("body", "query", "path") FastAPI prefixes
    parts = loc[1:] if loc and loc[0] in ("body", "query", "path") else loc
    return ".".join(str(p) for p in parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, list):
        content = {"error": INVALID_DATA, "details": exc.detail}
    else:
        content = {"error": exc.detail}
    return JSONResponse(content, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        {"field": _loc_to_field(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse({"error": INVALID_DATA, "details": details}, status_code=400)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
