import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from shared.core.exceptions import InventoryError, StoreUnavailable, ValidationError
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def validation_field(loc) -> str:
    # ("body", "quantity") -> "quantity"; ("query", "limit") -> "limit"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(InventoryError)
    async def inventory_exception_handler(request: Request, exc: InventoryError):
        if isinstance(exc, StoreUnavailable):
            logger.error("Store unavailable on %s %s: %s",
                         request.method, request.url.path, exc.message)
        content = {"message": exc.message, "status_code": exc.status_code}
        if isinstance(exc, ValidationError) and exc.field:
            content["field"] = exc.field
        return JSONResponse(content=content, status_code=exc.http_status)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        if isinstance(exc.detail, dict):
            return JSONResponse(content=exc.detail, status_code=exc.status_code)
        return JSONResponse(
            content={"message": str(exc.detail)},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        return JSONResponse(
            content={
                "message": first.get("msg", "Invalid input"),
                "field": validation_field(first.get("loc", ())),
                "status_code": AppStatusCode.INVALID_INPUT,
            },
            status_code=400
        )

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s",
                         request.method, request.url.path)
        return JSONResponse(
            content={
                "message": "Internal Server Error",
                "status_code": AppStatusCode.OPERATION_FAILED,
            },
            status_code=500
        )
