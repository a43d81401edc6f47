from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.schemas.product_schema import ErrorBody, FieldError
from catalog.services.product_service import (
    CatalogException,
    StoreFailure,
    ValidationFailed,
)
from catalog.utils.log import get_logger

log = get_logger("api")


def _error_response(exc: CatalogException) -> JSONResponse:
    body = ErrorBody(message=exc.message, details=getattr(exc, "details", None))
    return JSONResponse(
        status_code=exc.status_code, content=body.model_dump(exclude_none=True)
    )


async def catalog_exception_handler(request: Request, exc: CatalogException):
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # only reachable for bodies FastAPI cannot decode (invalid JSON)
    details = [
        FieldError(field="body", reason="request body must be valid JSON")
    ]
    return _error_response(ValidationFailed(details))


async def unhandled_exception_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(StoreFailure())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogException, catalog_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
