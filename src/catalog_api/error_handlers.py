"""Exception handlers rendering every failure as an ErrorResponse body."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.catalog_api import catalog_api_logger as logger
from src.utils.exceptions import AuthenticationError, CatalogServiceError
from src.utils.response_format import ErrorResponse

_REASONS = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    500: "Internal Server Error",
}


def _error_response(request: Request, status_code: int, error: str, message: str, headers=None) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.to_dict(), headers=headers)


async def handle_catalog_error(request: Request, exc: CatalogServiceError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
        logger.warning(f"{request.method} {request.url.path} unauthorized: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}")
    return _error_response(request, exc.status_code, exc.error, exc.message, headers)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "Bad Request", "; ".join(messages))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error = _REASONS.get(exc.status_code, "Error")
    return _error_response(request, exc.status_code, error, str(exc.detail), getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogServiceError, handle_catalog_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
