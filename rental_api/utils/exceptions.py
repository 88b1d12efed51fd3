import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rental_api.utils.response import error_response

logger = logging.getLogger(__name__)


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error


class ClientInputError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class ReferentialError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class NotFoundError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class ConflictError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=409)


class AuthenticationError(AppException):
    def __init__(self, message: str = "Invalid email or password."):
        super().__init__(message, status_code=401)


class StoreFault(AppException):
    def __init__(self, message: str, error: str | None = None):
        super().__init__(message, status_code=500, error=error)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, exc.error),
        )

    @app.exception_handler(StarletteHTTPException)
    async def route_not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Routing is the only source of HTTPException: handlers raise AppException.
        if exc.status_code in (404, 405):
            logger.error("Route not found: %s %s", request.method, request.url.path)
            return JSONResponse(status_code=404, content=error_response("Route not found"))
        return JSONResponse(status_code=exc.status_code, content=error_response(str(exc.detail)))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=error_response("Invalid request body", str(exc.errors())),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error", str(exc)),
        )
