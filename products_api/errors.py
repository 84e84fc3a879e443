from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = (
    "Oops! An error occurred on our server. Please try again or contact support."
)


class ProductsApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ProductsApiError):
    """Missing or malformed input; the caller has to fix the request."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ProductsApiError):
    status_code = status.HTTP_404_NOT_FOUND


class ServerError(ProductsApiError):
    """Unexpected failure. The cause is logged, never sent to the client."""

    def __init__(self, message: str = SERVER_ERROR_MESSAGE) -> None:
        super().__init__(message)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ProductsApiError)
    async def handle_products_api_error(
        request: Request, exc: ProductsApiError
    ) -> JSONResponse:
        if exc.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.info(
                "%s %s rejected: %s", request.method, request.url.path, exc.message
            )
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(
            "%s %s invalid body: %s", request.method, request.url.path, exc.errors()
        )
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE
        )
