"""HTTP interface for submitting receipts and reading their points."""

import logging
from typing import Any

from fastapi import Body, Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from receipt_points.database.base import Database
from receipt_points.domain.errors import (
    INVALID_RECEIPT,
    RECEIPT_NOT_FOUND,
    NotFoundError,
    StorageError,
    ValidationError,
)
from receipt_points.domain.receipt import ReceiptService
from receipt_points.utils.payload import receipt_from_payload

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status_code": status_code, "message": message},
    )


def get_receipt_service(request: Request) -> ReceiptService:
    return ReceiptService(request.app.state.db)


def create_app(db: Database) -> FastAPI:
    """Create the FastAPI application bound to a receipt store.

    Args:
        db: Database instance shared by all requests

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(title="Receipt Points")
    app.state.db = db

    @app.exception_handler(ValidationError)
    async def _invalid_receipt(request: Request, exc: ValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_RECEIPT)

    @app.exception_handler(RequestValidationError)
    async def _malformed_body(request: Request, exc: RequestValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_RECEIPT)

    @app.exception_handler(NotFoundError)
    async def _receipt_not_found(request: Request, exc: NotFoundError):
        return error_response(status.HTTP_404_NOT_FOUND, RECEIPT_NOT_FOUND)

    @app.exception_handler(StorageError)
    async def _storage_failure(request: Request, exc: StorageError):
        logger.error("Storage failure on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.post("/receipts/process")
    def process_receipt(
        payload: Any = Body(...),
        service: ReceiptService = Depends(get_receipt_service),
    ):
        receipt_id = service.submit(receipt_from_payload(payload))
        return {"id": receipt_id}

    @app.get("/receipts/{receipt_id}/points")
    def get_receipt_points(
        receipt_id: str,
        service: ReceiptService = Depends(get_receipt_service),
    ):
        return {"points": service.lookup(receipt_id)}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
