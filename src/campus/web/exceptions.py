"""Custom exceptions and error handlers for the REST API."""

from typing import TypeVar

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from campus.domain.results import FailureType, Result

T = TypeVar("T")

STATUS_BY_FAILURE: dict[FailureType, int] = {
    FailureType.INVALID_INPUT: 400,
    FailureType.ENTITY_DOES_NOT_EXIST: 404,
    FailureType.ENTITY_ALREADY_EXISTS: 409,
    FailureType.DATABASE_ERROR: 503,
}


class ServiceFailure(Exception):
    """Raised when an application service returns a failed result."""

    def __init__(self, message: str, failure_type: FailureType) -> None:
        self.message = message
        self.failure_type = failure_type
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_FAILURE.get(self.failure_type, 500)


def unwrap(result: Result[T]) -> T:
    """Return the value of a successful result or raise ServiceFailure."""
    if result.is_failure:
        raise ServiceFailure(
            result.error or "Unknown error",
            result.failure_type or FailureType.DATABASE_ERROR,
        )
    return result.get_value()


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ServiceFailure)
    async def service_failure_handler(
        request: Request, exc: ServiceFailure
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.message,
                "error_type": exc.failure_type.value,
                "details": None,
            },
        )
