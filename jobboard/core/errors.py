"""
Error taxonomy and the FastAPI exception handlers that render it.

Every failure leaves the API as a JSON body with an ``error`` flag and a
human-readable ``message``. Domain errors add the offending ``field`` and,
where relevant, the allowed values or the id of a conflicting record.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class JobBoardError(Exception):
    """Base class for errors that map onto a structured client response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, field: Optional[str] = None, **extra: Any):
        super().__init__(message)
        self.message = message
        self.field = field
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": True, "message": self.message}
        if self.field is not None:
            body["field"] = self.field
        body.update(self.extra)
        return body


class MissingFieldError(JobBoardError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"{field} is required", field=field)


class InvalidFormatError(JobBoardError):
    """A reference id that cannot be parsed."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or "Invalid ID format", field=field)


class NotFoundError(JobBoardError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, kind: str, field: str = "id", message: Optional[str] = None):
        super().__init__(message or f"{kind.capitalize()} not found", field=field)
        self.kind = kind


class InvalidReferenceError(JobBoardError):
    """The referenced record exists but fails a relationship check."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidEnumError(JobBoardError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, allowed: Sequence[str], message: Optional[str] = None):
        allowed = list(allowed)
        super().__init__(
            message or f"{field.capitalize()} must be one of: {', '.join(allowed)}",
            field=field,
            validValues=allowed,
        )
        self.allowed = allowed


class DuplicateApplicationError(JobBoardError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, existing_id: Any):
        super().__init__(
            "Candidate has already applied for this job",
            existingApplicationId=str(existing_id),
        )
        self.existing_id = existing_id


class DuplicateRecordError(JobBoardError):
    """A unique column (email) already holds this value."""

    status_code = status.HTTP_409_CONFLICT


class ConstraintViolationError(JobBoardError):
    """The store rejected a write and no friendlier explanation was found."""

    status_code = status.HTTP_409_CONFLICT


def _error_field(loc: Sequence[Any]) -> str:
    # loc looks like ("body", "companyName") or ("path", "candidate_id")
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) if parts else str(loc[-1]) if loc else ""


def _request_context(request: Request, status_code: int) -> Dict[str, Any]:
    return {"method": request.method, "path": request.url.path, "status_code": status_code}


def _validation_details(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    return [{"field": _error_field(err.get("loc", ())), "message": err.get("msg", "")} for err in errors]


async def job_board_error_handler(request: Request, exc: JobBoardError) -> JSONResponse:
    logger.warning(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}",
        extra=_request_context(request, exc.status_code),
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    details = _validation_details(errors)
    body: Dict[str, Any] = {"error": True, "message": "Validation failed", "details": details}

    if errors:
        first = errors[0]
        loc = first.get("loc", ())
        if first.get("type") == "missing":
            body["message"] = f"{details[0]['field']} is required"
            body["field"] = details[0]["field"]
        elif loc and loc[0] == "path":
            body["message"] = "Invalid ID format"
            body["field"] = details[0]["field"]

    logger.warning(
        f"{request.method} {request.url.path} -> 400: {body['message']}",
        extra=_request_context(request, status.HTTP_400_BAD_REQUEST),
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body: Dict[str, Any] = {"error": True, "message": exc.detail}
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        body["message"] = f"Route {request.method} {request.url.path} not found"
        body["suggestion"] = "Check the API documentation at the root endpoint (GET /)"
    return JSONResponse(
        status_code=exc.status_code,
        content=body,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        extra=_request_context(request, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": True, "message": "Internal server error occurred"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JobBoardError, job_board_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
