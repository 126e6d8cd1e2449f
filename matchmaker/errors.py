from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError


logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str


class MatchmakerError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_content(self) -> dict[str, Any]:
        return {"error": self.error, "message": self.message}


class Unauthorized(MatchmakerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "unauthorized"

    def __init__(self, message: str = "You must be logged in to access this resource") -> None:
        super().__init__(message)


class ProfileValidationError(MatchmakerError):
    status_code = 422
    error = "validation_failed"

    def __init__(self, errors: list[FieldError], message: str = "Please fix the highlighted fields.") -> None:
        super().__init__(message)
        self.errors = errors

    def to_content(self) -> dict[str, Any]:
        content = super().to_content()
        content["details"] = [asdict(e) for e in self.errors]
        return content


class StorageFailure(MatchmakerError):
    """Persistence failed; the message is safe to show, the cause is not."""


def _path_from_loc(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts)


def field_errors_from(errors: Iterable[dict[str, Any]]) -> list[FieldError]:
    return [FieldError(path=_path_from_loc(e.get("loc", ())), message=str(e.get("msg", ""))) for e in errors]


def field_errors_from_validation(exc: ValidationError) -> list[FieldError]:
    return field_errors_from(exc.errors())


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MatchmakerError)
    async def matchmaker_error_handler(request: Request, exc: MatchmakerError) -> JSONResponse:
        if exc.status_code >= 500:
            # The underlying cause was already logged where it was caught.
            logger.error("request failed method=%s path=%s error=%s", request.method, request.url.path, exc.error)
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("validation error on %s %s: %s", request.method, request.url.path, exc.errors())
        wrapped = ProfileValidationError(field_errors_from(exc.errors()))
        return JSONResponse(status_code=wrapped.status_code, content=wrapped.to_content())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal_error", "message": GENERIC_ERROR_MESSAGE},
        )
