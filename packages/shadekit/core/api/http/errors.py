from __future__ import annotations

from pydantic import BaseModel, Field


class ApiErrorData(BaseModel):
    """Structured data for HTTP API errors.

    Args:
        detail: Client-facing error description
        status_code: HTTP status code
        method: HTTP method of the failing request (if known)
        path: Request path (if known)
        cause: Original exception that caused this error
    """

    model_config = {"arbitrary_types_allowed": True}

    detail: str
    status_code: int = 400
    method: str | None = None
    path: str | None = None
    cause: BaseException | None = Field(default=None, repr=False)


class ApiError(Exception):
    """Base exception for errors answered with a ``{"detail": ...}`` body.

    Attributes:
        data: Structured error data (ApiErrorData)
        detail: Client-facing error description
        status_code: HTTP status code
        cause: Original exception that caused this error
    """

    status_code: int = 500

    def __init__(
        self,
        detail: str,
        *,
        method: str | None = None,
        path: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.data = ApiErrorData(
            detail=detail,
            status_code=self.status_code,
            method=method,
            path=path,
            cause=cause,
        )
        self.detail = self.data.detail
        self.method = self.data.method
        self.path = self.data.path
        self.cause = self.data.cause

        super().__init__(str(self))

    def __str__(self) -> str:
        """Format error for logging."""
        parts = [self.detail]
        if self.method and self.path:
            parts.append(f"{self.method} {self.path}")
        parts.append(f"status={self.status_code}")
        if self.cause is not None:
            parts.append(f"cause={type(self.cause).__name__}: {self.cause}")
        return " | ".join(parts)

    def to_body(self) -> dict[str, str]:
        return {"detail": self.detail}


class BadRequestError(ApiError):
    """HTTP 400: malformed payload or invalid input."""

    status_code = 400


__all__ = [
    "ApiError",
    "ApiErrorData",
    "BadRequestError",
]
