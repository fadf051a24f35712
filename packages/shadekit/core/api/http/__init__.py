"""HTTP surface for shadekit."""

from shadekit.core.api.http.app import create_app
from shadekit.core.api.http.errors import ApiError, ApiErrorData, BadRequestError

__all__ = [
    "ApiError",
    "ApiErrorData",
    "BadRequestError",
    "create_app",
]
