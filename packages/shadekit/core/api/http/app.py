"""FastAPI application exposing generation, review and theming endpoints.

Handlers are thin async wrappers over the synchronous engine functions.
Payloads are parsed by hand so that malformed bodies map to the fixed
``{"detail": ...}`` 400 responses the editor expects, instead of FastAPI's
default 422 validation body.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shadekit.core.api.http.errors import ApiError, BadRequestError
from shadekit.core.api.http.schemas import ApplyThemeRequest, ReviewRequest, ShadesRequest
from shadekit.core.color.convert import ColorParseError, hex_to_rgb, rgb_to_hex
from shadekit.core.color.ramp import generate_shades_from_hex, generate_shades_from_rgb
from shadekit.core.config.models import AppConfig
from shadekit.core.generation.generator import GenerationRequest, generate_landing_page
from shadekit.core.review.scoring import review_blocks
from shadekit.core.theming.applier import apply_theme_shades_to_blocks
from shadekit.core.utils.logging import get_logger

GENERATE_FAILED = "Failed to generate landing page template"
REVIEW_FAILED = "Failed to review landing page"
APPLY_FAILED = "Failed to apply theme"
BLOCKS_REQUIRED = "blocks is required"
INVALID_COLOR = "Invalid color"


async def _read_json(request: Request, detail: str) -> Any:
    try:
        return await request.json()
    except ValueError as e:
        raise BadRequestError(detail, method=request.method, path=request.url.path, cause=e) from e


def _require_blocks(payload: Any, request: Request) -> None:
    blocks = payload.get("blocks") if isinstance(payload, dict) else None
    if not isinstance(blocks, list) or not blocks:
        raise BadRequestError(BLOCKS_REQUIRED, method=request.method, path=request.url.path)


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Build the HTTP application.

    Args:
        config: App config (review thresholds are taken from it)

    Returns:
        Configured FastAPI instance
    """
    if config is None:
        config = AppConfig()

    app = FastAPI(title="shadekit")
    app.state.config = config

    @app.exception_handler(ApiError)
    async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        request_logger = get_logger(__name__, method=request.method, path=request.url.path)
        if exc.cause is not None:
            request_logger.warning("Request failed: %s", exc, exc_info=exc.cause)
        else:
            request_logger.info("Request rejected: %s", exc)
        return JSONResponse(content=exc.to_body(), status_code=exc.status_code)

    @app.post("/ai/generate-lp")
    async def generate_lp(request: Request) -> JSONResponse:
        payload = await _read_json(request, GENERATE_FAILED)
        try:
            brief = GenerationRequest.model_validate(payload)
            result = generate_landing_page(brief)
        except ValueError as e:
            raise BadRequestError(
                GENERATE_FAILED, method=request.method, path=request.url.path, cause=e
            ) from e
        return JSONResponse(content=result.to_dict())

    @app.post("/ai/review")
    async def review(request: Request) -> JSONResponse:
        payload = await _read_json(request, REVIEW_FAILED)
        _require_blocks(payload, request)
        try:
            parsed = ReviewRequest.model_validate(payload)
        except ValueError as e:
            raise BadRequestError(
                REVIEW_FAILED, method=request.method, path=request.url.path, cause=e
            ) from e
        result = review_blocks(parsed.blocks, request.app.state.config.review)
        return JSONResponse(content=result.to_dict())

    @app.post("/theme/shades")
    async def theme_shades(request: Request) -> JSONResponse:
        payload = await _read_json(request, INVALID_COLOR)
        try:
            parsed = ShadesRequest.model_validate(payload)
            base = hex_to_rgb(parsed.hex)
        except ValueError as e:
            raise BadRequestError(
                INVALID_COLOR, method=request.method, path=request.url.path, cause=e
            ) from e
        shades = generate_shades_from_rgb(base)
        return JSONResponse(
            content={
                "hex": rgb_to_hex(*base.as_tuple()),
                "shades": shades.model_dump(),
                "css": shades.to_css_variables(),
            }
        )

    @app.post("/theme/apply")
    async def theme_apply(request: Request) -> JSONResponse:
        payload = await _read_json(request, APPLY_FAILED)
        _require_blocks(payload, request)
        try:
            parsed = ApplyThemeRequest.model_validate(payload)
        except ValueError as e:
            raise BadRequestError(
                APPLY_FAILED, method=request.method, path=request.url.path, cause=e
            ) from e
        try:
            shades = generate_shades_from_hex(parsed.hex)
        except ColorParseError as e:
            raise BadRequestError(
                INVALID_COLOR, method=request.method, path=request.url.path, cause=e
            ) from e
        themed = apply_theme_shades_to_blocks(parsed.blocks, shades)
        return JSONResponse(
            content={
                "shades": shades.model_dump(),
                "blocks": [block.to_dict() for block in themed],
            }
        )

    return app


__all__ = [
    "create_app",
]
