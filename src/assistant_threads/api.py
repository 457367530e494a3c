"""Generic request helpers for the Assistants API."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from .config import get_settings
from .errors import ApiError, SchemaError, TransportError
from .schemas import parse_model

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_api_key: str | None = None


def set_key(api_key: str | None) -> None:
    """Set the API key used by every request in this process.

    Passing ``None`` restores the key from ``OPENAI_API_KEY``.
    """
    global _api_key
    _api_key = api_key


def _get_headers() -> dict[str, str]:
    """Get API headers with authorization."""
    settings = get_settings()
    api_key = _api_key or settings.api_key
    if not api_key:
        raise ValueError("OPENAI_API_KEY not configured")
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "OpenAI-Beta": settings.beta_header,
    }
    if settings.organization:
        headers["OpenAI-Organization"] = settings.organization
    return headers


def _api_error(response: httpx.Response) -> ApiError:
    """Build an ApiError from an error response, using the structured body when present."""
    message = response.text or response.reason_phrase
    code = error_type = param = None
    try:
        body = response.json()
    except ValueError:
        body = None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        message = error.get("message") or message
        code = error.get("code")
        error_type = error.get("type")
        param = error.get("param")
    return ApiError(
        message,
        status_code=response.status_code,
        code=code,
        error_type=error_type,
        param=param,
    )


async def _request(method: str, route: str, body: dict[str, Any] | None = None) -> Any:
    settings = get_settings()
    headers = _get_headers()

    logger.debug(f"{method} {route}")
    async with httpx.AsyncClient(
        base_url=settings.base_url,
        headers=headers,
        timeout=settings.request_timeout,
    ) as client:
        try:
            response = await client.request(method, route, json=body)
        except httpx.TransportError as exc:
            raise TransportError(f"{method} {route} failed: {exc}", cause=exc) from exc

    if not response.is_success:
        error = _api_error(response)
        logger.warning(f"{method} {route} returned {response.status_code}: {error.message}")
        raise error

    try:
        return response.json()
    except ValueError as exc:
        raise SchemaError(f"{method} {route} returned a non-JSON body", cause=exc) from exc


async def api_get(route: str, model: type[ModelT]) -> ModelT:
    return parse_model(model, await _request("GET", route))


async def api_post(route: str, body: dict[str, Any], model: type[ModelT]) -> ModelT:
    return parse_model(model, await _request("POST", route, body))


async def api_delete(route: str, model: type[ModelT]) -> ModelT:
    return parse_model(model, await _request("DELETE", route))
