"""
Request body policy dependencies.

The JSON negotiation middleware has already checked Content-Type by the
time these run, so a non-empty body here is declared as JSON.
"""

import json
from typing import Any, Dict

from fastapi import Request

from pixelgallery.core.exceptions import BodyRequiredError, NoBodyAllowedError


async def _parse_json(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        raise BodyRequiredError()


async def no_body_allowed(request: Request) -> None:
    """Reject any request that carries a payload."""
    if await request.body():
        raise NoBodyAllowedError()


async def require_json_body(request: Request) -> Dict[str, Any]:
    """Require a non-empty JSON object body."""
    body = await _parse_json(request)
    if not isinstance(body, dict) or not body:
        raise BodyRequiredError()
    return body


async def json_body(request: Request) -> Any:
    """
    Parsed JSON body for PATCH/PUT, or {} when no body was sent.

    Shape checks are left to the mutation validators.
    """
    body = await _parse_json(request)
    return {} if body is None else body
