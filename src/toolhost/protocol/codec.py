"""Envelope codec — raw request bytes in, response bytes out."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from toolhost.errors import ParseError
from toolhost.protocol.models import JsonRpcRequest, JsonRpcResponse


def decode_request(raw: bytes | str) -> JsonRpcRequest:
    """Parse *raw* into a :class:`JsonRpcRequest`.

    Only the wire shape is enforced here. A missing ``method`` decodes as an
    empty string and is rejected later by the dispatcher.

    A bare ``null`` body decodes as an empty request.

    Raises
    ------
    ParseError
        If *raw* is not UTF-8 JSON (``NaN`` and ``Infinity`` included), nests
        too deeply, is not a JSON object, or a field has the wrong JSON type.
    """
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise ParseError(str(exc)) from exc

    if data is None:
        return JsonRpcRequest()
    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object, got {type(data).__name__}")

    try:
        return JsonRpcRequest.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"{exc.error_count()} invalid field(s)") from exc


def encode_response(response: JsonRpcResponse) -> bytes:
    """Serialize *response*, emitting only the outcome that is set."""
    payload: dict[str, Any] = {"jsonrpc": response.jsonrpc, "id": response.id}
    if response.error is not None:
        payload["error"] = response.error.model_dump(exclude_none=True)
    else:
        payload["result"] = response.result
    try:
        return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode()
    except UnicodeEncodeError:
        # lone surrogates cannot be UTF-8 encoded; \u escapes keep them
        return json.dumps(payload, allow_nan=False).encode()


def _reject_constant(token: str) -> float:
    raise ParseError(f"{token} is not valid JSON")


def parse_error_response(exc: ParseError) -> JsonRpcResponse:
    """The pre-dispatch response for an undecodable body. ``id`` is unknown."""
    return JsonRpcResponse.failure(None, exc.to_error())
