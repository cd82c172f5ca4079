"""JSON decoding shared by the REST and streaming paths.

Decoding is two-phase where needed: ``decode_json`` yields a generic value
(dicts, lists, scalars), ``decode_as`` validates straight into a typed shape.
Both raise ``DecodeError`` instead of leaking json/pydantic exceptions.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import DecodeError


@lru_cache(maxsize=128)
def type_adapter(shape: Any) -> TypeAdapter[Any]:
    """Return a cached TypeAdapter for ``shape``."""
    return TypeAdapter(shape)


def decode_json(raw: str | bytes) -> Any:
    """Parse raw JSON text into a generic Python value."""
    try:
        return json.loads(raw)
    except (ValueError, TypeError, RecursionError) as e:
        raise DecodeError(f"Invalid JSON payload: {e}", raw=raw) from e


def decode_as(raw: str | bytes, shape: Any) -> Any:
    """Validate raw JSON text directly into ``shape``."""
    try:
        return type_adapter(shape).validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"Payload does not match {_shape_name(shape)}: {e}", raw=raw) from e
    except RecursionError as e:
        raise DecodeError(f"Payload nested too deeply for {_shape_name(shape)}", raw=raw) from e


def validate_as(payload: Any, shape: Any) -> Any:
    """Validate an already-parsed generic value into ``shape``."""
    try:
        return type_adapter(shape).validate_python(payload)
    except ValidationError as e:
        raise DecodeError(
            f"Payload does not match {_shape_name(shape)}: {e}", raw=payload
        ) from e


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", repr(shape))
