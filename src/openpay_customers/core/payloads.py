"""
Encoding of request bodies and decoding of response bodies.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Mapping

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DecodeError, RequestError

__all__ = [
    "decode",
    "to_payload",
]


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def to_payload(body: Any) -> Dict[str, Any]:
    """
    Encode a model (or a mapping) into a JSON-ready ``dict`` with wire keys.

    ``None`` fields are dropped.
    """
    try:
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", by_alias=True, exclude_none=True)
        if isinstance(body, Mapping):
            return _adapter(Dict[str, Any]).dump_python(dict(body), mode="json")
    except PydanticSerializationError as exc:
        raise RequestError(f"Cannot encode request body: {exc}") from exc
    raise RequestError(
        f"Request body must be a model or a mapping, got {type(body).__name__}"
    )


def decode(dst: Any, data: Any) -> Any:
    """
    Decode ``data`` into the shape described by ``dst``.

    ``None`` discards the body, ``dict`` returns it untouched, anything else
    (a model class, ``List[Customer]``...) is validated with pydantic.
    """
    if dst is None:
        return None
    if dst is dict:
        if not isinstance(data, Mapping):
            raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
        return data
    try:
        return _adapter(dst).validate_python(data)
    except ValidationError as exc:
        raise DecodeError(f"Openpay response does not match {exc.title}: {exc}") from exc
