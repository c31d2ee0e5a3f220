"""
Exception hierarchy for the Openpay customer client.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

__all__ = [
    "APIError",
    "ConfigError",
    "DecodeError",
    "MissingMerchantError",
    "OpenpayError",
    "RequestError",
    "TransportError",
]


class OpenpayError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(OpenpayError):
    """Raised when the supplied configuration is invalid."""


class RequestError(OpenpayError):
    """Raised when a request cannot be built or its body cannot be encoded."""


class TransportError(OpenpayError):
    """Raised when the HTTP round trip itself fails."""


class DecodeError(OpenpayError):
    """Raised when a response body does not match the expected shape."""


class MissingMerchantError(OpenpayError):
    """Raised when a customer-scoped call is made on a customer with no merchant."""


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class APIError(OpenpayError):
    """
    A non-2xx response from the Openpay API.

    Openpay reports failures as a JSON object with ``http_code``,
    ``error_code``, ``category``, ``description`` and ``request_id``. Each of
    them is exposed as an attribute; the untouched body is kept in ``raw``.
    """

    def __init__(
        self,
        http_code: int,
        description: str,
        *,
        error_code: Optional[int] = None,
        category: Optional[str] = None,
        request_id: Optional[str] = None,
        raw: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(f"Openpay responded with {http_code}: {description}")
        self.http_code = http_code
        self.description = description
        self.error_code = error_code
        self.category = category
        self.request_id = request_id
        self.raw = dict(raw or {})

    @classmethod
    def from_response(cls, status_code: int, payload: Mapping[str, Any]) -> "APIError":
        """
        Build the error from a decoded body.

        Gateways and maintenance pages sometimes answer with JSON that is not
        an Openpay error; non-numeric codes fall back to ``status_code`` and
        ``None``, and the body stays available in ``raw``.
        """
        category = payload.get("category")
        request_id = payload.get("request_id")
        return cls(
            http_code=_as_int(payload.get("http_code")) or status_code,
            description=str(payload.get("description") or ""),
            error_code=_as_int(payload.get("error_code")),
            category=str(category) if category is not None else None,
            request_id=str(request_id) if request_id is not None else None,
            raw=payload,
        )
