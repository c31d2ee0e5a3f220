"""
HTTP transport for the Openpay REST API.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import requests

from .config import MerchantConfig
from .errors import APIError, DecodeError, RequestError, TransportError
from .payloads import decode, to_payload

__all__ = [
    "Client",
]

_USER_AGENT = "openpay-customers-python"


class Client:
    """
    Builds and performs authenticated requests against one merchant's API root.

    Requests go through a single :class:`requests.Session`; thread safety is
    that of the session.
    """

    def __init__(
        self,
        config: MerchantConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self.config.base_url}/{path.lstrip('/')}"

    def new_request(
        self,
        verb: str,
        path: str,
        body: Any = None,
    ) -> requests.PreparedRequest:
        """
        Prepare a request for ``verb`` on the resource ``path``.

        ``body`` may be a dataclass instance, a mapping or ``None``.
        """
        if not verb:
            raise RequestError("HTTP verb must not be empty")
        if not path:
            raise RequestError("Resource path must not be empty")

        payload = to_payload(body) if body is not None else None
        try:
            data = json.dumps(payload) if payload is not None else None
        except (TypeError, ValueError) as exc:
            raise RequestError(f"Failed to encode request body for {path}: {exc}") from exc

        headers = {"Accept": "application/json", "User-Agent": _USER_AGENT}
        if data is not None:
            headers["Content-Type"] = "application/json"

        request = requests.Request(
            method=verb.upper(),
            url=self.url_for(path),
            data=data,
            headers=headers,
            auth=(self.config.private_key, ""),
        )
        return self.session.prepare_request(request)

    def perform(self, request: requests.PreparedRequest, dst: Any = None) -> Any:
        """
        Send ``request`` and decode the response body into ``dst``.

        Returns ``None`` when ``dst`` is ``None`` or the response has no body.
        """
        logging.debug("Sending %s %s", request.method, request.url)
        try:
            response = self.session.send(request, timeout=self.config.timeout_seconds)
        except requests.RequestException as exc:
            logging.warning("%s %s failed: %s", request.method, request.url, exc)
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise self._api_error(response)

        if dst is None or not response.content:
            return None
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Failed to parse JSON from Openpay at {request.url}: {response.text}"
            ) from exc
        return decode(dst, payload)

    @staticmethod
    def _api_error(response: requests.Response) -> APIError:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            error = APIError.from_response(response.status_code, payload)
        else:
            error = APIError(response.status_code, response.text)
        logging.warning(
            "Openpay responded with %s (error_code=%s, request_id=%s): %s",
            error.http_code,
            error.error_code,
            error.request_id,
            error.description,
        )
        return error
