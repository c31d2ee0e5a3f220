"""
Merchant configuration: credentials, API host and request timeout.

Settings are resolved in layers. The process environment comes first, an
optional ``.env`` file fills in ``OPENPAY_*`` keys the environment lacks,
and keyword arguments win over both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .errors import ConfigError

__all__ = [
    "ConfigError",
    "MerchantConfig",
    "PRODUCTION_URL",
    "SANDBOX_URL",
]

SANDBOX_URL = "https://sandbox-api.openpay.mx/v1"
PRODUCTION_URL = "https://api.openpay.mx/v1"

ENV_PREFIX = "OPENPAY_"
MERCHANT_ID_KEY = "OPENPAY_MERCHANT_ID"
PRIVATE_KEY_KEY = "OPENPAY_PRIVATE_KEY"
PRODUCTION_KEY = "OPENPAY_PRODUCTION"
API_URL_KEY = "OPENPAY_API_URL"
TIMEOUT_KEY = "OPENPAY_TIMEOUT_SECONDS"

DEFAULT_TIMEOUT_SECONDS = 30.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _read_env_file(path: Path) -> Dict[str, str]:
    """Return the ``OPENPAY_*`` assignments of a ``.env`` file; a missing file is empty."""
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}

    values: Dict[str, str] = {}
    for raw_line in data.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key.startswith(ENV_PREFIX):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        values[key] = value
    return values


def _require(values: Mapping[str, Any], key: str) -> str:
    value = (values.get(key) or "").strip()
    if not value:
        raise ConfigError(f"{key} must be provided")
    return value


def _parse_production(raw: Union[str, bool]) -> bool:
    if isinstance(raw, bool):
        return raw
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{PRODUCTION_KEY} must be a boolean, got '{raw}'")


def _parse_api_url(raw: Optional[str]) -> Optional[str]:
    api_url = (raw or "").strip() or None
    if api_url is not None and not api_url.startswith(("http://", "https://")):
        raise ConfigError(f"{API_URL_KEY} must be an http(s) URL")
    return api_url


def _parse_timeout(raw: Union[str, float, int]) -> float:
    try:
        timeout = float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{TIMEOUT_KEY} must be a number, got '{raw}'") from exc
    if timeout <= 0:
        raise ConfigError(f"{TIMEOUT_KEY} must be greater than zero")
    return timeout


@dataclass(frozen=True)
class MerchantConfig:
    merchant_id: str
    private_key: str
    production: bool = False
    api_url: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def base_url(self) -> str:
        """Root of every resource path, merchant id included, without a trailing slash."""
        root = self.api_url or (PRODUCTION_URL if self.production else SANDBOX_URL)
        return f"{root.rstrip('/')}/{self.merchant_id}"

    def __repr__(self) -> str:
        return (
            f"MerchantConfig(merchant_id={self.merchant_id!r}, private_key='***', "
            f"production={self.production!r}, api_url={self.api_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "MerchantConfig":
        """Build a config from ``OPENPAY_*`` keys, validating every value."""
        return cls(
            merchant_id=_require(values, MERCHANT_ID_KEY),
            private_key=_require(values, PRIVATE_KEY_KEY),
            production=_parse_production(values.get(PRODUCTION_KEY, "false")),
            api_url=_parse_api_url(values.get(API_URL_KEY)),
            timeout_seconds=_parse_timeout(
                values.get(TIMEOUT_KEY, str(DEFAULT_TIMEOUT_SECONDS))
            ),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        environ: Optional[Mapping[str, str]] = None,
        merchant_id: Optional[str] = None,
        private_key: Optional[str] = None,
        production: Optional[Union[bool, str]] = None,
        api_url: Optional[str] = None,
        timeout_seconds: Optional[Union[float, int, str]] = None,
    ) -> "MerchantConfig":
        """
        Resolve the configuration from ``environ`` (default :data:`os.environ`),
        ``env_file`` (``None`` skips it) and the keyword arguments.
        """
        values: Dict[str, Any] = dict(os.environ if environ is None else environ)
        if env_file is not None:
            for key, value in _read_env_file(Path(env_file)).items():
                values.setdefault(key, value)

        explicit = {
            MERCHANT_ID_KEY: merchant_id,
            PRIVATE_KEY_KEY: private_key,
            PRODUCTION_KEY: production,
            API_URL_KEY: api_url,
            TIMEOUT_KEY: timeout_seconds,
        }
        values.update({key: value for key, value in explicit.items() if value is not None})
        return cls.from_mapping(values)
