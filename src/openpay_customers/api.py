"""
High-level entry point for building an Openpay merchant.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

import requests

from .core.config import MerchantConfig
from .core.merchant import Merchant

__all__ = [
    "create_merchant",
]


def create_merchant(
    *,
    config: Optional[MerchantConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    environ: Optional[Mapping[str, str]] = None,
    merchant_id: Optional[str] = None,
    private_key: Optional[str] = None,
    production: Optional[Union[bool, str]] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[Union[float, int, str]] = None,
) -> Merchant:
    """
    Construct a :class:`Merchant`.

    Callers can either supply a ready-made :class:`MerchantConfig` or let the
    helper resolve one with :meth:`MerchantConfig.from_env`.
    """
    if config is not None:
        extras = (environ, merchant_id, private_key, production, api_url, timeout_seconds)
        if any(item is not None for item in extras):
            raise ValueError(
                "Provide either a pre-built MerchantConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = MerchantConfig.from_env(
            env_file=env_file,
            environ=environ,
            merchant_id=merchant_id,
            private_key=private_key,
            production=production,
            api_url=api_url,
            timeout_seconds=timeout_seconds,
        )
    return Merchant(cfg, session=session)
