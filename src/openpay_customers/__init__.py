"""
Public facade for the Openpay customer client.

Re-exports the pieces integrators need so they can
``from openpay_customers import ...`` without navigating the package.
"""

from .api import create_merchant
from .core import (
    APIError,
    Address,
    Charge,
    ChargeArgs,
    ChargeCard,
    ChargeFee,
    Client,
    ConfigError,
    Customer,
    CustomerArgs,
    DecodeError,
    Merchant,
    MerchantConfig,
    MissingMerchantError,
    OpenpayError,
    RequestError,
    StoreReference,
    TransportError,
)

__all__ = (
    "APIError",
    "Address",
    "Charge",
    "ChargeArgs",
    "ChargeCard",
    "ChargeFee",
    "Client",
    "ConfigError",
    "Customer",
    "CustomerArgs",
    "DecodeError",
    "Merchant",
    "MerchantConfig",
    "MissingMerchantError",
    "OpenpayError",
    "RequestError",
    "StoreReference",
    "TransportError",
    "create_merchant",
)
