"""
Core primitives of the Openpay customer client.
"""

from .client import Client
from .config import MerchantConfig
from .customers import (
    Address,
    Charge,
    ChargeArgs,
    ChargeCard,
    ChargeFee,
    Customer,
    CustomerArgs,
    CustomerSession,
    OpenpayModel,
    StoreReference,
)
from .errors import (
    APIError,
    ConfigError,
    DecodeError,
    MissingMerchantError,
    OpenpayError,
    RequestError,
    TransportError,
)
from .merchant import Merchant
from .payloads import decode, to_payload

__all__ = [
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
    "CustomerSession",
    "DecodeError",
    "Merchant",
    "MerchantConfig",
    "MissingMerchantError",
    "OpenpayError",
    "OpenpayModel",
    "RequestError",
    "StoreReference",
    "TransportError",
    "decode",
    "to_payload",
]
