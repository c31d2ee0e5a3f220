"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from openpay_customers import Merchant, MerchantConfig
from openpay_customers.core.payloads import decode, to_payload


class RecordingClient:
    """Stand-in for the HTTP client that records calls and serves canned bodies."""

    def __init__(self) -> None:
        self.responses: Dict[Tuple[str, str], Any] = {}
        self.requests: List[Tuple[str, str, Optional[Dict[str, Any]]]] = []
        self.performed: List[Tuple[Tuple[str, str], Any]] = []

    def respond(self, verb: str, path: str, body: Any) -> None:
        self.responses[(verb, path)] = body

    def new_request(self, verb: str, path: str, body: Any = None) -> Tuple[str, str]:
        payload = to_payload(body) if body is not None else None
        self.requests.append((verb, path, payload))
        return verb, path

    def perform(self, request: Tuple[str, str], dst: Any = None) -> Any:
        self.performed.append((request, dst))
        body = self.responses.get(request)
        if dst is None or body is None:
            return None
        return decode(dst, body)


@pytest.fixture
def config() -> MerchantConfig:
    return MerchantConfig(merchant_id="mzdtln0bmtms6o3kck8f", private_key="sk_test_123")


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def merchant(config: MerchantConfig, recording_client: RecordingClient) -> Merchant:
    return Merchant(config, client=recording_client)


@pytest.fixture
def customer_body() -> Dict[str, Any]:
    """A customer as returned by the sandbox API."""
    return {
        "id": "ag4nktpdzebjiye1tlze",
        "creation_date": "2014-05-20T16:47:47-05:00",
        "name": "Customer Name",
        "last_name": "Last Name",
        "email": "customer_email@me.com",
        "phone_number": "44209087654",
        "status": "active",
        "balance": 103.0,
        "clabe": "646180109400423323",
        "address": {
            "line1": "Calle 10",
            "line2": "col. san pablo",
            "line3": "entre la calle 1 y la 2",
            "postal_code": "76000",
            "state": "Queretaro",
            "city": "Queretaro",
            "country_code": "MX",
        },
        "store": {
            "reference": "OPENPAY02DQ35YOY7",
            "barcode_url": "https://sandbox-api.openpay.mx/barcode/OPENPAY02DQ35YOY7",
        },
    }


@pytest.fixture
def charge_body() -> Dict[str, Any]:
    return {
        "id": "trzjaozcik8msyqshka4",
        "authorization": "801585",
        "operation_type": "in",
        "method": "card",
        "transaction_type": "charge",
        "card": {
            "type": "debit",
            "brand": "mastercard",
            "card_number": "1881",
            "holder_name": "Pedro Paramo",
            "expiration_year": "25",
            "expiration_month": "12",
            "allows_charges": True,
            "allows_payouts": True,
            "bank_name": "Banamex",
            "bank_code": "002",
        },
        "status": "completed",
        "conciliated": False,
        "creation_date": "2014-05-26T11:56:25-05:00",
        "operation_date": "2014-05-26T11:56:25-05:00",
        "description": "Cargo inicial a mi cuenta",
        "error_message": None,
        "order_id": "oid-00051",
        "customer_id": "ag4nktpdzebjiye1tlze",
        "amount": 100.0,
        "currency": "MXN",
        "fee": {"amount": 2.9, "tax": 0.464},
    }
