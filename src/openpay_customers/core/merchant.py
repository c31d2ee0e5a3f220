"""
Customer operations for an Openpay merchant.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

import requests
from requests.utils import quote

from .client import Client
from .config import MerchantConfig
from .customers import Customer, CustomerArgs
from .errors import DecodeError

__all__ = [
    "Merchant",
]

CUSTOMERS_PATH = "customers"


class Merchant:
    """
    An authenticated Openpay merchant.

    Each method maps to exactly one REST call. Customers returned by these
    methods keep a reference to the merchant so they can be charged directly.
    """

    def __init__(
        self,
        config: MerchantConfig,
        *,
        client: Optional[Client] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if client is not None and session is not None:
            raise ValueError("Provide either a client or a session, not both.")
        self.config = config
        self.client = client or Client(config, session=session)

    def __repr__(self) -> str:
        return f"Merchant(merchant_id={self.config.merchant_id!r})"

    def add_customer(self, args: Union[CustomerArgs, Mapping[str, Any]]) -> Customer:
        """Create a customer."""
        request = self.client.new_request("POST", CUSTOMERS_PATH, args)
        customer = self._attach(self.client.perform(request, Customer))
        logging.info("Created customer %s", customer.id)
        return customer

    def get_customers(self) -> List[Customer]:
        """List the merchant's customers in the order the API returns them."""
        request = self.client.new_request("GET", CUSTOMERS_PATH, None)
        customers = self.client.perform(request, List[Customer]) or []
        for customer in customers:
            customer.merchant = self
        return customers

    def get_customer(self, customer_id: str) -> Customer:
        return self._attach(
            self.perform_customer_operation("GET", customer_id, None, Customer)
        )

    def update_customer(
        self,
        customer_id: str,
        data: Union[Customer, Mapping[str, Any]],
    ) -> Customer:
        """
        Update a customer. Only the fields set on ``data`` are sent.
        """
        return self._attach(
            self.perform_customer_operation("PUT", customer_id, data, Customer)
        )

    def delete_customer(self, customer_id: str) -> None:
        self.perform_customer_operation("DELETE", customer_id, None, None)
        logging.info("Deleted customer %s", customer_id)

    def _attach(self, customer: Optional[Customer]) -> Customer:
        if customer is None:
            raise DecodeError("Openpay returned an empty customer body")
        customer.merchant = self
        return customer

    def perform_customer_operation(
        self,
        verb: str,
        customer_id: str,
        data: Any = None,
        dst: Any = None,
        *,
        subresource: Optional[str] = None,
    ) -> Any:
        """
        Issue ``verb`` on ``customers/{customer_id}[/{subresource}]`` and
        decode the body into ``dst``.

        The id is percent-encoded, so it always names a single item.
        """
        if not customer_id:
            raise ValueError("Customer id must not be empty")
        path = f"{CUSTOMERS_PATH}/{quote(customer_id, safe='')}"
        if subresource:
            path = f"{path}/{subresource}"
        request = self.client.new_request(verb, path, data)
        return self.client.perform(request, dst)
