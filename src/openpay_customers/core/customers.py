"""
Customer, charge and address models exchanged with the Openpay API.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, ClassVar, Dict, Mapping, Optional, Protocol, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from .errors import MissingMerchantError

__all__ = [
    "Address",
    "Charge",
    "ChargeArgs",
    "ChargeCard",
    "ChargeFee",
    "Customer",
    "CustomerArgs",
    "CustomerSession",
    "OpenpayModel",
    "StoreReference",
]


class CustomerSession(Protocol):
    """What a :class:`Customer` needs from its merchant to issue requests."""

    def perform_customer_operation(
        self,
        verb: str,
        customer_id: str,
        data: Any = None,
        dst: Any = None,
        *,
        subresource: Optional[str] = None,
    ) -> Any: ...


class OpenpayModel(BaseModel):
    """Base for every Openpay body. Unknown keys in responses are ignored."""

    model_config = ConfigDict(populate_by_name=True)


class Address(OpenpayModel):
    """A postal address. The API validates it, the client does not."""

    line1: str = ""
    line2: str = ""
    line3: str = ""
    postal_code: str = ""
    state: str = ""
    city: str = ""
    country_code: str = ""


class StoreReference(OpenpayModel):
    """Reference and barcodes for paying at a convenience store. Received only."""

    reference: str = ""
    barcode_url: str = ""
    paybin_reference: str = ""
    barcode_paybin_url: str = ""


class CustomerArgs(OpenpayModel):
    """Body of a customer creation request."""

    OMIT_WHEN_EMPTY: ClassVar[Tuple[str, ...]] = (
        "external_id",
        "last_name",
        "phone_number",
        "address",
    )

    external_id: str = ""
    name: str
    last_name: str = ""
    email: str
    # The API spells the key this way.
    requires_account: bool = Field(default=False, alias="requires_acount")
    phone_number: str = ""
    address: Optional[Address] = None

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for name in self.OMIT_WHEN_EMPTY:
            value = data.get(name)
            if isinstance(value, dict):
                value = any(value.values())
            if not value:
                data.pop(name, None)
        return data


class ChargeArgs(OpenpayModel):
    """Body of a charge request against a customer's payment source."""

    source_id: str
    method: str
    amount: float
    currency: str
    description: str = ""
    order_id: str = ""
    device_session_id: str = ""


class ChargeCard(OpenpayModel):
    """Snapshot of the card used for a charge, with the number masked."""

    id: str = ""
    type: str = ""
    brand: str = ""
    address: Optional[Address] = None
    card_number: str = ""
    holder_name: str = ""
    expiration_year: str = ""
    expiration_month: str = ""
    allows_charges: bool = False
    allows_payouts: bool = False
    creation_date: str = ""
    bank_name: str = ""
    points_type: str = ""
    points_card: bool = False
    customer_id: str = ""
    bank_code: str = ""


class ChargeFee(OpenpayModel):
    amount: float = 0.0
    tax: float = 0.0


class Charge(OpenpayModel):
    """
    Result of charging a customer.

    ``error_message`` is only populated when the charge failed.
    """

    id: str = ""
    authorization: str = ""
    operation_type: str = ""
    method: str = ""
    transaction_type: str = ""
    card: ChargeCard = Field(default_factory=ChargeCard)
    status: str = ""
    conciliated: bool = False
    creation_date: str = ""
    operation_date: str = ""
    description: str = ""
    error_message: Optional[str] = None
    order_id: str = ""
    customer_id: str = ""
    amount: float = 0.0
    currency: str = ""
    fee: ChargeFee = Field(default_factory=ChargeFee)


class Customer(OpenpayModel):
    """
    An Openpay customer.

    Every field defaults to ``None`` so a partially filled instance can be
    sent as an update; unset fields are left out of the request body.

    ``merchant`` is filled in when the customer comes from a
    :class:`~openpay_customers.core.merchant.Merchant` call. Customers built
    by hand need it set before :meth:`charge_customer` is used.
    """

    id: Optional[str] = None
    creation_date: Optional[datetime] = None
    name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    status: Optional[str] = None
    balance: Optional[float] = None
    clabe: Optional[str] = None
    address: Optional[Address] = None
    store: Optional[StoreReference] = Field(default=None, exclude=True)

    _merchant: Optional[CustomerSession] = PrivateAttr(default=None)

    @property
    def merchant(self) -> Optional[CustomerSession]:
        return self._merchant

    @merchant.setter
    def merchant(self, value: Optional[CustomerSession]) -> None:
        self._merchant = value

    def charge_customer(
        self,
        data: Union[ChargeArgs, Mapping[str, Any]],
        dst: Any = Charge,
    ) -> Any:
        """
        Charge this customer and decode the response into ``dst``.

        ``dst`` defaults to :class:`Charge`; pass ``dict`` for the raw body or
        ``None`` to discard it.
        """
        if self.merchant is None:
            raise MissingMerchantError(
                f"Customer {self.id!r} has no merchant reference; set Customer.merchant first"
            )
        if not self.id:
            raise ValueError("Customer id must be set to charge a customer")
        logging.debug("Charging customer %s", self.id)
        return self.merchant.perform_customer_operation(
            "POST", self.id, data, dst, subresource="charges"
        )
