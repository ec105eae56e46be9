"""
Typed result objects decoded from API responses.

Unknown JSON fields are ignored and optional fields default to ``None`` so a
newer API version adding fields never breaks decoding. Wire-level enums use
``str`` mixins so they encode by their raw value.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

ItemT = TypeVar("ItemT")


class Currency(str, Enum):
    """Common ISO currency codes; routes also accept any lowercase code string."""

    USD = "usd"
    EUR = "eur"
    GBP = "gbp"
    CAD = "cad"
    AUD = "aud"
    JPY = "jpy"
    CHF = "chf"
    SEK = "sek"
    NOK = "nok"
    DKK = "dkk"
    NZD = "nzd"
    SGD = "sgd"
    HKD = "hkd"
    MXN = "mxn"
    BRL = "brl"
    PLN = "pln"


class TopUpStatus(str, Enum):
    CANCELED = "canceled"
    FAILED = "failed"
    PENDING = "pending"
    REVERSED = "reversed"
    SUCCEEDED = "succeeded"


class AuthorizationStatus(str, Enum):
    PENDING = "pending"
    REVERSED = "reversed"
    CLOSED = "closed"


class PersonGender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class SourceType(str, Enum):
    ACH_CREDIT_TRANSFER = "ach_credit_transfer"
    ACH_DEBIT = "ach_debit"
    ALIPAY = "alipay"
    BANCONTACT = "bancontact"
    CARD = "card"
    CARD_PRESENT = "card_present"
    EPS = "eps"
    GIROPAY = "giropay"
    IDEAL = "ideal"
    MULTIBANCO = "multibanco"
    P24 = "p24"
    PAPER_CHECK = "paper_check"
    SEPA_CREDIT_TRANSFER = "sepa_credit_transfer"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    THREE_D_SECURE = "three_d_secure"
    WECHAT = "wechat"


class SourceFlow(str, Enum):
    REDIRECT = "redirect"
    RECEIVER = "receiver"
    CODE_VERIFICATION = "code_verification"
    NONE = "none"


class SourceUsage(str, Enum):
    REUSABLE = "reusable"
    SINGLE_USE = "single_use"


class SourceStatus(str, Enum):
    CANCELED = "canceled"
    CHARGEABLE = "chargeable"
    CONSUMED = "consumed"
    FAILED = "failed"
    PENDING = "pending"


class StripeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class StripeList(StripeModel, Generic[ItemT]):
    """A page of objects returned by a list endpoint."""

    object: str = "list"
    data: list[ItemT] = Field(default_factory=list)
    has_more: bool = False
    url: str | None = None


class DeletedObject(StripeModel):
    id: str
    object: str | None = None
    deleted: bool


class Address(StripeModel):
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class TopUp(StripeModel):
    id: str
    object: str = "topup"
    amount: int
    balance_transaction: str | None = None
    created: int | None = None
    currency: str
    description: str | None = None
    expected_availability_date: int | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    source: "Source | None" = None
    statement_descriptor: str | None = None
    status: TopUpStatus
    transfer_group: str | None = None


class Authorization(StripeModel):
    """An issuing card authorization."""

    id: str
    object: str = "issuing.authorization"
    approved: bool | None = None
    authorization_method: str | None = None
    authorized_amount: int | None = None
    authorized_currency: str | None = None
    card: dict[str, Any] | None = None
    cardholder: str | None = None
    created: int | None = None
    held_amount: int | None = None
    held_currency: str | None = None
    is_held_amount_controllable: bool | None = None
    livemode: bool = False
    merchant_data: dict[str, Any] | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    pending_authorized_amount: int | None = None
    pending_held_amount: int | None = None
    status: AuthorizationStatus
    wallet_provider: str | None = None


class BalanceAmount(StripeModel):
    amount: int
    currency: str
    source_types: dict[str, int] | None = None


class Balance(StripeModel):
    object: str = "balance"
    available: list[BalanceAmount] = Field(default_factory=list)
    connect_reserved: list[BalanceAmount] | None = None
    livemode: bool = False
    pending: list[BalanceAmount] = Field(default_factory=list)


class FeeDetail(StripeModel):
    amount: int
    application: str | None = None
    currency: str
    description: str | None = None
    type: str


class BalanceTransaction(StripeModel):
    id: str
    object: str = "balance_transaction"
    amount: int
    available_on: int | None = None
    created: int | None = None
    currency: str
    description: str | None = None
    exchange_rate: float | None = None
    fee: int = 0
    fee_details: list[FeeDetail] = Field(default_factory=list)
    net: int | None = None
    source: str | None = None
    status: str | None = None
    type: str


class Location(StripeModel):
    """A terminal reader location."""

    id: str
    object: str = "terminal.location"
    address: Address | None = None
    display_name: str | None = None


class DateOfBirth(StripeModel):
    day: int | None = None
    month: int | None = None
    year: int | None = None


class PersonRelationship(StripeModel):
    account_opener: bool | None = None
    director: bool | None = None
    owner: bool | None = None
    percent_ownership: float | None = None
    title: str | None = None


class PersonVerification(StripeModel):
    details: str | None = None
    details_code: str | None = None
    document: dict[str, Any] | None = None
    status: str | None = None


class Person(StripeModel):
    id: str
    object: str = "person"
    account: str | None = None
    address: Address | None = None
    created: int | None = None
    dob: DateOfBirth | None = None
    email: str | None = None
    first_name: str | None = None
    gender: PersonGender | None = None
    id_number_provided: bool | None = None
    last_name: str | None = None
    maiden_name: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    phone: str | None = None
    relationship: PersonRelationship | None = None
    requirements: dict[str, Any] | None = None
    ssn_last_4_provided: bool | None = None
    verification: PersonVerification | None = None


class SourceOwner(StripeModel):
    address: Address | None = None
    email: str | None = None
    name: str | None = None
    phone: str | None = None
    verified_address: Address | None = None
    verified_email: str | None = None
    verified_name: str | None = None
    verified_phone: str | None = None


class Source(StripeModel):
    id: str
    object: str = "source"
    amount: int | None = None
    client_secret: str | None = None
    created: int | None = None
    currency: str | None = None
    customer: str | None = None
    flow: SourceFlow | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    owner: SourceOwner | None = None
    receiver: dict[str, Any] | None = None
    redirect: dict[str, Any] | None = None
    statement_descriptor: str | None = None
    status: SourceStatus | None = None
    type: SourceType
    usage: SourceUsage | None = None


TopUp.model_rebuild()

TopUpList = StripeList[TopUp]
AuthorizationList = StripeList[Authorization]
BalanceTransactionList = StripeList[BalanceTransaction]
LocationList = StripeList[Location]
PersonList = StripeList[Person]
