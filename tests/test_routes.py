from collections.abc import Callable
from typing import Any

import httpx
import pytest

from stripekit.client import StripeClient
from stripekit.models import (
    AuthorizationStatus,
    Currency,
    PersonGender,
    SourceFlow,
    SourceType,
    SourceUsage,
    TopUpStatus,
)
from stripekit.settings import Settings

TOPUP = {"id": "tu_1", "object": "topup", "amount": 2000, "currency": "usd", "status": "pending"}
AUTHORIZATION = {"id": "iauth_1", "object": "issuing.authorization", "status": "pending"}
LOCATION = {
    "id": "tml_1",
    "object": "terminal.location",
    "display_name": "HQ",
    "address": {"line1": "1 Main St", "city": "Springfield", "country": "US"},
}
PERSON = {"id": "person_1", "object": "person", "account": "acct_1", "first_name": "Jenny"}
SOURCE = {"id": "src_1", "object": "source", "type": "card", "flow": "none", "usage": "reusable"}


class RecordingTransport:
    """Captures every request and replies with a canned JSON payload."""

    def __init__(self, payload: dict[str, Any], status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def form(self) -> list[tuple[str, str]]:
        return list(httpx.QueryParams(self.last.content.decode()).multi_items())

    def query(self) -> list[tuple[str, str]]:
        return list(self.last.url.params.multi_items())


def _build_client(recorder: Callable[[httpx.Request], httpx.Response]) -> StripeClient:
    settings = Settings(api_key="sk_test_123", api_base_url="http://mock.local")
    return StripeClient.from_settings(settings, transport=httpx.MockTransport(recorder))


@pytest.mark.anyio
async def test_topup_create_sends_form_body() -> None:
    recorder = RecordingTransport(TOPUP)
    async with _build_client(recorder) as client:
        topup = await client.topups.create(
            amount=2000,
            currency=Currency.USD,
            description="Weekly top-up",
            metadata={"week": "12"},
        )
    assert topup.status is TopUpStatus.PENDING
    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/v1/topups"
    assert recorder.form() == [
        ("amount", "2000"),
        ("currency", "usd"),
        ("description", "Weekly top-up"),
        ("metadata[week]", "12"),
    ]


@pytest.mark.anyio
async def test_topup_update_list_and_cancel() -> None:
    recorder = RecordingTransport(TOPUP)
    async with _build_client(recorder) as client:
        await client.topups.update("tu_1", metadata={"a": "1"})
        assert recorder.last.url.path == "/v1/topups/tu_1"
        assert recorder.form() == [("metadata[a]", "1")]

        await client.topups.cancel("tu_1")
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/v1/topups/tu_1/cancel"
        assert recorder.last.content == b""

        recorder.payload = {"object": "list", "data": [TOPUP], "has_more": False, "url": "/v1/topups"}
        page = await client.topups.list_all({"limit": 1, "created": {"gte": 1554000000}})
    assert recorder.last.method == "GET"
    assert recorder.query() == [("limit", "1"), ("created[gte]", "1554000000")]
    assert [item.id for item in page.data] == ["tu_1"]
    assert page.has_more is False


@pytest.mark.anyio
async def test_authorization_actions() -> None:
    recorder = RecordingTransport(AUTHORIZATION)
    async with _build_client(recorder) as client:
        authorization = await client.authorizations.retrieve("iauth_1")
        assert authorization.status is AuthorizationStatus.PENDING
        assert recorder.last.url.path == "/v1/issuing/authorizations/iauth_1"

        await client.authorizations.approve("iauth_1", held_amount=500)
        assert recorder.last.url.path == "/v1/issuing/authorizations/iauth_1/approve"
        assert recorder.form() == [("held_amount", "500")]

        await client.authorizations.approve("iauth_1")
        assert recorder.last.content == b""

        await client.authorizations.decline("iauth_1")
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/v1/issuing/authorizations/iauth_1/decline"

        recorder.payload = {"object": "list", "data": [AUTHORIZATION]}
        await client.authorizations.list_all()
        assert recorder.last.url.path == "/v1/issuing/authorizations"
        assert recorder.last.url.query == b""


@pytest.mark.anyio
async def test_balance_routes() -> None:
    recorder = RecordingTransport(
        {"object": "balance", "available": [{"amount": 100, "currency": "usd"}], "pending": []}
    )
    async with _build_client(recorder) as client:
        balance = await client.balance.retrieve()
        assert balance.available[0].amount == 100
        assert recorder.last.url.path == "/v1/balance"

        recorder.payload = {"id": "txn_1", "amount": 100, "currency": "usd", "type": "charge"}
        transaction = await client.balance.retrieve_transaction("txn_1")
        assert transaction.fee == 0
        assert recorder.last.url.path == "/v1/balance/history/txn_1"

        recorder.payload = {"object": "list", "data": []}
        await client.balance.list_all({"type": "payout"})
        assert recorder.last.url.path == "/v1/balance/history"
        assert recorder.query() == [("type", "payout")]


@pytest.mark.anyio
async def test_location_routes() -> None:
    recorder = RecordingTransport(LOCATION)
    async with _build_client(recorder) as client:
        location = await client.locations.create(
            address={"line1": "1 Main St", "city": "Springfield", "country": "US"},
            display_name="HQ",
        )
        assert location.address is not None and location.address.city == "Springfield"
        assert recorder.form() == [
            ("address[line1]", "1 Main St"),
            ("address[city]", "Springfield"),
            ("address[country]", "US"),
            ("display_name", "HQ"),
        ]

        await client.locations.update("tml_1", display_name="Front desk")
        assert recorder.last.url.path == "/v1/terminal/locations/tml_1"
        assert recorder.form() == [("display_name", "Front desk")]

        recorder.payload = {"id": "tml_1", "object": "terminal.location", "deleted": True}
        deleted = await client.locations.delete("tml_1")
        assert deleted.deleted is True
        assert recorder.last.method == "DELETE"


@pytest.mark.anyio
async def test_person_routes() -> None:
    recorder = RecordingTransport(PERSON)
    async with _build_client(recorder) as client:
        await client.persons.create(
            "acct_1",
            first_name="Jenny",
            gender=PersonGender.FEMALE,
            dob={"day": 1, "month": 2, "year": 1990},
            relationship={"owner": True, "percent_ownership": 50},
            verification={"document": {"front": "file_1", "back": None}},
        )
        assert recorder.last.url.path == "/v1/accounts/acct_1/persons"
        assert recorder.form() == [
            ("dob[day]", "1"),
            ("dob[month]", "2"),
            ("dob[year]", "1990"),
            ("first_name", "Jenny"),
            ("gender", "female"),
            ("relationship[owner]", "true"),
            ("relationship[percent_ownership]", "50"),
            ("verification[document][front]", "file_1"),
        ]

        await client.persons.update("acct_1", "person_1", email="jenny@example.com")
        assert recorder.last.url.path == "/v1/accounts/acct_1/persons/person_1"
        assert recorder.form() == [("email", "jenny@example.com")]

        recorder.payload = {"id": "person_1", "object": "person", "deleted": True}
        await client.persons.delete("acct_1", "person_1")
        assert recorder.last.method == "DELETE"

        recorder.payload = {"object": "list", "data": [PERSON]}
        people = await client.persons.list_all("acct_1", {"relationship": {"owner": True}})
        assert recorder.query() == [("relationship[owner]", "true")]
        assert people.data[0].first_name == "Jenny"


@pytest.mark.anyio
async def test_source_routes() -> None:
    recorder = RecordingTransport(SOURCE)
    async with _build_client(recorder) as client:
        source = await client.sources.create(
            type=SourceType.CARD,
            token="tok_visa",
            usage=SourceUsage.REUSABLE,
            owner={"email": "jenny@example.com", "address": {"postal_code": "94107"}},
        )
        assert source.flow is SourceFlow.NONE
        assert recorder.form() == [
            ("type", "card"),
            ("owner[email]", "jenny@example.com"),
            ("owner[address][postal_code]", "94107"),
            ("token", "tok_visa"),
            ("usage", "reusable"),
        ]

        await client.sources.attach("src_1", "cus_1")
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/v1/customers/cus_1/sources"
        assert recorder.form() == [("source", "src_1")]

        await client.sources.detach("src_1", "cus_1")
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/v1/customers/cus_1/sources/src_1"


@pytest.mark.anyio
async def test_with_headers_leaves_shared_group_untouched() -> None:
    recorder = RecordingTransport(TOPUP)
    async with _build_client(recorder) as client:
        idempotent = client.topups.with_headers({"Idempotency-Key": "key-1"})
        await idempotent.create(amount=100, currency="usd")
        assert recorder.last.headers["Idempotency-Key"] == "key-1"

        await client.topups.create(amount=100, currency="usd")
        assert "Idempotency-Key" not in recorder.last.headers


@pytest.mark.anyio
async def test_identifiers_are_validated_before_any_request() -> None:
    recorder = RecordingTransport(TOPUP)
    async with _build_client(recorder) as client:
        with pytest.raises(ValueError):
            await client.topups.retrieve("  ")
        with pytest.raises(ValueError):
            await client.persons.retrieve("acct_1", "")
    assert recorder.requests == []
