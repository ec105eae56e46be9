"""Path builders for API resources."""

from urllib.parse import quote

API_PREFIX = "/v1"


def _segment(value: str) -> str:
    return quote(value, safe="")


def topups() -> str:
    return f"{API_PREFIX}/topups"


def topup(topup_id: str) -> str:
    return f"{topups()}/{_segment(topup_id)}"


def topup_cancel(topup_id: str) -> str:
    return f"{topup(topup_id)}/cancel"


def authorizations() -> str:
    return f"{API_PREFIX}/issuing/authorizations"


def authorization(authorization_id: str) -> str:
    return f"{authorizations()}/{_segment(authorization_id)}"


def authorization_approve(authorization_id: str) -> str:
    return f"{authorization(authorization_id)}/approve"


def authorization_decline(authorization_id: str) -> str:
    return f"{authorization(authorization_id)}/decline"


def balance() -> str:
    return f"{API_PREFIX}/balance"


def balance_history() -> str:
    return f"{balance()}/history"


def balance_transaction(transaction_id: str) -> str:
    return f"{balance_history()}/{_segment(transaction_id)}"


def locations() -> str:
    return f"{API_PREFIX}/terminal/locations"


def location(location_id: str) -> str:
    return f"{locations()}/{_segment(location_id)}"


def persons(account_id: str) -> str:
    return f"{API_PREFIX}/accounts/{_segment(account_id)}/persons"


def person(account_id: str, person_id: str) -> str:
    return f"{persons(account_id)}/{_segment(person_id)}"


def sources() -> str:
    return f"{API_PREFIX}/sources"


def source(source_id: str) -> str:
    return f"{sources()}/{_segment(source_id)}"


def customer_sources(customer_id: str) -> str:
    return f"{API_PREFIX}/customers/{_segment(customer_id)}/sources"


def customer_source(customer_id: str, source_id: str) -> str:
    return f"{customer_sources(customer_id)}/{_segment(source_id)}"
