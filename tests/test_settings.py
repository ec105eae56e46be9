import pytest

from stripekit.handler import build_base_headers
from stripekit.settings import DEFAULT_API_BASE_URL, DEFAULT_API_VERSION, Settings

ENV_KEYS = (
    "STRIPE_API_KEY",
    "STRIPE_API_BASE_URL",
    "STRIPE_API_VERSION",
    "STRIPE_ACCOUNT",
    "API_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("stripekit.settings.load_dotenv", lambda: False)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_load_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRIPE_API_KEY", " sk_test_abc ")
    settings = Settings.load()
    assert settings.api_key == "sk_test_abc"
    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.api_version == DEFAULT_API_VERSION
    assert settings.stripe_account is None
    assert settings.api_timeout == 30.0


def test_load_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_abc")
    monkeypatch.setenv("STRIPE_API_BASE_URL", "http://localhost:12111/")
    monkeypatch.setenv("STRIPE_API_VERSION", "2020-08-27")
    monkeypatch.setenv("STRIPE_ACCOUNT", "acct_1")
    monkeypatch.setenv("API_TIMEOUT", "7.5")
    settings = Settings.load()
    assert settings.api_base_url == "http://localhost:12111"
    assert settings.api_version == "2020-08-27"
    assert settings.stripe_account == "acct_1"
    assert settings.api_timeout == 7.5


def test_missing_api_key_is_rejected() -> None:
    with pytest.raises(ValueError, match="STRIPE_API_KEY"):
        Settings.load()


@pytest.mark.parametrize("raw", ["abc", "0", "-1"])
def test_invalid_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_abc")
    monkeypatch.setenv("API_TIMEOUT", raw)
    with pytest.raises(ValueError, match="API_TIMEOUT"):
        Settings.load()


def test_repr_hides_api_key() -> None:
    assert "sk_live_secret" not in repr(Settings(api_key="sk_live_secret"))


def test_base_headers_include_account_only_when_configured() -> None:
    headers = build_base_headers(Settings(api_key="sk_test_abc"))
    assert headers["Authorization"] == "Bearer sk_test_abc"
    assert headers["Stripe-Version"] == DEFAULT_API_VERSION
    assert "Stripe-Account" not in headers

    headers = build_base_headers(Settings(api_key="sk_test_abc", stripe_account="acct_1"))
    assert headers["Stripe-Account"] == "acct_1"
