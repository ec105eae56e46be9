"""Environment-driven configuration for the payments API client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://api.stripe.com"
DEFAULT_API_VERSION = "2019-05-16"


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for client configuration."""

    api_key: str
    api_base_url: str = DEFAULT_API_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    stripe_account: str | None = None
    api_timeout: float = 30.0

    def __repr__(self) -> str:
        return (
            f"Settings(api_key='***', api_base_url={self.api_base_url!r}, "
            f"api_version={self.api_version!r}, stripe_account={self.stripe_account!r}, "
            f"api_timeout={self.api_timeout!r})"
        )

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so developers can keep test keys in a local .env
        file without exporting them globally.
        """
        load_dotenv()

        api_key = os.getenv("STRIPE_API_KEY", "").strip()
        if not api_key:
            raise ValueError("STRIPE_API_KEY is required but was not provided.")

        api_base_url = os.getenv("STRIPE_API_BASE_URL", "").strip() or DEFAULT_API_BASE_URL
        api_version = os.getenv("STRIPE_API_VERSION", "").strip() or DEFAULT_API_VERSION
        stripe_account = os.getenv("STRIPE_ACCOUNT", "").strip() or None

        api_timeout_raw = os.getenv("API_TIMEOUT", "").strip() or "30"
        try:
            api_timeout = float(api_timeout_raw)
        except ValueError as exc:
            raise ValueError("API_TIMEOUT must be a numeric value.") from exc
        if api_timeout <= 0:
            raise ValueError("API_TIMEOUT must be greater than zero.")

        return cls(
            api_key=api_key,
            api_base_url=api_base_url.rstrip("/"),
            api_version=api_version,
            stripe_account=stripe_account,
            api_timeout=api_timeout,
        )
