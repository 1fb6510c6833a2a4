from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    database_url: str | None = None  # e.g. sqlite+aiosqlite:///./droppit.db
    use_in_memory: bool = True

    stripe_secret_key: str | None = Field(default=None, alias="STRIPE_SECRET_KEY")
    currency: str = "usd"
    # Smallest amount the payment intent endpoint accepts (Stripe minimum)
    min_amount_cents: int = 50

    # Where the checkout client reaches the payment intent endpoint
    checkout_base_url: str = "http://localhost:8000"
    intent_timeout_seconds: float = 10.0

    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "API_KEY"),
    )
    sizing_model_name: str = "gemini-2.0-flash"
    sizing_temperature: float = 0.2


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
