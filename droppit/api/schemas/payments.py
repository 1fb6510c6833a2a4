from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from droppit.domain.constants import DEFAULT_CURRENCY


class CreatePaymentIntentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    amount_cents: StrictInt = Field(alias="amountCents")
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)
    order_id: str = Field(default="", alias="orderId")

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, value: str) -> str:
        return value.lower()

    @field_validator("order_id", mode="before")
    @classmethod
    def default_missing_order_id(cls, value):
        return "" if value is None else value


class CreatePaymentIntentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(alias="clientSecret")
    payment_intent_id: str = Field(alias="paymentIntentId")


class ErrorResponse(BaseModel):
    error: str


class SizingSuggestionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    description: str = Field(min_length=1, max_length=2000)


class SizingSuggestionResponse(BaseModel):
    recommendation: str
