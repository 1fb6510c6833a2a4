"""Money value object - an amount in minor units with its currency."""

from dataclasses import dataclass
from decimal import Decimal

_CURRENCY_SYMBOLS = {"usd": "$", "eur": "€", "gbp": "£", "cad": "$", "aud": "$"}


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary amount.

    Attributes:
        amount_cents: Amount in the currency's minor units (what Stripe expects).
        currency: ISO 4217 code, stored lower-case (usd, eur, ...).
    """

    amount_cents: int
    currency: str = "usd"

    def __post_init__(self) -> None:
        if isinstance(self.amount_cents, bool) or not isinstance(self.amount_cents, int):
            raise TypeError(f"amount_cents must be an int: {self.amount_cents!r}")
        if len(self.currency) != 3:
            raise ValueError(f"currency must be 3 characters: {self.currency}")
        if self.amount_cents < 0:
            raise ValueError(f"amount_cents cannot be negative: {self.amount_cents}")
        object.__setattr__(self, "currency", self.currency.lower())

    @property
    def amount(self) -> Decimal:
        return Decimal(self.amount_cents) / 100

    def display(self) -> str:
        symbol = _CURRENCY_SYMBOLS.get(self.currency)
        if symbol:
            return f"{symbol}{self.amount:.2f}"
        return f"{self.amount:.2f} {self.currency.upper()}"

    def __str__(self) -> str:
        return self.display()

    @classmethod
    def from_cents(cls, cents: int, currency: str = "usd") -> "Money":
        return cls(amount_cents=cents, currency=currency)


def format_amount(amount_cents: int, currency: str = "usd") -> str:
    """Checkout total line, e.g. 1999 -> '$19.99'."""
    return Money.from_cents(amount_cents, currency).display()
