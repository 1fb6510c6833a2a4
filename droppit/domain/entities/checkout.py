from dataclasses import dataclass
from typing import Any

from droppit.domain.errors import CheckoutValidationError


@dataclass(frozen=True)
class CheckoutRequest:
    """What the host application hands to the checkout flow."""

    order_id: str
    amount_cents: Any

    def validate(self) -> None:
        if not isinstance(self.order_id, str) or not self.order_id.strip():
            raise CheckoutValidationError("orderId", "must be a non-empty string")
        if isinstance(self.amount_cents, bool) or not isinstance(self.amount_cents, int):
            raise CheckoutValidationError("amountCents", "must be an integer amount in cents")

    @property
    def is_valid(self) -> bool:
        try:
            self.validate()
        except CheckoutValidationError:
            return False
        return True


@dataclass(frozen=True)
class CheckoutSucceeded:
    """Emitted once when a checkout reaches its terminal success state."""

    order_id: str
    status: str
    promoted: bool
