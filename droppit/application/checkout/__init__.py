"""Client-side checkout flow."""

from droppit.application.checkout.intent_client import IntentOutcome, PaymentIntentClient
from droppit.application.checkout.session import CheckoutSession
from droppit.application.checkout.state import (
    Booting,
    CheckoutState,
    Confirming,
    Failed,
    IntentError,
    Ready,
    Succeeded,
    available_actions,
    transition,
)

__all__ = [
    "Booting",
    "CheckoutSession",
    "CheckoutState",
    "Confirming",
    "Failed",
    "IntentError",
    "IntentOutcome",
    "PaymentIntentClient",
    "Ready",
    "Succeeded",
    "available_actions",
    "transition",
]
