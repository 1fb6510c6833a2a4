from droppit.application.interfaces.key_value_store import KeyValueStore
from droppit.application.interfaces.payment_provider import (
    ConfirmationResult,
    PaymentEntry,
    PaymentProvider,
    ProviderError,
)
from droppit.application.interfaces.stripe_gateway import PaymentIntentResult, StripeGateway
from droppit.application.interfaces.transaction_manager import TransactionManager

__all__ = [
    "ConfirmationResult",
    "KeyValueStore",
    "PaymentEntry",
    "PaymentIntentResult",
    "PaymentProvider",
    "ProviderError",
    "StripeGateway",
    "TransactionManager",
]
