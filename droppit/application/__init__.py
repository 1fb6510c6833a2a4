"""
Application layer - Droppit checkout.

Orchestrates the checkout flow and defines the ports the infrastructure implements.

Layout:
- checkout/: client-side checkout session (state machine, intent client)
- use_cases/: payment intent creation, pending booking promotion, sizing
- interfaces/: ports (Stripe, payment provider, key-value store, transactions)
- booking_store.py: booking collection over a key-value store
"""

from droppit.application.interfaces import (
    ConfirmationResult,
    KeyValueStore,
    PaymentEntry,
    PaymentIntentResult,
    PaymentProvider,
    ProviderError,
    StripeGateway,
    TransactionManager,
)

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
