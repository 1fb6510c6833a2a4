"""
Domain layer - Droppit checkout.

Pure business rules with no framework dependencies.

Layout:
- entities/: checkout request and the success event
- value_objects/: immutable values (Money)
- errors.py: domain exceptions
- constants.py: storage keys and payment statuses
"""

from droppit.domain.constants import (
    BOOKINGS_KEY,
    CHECKOUT_SUCCESS_KEY,
    LAST_PAID_ORDER_KEY,
    PAYMENT_SUCCESS_STATUSES,
    PENDING_BOOKING_KEY,
)
from droppit.domain.entities import CheckoutRequest, CheckoutSucceeded
from droppit.domain.errors import (
    CheckoutValidationError,
    DomainError,
    InvalidCheckoutTransitionError,
    PaymentIntentCreationError,
    PaymentProviderUnavailableError,
)
from droppit.domain.value_objects import Money, format_amount

__all__ = [
    "BOOKINGS_KEY",
    "CHECKOUT_SUCCESS_KEY",
    "LAST_PAID_ORDER_KEY",
    "PAYMENT_SUCCESS_STATUSES",
    "PENDING_BOOKING_KEY",
    "CheckoutRequest",
    "CheckoutSucceeded",
    "CheckoutValidationError",
    "DomainError",
    "InvalidCheckoutTransitionError",
    "Money",
    "PaymentIntentCreationError",
    "PaymentProviderUnavailableError",
    "format_amount",
]
