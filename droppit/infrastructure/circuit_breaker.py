"""
Circuit breaker for calls to the payment provider.

Stripe calls made by the payment intent endpoint and by the payment
confirmer go through `stripe_breaker`, so a Stripe outage fails fast
instead of piling up blocked requests.

- CLOSED: normal operation, calls pass through
- OPEN: too many consecutive failures, calls fail immediately
- HALF_OPEN: after reset_timeout one trial call is let through

Card declines are expected business outcomes and do not count as failures.
"""

import logging

import stripe
from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

logger = logging.getLogger(__name__)


class StateChangeLogger(CircuitBreakerListener):
    """Logs breaker state transitions."""

    def __init__(self, name: str):
        self.name = name

    def state_change(self, cb, old_state, new_state):
        logger.warning(
            "Circuit breaker state changed",
            extra={
                "breaker_name": self.name,
                "old_state": old_state.name if old_state else None,
                "new_state": new_state.name,
            },
        )


stripe_breaker = CircuitBreaker(
    fail_max=5,
    reset_timeout=60,
    exclude=[stripe.CardError],
    listeners=[StateChangeLogger("stripe")],
    name="stripe_circuit_breaker",
)


__all__ = [
    "stripe_breaker",
    "CircuitBreakerError",
]
