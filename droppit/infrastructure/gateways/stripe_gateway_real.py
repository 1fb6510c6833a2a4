import logging

import stripe

from droppit.application.interfaces.stripe_gateway import PaymentIntentResult, StripeGateway
from droppit.config import get_settings
from droppit.domain.errors import PaymentIntentCreationError, PaymentProviderUnavailableError
from droppit.infrastructure.circuit_breaker import CircuitBreakerError, stripe_breaker

logger = logging.getLogger(__name__)


class StripeGatewayReal(StripeGateway):
    def __init__(self, api_key: str | None = None) -> None:
        settings = get_settings()
        stripe.api_key = api_key or settings.stripe_secret_key
        stripe.max_network_retries = 2

    async def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        order_id: str,
    ) -> PaymentIntentResult:
        """
        Create a PaymentIntent with automatic payment methods enabled.

        The order id travels in the intent metadata so the payment can be
        traced back from the Stripe dashboard.

        Raises:
            PaymentProviderUnavailableError: When the circuit is open
            PaymentIntentCreationError: When the Stripe API call fails
        """
        try:
            # stripe has no async client; the sync call is short-lived
            intent = stripe_breaker.call(
                stripe.PaymentIntent.create,
                amount=amount_cents,
                currency=currency,
                automatic_payment_methods={"enabled": True},
                metadata={"orderId": order_id or ""},
            )
        except CircuitBreakerError as exc:
            logger.error(
                "Stripe circuit breaker is open - service unavailable",
                extra={"order_id": order_id, "circuit_state": str(exc)},
            )
            raise PaymentProviderUnavailableError("stripe") from exc
        except stripe.StripeError as exc:
            logger.error(
                "Stripe API error while creating payment intent",
                exc_info=exc,
                extra={"order_id": order_id, "amount_cents": amount_cents},
            )
            raise PaymentIntentCreationError(order_id, exc.user_message or str(exc)) from exc

        return PaymentIntentResult(
            client_secret=intent.client_secret,
            payment_intent_id=intent.id,
            status=intent.status,
        )
