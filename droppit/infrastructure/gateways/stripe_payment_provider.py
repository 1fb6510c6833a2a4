import logging
from typing import Any

import stripe

from droppit.application.interfaces.payment_provider import (
    ConfirmationResult,
    PaymentEntry,
    PaymentProvider,
    ProviderError,
    RedirectMode,
)
from droppit.config import get_settings
from droppit.infrastructure.circuit_breaker import stripe_breaker

logger = logging.getLogger(__name__)


def _redirect_url(intent: Any) -> str | None:
    next_action = getattr(intent, "next_action", None)
    if not next_action or getattr(next_action, "type", None) != "redirect_to_url":
        return None
    redirect = getattr(next_action, "redirect_to_url", None)
    return getattr(redirect, "url", None)


class StripePaymentProvider(PaymentProvider):
    """
    Confirms PaymentIntents through the Stripe API.

    Declines and rejected parameters come back as `ConfirmationResult.error`
    the same way Stripe.js reports them; connection problems and an open
    circuit are raised to the caller.
    """

    def __init__(self, api_key: str | None = None) -> None:
        settings = get_settings()
        stripe.api_key = api_key or settings.stripe_secret_key
        stripe.max_network_retries = 2

    async def confirm_payment(
        self,
        entry: PaymentEntry,
        return_url: str,
        redirect: RedirectMode = "if_required",
    ) -> ConfirmationResult:
        params: dict[str, Any] = {"return_url": return_url}
        if entry.payment_method_id:
            params["payment_method"] = entry.payment_method_id

        try:
            intent = stripe_breaker.call(
                stripe.PaymentIntent.confirm,
                entry.payment_intent_id,
                **params,
            )
        except (stripe.CardError, stripe.InvalidRequestError) as exc:
            logger.warning(
                "Stripe rejected payment confirmation",
                extra={
                    "payment_intent_id": entry.payment_intent_id,
                    "stripe_code": exc.code,
                },
            )
            error_type = "card_error" if isinstance(exc, stripe.CardError) else "invalid_request_error"
            return ConfirmationResult(
                error=ProviderError(message=exc.user_message, code=exc.code, type=error_type)
            )

        redirect_url = _redirect_url(intent)
        if redirect == "always" and redirect_url is None:
            redirect_url = return_url
        return ConfirmationResult(
            payment_intent_status=intent.status,
            redirect_url=redirect_url,
        )
