import logging
from dataclasses import dataclass
from typing import Any

import httpx

from droppit.domain.constants import DEFAULT_CURRENCY, MISSING_CLIENT_SECRET_MESSAGE
from droppit.domain.entities.checkout import CheckoutRequest

logger = logging.getLogger(__name__)

CREATE_PAYMENT_INTENT_PATH = "/api/create-payment-intent"


@dataclass(frozen=True)
class IntentOutcome:
    client_secret: str | None = None
    error: str | None = None


def _error_message(body: Any, status_code: int) -> str:
    if isinstance(body, dict):
        for field in ("error", "message", "detail"):
            value = body.get(field)
            if isinstance(value, str) and value:
                return value
    return f"Payment setup failed (HTTP {status_code})."


class PaymentIntentClient:
    """HTTP client for the create-payment-intent endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        currency: str = DEFAULT_CURRENCY,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._currency = currency
        self._transport = transport

    async def create(self, request: CheckoutRequest) -> IntentOutcome:
        """
        Ask the server for a client secret.

        Never raises: HTTP failures, malformed bodies and transport errors are
        all turned into an `IntentOutcome` carrying a displayable message.
        """
        payload = {
            "orderId": request.order_id,
            "amountCents": request.amount_cents,
            "currency": self._currency,
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(CREATE_PAYMENT_INTENT_PATH, json=payload)
        except httpx.HTTPError as exc:
            logger.warning(
                "Payment intent request failed",
                extra={"order_id": request.order_id, "error": str(exc)},
            )
            return IntentOutcome(error="Could not reach the payment server. Please try again later.")

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success or not isinstance(body, dict):
            return IntentOutcome(error=_error_message(body, response.status_code))

        client_secret = body.get("clientSecret")
        if not isinstance(client_secret, str) or not client_secret:
            return IntentOutcome(error=MISSING_CLIENT_SECRET_MESSAGE)
        return IntentOutcome(client_secret=client_secret)
