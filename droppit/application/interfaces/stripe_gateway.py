from dataclasses import dataclass


@dataclass
class PaymentIntentResult:
    client_secret: str | None
    payment_intent_id: str
    status: str | None = None


class StripeGateway:
    async def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        order_id: str,
    ) -> PaymentIntentResult:
        raise NotImplementedError
