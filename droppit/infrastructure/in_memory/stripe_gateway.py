from uuid import uuid4

from droppit.application.interfaces.stripe_gateway import PaymentIntentResult, StripeGateway


class StubStripeGateway(StripeGateway):
    def __init__(self) -> None:
        self.created: list[dict] = []

    async def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        order_id: str,
    ) -> PaymentIntentResult:
        intent_id = f"pi_{uuid4().hex[:14]}"
        self.created.append(
            {
                "id": intent_id,
                "amount": amount_cents,
                "currency": currency,
                "metadata": {"orderId": order_id},
            }
        )
        return PaymentIntentResult(
            client_secret=f"{intent_id}_secret_{uuid4().hex[:10]}",
            payment_intent_id=intent_id,
            status="requires_payment_method",
        )
