import logging

from droppit.api.schemas.payments import CreatePaymentIntentRequest, CreatePaymentIntentResponse
from droppit.application.interfaces.stripe_gateway import StripeGateway
from droppit.domain.errors import PaymentIntentCreationError


class CreatePaymentIntentUseCase:
    def __init__(self, stripe_gateway: StripeGateway) -> None:
        self._stripe_gateway = stripe_gateway
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: CreatePaymentIntentRequest) -> CreatePaymentIntentResponse:
        result = await self._stripe_gateway.create_payment_intent(
            amount_cents=request.amount_cents,
            currency=request.currency,
            order_id=request.order_id,
        )
        if not result.client_secret:
            raise PaymentIntentCreationError(request.order_id, "missing client_secret")

        self._logger.info(
            "Payment intent created",
            extra={
                "order_id": request.order_id,
                "payment_intent_id": result.payment_intent_id,
                "amount_cents": request.amount_cents,
            },
        )
        return CreatePaymentIntentResponse(
            client_secret=result.client_secret,
            payment_intent_id=result.payment_intent_id,
        )
