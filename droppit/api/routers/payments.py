import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from droppit.api.dependencies import get_use_cases
from droppit.api.schemas.payments import (
    CreatePaymentIntentRequest,
    CreatePaymentIntentResponse,
    ErrorResponse,
)
from droppit.config import Settings, get_settings
from droppit.domain.errors import PaymentIntentCreationError, PaymentProviderUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _validation_message(exc: ValidationError) -> str:
    fields = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
    if not fields or "amountCents" in fields:
        return "Invalid amountCents"
    return f"Invalid {sorted(fields)[0]}"


@router.post(
    "/create-payment-intent",
    response_model=CreatePaymentIntentResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def create_payment_intent(
    request: Request,
    use_cases=Depends(get_use_cases),
    settings: Settings = Depends(get_settings),
):
    try:
        body = await request.json()
    except ValueError:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")
    if not isinstance(body, dict):
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")

    try:
        payload = CreatePaymentIntentRequest.model_validate(body)
    except ValidationError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, _validation_message(exc))

    if payload.amount_cents < settings.min_amount_cents:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid amountCents")

    try:
        return await use_cases["create_payment_intent"].execute(payload)
    except PaymentProviderUnavailableError:
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "Payment service temporarily unavailable")
    except PaymentIntentCreationError as exc:
        logger.error("Stripe error", extra={"order_id": payload.order_id, "reason": exc.reason})
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Stripe error")


@router.api_route(
    "/create-payment-intent",
    methods=["GET", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def create_payment_intent_method_not_allowed() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content={"error": "Method not allowed"},
        headers={"Allow": "POST"},
    )
