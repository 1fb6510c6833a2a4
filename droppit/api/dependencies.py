from functools import lru_cache
from typing import Any, Callable

import httpx
from fastapi import Depends

from droppit.application.booking_store import BookingStore
from droppit.application.checkout.intent_client import PaymentIntentClient
from droppit.application.checkout.session import CheckoutSession
from droppit.application.interfaces.key_value_store import KeyValueStore
from droppit.application.interfaces.payment_provider import PaymentProvider
from droppit.application.interfaces.transaction_manager import TransactionManager
from droppit.application.use_cases.create_payment_intent import CreatePaymentIntentUseCase
from droppit.application.use_cases.promote_pending_booking import PromotePendingBookingUseCase
from droppit.config import Settings, get_settings
from droppit.domain.entities.checkout import CheckoutRequest
from droppit.infrastructure.gateways.stripe_gateway_real import StripeGatewayReal
from droppit.infrastructure.gateways.stripe_payment_provider import StripePaymentProvider
from droppit.infrastructure.in_memory.key_value_store import InMemoryKeyValueStore
from droppit.infrastructure.in_memory.payment_provider import StubPaymentProvider
from droppit.infrastructure.in_memory.stripe_gateway import StubStripeGateway
from droppit.infrastructure.in_memory.transaction_manager import NoopTransactionManager


@lru_cache(maxsize=1)
def _in_memory_bundle():
    return {
        "kv_store": InMemoryKeyValueStore(),
        "stripe_gateway": StubStripeGateway(),
        "payment_provider": StubPaymentProvider(),
        "tx_manager": NoopTransactionManager(),
    }


def get_use_cases(settings: Settings = Depends(get_settings)):
    if settings.use_in_memory:
        bundle = _in_memory_bundle()
        return {
            "create_payment_intent": CreatePaymentIntentUseCase(
                stripe_gateway=bundle["stripe_gateway"],
            ),
        }

    return {
        "create_payment_intent": CreatePaymentIntentUseCase(
            stripe_gateway=StripeGatewayReal(api_key=settings.stripe_secret_key),
        ),
    }


def build_checkout_session(
    order_id: str,
    amount_cents: Any,
    kv_store: KeyValueStore | None = None,
    provider: PaymentProvider | None = None,
    transaction_manager: TransactionManager | None = None,
    on_success: Callable[[], Any] | None = None,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CheckoutSession:
    """
    Wire a CheckoutSession for the host application.

    Without explicit collaborators the session uses the in-memory store and,
    depending on `use_in_memory`, the stub or the Stripe payment provider.
    """
    settings = settings or get_settings()
    if kv_store is None:
        kv_store = _in_memory_bundle()["kv_store"]
        transaction_manager = transaction_manager or _in_memory_bundle()["tx_manager"]
    if provider is None:
        provider = (
            _in_memory_bundle()["payment_provider"]
            if settings.use_in_memory
            else StripePaymentProvider(api_key=settings.stripe_secret_key)
        )

    return CheckoutSession(
        request=CheckoutRequest(order_id=order_id, amount_cents=amount_cents),
        intent_client=PaymentIntentClient(
            base_url=settings.checkout_base_url,
            timeout_seconds=settings.intent_timeout_seconds,
            currency=settings.currency,
            transport=transport,
        ),
        promoter=PromotePendingBookingUseCase(
            booking_store=BookingStore(kv_store),
            transaction_manager=transaction_manager or NoopTransactionManager(),
        ),
        provider=provider,
        return_url_base=settings.checkout_base_url,
        on_success=on_success,
    )
