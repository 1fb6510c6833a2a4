import asyncio
import logging
from collections.abc import Callable
from typing import Any
from urllib.parse import quote

from droppit.application.checkout.intent_client import PaymentIntentClient
from droppit.application.checkout.state import (
    Booting,
    CheckoutEvent,
    CheckoutState,
    Confirming,
    Failed,
    IntentCreated,
    IntentFailed,
    PaymentFailed,
    PaymentSucceeded,
    PreconditionFailed,
    Ready,
    Restart,
    StatusReported,
    SubmitStarted,
    Succeeded,
    available_actions,
    state_name,
    transition,
)
from droppit.application.interfaces.payment_provider import PaymentEntry, PaymentProvider
from droppit.application.use_cases.promote_pending_booking import PromotePendingBookingUseCase
from droppit.domain.constants import (
    GENERIC_CONFIRMATION_ERROR_MESSAGE,
    GENERIC_PAYMENT_FAILURE_MESSAGE,
    PAYMENT_SUCCESS_STATUSES,
)
from droppit.domain.entities.checkout import CheckoutRequest, CheckoutSucceeded
from droppit.domain.errors import CheckoutValidationError
from droppit.domain.value_objects.money import format_amount

logger = logging.getLogger(__name__)

SuccessListener = Callable[[CheckoutSucceeded], Any]

INVALID_REQUEST_MESSAGE = "Missing or invalid orderId/amountCents."
PROVIDER_NOT_READY_MESSAGE = "Payment form is still loading. Please wait a moment and try again."
PAYMENT_SETUP_FAILED_MESSAGE = "Payment setup failed. Please try again later."


class _Liveness:
    """Captured by an in-flight initialization; killed when its result stops mattering."""

    __slots__ = ("alive",)

    def __init__(self) -> None:
        self.alive = True


class CheckoutSession:
    """
    One checkout, from payment intent creation to the promoted booking.

    The session is the Python counterpart of the checkout screen: `mount()`
    requests the payment intent, `submit()` confirms the payment with the
    provider, and on success the pending booking is promoted and every
    subscriber receives a single `CheckoutSucceeded` event.

    Everything runs on the caller's event loop. Failures never escape to the
    host; they end up in `state` as a message to display.
    """

    def __init__(
        self,
        request: CheckoutRequest,
        intent_client: PaymentIntentClient,
        promoter: PromotePendingBookingUseCase,
        provider: PaymentProvider | None = None,
        return_url_base: str = "",
        on_success: Callable[[], Any] | None = None,
    ) -> None:
        self._request = request
        self._intent_client = intent_client
        self._promoter = promoter
        self._provider = provider
        self._return_url_base = return_url_base.rstrip("/")

        self._state: CheckoutState = Booting()
        self._entry: PaymentEntry | None = None
        self._liveness: _Liveness | None = None
        self._init_task: asyncio.Task | None = None
        self._mounted = False
        self._unmounted = False
        self._listeners: list[SuccessListener] = []
        self._success_emitted = False

        self.loading = False
        self.redirect_url: str | None = None

        if on_success is not None:
            self.subscribe(lambda _event: on_success())

    # Introspection

    @property
    def state(self) -> CheckoutState:
        return self._state

    @property
    def state_name(self) -> str:
        return state_name(self._state)

    @property
    def request(self) -> CheckoutRequest:
        return self._request

    @property
    def entry(self) -> PaymentEntry | None:
        return self._entry

    @property
    def actions(self) -> tuple[str, ...]:
        return available_actions(self._state)

    @property
    def can_submit(self) -> bool:
        return not self.loading and "submit" in self.actions

    @property
    def total_display(self) -> str:
        if not self._request.is_valid or self._request.amount_cents < 0:
            return ""
        return format_amount(self._request.amount_cents)

    def subscribe(self, listener: SuccessListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Lifecycle

    def mount(self) -> asyncio.Task:
        """Start the payment intent request. Must be called from a running loop."""
        if self._unmounted:
            raise RuntimeError("Checkout session was unmounted; start a new one")
        if self._mounted and self._init_task is not None:
            return self._init_task
        self._mounted = True
        return self._start_initialization()

    def unmount(self) -> None:
        """Tear down the session. Late payment intent responses are dropped."""
        self._mounted = False
        self._unmounted = True
        self._abandon_initialization()

    def update_request(self, order_id: str, amount_cents: Any) -> asyncio.Task | None:
        """
        Re-initialize when the order or the amount changes; no-op otherwise.

        Ignored while a confirmation is in flight and after success.
        """
        new_request = CheckoutRequest(order_id=order_id, amount_cents=amount_cents)
        if new_request == self._request or isinstance(self._state, (Confirming, Succeeded)):
            return None
        self._apply(Restart())
        self._abandon_initialization()
        self._request = new_request
        self._entry = None
        self.redirect_url = None
        if not self._mounted:
            return None
        return self._start_initialization()

    def attach_provider(self, provider: PaymentProvider) -> None:
        self._provider = provider
        if isinstance(self._state, (Ready, Failed)) and self._entry is None:
            self._entry = provider.create_entry(self._state.client_secret)

    def enter_payment_details(self, payment_method_id: str) -> None:
        if self._entry is not None:
            self._entry.payment_method_id = payment_method_id

    # Intent initialization

    def _start_initialization(self) -> asyncio.Task:
        liveness = _Liveness()
        self._liveness = liveness
        self._init_task = asyncio.get_running_loop().create_task(
            self._initialize(self._request, liveness)
        )
        return self._init_task

    def _abandon_initialization(self) -> None:
        if self._liveness is not None:
            self._liveness.alive = False
        self._liveness = None
        self._init_task = None

    async def _initialize(self, request: CheckoutRequest, liveness: _Liveness) -> None:
        try:
            request.validate()
        except CheckoutValidationError as exc:
            logger.info("Checkout request rejected before payment setup", extra={"reason": exc.message})
            self._apply(IntentFailed(INVALID_REQUEST_MESSAGE))
            return

        try:
            outcome = await self._intent_client.create(request)

            if not liveness.alive:
                logger.debug(
                    "Discarding payment intent response for an abandoned checkout",
                    extra={"order_id": request.order_id},
                )
                return

            if outcome.error is not None:
                self._apply(IntentFailed(outcome.error))
                return

            entry = None
            if self._provider is not None:
                entry = self._provider.create_entry(outcome.client_secret)
            self._apply(IntentCreated(outcome.client_secret))
            self._entry = entry
        except Exception as exc:  # noqa: BLE001
            if not liveness.alive:
                return
            logger.error(
                "Payment setup raised",
                exc_info=exc,
                extra={"order_id": request.order_id},
            )
            self._apply(IntentFailed(PAYMENT_SETUP_FAILED_MESSAGE))

    # Payment confirmation

    def _precondition_error(self) -> str | None:
        try:
            self._request.validate()
        except CheckoutValidationError:
            return INVALID_REQUEST_MESSAGE
        if self._provider is None or self._entry is None:
            return PROVIDER_NOT_READY_MESSAGE
        return None

    def _return_url(self) -> str:
        return f"{self._return_url_base}/review?orderId={quote(self._request.order_id)}"

    async def submit(self) -> CheckoutState:
        """Confirm the payment. Ignored while a confirmation is running or after success."""
        if not self.can_submit:
            return self._state

        problem = self._precondition_error()
        if problem is not None:
            self._apply(PreconditionFailed(problem))
            return self._state

        order_id = self._request.order_id
        succeeded_event: CheckoutSucceeded | None = None

        self.loading = True
        self._apply(SubmitStarted())
        try:
            result = await self._provider.confirm_payment(
                self._entry,
                return_url=self._return_url(),
                redirect="if_required",
            )
            self.redirect_url = result.redirect_url

            if result.error is not None:
                logger.warning(
                    "Payment declined by provider",
                    extra={"order_id": order_id, "provider_code": result.error.code},
                )
                self._apply(PaymentFailed(result.error.message or GENERIC_PAYMENT_FAILURE_MESSAGE))
            elif result.payment_intent_status in PAYMENT_SUCCESS_STATUSES:
                promoted = await self._promote(order_id)
                self._apply(PaymentSucceeded(order_id=order_id, status=result.payment_intent_status))
                succeeded_event = CheckoutSucceeded(
                    order_id=order_id,
                    status=result.payment_intent_status,
                    promoted=promoted,
                )
            else:
                self._apply(StatusReported(result.payment_intent_status or "unknown"))
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "Payment confirmation raised",
                exc_info=exc,
                extra={"order_id": order_id},
            )
            self._apply(PaymentFailed(str(exc) or GENERIC_CONFIRMATION_ERROR_MESSAGE))
        finally:
            self.loading = False

        if succeeded_event is not None:
            self._emit_success(succeeded_event)
        return self._state

    async def _promote(self, order_id: str) -> bool:
        # payment is already taken here; the checkout stays succeeded either way
        try:
            return await self._promoter.execute(order_id)
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "Pending booking promotion failed after payment",
                exc_info=exc,
                extra={"order_id": order_id},
            )
            return False

    def _emit_success(self, event: CheckoutSucceeded) -> None:
        if self._success_emitted:
            return
        self._success_emitted = True
        logger.info(
            "Checkout succeeded",
            extra={"order_id": event.order_id, "status": event.status, "promoted": event.promoted},
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as exc:  # noqa: BLE001
                logger.error("Checkout success listener failed", exc_info=exc)

    def _apply(self, event: CheckoutEvent) -> None:
        self._state = transition(self._state, event)


__all__ = [
    "CheckoutSession",
    "INVALID_REQUEST_MESSAGE",
    "PAYMENT_SETUP_FAILED_MESSAGE",
    "PROVIDER_NOT_READY_MESSAGE",
]
