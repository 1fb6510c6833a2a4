"""
Checkout state machine.

    Booting     --IntentCreated-->     Ready
    Booting     --IntentFailed-->      IntentError (terminal)
    Ready       --SubmitStarted-->     Confirming
    Failed      --SubmitStarted-->     Confirming
    Confirming  --StatusReported-->    Ready(status)
    Confirming  --PaymentFailed-->     Failed
    Confirming  --PaymentSucceeded-->  Succeeded (terminal)

`PreconditionFailed` moves `Ready`/`Failed` to `Failed` without touching the
provider. `Restart` sends an idle, unpaid checkout back to `Booting` when the
host changes the order or the amount.
"""

from dataclasses import dataclass
from typing import Union

from droppit.domain.errors import InvalidCheckoutTransitionError

# States


@dataclass(frozen=True)
class Booting:
    pass


@dataclass(frozen=True)
class IntentError:
    message: str


@dataclass(frozen=True)
class Ready:
    client_secret: str
    status: str | None = None


@dataclass(frozen=True)
class Confirming:
    client_secret: str


@dataclass(frozen=True)
class Succeeded:
    order_id: str
    status: str


@dataclass(frozen=True)
class Failed:
    client_secret: str
    message: str


CheckoutState = Union[Booting, IntentError, Ready, Confirming, Succeeded, Failed]

# Events


@dataclass(frozen=True)
class IntentCreated:
    client_secret: str


@dataclass(frozen=True)
class IntentFailed:
    message: str


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class PreconditionFailed:
    message: str


@dataclass(frozen=True)
class StatusReported:
    status: str


@dataclass(frozen=True)
class PaymentFailed:
    message: str


@dataclass(frozen=True)
class PaymentSucceeded:
    order_id: str
    status: str


@dataclass(frozen=True)
class Restart:
    pass


CheckoutEvent = Union[
    IntentCreated,
    IntentFailed,
    SubmitStarted,
    PreconditionFailed,
    StatusReported,
    PaymentFailed,
    PaymentSucceeded,
    Restart,
]


def state_name(state: CheckoutState) -> str:
    return {
        Booting: "booting",
        IntentError: "error",
        Ready: "ready",
        Confirming: "confirming",
        Succeeded: "succeeded",
        Failed: "failed",
    }[type(state)]


def transition(state: CheckoutState, event: CheckoutEvent) -> CheckoutState:
    """Return the state that follows `event`, or raise for an impossible move."""
    if isinstance(event, Restart) and isinstance(state, (Booting, IntentError, Ready, Failed)):
        return Booting()

    if isinstance(state, Booting):
        if isinstance(event, IntentCreated):
            return Ready(client_secret=event.client_secret)
        if isinstance(event, IntentFailed):
            return IntentError(message=event.message)

    elif isinstance(state, (Ready, Failed)):
        if isinstance(event, SubmitStarted):
            return Confirming(client_secret=state.client_secret)
        if isinstance(event, PreconditionFailed):
            return Failed(client_secret=state.client_secret, message=event.message)

    elif isinstance(state, Confirming):
        if isinstance(event, StatusReported):
            return Ready(client_secret=state.client_secret, status=event.status)
        if isinstance(event, PaymentFailed):
            return Failed(client_secret=state.client_secret, message=event.message)
        if isinstance(event, PaymentSucceeded):
            return Succeeded(order_id=event.order_id, status=event.status)

    raise InvalidCheckoutTransitionError(state_name(state), type(event).__name__)


def available_actions(state: CheckoutState) -> tuple[str, ...]:
    if isinstance(state, IntentError):
        return ("go_back",)
    if isinstance(state, (Ready, Failed)):
        return ("submit",)
    if isinstance(state, Succeeded):
        return ("reload",)
    return ()
