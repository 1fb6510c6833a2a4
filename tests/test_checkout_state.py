import pytest

from droppit.application.checkout.state import (
    Booting,
    Confirming,
    Failed,
    IntentCreated,
    IntentError,
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
from droppit.domain.errors import InvalidCheckoutTransitionError


def test_booting_to_ready():
    assert transition(Booting(), IntentCreated("pi_1_secret_x")) == Ready(client_secret="pi_1_secret_x")


def test_booting_to_error():
    state = transition(Booting(), IntentFailed("Invalid amountCents"))
    assert state == IntentError(message="Invalid amountCents")
    assert available_actions(state) == ("go_back",)


def test_ready_submit_and_requires_action_back_to_ready():
    state = transition(Ready("cs"), SubmitStarted())
    assert state == Confirming("cs")
    assert available_actions(state) == ()

    state = transition(state, StatusReported("requires_action"))
    assert state == Ready(client_secret="cs", status="requires_action")
    assert available_actions(state) == ("submit",)


def test_failed_can_be_retried():
    state = transition(Confirming("cs"), PaymentFailed("Your card was declined."))
    assert state == Failed(client_secret="cs", message="Your card was declined.")
    assert transition(state, SubmitStarted()) == Confirming("cs")


def test_precondition_failure_skips_confirming():
    assert transition(Ready("cs"), PreconditionFailed("not ready")) == Failed("cs", "not ready")


def test_success_is_terminal():
    state = transition(Confirming("cs"), PaymentSucceeded(order_id="ord_1", status="succeeded"))
    assert state == Succeeded(order_id="ord_1", status="succeeded")
    assert available_actions(state) == ("reload",)

    with pytest.raises(InvalidCheckoutTransitionError):
        transition(state, SubmitStarted())
    with pytest.raises(InvalidCheckoutTransitionError):
        transition(state, Restart())


@pytest.mark.parametrize("state", [Booting(), IntentError("x"), Ready("cs"), Failed("cs", "x")])
def test_restart_from_idle_states(state):
    assert transition(state, Restart()) == Booting()


def test_restart_not_allowed_while_confirming():
    with pytest.raises(InvalidCheckoutTransitionError) as exc_info:
        transition(Confirming("cs"), Restart())
    assert exc_info.value.state == "confirming"


def test_impossible_move_raises():
    with pytest.raises(InvalidCheckoutTransitionError):
        transition(Booting(), SubmitStarted())


def test_state_names():
    assert [state_name(s) for s in (Booting(), IntentError("x"), Ready("cs"))] == [
        "booting",
        "error",
        "ready",
    ]
    assert state_name(Confirming("cs")) == "confirming"
    assert state_name(Succeeded("o", "succeeded")) == "succeeded"
    assert state_name(Failed("cs", "x")) == "failed"
