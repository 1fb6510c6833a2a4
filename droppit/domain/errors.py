"""Domain exceptions for the Droppit checkout flow."""


class DomainError(Exception):
    """Base class for every domain error."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Checkout ===


class CheckoutValidationError(DomainError):
    """Checkout input is missing or malformed."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Invalid '{field}': {message}",
            code="CHECKOUT_VALIDATION_ERROR",
        )
        self.field = field


class InvalidCheckoutTransitionError(DomainError):
    """The checkout state does not accept the given event."""

    def __init__(self, state: str, event: str):
        super().__init__(
            message=f"Cannot apply '{event}' while checkout is '{state}'",
            code="INVALID_CHECKOUT_TRANSITION",
        )
        self.state = state
        self.event = event


# === Payments ===


class PaymentIntentCreationError(DomainError):
    """The payment provider refused to create a payment intent."""

    def __init__(self, order_id: str, reason: str | None = None):
        super().__init__(
            message=f"Could not create payment intent for order {order_id or '<none>'}: {reason}",
            code="PAYMENT_INTENT_CREATION_FAILED",
        )
        self.order_id = order_id
        self.reason = reason


class PaymentProviderUnavailableError(DomainError):
    """The payment provider is temporarily unreachable (circuit open)."""

    def __init__(self, provider: str = "stripe"):
        super().__init__(
            message=f"Payment provider '{provider}' temporarily unavailable",
            code="PAYMENT_PROVIDER_UNAVAILABLE",
        )
        self.provider = provider
