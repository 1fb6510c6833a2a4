from droppit.application.interfaces.payment_provider import (
    ConfirmationResult,
    PaymentEntry,
    PaymentProvider,
    RedirectMode,
)


class StubPaymentProvider(PaymentProvider):
    """Answers every confirmation with a fixed result (immediate success by default)."""

    def __init__(self, result: ConfirmationResult | None = None) -> None:
        self.result = result or ConfirmationResult(payment_intent_status="succeeded")
        self.confirm_calls: list[dict] = []

    async def confirm_payment(
        self,
        entry: PaymentEntry,
        return_url: str,
        redirect: RedirectMode = "if_required",
    ) -> ConfirmationResult:
        self.confirm_calls.append(
            {"client_secret": entry.client_secret, "return_url": return_url, "redirect": redirect}
        )
        return self.result
