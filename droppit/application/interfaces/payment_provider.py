from dataclasses import dataclass
from typing import Literal

RedirectMode = Literal["always", "if_required"]


@dataclass
class ProviderError:
    message: str | None = None
    code: str | None = None
    type: str | None = None


@dataclass
class PaymentEntry:
    """Payment entry surface bound to one client secret."""

    client_secret: str
    payment_method_id: str | None = None

    @property
    def payment_intent_id(self) -> str:
        # client secrets look like "pi_123_secret_abc"
        return self.client_secret.split("_secret_", 1)[0]


@dataclass
class ConfirmationResult:
    error: ProviderError | None = None
    payment_intent_status: str | None = None
    redirect_url: str | None = None


class PaymentProvider:
    def create_entry(self, client_secret: str) -> PaymentEntry:
        return PaymentEntry(client_secret=client_secret)

    async def confirm_payment(
        self,
        entry: PaymentEntry,
        return_url: str,
        redirect: RedirectMode = "if_required",
    ) -> ConfirmationResult:
        raise NotImplementedError
