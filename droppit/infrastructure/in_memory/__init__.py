"""In-memory implementations for development and tests."""

from droppit.infrastructure.in_memory.key_value_store import InMemoryKeyValueStore
from droppit.infrastructure.in_memory.payment_provider import StubPaymentProvider
from droppit.infrastructure.in_memory.stripe_gateway import StubStripeGateway
from droppit.infrastructure.in_memory.transaction_manager import (
    NoopTransactionManager as InMemoryTransactionManager,
)

__all__ = [
    "InMemoryKeyValueStore",
    "InMemoryTransactionManager",
    "StubPaymentProvider",
    "StubStripeGateway",
]
