"""
Infrastructure layer - Droppit checkout.

Concrete adapters for the application ports.

Layout:
- db/: SQL key-value store and transaction manager
- gateways/: Stripe adapters (payment intents, confirmation)
- in_memory/: in-memory implementations for development and tests
- circuit_breaker.py: breaker around Stripe calls
"""

from droppit.infrastructure.db.key_value_store_sql import KeyValueStoreSQL
from droppit.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from droppit.infrastructure.gateways.stripe_gateway_real import StripeGatewayReal
from droppit.infrastructure.gateways.stripe_payment_provider import StripePaymentProvider
from droppit.infrastructure.in_memory import (
    InMemoryKeyValueStore,
    InMemoryTransactionManager,
    StubPaymentProvider,
    StubStripeGateway,
)

__all__ = [
    "KeyValueStoreSQL",
    "SQLAlchemyTransactionManager",
    "StripeGatewayReal",
    "StripePaymentProvider",
    "InMemoryKeyValueStore",
    "InMemoryTransactionManager",
    "StubPaymentProvider",
    "StubStripeGateway",
]
