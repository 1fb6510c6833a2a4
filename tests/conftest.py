"""
Pytest configuration and shared fixtures.

Provides:
- In-memory local store, booking store and promoter
- FastAPI TestClient with swappable Stripe gateway
- Sample pending booking payloads
- Circuit breaker reset between tests
"""

import json
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from droppit.api.dependencies import get_use_cases
from droppit.application.booking_store import BookingStore
from droppit.application.use_cases.create_payment_intent import CreatePaymentIntentUseCase
from droppit.application.use_cases.promote_pending_booking import PromotePendingBookingUseCase
from droppit.domain.constants import PENDING_BOOKING_KEY
from droppit.infrastructure.circuit_breaker import stripe_breaker
from droppit.infrastructure.in_memory.key_value_store import InMemoryKeyValueStore
from droppit.infrastructure.in_memory.stripe_gateway import StubStripeGateway
from droppit.infrastructure.in_memory.transaction_manager import NoopTransactionManager
from droppit.main import app

# ============================================================================
# LOCAL STORE
# ============================================================================


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def booking_store(kv_store) -> BookingStore:
    return BookingStore(kv_store)


@pytest.fixture
def promoter(booking_store) -> PromotePendingBookingUseCase:
    return PromotePendingBookingUseCase(
        booking_store=booking_store,
        transaction_manager=NoopTransactionManager(),
    )


@pytest.fixture
def pending_booking():
    """Pending booking as the web client stages it before checkout."""
    return {
        "id": "ord_1",
        "pickupAddress": "12 Harbour St",
        "dropoffAddress": "98 Market Ave",
        "size": "Medium",
        "amountCents": 1999,
        "status": "pending",
    }


@pytest.fixture
def staged_kv_store(kv_store, pending_booking) -> InMemoryKeyValueStore:
    """Store with `pending_booking` already in the pending slot."""
    kv_store._items[PENDING_BOOKING_KEY] = json.dumps(pending_booking)
    return kv_store


# ============================================================================
# HTTP CLIENT
# ============================================================================


@pytest.fixture
def stub_gateway() -> StubStripeGateway:
    return StubStripeGateway()


@pytest.fixture
def client(stub_gateway) -> Generator[TestClient, None, None]:
    """TestClient whose payment intents go to `stub_gateway`."""
    app.dependency_overrides[get_use_cases] = lambda: {
        "create_payment_intent": CreatePaymentIntentUseCase(stripe_gateway=stub_gateway),
    }
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============================================================================
# PYTEST MARKERS
# ============================================================================


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "circuit_breaker: tests that drive the Stripe circuit breaker",
    )


@pytest.fixture(autouse=True)
def reset_circuit_breakers():
    """Keep a breaker opened by one test from failing the next."""
    stripe_breaker.close()
    yield
    stripe_breaker.close()
