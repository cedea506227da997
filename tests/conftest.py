"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime

import pytest

from payment_lifecycle.application.event_bus import EventBus
from payment_lifecycle.application.observers import LoggingObserver, SettlementObserver
from payment_lifecycle.application.ports import PaymentObserver
from payment_lifecycle.application.services import PaymentService
from payment_lifecycle.domain.events import PaymentCompletedEvent, PaymentRefundedEvent
from payment_lifecycle.domain.policies import DefaultDiscountPolicy, PolicyRegistry
from payment_lifecycle.infrastructure.payment_repository import InMemoryPaymentRepository
from payment_lifecycle.infrastructure.settlement_gateway import InMemorySettlementGateway
from payment_lifecycle.infrastructure.time_provider import FixedTimeProvider


class RecordingObserver(PaymentObserver):
    """Observer that remembers every event it receives, in order."""

    def __init__(self, name: str = "recorder", log: list[str] | None = None) -> None:
        self.name = name
        self.completed: list[PaymentCompletedEvent] = []
        self.refunded: list[PaymentRefundedEvent] = []
        self._log = log

    def on_payment_completed(self, event: PaymentCompletedEvent) -> None:
        self.completed.append(event)
        if self._log is not None:
            self._log.append(self.name)

    def on_payment_refunded(self, event: PaymentRefundedEvent) -> None:
        self.refunded.append(event)
        if self._log is not None:
            self._log.append(self.name)


class FailingObserver(PaymentObserver):
    """Observer that always raises."""

    def on_payment_completed(self, event: PaymentCompletedEvent) -> None:
        raise RuntimeError("observer exploded")

    def on_payment_refunded(self, event: PaymentRefundedEvent) -> None:
        raise RuntimeError("observer exploded")


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def payment_repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def settlement_gateway() -> InMemorySettlementGateway:
    return InMemorySettlementGateway()


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def event_bus(
    settlement_gateway: InMemorySettlementGateway, recorder: RecordingObserver
) -> EventBus:
    """Logging, settlement, then the recorder - in that notification order."""
    return EventBus([LoggingObserver(), SettlementObserver(settlement_gateway), recorder])


@pytest.fixture
def payment_service(
    payment_repository: InMemoryPaymentRepository,
    event_bus: EventBus,
    time_provider: FixedTimeProvider,
) -> PaymentService:
    return PaymentService(
        payment_repository=payment_repository,
        discount_policy=DefaultDiscountPolicy(),
        policy_registry=PolicyRegistry.standard(),
        event_bus=event_bus,
        time_provider=time_provider,
    )
