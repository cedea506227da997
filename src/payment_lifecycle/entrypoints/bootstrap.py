"""Composition root.

Wires policies, observers and adapters explicitly; nothing is discovered
implicitly. Observer order here is notification order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from payment_lifecycle.application.event_bus import EventBus
from payment_lifecycle.application.observers import LoggingObserver, SettlementObserver
from payment_lifecycle.application.services import PaymentService
from payment_lifecycle.config import Settings
from payment_lifecycle.domain.policies import DefaultDiscountPolicy, PolicyRegistry
from payment_lifecycle.domain.value_objects import Money
from payment_lifecycle.infrastructure import (
    InMemoryPaymentRepository,
    InMemorySettlementGateway,
    SystemTimeProvider,
)
from payment_lifecycle.infrastructure.logging import configure_logging

if TYPE_CHECKING:
    from payment_lifecycle.application.ports import (
        PaymentObserver,
        PaymentRepository,
        SettlementGateway,
        TimeProvider,
    )


def build_observers(settings: Settings, gateway: SettlementGateway) -> list[PaymentObserver]:
    return [
        LoggingObserver(),
        SettlementObserver(gateway, threshold=Money(amount=settings.settlement_threshold)),
    ]


def build_payment_service(
    settings: Settings | None = None,
    *,
    payment_repository: PaymentRepository | None = None,
    settlement_gateway: SettlementGateway | None = None,
    time_provider: TimeProvider | None = None,
    extra_observers: list[PaymentObserver] | None = None,
) -> PaymentService:
    """Build a PaymentService from settings.

    In-memory adapters and the system clock are used for any port not
    supplied. ``extra_observers`` are notified after the built-in ones.
    """
    if settings is None:
        settings = Settings()
    if payment_repository is None:
        payment_repository = InMemoryPaymentRepository()
    if settlement_gateway is None:
        settlement_gateway = InMemorySettlementGateway()
    if time_provider is None:
        time_provider = SystemTimeProvider()

    observers = build_observers(settings, settlement_gateway)
    observers.extend(extra_observers or [])

    return PaymentService(
        payment_repository=payment_repository,
        discount_policy=DefaultDiscountPolicy(
            vip_rate=settings.vip_discount_rate,
            regular_rate=settings.regular_discount_rate,
        ),
        policy_registry=PolicyRegistry.standard(),
        event_bus=EventBus(observers),
        time_provider=time_provider,
    )


def bootstrap(settings: Settings | None = None) -> PaymentService:
    """Configure logging and return a ready PaymentService."""
    if settings is None:
        settings = Settings()
    configure_logging(settings.log_level, json_output=settings.log_json)
    return build_payment_service(settings)
