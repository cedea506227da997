"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory payment repository
- Time Provider: Clock abstraction for testability
- Settlement: Recording settlement gateway
- Logging: structlog configuration

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_lifecycle.infrastructure.payment_repository import InMemoryPaymentRepository
from payment_lifecycle.infrastructure.settlement_gateway import (
    InMemorySettlementGateway,
    SettlementRequest,
)
from payment_lifecycle.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryPaymentRepository",
    "InMemorySettlementGateway",
    "SettlementRequest",
    "SystemTimeProvider",
]
