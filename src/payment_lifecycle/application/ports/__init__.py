"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payment_lifecycle.application.ports.observer import PaymentObserver
from payment_lifecycle.application.ports.payment_repository import PaymentRepository
from payment_lifecycle.application.ports.settlement_gateway import SettlementGateway
from payment_lifecycle.application.ports.time_provider import TimeProvider

__all__ = [
    "PaymentObserver",
    "PaymentRepository",
    "SettlementGateway",
    "TimeProvider",
]
