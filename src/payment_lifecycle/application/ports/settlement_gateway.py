from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_lifecycle.domain.value_objects import Money, PaymentId


class SettlementGateway(ABC):
    """Port for handing large payments over to settlement.

    Called synchronously from SettlementObserver after the payment has
    been persisted. Failures raised here are isolated by the EventBus.
    """

    @abstractmethod
    def request_settlement(self, payment_id: PaymentId, amount: Money) -> None:
        """Request settlement of a completed payment's final amount."""
