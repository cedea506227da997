from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_lifecycle.domain.events import PaymentCompletedEvent, PaymentRefundedEvent


class PaymentObserver(ABC):
    """Consumer notified synchronously when a payment event is published.

    Every observer must handle completions. Refund notification is opt-in:
    the default implementation ignores it.
    """

    @abstractmethod
    def on_payment_completed(self, event: PaymentCompletedEvent) -> None:
        """Handle a completed payment."""

    def on_payment_refunded(self, event: PaymentRefundedEvent) -> None:  # noqa: B027
        """Handle a refunded payment. No-op unless overridden."""
