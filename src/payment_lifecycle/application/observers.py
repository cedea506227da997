"""Concrete payment observers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from payment_lifecycle.application.ports import PaymentObserver
from payment_lifecycle.domain.value_objects import Money

if TYPE_CHECKING:
    from payment_lifecycle.application.ports import SettlementGateway
    from payment_lifecycle.domain.events import PaymentCompletedEvent, PaymentRefundedEvent

logger = structlog.get_logger(__name__)

SETTLEMENT_THRESHOLD = Money(amount=100_000)


class LoggingObserver(PaymentObserver):
    """Logs every completion and refund."""

    def on_payment_completed(self, event: PaymentCompletedEvent) -> None:
        logger.info(
            "payment_completed",
            payment_id=str(event.payment_id),
            final_amount=event.final_amount.amount,
            occurred_at=event.occurred_at.isoformat(),
        )

    def on_payment_refunded(self, event: PaymentRefundedEvent) -> None:
        logger.info(
            "payment_refunded",
            payment_id=str(event.payment_id),
            refunded_amount=event.refunded_amount.amount,
            occurred_at=event.occurred_at.isoformat(),
        )


class SettlementObserver(PaymentObserver):
    """Requests settlement for payments whose final amount exceeds a threshold.

    The comparison is strict: a final amount equal to the threshold is
    not settled.
    """

    def __init__(
        self,
        gateway: SettlementGateway,
        threshold: Money = SETTLEMENT_THRESHOLD,
    ) -> None:
        self._gateway = gateway
        self._threshold = threshold

    @property
    def threshold(self) -> Money:
        return self._threshold

    def on_payment_completed(self, event: PaymentCompletedEvent) -> None:
        if not event.final_amount.is_greater_than(self._threshold):
            return

        logger.info(
            "settlement_requested",
            payment_id=str(event.payment_id),
            amount=event.final_amount.amount,
            threshold=self._threshold.amount,
        )
        self._gateway.request_settlement(event.payment_id, event.final_amount)
