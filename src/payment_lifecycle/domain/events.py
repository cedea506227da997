"""Payment domain events.

Events are immutable records of facts that already happened. They carry a
snapshot of the relevant Money, never a reference to the aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_lifecycle.domain.entities import Payment
    from payment_lifecycle.domain.value_objects import Money, PaymentId


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class DomainEvent:
    """Base class for payment events."""

    payment_id: PaymentId


@dataclass(frozen=True, slots=True)
class PaymentCompletedEvent(DomainEvent):
    final_amount: Money
    occurred_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def from_payment(cls, payment: Payment, occurred_at: datetime) -> PaymentCompletedEvent:
        """Snapshot a persisted, completed payment."""
        if payment.id is None or payment.final_amount is None:
            raise ValueError("Completed event requires a persisted payment with a final amount")
        return cls(
            payment_id=payment.id,
            final_amount=payment.final_amount,
            occurred_at=occurred_at,
        )


@dataclass(frozen=True, slots=True)
class PaymentRefundedEvent(DomainEvent):
    refunded_amount: Money
    occurred_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def from_payment(cls, payment: Payment, occurred_at: datetime) -> PaymentRefundedEvent:
        """Snapshot a persisted, refunded payment. The full final amount is refunded."""
        if payment.id is None or payment.final_amount is None:
            raise ValueError("Refunded event requires a persisted payment with a final amount")
        return cls(
            payment_id=payment.id,
            refunded_amount=payment.final_amount,
            occurred_at=occurred_at,
        )
