"""Payment aggregate with state machine behavior."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from payment_lifecycle.domain.exceptions import IllegalStateTransitionError

if TYPE_CHECKING:
    from datetime import datetime

    from payment_lifecycle.domain.value_objects import CountryCode, Money, PaymentId


class PaymentStatus(Enum):
    """Payment lifecycle states."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    def can_transition_to(self, target: PaymentStatus) -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[PaymentStatus, frozenset[PaymentStatus]] = {
    PaymentStatus.PENDING: frozenset({PaymentStatus.COMPLETED, PaymentStatus.FAILED}),
    PaymentStatus.COMPLETED: frozenset({PaymentStatus.REFUNDED}),
    PaymentStatus.FAILED: frozenset(),
    PaymentStatus.REFUNDED: frozenset(),
}


@dataclass(frozen=True, slots=True)
class Payment:
    """Payment aggregate root.

    The aggregate is the only place where status changes. Every transition
    is checked against the explicit transition table on PaymentStatus and
    raises IllegalStateTransitionError when the table forbids it.

    Payment is immutable (frozen dataclass). All state-changing methods
    return a new Payment instance.

    State machine:
        - pending → completed (complete)
        - pending → failed (fail)
        - completed → refunded (refund)
        - failed and refunded are terminal

    FAILED is reachable through fail() but no computation path in this
    package triggers it: once Money and CountryCode are valid, discount
    and tax always succeed.
    """

    id: PaymentId | None
    original_price: Money
    discounted_amount: Money | None
    final_amount: Money | None
    country: CountryCode
    is_vip: bool
    status: PaymentStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        original_price: Money,
        country: CountryCode,
        is_vip: bool,
        now: datetime,
    ) -> Payment:
        """Create a new PENDING payment.

        Args:
            original_price: Already-validated price.
            country: Already-validated country code.
            is_vip: Whether the VIP discount rate applies.
            now: Current timestamp (UTC).

        Returns:
            A Payment without identity; the repository assigns one on save.
        """
        return cls(
            id=None,
            original_price=original_price,
            discounted_amount=None,
            final_amount=None,
            country=country,
            is_vip=is_vip,
            status=PaymentStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def complete(self, discounted_amount: Money, final_amount: Money, now: datetime) -> Payment:
        """Record the computed amounts and mark the payment completed.

        Returns:
            New Payment instance in COMPLETED state.

        Raises:
            IllegalStateTransitionError: If not in PENDING state.
        """
        self._ensure_can_transition_to(PaymentStatus.COMPLETED)

        return replace(
            self,
            discounted_amount=discounted_amount,
            final_amount=final_amount,
            status=PaymentStatus.COMPLETED,
            updated_at=now,
        )

    def fail(self, now: datetime) -> Payment:
        """Mark the payment as failed.

        Raises:
            IllegalStateTransitionError: If not in PENDING state.
        """
        self._ensure_can_transition_to(PaymentStatus.FAILED)

        return replace(self, status=PaymentStatus.FAILED, updated_at=now)

    def refund(self, now: datetime) -> Payment:
        """Refund a completed payment.

        Refund is not idempotent: refunding an already refunded payment
        raises rather than returning the payment unchanged.

        Raises:
            IllegalStateTransitionError: If not in COMPLETED state.
        """
        self._ensure_can_transition_to(PaymentStatus.REFUNDED)

        return replace(self, status=PaymentStatus.REFUNDED, updated_at=now)

    def assign_id(self, payment_id: PaymentId) -> Payment:
        """Attach the identity chosen by the repository.

        Raises:
            IllegalStateTransitionError: If the payment already has an identity.
        """
        if self.id is not None:
            raise IllegalStateTransitionError(
                f"Payment {self.id} already has an identity; cannot reassign to {payment_id}"
            )
        return replace(self, id=payment_id)

    def _ensure_can_transition_to(self, target: PaymentStatus) -> None:
        if not self.status.can_transition_to(target):
            allowed = sorted(s.value for s in _TRANSITIONS[self.status]) or ["none"]
            raise IllegalStateTransitionError(
                f"Cannot move payment {self.id} from {self.status.value} to {target.value}; "
                f"allowed: {', '.join(allowed)}"
            )
