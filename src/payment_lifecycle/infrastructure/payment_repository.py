from __future__ import annotations

import copy
from threading import Lock
from typing import TYPE_CHECKING

from payment_lifecycle.application.ports import PaymentRepository
from payment_lifecycle.domain.value_objects import PaymentId

if TYPE_CHECKING:
    from payment_lifecycle.domain.entities import Payment, PaymentStatus


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository for tests and local runs.

    Implementation notes:
    - Uses dict with PaymentId as key; insertion order is the listing order
    - Assigns a fresh PaymentId on first save
    - Stores and returns deep copies to mimic database detachment
    - A single lock keeps the dict consistent; writes to the same payment
      are last-writer-wins, with no version check

    Copy-on-read rationale:
    Returning copies catches bugs where code builds a new Payment without
    calling save(). This mimics ORM behavior where fetched entities are
    detached from the session until explicitly merged/committed.
    """

    def __init__(self) -> None:
        self._payments: dict[PaymentId, Payment] = {}
        self._lock = Lock()

    def save(self, payment: Payment) -> Payment:
        if payment.id is None:
            payment = payment.assign_id(PaymentId.generate())
        with self._lock:
            self._payments[payment.id] = copy.deepcopy(payment)
        return copy.deepcopy(payment)

    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        with self._lock:
            payment = self._payments.get(payment_id)
        if payment is None:
            return None
        return copy.deepcopy(payment)

    def find_by_status(self, status: PaymentStatus) -> list[Payment]:
        with self._lock:
            matches = [p for p in self._payments.values() if p.status == status]
        return copy.deepcopy(matches)

    def find_all(self) -> list[Payment]:
        with self._lock:
            payments = list(self._payments.values())
        return copy.deepcopy(payments)

    def delete_by_id(self, payment_id: PaymentId) -> None:
        with self._lock:
            self._payments.pop(payment_id, None)

    def __len__(self) -> int:
        return len(self._payments)
