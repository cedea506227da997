from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_lifecycle.domain.entities import Payment, PaymentStatus
    from payment_lifecycle.domain.value_objects import PaymentId


class PaymentRepository(ABC):
    """Port for payment persistence.

    Contract:
    - save() performs upsert and assigns a PaymentId on first save
    - find_by_id() returns None if payment does not exist (no exception)
    - find_all()/find_by_status() order is implementation-defined but
      stable within a single call
    - Concurrent writers to the same payment are last-writer-wins; any
      stronger conflict detection is the implementation's responsibility

    This is the only port in the core that may perform I/O.
    """

    @abstractmethod
    def save(self, payment: Payment) -> Payment:
        """Persist a payment (upsert semantics).

        Args:
            payment: The payment to save. May have no id yet.

        Returns:
            The stored payment, carrying its assigned id.
        """

    @abstractmethod
    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        """Retrieve a payment by ID.

        Returns:
            The Payment if found, None otherwise.
        """

    @abstractmethod
    def find_by_status(self, status: PaymentStatus) -> list[Payment]:
        """Return every payment currently in the given status."""

    @abstractmethod
    def find_all(self) -> list[Payment]:
        """Return every stored payment."""

    @abstractmethod
    def delete_by_id(self, payment_id: PaymentId) -> None:
        """Remove a stored payment. Deleting an unknown id is a no-op."""
