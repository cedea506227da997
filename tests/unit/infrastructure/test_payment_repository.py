"""Tests for InMemoryPaymentRepository.

Tests cover:
- Identity assignment on first save
- Upsert semantics for already-identified payments
- Copy-on-read and copy-on-write
- Status filtering, listing order and deletion
"""

from datetime import UTC, datetime, timedelta

import pytest

from payment_lifecycle.application.ports import PaymentRepository
from payment_lifecycle.domain.entities import Payment, PaymentStatus
from payment_lifecycle.domain.value_objects import CountryCode, Money, PaymentId
from payment_lifecycle.infrastructure.payment_repository import InMemoryPaymentRepository

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def pending_payment(now: datetime) -> Payment:
    return Payment.create(Money.of(10000), CountryCode.korea(), True, now)


@pytest.fixture
def completed_payment(pending_payment: Payment, now: datetime) -> Payment:
    return pending_payment.complete(Money(amount=8500), Money(amount=9350), now)


# =============================================================================
# save()
# =============================================================================


class TestSave:
    def test_implements_payment_repository_interface(
        self, repository: InMemoryPaymentRepository
    ) -> None:
        assert isinstance(repository, PaymentRepository)

    def test_assigns_id_on_first_save(
        self, repository: InMemoryPaymentRepository, pending_payment: Payment
    ) -> None:
        saved = repository.save(pending_payment)

        assert pending_payment.id is None
        assert isinstance(saved.id, PaymentId)

    def test_each_new_payment_gets_a_distinct_id(
        self, repository: InMemoryPaymentRepository, pending_payment: Payment
    ) -> None:
        first = repository.save(pending_payment)
        second = repository.save(pending_payment)

        assert first.id != second.id
        assert len(repository) == 2

    def test_keeps_existing_id(
        self, repository: InMemoryPaymentRepository, pending_payment: Payment
    ) -> None:
        payment_id = PaymentId.generate()

        saved = repository.save(pending_payment.assign_id(payment_id))

        assert saved.id == payment_id

    def test_save_with_known_id_replaces_record(
        self,
        repository: InMemoryPaymentRepository,
        completed_payment: Payment,
        now: datetime,
    ) -> None:
        saved = repository.save(completed_payment)

        refunded = repository.save(saved.refund(now + timedelta(days=1)))

        assert len(repository) == 1
        stored = repository.find_by_id(saved.id)  # type: ignore[arg-type]
        assert stored == refunded
        assert stored is not None
        assert stored.status == PaymentStatus.REFUNDED

    def test_returns_payment_with_all_fields(
        self, repository: InMemoryPaymentRepository, completed_payment: Payment
    ) -> None:
        saved = repository.save(completed_payment)

        assert saved.original_price == completed_payment.original_price
        assert saved.discounted_amount == completed_payment.discounted_amount
        assert saved.final_amount == completed_payment.final_amount
        assert saved.country == completed_payment.country
        assert saved.is_vip == completed_payment.is_vip
        assert saved.status == completed_payment.status
        assert saved.created_at == completed_payment.created_at
        assert saved.updated_at == completed_payment.updated_at


# =============================================================================
# find_by_id() and copy semantics
# =============================================================================


class TestFindById:
    def test_returns_none_for_unknown_id(self, repository: InMemoryPaymentRepository) -> None:
        assert repository.find_by_id(PaymentId.generate()) is None

    def test_returns_saved_payment(
        self, repository: InMemoryPaymentRepository, completed_payment: Payment
    ) -> None:
        saved = repository.save(completed_payment)

        assert repository.find_by_id(saved.id) == saved  # type: ignore[arg-type]

    def test_lookup_with_equal_id_instance(
        self, repository: InMemoryPaymentRepository, completed_payment: Payment
    ) -> None:
        saved = repository.save(completed_payment)

        assert repository.find_by_id(PaymentId.parse(str(saved.id))) == saved

    def test_returns_copy_not_stored_instance(
        self, repository: InMemoryPaymentRepository, completed_payment: Payment
    ) -> None:
        saved = repository.save(completed_payment)

        first = repository.find_by_id(saved.id)  # type: ignore[arg-type]
        second = repository.find_by_id(saved.id)  # type: ignore[arg-type]

        assert first == second
        assert first is not second
        assert first is not saved

    def test_transition_without_save_is_not_persisted(
        self,
        repository: InMemoryPaymentRepository,
        completed_payment: Payment,
        now: datetime,
    ) -> None:
        saved = repository.save(completed_payment)

        saved.refund(now)

        stored = repository.find_by_id(saved.id)  # type: ignore[arg-type]
        assert stored is not None
        assert stored.status == PaymentStatus.COMPLETED


# =============================================================================
# Listing and deletion
# =============================================================================


class TestListing:
    def test_find_all_empty(self, repository: InMemoryPaymentRepository) -> None:
        assert repository.find_all() == []

    def test_find_all_in_insertion_order(
        self, repository: InMemoryPaymentRepository, completed_payment: Payment
    ) -> None:
        saved = [repository.save(completed_payment) for _ in range(3)]

        assert [p.id for p in repository.find_all()] == [p.id for p in saved]

    def test_find_by_status(
        self,
        repository: InMemoryPaymentRepository,
        pending_payment: Payment,
        completed_payment: Payment,
        now: datetime,
    ) -> None:
        pending = repository.save(pending_payment)
        completed = repository.save(completed_payment)
        failed = repository.save(pending_payment.fail(now))

        assert repository.find_by_status(PaymentStatus.PENDING) == [pending]
        assert repository.find_by_status(PaymentStatus.COMPLETED) == [completed]
        assert repository.find_by_status(PaymentStatus.FAILED) == [failed]
        assert repository.find_by_status(PaymentStatus.REFUNDED) == []


class TestDelete:
    def test_delete_removes_payment(
        self, repository: InMemoryPaymentRepository, completed_payment: Payment
    ) -> None:
        saved = repository.save(completed_payment)

        repository.delete_by_id(saved.id)  # type: ignore[arg-type]

        assert repository.find_by_id(saved.id) is None  # type: ignore[arg-type]
        assert len(repository) == 0

    def test_delete_unknown_id_is_a_no_op(
        self, repository: InMemoryPaymentRepository, completed_payment: Payment
    ) -> None:
        repository.save(completed_payment)

        repository.delete_by_id(PaymentId.generate())

        assert len(repository) == 1
