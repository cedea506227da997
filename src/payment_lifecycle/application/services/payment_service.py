from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from payment_lifecycle.domain.entities import Payment, PaymentStatus
from payment_lifecycle.domain.events import PaymentCompletedEvent, PaymentRefundedEvent
from payment_lifecycle.domain.exceptions import PaymentNotFoundError
from payment_lifecycle.domain.value_objects import CountryCode, Money, PaymentId

if TYPE_CHECKING:
    from payment_lifecycle.application.dtos import CreatePaymentCommand
    from payment_lifecycle.application.event_bus import EventBus
    from payment_lifecycle.application.ports import PaymentRepository, TimeProvider
    from payment_lifecycle.domain.policies import DiscountPolicy, PolicyRegistry
    from payment_lifecycle.domain.value_objects.money import Numeric

logger = structlog.get_logger(__name__)


class PaymentService:
    """Orchestrates the payment lifecycle.

    Responsibilities:
    - Build validated Money/CountryCode values from raw input
    - Apply the discount policy, then the country's tax policy
    - Drive the Payment aggregate through its transitions
    - Persist through the repository port
    - Publish events strictly after the save succeeds

    Domain errors (InvalidAmountError, InvalidCountryError,
    IllegalStateTransitionError, PaymentNotFoundError) propagate unchanged.
    Observer failures are absorbed by the EventBus and never change the
    returned payment.
    """

    def __init__(
        self,
        payment_repository: PaymentRepository,
        discount_policy: DiscountPolicy,
        policy_registry: PolicyRegistry,
        event_bus: EventBus,
        time_provider: TimeProvider,
    ) -> None:
        self._payment_repo = payment_repository
        self._discount_policy = discount_policy
        self._policy_registry = policy_registry
        self._event_bus = event_bus
        self._time_provider = time_provider

    def create_payment(self, original_price: Numeric, country: str, is_vip: bool) -> Payment:
        """Create, price and complete a payment.

        Args:
            original_price: Price before discount and tax; must be > 0.
            country: Country code selecting the tax policy.
            is_vip: Whether the VIP discount applies.

        Returns:
            The persisted payment in COMPLETED state.

        Raises:
            InvalidAmountError: original_price <= 0 or not numeric.
            InvalidCountryError: country is None or blank.
        """
        price = Money.of(original_price)
        country_code = CountryCode.of(country)
        now = self._time_provider.now()

        payment = Payment.create(price, country_code, is_vip, now)

        discounted = self._discount_policy.apply(price, is_vip)
        final = self._policy_registry.resolve(country_code).apply(discounted)
        payment = payment.complete(discounted, final, now)

        saved = self._payment_repo.save(payment)
        logger.debug(
            "payment_saved",
            payment_id=str(saved.id),
            status=saved.status.value,
            original_price=price.amount,
            discounted_amount=discounted.amount,
            final_amount=final.amount,
            country=country_code.code,
            is_vip=is_vip,
        )

        self._event_bus.publish(PaymentCompletedEvent.from_payment(saved, now))
        return saved

    def execute(self, command: CreatePaymentCommand) -> Payment:
        """Create a payment from a validated command."""
        return self.create_payment(command.amount, command.country, command.is_vip)

    def refund_payment(self, payment_id: PaymentId | str) -> Payment:
        """Refund a completed payment.

        Raises:
            InvalidPaymentIdError: payment_id is not a valid id.
            PaymentNotFoundError: No payment with that id.
            IllegalStateTransitionError: Payment is not COMPLETED.
        """
        payment = self.get_payment(payment_id)
        now = self._time_provider.now()

        refunded = payment.refund(now)
        saved = self._payment_repo.save(refunded)
        logger.debug("payment_saved", payment_id=str(saved.id), status=saved.status.value)

        self._event_bus.publish(PaymentRefundedEvent.from_payment(saved, now))
        return saved

    def get_payment(self, payment_id: PaymentId | str) -> Payment:
        """Look up a payment by id or its string form.

        Raises:
            InvalidPaymentIdError: payment_id is not a valid id.
            PaymentNotFoundError: No payment with that id.
        """
        parsed = PaymentId.parse(payment_id)
        payment = self._payment_repo.find_by_id(parsed)
        if payment is None:
            raise PaymentNotFoundError(f"Payment not found: {parsed}")
        return payment

    def list_payments(self) -> list[Payment]:
        return self._payment_repo.find_all()

    def list_payments_by_status(self, status: PaymentStatus) -> list[Payment]:
        return self._payment_repo.find_by_status(status)

    def total_completed_amount(self) -> Money:
        """Sum of final amounts over payments currently COMPLETED."""
        total = Money.zero()
        for payment in self._payment_repo.find_by_status(PaymentStatus.COMPLETED):
            if payment.final_amount is not None:
                total = total.add(payment.final_amount)
        return total

    def delete_payment(self, payment_id: PaymentId | str) -> None:
        """Administrative removal of a stored record; not a domain transition.

        Raises:
            PaymentNotFoundError: No payment with that id.
        """
        parsed = PaymentId.parse(payment_id)
        self.get_payment(parsed)
        self._payment_repo.delete_by_id(parsed)
        logger.info("payment_deleted", payment_id=str(parsed))
