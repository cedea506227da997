"""Synchronous fan-out of payment events to registered observers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from payment_lifecycle.domain.events import PaymentCompletedEvent, PaymentRefundedEvent

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payment_lifecycle.application.ports import PaymentObserver
    from payment_lifecycle.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ObserverFailure:
    """An observer that raised while handling an event."""

    observer: PaymentObserver
    error: Exception


@dataclass(frozen=True, slots=True)
class PublishReport:
    """Outcome of one publish() call."""

    event: DomainEvent
    notified: int
    failures: tuple[ObserverFailure, ...] = field(default=())

    @property
    def succeeded(self) -> bool:
        return not self.failures


class EventBus:
    """Dispatches payment events to observers in registration order.

    Guarantees:
    - Every observer is invoked exactly once per publish, on the caller's stack
    - Order of invocation equals the order of the constructor's observer list
    - An observer that raises is logged and reported; the remaining
      observers still run and nothing is re-raised to the publisher

    There is no retry and no persistence of undelivered events.
    """

    def __init__(self, observers: Iterable[PaymentObserver] = ()) -> None:
        self._observers: tuple[PaymentObserver, ...] = tuple(observers)

    @property
    def observers(self) -> tuple[PaymentObserver, ...]:
        return self._observers

    def publish(self, event: DomainEvent) -> PublishReport:
        """Notify every observer of the event.

        Returns:
            PublishReport listing the observers that failed.

        Raises:
            TypeError: If the event type has no observer callback.
        """
        if not isinstance(event, (PaymentCompletedEvent, PaymentRefundedEvent)):
            raise TypeError(f"Unsupported event type: {type(event).__name__}")

        failures: list[ObserverFailure] = []
        for observer in self._observers:
            try:
                self._dispatch(observer, event)
            except Exception as e:
                logger.exception(
                    "observer_failed",
                    observer=type(observer).__name__,
                    event_type=type(event).__name__,
                    payment_id=str(event.payment_id),
                )
                failures.append(ObserverFailure(observer=observer, error=e))

        return PublishReport(
            event=event,
            notified=len(self._observers) - len(failures),
            failures=tuple(failures),
        )

    @staticmethod
    def _dispatch(observer: PaymentObserver, event: DomainEvent) -> None:
        if isinstance(event, PaymentCompletedEvent):
            observer.on_payment_completed(event)
        elif isinstance(event, PaymentRefundedEvent):
            observer.on_payment_refunded(event)
