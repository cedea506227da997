from datetime import UTC, datetime, timedelta

from payment_lifecycle.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Clock that only moves when told to.

    Starts at a UTC instant and moves forward with ``advance``, so a test
    can create a payment and refund it later without real waiting.
    """

    def __init__(self, start: datetime) -> None:
        if start.tzinfo is not UTC:
            raise ValueError(f"start must have tzinfo=UTC, got tzinfo={start.tzinfo}")
        self._current = start

    def now(self) -> datetime:
        return self._current

    def advance(self, delta: timedelta) -> None:
        if delta < timedelta(0):
            raise ValueError(f"Clock cannot move backwards, got {delta}")
        self._current += delta
