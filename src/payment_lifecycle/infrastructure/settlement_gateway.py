from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from payment_lifecycle.application.ports import SettlementGateway

if TYPE_CHECKING:
    from payment_lifecycle.domain.value_objects import Money, PaymentId

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SettlementRequest:
    payment_id: PaymentId
    amount: Money


class InMemorySettlementGateway(SettlementGateway):
    """Records settlement requests instead of sending them anywhere."""

    def __init__(self) -> None:
        self._requests: list[SettlementRequest] = []

    @property
    def requests(self) -> tuple[SettlementRequest, ...]:
        return tuple(self._requests)

    def request_settlement(self, payment_id: PaymentId, amount: Money) -> None:
        self._requests.append(SettlementRequest(payment_id=payment_id, amount=amount))
        logger.debug("settlement_recorded", payment_id=str(payment_id), amount=amount.amount)
