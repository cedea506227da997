from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_lifecycle.domain.value_objects import Money

VIP_RATE = Decimal("0.85")
REGULAR_RATE = Decimal("0.90")


class DiscountPolicy(ABC):
    """Pure rule mapping (original price, VIP flag) to a discounted price.

    Exactly one discount policy is active per deployment; there is no
    per-country variation.
    """

    @abstractmethod
    def apply(self, original_price: Money, is_vip: bool) -> Money:
        """Return the discounted price, rounded half-up to whole units."""


class DefaultDiscountPolicy(DiscountPolicy):
    """VIP customers pay 85% of the original price, everyone else 90%."""

    def __init__(
        self,
        vip_rate: Decimal = VIP_RATE,
        regular_rate: Decimal = REGULAR_RATE,
    ) -> None:
        for rate in (vip_rate, regular_rate):
            if not Decimal(0) <= Decimal(str(rate)) <= Decimal(1):
                raise ValueError(f"Discount rate must be within [0, 1], got {rate}")
        self._vip_rate = Decimal(str(vip_rate))
        self._regular_rate = Decimal(str(regular_rate))

    def apply(self, original_price: Money, is_vip: bool) -> Money:
        rate = self._vip_rate if is_vip else self._regular_rate
        return original_price.multiply(rate)

    def __repr__(self) -> str:
        return f"DefaultDiscountPolicy(vip_rate={self._vip_rate}, regular_rate={self._regular_rate})"
