from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_lifecycle.domain.value_objects import Money


class TaxPolicy(ABC):
    """Pure rule mapping a discounted price to the taxed (final) price."""

    @abstractmethod
    def apply(self, discounted_price: Money) -> Money:
        """Return the taxed price, rounded half-up to whole units."""


class RateTaxPolicy(TaxPolicy):
    """Flat-rate tax: ``price * (1 + rate)``."""

    rate: Decimal = Decimal("0")

    def apply(self, discounted_price: Money) -> Money:
        return discounted_price.multiply(Decimal(1) + self.rate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rate={self.rate})"


class KoreaTaxPolicy(RateTaxPolicy):
    """Korean VAT, 10%."""

    rate = Decimal("0.10")


class UsTaxPolicy(RateTaxPolicy):
    """US sales tax, 7%."""

    rate = Decimal("0.07")
