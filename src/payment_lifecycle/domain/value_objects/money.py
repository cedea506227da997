"""Money value object.

Amounts are whole currency units. Every construction through ``of()`` and
every derived amount (``multiply``, ``add``) is rounded half-up, so
``Money.of(10000).multiply("0.85")`` is exactly 8500. Arithmetic runs in a
local decimal context wide enough for the operands; amounts are never
truncated to the default 28 significant digits.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from payment_lifecycle.domain.exceptions import InvalidAmountError

Numeric = int | float | str | Decimal

_UNIT = Decimal("1")


def _to_decimal(value: Numeric) -> Decimal:
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}")
    if isinstance(value, Decimal):
        return value
    try:
        # str() keeps float literals like 0.5 from picking up binary noise
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidAmountError(f"Amount must be a finite number, got {value!r}") from e


def round_half_up(value: Numeric) -> int:
    """Round to the nearest whole unit, halves away from zero.

    Raises:
        InvalidAmountError: If the value is not a finite number.
    """
    decimal_value = _to_decimal(value)
    if not decimal_value.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got {value!r}")
    with localcontext() as ctx:
        # integer digits of the result, plus one for a carry from rounding
        ctx.prec = max(ctx.prec, decimal_value.adjusted() + 2)
        return int(decimal_value.quantize(_UNIT, rounding=ROUND_HALF_UP))


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """Immutable non-negative amount in a single implicit currency.

    Direct construction only enforces ``amount >= 0``; use ``of()`` for
    user-supplied prices, which must be strictly positive.
    """

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidAmountError(
                f"Money amount must be a whole number of units, got {self.amount!r}"
            )
        if self.amount < 0:
            raise InvalidAmountError(f"Money amount cannot be negative, got {self.amount}")

    @classmethod
    def of(cls, amount: Numeric) -> Money:
        """Create Money from a user-supplied price.

        Args:
            amount: Price in currency units; fractional values are rounded half-up.

        Returns:
            A Money instance holding ``round(amount)``.

        Raises:
            InvalidAmountError: If amount <= 0 or is not numeric.
        """
        rounded = round_half_up(amount)
        if _to_decimal(amount) <= 0:
            raise InvalidAmountError(f"Amount must be greater than 0, got {amount}")
        return cls(amount=rounded)

    @classmethod
    def zero(cls) -> Money:
        return cls(amount=0)

    def multiply(self, rate: Numeric) -> Money:
        """Apply a rate (discount or tax multiplier) and round half-up."""
        rate_value = _to_decimal(rate)
        if not rate_value.is_finite():
            raise InvalidAmountError(f"Rate must be a finite number, got {rate!r}")
        amount_value = Decimal(self.amount)
        with localcontext() as ctx:
            ctx.prec = max(
                ctx.prec,
                len(amount_value.as_tuple().digits) + len(rate_value.as_tuple().digits),
            )
            product = amount_value * rate_value
        return Money(amount=round_half_up(product))

    def add(self, other: Money) -> Money:
        return Money(amount=self.amount + other.amount)

    def is_greater_than(self, other: Money) -> bool:
        return self.amount > other.amount

    def __str__(self) -> str:
        return str(self.amount)
