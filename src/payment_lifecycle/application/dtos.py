"""Data Transfer Objects for use case input."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from payment_lifecycle.domain.exceptions import InvalidAmountError, InvalidCountryError


@dataclass(frozen=True)
class CreatePaymentCommand:
    """Input DTO for creating (and completing) a payment.

    Rejects obviously bad input before any domain object is built; Money
    and CountryCode re-validate on construction.
    """

    amount: int | float | str | Decimal
    country: str
    is_vip: bool = False

    def __post_init__(self) -> None:
        try:
            positive = Decimal(str(self.amount)) > 0
        except ArithmeticError as e:
            raise InvalidAmountError(f"Amount must be numeric, got {self.amount!r}") from e
        if not positive:
            raise InvalidAmountError(f"Amount must be greater than 0, got {self.amount}")

        if self.country is None or not str(self.country).strip():
            raise InvalidCountryError("Country code is required")
