"""Value objects - Immutable objects defined by their attributes."""

from payment_lifecycle.domain.value_objects.country_code import CountryCode
from payment_lifecycle.domain.value_objects.money import Money
from payment_lifecycle.domain.value_objects.payment_id import PaymentId

__all__ = [
    "CountryCode",
    "Money",
    "PaymentId",
]
