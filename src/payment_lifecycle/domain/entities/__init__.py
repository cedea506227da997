"""Domain entities - Objects with identity and lifecycle."""

from payment_lifecycle.domain.entities.payment import Payment, PaymentStatus

__all__ = [
    "Payment",
    "PaymentStatus",
]
