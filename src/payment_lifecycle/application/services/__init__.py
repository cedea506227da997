"""Application services - Orchestration of the payment lifecycle."""

from payment_lifecycle.application.services.payment_service import PaymentService

__all__ = [
    "PaymentService",
]
