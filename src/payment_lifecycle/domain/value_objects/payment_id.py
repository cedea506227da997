from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4

from payment_lifecycle.domain.exceptions import InvalidPaymentIdError


@dataclass(frozen=True, slots=True)
class PaymentId:
    """Identity of a persisted payment.

    The repository hands one out on first save; a Payment that was never
    saved has ``id=None``. Callers outside the domain usually hold the
    string form, which ``parse`` turns back into a PaymentId.
    """

    value: UUID

    @classmethod
    def generate(cls) -> PaymentId:
        return cls(value=uuid4())

    @classmethod
    def parse(cls, raw: PaymentId | UUID | str) -> PaymentId:
        """Accept a PaymentId, a UUID or its string form.

        Raises:
            InvalidPaymentIdError: If ``raw`` is none of those, or the
                string is not a UUID.
        """
        if isinstance(raw, PaymentId):
            return raw
        if isinstance(raw, UUID):
            return cls(value=raw)
        if not isinstance(raw, str):
            raise InvalidPaymentIdError(f"Payment id must be a string, got {raw!r}")
        try:
            return cls(value=UUID(raw.strip()))
        except ValueError as e:
            raise InvalidPaymentIdError(f"Invalid payment id: {raw!r}") from e

    def __str__(self) -> str:
        return str(self.value)
