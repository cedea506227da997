"""Domain exceptions for payment-lifecycle.

Exception hierarchy:
    DomainException (base)
    ├── State & Transition Errors
    │   └── IllegalStateTransitionError
    ├── Not Found Errors
    │   └── PaymentNotFoundError
    └── Validation Errors
        ├── InvalidAmountError
        ├── InvalidCountryError
        └── InvalidPaymentIdError

Every error is surfaced to the caller of PaymentService unmodified.
Observer failures are not domain errors; the EventBus isolates them.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# State & Transition Errors
# =============================================================================


class IllegalStateTransitionError(DomainException):
    """Raised when a transition violates the payment state machine.

    Valid transitions:
        - pending → completed
        - pending → failed
        - completed → refunded

    Examples of invalid transitions:
        - completed → completed (complete twice)
        - pending → refunded (only completed payments are refundable)
        - refunded → refunded (refund is not idempotent)
        - failed → anything (terminal state)
    """


# =============================================================================
# Not Found Errors
# =============================================================================


class PaymentNotFoundError(DomainException):
    """Raised when a payment cannot be found by ID.

    This is a client error (HTTP 404) indicating the requested
    payment does not exist.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidAmountError(DomainException):
    """Raised when a monetary amount fails validation.

    An original price must be strictly greater than 0. Derived amounts
    (discounted, taxed) may be zero but never negative.
    """


class InvalidCountryError(DomainException):
    """Raised when a country code is missing or blank."""


class InvalidPaymentIdError(DomainException):
    """Raised when a payment ID fails validation (must be a UUID)."""
