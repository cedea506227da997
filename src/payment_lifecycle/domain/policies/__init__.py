"""Policies - Pluggable, pure pricing rules (discount and tax)."""

from payment_lifecycle.domain.policies.discount import DefaultDiscountPolicy, DiscountPolicy
from payment_lifecycle.domain.policies.registry import PolicyRegistry
from payment_lifecycle.domain.policies.tax import (
    KoreaTaxPolicy,
    RateTaxPolicy,
    TaxPolicy,
    UsTaxPolicy,
)

__all__ = [
    "DefaultDiscountPolicy",
    "DiscountPolicy",
    "KoreaTaxPolicy",
    "PolicyRegistry",
    "RateTaxPolicy",
    "TaxPolicy",
    "UsTaxPolicy",
]
