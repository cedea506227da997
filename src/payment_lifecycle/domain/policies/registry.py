from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from payment_lifecycle.domain.policies.tax import KoreaTaxPolicy, UsTaxPolicy
from payment_lifecycle.domain.value_objects import CountryCode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from payment_lifecycle.domain.policies.tax import TaxPolicy


class PolicyRegistry:
    """Resolves the tax policy for a country.

    Built once at process start and handed to the orchestrator explicitly.

    Resolution rule:
    - An exact match on a registered CountryCode returns its policy
    - Every other code, recognized or not, returns the default policy

    The fallback is deliberate: an unsupported country is taxed like the
    default country instead of being rejected.
    """

    def __init__(
        self,
        policies: Mapping[CountryCode, TaxPolicy],
        default: TaxPolicy,
    ) -> None:
        self._policies: Mapping[CountryCode, TaxPolicy] = MappingProxyType(dict(policies))
        self._default = default

    @classmethod
    def standard(cls) -> PolicyRegistry:
        """KR and US policies, Korea as the default."""
        korea = KoreaTaxPolicy()
        return cls(
            policies={CountryCode.korea(): korea, CountryCode.us(): UsTaxPolicy()},
            default=korea,
        )

    @property
    def default(self) -> TaxPolicy:
        return self._default

    @property
    def countries(self) -> frozenset[CountryCode]:
        return frozenset(self._policies)

    def resolve(self, country: CountryCode) -> TaxPolicy:
        return self._policies.get(country, self._default)
