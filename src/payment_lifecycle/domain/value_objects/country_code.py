from __future__ import annotations

from dataclasses import dataclass

from payment_lifecycle.domain.exceptions import InvalidCountryError

KOREA = "KR"
UNITED_STATES = "US"
RECOGNIZED_CODES = frozenset({KOREA, UNITED_STATES})


@dataclass(frozen=True, slots=True)
class CountryCode:
    """Country identifier used as the tax policy lookup key.

    Normalization: surrounding whitespace is trimmed and the code is
    upper-cased. Codes outside RECOGNIZED_CODES are accepted; the policy
    registry resolves them to its default policy.
    """

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise InvalidCountryError("Country code is required")

        normalized = self.code.strip().upper()
        if not normalized:
            raise InvalidCountryError("Country code cannot be blank")

        if normalized != self.code:
            object.__setattr__(self, "code", normalized)

    @classmethod
    def of(cls, code: str | None) -> CountryCode:
        """Create a CountryCode from raw input.

        Raises:
            InvalidCountryError: If code is None or blank.
        """
        if code is None:
            raise InvalidCountryError("Country code is required")
        return cls(code=code)

    @classmethod
    def korea(cls) -> CountryCode:
        return cls(code=KOREA)

    @classmethod
    def us(cls) -> CountryCode:
        return cls(code=UNITED_STATES)

    @property
    def is_recognized(self) -> bool:
        return self.code in RECOGNIZED_CODES

    def __str__(self) -> str:
        return self.code
