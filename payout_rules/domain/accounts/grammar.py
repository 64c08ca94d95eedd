"""Format grammars for bank codes, branch codes and account numbers.

A grammar is a small immutable value: an anchored regex plus explicit
policy flags. ``required=False`` means an absent value is valid;
``used=False`` means the country has no such field at all and any input
is ignored. Matching is case-sensitive and digit classes are ASCII only.
"""
from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from typing import Optional

from payout_rules.shared.enums import FieldErrorCode


@dataclass(frozen=True)
class FieldGrammar:
    pattern: Optional[str] = None
    required: bool = True
    used: bool = True
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    description: str = "must not be blank"
    _regex: Optional[re.Pattern] = field(init=False, default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.pattern is not None:
            object.__setattr__(self, "_regex", re.compile(self.pattern))

    @property
    def is_fixed_length(self) -> bool:
        return self.min_length is not None and self.min_length == self.max_length

    def check(self, value: Optional[str]) -> Optional[FieldErrorCode]:
        """Return None when value is acceptable, otherwise the failure reason."""
        if not self.used:
            return None
        if value is None or value == "":
            return FieldErrorCode.MISSING if self.required else None
        if self.min_length is not None and len(value) < self.min_length:
            return FieldErrorCode.INVALID_FORMAT
        if self.max_length is not None and len(value) > self.max_length:
            return FieldErrorCode.INVALID_FORMAT
        if self._regex is not None and self._regex.fullmatch(value) is None:
            return FieldErrorCode.INVALID_FORMAT
        return None

    def accepts(self, value: Optional[str]) -> bool:
        return self.check(value) is None


ANY = FieldGrammar()
NOT_USED = FieldGrammar(required=False, used=False, description="is not used")


def digits(low: int, high: Optional[int] = None) -> FieldGrammar:
    """Exactly ``low`` digits, or between ``low`` and ``high`` digits."""
    if high is None or high == low:
        return FieldGrammar(
            pattern=f"[0-9]{{{low}}}",
            min_length=low,
            max_length=low,
            description=f"must be {low} digits" if low > 1 else "must be a single digit",
        )
    return FieldGrammar(
        pattern=f"[0-9]{{{low},{high}}}",
        min_length=low,
        max_length=high,
        description=f"must be between {low} and {high} digits",
    )


def swift(country_code: Optional[str] = None) -> FieldGrammar:
    """
    SWIFT/BIC: 4 letter bank code, 2 letter country code, 2 character
    location code and an optional 3 character branch code (8 or 11 chars).

    With ``country_code`` the country part must be that literal code.
    """
    country = country_code if country_code else "[A-Z]{2}"
    return FieldGrammar(
        pattern=f"[A-Z]{{4}}{country}[A-Z0-9]{{2}}(?:[A-Z0-9]{{3}})?",
        min_length=8,
        max_length=11,
        description="must be a valid SWIFT / BIC code",
    )


def iban(country_code: str, length: int) -> FieldGrammar:
    """IBAN shape without the mod-97 checksum: prefix, 2 check digits, BBAN."""
    return FieldGrammar(
        pattern=f"{country_code}[0-9]{{2}}[A-Z0-9]{{{length - 4}}}",
        min_length=length,
        max_length=length,
        description=f"must be a {length} character IBAN starting with {country_code}",
    )


def pattern(
    regex: str,
    description: str,
    *,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> FieldGrammar:
    return FieldGrammar(
        pattern=regex,
        min_length=min_length,
        max_length=max_length,
        description=description,
    )


def optional(grammar: FieldGrammar) -> FieldGrammar:
    """Same grammar, but an absent value is valid."""
    return dataclasses.replace(grammar, required=False)
