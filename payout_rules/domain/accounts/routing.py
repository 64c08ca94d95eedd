"""Routing number derivation strategies."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from payout_rules.shared.enums import BankField, RoutingStrategy


@dataclass(frozen=True)
class RoutingRule:
    """
    Tagged routing strategy of a country.

    Values are used exactly as supplied: nothing is padded, truncated or
    re-cased, so the derived number always agrees with what was validated.
    A missing required part yields None instead of raising.
    """

    strategy: RoutingStrategy = RoutingStrategy.NONE
    first: BankField = BankField.BANK_CODE
    second: Optional[BankField] = None
    second_optional: bool = False
    literal: Optional[str] = None

    def derive(self, bank_code: Optional[str], branch_code: Optional[str]) -> Optional[str]:
        if self.strategy == RoutingStrategy.NONE:
            return None
        if self.strategy == RoutingStrategy.FIXED:
            return self.literal

        values = {BankField.BANK_CODE: bank_code, BankField.BRANCH_CODE: branch_code}
        head = values.get(self.first)
        if not head:
            return None
        if self.strategy == RoutingStrategy.FIELD:
            return head

        tail = values.get(self.second) if self.second is not None else None
        if not tail:
            return head if self.second_optional else None
        if self.strategy == RoutingStrategy.CONCATENATION:
            return f"{head}{tail}"
        return f"{head}-{tail}"


NO_ROUTING = RoutingRule()


def fixed(literal: str) -> RoutingRule:
    return RoutingRule(strategy=RoutingStrategy.FIXED, literal=literal)


def echo(source: BankField = BankField.BANK_CODE) -> RoutingRule:
    return RoutingRule(strategy=RoutingStrategy.FIELD, first=source)


def concatenation(
    first: BankField = BankField.BANK_CODE,
    second: BankField = BankField.BRANCH_CODE,
) -> RoutingRule:
    return RoutingRule(strategy=RoutingStrategy.CONCATENATION, first=first, second=second)


def hyphenated(
    first: BankField = BankField.BANK_CODE,
    second: BankField = BankField.BRANCH_CODE,
    *,
    second_optional: bool = False,
) -> RoutingRule:
    return RoutingRule(
        strategy=RoutingStrategy.HYPHENATED,
        first=first,
        second=second,
        second_optional=second_optional,
    )
