"""Country rule: the contract every supported payout country satisfies."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from payout_rules.domain.accounts.grammar import ANY, NOT_USED, FieldGrammar
from payout_rules.domain.accounts.masking import mask_last_four
from payout_rules.domain.accounts.routing import NO_ROUTING, RoutingRule
from payout_rules.shared.enums import AccountType, BankField, MaskingPolicy


@dataclass(frozen=True)
class CountryRule:
    """
    Bank account rules of one country.

    Immutable and declarative: per-country behaviour lives in the grammars,
    the routing rule and the masking policy, never in subclasses.
    """

    country_code: str
    currency: str
    bank_code: FieldGrammar = NOT_USED
    branch_code: FieldGrammar = NOT_USED
    account_number: FieldGrammar = ANY
    routing: RoutingRule = NO_ROUTING
    masking: MaskingPolicy = MaskingPolicy.BARE
    # Legacy alias (ACH, UK, EU) or the country code itself
    bank_account_type: str = ""
    routing_label: Optional[str] = None
    # Пари (назва поля форми для цієї країни, канонічне поле)
    field_aliases: Tuple[Tuple[str, BankField], ...] = ()
    accepts_account_type: bool = False
    sends_holder_name: bool = False
    cross_border: bool = False
    min_payout_local_cents: int = 0

    def __post_init__(self) -> None:
        if not self.bank_account_type:
            object.__setattr__(self, "bank_account_type", self.country_code)

    def grammar_for(self, bank_field: BankField) -> FieldGrammar:
        if bank_field == BankField.BANK_CODE:
            return self.bank_code
        if bank_field == BankField.BRANCH_CODE:
            return self.branch_code
        if bank_field == BankField.ACCOUNT_NUMBER:
            return self.account_number
        raise KeyError(bank_field)

    def is_valid_bank_code(self, code: Optional[str]) -> bool:
        return self.bank_code.accepts(code)

    def is_valid_branch_code(self, code: Optional[str]) -> bool:
        return self.branch_code.accepts(code)

    def is_valid_account_number(self, number: Optional[str]) -> bool:
        return self.account_number.accepts(number)

    def is_valid_account_type(self, account_type: Optional[str]) -> bool:
        """Account type is optional; it is only checked where the country takes one."""
        if not self.accepts_account_type or not account_type:
            return True
        return account_type in {member.value for member in AccountType}

    def routing_number(self, bank_code: Optional[str], branch_code: Optional[str]) -> Optional[str]:
        return self.routing.derive(bank_code, branch_code)

    def account_number_visual(self, last_four: Optional[str]) -> str:
        return mask_last_four(self.masking, self.country_code, last_four)
