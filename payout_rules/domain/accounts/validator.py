"""Field-level validation of bank account input against a country rule."""
from __future__ import annotations

from typing import Optional

from payout_rules.domain.accounts.models import FieldError, Verdict
from payout_rules.domain.accounts.variant import CountryRule
from payout_rules.shared.enums import AccountType, BankField, FieldErrorCode
from payout_rules.shared.logging import get_logger

logger = get_logger(__name__)

FIELD_LABELS = {
    BankField.BANK_CODE: "Bank code",
    BankField.BRANCH_CODE: "Branch code",
    BankField.ACCOUNT_NUMBER: "Account number",
    BankField.ACCOUNT_TYPE: "Account type",
}


def _message(bank_field: BankField, code: FieldErrorCode, description: str) -> str:
    label = FIELD_LABELS[bank_field]
    if code == FieldErrorCode.MISSING:
        return f"{label} is required."
    return f"{label} {description}."


def _check(rule: CountryRule, bank_field: BankField, value: Optional[str]) -> Optional[FieldError]:
    grammar = rule.grammar_for(bank_field)
    code = grammar.check(value)
    if code is None:
        return None
    return FieldError(bank_field, code, _message(bank_field, code, grammar.description))


def validate_fields(
    rule: CountryRule,
    bank_code: Optional[str],
    branch_code: Optional[str],
    account_number: Optional[str],
    account_type: Optional[str] = None,
) -> Verdict:
    """
    Check every field of the input against the rule.

    Checks are independent: the verdict lists all failing fields in field
    order, not just the first one. Format problems are data, never raised.
    """
    verdict = Verdict()
    for bank_field, value in (
        (BankField.BANK_CODE, bank_code),
        (BankField.BRANCH_CODE, branch_code),
        (BankField.ACCOUNT_NUMBER, account_number),
    ):
        error = _check(rule, bank_field, value)
        if error is not None:
            verdict.errors.append(error)

    if not rule.is_valid_account_type(account_type):
        allowed = " or ".join(member.value for member in AccountType)
        verdict.errors.append(
            FieldError(
                BankField.ACCOUNT_TYPE,
                FieldErrorCode.INVALID_FORMAT,
                _message(BankField.ACCOUNT_TYPE, FieldErrorCode.INVALID_FORMAT, f"must be {allowed}"),
            )
        )

    if verdict.errors:
        # Лише назви полів і коди, без значень
        logger.debug(
            "Bank account rejected for %s: %s",
            rule.country_code,
            ", ".join(f"{e.field.value}={e.code.value}" for e in verdict.errors),
        )
    return verdict
