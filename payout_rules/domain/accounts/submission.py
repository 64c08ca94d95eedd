"""Turning a submitted payout form into a bank account and a provider payload."""
from __future__ import annotations

import re
from typing import Any, Dict, Optional

from payout_rules.domain.accounts.forms import BankAccountForm, PayoutPayload
from payout_rules.domain.accounts.masking import last_four_of
from payout_rules.domain.accounts.models import BankAccount
from payout_rules.domain.accounts.registry import country_registry
from payout_rules.shared.enums import BankField
from payout_rules.shared.errors import ValidationError
from payout_rules.shared.logging import get_logger

logger = get_logger(__name__)

ACCOUNT_NUMBERS_DO_NOT_MATCH = "account_number_does_not_match"

_PAYLOAD_STRIP_RE = re.compile(r"[ -]")


def normalize_account_number(value: Optional[str]) -> str:
    """Drop hyphens and surrounding whitespace, e.g. "000-123 456 " -> "000123 456"."""
    return (value or "").replace("-", "").strip()


def prepare_bank_account(form: BankAccountForm) -> BankAccount:
    """
    Build a BankAccount from the raw form.

    Raises UnsupportedCountryError for an unknown country and
    ValidationError when the confirmation does not match.
    Field formats are not checked here; pass the result to validate().
    """
    rule = country_registry.resolve(form.country_code)

    account_number = normalize_account_number(form.account_number)
    confirmation = normalize_account_number(form.account_number_confirmation)
    if account_number != confirmation:
        raise ValidationError("The account numbers do not match.", code=ACCOUNT_NUMBERS_DO_NOT_MATCH)

    codes: Dict[BankField, Optional[str]] = {
        BankField.BANK_CODE: form.bank_code or None,
        BankField.BRANCH_CODE: form.branch_code or None,
    }
    extra = form.extra_fields()
    for alias, bank_field in rule.field_aliases:
        if extra.get(alias):
            codes[bank_field] = extra[alias]

    account = BankAccount(
        country_code=rule.country_code,
        account_number=account_number,
        account_number_last_four=last_four_of(account_number),
        bank_code=codes[BankField.BANK_CODE],
        branch_code=codes[BankField.BRANCH_CODE],
        account_holder_full_name=form.account_holder_full_name or None,
        account_type=form.account_type or None,
    )
    logger.info(
        "Prepared %s bank account ending in %s",
        rule.country_code,
        account.account_number_last_four,
    )
    return account


def payout_payload(account: BankAccount) -> Dict[str, Any]:
    """
    Bank account payload for the external tokenization call.

    Only keys with a value are included.
    """
    rule = country_registry.resolve(account.country_code)
    payload = PayoutPayload(
        country=rule.country_code,
        currency=rule.currency,
        account_number=_PAYLOAD_STRIP_RE.sub("", account.account_number),
        routing_number=rule.routing_number(account.bank_code, account.branch_code),
    )
    if rule.accepts_account_type and account.account_type:
        payload.account_type = account.account_type
    if rule.sends_holder_name and account.account_holder_full_name:
        payload.account_holder_name = account.account_holder_full_name
    return payload.model_dump(exclude_none=True)
