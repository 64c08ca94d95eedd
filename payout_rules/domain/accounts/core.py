"""Public operations of the payout bank account rules engine.

All functions are pure over the frozen country registry and safe to call
from any number of threads. An unknown country code raises
UnsupportedCountryError; malformed field values never raise.
"""
from __future__ import annotations

from typing import Optional

from payout_rules.domain.accounts.currency import currency_for
from payout_rules.domain.accounts.models import Verdict
from payout_rules.domain.accounts.registry import country_registry
from payout_rules.domain.accounts.validator import validate_fields


def validate(
    country_code: str,
    bank_code: Optional[str],
    branch_code: Optional[str],
    account_number: Optional[str],
    *,
    account_type: Optional[str] = None,
) -> Verdict:
    """Validate raw bank account fields of a country."""
    rule = country_registry.resolve(country_code)
    return validate_fields(rule, bank_code, branch_code, account_number, account_type)


def routing_number(
    country_code: str,
    bank_code: Optional[str],
    branch_code: Optional[str],
) -> Optional[str]:
    """Canonical routing number, or None where the country has none."""
    return country_registry.resolve(country_code).routing_number(bank_code, branch_code)


def account_number_visual(country_code: str, last_four: Optional[str]) -> str:
    """Masked account number for display, e.g. "******6789"."""
    return country_registry.resolve(country_code).account_number_visual(last_four)


def currency(country_code: str) -> str:
    return currency_for(country_code)
