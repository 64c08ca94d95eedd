"""Settlement currency and payout policy lookups."""
from __future__ import annotations

from typing import Optional

from payout_rules.domain.accounts.registry import country_registry


def currency_for(country_code: Optional[str]) -> str:
    """Lower-case ISO 4217 settlement currency of a supported country."""
    return country_registry.resolve(country_code).currency


def is_cross_border(country_code: Optional[str]) -> bool:
    return country_registry.resolve(country_code).cross_border


def minimum_payout_local_cents(country_code: Optional[str]) -> int:
    """
    Minimum cross-border payout in the smallest unit of the local currency.
    0 means the country has no minimum.
    """
    return country_registry.resolve(country_code).min_payout_local_cents
