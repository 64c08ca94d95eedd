"""Tests for currency and payout policy lookups."""
import pytest

from payout_rules.domain.accounts.core import currency
from payout_rules.domain.accounts.currency import is_cross_border, minimum_payout_local_cents
from payout_rules.shared.errors import UnsupportedCountryError


@pytest.mark.parametrize(
    "country, expected",
    [
        ("US", "usd"),
        ("CA", "cad"),
        ("GB", "gbp"),
        ("DE", "eur"),
        ("FR", "eur"),
        ("CH", "chf"),
        ("LI", "chf"),
        ("JP", "jpy"),
        ("EC", "usd"),
        ("SV", "usd"),
        ("SN", "xof"),
        ("GI", "gbp"),
        ("AZ", "azn"),
    ],
)
def test_currency(country, expected):
    assert currency(country) == expected


def test_currency_for_every_country(registry):
    for code in registry.keys():
        value = currency(code)
        assert value == value.lower()
        assert len(value) == 3


def test_currency_unknown_country():
    with pytest.raises(UnsupportedCountryError):
        currency("XX")


def test_cross_border_and_minimum_payout():
    assert is_cross_border("KR")
    assert minimum_payout_local_cents("KR") == 4000000
    assert minimum_payout_local_cents("AZ") == 50
    assert not is_cross_border("DE")
    assert minimum_payout_local_cents("DE") == 0
    assert is_cross_border("IS")
    assert minimum_payout_local_cents("IS") == 0
