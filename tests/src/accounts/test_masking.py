"""Tests for account number masking."""
from payout_rules.domain.accounts.core import account_number_visual
from payout_rules.domain.accounts.masking import (
    last_four_of,
    mask_last_four,
    redact_account_numbers,
)
from payout_rules.shared.enums import MaskingPolicy


def test_bare_masking():
    assert account_number_visual("US", "6789") == "******6789"
    assert account_number_visual("CA", "6789") == "******6789"


def test_prefixed_masking():
    assert account_number_visual("DE", "3000") == "DE******3000"
    assert account_number_visual("AZ", "7890") == "AZ******7890"
    assert account_number_visual("CH", "2957") == "CH******2957"


def test_short_and_empty_last_four_are_shown_as_is():
    assert account_number_visual("US", "12") == "******12"
    assert account_number_visual("DE", "") == "DE******"
    assert account_number_visual("US", None) == "******"


def test_prefix_depends_only_on_country():
    assert account_number_visual("DE", "US12") == "DE******US12"
    assert account_number_visual("US", "DE12") == "******DE12"


def test_country_code_is_normalized_before_lookup():
    assert account_number_visual(" de ", "3000") == "DE******3000"


def test_mask_last_four_helper():
    assert mask_last_four(MaskingPolicy.PREFIXED, "FR", "1234") == "FR******1234"
    assert mask_last_four(MaskingPolicy.BARE, "FR", "1234") == "******1234"


def test_last_four_of():
    assert last_four_of("000123456789") == "6789"
    assert last_four_of("12") == "12"
    assert last_four_of(None) == ""


def test_redact_iban_in_text():
    text = "payout to DE89370400440532013000 failed"
    assert redact_account_numbers(text) == "payout to DE******3000 failed"


def test_redact_digit_runs():
    assert redact_account_numbers("account 000123456789 saved") == "account ******6789 saved"


def test_redact_leaves_short_numbers_and_codes():
    text = "retry 3 of 5 for bank 110 (SGSEKRSLXXX)"
    assert redact_account_numbers(text) == text
    assert redact_account_numbers("") == ""


def test_full_account_number_is_cut_to_last_four():
    assert account_number_visual("US", "000123456789") == "******6789"
    assert account_number_visual("DE", "DE89370400440532013000") == "DE******3000"
    assert mask_last_four(MaskingPolicy.BARE, "US", "12345") == "******2345"
