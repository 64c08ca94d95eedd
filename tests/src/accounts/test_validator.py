"""Tests for bank account validation."""
import pytest

from payout_rules.domain.accounts.core import validate
from payout_rules.domain.accounts.validator import validate_fields
from payout_rules.shared.enums import BankField, FieldErrorCode
from payout_rules.shared.errors import UnsupportedCountryError


def test_valid_us_account():
    verdict = validate("US", "110000000", None, "000123456789")
    assert verdict.valid
    assert verdict.errors == []
    assert bool(verdict) is True


def test_all_failing_fields_are_reported_in_order():
    """Checks do not stop at the first failure."""
    verdict = validate("CA", "12", "1", "")
    assert not verdict.valid
    assert [e.field for e in verdict.errors] == [
        BankField.BANK_CODE,
        BankField.BRANCH_CODE,
        BankField.ACCOUNT_NUMBER,
    ]
    assert [e.code for e in verdict.errors] == [
        FieldErrorCode.INVALID_FORMAT,
        FieldErrorCode.INVALID_FORMAT,
        FieldErrorCode.MISSING,
    ]


def test_error_messages():
    verdict = validate("US", "", None, "12a")
    assert verdict.error_for(BankField.BANK_CODE).message == "Bank code is required."
    assert verdict.error_for(BankField.ACCOUNT_NUMBER).message == (
        "Account number must be between 1 and 17 digits."
    )
    assert verdict.error_for(BankField.BRANCH_CODE) is None
    assert verdict.as_dict() == {
        "bank_code": "Bank code is required.",
        "account_number": "Account number must be between 1 and 17 digits.",
    }


def test_unused_branch_code_is_ignored():
    verdict = validate("US", "110000000", "garbage", "000123456789")
    assert verdict.valid


def test_optional_branch_code():
    assert validate("DO", "999", None, "000123456789").valid
    assert validate("DO", "999", "00001", "000123456789").valid
    verdict = validate("DO", "999", "0000001", "000123456789")
    assert [e.field for e in verdict.errors] == [BankField.BRANCH_CODE]


def test_required_branch_code_missing():
    verdict = validate("JP", "1100", None, "0001234")
    assert [(e.field, e.code) for e in verdict.errors] == [
        (BankField.BRANCH_CODE, FieldErrorCode.MISSING),
    ]


def test_iban_country_without_bank_code():
    assert validate("DE", None, None, "DE89370400440532013000").valid
    verdict = validate("DE", None, None, "DE8937040044053201300")
    assert verdict.error_for(BankField.ACCOUNT_NUMBER).code == FieldErrorCode.INVALID_FORMAT


def test_case_is_not_normalized():
    verdict = validate("KR", "sgsekrslxxx", None, "000123456789")
    assert verdict.error_for(BankField.BANK_CODE).code == FieldErrorCode.INVALID_FORMAT
    assert not validate("DE", None, None, "de89370400440532013000").valid


def test_account_type_checked_only_where_supported():
    assert validate("CL", "999", None, "000123456789", account_type="savings").valid
    assert validate("CO", "060", None, "000123456789", account_type="checking").valid
    assert validate("CO", "060", None, "000123456789").valid
    verdict = validate("CO", "060", None, "000123456789", account_type="business")
    assert [e.field for e in verdict.errors] == [BankField.ACCOUNT_TYPE]
    assert verdict.errors[0].message == "Account type must be checking or savings."
    assert validate("US", "110000000", None, "000123456789", account_type="business").valid


def test_unsupported_country_raises():
    with pytest.raises(UnsupportedCountryError) as exc_info:
        validate("XX", "1", "2", "3")
    assert exc_info.value.country_code == "XX"


def test_validate_fields_is_pure(registry):
    rule = registry.resolve("US")
    first = validate_fields(rule, "1", None, "2")
    second = validate_fields(rule, "1", None, "2")
    assert first == second
    assert first is not second
