"""Pytest configuration and fixtures for test suite."""
import sys
from pathlib import Path

import pytest

# Додаємо корінь проєкту в sys.path, щоб імпорти payout_rules.* працювали без інсталяції пакету
PROJECT_ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(PROJECT_ROOT)
if ROOT_STR in sys.path:
    sys.path.remove(ROOT_STR)
sys.path.insert(0, ROOT_STR)


@pytest.fixture
def registry():
    """The global, frozen country rule registry."""
    from payout_rules.domain.accounts.registry import country_registry  # pylint: disable=import-outside-toplevel

    return country_registry


@pytest.fixture
def make_form():
    """Factory for BankAccountForm with matching confirmation by default."""
    from payout_rules.domain.accounts.forms import BankAccountForm  # pylint: disable=import-outside-toplevel

    def _make(country_code, account_number, confirmation=None, **fields):
        return BankAccountForm(
            country_code=country_code,
            account_number=account_number,
            account_number_confirmation=account_number if confirmation is None else confirmation,
            **fields,
        )

    return _make
