from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from payout_rules.shared.enums import BankField, FieldErrorCode


@dataclass(frozen=True)
class FieldError:
    field: BankField
    code: FieldErrorCode
    message: str


@dataclass
class Verdict:
    # Результат однієї перевірки; не зберігається
    errors: List[FieldError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid

    def error_for(self, bank_field: BankField) -> Optional[FieldError]:
        for error in self.errors:
            if error.field == bank_field:
                return error
        return None

    def as_dict(self) -> dict:
        """Field name -> message, e.g. for surfacing as form errors."""
        return {error.field.value: error.message for error in self.errors}


@dataclass
class BankAccount:
    """
    Bank account details submitted by a seller.

    account_number is transient: only account_number_last_four (and the
    token returned by the payments provider) outlive the submission.
    """

    country_code: str
    account_number: str = field(repr=False)
    account_number_last_four: str
    bank_code: Optional[str] = None
    branch_code: Optional[str] = None
    account_holder_full_name: Optional[str] = None
    account_type: Optional[str] = None
