"""Common enumerations used across the payout rules engine."""
from enum import Enum


class BankField(str, Enum):
    """Bank account field a validation error is reported against."""
    BANK_CODE = "bank_code"
    BRANCH_CODE = "branch_code"
    ACCOUNT_NUMBER = "account_number"
    ACCOUNT_TYPE = "account_type"


class FieldErrorCode(str, Enum):
    """Reason a single field failed validation."""

    MISSING = "missing"
    INVALID_FORMAT = "invalid_format"


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"


class MaskingPolicy(str, Enum):
    """How the last four digits of an account are shown to the user."""

    PREFIXED = "prefixed"  # "DE******3000"
    BARE = "bare"          # "******6789"


class RoutingStrategy(str, Enum):
    """Rule used to derive the routing number from bank and branch codes."""

    NONE = "none"
    FIXED = "fixed"
    FIELD = "field"
    CONCATENATION = "concatenation"
    HYPHENATED = "hyphenated"
