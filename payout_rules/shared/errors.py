"""Custom exception classes for the payout rules engine."""
from __future__ import annotations


class UnsupportedCountryError(LookupError):
    """Raised when a country code has no registered payout rule."""

    def __init__(self, country_code: str) -> None:
        super().__init__(f"Bank payouts are not supported for country {country_code!r}")
        self.country_code = country_code


class RegistryFrozenError(RuntimeError):
    """Raised on an attempt to mutate a registry after it was frozen."""


class ValidationError(Exception):
    """Raised when submitted payout form data is rejected as a whole."""
    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
