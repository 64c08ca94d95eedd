"""Privacy-safe rendering of bank account numbers."""
from __future__ import annotations

import re
from typing import Optional

from payout_rules.shared.enums import MaskingPolicy

MASK = "******"

_IBAN_LIKE_RE = re.compile(r"\b([A-Z]{2})[0-9]{2}[A-Z0-9]{7,30}\b")
_DIGIT_RUN_RE = re.compile(r"\b[0-9]{6,}\b")


def mask_last_four(policy: MaskingPolicy, country_code: str, last_four: Optional[str]) -> str:
    """
    Build the visual account number, e.g. "DE******3000" or "******6789".

    Only the last four characters of last_four are shown; a shorter value
    is shown as given. Nothing is validated here.
    """
    tail = (last_four or "")[-4:]
    if policy == MaskingPolicy.PREFIXED:
        return f"{country_code}{MASK}{tail}"
    return f"{MASK}{tail}"


def last_four_of(account_number: Optional[str]) -> str:
    return (account_number or "")[-4:]


def _mask_iban(match: re.Match) -> str:
    return f"{match.group(1)}{MASK}{match.group(0)[-4:]}"


def _mask_digits(match: re.Match) -> str:
    return f"{MASK}{match.group(0)[-4:]}"


def redact_account_numbers(text: str) -> str:
    """Mask IBAN-shaped tokens and long digit runs inside free text."""
    if not text:
        return text
    text = _IBAN_LIKE_RE.sub(_mask_iban, text)
    return _DIGIT_RUN_RE.sub(_mask_digits, text)
