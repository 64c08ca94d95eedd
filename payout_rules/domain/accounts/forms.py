"""Raw payout form schema."""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class BankAccountForm(BaseModel):
    """Bank account section of the payout settings form.

    Country-specific field names (routing_number, sort_code, ifsc, ...)
    arrive as extra fields and are mapped by the country rule's aliases.
    """

    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    country_code: str
    account_number: str
    account_number_confirmation: str
    account_holder_full_name: Optional[str] = None
    bank_code: Optional[str] = None
    branch_code: Optional[str] = None
    account_type: Optional[str] = None

    def extra_fields(self) -> Dict[str, str]:
        extra = self.model_extra or {}
        return {key: str(value).strip() for key, value in extra.items() if value is not None}


class PayoutPayload(BaseModel):
    """Bank account data handed to the payments provider for tokenization."""

    country: str
    currency: str
    account_number: str = Field(repr=False)
    routing_number: Optional[str] = None
    account_type: Optional[str] = None
    account_holder_name: Optional[str] = None
