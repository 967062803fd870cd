from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from esr_slip.core.config import settings


class SlipEncodeRequest(BaseModel):
    # Compte
    account_number: str = Field(pattern=r"^\d{2}-\d{1,6}-\d$")

    # Montant (None = BVR+ sans montant)
    amount: Optional[Decimal] = Field(default=None, ge=0, lt=Decimal("100000000"))

    # Référence
    reference_number: str = Field(default="", pattern=r"^\d{0,20}$")
    with_reference_number: bool = True
    banking_customer_id: Optional[str] = Field(default=None, pattern=r"^\d{6}$")

    not_for_payment: bool = False
    fill_zeros: bool = settings.DEFAULT_FILL_ZEROS


class SlipEncodeResponse(BaseModel):
    reference_number: str
    reference_number_raw: str
    code_line: str


class ChecksumRequest(BaseModel):
    digits: str = Field(pattern=r"^\d+$")


class ChecksumResponse(BaseModel):
    digits: str
    check_digit: int
    with_check_digit: str
    valid: bool
