import logging

from fastapi import APIRouter, HTTPException

from esr_slip.core.checksum import is_valid_mod10, mod10_recursive
from esr_slip.core.exceptions import DisabledFieldError
from esr_slip.core.reference_encoder import ReferenceEncoder
from esr_slip.schemas.slip import (
    ChecksumRequest,
    ChecksumResponse,
    SlipEncodeRequest,
    SlipEncodeResponse,
)

router = APIRouter(prefix="/slips", tags=["slips"])

logger = logging.getLogger(__name__)


def _build_encoder(payload: SlipEncodeRequest) -> ReferenceEncoder:
    encoder = ReferenceEncoder()
    slip = encoder.slip

    slip.account_number = payload.account_number
    if payload.amount is None:
        slip.with_amount = False
    else:
        slip.amount = payload.amount

    if payload.with_reference_number:
        encoder.reference_number = payload.reference_number
    else:
        encoder.with_reference_number = False
    if payload.banking_customer_id is None:
        encoder.with_banking_customer_id = False
    else:
        encoder.banking_customer_id = payload.banking_customer_id

    if payload.not_for_payment:
        encoder.void()
    return encoder


@router.post("/encode", response_model=SlipEncodeResponse)
def encode_slip(payload: SlipEncodeRequest) -> SlipEncodeResponse:
    """
    Complete reference number and code line of an orange payment slip.
    """
    try:
        encoder = _build_encoder(payload)
        return SlipEncodeResponse(
            reference_number=encoder.complete_reference_number(
                formatted=True, fill_zeros=payload.fill_zeros
            ),
            reference_number_raw=encoder.complete_reference_number(
                formatted=False, fill_zeros=payload.fill_zeros
            ),
            code_line=encoder.code_line(fill_zeros=payload.fill_zeros),
        )
    except DisabledFieldError as e:
        logger.warning(f"Slip encoding rejected: {e}")
        raise HTTPException(
            status_code=409,
            detail=f"Field disabled for this slip: {e.field}",
        ) from e
    except ValueError as e:
        logger.warning(f"Slip encoding rejected: {e}")
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e


@router.post("/checksum", response_model=ChecksumResponse)
def compute_checksum(payload: ChecksumRequest) -> ChecksumResponse:
    check_digit = mod10_recursive(payload.digits)
    return ChecksumResponse(
        digits=payload.digits,
        check_digit=check_digit,
        with_check_digit=f"{payload.digits}{check_digit}",
        valid=is_valid_mod10(payload.digits),
    )
