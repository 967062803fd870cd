"""
Reference number and code line encoder for orange payment slips (ESR/BESR/VESR).

ESR  = payment slip with reference number, the summary term for orange slips.
BESR = ESR paying into a bank account, usually with a banking customer ID.
VESR = ESR paying into a postal account.
ESR+ = ESR issued without a predefined amount.

The code line is read by scanning hardware and must match byte for byte.
"""

import logging

from esr_slip.core.checksum import append_check_digit, break_into_blocks, mod10_recursive
from esr_slip.core.exceptions import DisabledFieldError
from esr_slip.core.slip_data import SlipData, ensure_bool

logger = logging.getLogger(__name__)

REFERENCE_NUMBER_PLACEHOLDER = "X" * 20
BANKING_CUSTOMER_ID_PLACEHOLDER = "X" * 6

AMOUNT_PREFIX = "01"
NO_AMOUNT_PREFIX = "04"
# Mod-10 of "04", printed as a constant when the slip has no amount.
NO_AMOUNT_CHECK_DIGIT = "2"


class ReferenceEncoder:
    def __init__(self, slip: SlipData | None = None):
        self.slip = slip if slip is not None else SlipData()
        self._reference_number: str | None = ""
        self._banking_customer_id: str | None = ""

    # --------------------------------------------------
    # Reference number
    # --------------------------------------------------
    @property
    def with_reference_number(self) -> bool:
        return self._reference_number is not None

    @with_reference_number.setter
    def with_reference_number(self, value: bool) -> None:
        if ensure_bool(value, "with_reference_number"):
            if self._reference_number is None:
                self._reference_number = ""
        else:
            if self._reference_number:
                logger.debug("Reference number disabled, stored value discarded")
            self._reference_number = None

    @property
    def reference_number(self) -> str:
        if self._reference_number is None:
            raise DisabledFieldError("reference number")
        return self._reference_number

    @reference_number.setter
    def reference_number(self, value: str) -> None:
        if self._reference_number is None:
            raise DisabledFieldError("reference number")
        self._reference_number = value

    # --------------------------------------------------
    # Banking customer ID
    # --------------------------------------------------
    @property
    def with_banking_customer_id(self) -> bool:
        return self._banking_customer_id is not None

    @with_banking_customer_id.setter
    def with_banking_customer_id(self, value: bool) -> None:
        if ensure_bool(value, "with_banking_customer_id"):
            if self._banking_customer_id is None:
                self._banking_customer_id = ""
        else:
            if self._banking_customer_id:
                logger.debug("Banking customer ID disabled, stored value discarded")
            self._banking_customer_id = None

    @property
    def banking_customer_id(self) -> str:
        if self._banking_customer_id is None:
            raise DisabledFieldError("banking customer ID")
        return self._banking_customer_id

    @banking_customer_id.setter
    def banking_customer_id(self, value: str) -> None:
        if self._banking_customer_id is None:
            raise DisabledFieldError("banking customer ID")
        self._banking_customer_id = value

    # --------------------------------------------------
    # Void state
    # --------------------------------------------------
    @property
    def not_for_payment(self) -> bool:
        return self.slip.not_for_payment

    @not_for_payment.setter
    def not_for_payment(self, value: bool) -> None:
        if ensure_bool(value, "not_for_payment"):
            self.void()
        else:
            self.slip.not_for_payment = False

    def void(self) -> None:
        """
        X out the reference fields and mark the slip as not for payment.

        Disabled fields stay disabled. Overwritten values are never restored.
        """
        if self._reference_number is not None:
            self._reference_number = REFERENCE_NUMBER_PLACEHOLDER
        if self._banking_customer_id is not None:
            self._banking_customer_id = BANKING_CUSTOMER_ID_PLACEHOLDER
        self.slip.void()

    # --------------------------------------------------
    # Encoding
    # --------------------------------------------------
    def complete_reference_number(self, formatted: bool = True, fill_zeros: bool = True) -> str:
        """
        Reference number with banking customer ID (if used) and check digit.

        Args:
            formatted: Split into blocks of five, separated by spaces.
            fill_zeros: Pad with leading zeros to 26 digits. Only applies when
                no banking customer ID is used.

        Raises:
            DisabledFieldError: The slip has no reference number.
        """
        reference_number = self.reference_number
        not_for_payment = self.not_for_payment

        if not_for_payment:
            complete = "X" * 26
        elif self.with_banking_customer_id:
            complete = self.banking_customer_id + reference_number.rjust(20, "0")
        elif fill_zeros:
            complete = reference_number.rjust(26, "0")
        else:
            complete = reference_number

        complete = append_check_digit(complete, not_for_payment)

        if formatted:
            complete = break_into_blocks(complete)
        return complete

    def code_line(self, fill_zeros: bool = True) -> str:
        """
        Full machine-readable line printed at the bottom of the slip.

        Layout: amount prefix, amount block, amount check digit, '>',
        reference block, '+ ', account block, '>'.
        """
        reference_number = self.complete_reference_number(formatted=False, fill_zeros=fill_zeros)
        account_digits = self.slip.account_digits()
        not_for_payment = self.not_for_payment

        if not_for_payment:
            amount_prefix = "XX"
            amount_part = "X" * 10 if self.slip.with_amount else ""
            amount_check = "X"
        elif self.slip.with_amount:
            francs = str(self.slip.amount_francs()).rjust(8, "0")
            cents = f"{self.slip.amount_cents():02d}"
            amount_prefix = AMOUNT_PREFIX
            amount_part = francs + cents
            amount_check = str(mod10_recursive(amount_prefix + amount_part))
        else:
            amount_prefix = NO_AMOUNT_PREFIX
            amount_part = ""
            amount_check = NO_AMOUNT_CHECK_DIGIT

        if fill_zeros:
            reference_part = reference_number.rjust(27, "0")
        else:
            reference_part = reference_number

        account_part = account_digits[:2] + account_digits[2:].rjust(7, "0")

        return f"{amount_prefix}{amount_part}{amount_check}>{reference_part}+ {account_part}>"
