"""
Base data container for a Swiss payment slip.

Holds the bank, account, recipient, amount and payer fields. Every group of
fields is gated by a ``with_*`` flag, because not every slip variant prints
every field. A disabled field is stored as ``None``: it cannot be read or
written until its flag is enabled again, and re-enabling starts it empty.
"""

from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
import logging

from esr_slip.core.exceptions import DisabledFieldError

logger = logging.getLogger(__name__)

PAYER_LINE_PLACEHOLDER = "XXXXXX"
ACCOUNT_DIGITS_PLACEHOLDER = "XXXXXXXXX"
# The code line has eight digits for francs.
MAX_AMOUNT = Decimal("100000000")


class SlipState(str, Enum):
    ACTIVE = "active"
    VOIDED = "voided"


def ensure_bool(value, name: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool, got {type(value).__name__}")
    return value


def _gated(value, field: str):
    if value is None:
        raise DisabledFieldError(field)
    return value


class SlipData:
    def __init__(self):
        self._bank_name: str | None = ""
        self._bank_city: str | None = ""
        self._account_number: str | None = ""
        self._recipient_lines: list[str] | None = ["", "", "", ""]
        self._amount: Decimal | None = Decimal("0.00")
        self._payer_lines: list[str] | None = ["", "", "", ""]
        self.state = SlipState.ACTIVE

    # --------------------------------------------------
    # Bank
    # --------------------------------------------------
    @property
    def with_bank(self) -> bool:
        return self._bank_name is not None

    @with_bank.setter
    def with_bank(self, value: bool) -> None:
        if ensure_bool(value, "with_bank"):
            if self._bank_name is None:
                self._bank_name = ""
                self._bank_city = ""
        else:
            self._bank_name = None
            self._bank_city = None

    @property
    def bank_name(self) -> str:
        return _gated(self._bank_name, "bank name")

    @bank_name.setter
    def bank_name(self, value: str) -> None:
        _gated(self._bank_name, "bank name")
        self._bank_name = value

    @property
    def bank_city(self) -> str:
        return _gated(self._bank_city, "bank city")

    @bank_city.setter
    def bank_city(self, value: str) -> None:
        _gated(self._bank_city, "bank city")
        self._bank_city = value

    # --------------------------------------------------
    # Account
    # --------------------------------------------------
    @property
    def with_account_number(self) -> bool:
        return self._account_number is not None

    @with_account_number.setter
    def with_account_number(self, value: bool) -> None:
        if ensure_bool(value, "with_account_number"):
            if self._account_number is None:
                self._account_number = ""
        else:
            self._account_number = None

    @property
    def account_number(self) -> str:
        return _gated(self._account_number, "account number")

    @account_number.setter
    def account_number(self, value: str) -> None:
        _gated(self._account_number, "account number")
        self._account_number = value

    def account_digits(self) -> str:
        """
        Postal account number without hyphens, e.g. "01-162-8" -> "010001628".

        The middle part is left-padded with zeros to six digits.
        """
        account_number = self.account_number
        if self.not_for_payment:
            return ACCOUNT_DIGITS_PLACEHOLDER

        parts = account_number.split("-")
        if len(parts) != 3:
            raise ValueError(
                f"Invalid account number '{account_number}': must contain two hyphens"
            )
        prefix, number, check = parts
        return f"{prefix}{number.rjust(6, '0')}{check}"

    # --------------------------------------------------
    # Recipient
    # --------------------------------------------------
    @property
    def with_recipient(self) -> bool:
        return self._recipient_lines is not None

    @with_recipient.setter
    def with_recipient(self, value: bool) -> None:
        if ensure_bool(value, "with_recipient"):
            if self._recipient_lines is None:
                self._recipient_lines = ["", "", "", ""]
        else:
            self._recipient_lines = None

    def get_recipient_line(self, number: int) -> str:
        lines = _gated(self._recipient_lines, f"recipient line {number}")
        return lines[_line_index(number)]

    def set_recipient_line(self, number: int, value: str) -> None:
        lines = _gated(self._recipient_lines, f"recipient line {number}")
        lines[_line_index(number)] = value

    # --------------------------------------------------
    # Amount
    # --------------------------------------------------
    @property
    def with_amount(self) -> bool:
        return self._amount is not None

    @with_amount.setter
    def with_amount(self, value: bool) -> None:
        if ensure_bool(value, "with_amount"):
            if self._amount is None:
                self._amount = Decimal("0.00")
        else:
            self._amount = None

    @property
    def amount(self) -> Decimal:
        return _gated(self._amount, "amount")

    @amount.setter
    def amount(self, value: Decimal | int | float | str) -> None:
        _gated(self._amount, "amount")
        amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        if amount < 0 or amount >= MAX_AMOUNT:
            raise ValueError(f"Amount must be between 0 and 99999999.99, got {amount}")
        self._amount = amount

    def amount_francs(self) -> int:
        return int(self.amount)

    def amount_cents(self) -> int:
        amount = self.amount
        return int((amount - int(amount)) * 100)

    # --------------------------------------------------
    # Payer
    # --------------------------------------------------
    @property
    def with_payer(self) -> bool:
        return self._payer_lines is not None

    @with_payer.setter
    def with_payer(self, value: bool) -> None:
        if ensure_bool(value, "with_payer"):
            if self._payer_lines is None:
                self._payer_lines = ["", "", "", ""]
        else:
            self._payer_lines = None

    def get_payer_line(self, number: int) -> str:
        lines = _gated(self._payer_lines, f"payer line {number}")
        return lines[_line_index(number)]

    def set_payer_line(self, number: int, value: str) -> None:
        lines = _gated(self._payer_lines, f"payer line {number}")
        lines[_line_index(number)] = value

    # --------------------------------------------------
    # Void state
    # --------------------------------------------------
    @property
    def not_for_payment(self) -> bool:
        return self.state is SlipState.VOIDED

    @not_for_payment.setter
    def not_for_payment(self, value: bool) -> None:
        if ensure_bool(value, "not_for_payment"):
            self.void()
        else:
            self.state = SlipState.ACTIVE

    def void(self) -> None:
        """
        Mark the slip as not for payment.

        Payer lines are overwritten with placeholders and are not restored when
        the slip becomes payable again.
        """
        if self._payer_lines is not None:
            self._payer_lines = [PAYER_LINE_PLACEHOLDER] * 4
        self.state = SlipState.VOIDED
        logger.debug("Payment slip voided")


def _line_index(number: int) -> int:
    if number not in (1, 2, 3, 4):
        raise ValueError(f"Line number must be between 1 and 4, got {number}")
    return number - 1
