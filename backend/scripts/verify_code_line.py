import re

from esr_slip.core.checksum import is_valid_mod10
from esr_slip.core.reference_encoder import ReferenceEncoder


def _validate_code_line(code_line: str) -> bool:
    match = re.fullmatch(r"(01\d{10}|04)(\d)>(\d{27})\+ (\d{9})>", code_line)
    if not match:
        return False
    amount, check, reference, _ = match.groups()
    return is_valid_mod10(f"{amount}{check}") and is_valid_mod10(reference)


def main() -> None:
    encoder = ReferenceEncoder()
    encoder.slip.account_number = "01-162-8"
    encoder.slip.amount = "3949.75"
    encoder.banking_customer_id = "123456"
    encoder.reference_number = "4711"

    besr_reference = encoder.complete_reference_number()
    besr_line = encoder.code_line()
    assert _validate_code_line(besr_line), f"Invalid BESR code line: {besr_line}"

    encoder.slip.with_amount = False
    encoder.with_banking_customer_id = False
    esr_plus_line = encoder.code_line()
    assert _validate_code_line(esr_plus_line), f"Invalid ESR+ code line: {esr_plus_line}"

    encoder.not_for_payment = True
    void_line = encoder.code_line()
    assert not _validate_code_line(void_line), f"Void code line must not scan: {void_line}"

    print("BESR reference:", besr_reference)
    print("BESR code line:", besr_line)
    print("ESR+ code line:", esr_plus_line)
    print("Void code line:", void_line)
    print("OK: code line checks passed.")


if __name__ == "__main__":
    main()
