import re


# Row 0 of the Mod-10 recursive table; row n is row 0 rotated left by n.
_MOD10_TABLE = [0, 9, 4, 6, 8, 2, 7, 1, 3, 5]


def _ensure_digits(number: str) -> str:
    if not re.fullmatch(r"\d*", number or ""):
        raise ValueError(f"Mod-10 input must contain digits only, got '{number}'")
    return number or ""


def mod10_recursive(number: str) -> int:
    carry = 0
    for ch in _ensure_digits(number):
        carry = _MOD10_TABLE[(carry + int(ch)) % 10]
    return (10 - carry) % 10


def append_check_digit(number: str, not_for_payment: bool = False) -> str:
    """
    Append the Mod-10 check digit, or a literal 'X' on a void slip.
    """
    if not_for_payment:
        return f"{number}X"
    return f"{number}{mod10_recursive(number)}"


def is_valid_mod10(value: str) -> bool:
    if not re.fullmatch(r"\d{2,}", value or ""):
        return False
    return value[-1] == str(mod10_recursive(value[:-1]))


def break_into_blocks(value: str, block_size: int = 5) -> str:
    if block_size < 1:
        raise ValueError("block_size must be >= 1")
    blocks = [value[i:i + block_size] for i in range(0, len(value), block_size)]
    return " ".join(blocks)
