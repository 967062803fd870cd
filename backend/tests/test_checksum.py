import pytest

from esr_slip.core.checksum import (
    append_check_digit,
    break_into_blocks,
    is_valid_mod10,
    mod10_recursive,
)

MOD10_TABLE = [
    [0, 9, 4, 6, 8, 2, 7, 1, 3, 5],
    [9, 4, 6, 8, 2, 7, 1, 3, 5, 0],
    [4, 6, 8, 2, 7, 1, 3, 5, 0, 9],
    [6, 8, 2, 7, 1, 3, 5, 0, 9, 4],
    [8, 2, 7, 1, 3, 5, 0, 9, 4, 6],
    [2, 7, 1, 3, 5, 0, 9, 4, 6, 8],
    [7, 1, 3, 5, 0, 9, 4, 6, 8, 2],
    [1, 3, 5, 0, 9, 4, 6, 8, 2, 7],
    [3, 5, 0, 9, 4, 6, 8, 2, 7, 1],
    [5, 0, 9, 4, 6, 8, 2, 7, 1, 3],
]


def _mod10_full_table(number: str) -> int:
    carry = 0
    for ch in number:
        carry = MOD10_TABLE[carry][int(ch)]
    return (10 - carry) % 10


@pytest.mark.parametrize(
    "number, expected",
    [
        ("", 0),
        ("1", 1),
        ("01", 1),
        ("04", 2),
        ("010000010005", 6),
        ("00000000000000000000000001", 1),
        ("12345600000000000000000001", 4),
    ],
)
def test_mod10_known_vectors(number, expected):
    assert mod10_recursive(number) == expected


def test_mod10_matches_full_table():
    """Rotated single-row lookup must agree with the 10x10 table"""
    for carry in range(10):
        for digit in range(10):
            assert MOD10_TABLE[carry][digit] == MOD10_TABLE[0][(carry + digit) % 10]

    samples = ["0", "9", "42", "1234567890", "98765432109876543210", "000000000000000000000000001"]
    samples += [str(n) for n in range(0, 2000, 7)]
    for number in samples:
        assert mod10_recursive(number) == _mod10_full_table(number)


def test_mod10_is_deterministic():
    assert mod10_recursive("210000000003139471430009017") == mod10_recursive("210000000003139471430009017")


def test_mod10_rejects_non_digits():
    with pytest.raises(ValueError):
        mod10_recursive("12X4")
    with pytest.raises(ValueError):
        mod10_recursive("12 34")


def test_append_check_digit():
    assert append_check_digit("04") == "042"
    assert append_check_digit("12345600000000000000000001") == "123456000000000000000000014"


def test_append_check_digit_void_slip_skips_computation():
    # A void reference is made of X placeholders, never computed
    assert append_check_digit("X" * 26, not_for_payment=True) == "X" * 27


def test_is_valid_mod10():
    assert is_valid_mod10("042")
    assert is_valid_mod10("123456000000000000000000014")
    assert not is_valid_mod10("123456000000000000000000015")
    assert not is_valid_mod10("4")
    assert not is_valid_mod10("04A")
    assert not is_valid_mod10("")


def test_break_into_blocks_left_to_right():
    assert break_into_blocks("123456000000000000000000014") == "12345 60000 00000 00000 00000 14"
    assert break_into_blocks("11") == "11"
    assert break_into_blocks("") == ""


def test_break_into_blocks_is_reversible():
    value = "1234567890123"
    for size in (1, 3, 5, 7):
        assert break_into_blocks(value, block_size=size).replace(" ", "") == value


def test_break_into_blocks_rejects_invalid_size():
    with pytest.raises(ValueError):
        break_into_blocks("123", block_size=0)
