"""ULN Checksum — tests for the pure weighted-sum and classification functions.

Tests cover:
    - calculate_weighted_sum applies weights 10 down to 2
    - expected_check_digit returns 10 - remainder, None on remainder 0
    - classify separates VALID / INVALID_CHECKSUM / INVALID_FORMAT without raising
    - pattern rejects non-ASCII digits, whitespace, and trailing newlines
    - every payload has exactly one valid check digit unless its remainder is 0
"""

from uln.core.checksum import (
    ULN_PATTERN,
    calculate_weighted_sum,
    classify,
    expected_check_digit,
)
from uln.core.domain_types import ValidationOutcome


# ─── calculate_weighted_sum ──────────────────────────────────────

def test_weighted_sum_of_zero_payload_is_zero():
    assert calculate_weighted_sum("000000000") == 0


def test_weighted_sum_first_digit_has_weight_10():
    assert calculate_weighted_sum("100000000") == 10


def test_weighted_sum_last_digit_has_weight_2():
    assert calculate_weighted_sum("000000001") == 2


def test_weighted_sum_ascending_payload():
    # 10*1 + 9*2 + 8*3 + 7*4 + 6*5 + 5*6 + 4*7 + 3*8 + 2*9
    assert calculate_weighted_sum("123456789") == 210


def test_weighted_sum_all_nines():
    assert calculate_weighted_sum("999999999") == 9 * 54


# ─── expected_check_digit ────────────────────────────────────────

def test_expected_check_digit_is_ten_minus_remainder():
    assert expected_check_digit("000000004") == 2   # 8 % 11 = 8
    assert expected_check_digit("123456789") == 9   # 210 % 11 = 1
    assert expected_check_digit("999999999") == 8   # 486 % 11 = 2


def test_expected_check_digit_zero_when_remainder_ten():
    assert expected_check_digit("100000000") == 0


def test_expected_check_digit_none_when_remainder_zero():
    assert expected_check_digit("000000000") is None
    assert expected_check_digit("010000001") is None   # 9 + 2 = 11


# ─── classify ────────────────────────────────────────────────────

def test_classify_valid(valid_ulns):
    for value in valid_ulns:
        assert classify(value) is ValidationOutcome.VALID


def test_classify_checksum_mismatch():
    assert classify("0000000043") is ValidationOutcome.INVALID_CHECKSUM


def test_classify_remainder_zero_is_checksum_not_format():
    for check_digit in "0123456789":
        assert classify("000000000" + check_digit) is ValidationOutcome.INVALID_CHECKSUM
        assert classify("010000001" + check_digit) is ValidationOutcome.INVALID_CHECKSUM


def test_classify_too_short():
    assert classify("000000004") is ValidationOutcome.INVALID_FORMAT


def test_classify_too_long():
    assert classify("00000000420") is ValidationOutcome.INVALID_FORMAT


def test_classify_empty_string():
    assert classify("") is ValidationOutcome.INVALID_FORMAT


def test_classify_letters():
    assert classify("000000004X") is ValidationOutcome.INVALID_FORMAT
    assert classify("abcdefghij") is ValidationOutcome.INVALID_FORMAT


def test_classify_rejects_surrounding_whitespace():
    assert classify(" 0000000042") is ValidationOutcome.INVALID_FORMAT
    assert classify("0000000042 ") is ValidationOutcome.INVALID_FORMAT


def test_classify_rejects_trailing_newline():
    assert classify("0000000042\n") is ValidationOutcome.INVALID_FORMAT


def test_classify_rejects_non_ascii_digits():
    # Arabic-Indic digits are \d under re.UNICODE but not ULN digits
    assert classify("٠٠٠٠٠٠٠٠٤٢") is ValidationOutcome.INVALID_FORMAT


def test_classify_rejects_signs_and_separators():
    assert classify("-000000042") is ValidationOutcome.INVALID_FORMAT
    assert classify("00000-0042") is ValidationOutcome.INVALID_FORMAT


# ─── Pattern ─────────────────────────────────────────────────────

def test_pattern_groups_payload_and_check_digit():
    match = ULN_PATTERN.fullmatch("1234567899")
    assert match is not None
    assert match.group("digits") == "123456789"
    assert match.group("check_digit") == "9"


# ─── Properties ──────────────────────────────────────────────────

def test_at_most_one_check_digit_verifies_each_payload():
    for n in range(0, 1_000_000_000, 999_983):
        payload = f"{n:09d}"
        valid = [
            c for c in "0123456789"
            if classify(payload + c) is ValidationOutcome.VALID
        ]
        expected = expected_check_digit(payload)
        if expected is None:
            assert valid == []
        else:
            assert valid == [str(expected)]


def test_outcome_is_valid_property():
    assert ValidationOutcome.VALID.is_valid
    assert not ValidationOutcome.INVALID_CHECKSUM.is_valid
    assert not ValidationOutcome.INVALID_FORMAT.is_valid
