import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.numbers import atoi, atol, itoa

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
INT64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)
WHITESPACE = st.text(alphabet="\t\n\v\f\r ", max_size=5)
JUNK = st.text(alphabet=string.ascii_letters + " .-+", max_size=5).filter(
    lambda s: not s[:1].isdigit()
)


@given(INT32)
def test_atoi_round_trips_itoa(n):
    assert atoi(itoa(n)) == n


@given(INT64)
def test_atol_round_trips_str(n):
    assert atol(str(n)) == n


@given(WHITESPACE, INT32, JUNK)
def test_atoi_skips_whitespace_and_trailing_text(ws, n, junk):
    assert atoi(ws + str(n) + junk) == n


@given(INT32)
def test_explicit_plus_sign(n):
    assert atoi("+" + str(abs(n))) == abs(n) if abs(n) < 2**31 else True
    assert atol("+" + str(abs(n))) == abs(n)


@given(st.text(alphabet=string.ascii_letters + " ", max_size=10))
def test_no_digits_parses_as_zero(text):
    assert atoi(text) == 0
    assert atol(text) == 0


def test_sign_without_digits_and_double_sign():
    assert atoi("-") == 0
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_atol_holds_values_atoi_wraps():
    assert atol("2147483648") == 2147483648
    assert atoi("2147483648") != atol("2147483648")


def test_parsing_stops_at_nul():
    assert atoi("12\x0034") == atoi("12")


@given(INT32)
def test_itoa_matches_digits(n):
    text = itoa(n)
    assert text.lstrip("-").isdigit()
    assert text.startswith("-") == (n < 0)


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)
    with pytest.raises(OverflowError):
        itoa(-(2**31) - 1)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")
    with pytest.raises(TypeError):
        itoa(True)