import io

import pytest
from hypothesis import given, strategies as st

from charkit.hexconv import calculate_hex, calculate_value, htoi, main, validate_hex


@pytest.mark.parametrize(
    "s",
    ["0x123456789", "0x", "123456789", "", "0xABCDEFGH", "Ox12345678", "0C12345678"],
)
def test_invalid_hex_rejected(s):
    assert validate_hex(s) is False


@pytest.mark.parametrize(
    "s",
    ["0x12345678", "12345678", "0x1234CDEF", "0x1F", "0x0", "0x00000000",
     "de4dBE3F", "1DAD2dad"],
)
def test_valid_hex_accepted(s):
    assert validate_hex(s) is True


@pytest.mark.parametrize("i, c", list(enumerate("0123456789ABCDEF")))
def test_calculate_value_upper(i, c):
    assert calculate_value(c) == i


@pytest.mark.parametrize("i, c", list(enumerate("abcdef")))
def test_calculate_value_lower(i, c):
    assert calculate_value(c) == i + 10


@pytest.mark.parametrize("c", ["g", "G", "x", " ", "", "12"])
def test_calculate_value_rejects(c):
    with pytest.raises(ValueError):
        calculate_value(c)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("0xFFFFFFFF", 4294967295),
        ("0x0", 0),
        ("0x0A9D", 2717),
        ("0xDEADBEEF", 3735928559),
        ("0x1010DaB0", 269540016),
        ("7302D9C", 120597916),
    ],
)
def test_calculate_hex(s, expected):
    assert calculate_hex(s) == expected
    assert htoi(s) == expected


def test_header_examples_from_docs():
    assert htoi("0x12345678") == 305419896
    assert htoi("0x1234") == 4660
    assert htoi("1234") == 4660


@pytest.mark.parametrize("s", ["0x", "0xZZ", "123456789", ""])
def test_htoi_rejects(s):
    with pytest.raises(ValueError):
        htoi(s)


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_round_trip_with_format(n):
    assert htoi(f"0x{n:x}") == n
    assert htoi(f"{n:X}") == n
    assert htoi(f"0X{n:08x}") == n


def test_main_valid(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0xDEADBEEF\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "The value of the provided hex is 3735928559.\n"


def test_main_invalid(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0xnothex\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("The specified string is invalid")
    assert "[0x]NNNNNNNN" in out