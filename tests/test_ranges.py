import pytest
from hypothesis import given
from hypothesis import strategies as st

from charkit.ranges import (
    IntRange,
    describe_ranges,
    main,
    measure,
    signed_limits,
    unsigned_limit,
)

widths = st.integers(min_value=1, max_value=99)


def test_char_range():
    found = measure("char", 8)
    assert found == IntRange("char", 8, 255, -128, 127)


@given(widths)
def test_unsigned_limit_is_all_ones(bits):
    limit = unsigned_limit(bits)
    assert limit + 1 == 1 << bits
    assert limit.bit_length() == bits


@given(widths)
def test_signed_limits_are_symmetric(bits):
    low, high = signed_limits(bits)
    assert low == -(high + 1)
    assert high - low == unsigned_limit(bits)


@pytest.mark.parametrize("bits", [0, -3, 100])
def test_unsigned_limit_rejects_bad_width(bits):
    with pytest.raises(ValueError):
        unsigned_limit(bits)


def test_describe_ranges_lists_every_type():
    text = describe_ranges()
    assert text.startswith("The limit of an unsigned char is 255\n")
    for name in ("char", "short int", "int", "long int"):
        assert f"The limit of an unsigned {name} is" in text
        assert f"The limits of a signed {name} are" in text


def test_describe_ranges_uses_measured_values():
    text = describe_ranges()
    long_range = measure("long int", 64)
    assert f"unsigned long int is {long_range.unsigned_max}\n" in text
    assert (
        f"are {long_range.signed_min} and {long_range.signed_max}\n\n" in text
    )


def test_main_prints_description(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == describe_ranges()