import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from charkit.fold import fold, main

sample = st.text(alphabet="ab \t\n", max_size=80)


def test_fold_documented_example():
    assert fold("Hello, world!", 8) == "Hello, w\norld!\n"


def test_fold_tab_becomes_space():
    assert fold("a\tb", 8) == "a b\n"


def test_fold_drops_trailing_blanks():
    assert fold("ab  ", 8) == "ab\n"


@given(sample, st.integers(min_value=1, max_value=10))
def test_fold_keeps_non_blank_characters(text, width):
    kept = "".join(ch for ch in text if ch not in " \t\n")
    result = fold(text, width)
    assert result.replace(" ", "").replace("\n", "") == kept


@given(sample, st.integers(min_value=1, max_value=10))
def test_fold_newline_count(text, width):
    assert fold(text, width).count("\n") == len(text) // width + 1


@given(sample, st.integers(min_value=1, max_value=10))
def test_fold_ends_with_newline_and_no_tabs(text, width):
    result = fold(text, width)
    assert result.endswith("\n")
    assert "\t" not in result


def test_fold_rejects_bad_width():
    with pytest.raises(ValueError):
        fold("abc", 0)


def test_main_folds_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Hello, world!\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello, w\norld!\n"