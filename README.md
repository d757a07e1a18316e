# charkit

A handful of small text filters and bit-manipulation helpers, usable both
from Python and from the command line. There are no dependencies beyond the
standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool reads standard input and writes to standard output. None takes
options apart from `--help`, except `charkit-bits`, which accepts the names of
demonstrations to run.

| Command           | What it does |
|-------------------|--------------|
| `charkit-detab`   | Replaces every tab with spaces up to the next tab stop (every 8 columns; columns restart after each newline). Reads all of standard input. |
| `charkit-entab`   | Reads at most 100 characters, drops the last one (normally the trailing newline), prints `The entabbed line is:` and then the line as processed by `entab` (see below). |
| `charkit-fold`    | Reads at most 100 characters, drops the last one, and folds the rest into lines of 8 columns. |
| `charkit-ranges`  | Prints the unsigned and signed ranges of 8-bit char, 16-bit short int, 32-bit int and 64-bit long int. |
| `charkit-htoi`    | Reads up to 10 characters of one line and prints its hexadecimal value, or an explanation of the accepted format if it is invalid. Always exits with status 0. |
| `charkit-squeeze` | Prompts for a string and for characters to remove, then prints the string without them in brackets. Both inputs are cut to 32 characters. |
| `charkit-any`     | Prompts for a string and a filter (each up to 127 characters) and prints the first index in the string of any filter character. |
| `charkit-bits`    | Runs the `setbits`, `invert`, `rightrot` and `bitcount` demonstrations, or only those named on the command line. Exits with status 1 if the `invert` demonstration does not give 71. |

Examples:

```
printf 'a\tb\n' | charkit-detab
echo '0xDEADBEEF' | charkit-htoi
printf 'hello world\nel\n' | charkit-squeeze
charkit-bits invert rightrot
```

## Library use

```python
from charkit.tabs import detab, entab
from charkit.fold import fold
from charkit.hexconv import validate_hex, calculate_value, calculate_hex, htoi
from charkit.strings import lower, read_line, squeeze, any_index
from charkit.bits import setbits, invert, rightrot, bitcount
from charkit.ranges import IntRange, unsigned_limit, signed_limits, measure, describe_ranges

detab("a\tb", 8)                 # "a       b"
calculate_hex("0xDEADBEEF")      # 3735928559
htoi("0x1F")                     # 31; raises ValueError for invalid input
lower("HELLO WORLD")             # "hello world"
squeeze("hello world", "el")     # "ho word"
any_index("hello", "lo")         # 2
setbits(60, 3, 2, 48)            # 195
invert(55, 6, 3)                 # 71
rightrot(0b11010111, 3, 8)       # 250
bitcount(0b00111111)             # 6
unsigned_limit(8)                # 255
signed_limits(8)                 # (-128, 127)
```

### `charkit.tabs`

- `detab(text, tab_length=8)` expands tabs to spaces up to the next tab stop.
- `entab(text, tab_length=8)` scans the text in segments of `tab_length`
  characters (each starting one past the end of the previous) and acts only
  on the first segment that is followed by more text and ends in a space: a
  single space there becomes a tab; otherwise the run from the segment's first
  space is shortened by one less than the segment's number of spaces. Nothing
  after that segment is touched. It does not perform a general replacement of
  all space runs with tabs.

Both raise `ValueError` for a tab length below 1.

### `charkit.fold`

`fold(text, width=8)` starts a new line after every `width` input characters.
Blanks (spaces and tabs) are written as spaces only once a following
non-blank appears, so trailing blanks vanish; newlines in the input take up a
column but are not copied. The result always ends with a newline.

### `charkit.hexconv`

- `validate_hex(s)` returns `True` for an optional `0x`/`0X` prefix followed by
  one to eight hex digits in either case.
- `calculate_value(c)` returns the value of one hex digit, raising
  `ValueError` otherwise.
- `calculate_hex(s)` converts a string that has already been validated.
- `htoi(s)` validates and converts, raising `ValueError` if invalid.

### `charkit.strings`

- `lower(s)` lowercases ASCII `A`–`Z` only.
- `read_line(stream, limit=100)` reads at most `limit - 1` characters up to a
  newline or end of input; the newline is consumed, not returned, and when the
  limit is reached one more character is consumed and discarded.
- `squeeze(s, remove)` drops every character of `s` found in `remove`.
- `any_index(s, chars)` returns the first index in `s` of any character of
  `chars`, or `-1`.

### `charkit.bits`

`setbits`, `invert` and `rightrot` work on 8-bit values by default
(`rightrot` takes a `width`), and raise `ValueError` for arguments that do not
fit or a field that cannot begin at the given position. `bitcount(x)` counts
the 1-bits of any non-negative integer.

### `charkit.ranges`

`unsigned_limit(bits)` finds the largest unsigned value of a width by
provoking wrap-around, `signed_limits(bits)` gives the two's complement
minimum and maximum, `measure(name, bits)` returns an `IntRange`, and
`describe_ranges()` returns the text printed by `charkit-ranges`.

## What it does not do

The widths reported by `charkit-ranges` are fixed (8, 16, 32 and 64 bits);
they are not read from the running platform. The command-line tools take no
options for tab length, fold width or input limits; use the library functions
to change those.