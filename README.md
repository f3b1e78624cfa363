# pushswap

Supporting pieces for the push_swap puzzle. In the puzzle, stack A holds
distinct 32-bit integers and has to be sorted with a small set of stack
instructions. This package covers these parts:

- checking and parsing the integers given as arguments;
- reading instruction lines from a stream;
- a printf-style formatter with colour tags, together with its number and
  string helpers;
- a small linked list and some string utilities.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What the package does not do

This package does not carry out the stack instructions. It does not search for
a sorting sequence, and it does not check a proposed sequence against a stack.
It installs no command-line programs. Only the library modules below are
provided.

## Modules

### `pushswap.validate`

- `check_integers(args)` raises `InputError` (a `ValueError`) for two kinds of
  argument:
  - one that is not an optionally signed run of at most ten digits;
  - one that lies outside the 32-bit signed range.
- `parse_stack(args)` checks the arguments and converts them. It returns the
  values in reverse order, so the first argument ends up last in the list
  (the top of the stack). It raises `InputError` if a value is repeated.
- `has_duplicates(values)` tells whether any value occurs twice.
- `is_sorted(a, b)` is true when `b` is empty and every element of `a` is
  greater than or equal to the element after it.
- `atoi(text)` reads a leading integer. It skips leading whitespace, accepts
  one sign, and wraps the result to 32 bits.

```python
from pushswap.validate import parse_stack, is_sorted

a = parse_stack(["1", "2", "3"])   # [3, 2, 1]
is_sorted(a, [])                   # True
```

### `pushswap.lineread`

- `LineReader(stream, buffer_size=10)` reads lines from a text stream in
  chunks. Use `read_line()` or iterate over it. It returns `None` at the end of
  the stream. It raises `ValueError` in two cases:
  - the last line has no closing newline;
  - a NUL shows up while nothing is pending.
- `read_lines(stream)` yields the lines of a `LineReader`.
- `MultiLineReader(buffer_size=10).read_line(stream)` keeps pending text
  separately for each stream. It returns an unterminated last line as it is.

### `pushswap.printf`

- `render(fmt, *args)` returns the formatted text.
- `printf(fmt, *args, stream=None)` writes the formatted text and returns its
  length. By default it writes to standard output. A `%@` conversion takes an
  argument that can redirect the output:
  - a stream;
  - the file descriptor 1 (`stream`) or 2 (standard error);
  - any other non-negative file descriptor;
  - a negative number, which drops the output.

Supported conversions: `d i o u U x X p s c f %`. They accept these parts:

- the flags `- 0 + space #`;
- a width and a precision, each of which may be `*`;
- the length modifiers `h hh l ll L`;
- a `b` modifier, which prints the raw bits of the value.

A missing argument raises `ValueError`.

The colour tags `{red}`, `{green}`, `{yellow}`, `{blue}`, `{magenta}`,
`{cyan}`, `{black}`, `{under}` and `{reset}` become terminal escape codes.
`expand_colors(text)` performs that replacement on its own.
`visible_length(text)` returns the length of the text after expansion.
`color_text(text, color)` wraps text in a colour code and a reset. It accepts
red, green, yellow, blue, magenta and cyan, and raises `ValueError` for any
other colour.

```python
from pushswap.printf import render

render("%5d|%-4s|", 42, "ab")      # '   42|ab  |'
render("{red}%s{reset}", "x")      # '\x1b[31mx\x1b[0m'
```

### Formatter building blocks

- `pushswap.spec`
  - `parse_spec(fmt, pos, args)` parses one conversion, starting just after
    the `%`. It returns a `FormatSpec` and the index of the conversion
    character.
- `pushswap.pfconv`
  - `format_integer`, `format_unsigned`, `format_hex`, `format_string` and
    `format_char` render one value according to a `FormatSpec`.
- `pushswap.floatfmt`
  - `format_float(value, spec)` expands the exact binary value of a float
    into decimal.
  - Halves are rounded to even.
  - The precision defaults to 6.
- `pushswap.numstr` provides:
  - decimal digit-string arithmetic: `add_decimal`, `double_decimal`,
    `halve_decimal`;
  - fixed-width integer-to-text conversions: `itoa`, `lltoa`, `llutoa`,
    `hexatoa`, `octatoa`;
  - bit dumps: `bitoa`;
  - the x87 extended-precision mantissa and exponent of a float:
    `extended_mantissa`, `extended_exponent`;
  - `bankers_tie`, the rounding decision for an exact half.

### `pushswap.lists`

`LinkedList(contents=())` is a singly linked list of `Node` objects. It has
these methods:

| Method | What it does |
|--------|--------------|
| `add(content)` | puts a new node at the front |
| `delete(destructor=None)` | empties the list, calling `destructor` on each content if one is given |
| `foreach(func)` | calls `func` on each node |
| `map(func)` | returns a new list with `func` applied to each content |
| `reverse()` | reverses the list in place |
| `write(stream)` | writes each content that is not `None` to `stream` |

It also supports `len()` and iteration over its contents.

### `pushswap.strutil`

| Function | What it does |
|----------|--------------|
| `split(s, sep)` | splits on one character and drops empty pieces |
| `trim(s)` | strips spaces, newlines and tabs from both ends |
| `find(haystack, needle)` | returns the index of the first occurrence, or `None` |
| `find_bounded(haystack, needle, length)` | like `find`, but the match must lie within the first `length` characters |
| `compare(s1, s2)`, `compare_n(s1, s2, n)` | return the difference of the first characters that differ |
| `upper(s)` | turns ASCII letters to upper case |