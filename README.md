# cstrkit

C string routines that take and return ordinary Python values. The package
has three modules:

- `cstrkit.cstr`: length, search, bounded copy, concatenation and comparison,
  case conversion and trimming
- `cstrkit.errors`: errno messages in Linux or macOS wording
- `cstrkit.scan`: a `sscanf`-style parser

It has no dependencies beyond the standard library.

## Installation

```
pip install cstrkit
```

To run the test suite:

```
pip install "cstrkit[test]"
pytest
```

## String routines

Every function in `cstrkit.cstr` treats its text as ending at the first NUL
character (`"\0"`).

- A search returns the index of what it found, or `None` where C would give
  a null pointer.
- A function that writes into a buffer takes the buffer's current contents
  and returns what the buffer holds after the write.

```python
from cstrkit.cstr import (
    strlen, strchr, strrchr, strstr, strcspn, strpbrk,
    strcpy, strncpy, strncat, strncmp, to_upper, to_lower, trim,
)

strlen("hello")              # 5
strlen("ab\0cd")             # 2
strchr("hello", "l")         # 2
strrchr("hello", "l")        # 3
strstr("haystack", "st")     # 3
strstr("haystack", "zz")     # None
strstr("haystack", "")       # 0
strcspn("hello", "lo")       # 2
strpbrk("hello", "ol")       # 2
strcpy("abc\0def")           # "abc"
strncpy("xxxxx", "ab", 5)    # "abxxx": no padding, no terminator
strncat("ab\0zz", "cd", 1)   # "abcz"
strncmp("abc", "abd", 2)     # 0
strncmp("abc", "abd", 3)     # -1, the difference of the first unequal codes
to_upper("abc1")             # "ABC1"
to_lower("ABC1")             # "abc1"
trim("  padded  ", " ")      # "padded"
```

Details:

- `strchr` and `strrchr` accept the character as a one-character string or
  as an integer code. Any other string raises `ValueError`.
- `strncmp` counts positions past the end of either string as NUL.
- `to_upper` and `to_lower` change ASCII letters only. `to_upper`,
  `to_lower` and `trim` return `None` when given `None`.
- `trim` with an empty `trim_chars` returns the text unchanged.

## Error messages

`cstrkit.errors.strerror(errnum, platform=None)` returns the message for an
errno value.

- `platform` is `"linux"` or `"darwin"`. It defaults to `"darwin"` on macOS
  and `"linux"` everywhere else.
- Any other value for `platform` raises `ValueError`.
- A number outside the table gives an "Unknown error" message that carries
  the number.

```python
from cstrkit.errors import strerror

strerror(2, "linux")      # "No such file or directory"
strerror(0, "darwin")     # "Undefined error: 0"
strerror(-1, "linux")     # "Unknown error -1"
strerror(500, "darwin")   # "Unknown error: 500"
```

## Scanning

`cstrkit.scan.sscanf(text, fmt)` reads values from `text` according to a
C-style format and returns a list of the converted values, in format order.

Supported conversions:

- `%d`, `%i`, `%u`, `%o`, `%x`, `%X`: integers
- `%f`, `%e`, `%E`, `%g`, `%G`: floating-point numbers
- `%s`: a word
- `%c`: characters
- `%p`: a hexadecimal address, which must start with `0x`
- `%n`: adds the number of characters consumed so far
- `%%`: matches a literal `%`

Every conversion accepts a field width, the `h`/`l`/`L` length modifiers and
`*` to skip a field without storing it. Each directive's modifiers are held
in a `ScanSpec` (`suppress`, `width`, `length`).

```python
from cstrkit.scan import sscanf

sscanf("42 3.5 word", "%d %f %s")   # [42, 3.5, "word"]
sscanf("0x1f 017", "%i %i")         # [31, 15]
sscanf("ab", "%c%n")                # ["a", 1]
sscanf("7 x", "%d %d")              # [7]: stops at the mismatch
```

Results follow C's integer and float types:

- `%i` and the unsigned conversions wrap to 16 bits with `h`, 64 bits with
  `l`, and 32 bits otherwise.
- `%f` and its relatives without `l` or `L` give a value rounded to single
  precision.

Scanning stops at the first directive the text does not match. The values
converted up to that point are still returned. An empty `text` raises
`EOFError`.

## What is not included

There is no formatted output: the package has no `sprintf`-style function.
It also has no routines for raw memory blocks (`memchr`, `memcpy` and the
like). It provides no command-line program.