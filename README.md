# cstrkit

Python helpers that behave like the classic C string and memory routines,
together with two building blocks of a `printf`-style formatter: a parser
for one conversion specification and the code that applies flags, width and
precision to already converted text.

It is useful when you want C semantics exactly: comparison results that are
character or byte differences rather than booleans, strings that end at the
first NUL, and stateful `strtok`-style tokenising.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `cstrkit.memory`: `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`,
  working on `bytes`, `bytearray` and `memoryview`. `memcpy`, `memmove`
  and `memset` change the given `bytearray` in place and return it;
  `memmove(buf, dest, src, n)` moves within one buffer by offsets, and
  overlapping regions are handled. Counts that run past a buffer raise
  `ValueError`.
- `cstrkit.cstr`: `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strcat`, `strncat`, `strcpy`, `strncpy`, `strspn`, `strcspn`, `strpbrk`,
  `strstr` on Python `str` values. Every string ends at its first `"\0"`.
  Searches return an index, or `None` where C returns a null pointer;
  copying and concatenation return the resulting string.
  `Tokenizer(text).next_token(delim)` gives one token per call, like
  `strtok`, and `tokenize(text, delim)` yields all tokens.
- `cstrkit.transform`: `to_upper` and `to_lower` (ASCII letters only),
  `insert(src, text, start_index)` and `trim(src, trim_chars)`; each returns
  `None` for a missing string, and `insert` also for an index outside the
  string. `trim` strips newline, tab and space when `trim_chars` is `None`
  or empty.
- `cstrkit.spec`: `FormatSpec`, a dataclass of flags, width, precision,
  length modifier and conversion character, and
  `parse_spec(fmt, index, args)`, which reads the directive whose `%` is at
  `fmt[index]`, takes `*` values from `args`, and returns the spec with the
  index of its conversion character.
- `cstrkit.flags`: `apply_flags(text, spec)` lays out converted text as a
  `FormatSpec` directs (sign, `+`/space flags, zero padding, precision for
  integers, `#` prefixes for `o`, `x`, `X`, left or right alignment). The
  helpers it uses, `add_sign_or_space`, `add_sharp_sign`, `pad_left`,
  `pad_right` and `shift`, are public too.

## Examples

```python
from cstrkit.cstr import strcmp, strchr, tokenize
from cstrkit.transform import trim, insert
from cstrkit.spec import parse_spec
from cstrkit.flags import apply_flags

strcmp("hello", "helle")               # 10
strchr("Hello world", "w")             # 6
list(tokenize("a//b/c", "/"))          # ['a', 'b', 'c']
trim("-?hello, world!", "!?-")         # 'hello, world'
insert("abcdefghij", "'X'", 3)         # "abc'X'defghij"

spec, end = parse_spec("%-8.3d", 0, [])
end                                    # 5
apply_flags("-42", spec)               # '-042    '
```

## What it does not do

There is no complete `sprintf`: the package does not turn values into
text on its own. `parse_spec` reads a directive and `apply_flags` lays out
text you have already converted; walking a whole format string and
converting each argument is left to the caller. There is no lookup of
error-number messages either.