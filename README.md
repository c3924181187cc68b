# ftkit

Plain-Python helpers that keep the behaviour of the classic C string,
memory and formatting routines. The package has no dependencies beyond the
standard library and needs Python 3.10 or later.

## Modules

- `ftkit.checks`: ASCII predicates. `isalnum`, `isalpha`, `isascii`,
  `isdigit`, `isprint` and `isspace` take a single character or an integer
  code. `islower` and `isupper` take a string and are true when every
  character is in range (an empty string qualifies). `isnum` accepts an
  optional sign followed by at least one digit. `has_white_spaces` is true
  when a string holds only whitespace; `None` gives `False`.
- `ftkit.convert`: `atoi` (32-bit, wraps on overflow), `atol` (64-bit; a
  second sign such as `"+-5"` gives 0), `atoll` (64-bit), `itoa` and `itol`
  (raise `OverflowError` outside the 32-bit or 64-bit range), and
  `tolower` / `toupper` for a character or an integer code.
- `ftkit.memory`: byte-buffer operations on `bytearray` and other
  bytes-like objects: `bzero`, `calloc`, `memset`, `memcpy`, `memmove`
  (copies within one buffer, from offset `src` to offset `dest`, overlap
  safe), `memchr` (returns an offset or `None`), `memcmp` and `realloc`.
  Counts that are negative or run past a buffer raise `ValueError`.
- `ftkit.arrays`: for sequences that end at their first `None`:
  `arrlen`, `matrix_dup` (strings), `matrix_dup_int` (integers) and
  `matrix_free` (empties a list in place).
- `ftkit.strings`: `strlen`, `strlcpy` and `strlcat` (each returns the
  resulting text and the length it tried to create), `strcmp`, `strncmp`,
  `strchr`, `strrchr`, `strnstr` (return an index or `None`; searching for
  NUL finds the end of the string), `strdup` and `strldup`.
- `ftkit.transform`: `substr`, `strjoin`, `strtrim`, `strmapi`,
  `striteri` (changes a mutable sequence of characters in place) and
  `split` (drops empty pieces).
- `ftkit.linkedlist`: `LinkedList`, a singly linked list of `Node`s with
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each`,
  `map`, `to_list`, `len()` and iteration. `pop_front`, `clear` and `map`
  take an optional `delete` callback that receives removed contents.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`,
  and `putnbr_base` / `putnbr_base_p`, which write to a file descriptor
  (standard output by default) and return the number of bytes written.
  `putnbr_base_p` writes `0x` and the digits, or `(nil)` for zero.
- `ftkit.linereader`: `LineReader(fd, buffer_size=42)` returns one line at
  a time, newline included, through `readline()` (which gives `None` at the
  end) or by iteration. `get_next_line(fd)` keeps a separate reader for each
  descriptor.
- `ftkit.printf`: `format_printf(fmt, *args)` returns the text and
  `printf(fmt, *args)` writes it to standard output, returning the byte
  count. Supports `%c %s %p %d %i %u %x %X %%`; unknown specifiers and a
  trailing lone `%` produce nothing. `%s` of `None` gives `(null)`, `%p` of
  zero or `None` gives `(nil)`.
- `ftkit.printf_fd`: `format_fd(fmt, *args)` and `printf_fd(fd, fmt,
  *args)`, the same conversions written to any descriptor; here a trailing
  lone `%` is kept as a literal character.

## Install

    pip install .

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.transform import split
from ftkit.printf import format_printf
from ftkit.strings import strlcpy

atoi("   -1234abd567")          # -1234
itoa(-2147483648)               # "-2147483648"
split("111.222.333...444", ".") # ["111", "222", "333", "444"]
format_printf("%x %X", 42, 42)  # "2a 2A"
strlcpy("Hello", 4)             # ("Hel", 5)
```

Reading lines from a file descriptor:

```python
import os
from ftkit.linereader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line, end="")
os.close(fd)
```

## Tests

    pip install .[test]
    pytest