# ftkit

A small collection of low-level helpers with precisely defined behaviour.
It needs nothing beyond the standard library.

## Modules

- `ftkit.chars`: ASCII classification and case conversion. `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii` and `is_print` take a one-character
  string or an integer code and return a `bool`. `to_upper` and `to_lower`
  return a value of the same kind they were given.
- `ftkit.memory`: operations on byte buffers. `bzero`, `memset` and
  `memcpy` write into a `bytearray` (or a writable `memoryview`).
  `memmove(buf, dest_offset, src_offset, n)` copies within one buffer and
  handles overlapping regions. `memchr` returns an index or `None`, and
  `memcmp` returns the difference of the first pair of bytes that differ.
  `calloc(count, size)` returns a zero-filled `bytearray`. It raises
  `ValueError` when either factor reaches `INT_MAX`, or when a negative
  factor is paired with a non-zero one. A span that runs past the end of a
  buffer also raises `ValueError`.
- `ftkit.convert`: `atoi` parses a leading decimal integer. It skips
  leading whitespace, reads one optional sign and ignores trailing text.
  `itoa` formats an integer as decimal text.
- `ftkit.strings`: functions on NUL-terminated strings, given as `str` or
  bytes-like values. A string ends at its first NUL.
  - `strlen`, `strchr` and `strrchr` return lengths and indices.
    Searching for NUL finds the terminator.
  - `strncmp` compares at most a given number of characters.
  - `strnstr` finds a needle that lies wholly within the first characters
    of the haystack.
  - `strlcpy` and `strlcat` copy into a `bytearray` with a size limit.
- `ftkit.transform`: building new strings.
  - `split` splits on a single character and drops empty words.
  - `strjoin` joins two strings, or two bytes-like values.
  - `strtrim` trims characters of a set from both ends.
  - `substr` takes a slice by start and length.
  - `strmapi` maps `func(index, char)` over a string.
  - `striteri` applies `func(index, element)` in place to a mutable
    sequence and stops at the first NUL element.
- `ftkit.linkedlist`: `Node` (with `content` and `next`) and
  `LinkedList`. A `LinkedList` supports `push_front`, `push_back`, `last`,
  `len()`, iteration, `clear(delete)`, `for_each(func)` and
  `map(func, delete)`. If `func` raises partway through `map`, the contents
  already produced are passed to `delete` and the exception propagates.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write
  to a text stream, or to standard output when the stream is `None`.
  `put_str` and `put_endl` write nothing for `None` text.
- `ftkit.printf`: a minimal formatter for `%c %s %p %d %i %u %x %X %%`.
  - `format_string(fmt, *args)` returns the text.
  - `print_formatted(fmt, *args, stream=None)` writes it and returns the
    number of characters written.
  - `change_base(num, digits)` writes a non-negative integer in any base.
  - Integers are wrapped to 32 bits, and `%s` of `None` prints `(null)`.
  - An unknown letter after `%` is dropped along with the `%`.
  - Too few arguments raise `TypeError`.
  - `HEX_LOW` and `HEX_UP` hold the hexadecimal digit sets.
- `ftkit.linereader`: `LineReader(source, buffer_size=BUFFER_SIZE)` reads
  lines from a file descriptor (an `int`, read as bytes) or from any
  object with a `read(size)` method, binary or text. It reads in chunks of
  at most `buffer_size` (default 200). Each line keeps its newline. The
  final line has no newline if the data does not end with one.
  `next_line()` and `get_next_line(reader)` return `None` at the end, and
  iterating over a reader yields its lines.
- `ftkit.grid`:
  - `new_visited(rows, cols)` returns a grid of `False` markers, with each
    row a separate list.
  - `ensure_rectangular(invalid)` raises `NotRectangularError` (a
    `ValueError`) when the integer or bool flag it is given equals 1.

## Installation

```
pip install .
```

Run the test suite with:

```
pip install .[test]
pytest
```

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.transform import split
from ftkit.printf import format_string
from ftkit.linkedlist import LinkedList

atoi("  -42abc")              # -42
itoa(-2147483648)             # "-2147483648"
split("aa  bb c", " ")        # ["aa", "bb", "c"]
format_string("%d is %x", 255, 255)   # "255 is ff"

items = LinkedList([1, 2, 3])
items.push_front(0)
len(items)                    # 4
list(items.map(lambda x: x * 2, None))  # [0, 2, 4, 6]
```

Reading lines from a file:

```python
from ftkit.linereader import LineReader

with open("map.ber") as handle:
    for line in LineReader(handle, 200):
        print(line, end="")
```

## What it does not do

`ftkit` is a library only and has no command-line program. The grid
helpers do not read, validate or display maps. `ensure_rectangular` acts
on a flag that the caller has already computed; it does not examine the
rows itself.