# cstrkit

Small helpers that follow the behaviour of the classic C string and memory
routines. They are useful when you need C semantics, such as 32-bit integer
wrap-around, size-limited copies into fixed buffers, `%`-style formatting with
a fixed set of conversions, or line reading through a fixed-size buffer.

This is a library. It provides no command-line program.

## Installation

```
pip install cstrkit
```

To install the test dependencies as well:

```
pip install "cstrkit[test]"
```

## Modules

### `cstrkit.ctype`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` and `is_space`
classify ASCII characters. `to_upper` and `to_lower` map case. Each function
accepts either a one-character string or an integer code. The case mappers
return the same kind of value they were given.

### `cstrkit.convert`

- `atoi(text)` skips leading whitespace, accepts one optional sign, and reads
  digits until the first non-digit. Text with no digits gives `0`. The result
  is truncated to a signed 32-bit integer. If the magnitude grows past a 64-bit
  signed integer, the result is `-1` for positive input and `0` for negative
  input.
- `itoa(n)` returns the decimal text of a signed 32-bit integer. Values outside
  that range raise `OverflowError`.
- `split(text, sep)` splits on a single separator character and drops empty
  fields.

### `cstrkit.strings`

These functions return positions as indices, or `None` when nothing is found.
Negative lengths and limits raise `ValueError`.

- `find_char` and `rfind_char` return the first or last index of a character.
  Searching for `"\0"` returns `len(text)`.
- `contains(text, fragment)` is true only when a non-empty `fragment` ends
  `text`.
- `compare` and `compare_n` return the difference of the character codes at the
  first mismatch, or `0` if there is none.
- The remaining functions are `strndup`, `join_space`, `map_indexed`,
  `find_in`, `find_substring`, `trim` and `substr`.

### `cstrkit.memory`

These functions work in place on `bytearray` buffers: `memset`, `bzero`,
`calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `strcpy`, `strcat`,
`strlcpy`, `strlcat` and `iteri`. String buffers end at their first NUL byte,
or at the end of the buffer if there is no NUL. Writing past the end of a
buffer raises `ValueError`.

### `cstrkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream.
Standard output is the default.

### `cstrkit.linkedlist`

`LinkedList` is a singly linked list of `Node` objects. It has `push_front`,
`push_back`, `last`, `for_each` and `clear(on_delete)`. It supports `len()` and
iteration over its contents.

### `cstrkit.printf`

`format_string(fmt, *args)` and `printf(fmt, *args, file=None)` support the
conversions `%c %s %p %d %i %u %x %X %%`.

- A `%` followed by any other character outputs that character.
- Too few arguments raises `TypeError`.
- `printf` returns the number of characters written.

### `cstrkit.printf_error`

`printf_error(exit_status, fmt, *args, file=None)` writes the formatted text to
standard error, then raises `SystemExit(exit_status)`. If `exit_status` is
`-1`, it returns `-1` instead. `exit_error(status)` does only the exit part.

### `cstrkit.reader`

`LineReader(source, buffer_size=256)` and `read_lines(source, buffer_size)`
return lines from a source one at a time. The source is a file descriptor or
any object with a `read(size)` method returning `bytes` or `str`. Lines keep
their trailing newline. `LineReader.next_line()` returns `None` once the source
is exhausted.

## Example

```python
import io

from cstrkit.convert import atoi, split
from cstrkit.printf import format_string
from cstrkit.reader import read_lines

atoi("   -42abc")                        # -42
split("  a  b c ", " ")                  # ["a", "b", "c"]
format_string("%d items at %x", 3, 255)  # "3 items at ff"

for line in read_lines(io.StringIO("one\ntwo\n"), 4):
    print(line, end="")
```

## Running the tests

```
pytest
```