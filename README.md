# ftkit

A small toolkit of character, string, memory, number and output helpers that
follow the semantics of the classic C library routines while taking and
returning ordinary Python values. String arguments end at their first `"\0"`
character, if they have one. Positions come back as indices, or `None` where
nothing was found, and functions that would fill a caller's buffer return the
resulting string instead.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: character classification and ASCII case mapping. Each
  function takes a one-character string or an integer code point:
  `is_alnum`, `is_alpha`, `is_alpha_lower`, `is_alpha_upper`, `is_ascii`,
  `is_digit`, `is_print`, `is_space`, `str_is_space`, `to_upper`, `to_lower`.
- `ftkit.memory`: operations on `bytes` and `bytearray` objects: `memset`,
  `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`. Byte counts
  that are negative or run past a buffer raise `ValueError`.
- `ftkit.numbers`: `atoi` and `atol` parse leading whitespace, an optional
  sign and digits, wrapping to 32 and 64 bits. `itoa` formats a 32-bit
  signed integer and raises `OverflowError` outside that range.
- `ftkit.cstring`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strcmp`, `strnstr`, `strstr`, `strncpy`, `strcat`, `strcpy`.
  `strlcpy` and `strlcat` return a `(string, length)` pair.
- `ftkit.transform`: `strdup`, `substr`, `strjoin`, `strtrim`,
  `count_words`, `split`, `strmapi`, `striteri`, `tab_len`.
- `ftkit.tokenizer`: `Tokenizer` hands out tokens separated by the first
  character of a delimiter string, through `next_token` and `reset`.
  `strtok(text, delim)` works on one shared tokenizer. Passing text starts a
  new sequence and passing `None` continues the current one.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream, standard output by default. `sprintf` formats a string and
  `printf` writes it and returns its length. Both accept
  `%c %s %p %d %i %u %x %X %%`.
- `ftkit.linereader`: `LineReader` reads a text or binary stream in chunks of
  `buffer_size` (default `BUFFER_SIZE`, 4096). It returns lines with their
  newline, from `next_line()` or by iteration.
- `ftkit.scene`: data records for a grid raycaster: the `Direction` texture
  slots, `Scene`, `Player`, `Ray` and `Minimap`. The module also has the
  constants `MINIMAP_SQUARE`, `BLACK`, `WHITE`, `RED`, `GREEN` and `BLUE`.

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.transform import split
from ftkit.tokenizer import Tokenizer
from ftkit.output import sprintf

atoi("  -42abc")               # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]

tok = Tokenizer("a,,b,c")
tok.next_token(",")            # "a"
tok.next_token(",")            # "b"

sprintf("%s=%d (%x)", "n", 255, 255)  # "n=255 (ff)"
```

```python
import io
from ftkit.linereader import LineReader

for line in LineReader(io.StringIO("one\ntwo\n"), buffer_size=4):
    print(line, end="")
```

## What it does not do

`ftkit.scene` only holds data. The package does not read level files or check
maps. It does not cast rays, draw frames or open a window. It has no
command-line program.