"""C-style character, string, memory, number, output and line-reading helpers, with raycaster scene records."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "numbers",
    "cstring",
    "transform",
    "tokenizer",
    "output",
    "linereader",
    "scene",
]