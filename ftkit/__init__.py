"""Character, byte-buffer, string, text, linked list and number helpers, and a conversion-spec parser."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "spec",
    "memory",
    "strings",
    "text",
    "lists",
    "numbers",
]