"""A JSON syntax tree with typed values, an indented printer, escape handling and statistics."""

__version__ = "0.1.0"
__all__ = ["stats", "unescape", "utf8", "value"]