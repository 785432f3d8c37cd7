"""LZ77 sliding-window compression with timed command-line tools."""

__version__ = "0.1.0"
__all__ = ["codec", "cli"]