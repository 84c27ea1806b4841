"""Interpret ANSI escape sequences against an in-memory console model."""

__version__ = "0.1.0"
__all__ = ["console", "writer"]