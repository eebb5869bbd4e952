"""A small directory lister with printf-style formatting and text helpers."""

__version__ = "0.1.0"
__all__ = ["cli", "fmt", "listing", "textutils"]