"""Futz language front end: a token scanner and the futz command-line driver."""

__version__ = "0.1.0"
__all__ = ["scanner", "cli"]