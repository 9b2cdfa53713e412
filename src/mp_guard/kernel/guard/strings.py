"""Fixed error message texts used by the guards."""

UNEXPECTED_EMPTY_STRING = "The empty string is not allowed."

__all__ = ["UNEXPECTED_EMPTY_STRING"]
