"""Classic programming exercises on strings, numbers and lists, with a greeting command."""

__version__ = "0.1.0"
__all__ = ["arrays", "cli", "numbers", "strings"]