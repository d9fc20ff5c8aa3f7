"""Solutions to classic array, matrix and string exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "matrix", "strings"]