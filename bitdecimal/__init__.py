"""A 96-bit scaled decimal number with special values and division."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "decimal"]