"""Fixed-precision base and quote currency values, futures profit and loss, and integer helpers."""

__version__ = "0.1.0"
__all__ = ["arith", "money", "currencies"]