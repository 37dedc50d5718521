"""A 96-bit scaled decimal type with comparison, conversion, subtraction and multiplication."""

__version__ = "0.1.0"
__all__ = ["core", "convert", "comparison", "multiply", "subtract"]