"""Write plain values, sequences and self-describing objects as compact JSON."""

__version__ = "0.1.0"
__all__ = ["serialize", "demo"]