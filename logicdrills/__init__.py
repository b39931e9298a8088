"""Small logic exercises: triangle path sums, L/R/= pattern decoding and word counting over HTTP."""

__version__ = "0.1.0"

__all__ = ["__version__"]