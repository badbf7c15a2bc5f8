"""A terminal paint program that draws straight lines on a character canvas."""

__version__ = "0.1.0"
__all__ = ["__version__"]