"""Functions for converting, summarizing and comparing structural variant calls."""

__version__ = "0.1.0"