"""Classic algorithms and data structures: searching, sorting, lists, hashing and more."""

__version__ = "0.1.0"