"""Classic algorithms and small data structures on plain Python values."""

__version__ = "0.1.0"