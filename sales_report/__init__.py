"""Point-of-sale spreadsheet aggregation and ranked sales reports."""

__version__ = "0.1.0"
