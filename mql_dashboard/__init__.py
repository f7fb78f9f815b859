"""MQL Dashboard: weekly marketing activity and MQL tracking."""

__version__ = "0.1.0"
