"""Command types, filters, error flags, load calculations and logging utilities for a 7-joint robot arm."""

__version__ = "0.1.0"