"""Resolve FILE:LINE:COLUMN command-line arguments."""

__version__ = "0.1.0"
