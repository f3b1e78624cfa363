"""Input validation, line reading and printf-style formatting helpers for the push_swap puzzle."""

__version__ = "1.0.0"