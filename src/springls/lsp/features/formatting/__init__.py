"""Formatting feature for springls."""

from .formatting import register_formatting

__all__ = ["register_formatting"]
