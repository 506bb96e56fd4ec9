"""Completion feature for springls."""

from .completion import register_completion

__all__ = ["register_completion"]
