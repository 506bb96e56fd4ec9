"""Hover feature for springls."""

from .hover import register_hover

__all__ = ["register_hover"]
