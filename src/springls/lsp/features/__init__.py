"""LSP features for springls."""

from .completion.completion import register_completion
from .diagnostics.diagnostics import register_diagnostics
from .formatting.formatting import register_formatting
from .hover.hover import register_hover

__all__ = [
    "register_completion",
    "register_diagnostics",
    "register_formatting",
    "register_hover",
]
