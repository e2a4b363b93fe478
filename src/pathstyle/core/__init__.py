"""Core components for pathstyle."""

from .models import Config, StyleKind, SplitResult, ExtResult
from .style import PathStyle, UnixStyle, WindowsStyle, get_style
from .operations import PathOperations

__all__ = [
    "Config",
    "StyleKind",
    "SplitResult",
    "ExtResult",
    "PathStyle",
    "UnixStyle",
    "WindowsStyle",
    "get_style",
    "PathOperations",
]
