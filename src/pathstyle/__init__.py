"""pathstyle: Unix and Windows path manipulation as pure string operations."""

from .core import (
    Config,
    ExtResult,
    PathOperations,
    PathStyle,
    SplitResult,
    StyleKind,
    UnixStyle,
    WindowsStyle,
    get_style,
)
from .adapters import ArgumentError, create_adapter

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ExtResult",
    "PathOperations",
    "PathStyle",
    "SplitResult",
    "StyleKind",
    "UnixStyle",
    "WindowsStyle",
    "get_style",
    "ArgumentError",
    "create_adapter",
]
