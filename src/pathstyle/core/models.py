"""
Core data models for pathstyle.

This module contains the configuration and the small value types returned
by the path operations.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class StyleKind(Enum):
    """Supported path conventions."""
    UNIX = "unix"
    WINDOWS = "windows"

    @classmethod
    def native(cls) -> "StyleKind":
        """Style matching the running interpreter's platform."""
        return cls.WINDOWS if os.name == "nt" else cls.UNIX

    @classmethod
    def parse(cls, value: str) -> "StyleKind":
        """
        Parse a style name.

        Args:
            value: One of unix, posix, windows, win, nt or native (any case)

        Returns:
            The matching StyleKind

        Raises:
            ValueError: If the name is not recognised
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "native":
            return cls.native()
        aliases = {
            "unix": cls.UNIX,
            "posix": cls.UNIX,
            "windows": cls.WINDOWS,
            "win": cls.WINDOWS,
            "nt": cls.WINDOWS,
        }
        if name not in aliases:
            raise ValueError(f"Unknown path style '{value}' (expected unix, windows or native)")
        return aliases[name]

    @property
    def default_sep(self) -> str:
        """Separator used when building new paths."""
        return "\\" if self is StyleKind.WINDOWS else "/"


@dataclass
class Config:
    """Configuration settings for pathstyle."""

    style: StyleKind = field(
        default_factory=lambda: StyleKind.parse(os.getenv('PATHSTYLE_STYLE', 'native'))
    )
    # None means the style's own default separator
    sep: Optional[str] = field(default_factory=lambda: os.getenv('PATHSTYLE_SEP') or None)
    log_level: str = field(default_factory=lambda: os.getenv('PATHSTYLE_LOG_LEVEL', 'WARNING'))

    def __post_init__(self):
        """Accept plain strings for the style field."""
        if not isinstance(self.style, StyleKind):
            self.style = StyleKind.parse(self.style)

    def resolved_sep(self) -> str:
        """Separator actually used for output."""
        return self.sep if self.sep else self.style.default_sep


class SplitResult(NamedTuple):
    """Head and tail of a path."""
    head: str
    tail: str


class ExtResult(NamedTuple):
    """Root and extension of a path; root + ext is the original path."""
    root: str
    ext: str
