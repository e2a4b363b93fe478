"""
Path style strategies.

A style decides which characters separate path components, which leading
prefix (drive letter, UNC share) a path carries and whether a path is
absolute. Every operation in :mod:`pathstyle.core.operations` is written
against this interface, so both conventions can live in one process.
"""

import logging
import re
import string
from abc import ABC, abstractmethod
from typing import FrozenSet, List, Optional, Tuple

from .models import Config, StyleKind

logger = logging.getLogger(__name__)


class PathStyle(ABC):
    """
    Abstract base class for path conventions.

    Subclasses declare their separator characters and implement prefix
    detection and the absoluteness test.
    """

    kind: StyleKind
    seps: FrozenSet[str] = frozenset()

    def __init__(self, sep: Optional[str] = None):
        """
        Initialize the style.

        Args:
            sep: Separator to use when building paths. Defaults to the
                style's conventional separator.

        Raises:
            ValueError: If sep is not one of the style's separators
        """
        sep = sep or self.kind.default_sep
        if sep not in self.seps:
            allowed = ", ".join(repr(s) for s in sorted(self.seps))
            raise ValueError(f"Invalid separator {sep!r} for {self.name} paths (expected one of {allowed})")
        self.sep = sep
        self._sep_run = re.compile("[" + re.escape("".join(sorted(self.seps))) + "]+")

    @property
    def name(self) -> str:
        """Style name."""
        return self.kind.value

    def is_sep(self, ch: str) -> bool:
        """Check if a character is a directory separator."""
        return ch in self.seps

    def rstrip_seps(self, path: str) -> str:
        """Remove trailing separators."""
        return path.rstrip("".join(self.seps))

    def rfind_sep(self, path: str) -> int:
        """Index of the last separator in path, or -1."""
        return max(path.rfind(s) for s in self.seps)

    def components(self, path: str) -> List[str]:
        """
        Split a path into its non-empty components.

        A run of separators counts as a single boundary.
        """
        return [part for part in self._sep_run.split(path) if part]

    def has_drive(self, path: str) -> bool:
        """Check for a leading drive letter."""
        return False

    def is_bare_drive(self, path: str) -> bool:
        """Check if path is only a drive marker with nothing after it."""
        return False

    @abstractmethod
    def splitdrive(self, path: str) -> Tuple[str, str]:
        """
        Split a path into its prefix and the remainder.

        Returns:
            Tuple of (prefix, rest) where prefix + rest == path.
        """
        pass

    @abstractmethod
    def isabs(self, path: str) -> bool:
        """Check if a path is absolute."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sep={self.sep!r})"


class UnixStyle(PathStyle):
    """Forward-slash paths; absolute paths begin with a separator."""

    kind = StyleKind.UNIX
    seps = frozenset("/")

    def splitdrive(self, path: str) -> Tuple[str, str]:
        # Unix paths never carry a prefix
        return "", path

    def isabs(self, path: str) -> bool:
        return path.startswith("/")


class WindowsStyle(PathStyle):
    """
    Windows paths.

    Both backslashes and forward slashes separate components. A drive
    letter ("C:") may precede absolute or relative paths, and network paths
    begin with a UNC prefix ("\\\\host\\share").
    """

    kind = StyleKind.WINDOWS
    seps = frozenset("\\/")

    def is_unc(self, path: str) -> bool:
        """Exactly two separators followed by a non-separator."""
        return (
            len(path) > 2
            and self.is_sep(path[0])
            and self.is_sep(path[1])
            and not self.is_sep(path[2])
        )

    def has_drive(self, path: str) -> bool:
        """Check for a leading drive letter."""
        return len(path) >= 2 and path[1] == ":" and path[0] in string.ascii_letters

    def is_bare_drive(self, path: str) -> bool:
        return len(path) == 2 and self.has_drive(path)

    def _find_sep(self, path: str, start: int) -> int:
        for i in range(start, len(path)):
            if self.is_sep(path[i]):
                return i
        return -1

    def splitdrive(self, path: str) -> Tuple[str, str]:
        if self.is_unc(path):
            # Prefix covers the host and share components
            host_end = self._find_sep(path, 2)
            if host_end == -1:
                return path, ""
            share_end = self._find_sep(path, host_end + 1)
            if share_end == -1:
                return path, ""
            return path[:share_end], path[share_end:]
        if self.has_drive(path):
            return path[:2], path[2:]
        return "", path

    def isabs(self, path: str) -> bool:
        if not path:
            return False
        if self.is_sep(path[0]):
            # Covers rooted paths and UNC prefixes
            return True
        return self.has_drive(path) and len(path) > 2 and self.is_sep(path[2])


_STYLES = {
    StyleKind.UNIX: UnixStyle,
    StyleKind.WINDOWS: WindowsStyle,
}


def get_style(style=None, sep: Optional[str] = None) -> PathStyle:
    """
    Create a path style.

    Args:
        style: A StyleKind, a style name, a Config or None for the native style
        sep: Optional default separator override

    Returns:
        PathStyle instance for the requested convention
    """
    if isinstance(style, Config):
        sep = sep or style.sep
        style = style.style
    kind = StyleKind.native() if style is None else StyleKind.parse(style)
    path_style = _STYLES[kind](sep)
    logger.debug(f"Selected {path_style!r} for {kind.value} paths")
    return path_style
