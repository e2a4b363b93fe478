"""
Path operations.

Pure string algorithms over path syntax. Nothing here touches the
filesystem: every result is derived from the arguments and the style the
instance was built with.
"""

import logging
from typing import List, Optional

from .models import Config, ExtResult, SplitResult
from .style import PathStyle, get_style

logger = logging.getLogger(__name__)

CURDIR = "."
PARDIR = ".."


class PathOperations:
    """Path manipulation bound to a single path style."""

    def __init__(self, style: Optional[PathStyle] = None):
        """
        Initialize with a path style.

        Args:
            style: Style to interpret paths with. Defaults to the native style.
        """
        self.style = style or get_style()

    @classmethod
    def from_config(cls, config: Config) -> "PathOperations":
        """Build operations for the style and separator in config."""
        return cls(get_style(config))

    @property
    def sep(self) -> str:
        """Separator used when building paths."""
        return self.style.sep

    def isabs(self, path: str) -> bool:
        """Returns True if the path is absolute."""
        return self.style.isabs(path)

    def join(self, *fragments: str) -> str:
        """
        Join path fragments with the default separator.

        An absolute fragment discards everything joined before it. Empty
        fragments are skipped.
        """
        result = ""
        for fragment in fragments:
            if not fragment:
                continue
            if not result or self.style.isabs(fragment):
                result = fragment
            elif self.style.is_sep(result[-1]) or self.style.is_bare_drive(result):
                # "C:" + "x" stays drive-relative
                result += fragment
            else:
                result += self.sep + fragment
        return result

    def split(self, path: str) -> SplitResult:
        """
        Split a path into head and tail.

        The tail is the last path element and the head is everything leading
        up to it. Trailing separators are stripped from the head unless only
        the root would remain.
        """
        prefix, rest = self.style.splitdrive(path)
        i = self.style.rfind_sep(rest) + 1
        head, tail = rest[:i], rest[i:]
        head = self.style.rstrip_seps(head) or head
        return SplitResult(prefix + head, tail)

    def basename(self, path: str) -> str:
        """Last path element, same as the tail of split()."""
        return self.split(path).tail

    def dirname(self, path: str) -> str:
        """Everything except the basename, same as the head of split()."""
        return self.split(path).head

    def splitext(self, path: str) -> ExtResult:
        """
        Split the path into root and extension.

        The extension starts at the last dot of the final component, unless
        that dot is the component's first character. Concatenating root and
        extension always gives back the original path.
        """
        prefix, rest = self.style.splitdrive(path)
        name_start = self.style.rfind_sep(rest) + 1
        dot = rest.rfind(CURDIR)
        if dot > name_start:
            cut = len(prefix) + dot
            return ExtResult(path[:cut], path[cut:])
        return ExtResult(path, "")

    def getext(self, path: str) -> str:
        """Extension of the path, same as the ext of splitext()."""
        return self.splitext(path).ext

    def norm(self, path: str) -> str:
        """
        Normalize the path.

        Redundant separators and "." elements are removed and ".." elements
        cancel the element before them. A ".." that reaches the root of an
        absolute path is dropped; in a relative path it is kept. The drive or
        UNC prefix is never changed.
        """
        prefix, rest = self.style.splitdrive(path)
        rooted = bool(rest) and self.style.is_sep(rest[0])

        parts: List[str] = []
        kept_pardir = False
        for part in self.style.components(rest):
            if part == CURDIR:
                continue
            if part == PARDIR:
                if parts and parts[-1] != PARDIR:
                    parts.pop()
                    continue
                if rooted:
                    continue
                kept_pardir = True
            parts.append(part)

        if kept_pardir:
            logger.debug(f"Keeping unresolved up-level references in {path!r}")

        if not prefix and not rooted and parts and self.style.has_drive(parts[0]):
            # "x/../C:y" must not turn into a drive path
            parts.insert(0, CURDIR)

        result = prefix + (self.sep if rooted else "") + self.sep.join(parts)
        return result or CURDIR

    normalize = norm
