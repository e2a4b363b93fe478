"""Utility modules for pathstyle."""

from .console_base import ConsoleBase, StatusType, THEMES

__all__ = ["ConsoleBase", "StatusType", "THEMES"]
