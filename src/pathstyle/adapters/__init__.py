"""Host adapters exposing the path functions to an embedding interpreter."""
from typing import Optional

from ..core.models import Config
from .base import ArgumentError, HostAdapter, FUNCTIONS
from .table import TableAdapter


_ADAPTERS = {
    "table": TableAdapter,
}


def create_adapter(config: Optional[Config] = None, kind: str = "table") -> HostAdapter:
    """
    Create a host adapter with every path function registered.

    Args:
        config: Configuration selecting the path style
        kind: Adapter type

    Returns:
        Adapter with its module opened

    Raises:
        ValueError: If the adapter type is unknown
    """
    if kind not in _ADAPTERS:
        raise ValueError(f"Unknown adapter type '{kind}'")
    return _ADAPTERS[kind](config).open_module()


__all__ = ["ArgumentError", "HostAdapter", "TableAdapter", "FUNCTIONS", "create_adapter"]
