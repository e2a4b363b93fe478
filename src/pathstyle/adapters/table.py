"""Function-table host adapter."""

from typing import Any, Callable, Dict

from .base import HostAdapter


class TableAdapter(HostAdapter):
    """Keeps registered functions in a name -> function table."""

    def __init__(self, *args, **kwargs):
        self.table: Dict[str, Callable[..., Any]] = {}
        super().__init__(*args, **kwargs)

    def register(self, name: str, function: Callable[..., Any]) -> None:
        self.table[name] = function

    def call(self, name: str, *args: Any) -> Any:
        """
        Call a registered function by name.

        Raises:
            KeyError: If no function is registered under name
        """
        if name not in self.table:
            raise KeyError(f"No path function named '{name}'")
        return self.table[name](*args)

    def __contains__(self, name: str) -> bool:
        return name in self.table
