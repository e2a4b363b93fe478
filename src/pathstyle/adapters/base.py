"""
Base host adapter interface.

A host adapter exposes the path operations to an embedding interpreter as a
table of named functions. The adapter owns argument checking: the core only
ever sees well-typed strings.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from ..core.models import Config
from ..core.operations import PathOperations

logger = logging.getLogger(__name__)

# Table name -> number of path arguments (None means variadic)
FUNCTIONS = {
    "isabs": 1,
    "join": None,
    "split": 1,
    "basename": 1,
    "dirname": 1,
    "splitext": 1,
    "getext": 1,
    "norm": 1,
}


def _type_name(value: Any) -> str:
    if value is None:
        return "no value"
    return type(value).__name__


class ArgumentError(TypeError):
    """A host call broke the argument contract (wrong count or type)."""

    def __init__(self, function: str, message: str, position: Optional[int] = None):
        self.function = function
        self.position = position
        if position is not None:
            text = f"bad argument #{position} to '{function}' ({message})"
        else:
            text = f"wrong arguments to '{function}' ({message})"
        super().__init__(text)


def check_string(function: str, args: Sequence[Any], position: int) -> str:
    """
    Check that a host argument is a string.

    Args:
        function: Name of the called function, for the error message
        args: All arguments of the call
        position: 1-based position of the argument to check

    Returns:
        The argument

    Raises:
        ArgumentError: If the argument is missing or not a string
    """
    value = args[position - 1] if position <= len(args) else None
    if not isinstance(value, str):
        raise ArgumentError(function, f"string expected, got {_type_name(value)}", position)
    return value


def check_arity(function: str, args: Sequence[Any], expected: int) -> None:
    """Reject calls with more arguments than the function takes."""
    if len(args) > expected:
        raise ArgumentError(function, f"expected {expected} argument(s), got {len(args)}")


class HostAdapter(ABC):
    """
    Abstract base class for host adapters.

    Subclasses decide where registered functions live; this class builds the
    checked wrappers around the core operations.
    """

    def __init__(self, config: Optional[Config] = None, operations: Optional[PathOperations] = None):
        """Initialize adapter with configuration."""
        self.config = config or Config()
        self.operations = operations or PathOperations.from_config(self.config)

    @abstractmethod
    def register(self, name: str, function: Callable[..., Any]) -> None:
        """Make a function available to the host under the given name."""
        pass

    def open_module(self) -> "HostAdapter":
        """Register every path function with the host."""
        for name, arity in FUNCTIONS.items():
            self.register(name, self.wrap(name, arity))
        logger.debug(f"Registered {len(FUNCTIONS)} path functions with {type(self).__name__}")
        return self

    def wrap(self, name: str, arity: Optional[int]) -> Callable[..., Any]:
        """
        Build a host-callable wrapper for one operation.

        Args:
            name: Operation name
            arity: Number of path arguments, or None for variadic

        Returns:
            Function that checks its arguments and calls the core
        """
        operation = getattr(self.operations, name)

        if arity is None:
            def variadic(*args: Any) -> Any:
                fragments = [check_string(name, args, i) for i in range(1, len(args) + 1)]
                return operation(*fragments)
            variadic.__name__ = name
            return variadic

        def single(*args: Any) -> Any:
            check_arity(name, args, arity)
            result = operation(check_string(name, args, 1))
            # Hosts receive pairs as plain multiple values
            return tuple(result) if isinstance(result, tuple) else result
        single.__name__ = name
        return single
