"""Exception types raised by the lsgraph engine.

Model-layer errors are recoverable: an operation that raises leaves the
network unchanged.
"""

from __future__ import annotations

from typing import Hashable


class LsGraphError(Exception):
    """Base class for all lsgraph errors."""


class UnknownRouterError(LsGraphError, LookupError):
    """An operation referenced a router name that is not in the network."""

    def __init__(self, name: str, role: str = "Router") -> None:
        self.name = name
        self.role = role
        super().__init__(f"{role} '{name}' does not exist.")


class UnreachableError(LsGraphError):
    """The destination has no finite-cost path under the active topology."""

    def __init__(self, source: str, destination: str) -> None:
        self.source = source
        self.destination = destination
        super().__init__(
            f"Destination router '{destination}' is not reachable from '{source}'."
        )


class EmptyHeapError(LsGraphError, IndexError):
    """Extraction was attempted on an empty priority queue."""

    def __init__(self) -> None:
        super().__init__("extract_min() called on an empty heap.")


class InvalidKeyUpdateError(LsGraphError, ValueError):
    """``decrease_key`` was called with a key larger than the current one."""

    def __init__(self, item: Hashable, current: float, new: float) -> None:
        self.item = item
        self.current = current
        self.new = new
        super().__init__(
            f"New key {new} for '{item}' is greater than current key {current}."
        )


class InvalidWeightError(LsGraphError, ValueError):
    """A link weight is negative or not a number."""

    def __init__(self, weight: float) -> None:
        self.weight = weight
        super().__init__(f"Link weight must be a non-negative number, got {weight!r}.")


class SelfLoopError(LsGraphError, ValueError):
    """A link was requested from a router to itself."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Self-loop link on router '{name}' is not allowed.")
