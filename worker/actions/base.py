"""Action contract and the closed set of action kinds."""

from enum import Enum
from typing import List, Optional, Protocol

from worker.exceptions import UnknownActionError


class ActionKind(str, Enum):
    """Selector choosing which action to run."""
    COPY = "copy"
    LIST = "list"
    REMOVE = "remove"

    @classmethod
    def from_selector(cls, selector: str) -> "ActionKind":
        """
        Resolve an action selector string.

        Raises:
            UnknownActionError: If the selector names no known action
        """
        try:
            return cls(selector)
        except ValueError:
            raise UnknownActionError(f"Unknown action named {selector}") from None


class Action(Protocol):
    """One unit of filesystem work, executed once."""

    def execute(self) -> Optional[List[str]]:
        ...
