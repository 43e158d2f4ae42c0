"""Action routing for the kingraph API."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Protocol


class QueryHandler(Protocol):
    """Callable answering one query action."""

    def __call__(self, params: dict) -> dict:  # pragma: no cover - interface
        ...


@dataclass
class ActionRouter:
    """Map action names to their query handlers."""

    registry: Dict[str, QueryHandler] = field(default_factory=dict)

    def register(self, action: str, handler: QueryHandler) -> None:
        if action in self.registry:
            raise KeyError(f"Action already registered: {action}")
        self.registry[action] = handler

    def actions(self) -> Iterable[str]:
        return tuple(sorted(self.registry))

    def dispatch(self, action: str, params: dict) -> dict:
        """Run the handler registered for ``action`` with ``params``."""

        if action not in self.registry:
            raise KeyError(f"Unknown action: {action}")
        return self.registry[action](params)


__all__ = ["ActionRouter", "QueryHandler"]
