"""Public API surface for kingraph.

:class:`KinGraphApp` takes ``{"action": ..., "params": {...}}`` payloads from
the viewer, runs the matching query and returns a JSON-friendly response.
It is the only place where query sentinels are turned into user-facing
messages.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence

from kingraph.config import QueryLimits
from kingraph.graph.model import NO_COMMON_ANCESTOR, NO_PATH, QUERY_TOO_LARGE, Outcome, Subgraph
from kingraph.graph.query import QueryService
from kingraph.graph.store import GraphStore
from kingraph.persist.export import GraphExporter
from kingraph.router import ActionRouter

LOGGER = logging.getLogger(__name__)

PersonRef = int | str


class _Unresolved(Exception):
    """A person reference that names nobody in the store."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class KinGraphApp:
    """Wire a loaded :class:`GraphStore` to the viewer's query actions."""

    graph_store: GraphStore
    limits: QueryLimits = field(default_factory=QueryLimits.from_env)
    router: ActionRouter = field(default_factory=ActionRouter)

    def __post_init__(self) -> None:
        self.queries = QueryService(store=self.graph_store, limits=self.limits)
        self.exporter = GraphExporter(store=self.graph_store)
        self._register_default_actions()

    @classmethod
    def from_raw(
        cls,
        nodes: Mapping[int, Optional[str]],
        edges: Iterable[Sequence[int]],
        **kwargs: Any,
    ) -> "KinGraphApp":
        """Build the store from loader output, keeping it usable despite dangling edges."""

        store = GraphStore.build(nodes, edges, strict=False)
        return cls(graph_store=store, **kwargs)

    def handle(self, payload: dict) -> dict:
        """Dispatch an API payload and return a canonical response."""

        action = payload.get("action")
        if not action:
            raise KeyError("payload must include 'action'")
        params = payload.get("params", {})
        try:
            outcome = self.router.dispatch(action, params)
        except _Unresolved as exc:
            outcome = {"result": {}, "message": exc.message}
        message = outcome.get("message")
        if message:
            LOGGER.info("Action '%s' returned no result: %s", action, message)
        return {
            "ok": message is None,
            "action": action,
            "result": outcome.get("result", {}),
            "message": message,
        }

    # ------------------------------------------------------------------
    # Action handlers
    # ------------------------------------------------------------------

    def _register_default_actions(self) -> None:
        self.router.register("lookup", self._handle_lookup)
        self.router.register("ancestry", self._handle_ancestry)
        self.router.register("common_ancestry", self._handle_common_ancestry)
        self.router.register("closest_ancestor", self._handle_closest_ancestor)
        self.router.register("shortest_path", self._handle_shortest_path)

    def _handle_lookup(self, params: dict) -> dict:
        person_id = self._resolve(params["name"] if "name" in params else params.get("person_id"))
        return {"result": {"person_id": person_id, "name": self.graph_store.name(person_id)}}

    def _handle_ancestry(self, params: dict) -> dict:
        person_id = self._resolve(params.get("person"))
        result = self.queries.ancestry(person_id)
        payload = {
            "root_id": result.root_id,
            "parents_only": result.parents_only,
            **self._render(result.subgraph, params.get("format", "edges")),
        }
        return {"result": payload}

    def _handle_common_ancestry(self, params: dict) -> dict:
        id_a, id_b = self._resolve_pair(params)
        result = self.queries.common_ancestry(id_a, id_b)
        if isinstance(result, Outcome):
            return {"result": {}, "message": self._describe(result, id_a, id_b)}
        payload = {"people": [id_a, id_b], **self._render(result, params.get("format", "edges"))}
        return {"result": payload}

    def _handle_closest_ancestor(self, params: dict) -> dict:
        id_a, id_b = self._resolve_pair(params)
        ancestor = self.queries.closest_ancestor(id_a, id_b)
        if isinstance(ancestor, Outcome):
            return {"result": {}, "message": self._describe(ancestor, id_a, id_b)}
        return {"result": {"ancestor_id": ancestor, "name": self.graph_store.name(ancestor)}}

    def _handle_shortest_path(self, params: dict) -> dict:
        id_a, id_b = self._resolve_pair(params)
        path = self.queries.shortest_path(id_a, id_b)
        if isinstance(path, Outcome):
            return {"result": {}, "message": self._describe(path, id_a, id_b)}
        names = [self.graph_store.name(node_id) for node_id in path]
        return {"result": {"path": path, "names": names, "length": len(path) - 1}}

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _render(self, subgraph: Subgraph, format: str) -> dict:
        if format == "edges":
            return {"edges": subgraph.to_payload()}
        return {"format": format, "graph": self.exporter.export(subgraph, format=format)}

    def _resolve(self, ref: Optional[PersonRef]) -> int:
        """Turn an id or display name into a present person id."""

        if ref is None:
            raise KeyError("a person reference is required")
        if isinstance(ref, bool):
            raise TypeError("person references must be ids or names")
        if isinstance(ref, int):
            if not self.graph_store.exists(ref):
                raise _Unresolved(f"Person {ref} not found.")
            return ref
        name = str(ref).strip()
        person_id = self.graph_store.find(name)
        if isinstance(person_id, Outcome):
            raise _Unresolved(f"Name '{name}' not found.")
        return person_id

    def _resolve_pair(self, params: dict) -> tuple[int, int]:
        people = params.get("people")
        if not isinstance(people, (list, tuple)) or len(people) != 2:
            raise KeyError("'people' must list exactly two persons")
        return self._resolve(people[0]), self._resolve(people[1])

    def _describe(self, outcome: Outcome, id_a: int, id_b: int) -> str:
        if outcome is NO_COMMON_ANCESTOR:
            return "No common ancestors!"
        if outcome is NO_PATH:
            return f"No path between {self.exporter.label(id_a)} and {self.exporter.label(id_b)}."
        if outcome is QUERY_TOO_LARGE:
            return "Query too large: an ancestor cone exceeds the configured limit."
        return f"{outcome!r} for {id_a} and {id_b}."


__all__ = ["KinGraphApp"]
