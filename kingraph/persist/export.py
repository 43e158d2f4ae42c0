"""Serialise query results for the external renderer."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal, Sequence

import networkx as nx

from kingraph.graph.model import Subgraph
from kingraph.graph.store import GraphStore

# Fill colours for the first and second highlighted person.
HIGHLIGHT_STYLES = (
    "fill: #66ff66; font-weight: bold",
    "fill: #6666ff; font-weight: bold",
)

ExportFormat = Literal["dot", "json", "graphml"]


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


@dataclass
class GraphExporter:
    """Render a :class:`Subgraph` with the display names held by ``store``."""

    store: GraphStore

    def export(
        self,
        subgraph: Subgraph,
        *,
        format: ExportFormat = "dot",
        highlight: Sequence[int] | None = None,
    ) -> str:
        """Export ``subgraph`` to ``format``.

        ``highlight`` defaults to the subgraph's query roots.
        """

        marked = list(subgraph.root_ids if highlight is None else highlight)
        if format == "dot":
            return self.to_dot(subgraph, marked)
        if format == "json":
            data = nx.node_link_data(self.to_networkx(subgraph, marked), edges="links")
            return json.dumps(data, ensure_ascii=False)
        if format == "graphml":
            return "\n".join(nx.generate_graphml(self.to_networkx(subgraph, marked)))
        raise ValueError(f"Unsupported export format: {format}")

    def label(self, node_id: int) -> str:
        name = self.store.name(node_id)
        return name if name else str(node_id)

    def to_dot(self, subgraph: Subgraph, highlight: Sequence[int] = ()) -> str:
        """Return a ``digraph`` string with edges named by person."""

        parts = ["digraph {"]
        for node_id, style in zip(highlight, HIGHLIGHT_STYLES):
            parts.append(f"{_quote(self.label(node_id))} [style={_quote(style)}];")
        for source, target in subgraph.edges:
            parts.append(f"{_quote(self.label(source))} -> {_quote(self.label(target))};")
        parts.append("}")
        return " ".join(parts)

    def to_networkx(self, subgraph: Subgraph, highlight: Sequence[int] = ()) -> nx.DiGraph:
        """Return ``subgraph`` as a :class:`networkx.DiGraph` with ``name`` attributes."""

        graph = nx.DiGraph()
        marked = set(highlight)
        for node_id in sorted(subgraph.nodes):
            graph.add_node(node_id, name=self.label(node_id), highlight=node_id in marked)
        graph.add_edges_from(subgraph.edges)
        return graph


__all__ = ["GraphExporter", "HIGHLIGHT_STYLES"]
