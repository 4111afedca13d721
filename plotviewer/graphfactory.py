"""Chooses a graph renderer by graph type."""

from __future__ import annotations

from typing import Iterable

from .graphs import Graph, GraphType, LineGraph, ScatterGraph


class GraphFactory:
    """Maps graph types to renderers, always including line and scatter."""

    def __init__(self, graphs: Iterable[Graph | None] | None = None) -> None:
        self._graphs: dict[GraphType, Graph] = {}
        for graph in graphs or ():
            if graph is not None and graph.graph_type not in self._graphs:
                self._graphs[graph.graph_type] = graph
        self._graphs.setdefault(GraphType.LINE, LineGraph())
        self._graphs.setdefault(GraphType.SCATTER, ScatterGraph())

    def get_graph(self, graph_type: GraphType) -> Graph | None:
        """Return the renderer for a graph type, or None."""
        return self._graphs.get(graph_type)

    def graphs(self) -> list[Graph]:
        """Return every registered renderer."""
        return list(self._graphs.values())