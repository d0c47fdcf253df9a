from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

import networkx as nx

Label = TypeVar("Label", bound=Hashable)
Payload = TypeVar("Payload")


@dataclass(frozen=True)
class Vertex(Generic[Label]):
    index: int
    label: Label


@dataclass(frozen=True)
class Edge(Generic[Payload]):
    source: int
    target: int
    payload: Payload


class DiGraph(Generic[Label, Payload]):
    """
    Directed multigraph with one label per vertex and one payload per edge,
    backed by a `networkx.MultiDiGraph`.

    Nodes are the indices assigned on insertion and carry the label as node
    data. Edges carry the payload and an insertion counter, so outgoing edges
    come back in the order they were first added.
    """

    def __init__(self) -> None:
        self._graph = nx.MultiDiGraph()
        self._index: Dict[Label, int] = {}
        self._counter = 0

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def network(self) -> nx.MultiDiGraph:
        return self._graph

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def add_vertex(self, label: Label) -> int:
        index = self._graph.number_of_nodes()
        self._graph.add_node(index, label=label)
        self._index.setdefault(label, index)
        return index

    def find_vertex(self, label: Label) -> Optional[int]:
        return self._index.get(label)

    def find_or_create_vertex(self, label: Label) -> int:
        index = self.find_vertex(label)
        if index is None:
            return self.add_vertex(label)
        return index

    def vertex(self, index: int) -> Vertex[Label]:
        if index not in self._graph:
            raise IndexError(f"Vertex index {index} out of range.")
        return Vertex(index, self._graph.nodes[index]["label"])

    def vertices(self) -> Iterator[Vertex[Label]]:
        for index, label in self._graph.nodes(data="label"):
            yield Vertex(index, label)

    def replace_edge(
        self,
        source: int,
        payload: Payload,
        target: int,
        match: Callable[[Edge[Payload]], bool],
    ) -> Edge[Payload]:
        """
        Add `source -> target` carrying `payload`, or overwrite the first
        outgoing edge of `source` for which `match` holds. An overwritten
        edge keeps its position among the outgoing edges.
        """
        self.vertex(source)
        self.vertex(target)
        for u, v, key, data in self._out_edges(source):
            if match(Edge(u, v, data["payload"])):
                order = data["order"]
                self._graph.remove_edge(u, v, key=key)
                break
        else:
            order = self._counter
            self._counter += 1
        self._graph.add_edge(source, target, payload=payload, order=order)
        return Edge(source, target, payload)

    def edges(self, source: int) -> Iterator[Edge[Payload]]:
        self.vertex(source)
        for u, v, _, data in self._out_edges(source):
            yield Edge(u, v, data["payload"])

    def _out_edges(self, source: int) -> List[tuple]:
        return sorted(
            self._graph.out_edges(source, keys=True, data=True),
            key=lambda edge: edge[3]["order"],
        )
