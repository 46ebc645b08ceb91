"""Immutable adjacency-matrix directed graph with cheap subgraph views."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, NamedTuple, TypeVar

import numpy as np

from ._traversal import TraversalKind, traverse

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    import numpy.typing as npt


T = TypeVar("T")


class NodeNotFoundError(LookupError):
    """A node is not part of the live node set of a graph."""


class Degrees(NamedTuple):
    """In-degree and out-degree of a node within a graph view."""

    in_degree: int
    out_degree: int


@dataclass(frozen=True, slots=True, eq=False)
class DirectedGraph(Generic[T]):
    """A directed graph, possibly cyclic, backed by a boolean adjacency matrix.

    The graph is an immutable snapshot. Every node gets a fixed index when the
    graph is built (see GraphBuilder); the adjacency matrix is indexed by it.
    A graph only *considers* the nodes flagged in its live mask, so removing
    nodes produces a new view that shares the index assignment and the matrix
    with the graph it was derived from and differs only in the mask.

    Edges from or to nodes outside the live set are invisible to every query.
    Queries about a node outside the live set raise NodeNotFoundError.

    Attributes:
        _nodes: Node at each index, in index order.
        _indexes: Mapping from node to its index.
        _adjacency: Square boolean matrix; ``_adjacency[i, j]`` is the edge i -> j.
        _live: Boolean mask of the indices present in this view.

    """

    _nodes: tuple[T, ...]
    _indexes: Mapping[T, int]
    _adjacency: npt.NDArray[np.bool_]
    _live: npt.NDArray[np.bool_]

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T]]) -> DirectedGraph[T]:
        """Build a graph from (source, target) pairs.

        Example:
            >>> graph = DirectedGraph.from_edges([("a", "b"), ("b", "c")])
            >>> list(graph.successors("a"))
            ['b']

        """
        from ._builder import GraphBuilder  # noqa: PLC0415

        builder: GraphBuilder[T] = GraphBuilder()
        for source, target in edges:
            builder.connect(source, target)
        return builder.build()

    def _index_of(self, node: T) -> int:
        index = self._indexes.get(node)
        if index is None or not self._live[index]:
            msg = f"This graph does not contain node {node!r}"
            raise NodeNotFoundError(msg)
        return index

    def order(self) -> int:
        """Return the number of live nodes."""
        return int(np.count_nonzero(self._live))

    @property
    def nodes(self) -> frozenset[T]:
        """The live nodes of this graph."""
        return frozenset(self)

    def in_and_out_degree(self, node: T) -> Degrees:
        """Count the edges into and out of a node, against live nodes only.

        A self-loop counts once towards each degree.

        Raises:
            NodeNotFoundError: If the node is not live.

        """
        index = self._index_of(node)
        in_degree = int(np.count_nonzero(self._adjacency[:, index] & self._live))
        out_degree = int(np.count_nonzero(self._adjacency[index, :] & self._live))
        return Degrees(in_degree, out_degree)

    def successors(self, node: T) -> Iterator[T]:
        """Iterate over the live targets of edges leaving ``node``.

        Raises:
            NodeNotFoundError: If the node is not live.

        """
        return self._traverse(TraversalKind.SUCCESSOR, self._index_of(node))

    def predecessors(self, node: T) -> Iterator[T]:
        """Iterate over the live sources of edges entering ``node``.

        Raises:
            NodeNotFoundError: If the node is not live.

        """
        return self._traverse(TraversalKind.PREDECESSOR, self._index_of(node))

    def sources(self) -> Iterator[T]:
        """Iterate over live nodes without incoming edges."""
        return self._traverse(TraversalKind.SOURCE)

    def sinks(self) -> Iterator[T]:
        """Iterate over live nodes without outgoing edges."""
        return self._traverse(TraversalKind.SINK)

    def _traverse(self, kind: TraversalKind, anchor: int | None = None) -> Iterator[T]:
        return (self._nodes[index] for index in traverse(kind, self._adjacency, self._live, anchor))

    def remove(self, *nodes: T) -> DirectedGraph[T]:
        """Return a view of this graph without the given nodes.

        Nodes that are unknown or already removed are ignored. The new view
        shares the index assignment and the adjacency matrix with this one.
        Pass nodes as separate arguments; unpack collections with
        ``graph.remove(*nodes)``.

        Raises:
            TypeError: If a node is unhashable, e.g. a list passed without unpacking.

        Example:
            >>> graph = DirectedGraph.from_edges([("a", "b"), ("b", "c")])
            >>> sorted(graph.remove("b", "z").nodes)
            ['a', 'c']

        """
        for node in nodes:
            if not isinstance(node, Hashable):
                msg = f"Cannot remove unhashable node {node!r}; unpack collections with remove(*nodes)"
                raise TypeError(msg)
        removed = [index for node in nodes if (index := self._indexes.get(node)) is not None]
        live = self._live.copy()
        live[removed] = False
        live.flags.writeable = False
        return DirectedGraph(
            _nodes=self._nodes,
            _indexes=self._indexes,
            _adjacency=self._adjacency,
            _live=live,
        )

    def connects(self, source: T, target: T) -> bool:
        """Check whether there is an edge from ``source`` to ``target``.

        Raises:
            NodeNotFoundError: If either node is not live.

        """
        return bool(self._adjacency[self._index_of(source), self._index_of(target)])

    def edges(self) -> Iterator[tuple[T, T]]:
        """Iterate over the edges between live nodes, ordered by source then target index."""
        live_indexes = np.flatnonzero(self._live)
        sub_matrix = self._adjacency[np.ix_(live_indexes, live_indexes)]
        for row, column in zip(*np.nonzero(sub_matrix), strict=True):
            yield self._nodes[live_indexes[row]], self._nodes[live_indexes[column]]

    def edge_count(self) -> int:
        """Return the number of edges between live nodes."""
        live_indexes = np.flatnonzero(self._live)
        return int(np.count_nonzero(self._adjacency[np.ix_(live_indexes, live_indexes)]))

    def __iter__(self) -> Iterator[T]:
        """Iterate over the live nodes in index order."""
        return (self._nodes[index] for index in np.flatnonzero(self._live))

    def __len__(self) -> int:
        """Return the number of live nodes."""
        return self.order()

    def __contains__(self, node: object) -> bool:
        """Check whether a node is live in this graph."""
        index = self._indexes.get(node)  # type: ignore[call-overload]
        return index is not None and bool(self._live[index])

    def __repr__(self) -> str:
        return f"DirectedGraph(order={self.order()}, indexed={len(self._nodes)})"
