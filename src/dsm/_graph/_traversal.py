"""Predicate-filtered traversal over the live nodes of a graph."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy.typing as npt


class TraversalKind(StrEnum):
    """What a traversal selects from the live node set.

    SUCCESSOR and PREDECESSOR are anchored on a node; SOURCE and SINK are not.
    """

    SUCCESSOR = "successor"
    PREDECESSOR = "predecessor"
    SOURCE = "source"
    SINK = "sink"

    @property
    def anchored(self) -> bool:
        """Whether this kind of traversal needs an anchor node."""
        return self in (TraversalKind.SUCCESSOR, TraversalKind.PREDECESSOR)


def selection_mask(
    kind: TraversalKind,
    adjacency: npt.NDArray[np.bool_],
    live: npt.NDArray[np.bool_],
    anchor: int | None = None,
) -> npt.NDArray[np.bool_]:
    """Compute which indices are selected by ``kind``, as a boolean mask.

    Args:
        kind: The traversal kind.
        adjacency: Square boolean adjacency matrix (row = source, column = target).
        live: Boolean mask of the live indices.
        anchor: Index of the anchor node for SUCCESSOR/PREDECESSOR.

    Returns:
        A mask that is only ever True on live indices.

    """
    match kind:
        case TraversalKind.SUCCESSOR:
            return adjacency[anchor, :] & live
        case TraversalKind.PREDECESSOR:
            return adjacency[:, anchor] & live
        case TraversalKind.SOURCE:
            # any live edge into the column disqualifies it
            return live & ~np.any(adjacency[live, :], axis=0)
        case TraversalKind.SINK:
            return live & ~np.any(adjacency[:, live], axis=1)


def traverse(
    kind: TraversalKind,
    adjacency: npt.NDArray[np.bool_],
    live: npt.NDArray[np.bool_],
    anchor: int | None = None,
) -> Iterator[int]:
    """Lazily yield the live indices selected by ``kind``, in ascending order.

    Every call returns an independent generator; nothing is shared between
    traversals besides the read-only arrays.
    """
    if kind.anchored and anchor is None:
        msg = f"A {kind} traversal needs an anchor node"
        raise ValueError(msg)

    for index in np.flatnonzero(selection_mask(kind, adjacency, live, anchor)):
        yield int(index)
