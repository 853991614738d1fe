"""
Maximum flow by shortest augmenting paths (Edmonds-Karp), via networkx.
"""

from dataclasses import dataclass
from typing import FrozenSet

import networkx as nx
from networkx.algorithms.flow import edmonds_karp


@dataclass(frozen=True)
class MaxFlow:
    """
    Value of a maximum flow and the source side of its minimum cut.

    The source side holds exactly the vertices reachable from the source
    through edges that still have residual capacity.
    """

    value: int
    source_side: FrozenSet[int]

    def in_cut(self, vertex: int) -> bool:
        """True if `vertex` is on the source side of the minimum cut."""
        return vertex in self.source_side


def solve_max_flow(network: nx.DiGraph, source: int, sink: int) -> MaxFlow:
    """
    Push a maximum flow from `source` to `sink` over the "capacity" edges.

    nx.minimum_cut puts every vertex that cannot reach the sink on the source
    side, which would include idle teams with no room left; the residual
    graph is walked from the source instead.

    Raises:
        networkx.NetworkXError: If source or sink is missing, or they are equal
    """
    residual = edmonds_karp(network, source, sink, capacity="capacity")

    open_edges = nx.DiGraph()
    open_edges.add_node(source)
    open_edges.add_edges_from(
        (u, v) for u, v, attr in residual.edges(data=True)
        if attr["capacity"] - attr["flow"] > 0
    )
    source_side = nx.descendants(open_edges, source) | {source}

    return MaxFlow(value=residual.graph["flow_value"], source_side=frozenset(source_side))
