"""
Flow network construction for elimination queries.

Vertex layout for a division of n teams with m = n * (n - 1) / 2 matchups:

    0                   source
    1 .. m              one matchup vertex per unordered pair (i, j), i < j,
                        numbered in row-major order (i outer, j inner)
    m + 1 .. m + n      one team vertex per team, in team index order
    m + n + 1           sink

Construction and cut extraction both go through the index functions below,
so the two always agree on the numbering.
"""

from typing import Sequence, Tuple

import networkx as nx


SOURCE = 0


def matchup_count(n: int) -> int:
    """Number of unordered team pairs: n * (n - 1) / 2."""
    return n * (n - 1) // 2


def matchup_vertex(i: int, j: int, n: int) -> int:
    """
    Vertex of the matchup between teams i and j (i < j).

    Rows before i contribute (n - 1) + (n - 2) + ... + (n - i) pairs, which is
    i * (2n - i - 1) / 2; within row i the pair sits at offset j - i - 1.
    """
    if not 0 <= i < j < n:
        raise ValueError(f"Invalid matchup ({i}, {j}) for {n} teams")
    return 1 + i * (2 * n - i - 1) // 2 + (j - i - 1)


def team_vertex(i: int, n: int) -> int:
    """Vertex of team i: 1 + m + i."""
    if not 0 <= i < n:
        raise ValueError(f"Invalid team index {i} for {n} teams")
    return 1 + matchup_count(n) + i


def sink_vertex(n: int) -> int:
    """The sink: m + n + 1."""
    return matchup_count(n) + n + 1


def vertex_count(n: int) -> int:
    """Source + matchups + teams + sink: m + n + 2."""
    return matchup_count(n) + n + 2


def build_network(
    wins: Sequence[int],
    remaining: Sequence[int],
    against: Sequence[Sequence[int]],
    target: int
) -> Tuple[nx.DiGraph, int]:
    """
    Build the elimination network for team `target`.

    Every pair (i, j) gets a source edge carrying the games left between them
    and two unbounded edges to its team vertices. After each outer row i the
    team vertex of i gets a sink edge sized to how many more games i can win
    without passing target's best possible total.

    Args:
        wins: Wins per team, by index
        remaining: Games remaining per team, by index
        against: Remaining games between each pair, by index
        target: Index of the team being tested

    Returns:
        Tuple of (directed graph with a "capacity" on every edge, total capacity leaving the source)
    """
    n = len(wins)
    best_case = wins[target] + remaining[target]

    # Any value above the total source capacity behaves as infinite here
    unbounded = sum(against[i][j] for i in range(n) for j in range(i + 1, n)) + 1

    network = nx.DiGraph()
    network.add_nodes_from(range(vertex_count(n)))
    sink = sink_vertex(n)
    total_capacity = 0

    for i in range(n):
        for j in range(i + 1, n):
            matchup = matchup_vertex(i, j, n)
            network.add_edge(SOURCE, matchup, capacity=against[i][j])
            network.add_edge(matchup, team_vertex(i, n), capacity=unbounded)
            network.add_edge(matchup, team_vertex(j, n), capacity=unbounded)
            total_capacity += against[i][j]

        network.add_edge(team_vertex(i, n), sink, capacity=max(0, best_case - wins[i]))

    return network, total_capacity

