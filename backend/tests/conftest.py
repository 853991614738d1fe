"""
Shared fixtures: classic division standings.
"""

import pytest

from elimination.solver import StandingsModel, TeamRecord, EliminationEngine


TEAMS4_TEXT = """4
Atlanta       83 71  8  0 1 6 1
Philadelphia  80 79  3  1 0 0 2
New_York      78 78  6  6 0 0 0
Montreal      77 82  3  1 2 0 0
"""

TEAMS5_TEXT = """5
New_York    75 59 28   0 3 8 7 3
Baltimore   71 63 28   3 0 2 7 7
Boston      69 66 27   8 2 0 0 3
Toronto     63 72 27   7 7 0 0 3
Detroit     49 86 27   3 7 3 3 0
"""


def make_standings(rows):
    """Build a StandingsModel from (name, wins, losses, remaining, against) tuples."""
    return StandingsModel([TeamRecord(name, w, l, r, tuple(a)) for name, w, l, r, a in rows])


@pytest.fixture
def teams4():
    return make_standings([
        ("Atlanta", 83, 71, 8, [0, 1, 6, 1]),
        ("Philadelphia", 80, 79, 3, [1, 0, 0, 2]),
        ("New_York", 78, 78, 6, [6, 0, 0, 0]),
        ("Montreal", 77, 82, 3, [1, 2, 0, 0]),
    ])


@pytest.fixture
def teams5():
    return make_standings([
        ("New_York", 75, 59, 28, [0, 3, 8, 7, 3]),
        ("Baltimore", 71, 63, 28, [3, 0, 2, 7, 7]),
        ("Boston", 69, 66, 27, [8, 2, 0, 0, 3]),
        ("Toronto", 63, 72, 27, [7, 7, 0, 0, 3]),
        ("Detroit", 49, 86, 27, [3, 7, 3, 3, 0]),
    ])


@pytest.fixture
def engine4(teams4):
    return EliminationEngine(teams4)


@pytest.fixture
def engine5(teams5):
    return EliminationEngine(teams5)


@pytest.fixture
def build_standings():
    """Factory fixture wrapping make_standings."""
    return make_standings


@pytest.fixture
def teams4_text():
    return TEAMS4_TEXT


@pytest.fixture
def teams5_text():
    return TEAMS5_TEXT
