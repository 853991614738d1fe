"""
Tests for the standings model.
"""

import pytest

from elimination.solver import StandingsModel, TeamRecord, MalformedInputError, UnknownTeamError


class TestStandingsConstruction:
    """Validation performed when a model is built."""

    def test_team_count_matches_records(self, teams4):
        """Test the team count follows the records."""
        assert teams4.team_count() == 4

    def test_declared_count_mismatch(self):
        """Test a declared count that disagrees with the records."""
        records = [TeamRecord("A", 1, 1, 0, (0,))]
        with pytest.raises(MalformedInputError, match="Declared 2 teams"):
            StandingsModel(records, team_count=2)

    def test_declared_count_match(self):
        """Test a declared count that agrees with the records."""
        records = [TeamRecord("A", 1, 1, 0, (0,))]
        assert StandingsModel(records, team_count=1).team_count() == 1

    @pytest.mark.parametrize("field", ["wins", "losses", "remaining"])
    def test_negative_field_rejected(self, field):
        """Test negative wins, losses or remaining are rejected."""
        values = {"wins": 1, "losses": 1, "remaining": 0}
        values[field] = -1
        records = [TeamRecord("A", against=(0,), **values)]
        with pytest.raises(MalformedInputError, match=field):
            StandingsModel(records)

    def test_negative_against_rejected(self):
        """Test negative remaining-against values are rejected."""
        records = [
            TeamRecord("A", 1, 1, 1, (0, -1)),
            TeamRecord("B", 1, 1, 1, (-1, 0)),
        ]
        with pytest.raises(MalformedInputError, match="non-negative"):
            StandingsModel(records)

    def test_duplicate_name_rejected(self):
        """Test duplicate team names are rejected."""
        records = [
            TeamRecord("A", 1, 1, 0, (0, 0)),
            TeamRecord("A", 2, 0, 0, (0, 0)),
        ]
        with pytest.raises(MalformedInputError, match="Duplicate"):
            StandingsModel(records)

    def test_empty_name_rejected(self):
        """Test a blank team name is rejected."""
        with pytest.raises(MalformedInputError, match="no name"):
            StandingsModel([TeamRecord("", 1, 1, 0, (0,))])

    def test_short_against_row_rejected(self):
        """Test an against row of the wrong length is rejected."""
        records = [
            TeamRecord("A", 1, 1, 0, (0, 0)),
            TeamRecord("B", 1, 1, 0, (0,)),
        ]
        with pytest.raises(MalformedInputError, match="expected 2"):
            StandingsModel(records)

    def test_non_integer_rejected(self):
        """Test non-integer counts are rejected."""
        with pytest.raises(MalformedInputError):
            StandingsModel([TeamRecord("A", 1.5, 1, 0, (0,))])

    def test_empty_division(self):
        """Test a division with no teams."""
        standings = StandingsModel([])
        assert standings.team_count() == 0
        assert list(standings.team_names()) == []


class TestStandingsAccessors:
    """Read-only accessors."""

    def test_field_accessors(self, teams4):
        """Test per-team field lookups."""
        assert teams4.wins("Atlanta") == 83
        assert teams4.losses("Philadelphia") == 79
        assert teams4.remaining("New_York") == 6
        assert teams4.against("Atlanta", "New_York") == 6

    def test_against_is_symmetric(self, teams5):
        """Test games between two teams read the same both ways."""
        for a in teams5.team_names():
            for b in teams5.team_names():
                assert teams5.against(a, b) == teams5.against(b, a)

    def test_team_names_restartable(self, teams4):
        """Test team names can be iterated more than once."""
        names = teams4.team_names()
        assert set(names) == {"Atlanta", "Philadelphia", "New_York", "Montreal"}
        assert list(names) == list(names)

    def test_index_mapping(self, teams4):
        """Test name to index mapping both ways."""
        assert teams4.index_of("New_York") == 2
        assert teams4.name_at(2) == "New_York"

    @pytest.mark.parametrize("name", ["Boston", "", None])
    def test_unknown_team(self, teams4, name):
        """Test every accessor rejects unknown names."""
        with pytest.raises(UnknownTeamError):
            teams4.wins(name)
        with pytest.raises(UnknownTeamError):
            teams4.losses(name)
        with pytest.raises(UnknownTeamError):
            teams4.remaining(name)
        with pytest.raises(UnknownTeamError):
            teams4.against("Atlanta", name)
        with pytest.raises(UnknownTeamError):
            teams4.against(name, "Atlanta")

    def test_records_in_index_order(self, teams4):
        """Test records come back in input order."""
        records = teams4.records()
        assert [r.name for r in records] == ["Atlanta", "Philadelphia", "New_York", "Montreal"]
        assert records[0].against == (0, 1, 6, 1)

    def test_model_is_a_snapshot(self):
        """Test later changes to the inputs do not leak in."""
        against = [0]
        records = [TeamRecord("A", 3, 1, 0, against)]
        standings = StandingsModel(records)
        against.append(5)
        records.append(TeamRecord("B", 0, 0, 0, (0,)))
        assert standings.team_count() == 1
        assert standings.against("A", "A") == 0
