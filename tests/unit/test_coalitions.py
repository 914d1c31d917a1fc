"""Tests for coalition-chance estimators."""

import json

import pytest

from app.models import CoalitionTables, DualPartyResult, PartyData, ScoreBreakdown
from app.repositories import ConfigRepository
from app.services.coalition import (
    CoalitionService,
    ExactCoalitionEstimator,
    SeatShareCoalitionEstimator,
    explain,
    get_estimator,
)
from app.services.scoring import TooManyPartiesError

TABLES = CoalitionTables(
    total_seats=150,
    seats={"A": 50, "B": 30, "C": 30, "D": 10},
    incompatibilities={"A": ["C"]},
    ideology={"A": 2, "B": 4, "C": 8, "D": 5},
)


def results(*scores):
    """DualPartyResults named A, B, C... with the given combined scores."""
    return [
        DualPartyResult(
            PartyData(name.lower(), name, "#000000", ""), ScoreBreakdown(), ScoreBreakdown(), score, True
        )
        for name, score in zip("ABCDEFGHIJKLMNOPQRSTUVWXYZ", scores)
    ]


class TestTables:
    def test_majority(self):
        assert TABLES.majority == 76

    def test_incompatibility_is_mutual(self):
        assert not TABLES.compatible("A", "C")
        assert not TABLES.compatible("C", "A")
        assert TABLES.compatible("B", "C")

    def test_unknown_party_defaults(self):
        assert TABLES.seats_of("X") == 0
        assert TABLES.position_of("X") == 5.0


class TestExactEstimator:
    def test_stability_ties_keep_subset_order(self):
        tied = CoalitionTables(
            total_seats=150,
            seats={name: 40 for name in "ABCD"},
            incompatibilities={},
            ideology={name: 5 for name in "ABCD"},
        )
        by_name = {c.party_name: c for c in ExactCoalitionEstimator(tied).estimate(results(60, 50, 40, 30))}

        assert [o.partners for o in by_name["A"].most_likely_coalitions] == [["B"], ["C"], ["B", "C"]]
        assert [o.partners for o in by_name["D"].most_likely_coalitions] == [["A"], ["B"], ["A", "B"]]

    def test_feasible_coalitions(self):
        coalitions = ExactCoalitionEstimator(TABLES).feasible_coalitions(["A", "B", "C", "D"])
        assert {c.parties for c in coalitions} == {("A", "B"), ("A", "B", "D")}
        assert all(c.seats >= 76 for c in coalitions)

    def test_chances(self):
        chances = ExactCoalitionEstimator(TABLES).estimate(results(60, 50, 40, 30))
        by_name = {c.party_name: c for c in chances}

        assert by_name["A"].chance_percentage == 100
        assert by_name["B"].chance_percentage == 100
        assert by_name["D"].chance_percentage == 50
        assert by_name["C"].chance_percentage == 0

    def test_sorted_by_chance(self):
        chances = ExactCoalitionEstimator(TABLES).estimate(results(60, 50, 40, 30))
        assert [c.party_name for c in chances] == ["A", "B", "D", "C"]

    def test_options_reach_majority(self):
        for chance in ExactCoalitionEstimator(TABLES).estimate(results(60, 50, 40, 30)):
            assert len(chance.most_likely_coalitions) <= 3
            for option in chance.most_likely_coalitions:
                assert option.seats >= 76
                assert chance.party_name not in option.partners

    def test_partners(self):
        chances = ExactCoalitionEstimator(TABLES).estimate(results(60, 50, 40, 30))
        a = next(c for c in chances if c.party_name == "A")
        assert sorted(o.partners for o in a.most_likely_coalitions) == [["B"], ["B", "D"]]

    def test_isolated_party(self):
        chances = ExactCoalitionEstimator(TABLES).estimate(results(60, 50, 40, 30))
        c = next(c for c in chances if c.party_name == "C")
        assert c.most_likely_coalitions == []
        assert "coalition partners" in c.explanation

    def test_too_many_parties(self):
        with pytest.raises(TooManyPartiesError):
            ExactCoalitionEstimator(TABLES, max_parties=3).estimate(results(1, 2, 3, 4))

    def test_no_majority_possible(self):
        small = CoalitionTables(seats={"A": 10, "B": 10})
        chances = ExactCoalitionEstimator(small).estimate(results(50, 50))
        assert all(c.chance_percentage == 0 for c in chances)


class TestSeatShareEstimator:
    def test_chances(self):
        chances = SeatShareCoalitionEstimator().estimate(results(60, 30, 10))
        assert [(c.party_name, c.chance_percentage) for c in chances] == [("A", 67), ("B", 33), ("C", 14)]

    def test_coalition(self):
        chances = SeatShareCoalitionEstimator().estimate(results(60, 30, 10))
        a = chances[0].most_likely_coalitions[0]
        assert (a.partners, a.seats) == (["B"], 135)

    def test_all_zero(self):
        chances = SeatShareCoalitionEstimator().estimate(results(0, 0))
        assert [c.chance_percentage for c in chances] == [0, 0]


class TestExplain:
    def test_buckets(self):
        assert "excellent" in explain("A", 71)
        assert "good" in explain("A", 41)
        assert "limited" in explain("A", 16)
        assert "low" in explain("A", 15)


class TestEstimatorLookup:
    def test_exact_needs_tables(self):
        with pytest.raises(ValueError):
            get_estimator("exact", None)

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_estimator("monte_carlo", TABLES)

    def test_seat_share_uses_chamber_size(self):
        assert get_estimator("seat_share", CoalitionTables(total_seats=75)).total_seats == 75


class TestCoalitionService:
    def test_falls_back_without_tables(self, tmp_path):
        service = CoalitionService(ConfigRepository(tmp_path))
        assert service.estimator.name == "seat_share"

    def test_exact_with_tables(self, tmp_path):
        (tmp_path / "coalitions.json").write_text(
            json.dumps({"seats": TABLES.seats, "incompatibilities": TABLES.incompatibilities}), encoding="utf-8"
        )
        service = CoalitionService(ConfigRepository(tmp_path))
        assert service.estimator.name == "exact"
        assert service.chances(results(60, 50, 40, 30))[0].chance_percentage == 100
