"""
Tests for batch evaluation of permutations.
"""

import pytest
from sideorder.arrangement.evaluator import (
    Evaluation,
    evaluate_arrangement,
    evaluate_permutations,
)
from sideorder.models import Adjacent, AtPosition, Medium, OnSameSide, Track, Tracklist


@pytest.fixture
def tracks():
    return [Track("Intro", 5), Track("First", 5), Track("Second", 2), Track("Third", 2)]


@pytest.fixture
def constraints():
    return [
        AtPosition("Intro", 0, weight=7),
        Adjacent("First", "Second", weight=5),
        OnSameSide("Second", "Third", weight=2),
    ]


@pytest.fixture
def medium():
    return Medium(sides=2, max_duration_per_side=10)


class TestEvaluateArrangement:
    """Test single arrangement evaluation."""

    def test_feasible_and_scored(self, tracks, constraints, medium):
        evaluation = evaluate_arrangement(Tracklist(tracks), constraints, medium)

        assert evaluation == Evaluation(
            tracklist=Tracklist(tracks),
            fits=True,
            score=14,
            sides_used=2,
        )

    def test_partially_satisfied_arrangement(self, constraints, medium):
        tracklist = Tracklist.from_pairs(["Intro", "Second", "First", "Third"], [5, 2, 5, 2])
        # Sides: Intro+Second | First+Third
        evaluation = evaluate_arrangement(tracklist, constraints, medium)

        assert evaluation.fits
        assert evaluation.score == 7
        assert evaluation.sides_used == 2

    def test_infeasible_arrangement_still_scored(self, constraints):
        tracklist = Tracklist.from_pairs(["Intro", "Second", "First", "Third"], [5, 2, 5, 2])
        single_side = Medium(sides=1, max_duration_per_side=10)
        evaluation = evaluate_arrangement(tracklist, constraints, single_side)
        assert not evaluation.fits
        assert evaluation.score == 7
        assert evaluation.sides_used == 2


class TestEvaluatePermutations:
    """Test streaming evaluation over all orderings."""

    def test_all_orderings(self, tracks, constraints, medium):
        evaluations = list(evaluate_permutations(tracks, constraints, medium))

        assert len(evaluations) == 24
        assert len({e.tracklist for e in evaluations}) == 24
        assert max(e.score for e in evaluations) == 14

    def test_limit(self, tracks, constraints, medium):
        evaluations = list(evaluate_permutations(tracks, constraints, medium, limit=5))
        assert len(evaluations) == 5

    def test_zero_limit(self, tracks, constraints, medium):
        assert list(evaluate_permutations(tracks, constraints, medium, limit=0)) == []

    def test_parallel_matches_serial(self, tracks, constraints, medium):
        serial = list(evaluate_permutations(tracks, constraints, medium))
        parallel = list(
            evaluate_permutations(tracks, constraints, medium, max_workers=2, chunk_size=5)
        )

        assert [e.tracklist.titles() for e in parallel] == [e.tracklist.titles() for e in serial]
        assert [(e.fits, e.score, e.sides_used) for e in parallel] == [
            (e.fits, e.score, e.sides_used) for e in serial
        ]

    def test_parallel_with_limit(self, tracks, constraints, medium):
        parallel = list(
            evaluate_permutations(tracks, constraints, medium, limit=7, max_workers=2, chunk_size=3)
        )
        assert len(parallel) == 7

    def test_invalid_arguments_rejected_eagerly(self, tracks, constraints, medium):
        with pytest.raises(ValueError):
            evaluate_permutations(tracks, constraints, medium, limit=-1)
        with pytest.raises(ValueError):
            evaluate_permutations(tracks, constraints, medium, max_workers=0)
        with pytest.raises(ValueError):
            evaluate_permutations(tracks, constraints, medium, chunk_size=0)
