"""
Tests for job document validation and loading.
"""

import json

import pytest
from sideorder.jobs import ArrangementJob, JobError, load_job, parse_job
from sideorder.models import Adjacent, AtPosition, Medium, OnSameSide, Track, get_medium


def _job(**overrides):
    data = {
        "medium": {"sides": 2, "max_duration_per_side": 10},
        "tracks": [
            {"title": "Intro", "duration": 5},
            {"title": "First", "duration": "0:05"},
            {"title": "Second", "duration": 2},
            {"title": "Third", "duration": 2.0},
        ],
        "constraints": [
            {"kind": "at_position", "title": "Intro", "index": 0, "weight": 7},
            {"kind": "adjacent", "first": "First", "second": "Second", "weight": 5},
            {"kind": "on_same_side", "first": "Second", "second": "Third", "weight": 2},
        ],
    }
    data.update(overrides)
    return data


class TestParseJob:
    """Test conversion of valid documents into value objects."""

    def test_full_job(self):
        job = parse_job(_job())

        assert isinstance(job, ArrangementJob)
        assert job.to_tracks() == [
            Track("Intro", 5.0),
            Track("First", 5.0),
            Track("Second", 2.0),
            Track("Third", 2.0),
        ]
        assert job.to_medium() == Medium(sides=2, max_duration_per_side=10)
        assert job.to_constraints() == [
            AtPosition("Intro", 0, weight=7),
            Adjacent("First", "Second", weight=5),
            OnSameSide("Second", "Third", weight=2),
        ]

    def test_preset_medium(self):
        job = parse_job(_job(medium={"preset": "C90"}))
        assert job.to_medium() == get_medium("c90")

    def test_missing_medium_uses_default(self):
        data = _job()
        del data["medium"]
        job = parse_job(data)
        assert job.to_medium() == get_medium("lp")
        assert job.to_medium("c60") == get_medium("c60")

    def test_default_weight(self):
        job = parse_job(_job(constraints=[{"kind": "adjacent", "first": "A", "second": "B"}]))
        assert job.to_constraints() == [Adjacent("A", "B", weight=1)]

    def test_clock_capacity(self):
        job = parse_job(_job(medium={"sides": 4, "max_duration_per_side": "22:00"}))
        assert job.to_medium() == Medium(sides=4, max_duration_per_side=1320)


class TestJobValidation:
    """Ill-formed documents are rejected before reaching the core."""

    @pytest.mark.parametrize("medium", [
        {"sides": 0, "max_duration_per_side": 10},
        {"sides": 2, "max_duration_per_side": -1},
        {"sides": 2},
        {"preset": "lp", "sides": 2},
        {"preset": "wax_cylinder"},
    ])
    def test_invalid_medium(self, medium):
        with pytest.raises(JobError):
            parse_job(_job(medium=medium))

    @pytest.mark.parametrize("track", [
        {"title": "", "duration": 5},
        {"title": "A", "duration": -5},
        {"title": "A", "duration": "4:75"},
        {"title": "A", "duration": "soon"},
        {"title": "A"},
    ])
    def test_invalid_track(self, track):
        with pytest.raises(JobError):
            parse_job(_job(tracks=[track]))

    @pytest.mark.parametrize("constraint", [
        {"kind": "at_position", "title": "A", "index": 0, "weight": -1},
        {"kind": "at_position", "title": "A", "index": -1},
        {"kind": "before", "first": "A", "second": "B"},
        {"kind": "adjacent", "first": "A"},
    ])
    def test_invalid_constraint(self, constraint):
        with pytest.raises(JobError):
            parse_job(_job(constraints=[constraint]))

    def test_unknown_field(self):
        with pytest.raises(JobError):
            parse_job(_job(tempo=120))

    def test_job_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_job({})


class TestLoadJob:
    """Test reading job files from disk."""

    def test_load(self, tmp_path):
        path = tmp_path / "job.json"
        path.write_text(json.dumps(_job()), encoding="utf-8")

        job = load_job(path)

        assert len(job.to_tracks()) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(JobError) as exc_info:
            load_job(tmp_path / "missing.json")
        assert exc_info.value.source.endswith("missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "job.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(JobError, match="Invalid JSON"):
            load_job(path)
