"""
Main entry point for sideorder

Loads an arrangement job, evaluates its permutations against the medium
and constraints, and logs what it found along with the best feasible
arrangement.
"""

import argparse
import signal
import sys
from typing import Any, Dict, Iterable, List, Optional, Sequence

import structlog
from pydantic import ValidationError

from sideorder.arrangement.evaluator import Evaluation, evaluate_permutations
from sideorder.arrangement.permutations import TracklistPermutations
from sideorder.arrangement.scoring import max_score, unsatisfied_constraints
from sideorder.arrangement.sides import side_durations
from sideorder.config import get_settings
from sideorder.jobs import JobError, load_job
from sideorder.models.constraints import Constraint
from sideorder.models.medium import Medium
from sideorder.utils.durations import format_duration
from sideorder.utils.logging import setup_logging

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_INVALID_JOB = 2
EXIT_INVALID_CONFIG = 3


def signal_handler(signum, frame):
    """Stop on SIGINT/SIGTERM with the conventional 128 + signal exit code"""
    logger.info("Shutdown signal received", signal=signum)
    sys.exit(128 + signum)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sideorder",
        description="Evaluate every track order of a job against a medium and weighted constraints",
    )
    parser.add_argument(
        "job",
        help="Path to a JSON job file with tracks, medium and constraints",
    )
    return parser


def summarize_evaluations(
    evaluations: Iterable[Evaluation],
    constraints: Sequence[Constraint],
    medium: Medium
) -> Dict[str, Any]:
    """
    Consume an evaluation stream and describe the best feasible arrangement.

    The first feasible arrangement reaching the highest score wins ties.

    Args:
        evaluations: Evaluations in permutation order
        constraints: Constraints the evaluations were scored against
        medium: Medium the evaluations were checked against

    Returns:
        Dict with counts, the best score and, when any arrangement fits,
        its order, per-side durations and the constraints it misses
    """
    evaluated = 0
    feasible = 0
    best: Optional[Evaluation] = None

    for evaluation in evaluations:
        evaluated += 1
        if not evaluation.fits:
            continue
        feasible += 1
        if best is None or evaluation.score > best.score:
            best = evaluation
        logger.debug(
            "Feasible arrangement",
            order=evaluation.tracklist.titles(),
            score=evaluation.score,
            sides_used=evaluation.sides_used,
        )

    summary: Dict[str, Any] = {
        "evaluated": evaluated,
        "feasible": feasible,
        "highest_score": None,
        "max_score": max_score(constraints),
        "best_order": None,
        "best_sides": None,
        "unsatisfied": None,
    }
    if best is not None:
        summary.update(
            highest_score=best.score,
            best_order=best.tracklist.titles(),
            best_sides=[
                format_duration(total)
                for total in side_durations(best.tracklist, medium)
            ],
            unsatisfied=[
                repr(constraint)
                for constraint in unsatisfied_constraints(best.tracklist, constraints, medium)
            ],
        )
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    """Evaluate the job file named on the command line"""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.error("Invalid configuration", error=str(e))
        return EXIT_INVALID_CONFIG

    setup_logging(settings.log_level, settings.log_file)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        job = load_job(args.job)
    except JobError as e:
        logger.error("Cannot load job", error=str(e))
        return EXIT_INVALID_JOB

    tracks = job.to_tracks()
    medium = job.to_medium(settings.default_medium)
    constraints = job.to_constraints()
    total = len(TracklistPermutations(tracks))

    if total > settings.max_permutations:
        logger.warning(
            "Permutation count exceeds limit, evaluating a prefix",
            permutations=total,
            limit=settings.max_permutations,
        )

    summary = summarize_evaluations(
        evaluate_permutations(
            tracks,
            constraints,
            medium,
            limit=settings.max_permutations,
            max_workers=settings.worker_count,
            chunk_size=settings.chunk_size,
        ),
        constraints,
        medium,
    )

    if summary["best_order"] is None:
        logger.warning("No evaluated arrangement fits the medium", evaluated=summary["evaluated"])

    logger.info(
        "Evaluation finished",
        **summary,
        total_duration=format_duration(sum(track.duration for track in tracks)),
        capacity=format_duration(medium.capacity()),
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
