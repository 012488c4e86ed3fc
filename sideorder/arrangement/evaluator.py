"""
Batch evaluation of permutations.

Streams every ordering of a track set through `fits` and `score_tracklist`
and yields one Evaluation per ordering, in generation order. Nothing is
ranked or pruned here; callers pick what they need from the stream.

Evaluations are independent, so with more than one worker the permutation
stream is cut into chunks and spread across a process pool.
"""

from concurrent.futures import Future, ProcessPoolExecutor
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, List, Optional, Sequence

import structlog

from sideorder.arrangement.permutations import generate_permutations
from sideorder.arrangement.scoring import score_tracklist
from sideorder.arrangement.sides import fits, sides_used
from sideorder.models.constraints import Constraint
from sideorder.models.medium import Medium
from sideorder.models.track import Track, Tracklist

logger = structlog.get_logger()


@dataclass(frozen=True)
class Evaluation:
    """Feasibility and score of one arrangement."""
    tracklist: Tracklist
    fits: bool
    score: int
    sides_used: int


def evaluate_arrangement(
    tracklist: Tracklist,
    constraints: Sequence[Constraint],
    medium: Medium
) -> Evaluation:
    """Evaluate one arrangement against a medium and a constraint set."""
    return Evaluation(
        tracklist=tracklist,
        fits=fits(tracklist, medium),
        score=score_tracklist(tracklist, constraints, medium),
        sides_used=sides_used(tracklist, medium),
    )


def _evaluate_chunk(
    chunk: List[Tracklist],
    constraints: Sequence[Constraint],
    medium: Medium
) -> List[Evaluation]:
    return [evaluate_arrangement(tracklist, constraints, medium) for tracklist in chunk]


def _chunks(tracklists: Iterator[Tracklist], chunk_size: int) -> Iterator[List[Tracklist]]:
    while True:
        chunk = list(islice(tracklists, chunk_size))
        if not chunk:
            return
        yield chunk


def evaluate_permutations(
    tracks: Sequence[Track],
    constraints: Sequence[Constraint],
    medium: Medium,
    limit: Optional[int] = None,
    max_workers: int = 1,
    chunk_size: int = 256
) -> Iterator[Evaluation]:
    """
    Evaluate orderings of `tracks` one after another.

    Args:
        tracks: Source tracks
        constraints: Constraints to score against
        medium: Target medium
        limit: Stop after this many orderings (None for all n!)
        max_workers: Worker processes; 1 evaluates in the calling process
        chunk_size: Orderings handed to a worker at a time

    Returns:
        Iterator of Evaluation in permutation order

    Raises:
        ValueError: If limit is negative, or max_workers or chunk_size is
            below 1
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    return _evaluate_stream(
        tracks, constraints, medium, limit, max_workers, chunk_size
    )


def _evaluate_stream(
    tracks: Sequence[Track],
    constraints: Sequence[Constraint],
    medium: Medium,
    limit: Optional[int],
    max_workers: int,
    chunk_size: int
) -> Iterator[Evaluation]:
    tracklists = islice(generate_permutations(tracks), limit)

    logger.info(
        "Starting permutation evaluation",
        track_count=len(tracks),
        constraint_count=len(constraints),
        sides=medium.sides,
        max_duration_per_side=medium.max_duration_per_side,
        limit=limit,
        max_workers=max_workers,
    )

    if max_workers == 1:
        for tracklist in tracklists:
            yield evaluate_arrangement(tracklist, constraints, medium)
        return

    yield from _evaluate_parallel(
        _chunks(tracklists, chunk_size), constraints, medium, max_workers
    )


def _evaluate_parallel(
    chunks: Iterator[List[Tracklist]],
    constraints: Sequence[Constraint],
    medium: Medium,
    max_workers: int
) -> Iterator[Evaluation]:
    # Keep a bounded window of chunks in flight so the n! stream is never
    # materialized, and collect them in submission order.
    window = max_workers * 2
    pending: List[Future] = []

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        for chunk in chunks:
            pending.append(executor.submit(_evaluate_chunk, chunk, constraints, medium))
            if len(pending) >= window:
                yield from _collect(pending.pop(0))

        while pending:
            yield from _collect(pending.pop(0))


def _collect(future: Future) -> List[Evaluation]:
    try:
        return future.result()
    except Exception as e:
        logger.error("Evaluation chunk failed", error=str(e))
        raise
