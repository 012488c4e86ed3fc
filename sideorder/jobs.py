"""
Arrangement job documents.

A job is a JSON document holding the tracks, the target medium and the
constraints. Everything the evaluation core assumes about its inputs
(non-empty titles, non-negative durations and weights, at least one side)
is checked here, so the core never sees ill-formed data.
"""

import json
from pathlib import Path
from typing import Annotated, Any, List, Literal, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from sideorder.models.constraints import Adjacent, AtPosition, Constraint, OnSameSide
from sideorder.models.medium import Medium, get_medium
from sideorder.models.track import Track
from sideorder.utils.durations import parse_duration

logger = structlog.get_logger()


class JobError(ValueError):
    """Raised when a job document cannot be read or fails validation."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")


class TrackSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    duration: float = Field(ge=0)

    @field_validator("duration", mode="before")
    @classmethod
    def parse_clock_duration(cls, value: Any) -> Any:
        """Accept "m:ss" and "h:mm:ss" strings as well as seconds."""
        if isinstance(value, str):
            return parse_duration(value)
        return value

    def to_track(self) -> Track:
        return Track(title=self.title, duration=self.duration)


class MediumSchema(BaseModel):
    """Either a preset name or an explicit side count and capacity."""
    model_config = ConfigDict(extra="forbid")

    preset: Optional[str] = None
    sides: Optional[int] = Field(default=None, ge=1)
    max_duration_per_side: Optional[float] = Field(default=None, ge=0)

    @field_validator("max_duration_per_side", mode="before")
    @classmethod
    def parse_clock_duration(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_duration(value)
        return value

    @model_validator(mode="after")
    def check_complete(self) -> "MediumSchema":
        explicit = (self.sides, self.max_duration_per_side)
        if self.preset is not None:
            if any(v is not None for v in explicit):
                raise ValueError("Give either 'preset' or 'sides' and 'max_duration_per_side', not both")
            get_medium(self.preset)
        elif any(v is None for v in explicit):
            raise ValueError("'sides' and 'max_duration_per_side' are both required without a preset")
        return self

    def to_medium(self) -> Medium:
        if self.preset is not None:
            return get_medium(self.preset)
        return Medium(sides=self.sides, max_duration_per_side=self.max_duration_per_side)


class AtPositionSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["at_position"]
    title: str = Field(min_length=1)
    index: int = Field(ge=0)
    weight: int = Field(default=1, ge=0)

    def to_constraint(self) -> Constraint:
        return AtPosition(title=self.title, index=self.index, weight=self.weight)


class AdjacentSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["adjacent"]
    first: str = Field(min_length=1)
    second: str = Field(min_length=1)
    weight: int = Field(default=1, ge=0)

    def to_constraint(self) -> Constraint:
        return Adjacent(first=self.first, second=self.second, weight=self.weight)


class OnSameSideSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["on_same_side"]
    first: str = Field(min_length=1)
    second: str = Field(min_length=1)
    weight: int = Field(default=1, ge=0)

    def to_constraint(self) -> Constraint:
        return OnSameSide(first=self.first, second=self.second, weight=self.weight)


ConstraintSchema = Annotated[
    Union[AtPositionSchema, AdjacentSchema, OnSameSideSchema],
    Field(discriminator="kind"),
]


class ArrangementJob(BaseModel):
    """A validated job: tracks, an optional medium and constraints."""
    model_config = ConfigDict(extra="forbid")

    tracks: List[TrackSchema]
    medium: Optional[MediumSchema] = None
    constraints: List[ConstraintSchema] = Field(default_factory=list)

    def to_tracks(self) -> List[Track]:
        return [item.to_track() for item in self.tracks]

    def to_medium(self, default_preset: str = "lp") -> Medium:
        if self.medium is None:
            return get_medium(default_preset)
        return self.medium.to_medium()

    def to_constraints(self) -> List[Constraint]:
        return [item.to_constraint() for item in self.constraints]


def parse_job(data: Any, source: Optional[str] = None) -> ArrangementJob:
    """
    Validate an already-decoded job document.

    Args:
        data: Decoded JSON document
        source: Where the document came from, used in error messages

    Returns:
        Validated ArrangementJob

    Raises:
        JobError: If the document fails validation
    """
    try:
        return ArrangementJob.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid job document", source=source, errors=e.error_count())
        raise JobError(str(e), source=source) from e


def load_job(path: Union[str, Path]) -> ArrangementJob:
    """
    Read and validate a JSON job file.

    Raises:
        JobError: If the file cannot be read, is not JSON, or fails validation
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise JobError(f"Cannot read job file: {e.strerror}", source=str(path)) from e
    except json.JSONDecodeError as e:
        raise JobError(f"Invalid JSON: {e}", source=str(path)) from e

    job = parse_job(data, source=str(path))
    logger.info(
        "Job loaded",
        source=str(path),
        track_count=len(job.tracks),
        constraint_count=len(job.constraints),
    )
    return job
