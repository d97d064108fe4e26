"""Data models for parsed workout captions.

The AST models are frozen once built; rows, steps and timelines are derived
views that can be recomputed from the AST at any time.
"""
from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from workout_caption_parser.utils import format_number

Platform = Literal["instagram", "tiktok", "youtube", "facebook", "unknown"]
Scoring = Literal["time", "rounds", "reps"]
StepType = Literal["exercise", "rest", "header", "time"]


class QuantityType(str, Enum):
    """Unit a movement is measured in. Exactly one per quantity."""
    REPS = "reps"
    METERS = "meters"
    CALORIES = "calories"
    SECONDS = "seconds"
    MINUTES = "minutes"


QUANTITY_LABELS = {
    QuantityType.REPS: "reps",
    QuantityType.METERS: "m",
    QuantityType.CALORIES: "cal",
    QuantityType.SECONDS: "sec",
    QuantityType.MINUTES: "min",
}


class Quantity(BaseModel):
    """Reps, distance, calorie or time measure attached to a movement."""
    model_config = ConfigDict(frozen=True)

    type: QuantityType
    value: Union[int, float] = Field(..., ge=0)

    @property
    def is_time(self) -> bool:
        return self.type in (QuantityType.SECONDS, QuantityType.MINUTES)

    def to_seconds(self) -> Optional[int]:
        """Duration in seconds for time quantities, None otherwise."""
        if self.type == QuantityType.SECONDS:
            return int(self.value)
        if self.type == QuantityType.MINUTES:
            return int(round(self.value * 60))
        return None

    def display(self) -> str:
        return f"{format_number(self.value)} {QUANTITY_LABELS[self.type]}"


class Implement(str, Enum):
    """Known load implements. Unknown implements are kept as plain strings."""
    DUMBBELL = "DB"
    KETTLEBELL = "KB"
    BARBELL = "BB"
    SANDBAG = "SB"
    MEDICINE_BALL = "MB"
    BODYWEIGHT = "bodyweight"


class Load(BaseModel):
    """Resistance attached to a movement, e.g. "2x 50lb DB" or "24 inch box"."""
    model_config = ConfigDict(frozen=True)

    paired_count: Optional[int] = Field(default=None, ge=1, description="Number of implements, e.g. 2 in '2x 50lb'")
    amount: Optional[Union[int, float]] = Field(default=None, gt=0)
    unit: Optional[Literal["kg", "lb"]] = None
    implement: Optional[str] = Field(default=None, description="Implement value or free string")
    freeform: Optional[str] = Field(default=None, description="Load text kept verbatim when it can't be parsed")

    @model_validator(mode="after")
    def _check_fields(self) -> "Load":
        if (self.amount is None) != (self.unit is None):
            raise ValueError("amount and unit must be given together")
        if self.paired_count is not None and self.amount is None:
            raise ValueError("paired_count requires an amount")
        if self.amount is None and not self.implement and not self.freeform:
            raise ValueError("load has no content")
        return self

    def display(self) -> str:
        head = ""
        if self.amount is not None:
            head = f"{format_number(self.amount)}{self.unit}"
            if self.paired_count:
                head = f"{self.paired_count}x {head}"
        parts = [p for p in (head, self.implement) if p]
        if not head and self.freeform:
            return self.freeform
        return " ".join(parts).strip()


class Movement(BaseModel):
    """One canonicalized exercise occurrence."""
    model_config = ConfigDict(frozen=True)

    canonical_name: str = Field(..., min_length=1)
    raw_text: str
    quantity: Optional[Quantity] = None
    sets: Optional[int] = Field(default=None, ge=1, description="Sets from '3x10' notation")
    load: Optional[Load] = None
    equipment_tags: List[str] = Field(default_factory=list)
    body_part_tags: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    glossary_hit: bool = False


class ModeKind(str, Enum):
    """Structural training format of a block."""
    AMRAP = "AMRAP"
    EMOM = "EMOM"
    E_N_MOM = "E#MOM"
    FOR_TIME = "ForTime"
    FIXED_ROUNDS = "FixedRounds"
    COMPLEX = "Complex"
    LADDER = "Ladder"
    SUPERSET = "Superset"
    CIRCUIT = "Circuit"
    INTERVALS = "Intervals"


# Kinds for which a time window is meaningful
_WINDOWED_KINDS = {ModeKind.AMRAP, ModeKind.EMOM, ModeKind.E_N_MOM}


class Mode(BaseModel):
    """
    Structural mode of a block.

    window_seconds is the per-round window for EMOM-family modes and the
    total duration for AMRAP. E#MOM always carries both window and rounds.
    """
    model_config = ConfigDict(frozen=True)

    kind: ModeKind
    window_seconds: Optional[int] = Field(default=None, gt=0)
    rounds: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_parameters(self) -> "Mode":
        if self.kind == ModeKind.E_N_MOM and (self.window_seconds is None or self.rounds is None):
            raise ValueError("E#MOM requires window_seconds and rounds")
        if self.window_seconds is not None and self.kind not in _WINDOWED_KINDS:
            raise ValueError(f"{self.kind.value} does not take a time window")
        return self


class PerRoundInsert(BaseModel):
    """Movement added every N rounds on top of the base sequence."""
    model_config = ConfigDict(frozen=True)

    every: int = Field(..., ge=1)
    movement: Movement


class IntervalSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    work_seconds: int = Field(..., gt=0)
    rest_seconds: int = Field(default=0, ge=0)


class RestMarker(BaseModel):
    """Standalone rest line; position is the number of movements before it."""
    model_config = ConfigDict(frozen=True)

    position: int = Field(..., ge=0)
    seconds: int = Field(..., gt=0)
    raw_text: str


class Block(BaseModel):
    """A contiguous section of a workout sharing one mode and round count."""
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    mode: Optional[Mode] = None
    rounds: Optional[int] = Field(default=None, ge=1)
    ladder_scheme: Optional[List[int]] = None
    rest_between_blocks_seconds: Optional[int] = Field(default=None, ge=0)
    rest_between_rounds_seconds: Optional[int] = Field(default=None, ge=0)
    per_round_inserts: List[PerRoundInsert] = Field(default_factory=list)
    interval: Optional[IntervalSpec] = None
    rest_markers: List[RestMarker] = Field(default_factory=list)
    sequence: List[Movement] = Field(default_factory=list)

    @property
    def effective_rounds(self) -> int:
        if self.mode is not None and self.mode.rounds:
            return self.mode.rounds
        return self.rounds or 1

    @property
    def expansion_rounds(self) -> int:
        """Round count used for row expansion; a ladder wins over plain rounds."""
        if self.ladder_scheme:
            return len(self.ladder_scheme)
        return self.effective_rounds

    def label(self, index: int) -> str:
        return self.title or f"Block {index + 1}"


class ScalingSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    load: Optional[str] = None
    box: Optional[str] = None


class Scaling(BaseModel):
    model_config = ConfigDict(frozen=True)

    male: Optional[ScalingSpec] = None
    female: Optional[ScalingSpec] = None


class Provenance(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    platform: Optional[Platform] = None
    source_url: Optional[str] = Field(default=None, max_length=2048)


class WorkoutAST(BaseModel):
    """Parsed workout. blocks always holds at least one block."""
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    blocks: List[Block] = Field(..., min_length=1)
    scoring: Optional[Scoring] = None
    cap_seconds: Optional[int] = Field(default=None, ge=0)
    scaling: Optional[Scaling] = None
    notes: List[str] = Field(default_factory=list)
    provenance: Provenance = Field(default_factory=Provenance)
    glossary_hits: List[str] = Field(default_factory=list)
    unresolved_terms: List[str] = Field(default_factory=list)
    confidence: float = Field(default=0, ge=0, le=1)

    def movements(self) -> List[Movement]:
        return [mv for block in self.blocks for mv in block.sequence]


class WorkoutRow(BaseModel):
    """One (block, round, movement) occurrence for the review table."""
    block: str
    round: int = Field(..., ge=1)
    movement: str
    quantity_text: str = ""
    load_text: Optional[str] = None
    notes: Optional[str] = None
    raw_text: str = ""
    sets: Optional[int] = None
    step_type: Literal["exercise"] = "exercise"


class IntervalStep(BaseModel):
    """One work or rest phase for timer playback."""
    round: int = Field(..., ge=1)
    sequence_index: int = Field(..., ge=1)
    block: str
    phase: Literal["work", "rest"]
    exercise_name: Optional[str] = None
    seconds: int = Field(..., gt=0)


class TimelineTotals(BaseModel):
    work_seconds: int = 0
    rest_seconds: int = 0
    total_seconds: int = 0


class IntervalTimeline(BaseModel):
    steps: List[IntervalStep] = Field(default_factory=list)
    totals: TimelineTotals = Field(default_factory=TimelineTotals)


class WorkoutStep(BaseModel):
    """Ordered, typed step handed to the persistence layer."""
    order: int = Field(..., ge=0)
    type: StepType
    raw: str
    block: str
    round: Optional[int] = None
    exercise: Optional[str] = None
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration_seconds: Optional[int] = None
    distance_m: Optional[int] = None
    calories: Optional[int] = None
    weight: Optional[str] = None
    workout_type_hint: Optional[str] = None


class ExerciseSummary(BaseModel):
    """Rows for one movement name collapsed into a set-like summary."""
    name: str
    sets: int = Field(default=1, ge=1)
    reps: Optional[int] = None
    duration_seconds: Optional[int] = None
    distance_m: Optional[int] = None
    calories: Optional[int] = None
    rest_seconds: Optional[int] = None
    notes: Optional[str] = None


class ConfidenceBreakdown(BaseModel):
    overall: float = Field(default=0, ge=0, le=1)
    movements: float = Field(default=0, ge=0, le=1)
    structure: float = Field(default=0, ge=0, le=1)
    scaling: float = Field(default=0, ge=0, le=1)


class CompactWorkout(BaseModel):
    """Simplified downstream schema built from rows."""
    title: str = "Imported Workout"
    exercises: List[ExerciseSummary] = Field(default_factory=list)
    total_time_seconds: Optional[int] = None
    equipment: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    provenance: Provenance = Field(default_factory=Provenance)
    caption_excerpt: Optional[str] = None
    parse_notes: Optional[str] = None
    confidence: ConfidenceBreakdown = Field(default_factory=ConfidenceBreakdown)


class CaptionParseResult(BaseModel):
    """Everything one parse call produces."""
    ast: WorkoutAST
    rows: List[WorkoutRow] = Field(default_factory=list)
    steps: List[WorkoutStep] = Field(default_factory=list)
    summary: CompactWorkout
