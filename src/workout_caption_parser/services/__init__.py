from .caption_parser import (
    CaptionParserError,
    CaptionTooLongError,
    InvalidProvenanceError,
    infer_platform,
    parse_caption,
    parse_workout_ast,
)
from .exercise_summary import build_compact_workout
from .row_expander import expand_rows
from .step_builder import build_workout_steps
from .timeline_builder import build_interval_timeline

__all__ = [
    "CaptionParserError",
    "CaptionTooLongError",
    "InvalidProvenanceError",
    "build_compact_workout",
    "build_interval_timeline",
    "build_workout_steps",
    "expand_rows",
    "infer_platform",
    "parse_caption",
    "parse_workout_ast",
]
