"""
Compact workout summary.

Groups expanded occurrences by movement name into set-like summaries
(sets = occurrences x per-movement sets) for a simplified downstream schema.
"""

from typing import Dict, Iterable, List, Optional

from workout_caption_parser.models import (
    Block,
    CompactWorkout,
    ExerciseSummary,
    ModeKind,
    QuantityType,
    WorkoutAST,
)
from workout_caption_parser.parsers.confidence import confidence_breakdown
from workout_caption_parser.services.row_expander import iter_occurrences

DEFAULT_TITLE = "Imported Workout"
CAPTION_EXCERPT_CHARS = 280


def _dedupe(values: Iterable[Optional[str]]) -> List[str]:
    out: List[str] = []
    for value in values:
        if value and value not in out:
            out.append(value)
    return out


def _block_duration(block: Block) -> Optional[int]:
    """Planned length of one block in seconds, when its structure states one."""
    mode = block.mode
    if mode is not None and mode.window_seconds:
        if mode.kind == ModeKind.AMRAP:
            return mode.window_seconds
        return mode.window_seconds * block.effective_rounds
    if block.interval is not None and block.sequence:
        per_round = (block.interval.work_seconds + block.interval.rest_seconds) * len(block.sequence)
        return per_round * block.effective_rounds
    return None


def estimate_total_seconds(ast: WorkoutAST) -> Optional[int]:
    """Time cap when given, else the sum of planned block lengths plus rest between blocks."""
    if ast.cap_seconds:
        return ast.cap_seconds
    working = [b for b in ast.blocks if b.sequence]
    total = 0
    for i, block in enumerate(working):
        duration = _block_duration(block)
        if duration is None:
            return None
        total += duration
        if i < len(working) - 1 and block.rest_between_blocks_seconds:
            total += block.rest_between_blocks_seconds
    return total or None


def summarize_exercises(ast: WorkoutAST) -> List[ExerciseSummary]:
    summaries: Dict[str, ExerciseSummary] = {}
    counts: Dict[str, int] = {}
    for occ in iter_occurrences(ast):
        mv = occ.movement
        name = mv.canonical_name
        counts[name] = counts.get(name, 0) + (mv.sets or 1)
        if name in summaries:
            continue

        q = mv.quantity
        reps = duration = distance = calories = None
        if q is not None:
            if q.type == QuantityType.REPS:
                reps = int(q.value)
            elif q.is_time:
                duration = q.to_seconds()
            elif q.type == QuantityType.METERS:
                distance = int(q.value)
            elif q.type == QuantityType.CALORIES:
                calories = int(q.value)
        elif occ.block.interval is not None:
            duration = occ.block.interval.work_seconds
        elif occ.ladder_reps is not None:
            reps = occ.ladder_reps

        interval = occ.block.interval
        notes = " ".join(p for p in (mv.load.display() if mv.load else None, mv.notes) if p)
        summaries[name] = ExerciseSummary(
            name=name,
            reps=reps,
            duration_seconds=duration,
            distance_m=distance,
            calories=calories,
            rest_seconds=interval.rest_seconds if interval is not None else occ.block.rest_between_rounds_seconds,
            notes=notes or None,
        )

    return [s.model_copy(update={"sets": counts[name]}) for name, s in summaries.items()]


def build_compact_workout(ast: WorkoutAST, text: Optional[str] = None) -> CompactWorkout:
    movements = ast.movements()
    tags = _dedupe(
        [b.mode.kind.value for b in ast.blocks if b.mode is not None]
        + [tag for mv in movements for tag in mv.body_part_tags]
        + [ast.scoring]
    )
    excerpt = None
    if text:
        excerpt = text.strip()[:CAPTION_EXCERPT_CHARS] or None

    return CompactWorkout(
        title=ast.title or DEFAULT_TITLE,
        exercises=summarize_exercises(ast),
        total_time_seconds=estimate_total_seconds(ast),
        equipment=_dedupe(tag for mv in movements for tag in mv.equipment_tags),
        tags=tags,
        provenance=ast.provenance,
        caption_excerpt=excerpt,
        parse_notes="; ".join(ast.notes) or None,
        confidence=confidence_breakdown(ast.blocks, ast.confidence, ast.scaling),
    )
