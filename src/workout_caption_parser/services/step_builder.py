"""
Flatten a WorkoutAST into ordered, typed steps (exercise | rest | header | time)
for the persistence layer.

Per block: a header step when the block is titled, then for each round the
sequence in order with standalone rests at their recorded positions, then
that round's inserts. Rest between rounds and between blocks become rest
steps of their own.
"""

from typing import List, Optional

from workout_caption_parser.models import Block, Movement, QuantityType, RestMarker, WorkoutAST, WorkoutStep


class _StepList:
    def __init__(self):
        self.steps: List[WorkoutStep] = []

    def add(self, **fields) -> None:
        self.steps.append(WorkoutStep(order=len(self.steps), **fields))


def _mode_hint(block: Block) -> Optional[str]:
    return block.mode.kind.value if block.mode is not None else None


def _movement_step(steps: _StepList, block: Block, label: str, r: int, mv: Movement) -> None:
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
    else:
        if block.interval is not None:
            duration = block.interval.work_seconds
        elif block.ladder_scheme and r <= len(block.ladder_scheme):
            reps = block.ladder_scheme[r - 1]

    steps.add(
        type="time" if duration is not None and reps is None else "exercise",
        raw=mv.raw_text,
        block=label,
        round=r,
        exercise=mv.canonical_name,
        sets=mv.sets,
        reps=reps,
        duration_seconds=duration,
        distance_m=distance,
        calories=calories,
        weight=mv.load.display() if mv.load else None,
        workout_type_hint=_mode_hint(block),
    )


def _rest_step(steps: _StepList, label: str, r: Optional[int], seconds: int, raw: str) -> None:
    steps.add(type="rest", raw=raw, block=label, round=r, duration_seconds=seconds)


def _markers_at(markers: List[RestMarker], position: int) -> List[RestMarker]:
    return [m for m in markers if m.position == position]


def build_workout_steps(ast: WorkoutAST) -> List[WorkoutStep]:
    steps = _StepList()
    last = len(ast.blocks) - 1
    for bi, block in enumerate(ast.blocks):
        label = block.label(bi)
        if block.title:
            steps.add(type="header", raw=block.title, block=label, workout_type_hint=_mode_hint(block))

        rounds = block.expansion_rounds
        for r in range(1, rounds + 1):
            for pos, mv in enumerate(block.sequence):
                for marker in _markers_at(block.rest_markers, pos):
                    _rest_step(steps, label, r, marker.seconds, marker.raw_text)
                _movement_step(steps, block, label, r, mv)
            for marker in _markers_at(block.rest_markers, len(block.sequence)):
                _rest_step(steps, label, r, marker.seconds, marker.raw_text)
            for insert in block.per_round_inserts:
                if r % insert.every == 0:
                    _movement_step(steps, block, label, r, insert.movement)
            if block.rest_between_rounds_seconds and r < rounds and block.sequence:
                _rest_step(steps, label, r, block.rest_between_rounds_seconds, "rest between rounds")

        if block.rest_between_blocks_seconds and bi < last and block.sequence:
            _rest_step(steps, label, None, block.rest_between_blocks_seconds, "rest between blocks")
    return steps.steps
