"""Build a work/rest interval timeline for timer playback."""

from typing import Optional

from workout_caption_parser.models import (
    Block,
    IntervalStep,
    IntervalTimeline,
    Movement,
    TimelineTotals,
    WorkoutAST,
)


def _work_seconds(block: Block, mv: Movement) -> Optional[int]:
    if block.interval is not None:
        return block.interval.work_seconds
    if mv.quantity is not None and mv.quantity.is_time:
        return mv.quantity.to_seconds()
    return None


def build_interval_timeline(ast: WorkoutAST) -> IntervalTimeline:
    """
    Emit a work phase for every timed movement occurrence, each followed by
    the block's interval rest when one is set. Zero-length phases are skipped.

    Example:
        6 movements, 40s work / 20s rest, 4 rounds
        -> 48 steps; work 960s, rest 480s, total 1440s
    """
    steps = []
    work_total = 0
    rest_total = 0
    for bi, block in enumerate(ast.blocks):
        label = block.label(bi)
        rest = block.interval.rest_seconds if block.interval is not None else 0
        for r in range(1, block.effective_rounds + 1):
            for i, mv in enumerate(block.sequence, start=1):
                work = _work_seconds(block, mv)
                if not work or work <= 0:
                    continue
                steps.append(IntervalStep(
                    round=r,
                    sequence_index=i,
                    block=label,
                    phase="work",
                    exercise_name=mv.canonical_name,
                    seconds=work,
                ))
                work_total += work
                if rest > 0:
                    steps.append(IntervalStep(
                        round=r,
                        sequence_index=i,
                        block=label,
                        phase="rest",
                        seconds=rest,
                    ))
                    rest_total += rest

    totals = TimelineTotals(
        work_seconds=work_total,
        rest_seconds=rest_total,
        total_seconds=work_total + rest_total,
    )
    return IntervalTimeline(steps=steps, totals=totals)
