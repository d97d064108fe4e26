"""Expand a WorkoutAST into per-round rows for the review table."""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from workout_caption_parser.models import Block, Movement, WorkoutAST, WorkoutRow


@dataclass(frozen=True)
class Occurrence:
    """One movement performed in one round of one block."""
    block_index: int
    block: Block
    round: int
    movement: Movement
    is_insert: bool = False

    @property
    def block_label(self) -> str:
        return self.block.label(self.block_index)

    @property
    def ladder_reps(self) -> Optional[int]:
        scheme = self.block.ladder_scheme
        if scheme and self.round <= len(scheme):
            return scheme[self.round - 1]
        return None


def iter_occurrences(ast: WorkoutAST) -> Iterator[Occurrence]:
    """Round-major, sequence-minor; a round's inserts follow its sequence."""
    for bi, block in enumerate(ast.blocks):
        for r in range(1, block.expansion_rounds + 1):
            for mv in block.sequence:
                yield Occurrence(bi, block, r, mv)
            for insert in block.per_round_inserts:
                if r % insert.every == 0:
                    yield Occurrence(bi, block, r, insert.movement, is_insert=True)


def quantity_text(occurrence: Occurrence) -> str:
    """Quantity display: own quantity, else interval work time, else ladder reps."""
    mv = occurrence.movement
    if mv.quantity is not None:
        return mv.quantity.display()
    interval = occurrence.block.interval
    if interval is not None:
        return f"{interval.work_seconds} sec"
    if occurrence.ladder_reps is not None:
        return f"{occurrence.ladder_reps} reps"
    return ""


def expand_rows(ast: WorkoutAST) -> List[WorkoutRow]:
    """
    One row per (block, round, movement), plus insert rows on rounds
    divisible by the insert frequency. Pure function of the AST.
    """
    rows = []
    for occ in iter_occurrences(ast):
        mv = occ.movement
        rows.append(WorkoutRow(
            block=occ.block_label,
            round=occ.round,
            movement=mv.canonical_name,
            quantity_text=quantity_text(occ),
            load_text=mv.load.display() if mv.load else None,
            notes=mv.notes,
            raw_text=mv.raw_text,
            sets=mv.sets,
        ))
    return rows
