"""
Confidence scoring for parsed captions.

    confidence = min(1, 0.3 + 0.2*has_mode + 0.1*has_rounds
                        + 0.3*glossary_hit_ratio + min(0.1, 0.01*movement_count))

A triage signal for the review UI, not a correctness guarantee. It is
monotonic in each input.
"""

from typing import Optional, Sequence

from workout_caption_parser.models import Block, ConfidenceBreakdown, Scaling

BASE_SCORE = 0.3
MODE_WEIGHT = 0.2
ROUNDS_WEIGHT = 0.1
GLOSSARY_WEIGHT = 0.3
MOVEMENT_WEIGHT = 0.01
MOVEMENT_CAP = 0.1


def glossary_hit_ratio(blocks: Sequence[Block]) -> float:
    movements = [mv for block in blocks for mv in block.sequence]
    hits = sum(1 for mv in movements if mv.glossary_hit)
    return hits / max(len(movements), 1)


def score_confidence(blocks: Sequence[Block]) -> float:
    movement_count = sum(len(block.sequence) for block in blocks)
    has_mode = any(block.mode is not None for block in blocks)
    has_rounds = any(block.rounds or (block.mode is not None and block.mode.rounds) for block in blocks)

    score = (
        BASE_SCORE
        + (MODE_WEIGHT if has_mode else 0)
        + (ROUNDS_WEIGHT if has_rounds else 0)
        + GLOSSARY_WEIGHT * glossary_hit_ratio(blocks)
        + min(MOVEMENT_CAP, MOVEMENT_WEIGHT * movement_count)
    )
    return round(min(1.0, score), 4)


def confidence_breakdown(
    blocks: Sequence[Block],
    overall: float,
    scaling: Optional[Scaling] = None,
) -> ConfidenceBreakdown:
    """Per-field confidence for the compact summary."""
    movements = [mv for block in blocks for mv in block.sequence]
    structured = [b for b in blocks if b.sequence]
    if structured:
        structure = sum(1 for b in structured if b.mode is not None or b.rounds) / len(structured)
    else:
        structure = 0.0
    return ConfidenceBreakdown(
        overall=overall,
        movements=round(glossary_hit_ratio(blocks), 4) if movements else 0.0,
        structure=round(structure, 4),
        scaling=1.0 if scaling is not None else 0.0,
    )
