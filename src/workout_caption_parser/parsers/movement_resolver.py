"""
Movement Resolver

Turns a movement-name candidate into a canonical name plus equipment and
body-part tags, and assembles full Movement records from cleaned lines.

Resolution order:
1. Exact glossary lookup on the normalized name
2. Quantity heuristics: a distance, calorie or time quantity on a
   row/ski/bike/run word means the machine or the run, not a strength lift
3. KB/DB shorthand expansion, then a second glossary lookup
4. The cleaned raw text as-is
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from workout_caption_parser.glossary import ExerciseRecord, ReferenceIndex, get_reference_index
from workout_caption_parser.models import Load, Movement, Quantity, QuantityType
from workout_caption_parser.parsers.extractors import extract_load, extract_quantity, strip_load_text

logger = logging.getLogger(__name__)

# Name used for lines that only describe a load ("Using a 48kg KB")
LOAD_SPEC_NAME = "Load Spec"

_MACHINE_QUANTITIES = {
    QuantityType.METERS,
    QuantityType.CALORIES,
    QuantityType.MINUTES,
    QuantityType.SECONDS,
}
_MACHINE_HEURISTICS: Tuple[Tuple[re.Pattern, str, Tuple[str, ...]], ...] = (
    (re.compile(r"\b(?:row|rower|rowing)\b"), "Row", ("Rower",)),
    (re.compile(r"\bski\b"), "SkiErg", ("SkiErg",)),
    (re.compile(r"\b(?:bike|echo|assault)\b"), "Bike", ("Bike",)),
    (re.compile(r"\b(?:run|treadmill)\b"), "Run", ()),
)
_SHORTHANDS = (
    (re.compile(r"\bkbs?\b", re.IGNORECASE), "Kettlebell"),
    (re.compile(r"\bdbs?\b", re.IGNORECASE), "Dumbbell"),
)

# Bare cardio/time words stand as movements even without a quantity
_BARE_MOVEMENT_WORDS = re.compile(r"\b(?:run|row|ski|bike|plank|hold)\b", re.IGNORECASE)
_PARENTHETICAL = re.compile(r"\s*\(([^)]*)\)\s*")
_LOAD_FILLER_WORDS = re.compile(r"^(?:using|use|with|at)\b\s*(?:an?\b)?\s*", re.IGNORECASE)


@dataclass(frozen=True)
class ResolvedName:
    name: str
    equipment_tags: Tuple[str, ...] = ()
    body_part_tags: Tuple[str, ...] = ()
    glossary_hit: bool = False


def _dedupe(values) -> Tuple[str, ...]:
    seen: List[str] = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return tuple(seen)


def _from_record(record: ExerciseRecord, index: ReferenceIndex) -> ResolvedName:
    equipment = ()
    if record.equipment:
        equipment = (index.lookup_equipment(record.equipment) or record.equipment,)
    body_parts = _dedupe(index.lookup_body_part(group) for group in record.muscle_groups)
    return ResolvedName(
        name=record.name,
        equipment_tags=equipment,
        body_part_tags=body_parts,
        glossary_hit=True,
    )


def resolve_movement_name(
    raw: str,
    quantity: Optional[Quantity] = None,
    index: Optional[ReferenceIndex] = None,
) -> ResolvedName:
    """Resolve a name candidate. Unknown names fall back to the trimmed raw text."""
    index = index or get_reference_index()
    raw = (raw or "").strip()
    key = raw.lower()

    record = index.lookup_exercise(raw)
    if record:
        return _from_record(record, index)

    if quantity is not None and quantity.type in _MACHINE_QUANTITIES:
        for pattern, name, equipment in _MACHINE_HEURISTICS:
            if pattern.search(key):
                record = index.lookup_exercise(name)
                body_parts = ()
                if record:
                    body_parts = _dedupe(index.lookup_body_part(group) for group in record.muscle_groups)
                return ResolvedName(
                    name=name,
                    equipment_tags=equipment,
                    body_part_tags=body_parts,
                    glossary_hit=record is not None,
                )

    for pattern, expansion in _SHORTHANDS:
        if pattern.search(raw):
            expanded = pattern.sub(expansion, raw).strip()
            record = index.lookup_exercise(expanded)
            if record:
                return _from_record(record, index)
            equipment = index.lookup_equipment(expansion)
            return ResolvedName(name=expanded, equipment_tags=(equipment,) if equipment else ())

    return ResolvedName(name=raw)


def _split_notes(name: str) -> Tuple[str, Optional[str]]:
    """'Thrusters (heavy)' -> ('Thrusters', 'heavy')."""
    notes = [m.group(1).strip() for m in _PARENTHETICAL.finditer(name) if m.group(1).strip()]
    cleaned = _PARENTHETICAL.sub(" ", name).strip()
    if not cleaned:
        return name.strip(), None
    return cleaned, "; ".join(notes) or None


def _make_movement(
    name_text: str,
    raw_text: str,
    quantity: Optional[Quantity],
    sets: Optional[int],
    load: Optional[Load],
    index: ReferenceIndex,
) -> Optional[Movement]:
    name_text, notes = _split_notes(strip_load_text(name_text) or name_text)
    if not name_text:
        return None
    resolved = resolve_movement_name(name_text, quantity, index)
    if not resolved.name:
        return None
    return Movement(
        canonical_name=resolved.name,
        raw_text=raw_text,
        quantity=quantity,
        sets=sets,
        load=load,
        equipment_tags=list(resolved.equipment_tags),
        body_part_tags=list(resolved.body_part_tags),
        notes=notes,
        glossary_hit=resolved.glossary_hit,
    )


def build_movement(display: str, index: Optional[ReferenceIndex] = None) -> Optional[Movement]:
    """
    Build a Movement from one cleaned line (original case).

    Quantity grammars run first; a line without a quantity is tried as a
    load-only line, then as a bare movement name. Returns None when the
    line holds nothing usable.
    """
    index = index or get_reference_index()
    display = (display or "").strip()
    if not display:
        return None

    load = extract_load(display)
    match = extract_quantity(display)
    if match is None and load is not None:
        # "Back Squat 3x5 @ 225lb": the load hides the trailing sets x reps
        match = extract_quantity(strip_load_text(display))
    if match is not None:
        return _make_movement(match.tail, display, match.quantity, match.sets, load, index)

    if load is not None:
        for keep_object in (False, True):
            remainder = _LOAD_FILLER_WORDS.sub("", strip_load_text(display, keep_object=keep_object))
            resolved = resolve_movement_name(remainder, None, index) if remainder else None
            if resolved is not None and resolved.glossary_hit:
                return Movement(
                    canonical_name=resolved.name,
                    raw_text=display,
                    load=load,
                    equipment_tags=list(resolved.equipment_tags),
                    body_part_tags=list(resolved.body_part_tags),
                    glossary_hit=True,
                )
        return Movement(canonical_name=LOAD_SPEC_NAME, raw_text=display, load=load)

    if _BARE_MOVEMENT_WORDS.search(display) or len(display) > 2:
        return _make_movement(display, display, None, None, None, index)

    logger.debug(f"[movement_resolver] dropped line with no movement: {display!r}")
    return None
