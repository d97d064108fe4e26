"""
Reference Index

Read-only alias -> canonical lookup tables built from the static glossary.
Lookups are exact on a normalized key (trim + lowercase + unified
punctuation); there is no fuzzy matching, so an unknown term stays unknown.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

_DASHES = re.compile(r"[‐-―−]")
_QUOTES = re.compile(r"[‘’‛`]")
_WHITESPACE = re.compile(r"\s+")


def normalize_key(text: str) -> str:
    """Normalize a term for lookup: 'Push–Ups ' -> 'push-ups'."""
    text = _DASHES.sub("-", text or "")
    text = _QUOTES.sub("'", text)
    return _WHITESPACE.sub(" ", text).strip().lower()


# ---------------------------------------------------------------------------
# Glossary entries (static dataset shape)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TermEntry:
    term: str
    category: str  # format | structure | technique | intensity | style
    aliases: Tuple[str, ...] = ()
    definition: str = ""


@dataclass(frozen=True)
class ExerciseEntry:
    name: str
    aliases: Tuple[str, ...] = ()
    muscle_groups: Tuple[str, ...] = ()
    equipment: Optional[str] = None
    units: Tuple[str, ...] = ()
    description: str = ""


@dataclass(frozen=True)
class NamedEntry:
    """Equipment or body part: a canonical name plus aliases."""
    name: str
    aliases: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Glossary:
    exercise_terms: Tuple[TermEntry, ...] = ()
    exercises: Tuple[ExerciseEntry, ...] = ()
    workout_styles: Tuple[TermEntry, ...] = ()
    equipment: Tuple[NamedEntry, ...] = ()
    body_parts: Tuple[NamedEntry, ...] = ()


# ---------------------------------------------------------------------------
# Index records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TermRecord:
    term: str
    category: str


@dataclass(frozen=True)
class ExerciseRecord:
    name: str
    equipment: Optional[str] = None
    muscle_groups: Tuple[str, ...] = ()
    units: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ReferenceIndex:
    """Immutable lookup tables for terms, exercises, equipment and body parts."""
    terms: Mapping[str, TermRecord] = field(default_factory=lambda: MappingProxyType({}))
    exercises: Mapping[str, ExerciseRecord] = field(default_factory=lambda: MappingProxyType({}))
    equipment: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    body_parts: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def lookup_exercise(self, name: str) -> Optional[ExerciseRecord]:
        return self.exercises.get(normalize_key(name))

    def lookup_term(self, text: str) -> Optional[TermRecord]:
        return self.terms.get(normalize_key(text))

    def lookup_equipment(self, text: str) -> Optional[str]:
        return self.equipment.get(normalize_key(text))

    def lookup_body_part(self, text: str) -> Optional[str]:
        return self.body_parts.get(normalize_key(text))

    def is_exercise(self, name: str) -> bool:
        return normalize_key(name) in self.exercises


def _register(table: dict, names: Iterable[Tuple[str, object]], domain: str) -> None:
    """Add keys without overwriting; canonical names are registered before aliases."""
    for key_text, record in names:
        key = normalize_key(key_text)
        if not key:
            continue
        existing = table.setdefault(key, record)
        if existing is not record and existing != record:
            logger.debug(f"[reference_index] {domain} alias '{key}' already mapped, keeping first entry")


def build_reference_index(glossary: Glossary) -> ReferenceIndex:
    """Build the lookup tables. Pure function of the glossary; safe to call repeatedly."""
    terms: dict = {}
    exercises: dict = {}
    equipment: dict = {}
    body_parts: dict = {}

    term_entries = tuple(glossary.exercise_terms) + tuple(glossary.workout_styles)
    term_records = [(t, TermRecord(term=t.term, category=t.category)) for t in term_entries]
    _register(terms, ((t.term, rec) for t, rec in term_records), "term")
    _register(terms, ((alias, rec) for t, rec in term_records for alias in t.aliases), "term")

    exercise_records = [
        (
            e,
            ExerciseRecord(
                name=e.name,
                equipment=e.equipment,
                muscle_groups=tuple(e.muscle_groups),
                units=tuple(e.units),
            ),
        )
        for e in glossary.exercises
    ]
    _register(exercises, ((e.name, rec) for e, rec in exercise_records), "exercise")
    _register(exercises, ((alias, rec) for e, rec in exercise_records for alias in e.aliases), "exercise")

    for table, entries, domain in (
        (equipment, glossary.equipment, "equipment"),
        (body_parts, glossary.body_parts, "body part"),
    ):
        _register(table, ((entry.name, entry.name) for entry in entries), domain)
        _register(table, ((alias, entry.name) for entry in entries for alias in entry.aliases), domain)

    return ReferenceIndex(
        terms=MappingProxyType(terms),
        exercises=MappingProxyType(exercises),
        equipment=MappingProxyType(equipment),
        body_parts=MappingProxyType(body_parts),
    )


@lru_cache(maxsize=1)
def get_reference_index() -> ReferenceIndex:
    """Process-wide index built from the bundled glossary."""
    from workout_caption_parser.glossary.data import DEFAULT_GLOSSARY

    index = build_reference_index(DEFAULT_GLOSSARY)
    logger.info(
        f"[reference_index] built: {len(index.exercises)} exercise keys, "
        f"{len(index.terms)} term keys, {len(index.equipment)} equipment keys, "
        f"{len(index.body_parts)} body part keys"
    )
    return index
