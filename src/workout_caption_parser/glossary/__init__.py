"""Workout glossary and the read-only reference index built from it."""
from .reference_index import (
    ExerciseRecord,
    Glossary,
    ReferenceIndex,
    TermRecord,
    build_reference_index,
    get_reference_index,
    normalize_key,
)

__all__ = [
    "ExerciseRecord",
    "Glossary",
    "ReferenceIndex",
    "TermRecord",
    "build_reference_index",
    "get_reference_index",
    "normalize_key",
]
