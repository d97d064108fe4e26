"""
Caption parser: free-text workout caption -> WorkoutAST plus derived views.

Pipeline: split + normalize lines -> global facts (scoring, time cap,
scaling) -> block assembly -> glossary bookkeeping -> confidence ->
rows, steps and compact summary.

The parse itself never raises on caption content. Contract violations at
the boundary (oversized text, malformed provenance) raise
CaptionParserError subclasses.
"""

import logging
import re
from typing import Any, Mapping, Optional, Tuple, Union
from urllib.parse import urlparse

from pydantic import ValidationError

from workout_caption_parser.config import settings
from workout_caption_parser.glossary import ReferenceIndex, get_reference_index
from workout_caption_parser.models import (
    CaptionParseResult,
    Provenance,
    Scaling,
    ScalingSpec,
    WorkoutAST,
)
from workout_caption_parser.parsers.assembler import assemble
from workout_caption_parser.parsers.confidence import score_confidence
from workout_caption_parser.parsers.normalizer import split_lines
from workout_caption_parser.services.exercise_summary import build_compact_workout
from workout_caption_parser.services.row_expander import expand_rows
from workout_caption_parser.services.step_builder import build_workout_steps
from workout_caption_parser.utils import time_to_seconds

logger = logging.getLogger(__name__)


class CaptionParserError(RuntimeError):
    """Base error for caller contract violations."""


class InvalidProvenanceError(CaptionParserError):
    """Raised when provenance metadata does not validate."""


class CaptionTooLongError(CaptionParserError):
    """Raised when a caption exceeds the configured size limit."""


TIME_CAP_PATTERN = re.compile(
    r"time\s*cap(?:\s*of)?\s*:?\s*(\d+)\s*(minutes?|mins?|min|seconds?|secs?|sec)\b"
)
TIME_SCORING_PATTERN = re.compile(r"score is total time|\bfor time\b")
ROUNDS_SCORING_PATTERN = re.compile(r"as many (?:rounds|reps) as possible|\bamrap\b")

MALE_RX_PATTERN = re.compile(r"\(m\)\s*rx\s*:\s*([^\n(]+)", re.IGNORECASE)
FEMALE_RX_PATTERN = re.compile(r"\(f\)\s*rx\s*:\s*([^\n(]+)", re.IGNORECASE)
MALE_BOX_PATTERN = re.compile(r"\(m\).{0,30}?(?:vest|box|inch|in)\b\s*:?\s*([^\n(]+)", re.IGNORECASE)
FEMALE_BOX_PATTERN = re.compile(r"\(f\).{0,30}?(?:vest|box|inch|in)\b\s*:?\s*([^\n(]+)", re.IGNORECASE)

_PLATFORM_HOSTS = (
    (("instagram.com", "instagr.am"), "instagram"),
    (("tiktok.com",), "tiktok"),
    (("youtube.com", "youtu.be"), "youtube"),
    (("facebook.com", "fb.watch", "fb.com"), "facebook"),
)


def infer_platform(url: Optional[str]) -> str:
    """Map a source URL to a platform name by host; 'unknown' when unrecognized."""
    if not url:
        return "unknown"
    try:
        host = (urlparse(url if "://" in url else f"https://{url}").hostname or "").lower()
    except ValueError:
        return "unknown"
    for suffixes, platform in _PLATFORM_HOSTS:
        if any(host == s or host.endswith("." + s) for s in suffixes):
            return platform
    return "unknown"


def coerce_provenance(provenance: Union[Provenance, Mapping[str, Any], None]) -> Provenance:
    """Validate caller provenance and fill the platform from the URL when missing."""
    if provenance is None:
        return Provenance()
    if not isinstance(provenance, Provenance):
        if not isinstance(provenance, Mapping):
            raise InvalidProvenanceError(f"provenance must be a mapping, got {type(provenance).__name__}")
        try:
            provenance = Provenance.model_validate(dict(provenance))
        except ValidationError as e:
            raise InvalidProvenanceError(f"invalid provenance: {e}") from e
    if provenance.platform is None and provenance.source_url:
        provenance = provenance.model_copy(update={"platform": infer_platform(provenance.source_url)})
    return provenance


def _scaling(display_text: str) -> Optional[Scaling]:
    def grab(pattern: re.Pattern) -> Optional[str]:
        m = pattern.search(display_text)
        return m.group(1).strip() if m else None

    male_load, female_load = grab(MALE_RX_PATTERN), grab(FEMALE_RX_PATTERN)
    male_box, female_box = grab(MALE_BOX_PATTERN), grab(FEMALE_BOX_PATTERN)
    if not any((male_load, female_load, male_box, female_box)):
        return None
    return Scaling(
        male=ScalingSpec(load=male_load, box=male_box),
        female=ScalingSpec(load=female_load, box=female_box),
    )


def extract_global_facts(normalized_text: str, display_text: str) -> Tuple[Optional[str], Optional[int], Optional[Scaling]]:
    """Scoring, time cap and scaling read from the whole caption."""
    cap_seconds = None
    m = TIME_CAP_PATTERN.search(normalized_text)
    if m:
        cap_seconds = time_to_seconds(int(m.group(1)), m.group(2))

    scoring = None
    if TIME_SCORING_PATTERN.search(normalized_text):
        scoring = "time"
    elif ROUNDS_SCORING_PATTERN.search(normalized_text):
        scoring = "rounds"
    return scoring, cap_seconds, _scaling(display_text)


def parse_workout_ast(
    text: Any,
    provenance: Union[Provenance, Mapping[str, Any], None] = None,
    title: Optional[str] = None,
    index: Optional[ReferenceIndex] = None,
) -> WorkoutAST:
    """Parse caption text into a WorkoutAST. Always yields at least one block."""
    provenance = coerce_provenance(provenance)
    index = index or get_reference_index()

    if not isinstance(text, str):
        logger.warning(f"[caption_parser] non-string caption ({type(text).__name__}), returning empty workout")
        text = ""

    lines = split_lines(text)
    normalized_text = "\n".join(line.text for line in lines)
    display_text = "\n".join(line.display for line in lines)
    scoring, cap_seconds, scaling = extract_global_facts(normalized_text, display_text)

    assembly = assemble(lines, index)
    blocks = assembly.blocks
    movements = [mv for block in blocks for mv in block.sequence]
    hits = [mv.canonical_name for mv in movements if mv.glossary_hit]
    unresolved = []
    for mv in movements:
        if not mv.glossary_hit and mv.canonical_name not in unresolved:
            unresolved.append(mv.canonical_name)

    confidence = score_confidence(blocks)
    ast = WorkoutAST(
        title=(title or "").strip() or None,
        blocks=blocks,
        scoring=scoring,
        cap_seconds=cap_seconds,
        scaling=scaling,
        notes=assembly.notes,
        provenance=provenance,
        glossary_hits=hits,
        unresolved_terms=unresolved,
        confidence=confidence,
    )
    logger.info(
        f"[caption_parser] parsed {len(lines)} lines: {len(blocks)} blocks, "
        f"{len(movements)} movements, {len(hits)} glossary hits, confidence={confidence:.2f}"
    )
    return ast


def parse_caption(
    text: Any,
    provenance: Union[Provenance, Mapping[str, Any], None] = None,
    title: Optional[str] = None,
    index: Optional[ReferenceIndex] = None,
) -> CaptionParseResult:
    """
    Parse a caption and derive its review rows, persistence steps and
    compact summary.

    Raises:
        CaptionTooLongError: text is longer than settings.MAX_CAPTION_CHARS
        InvalidProvenanceError: provenance does not validate
    """
    if isinstance(text, str) and len(text) > settings.MAX_CAPTION_CHARS:
        raise CaptionTooLongError(
            f"caption is {len(text)} characters, limit is {settings.MAX_CAPTION_CHARS}"
        )
    ast = parse_workout_ast(text, provenance=provenance, title=title, index=index)
    return CaptionParseResult(
        ast=ast,
        rows=expand_rows(ast),
        steps=build_workout_steps(ast),
        summary=build_compact_workout(ast, text if isinstance(text, str) else None),
    )
