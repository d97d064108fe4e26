"""
Mode Detector

Recognizes a structural mode on a single lowercased line. Detection order
matters: E#MOM, EMOM, Tabata, AMRAP, For Time, fixed rounds, rep ladders,
superset, circuit. The first family that matches wins.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from workout_caption_parser.models import IntervalSpec, Mode, ModeKind
from workout_caption_parser.utils import time_to_seconds, to_int

_TIME_UNIT = r"(?P<unit>minutes?|mins?|min|seconds?|secs?|sec)"

# "every 4 minutes x 5 rounds", "e2 min x 6"
E_N_MOM_PATTERN = re.compile(
    r"(?:^| )(?:e|every)\s*(?P<window>\d+)\s*" + _TIME_UNIT + r"\s*x\s*(?P<rounds>\d+)\s*(?:rounds?)?"
)
# "e3mom x 6", "e3mom for 18 min"
E_N_MOM_SHORT_PATTERN = re.compile(
    r"\be(?P<window>\d+)mom\b(?:\s*(?:x|for)\s*(?P<count>\d+)\s*(?P<count_unit>rounds?|minutes?|mins?|min)?)?"
)
EMOM_PATTERN = re.compile(r"\bemom\b|every minute on the minute")
EMOM_AFTER_PATTERN = re.compile(r"\bemom\s*(?:x\s*)?(?P<minutes>\d+)")
EMOM_BEFORE_PATTERN = re.compile(r"(?P<minutes>\d+)\s*(?:minutes?|mins?|min|')?\s*emom\b")
TABATA_PATTERN = re.compile(r"\btabata\b")
AMRAP_PATTERN = re.compile(r"\bamrap\b|as many (?:reps|rounds) as possible")
AMRAP_DURATION_PATTERN = re.compile(
    r"(?P<before>\d+)\s*(?:minutes?|mins?|min|')\s*(?:amrap\b|as many)|\bamrap\s*(?:of\s*|in\s*)?(?P<after>\d+)"
)
FOR_TIME_PATTERN = re.compile(r"\bfor time\b")
ROUNDS_PATTERN = re.compile(r"(?P<rounds>\d+)\s*rounds?\b")
# Digit-adjacent multiplier ("3x10", "x 5") disqualifies a rounds reading
MULTIPLIER_PATTERN = re.compile(r"\d\s*x|x\s*\d")
LADDER_PATTERN = re.compile(r"^(?P<scheme>\d+(?:\s*[-,]\s*\d+)+)\s*(?:reps?)?\.?$")
SUPERSET_PATTERN = re.compile(r"\bsuper\s?sets?\b")
CIRCUIT_PATTERN = re.compile(r"\bcircuit\b")

TABATA_INTERVAL = IntervalSpec(work_seconds=20, rest_seconds=10)
TABATA_ROUNDS = 8


@dataclass(frozen=True)
class ModeMatch:
    """A detected mode plus any structure the same line implies."""
    mode: Mode
    ladder_scheme: Optional[Tuple[int, ...]] = None
    interval: Optional[IntervalSpec] = None


def parse_scheme(text: str) -> Tuple[int, ...]:
    """'21-15-9' -> (21, 15, 9)."""
    return tuple(int(part) for part in re.split(r"\s*[-,]\s*", text.strip()) if part.isdigit())


def _detect_e_n_mom(s: str) -> Optional[ModeMatch]:
    m = E_N_MOM_PATTERN.search(s)
    if m:
        window = time_to_seconds(int(m.group("window")), m.group("unit"))
        rounds = to_int(m.group("rounds"))
        if window > 0 and rounds:
            return ModeMatch(Mode(kind=ModeKind.E_N_MOM, window_seconds=window, rounds=rounds))

    m = E_N_MOM_SHORT_PATTERN.search(s)
    if m and m.group("count"):
        window = int(m.group("window")) * 60
        count = int(m.group("count"))
        if (m.group("count_unit") or "").startswith("m"):
            # "e3mom for 18 min" is a total duration
            count = count * 60 // window if window else 0
        if window > 0 and count > 0:
            return ModeMatch(Mode(kind=ModeKind.E_N_MOM, window_seconds=window, rounds=count))
    return None


def _detect_emom(s: str) -> Optional[ModeMatch]:
    if not EMOM_PATTERN.search(s):
        return None
    m = EMOM_AFTER_PATTERN.search(s) or EMOM_BEFORE_PATTERN.search(s)
    minutes = to_int(m.group("minutes")) if m else None
    if minutes:
        return ModeMatch(Mode(kind=ModeKind.EMOM, window_seconds=60, rounds=minutes))
    return ModeMatch(Mode(kind=ModeKind.EMOM))


def _detect_amrap(s: str) -> Optional[ModeMatch]:
    if not AMRAP_PATTERN.search(s):
        return None
    m = AMRAP_DURATION_PATTERN.search(s)
    minutes = to_int(m.group("before") or m.group("after")) if m else None
    if minutes:
        return ModeMatch(Mode(kind=ModeKind.AMRAP, window_seconds=minutes * 60))
    return ModeMatch(Mode(kind=ModeKind.AMRAP))


def _detect_for_time(s: str) -> Optional[ModeMatch]:
    if not FOR_TIME_PATTERN.search(s):
        return None
    m = ROUNDS_PATTERN.search(s)
    return ModeMatch(Mode(kind=ModeKind.FOR_TIME, rounds=(to_int(m.group("rounds")) or None) if m else None))


def detect_mode(line: str) -> Optional[ModeMatch]:
    """
    Detect a structural mode on one normalized (lowercased) line.

    Examples:
        "every 4 minutes x 5 rounds" -> E#MOM, window 240, rounds 5
        "emom 10"                    -> EMOM, window 60, rounds 10
        "20 min amrap"               -> AMRAP, window 1200
        "5 rounds for time"          -> ForTime, rounds 5
        "3 rounds"                   -> FixedRounds, rounds 3
        "21-15-9"                    -> Ladder, scheme (21, 15, 9)
    """
    s = (line or "").strip().lower()
    if not s:
        return None

    match = _detect_e_n_mom(s) or _detect_emom(s)
    if match:
        return match

    if TABATA_PATTERN.search(s):
        return ModeMatch(
            Mode(kind=ModeKind.INTERVALS, rounds=TABATA_ROUNDS),
            interval=TABATA_INTERVAL,
        )

    match = _detect_amrap(s) or _detect_for_time(s)
    if match:
        return match

    m = ROUNDS_PATTERN.search(s)
    if m and "every" not in s and not MULTIPLIER_PATTERN.search(s):
        rounds = to_int(m.group("rounds"))
        if rounds:
            return ModeMatch(Mode(kind=ModeKind.FIXED_ROUNDS, rounds=rounds))

    m = LADDER_PATTERN.match(s)
    if m:
        scheme = parse_scheme(m.group("scheme"))
        if len(scheme) >= 2:
            return ModeMatch(Mode(kind=ModeKind.LADDER), ladder_scheme=scheme)

    if SUPERSET_PATTERN.search(s):
        return ModeMatch(Mode(kind=ModeKind.SUPERSET))
    if CIRCUIT_PATTERN.search(s):
        return ModeMatch(Mode(kind=ModeKind.CIRCUIT))
    return None
