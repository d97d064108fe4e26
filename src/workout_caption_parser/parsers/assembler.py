"""
Block Assembler

Folds normalized caption lines into Blocks. Each line is offered to an
ordered list of rules; the first rule that accepts the line consumes it.
The rule order is fixed and resolves overlapping patterns, e.g. a rounds
count is never read as part of an interval spec.

Rules (in order):
    block_header, mode, rest_between_blocks, rest_between_rounds,
    per_round_insert, interval, complete_sets, rep_scheme, bare_rounds,
    time_cap, scaling, format_term, standalone_rest, instruction, movement
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from workout_caption_parser.glossary import ReferenceIndex, get_reference_index
from workout_caption_parser.models import (
    Block,
    IntervalSpec,
    Mode,
    ModeKind,
    Movement,
    PerRoundInsert,
    RestMarker,
)
from workout_caption_parser.parsers.mode_detector import detect_mode, parse_scheme
from workout_caption_parser.parsers.movement_resolver import build_movement
from workout_caption_parser.parsers.normalizer import NormalizedLine
from workout_caption_parser.utils import clock_to_seconds, time_to_seconds, to_int

logger = logging.getLogger(__name__)

_DURATION = r"(?P<value>\d+(?:\.\d+)?)\s*(?P<unit>seconds?|secs?|sec|s|minutes?|mins?|min|m)\b"

BLOCK_HEADER_PATTERN = re.compile(r"^block\s*(?P<number>\d+)\b[\s:.\-]*(?P<params>.*)$")
# "4 min, 5 times through"
BLOCK_PARAMS_PATTERN = re.compile(
    r"(?P<window>\d+)\s*(?:minutes?|mins?|min)\b[\s,]*(?P<rounds>\d+)\s*(?:times?|rounds?|x)\b"
)
DURATION_PATTERN = re.compile(_DURATION)
BETWEEN_BLOCKS_PATTERN = re.compile(r"\brest\b.*\bbetween\s+blocks?\b|\bbetween\s+blocks?\b.*\brest\b")
BETWEEN_ROUNDS_PATTERN = re.compile(
    r"\brest\b.*\b(?:between|after each|after every)\s+(?:rounds?|sets?)\b"
    r"|\b(?:between|after each)\s+(?:rounds?|sets?)\b.*\brest\b"
)
PER_ROUND_INSERT_PATTERN = re.compile(
    r"^.*?\bevery\s*(?P<every>\d+)\s*rounds?\b[\s,:\-]*(?:add\s+|do\s+|perform\s+)?(?P<movement>.+)$",
    re.IGNORECASE,
)
_SECONDS = r"(?:seconds?|secs?|sec|s)"
INTERVAL_PATTERNS = (
    re.compile(r"(?P<work>\d+)\s*" + _SECONDS + r"\s*(?:work|on)\s*[/\-,]?\s*(?P<rest>\d+)\s*" + _SECONDS + r"\s*(?:rest|off)\b"),
    re.compile(r"(?P<work>\d+)\s*" + _SECONDS + r"\s*[/\-]\s*(?P<rest>\d+)\s*" + _SECONDS + r"\b"),
    re.compile(r"^(?P<work>\d+)\s*(?:on|work)\s*[/\-,]\s*(?P<rest>\d+)\s*(?:off|rest)$"),
)
COMPLETE_SETS_PATTERN = re.compile(
    r"^(?:complete|do|perform)\s*(?P<sets>\d+)\s*(?:sets?|rounds?)\b.*$|^(?P<bare>\d+)\s*sets?(?:\s*total)?\.?$"
)
REP_SCHEME_PATTERN = re.compile(
    r"(?P<kind1>rep scheme|complex)\s*:\s*(?P<seq1>\d+(?:\s*[-,]\s*\d+)+)"
    r"|(?P<seq2>\d+(?:\s*[-,]\s*\d+)+).*?(?P<kind2>complex|rep scheme)"
)
BARE_ROUNDS_PATTERN = re.compile(r"^(?P<rounds>\d+)\s*rounds?\b[\s:.]*(?:of\b)?[\s:.]*$")
TIME_CAP_PATTERN = re.compile(r"\b(?:time\s*cap|cap)\b")
SCALING_PATTERN = re.compile(r"^\((?:m|f)\)|^(?:rx|scaled)\s*:")
STANDALONE_REST_PATTERNS = (
    re.compile(r"^rest\b\s*(?:for\s*)?:?\s*" + _DURATION),
    re.compile(r"^" + _DURATION + r"\s*(?:of\s*)?rest\b"),
)
CLOCK_REST_PATTERN = re.compile(r"^rest\b\s*:?\s*(?P<clock>\d{1,2}:\d{2})\b")
NOTES_PATTERN = re.compile(r"^notes?\s*:")
INSTRUCTION_PATTERN = re.compile(r"^(?:rest|score|scale|scaling|tip|complete the|complete all)\b")
# Prose heuristics: long, digit-free sentences with function words are commentary
_FUNCTION_WORDS = {"the", "that", "its", "it's", "your", "you", "this", "is", "are", "and", "of", "for", "at", "with"}
PROSE_MIN_WORDS = 5


@dataclass
class BlockDraft:
    """Mutable block under construction; frozen into a Block when closed."""
    title: Optional[str] = None
    mode: Optional[Mode] = None
    rounds: Optional[int] = None
    ladder_scheme: Optional[List[int]] = None
    rest_between_blocks_seconds: Optional[int] = None
    rest_between_rounds_seconds: Optional[int] = None
    per_round_inserts: List[PerRoundInsert] = field(default_factory=list)
    interval: Optional[IntervalSpec] = None
    rest_markers: List[RestMarker] = field(default_factory=list)
    sequence: List[Movement] = field(default_factory=list)

    def set_mode(self, mode: Mode) -> None:
        self.mode = mode
        if mode.rounds and not self.rounds:
            self.rounds = mode.rounds

    def inherit(self, defaults: "BlockDraft") -> None:
        """Fill structure this block did not declare from the preamble."""
        if self.mode is None and defaults.mode is not None:
            self.set_mode(defaults.mode)
        if self.rest_between_blocks_seconds is None:
            self.rest_between_blocks_seconds = defaults.rest_between_blocks_seconds
        if self.rest_between_rounds_seconds is None:
            self.rest_between_rounds_seconds = defaults.rest_between_rounds_seconds
        if self.interval is None:
            self.interval = defaults.interval

    def has_structure(self) -> bool:
        return any((
            self.mode,
            self.rounds,
            self.interval,
            self.rest_between_blocks_seconds is not None,
            self.rest_between_rounds_seconds is not None,
        ))

    def build(self) -> Block:
        return Block(
            title=self.title,
            mode=self.mode,
            rounds=self.rounds,
            ladder_scheme=list(self.ladder_scheme) if self.ladder_scheme else None,
            rest_between_blocks_seconds=self.rest_between_blocks_seconds,
            rest_between_rounds_seconds=self.rest_between_rounds_seconds,
            per_round_inserts=list(self.per_round_inserts),
            interval=self.interval,
            rest_markers=list(self.rest_markers),
            sequence=list(self.sequence),
        )


@dataclass
class AssemblerState:
    """Accumulator threaded through the fold over caption lines."""
    index: ReferenceIndex
    current: BlockDraft = field(default_factory=BlockDraft)
    closed: List[BlockDraft] = field(default_factory=list)
    defaults: Optional[BlockDraft] = None
    notes: List[str] = field(default_factory=list)

    def start_block(self, title: Optional[str]) -> BlockDraft:
        previous = self.current
        if not self.closed and previous.title is None and previous.has_structure():
            # Structure declared before the first header applies to every block
            self.defaults = previous
        self.close_current()
        self.current = BlockDraft(title=title)
        return self.current

    def close_current(self) -> None:
        draft = self.current
        if self.defaults is not None and draft is not self.defaults:
            draft.inherit(self.defaults)
        self.closed.append(draft)

    def finish(self) -> List[Block]:
        self.close_current()
        return [draft.build() for draft in self.closed]


@dataclass(frozen=True)
class AssemblerRule:
    name: str
    apply: Callable[[AssemblerState, NormalizedLine], bool]


@dataclass(frozen=True)
class AssemblyResult:
    blocks: List[Block]
    notes: List[str]


def _duration_seconds(text: str) -> Optional[int]:
    m = DURATION_PATTERN.search(text)
    if not m:
        return None
    return time_to_seconds(float(m.group("value")), m.group("unit"))


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def _block_header(state: AssemblerState, line: NormalizedLine) -> bool:
    m = BLOCK_HEADER_PATTERN.match(line.text)
    if not m:
        return False
    draft = state.start_block(line.display)
    params = m.group("params")
    if params:
        p = BLOCK_PARAMS_PATTERN.search(params)
        if p and int(p.group("window")) and int(p.group("rounds")):
            draft.set_mode(Mode(
                kind=ModeKind.E_N_MOM,
                window_seconds=int(p.group("window")) * 60,
                rounds=int(p.group("rounds")),
            ))
        else:
            match = detect_mode(params)
            if match:
                _apply_mode(draft, match)
    return True


def _apply_mode(draft: BlockDraft, match) -> None:
    draft.set_mode(match.mode)
    if match.ladder_scheme:
        draft.ladder_scheme = list(match.ladder_scheme)
    if match.interval is not None:
        draft.interval = match.interval


def _mode(state: AssemblerState, line: NormalizedLine) -> bool:
    match = detect_mode(line.text)
    if match is None:
        return False
    draft = state.current
    if draft.mode is not None:
        if match.mode.kind == ModeKind.FIXED_ROUNDS:
            # Leave an existing mode alone; the bare rounds rule handles the count
            return False
        if match.ladder_scheme:
            draft.ladder_scheme = list(match.ladder_scheme)
            return True
    _apply_mode(draft, match)
    _apply_inline_rest(draft, line.text)
    return True


def _apply_inline_rest(draft: BlockDraft, text: str) -> None:
    """A mode line may carry its rest: '4 rounds, rest 1 min between rounds'."""
    rest = re.search(r"\brest\b", text)
    if rest is None:
        return
    # Only a duration after "rest"; the one before it belongs to the mode
    seconds = _duration_seconds(text[rest.start():])
    if seconds is None:
        return
    if BETWEEN_ROUNDS_PATTERN.search(text):
        draft.rest_between_rounds_seconds = seconds
    elif BETWEEN_BLOCKS_PATTERN.search(text):
        draft.rest_between_blocks_seconds = seconds


def _rest_between_blocks(state: AssemblerState, line: NormalizedLine) -> bool:
    if not BETWEEN_BLOCKS_PATTERN.search(line.text):
        return False
    seconds = _duration_seconds(line.text)
    if seconds is None:
        return False
    state.current.rest_between_blocks_seconds = seconds
    return True


def _rest_between_rounds(state: AssemblerState, line: NormalizedLine) -> bool:
    if not BETWEEN_ROUNDS_PATTERN.search(line.text):
        return False
    seconds = _duration_seconds(line.text)
    if seconds is None:
        return False
    state.current.rest_between_rounds_seconds = seconds
    return True


def _per_round_insert(state: AssemblerState, line: NormalizedLine) -> bool:
    m = PER_ROUND_INSERT_PATTERN.match(line.display)
    if not m:
        return False
    every = to_int(m.group("every"))
    movement = build_movement(m.group("movement"), state.index)
    if not every or movement is None:
        return False
    state.current.per_round_inserts.append(PerRoundInsert(every=every, movement=movement))
    return True


def _interval(state: AssemblerState, line: NormalizedLine) -> bool:
    for pattern in INTERVAL_PATTERNS:
        m = pattern.search(line.text)
        if m:
            work, rest = int(m.group("work")), int(m.group("rest"))
            if work <= 0:
                return False
            draft = state.current
            rounds = draft.mode.rounds if draft.mode else None
            draft.mode = Mode(kind=ModeKind.INTERVALS, rounds=rounds)
            draft.interval = IntervalSpec(work_seconds=work, rest_seconds=rest)
            return True
    return False


def _complete_sets(state: AssemblerState, line: NormalizedLine) -> bool:
    m = COMPLETE_SETS_PATTERN.match(line.text)
    if not m:
        return False
    sets = to_int(m.group("sets") or m.group("bare"))
    if not sets:
        return False
    draft = state.current
    draft.rounds = sets
    if draft.mode is None:
        draft.mode = Mode(kind=ModeKind.INTERVALS)
    return True


def _rep_scheme(state: AssemblerState, line: NormalizedLine) -> bool:
    m = REP_SCHEME_PATTERN.search(line.text)
    if not m:
        return False
    scheme = parse_scheme(m.group("seq1") or m.group("seq2"))
    if len(scheme) < 2:
        return False
    kind = m.group("kind1") or m.group("kind2")
    draft = state.current
    draft.ladder_scheme = list(scheme)
    if draft.mode is None:
        draft.mode = Mode(kind=ModeKind.LADDER if kind == "rep scheme" else ModeKind.COMPLEX)
    return True


def _bare_rounds(state: AssemblerState, line: NormalizedLine) -> bool:
    m = BARE_ROUNDS_PATTERN.match(line.text)
    if not m:
        return False
    rounds = int(m.group("rounds"))
    draft = state.current
    if rounds and not draft.rounds:
        draft.rounds = rounds
        if draft.mode is None:
            draft.mode = Mode(kind=ModeKind.FIXED_ROUNDS)
    return True


def _time_cap(state: AssemblerState, line: NormalizedLine) -> bool:
    # Recorded globally from the whole caption; the line itself is consumed
    return bool(TIME_CAP_PATTERN.search(line.text) and DURATION_PATTERN.search(line.text))


def _scaling(state: AssemblerState, line: NormalizedLine) -> bool:
    return bool(SCALING_PATTERN.match(line.text))


def _format_term(state: AssemblerState, line: NormalizedLine) -> bool:
    term = state.index.lookup_term(line.text.rstrip(":"))
    if term is None or state.index.is_exercise(line.text):
        return False
    draft = state.current
    if draft.title is None and not draft.sequence:
        draft.title = line.display.rstrip(":").strip()
    else:
        state.notes.append(line.display)
    return True


def _standalone_rest(state: AssemblerState, line: NormalizedLine) -> bool:
    seconds = None
    for pattern in STANDALONE_REST_PATTERNS:
        m = pattern.match(line.text)
        if m:
            seconds = time_to_seconds(float(m.group("value")), m.group("unit"))
            break
    else:
        m = CLOCK_REST_PATTERN.match(line.text)
        if m:
            seconds = clock_to_seconds(m.group("clock"))
    if not seconds:
        return False
    draft = state.current
    draft.rest_markers.append(RestMarker(position=len(draft.sequence), seconds=seconds, raw_text=line.raw))
    return True


def _is_prose(line: NormalizedLine, index: ReferenceIndex) -> bool:
    if re.search(r"\d", line.text) or index.is_exercise(line.text):
        return False
    words = re.findall(r"[a-z']+", line.text)
    return len(words) >= PROSE_MIN_WORDS and any(w in _FUNCTION_WORDS for w in words)


def _instruction(state: AssemblerState, line: NormalizedLine) -> bool:
    text = line.text
    is_note = bool(NOTES_PATTERN.match(text))
    if not is_note and INSTRUCTION_PATTERN.match(text) and not re.search(r"\d", text):
        is_note = True
    if not is_note and not _is_prose(line, state.index):
        return False
    state.notes.append(line.display)
    return True


def _movement(state: AssemblerState, line: NormalizedLine) -> bool:
    movement = build_movement(line.display, state.index)
    if movement is None:
        logger.debug(f"[assembler] skipped line: {line.raw!r}")
        return True
    state.current.sequence.append(movement)
    return True


RULES: Tuple[AssemblerRule, ...] = (
    AssemblerRule("block_header", _block_header),
    AssemblerRule("mode", _mode),
    AssemblerRule("rest_between_blocks", _rest_between_blocks),
    AssemblerRule("rest_between_rounds", _rest_between_rounds),
    AssemblerRule("per_round_insert", _per_round_insert),
    AssemblerRule("interval", _interval),
    AssemblerRule("complete_sets", _complete_sets),
    AssemblerRule("rep_scheme", _rep_scheme),
    AssemblerRule("bare_rounds", _bare_rounds),
    AssemblerRule("time_cap", _time_cap),
    AssemblerRule("scaling", _scaling),
    AssemblerRule("format_term", _format_term),
    AssemblerRule("standalone_rest", _standalone_rest),
    AssemblerRule("instruction", _instruction),
    AssemblerRule("movement", _movement),
)


def rule_names() -> List[str]:
    return [rule.name for rule in RULES]


def match_rule(state: AssemblerState, line: NormalizedLine) -> Optional[str]:
    """Apply the first accepting rule to the line and return its name."""
    for rule in RULES:
        if rule.apply(state, line):
            return rule.name
    return None


def assemble(lines: Sequence[NormalizedLine], index: Optional[ReferenceIndex] = None) -> AssemblyResult:
    """Fold normalized lines into blocks. Always returns at least one block."""
    state = AssemblerState(index=index or get_reference_index())
    for line in lines:
        if not line.text or line.is_decorative:
            continue
        rule = match_rule(state, line)
        logger.debug(f"[assembler] {rule}: {line.display!r}")
    return AssemblyResult(blocks=state.finish(), notes=list(state.notes))
