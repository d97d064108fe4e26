"""
Quantity and Load Extractors

Pure functions over one cleaned caption line (original case). Quantity
grammars are tried in a fixed order; load extraction is an independent
pass over the same line, so a line may yield both.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from workout_caption_parser.models import Implement, Load, Quantity, QuantityType
from workout_caption_parser.utils import clock_to_seconds, to_int, to_number, upper_from_range

_UNIT = (
    r"(?P<unit>kilometers?|kilometres?|km|meters?|metres?|m"
    r"|calories?|cals?|minutes?|mins?|seconds?|secs?|s)"
)
_LOAD_UNIT = r"(?P<unit>kgs?|kilos?|lbs?|pounds?|#)"

# <number><unit> <name>: "400m Row", "10 cal bike", "60 sec plank"
QUANTITY_FIRST_PATTERN = re.compile(
    r"^(?P<value>\d+(?:\.\d+)?)\s*" + _UNIT + r"\b\.?\s+(?:of\s+)?(?P<tail>.+)$",
    re.IGNORECASE,
)
# <MM:SS> <name>: "1:30 plank"
CLOCK_FIRST_PATTERN = re.compile(r"^(?P<clock>\d{1,2}:\d{2})\s+(?P<tail>.+)$")
# <number>[reps] <name>: "20 Wall Balls", "10 reps burpees"
REPS_FIRST_PATTERN = re.compile(
    r"^(?P<value>\d+)(?:\s*reps?\b)?\s+(?:of\s+)?(?P<tail>.+)$",
    re.IGNORECASE,
)
# <low>-<high>[reps] <name>: "10-12 push-ups"
REP_RANGE_FIRST_PATTERN = re.compile(
    r"^(?P<range>\d+\s*-\s*\d+)(?:\s*reps?\b)?\s+(?:of\s+)?(?P<tail>.+)$",
    re.IGNORECASE,
)
# <sets>x<rest>: "3x10 Push-ups", "5 x 400m Row"
SETS_PREFIX_PATTERN = re.compile(r"^(?P<sets>\d+)\s*x\s*(?=\d)", re.IGNORECASE)
# <sets> sets of <rest>: "3 sets of 10 pushups", "4 sets x 8 Bench Press"
SETS_OF_PATTERN = re.compile(r"^(?P<sets>\d+)\s*sets?\s*(?:of\b|x)?\s*(?=\d)", re.IGNORECASE)
# <name> <sets>x<reps>: "Push-ups 3x10", "Bench Press: 4 x 8 reps"
NAME_SETS_REPS_PATTERN = re.compile(
    r"^(?P<tail>.*?[a-z].*?)[\s:,-]+(?P<sets>\d+)\s*x\s*(?P<reps>\d+)(?:\s*reps?)?\.?$",
    re.IGNORECASE,
)
# <name> <number><unit>: "Plank 60 sec", "Run 400 meters", "Burpees x 20"
NAME_QUANTITY_PATTERN = re.compile(
    r"^(?P<tail>.*?[a-z].*?)[\s:,-]+(?P<value>\d+(?:\.\d+)?)\s*(?:" + _UNIT + r"|(?P<reps>reps?))\b\.?$",
    re.IGNORECASE,
)
NAME_TIMES_PATTERN = re.compile(r"^(?P<tail>.*?[a-z].*?)\s+x\s*(?P<value>\d+)$", re.IGNORECASE)
NAME_CLOCK_PATTERN = re.compile(r"^(?P<tail>.*?[a-z].*?)[\s:,-]+(?P<clock>\d{1,2}:\d{2})$", re.IGNORECASE)

# A reps-first tail that is really a load unit ("35 lb dumbbells", "24 inch box jumps")
_LOAD_UNIT_HEAD = re.compile(r"^(?:(?:kgs?|kilos?|lbs?|pounds?|inch(?:es)?|in)\b|[#\"])", re.IGNORECASE)
_QUANTITY_UNIT_HEAD = re.compile(r"^" + _UNIT + r"\b", re.IGNORECASE)

# Load sub-grammars
PAIRED_LOAD_PATTERN = re.compile(
    r"(?P<count>\d+)\s*x\s*(?P<amount>\d+(?:\.\d+)?)\s*" + _LOAD_UNIT + r"(?![a-z])",
    re.IGNORECASE,
)
AMOUNT_LOAD_PATTERN = re.compile(
    r"(?P<amount>\d+(?:\.\d+)?)\s*" + _LOAD_UNIT + r"(?![a-z])",
    re.IGNORECASE,
)
FREEFORM_LOAD_PATTERN = re.compile(
    r"\d+(?:\.\d+)?\s*(?:inch(?:es)?\b|in\b|\")\s*[a-z]*",
    re.IGNORECASE,
)
# The measurement alone, keeping the object word: "24 inch box jumps" -> "box jumps"
MEASUREMENT_PATTERN = re.compile(r"\d+(?:\.\d+)?\s*(?:inch(?:es)?\b|in\b|\")", re.IGNORECASE)
_VEST = re.compile(r"\bvest\b", re.IGNORECASE)
_IMPLEMENTS: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"\b(?:kettlebells?|kbs?)\b", re.IGNORECASE), Implement.KETTLEBELL.value),
    (re.compile(r"\b(?:dumbbells?|dbs?)\b", re.IGNORECASE), Implement.DUMBBELL.value),
    (re.compile(r"\b(?:barbell|bb)\b", re.IGNORECASE), Implement.BARBELL.value),
    (re.compile(r"\b(?:sandbag|sb)\b", re.IGNORECASE), Implement.SANDBAG.value),
    (re.compile(r"\b(?:medicine\s*ball|med\s*ball|mb)\b", re.IGNORECASE), Implement.MEDICINE_BALL.value),
    (_VEST, Implement.BODYWEIGHT.value),
)

_PARENTHETICAL = re.compile(r"\(([^)]*)\)")
# A load phrase with the implement word that follows it: "2x 50lb DB", "48kg KB"
_IMPLEMENT_WORDS = r"(?:\s*(?:kettlebells?|kbs?|dumbbells?|dbs?|barbells?|bb|sandbags?|sb|medicine\s*balls?|mb|vest)\b)?"
PAIRED_LOAD_PHRASE = re.compile(PAIRED_LOAD_PATTERN.pattern + _IMPLEMENT_WORDS, re.IGNORECASE)
AMOUNT_LOAD_PHRASE = re.compile(AMOUNT_LOAD_PATTERN.pattern + _IMPLEMENT_WORDS, re.IGNORECASE)
_LOAD_FILLER = re.compile(r"(?:@|\bat\b|\bwith\b|\busing\b)\s*(?:an?\b)?\s*$", re.IGNORECASE)
_TRAILING_PUNCT = re.compile(r"[\s,;:.\-]+$")
_LEADING_PUNCT = re.compile(r"^[\s,;:.\-]+")


@dataclass(frozen=True)
class QuantityMatch:
    """A quantity plus the movement-name candidate left over."""
    quantity: Quantity
    tail: str
    sets: Optional[int] = None
    grammar: str = ""


def _quantity_from_unit(value: float, unit: str) -> Quantity:
    unit = unit.lower()
    number = to_number(str(value))
    if unit.startswith("k"):
        return Quantity(type=QuantityType.METERS, value=to_number(str(value * 1000)))
    if unit.startswith("cal"):
        return Quantity(type=QuantityType.CALORIES, value=number)
    if unit.startswith("min"):
        return Quantity(type=QuantityType.MINUTES, value=number)
    if unit.startswith("m"):
        return Quantity(type=QuantityType.METERS, value=number)
    return Quantity(type=QuantityType.SECONDS, value=number)


def _clean_tail(tail: str) -> str:
    tail = _TRAILING_PUNCT.sub("", tail)
    return _LEADING_PUNCT.sub("", tail).strip()


def parse_quantity_first(text: str) -> Optional[QuantityMatch]:
    """'400m Row' -> (400 meters, 'Row'); '1:30 plank' -> (90 seconds, 'plank')."""
    m = QUANTITY_FIRST_PATTERN.match(text)
    if m:
        quantity = _quantity_from_unit(float(m.group("value")), m.group("unit"))
        return QuantityMatch(quantity=quantity, tail=_clean_tail(m.group("tail")), grammar="quantity_first")
    m = CLOCK_FIRST_PATTERN.match(text)
    if m:
        seconds = clock_to_seconds(m.group("clock"))
        if seconds:
            quantity = Quantity(type=QuantityType.SECONDS, value=seconds)
            return QuantityMatch(quantity=quantity, tail=_clean_tail(m.group("tail")), grammar="quantity_first")
    return None


def parse_reps_first(text: str) -> Optional[QuantityMatch]:
    """'20 Wall Balls' -> (20 reps, 'Wall Balls'); '10-12 push-ups' -> (12 reps, 'push-ups')."""
    m = REPS_FIRST_PATTERN.match(text)
    if m:
        value = to_int(m.group("value"))
    else:
        m = REP_RANGE_FIRST_PATTERN.match(text)
        if not m:
            return None
        value = upper_from_range(m.group("range"))
        if _QUANTITY_UNIT_HEAD.match(m.group("tail")):
            return None
    tail = _clean_tail(m.group("tail"))
    if value is None or not re.search(r"[a-z]", tail, re.IGNORECASE) or _LOAD_UNIT_HEAD.match(tail):
        return None
    quantity = Quantity(type=QuantityType.REPS, value=value)
    return QuantityMatch(quantity=quantity, tail=tail, grammar="reps_first")


def parse_sets_first(text: str) -> Optional[QuantityMatch]:
    """'3x10 Push-ups' -> (3 sets, 10 reps); '5 x 400m Row' -> (5 sets, 400 meters)."""
    m = SETS_PREFIX_PATTERN.match(text) or SETS_OF_PATTERN.match(text)
    if not m:
        return None
    rest = text[m.end():]
    inner = parse_quantity_first(rest) or parse_reps_first(rest)
    if inner is None:
        return None
    return QuantityMatch(quantity=inner.quantity, tail=inner.tail, sets=to_int(m.group("sets")) or None, grammar="sets_first")


def parse_name_first(text: str) -> Optional[QuantityMatch]:
    """'Push-ups 3x10', 'Plank 60 sec', 'Run 400 meters', 'Burpees x 20', 'Plank 1:00'."""
    m = NAME_SETS_REPS_PATTERN.match(text)
    if m:
        quantity = Quantity(type=QuantityType.REPS, value=to_int(m.group("reps")))
        return QuantityMatch(
            quantity=quantity,
            tail=_clean_tail(m.group("tail")),
            sets=to_int(m.group("sets")) or None,
            grammar="name_first",
        )
    m = NAME_QUANTITY_PATTERN.match(text)
    if m:
        if m.group("reps"):
            quantity = Quantity(type=QuantityType.REPS, value=to_number(m.group("value")))
        else:
            quantity = _quantity_from_unit(float(m.group("value")), m.group("unit"))
        return QuantityMatch(quantity=quantity, tail=_clean_tail(m.group("tail")), grammar="name_first")
    m = NAME_TIMES_PATTERN.match(text)
    if m:
        quantity = Quantity(type=QuantityType.REPS, value=to_int(m.group("value")))
        return QuantityMatch(quantity=quantity, tail=_clean_tail(m.group("tail")), grammar="name_first")
    m = NAME_CLOCK_PATTERN.match(text)
    if m:
        seconds = clock_to_seconds(m.group("clock"))
        if seconds:
            quantity = Quantity(type=QuantityType.SECONDS, value=seconds)
            return QuantityMatch(quantity=quantity, tail=_clean_tail(m.group("tail")), grammar="name_first")
    return None


# Grammar order: sets notation, quantity-first, reps-first, then name-first forms
QUANTITY_GRAMMARS: Tuple[Callable[[str], Optional[QuantityMatch]], ...] = (
    parse_sets_first,
    parse_quantity_first,
    parse_reps_first,
    parse_name_first,
)


def extract_quantity(text: str) -> Optional[QuantityMatch]:
    """Try each grammar in order on a cleaned line; first match wins."""
    text = (text or "").strip()
    if not text:
        return None
    for grammar in QUANTITY_GRAMMARS:
        match = grammar(text)
        if match is not None and match.tail:
            return match
    return None


def _detect_implement(text: str) -> Optional[str]:
    for pattern, implement in _IMPLEMENTS:
        if pattern.search(text):
            return implement
    return None


def _load_unit(unit: str) -> str:
    return "kg" if unit.lower().startswith("k") else "lb"


def extract_load(text: str) -> Optional[Load]:
    """
    Find a load anywhere in the line.

    Examples:
        "2x 50lb DB"        -> paired_count=2, amount=50, unit=lb, implement=DB
        "Using a 48kg KB"   -> amount=48, unit=kg, implement=KB
        "20lb vest"         -> amount=20, unit=lb, implement=bodyweight
        "24 inch box"       -> freeform="24 inch box"
    """
    if not text:
        return None
    implement = _detect_implement(text)

    m = PAIRED_LOAD_PATTERN.search(text)
    if m and to_number(m.group("amount")):
        return Load(
            paired_count=to_int(m.group("count")) or None,
            amount=to_number(m.group("amount")),
            unit=_load_unit(m.group("unit")),
            implement=implement,
        )
    m = AMOUNT_LOAD_PATTERN.search(text)
    if m and to_number(m.group("amount")):
        return Load(
            amount=to_number(m.group("amount")),
            unit=_load_unit(m.group("unit")),
            implement=implement,
        )
    if _VEST.search(text):
        return Load(implement=Implement.BODYWEIGHT.value, freeform=text.strip())
    m = FREEFORM_LOAD_PATTERN.search(text)
    if m:
        return Load(freeform=m.group(0).strip())
    return None


def strip_load_text(text: str, keep_object: bool = False) -> str:
    """
    Remove load phrases from a name candidate: 'Thrusters (2x 50lb DB)' -> 'Thrusters'.

    With keep_object, a freeform measurement loses only its number and unit,
    so '24 inch box jumps' keeps 'box jumps'.
    """

    def _drop_parenthetical(m: re.Match) -> str:
        return " " if extract_load(m.group(1)) else m.group(0)

    text = _PARENTHETICAL.sub(_drop_parenthetical, text)
    text = PAIRED_LOAD_PHRASE.sub(" ", text)
    text = AMOUNT_LOAD_PHRASE.sub(" ", text)
    text = (MEASUREMENT_PATTERN if keep_object else FREEFORM_LOAD_PATTERN).sub(" ", text)
    text = re.sub(r"\s+", " ", text).strip()
    text = _LOAD_FILLER.sub("", text)
    return _clean_tail(text)
