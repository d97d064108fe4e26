"""
Line Normalizer

Strips caption decoration (emoji, bullets, keycap numbers, hashtags,
mentions), unifies quotes, dashes and multiplication signs, and lowercases
a matching copy. The original line is always kept for display.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import List

# Quotes and dashes
_SINGLE_QUOTES = re.compile(r"[‘’‛`´]")
_DOUBLE_QUOTES = re.compile(r"[“”„″]")
_DASHES = re.compile(r"[‐-―−]")
_TIMES = re.compile(r"[×✕✖]")

# "1️⃣" style numbered bullets: digit + optional VS16 + combining keycap
_KEYCAP = re.compile(r"[0-9#*]\ufe0f?\u20e3")
_BULLETS = re.compile(r"[•·▪▫◦●○■□►▶→➜➡⇒✓✔☐☑]")
# Hashtags and mentions; "@100kg" is a load, not a mention
_TAGS = re.compile(r"(?<![\w/])(?:#[\w.-]+|@(?!\d)[\w.-]+)")
_LIST_MARKER = re.compile(r"^(?:[-*>]+|\d{1,2}[.)])\s+")
_WHITESPACE = re.compile(r"\s+")

# Unicode categories dropped from the normalized copy (emoji, symbols, controls)
_DROPPED_CATEGORIES = {"So", "Sk", "Cc", "Cf", "Co", "Cs", "Me"}
_VARIATION_SELECTORS = {"\ufe0e", "\ufe0f"}

_DECORATIVE = re.compile(r"^[\W_]*$")


@dataclass(frozen=True)
class NormalizedLine:
    """One caption line in three forms."""
    raw: str      # untouched original
    display: str  # decoration stripped, original case
    text: str     # display lowercased, used for matching

    @property
    def is_decorative(self) -> bool:
        return bool(_DECORATIVE.match(self.text))


def _drop_symbols(text: str) -> str:
    return "".join(
        " " if unicodedata.category(ch) in _DROPPED_CATEGORIES or ch in _VARIATION_SELECTORS else ch
        for ch in text
    )


def clean_display(text: str) -> str:
    """Strip decoration but keep case: '✅ 40 Seconds Work' -> '40 Seconds Work'."""
    text = _SINGLE_QUOTES.sub("'", text)
    text = _DOUBLE_QUOTES.sub('"', text)
    text = _DASHES.sub("-", text)
    text = _TIMES.sub("x", text)
    text = _KEYCAP.sub(" ", text)
    text = _BULLETS.sub(" ", text)
    text = _drop_symbols(text)
    text = _TAGS.sub(" ", text)
    text = _WHITESPACE.sub(" ", text).strip()
    text = _LIST_MARKER.sub("", text)
    return text.strip()


def normalize_line(raw: str) -> NormalizedLine:
    display = clean_display(raw)
    return NormalizedLine(raw=raw, display=display, text=display.lower())


def normalize_text(text: str) -> str:
    """Normalize a whole caption into one lowercased, newline-joined string."""
    return "\n".join(line.text for line in split_lines(text))


def split_lines(text: str) -> List[NormalizedLine]:
    """Split a caption into normalized lines, skipping blank ones."""
    lines = []
    for raw in re.split(r"\r?\n", text or ""):
        raw = raw.strip()
        if raw:
            lines.append(normalize_line(raw))
    return lines
