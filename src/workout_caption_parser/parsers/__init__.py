"""Caption parsing stages: normalize, extract, detect, resolve, assemble, score."""
from .assembler import AssemblyResult, assemble, rule_names
from .confidence import score_confidence
from .extractors import extract_load, extract_quantity
from .mode_detector import ModeMatch, detect_mode
from .movement_resolver import build_movement, resolve_movement_name
from .normalizer import NormalizedLine, normalize_line, normalize_text, split_lines

__all__ = [
    "AssemblyResult",
    "ModeMatch",
    "NormalizedLine",
    "assemble",
    "build_movement",
    "detect_mode",
    "extract_load",
    "extract_quantity",
    "normalize_line",
    "normalize_text",
    "resolve_movement_name",
    "rule_names",
    "score_confidence",
    "split_lines",
]
