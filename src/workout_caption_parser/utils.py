"""Utility functions."""
from typing import Optional, Union


def to_int(s: Optional[str]) -> Optional[int]:
    """Convert string to int, returning None if conversion fails."""
    try:
        return int(s) if s is not None else None
    except (TypeError, ValueError):
        return None


def upper_from_range(txt: str) -> Optional[int]:
    """Extract upper bound from a range string like '10-12'."""
    try:
        a, b = txt.replace("–", "-").split("-", 1)
        return int(b.strip())
    except (AttributeError, ValueError):
        return None


def to_number(s: Optional[str]) -> Optional[Union[int, float]]:
    """Convert '12' to 12 and '2.5' to 2.5, returning None if conversion fails."""
    if s is None:
        return None
    try:
        value = float(s)
    except (TypeError, ValueError):
        return None
    return int(value) if value.is_integer() else value


def format_number(value: Union[int, float]) -> str:
    """Render 400.0 as '400' and 2.5 as '2.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def time_to_seconds(value: Union[int, float], unit: str) -> int:
    """Convert a value in seconds or minutes ('s', 'sec', 'min', 'minutes'...) to seconds."""
    unit = unit.lower().strip()
    if unit.startswith("m"):
        return int(round(value * 60))
    return int(round(value))


def clock_to_seconds(txt: str) -> Optional[int]:
    """Convert 'MM:SS' or 'HH:MM:SS' to seconds."""
    try:
        parts = [int(p) for p in txt.strip().split(":")]
    except ValueError:
        return None
    if len(parts) == 2:
        minutes, seconds = parts
        return minutes * 60 + seconds
    if len(parts) == 3:
        hours, minutes, seconds = parts
        return hours * 3600 + minutes * 60 + seconds
    return None
