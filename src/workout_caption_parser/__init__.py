"""Parse free-text workout captions into structured, block-aware workouts."""

__version__ = "0.1.0"
