"""
Test fixtures for workout-caption-parser.

Puts src/ on sys.path and provides FastAPI test clients plus the sample
captions shared across parser tests.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Repo root: .../workout-caption-parser
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_caption_parser...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from workout_caption_parser.main import app
from workout_caption_parser.glossary import get_reference_index


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def api_client() -> TestClient:
    """Shared FastAPI TestClient for workout-caption-parser."""
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient (for tests needing fresh state)."""
    return TestClient(app)


@pytest.fixture(scope="session")
def index():
    """Process-wide reference index built from the bundled glossary."""
    return get_reference_index()


# ---------------------------------------------------------------------------
# Sample Captions
# ---------------------------------------------------------------------------


@pytest.fixture
def e4mom_caption() -> str:
    """Three-block hybrid conditioning caption with preamble structure."""
    return """
Push hard + earn that rest 🔥
Hybrid conditioning at its best

Every 4 minutes × 5 rounds per block
✅ Complete the work
✅ Rest the remainder
⏱ 1 min rest between blocks

Block 1 4 min, 5 times through
• 400m Row
• 20 KB Gorilla Row
• 10 Devil's Press

Block 2 4 min, 5 times through
• 400m Ski
• 20 Wall Balls
• 10 Burpee to Plate

Block 3 4 min, 5 times through
• 800m Bike
• 20 Sandbag Lunges
• 10 Full KB Swings
"""


@pytest.fixture
def interval_caption() -> str:
    """Keycap-numbered interval circuit without an explicit format word."""
    return """
1️⃣ DUMBBELL HOPS
2️⃣ SINGLE ARM OH LUNGE
3️⃣ BURPEE CLEAN
4️⃣ OFFSET SQUAT
5️⃣ DRAGS
6️⃣ LATERAL LUNGE TO PULL

✅ 40 seconds work / 20 seconds rest
✅ Complete 4 sets
"""


@pytest.fixture
def simple_caption() -> str:
    return "3x10 Push-ups\nRest 60s\n3x10 Squats"
