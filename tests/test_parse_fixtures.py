"""
Parameterized fixture-based tests for the caption parser.

Loads YAML fixture files from tests/fixtures/parse_scenarios/ and runs each
through parse_caption(), asserting against the expected output defined in
the fixture.
"""

import yaml
import pytest
from pathlib import Path

from workout_caption_parser.services.caption_parser import parse_caption
from workout_caption_parser.services.timeline_builder import build_interval_timeline

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "parse_scenarios"


def load_fixtures():
    fixtures = []
    for f in sorted(FIXTURES_DIR.glob("*.yaml")):
        with open(f, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
            data["_file"] = f.name
            fixtures.append(data)
    return fixtures


@pytest.mark.parametrize("fixture", load_fixtures(), ids=lambda f: f["_file"])
def test_parse_scenario(fixture):
    result = parse_caption(fixture["input"], title=fixture.get("title"))
    ast = result.ast
    expected = fixture["expected"]

    # Check overall shape
    movements = ast.movements()
    if "block_count" in expected:
        assert len(ast.blocks) == expected["block_count"], (
            f"Expected {expected['block_count']} blocks, got {len(ast.blocks)}"
        )
    if "movement_count" in expected:
        assert len(movements) == expected["movement_count"], (
            f"Expected {expected['movement_count']} movements, got {len(movements)}. "
            f"Movements: {[mv.canonical_name for mv in movements]}"
        )
    if "row_count" in expected:
        assert len(result.rows) == expected["row_count"]
    if "step_count" in expected:
        assert len(result.steps) == expected["step_count"]
    for key in ("scoring", "cap_seconds"):
        if key in expected:
            assert getattr(ast, key) == expected[key], f"{key}: got {getattr(ast, key)!r}"
    if "confidence" in expected:
        assert ast.confidence == pytest.approx(expected["confidence"])
    if "total_time_seconds" in expected:
        assert result.summary.total_time_seconds == expected["total_time_seconds"]
    if "timeline_total_seconds" in expected:
        assert build_interval_timeline(ast).totals.total_seconds == expected["timeline_total_seconds"]

    # Check block structure
    for i, exp_block in enumerate(expected.get("blocks", [])):
        assert i < len(ast.blocks), (
            f"Expected block {i} but workout only has {len(ast.blocks)} blocks"
        )
        block = ast.blocks[i]

        if "title" in exp_block:
            assert block.title == exp_block["title"]
        if "mode" in exp_block:
            actual_mode = block.mode.kind.value if block.mode else None
            assert actual_mode == exp_block["mode"], f"Block {i}: expected mode {exp_block['mode']}, got {actual_mode}"
        if "window_seconds" in exp_block:
            assert block.mode.window_seconds == exp_block["window_seconds"]
        if "rounds" in exp_block:
            assert block.effective_rounds == exp_block["rounds"], (
                f"Block {i}: expected {exp_block['rounds']} rounds, got {block.effective_rounds}"
            )
        if "ladder_scheme" in exp_block:
            assert block.ladder_scheme == exp_block["ladder_scheme"]
        if "movements" in exp_block:
            names = [mv.canonical_name for mv in block.sequence]
            assert names == exp_block["movements"], f"Block {i}: got {names}"

    # Check individual movements
    for i, exp_mv in enumerate(expected.get("movement_details", [])):
        actual = movements[i]
        if "name" in exp_mv:
            assert actual.canonical_name == exp_mv["name"]
        if "quantity_type" in exp_mv:
            assert actual.quantity.type.value == exp_mv["quantity_type"]
        if "quantity_value" in exp_mv:
            assert actual.quantity.value == exp_mv["quantity_value"]
        if "sets" in exp_mv:
            assert actual.sets == exp_mv["sets"]
        if "load" in exp_mv:
            assert actual.load is not None, f"Movement {i} ({actual.canonical_name}): expected a load"
            assert actual.load.display() == exp_mv["load"]
