"""Unit tests for block assembly over normalized caption lines."""
import pytest

from workout_caption_parser.models import ModeKind
from workout_caption_parser.parsers.assembler import assemble, rule_names
from workout_caption_parser.parsers.normalizer import split_lines


def _assemble(text, index):
    return assemble(split_lines(text), index)


def _names(block):
    return [mv.canonical_name for mv in block.sequence]


def test_rule_order():
    assert rule_names() == [
        "block_header",
        "mode",
        "rest_between_blocks",
        "rest_between_rounds",
        "per_round_insert",
        "interval",
        "complete_sets",
        "rep_scheme",
        "bare_rounds",
        "time_cap",
        "scaling",
        "format_term",
        "standalone_rest",
        "instruction",
        "movement",
    ]


class TestHeaderedBlocks:
    """Block headers, preamble structure and inheritance."""

    def test_e4mom_caption_blocks(self, e4mom_caption, index):
        result = _assemble(e4mom_caption, index)
        preamble, *blocks = result.blocks

        assert len(blocks) == 3
        assert preamble.sequence == []
        assert preamble.mode.kind == ModeKind.E_N_MOM
        assert preamble.rest_between_blocks_seconds == 60

        assert [b.title for b in blocks] == [
            "Block 1 4 min, 5 times through",
            "Block 2 4 min, 5 times through",
            "Block 3 4 min, 5 times through",
        ]
        assert _names(blocks[0]) == ["Row", "Kettlebell Gorilla Row", "Devil Press"]
        assert _names(blocks[1]) == ["SkiErg", "Wall Ball", "Burpee"]
        assert _names(blocks[2]) == ["Bike", "Sandbag Lunge", "Kettlebell Swing"]

    def test_e4mom_block_structure(self, e4mom_caption, index):
        blocks = _assemble(e4mom_caption, index).blocks[1:]
        for block in blocks:
            assert block.mode.kind == ModeKind.E_N_MOM
            assert block.mode.window_seconds == 240
            assert block.mode.rounds == 5
            assert block.rounds == 5
            assert block.rest_between_blocks_seconds == 60

    def test_e4mom_commentary_goes_to_notes(self, e4mom_caption, index):
        notes = _assemble(e4mom_caption, index).notes
        assert notes == [
            "Push hard + earn that rest",
            "Hybrid conditioning at its best",
            "Complete the work",
            "Rest the remainder",
        ]

    def test_header_params_through_mode_detection(self, index):
        blocks = _assemble("Block 1: 12 min AMRAP\n10 Burpees", index).blocks
        block = blocks[-1]
        assert block.mode.kind == ModeKind.AMRAP
        assert block.mode.window_seconds == 720
        assert _names(block) == ["Burpee"]

    def test_declared_mode_not_overwritten_by_preamble(self, index):
        text = "EMOM 10\nBlock 1\n5 Pull-ups\nBlock 2 12 min AMRAP\n10 Burpees"
        preamble, first, second = _assemble(text, index).blocks
        assert preamble.mode.kind == ModeKind.EMOM
        assert first.mode.kind == ModeKind.EMOM
        assert second.mode.kind == ModeKind.AMRAP

    def test_titled_preamble_is_not_a_default(self, index):
        text = "Finisher\n3 rounds\nBlock 1\n10 Burpees"
        first, second = _assemble(text, index).blocks
        assert first.title == "Finisher"
        assert second.mode is None


class TestSingleBlockStructure:
    """Intervals, rounds and rest inside one block."""

    def test_interval_circuit(self, interval_caption, index):
        result = _assemble(interval_caption, index)
        assert len(result.blocks) == 1
        block = result.blocks[0]
        assert _names(block) == [
            "DUMBBELL HOPS",
            "SINGLE ARM OH LUNGE",
            "BURPEE CLEAN",
            "OFFSET SQUAT",
            "DRAGS",
            "LATERAL LUNGE TO PULL",
        ]
        assert block.mode.kind == ModeKind.INTERVALS
        assert block.interval.work_seconds == 40
        assert block.interval.rest_seconds == 20
        assert block.rounds == 4
        assert block.effective_rounds == 4

    def test_interval_keeps_declared_rounds(self, index):
        block = _assemble("EMOM 12\n30s on / 30s off\n10 Burpees", index).blocks[0]
        assert block.mode.kind == ModeKind.INTERVALS
        assert block.mode.rounds == 12
        assert block.interval.work_seconds == 30

    def test_fixed_rounds_does_not_clobber_mode(self, index):
        block = _assemble("EMOM 10\n3 rounds\n10 Burpees", index).blocks[0]
        assert block.mode.kind == ModeKind.EMOM
        assert block.rounds == 10

    def test_bare_rounds_heading(self, index):
        block = _assemble("4 rounds of:\n10 Burpees\n20 Squats", index).blocks[0]
        assert block.mode.kind == ModeKind.FIXED_ROUNDS
        assert block.effective_rounds == 4
        assert _names(block) == ["Burpee", "Squat"]

    def test_rest_between_rounds(self, index):
        block = _assemble("5 rounds\n10 Burpees\nRest 90 seconds between rounds", index).blocks[0]
        assert block.rest_between_rounds_seconds == 90
        assert block.rest_markers == []

    def test_rest_between_rounds_on_rounds_line(self, index):
        block = _assemble("4 rounds, rest 1 min between rounds\n10 Burpees", index).blocks[0]
        assert block.mode.kind == ModeKind.FIXED_ROUNDS
        assert block.rounds == 4
        assert block.rest_between_rounds_seconds == 60
        assert _names(block) == ["Burpee"]

    def test_mode_line_duration_is_not_rest(self, index):
        block = _assemble("10 min AMRAP, rest between rounds as needed\n10 Burpees", index).blocks[0]
        assert block.mode.kind == ModeKind.AMRAP
        assert block.rest_between_rounds_seconds is None

    def test_standalone_rest_marker_position(self, simple_caption, index):
        block = _assemble(simple_caption, index).blocks[0]
        assert _names(block) == ["Push-Up", "Squat"]
        assert len(block.rest_markers) == 1
        marker = block.rest_markers[0]
        assert marker.position == 1
        assert marker.seconds == 60
        assert marker.raw_text == "Rest 60s"

    @pytest.mark.parametrize("line,seconds", [
        ("Rest 2 min", 120),
        ("Rest: 1:30", 90),
        ("90 sec rest", 90),
    ])
    def test_rest_forms(self, index, line, seconds):
        block = _assemble(f"10 Burpees\n{line}", index).blocks[0]
        assert block.rest_markers[0].seconds == seconds

    def test_per_round_insert(self, index):
        block = _assemble("10 rounds\n10 Burpees\nEvery 5 rounds run 400 meters", index).blocks[0]
        assert _names(block) == ["Burpee"]
        assert len(block.per_round_inserts) == 1
        insert = block.per_round_inserts[0]
        assert insert.every == 5
        assert insert.movement.canonical_name == "Run"
        assert insert.movement.quantity.value == 400

    def test_ladder_line(self, index):
        block = _assemble("21-15-9\nThrusters\nPull-ups", index).blocks[0]
        assert block.mode.kind == ModeKind.LADDER
        assert block.ladder_scheme == [21, 15, 9]
        assert block.expansion_rounds == 3
        assert _names(block) == ["Thruster", "Pull-Up"]

    def test_ladder_under_declared_mode(self, index):
        block = _assemble("For time\n21-15-9\nThrusters", index).blocks[0]
        assert block.mode.kind == ModeKind.FOR_TIME
        assert block.ladder_scheme == [21, 15, 9]

    def test_rep_scheme_line(self, index):
        block = _assemble("Rep scheme: 5-4-3\nDeadlift", index).blocks[0]
        assert block.mode.kind == ModeKind.LADDER
        assert block.ladder_scheme == [5, 4, 3]

    def test_complex_line(self, index):
        block = _assemble("5-3-1 complex\nPower Clean", index).blocks[0]
        assert block.mode.kind == ModeKind.COMPLEX
        assert block.ladder_scheme == [5, 3, 1]


class TestConsumedLines:
    """Lines that are recorded elsewhere or kept as notes, never as movements."""

    def test_time_cap_and_scaling_lines(self, index):
        text = "For time\n50 Burpees\nTime cap: 12 min\n(M) Rx: 50lb\n(F) Rx: 35lb"
        result = _assemble(text, index)
        assert _names(result.blocks[0]) == ["Burpee"]

    def test_format_term_titles_empty_block(self, index):
        block = _assemble("Warm-up\n10 Jumping Jacks", index).blocks[0]
        assert block.title == "Warm-up"
        assert _names(block) == ["Jumping Jack"]

    def test_notes_line(self, index):
        result = _assemble("10 Burpees\nNotes: go unbroken", index)
        assert result.notes == ["Notes: go unbroken"]
        assert _names(result.blocks[0]) == ["Burpee"]

    def test_decorative_lines_skipped(self, index):
        result = _assemble("🔥🔥🔥\n-----\n10 Burpees", index)
        assert _names(result.blocks[0]) == ["Burpee"]
        assert result.notes == []


class TestEdgeCases:

    def test_no_lines_yields_one_empty_block(self, index):
        result = assemble([], index)
        assert len(result.blocks) == 1
        assert result.blocks[0].sequence == []

    def test_only_commentary(self, index):
        result = _assemble("This is the best workout of the year for you", index)
        assert len(result.blocks) == 1
        assert result.blocks[0].sequence == []
        assert len(result.notes) == 1

    @pytest.mark.parametrize("text", ["0 rounds\n10 Burpees", "0x10 Push-ups", "Block 1 0 min, 5 times"])
    def test_zero_values_do_not_raise(self, index, text):
        assert _assemble(text, index).blocks
