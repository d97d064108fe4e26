"""Unit tests for round-by-round row expansion."""
from workout_caption_parser.models import Block, Movement, PerRoundInsert, WorkoutAST
from workout_caption_parser.services.caption_parser import parse_workout_ast
from workout_caption_parser.services.row_expander import expand_rows


class TestExpandRows:
    """One row per (block, round, movement), plus insert rows."""

    def test_e4mom_row_count(self, e4mom_caption):
        rows = expand_rows(parse_workout_ast(e4mom_caption))
        assert len(rows) == 45
        first = rows[0]
        assert first.block == "Block 1 4 min, 5 times through"
        assert first.round == 1
        assert first.movement == "Row"
        assert first.quantity_text == "400 m"

    def test_round_major_order(self, e4mom_caption):
        rows = expand_rows(parse_workout_ast(e4mom_caption))
        block_one = [r for r in rows if r.block.startswith("Block 1")]
        assert [(r.round, r.movement) for r in block_one[:4]] == [
            (1, "Row"),
            (1, "Kettlebell Gorilla Row"),
            (1, "Devil Press"),
            (2, "Row"),
        ]

    def test_interval_rows_use_work_time(self, interval_caption):
        rows = expand_rows(parse_workout_ast(interval_caption))
        assert len(rows) == 24
        assert {r.quantity_text for r in rows} == {"40 sec"}
        assert {r.block for r in rows} == {"Block 1"}
        assert rows[-1].round == 4
        assert rows[-1].movement == "LATERAL LUNGE TO PULL"

    def test_per_round_inserts(self):
        ast = parse_workout_ast("10 rounds\n10 Burpees\nEvery 5 rounds run 400 meters")
        rows = expand_rows(ast)
        assert len(rows) == 12
        inserts = [r for r in rows if r.movement == "Run"]
        assert [r.round for r in inserts] == [5, 10]
        round_five = [r.movement for r in rows if r.round == 5]
        assert round_five == ["Burpee", "Run"]

    def test_insert_every_larger_than_rounds(self):
        block = Block(
            rounds=3,
            sequence=[Movement(canonical_name="Burpee", raw_text="Burpees")],
            per_round_inserts=[PerRoundInsert(every=5, movement=Movement(canonical_name="Run", raw_text="run"))],
        )
        rows = expand_rows(WorkoutAST(blocks=[block]))
        assert [r.movement for r in rows] == ["Burpee"] * 3

    def test_ladder_reps(self):
        rows = expand_rows(parse_workout_ast("21-15-9\nThrusters\nPull-ups"))
        assert len(rows) == 6
        assert [r.quantity_text for r in rows if r.movement == "Thruster"] == ["21 reps", "15 reps", "9 reps"]

    def test_load_and_sets_carried(self):
        rows = expand_rows(parse_workout_ast("10 Thrusters (2x 50lb DB)\n3x10 Push-ups"))
        assert rows[0].load_text == "2x 50lb DB"
        assert rows[0].quantity_text == "10 reps"
        assert rows[1].sets == 3
        assert rows[1].raw_text == "3x10 Push-ups"

    def test_empty_workout(self):
        assert expand_rows(parse_workout_ast("")) == []

    def test_idempotent(self, e4mom_caption):
        ast = parse_workout_ast(e4mom_caption)
        assert expand_rows(ast) == expand_rows(ast)
