"""Unit tests for the work/rest interval timeline."""
from workout_caption_parser.services.caption_parser import parse_workout_ast
from workout_caption_parser.services.timeline_builder import build_interval_timeline


class TestIntervalTimeline:

    def test_interval_circuit(self, interval_caption):
        timeline = build_interval_timeline(parse_workout_ast(interval_caption))
        assert len(timeline.steps) == 48
        assert timeline.totals.work_seconds == 960
        assert timeline.totals.rest_seconds == 480
        assert timeline.totals.total_seconds == 1440

        work, rest = timeline.steps[0], timeline.steps[1]
        assert work.phase == "work"
        assert work.exercise_name == "DUMBBELL HOPS"
        assert work.seconds == 40
        assert work.round == 1
        assert work.sequence_index == 1
        assert rest.phase == "rest"
        assert rest.seconds == 20
        assert rest.exercise_name is None

    def test_last_step(self, interval_caption):
        last = build_interval_timeline(parse_workout_ast(interval_caption)).steps[-1]
        assert last.round == 4
        assert last.sequence_index == 6
        assert last.phase == "rest"

    def test_tabata(self):
        timeline = build_interval_timeline(parse_workout_ast("Tabata\nAir squats"))
        assert len(timeline.steps) == 16
        assert timeline.totals.work_seconds == 160
        assert timeline.totals.rest_seconds == 80

    def test_timed_movements_without_interval(self):
        timeline = build_interval_timeline(parse_workout_ast("3 rounds\n60 sec plank\n30 sec hollow hold"))
        assert len(timeline.steps) == 6
        assert all(step.phase == "work" for step in timeline.steps)
        assert [s.exercise_name for s in timeline.steps[:2]] == ["Plank", "Hollow Hold"]
        assert timeline.totals.work_seconds == 270
        assert timeline.totals.rest_seconds == 0

    def test_untimed_movements_are_skipped(self):
        timeline = build_interval_timeline(parse_workout_ast("10 Burpees\n2 min plank"))
        assert len(timeline.steps) == 1
        assert timeline.steps[0].seconds == 120

    def test_empty_workout(self):
        timeline = build_interval_timeline(parse_workout_ast(""))
        assert timeline.steps == []
        assert timeline.totals.total_seconds == 0

    def test_idempotent(self, interval_caption):
        ast = parse_workout_ast(interval_caption)
        assert build_interval_timeline(ast) == build_interval_timeline(ast)
