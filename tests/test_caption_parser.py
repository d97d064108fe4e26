"""Tests for the caption parsing pipeline and its boundary errors."""
import pytest
from pydantic import ValidationError

from workout_caption_parser.config import settings
from workout_caption_parser.models import ModeKind, Provenance
from workout_caption_parser.services.caption_parser import (
    CaptionParserError,
    CaptionTooLongError,
    InvalidProvenanceError,
    coerce_provenance,
    extract_global_facts,
    infer_platform,
    parse_caption,
    parse_workout_ast,
)


class TestParseWorkoutAst:
    """End-to-end AST construction."""

    def test_e4mom_caption(self, e4mom_caption):
        ast = parse_workout_ast(e4mom_caption)
        assert len(ast.blocks) == 4
        assert len(ast.movements()) == 9
        assert ast.confidence == 0.99
        assert ast.unresolved_terms == []
        assert len(ast.glossary_hits) == 9
        assert ast.blocks[1].mode.kind == ModeKind.E_N_MOM

    def test_interval_caption(self, interval_caption):
        ast = parse_workout_ast(interval_caption)
        assert len(ast.blocks) == 1
        assert ast.confidence == 0.66
        assert ast.glossary_hits == []
        assert ast.unresolved_terms[0] == "DUMBBELL HOPS"
        assert len(ast.unresolved_terms) == 6

    def test_simple_caption(self, simple_caption):
        ast = parse_workout_ast(simple_caption)
        assert ast.scoring is None
        assert ast.glossary_hits == ["Push-Up", "Squat"]
        assert ast.confidence == 0.62

    @pytest.mark.parametrize("text", [None, 123, "", "   \n\n", "🔥🔥🔥"])
    def test_empty_or_non_string_input(self, text):
        ast = parse_workout_ast(text)
        assert len(ast.blocks) == 1
        assert ast.blocks[0].sequence == []
        assert ast.confidence == 0.3

    def test_title(self):
        assert parse_workout_ast("10 Burpees", title="  Friday Burner ").title == "Friday Burner"
        assert parse_workout_ast("10 Burpees", title="   ").title is None

    def test_global_facts(self):
        text = "For time\n50 Burpees\nTime cap: 12 min\n(M) Rx: 50lb\n(F) Rx: 35lb"
        ast = parse_workout_ast(text)
        assert ast.scoring == "time"
        assert ast.cap_seconds == 720
        assert ast.scaling.male.load == "50lb"
        assert ast.scaling.female.load == "35lb"
        assert [mv.canonical_name for mv in ast.movements()] == ["Burpee"]

    def test_amrap_scoring(self):
        assert parse_workout_ast("AMRAP 20\n10 Burpees").scoring == "rounds"

    def test_at_load_survives_cleanup(self):
        mv = parse_workout_ast("Deadlift 5x5 @100kg").movements()[0]
        assert mv.canonical_name == "Deadlift"
        assert mv.sets == 5
        assert mv.load.amount == 100
        assert mv.load.unit == "kg"
        assert mv.raw_text == "Deadlift 5x5 @100kg"

    def test_ast_is_frozen(self, simple_caption):
        ast = parse_workout_ast(simple_caption)
        with pytest.raises(ValidationError):
            ast.title = "changed"


class TestGlobalFacts:

    def test_no_facts(self):
        assert extract_global_facts("10 burpees", "10 Burpees") == (None, None, None)

    def test_cap_in_seconds(self):
        _, cap, _ = extract_global_facts("time cap 90 sec", "Time cap 90 sec")
        assert cap == 90

    def test_box_scaling(self):
        _, _, scaling = extract_global_facts("", "(M) Vest: 20lb\n(F) Vest: 14lb")
        assert scaling.male.box == "20lb"
        assert scaling.female.box == "14lb"
        assert scaling.male.load is None


class TestProvenance:

    @pytest.mark.parametrize("url,platform", [
        ("https://www.instagram.com/p/abc123/", "instagram"),
        ("https://instagr.am/p/abc123/", "instagram"),
        ("https://www.tiktok.com/@coach/video/1", "tiktok"),
        ("https://youtu.be/dQw4w9WgXcQ", "youtube"),
        ("https://m.youtube.com/shorts/abc", "youtube"),
        ("https://fb.watch/xyz/", "facebook"),
        ("youtube.com/watch?v=abc", "youtube"),
        ("https://example.com/workout", "unknown"),
        ("", "unknown"),
        (None, "unknown"),
    ])
    def test_infer_platform(self, url, platform):
        assert infer_platform(url) == platform

    def test_platform_filled_from_url(self):
        provenance = coerce_provenance({"source_url": "https://www.tiktok.com/@coach/video/1"})
        assert provenance.platform == "tiktok"

    def test_explicit_platform_kept(self):
        provenance = coerce_provenance({"platform": "instagram", "source_url": "https://example.com"})
        assert provenance.platform == "instagram"

    def test_none_is_empty(self):
        assert coerce_provenance(None) == Provenance()

    @pytest.mark.parametrize("provenance", [
        {"platform": "myspace"},
        {"source_url": "https://x.com/" + "a" * 3000},
        {"unexpected": "field"},
        "instagram",
    ])
    def test_invalid_provenance(self, provenance):
        with pytest.raises(InvalidProvenanceError):
            parse_workout_ast("10 Burpees", provenance=provenance)

    def test_provenance_on_ast(self):
        ast = parse_workout_ast("10 Burpees", provenance={"source_url": "https://youtu.be/abc"})
        assert ast.provenance.platform == "youtube"
        assert ast.provenance.source_url == "https://youtu.be/abc"


class TestParseCaption:
    """Full result with derived views."""

    def test_result_views(self, e4mom_caption):
        result = parse_caption(e4mom_caption)
        assert len(result.rows) == 45
        assert len(result.steps) == 50
        assert result.summary.total_time_seconds == 3720
        assert result.summary.confidence.overall == result.ast.confidence

    def test_too_long(self, monkeypatch):
        monkeypatch.setattr(settings, "MAX_CAPTION_CHARS", 20)
        with pytest.raises(CaptionTooLongError):
            parse_caption("10 Burpees\n" * 5)

    def test_errors_share_a_base(self):
        assert issubclass(CaptionTooLongError, CaptionParserError)
        assert issubclass(InvalidProvenanceError, CaptionParserError)
        assert issubclass(CaptionParserError, RuntimeError)

    def test_non_string_input(self):
        result = parse_caption(None)
        assert result.rows == []
        assert result.steps == []
        assert result.summary.caption_excerpt is None
