"""Integration tests for the end-to-end analysis pipeline."""

import json
import tempfile
from pathlib import Path

import pytest

import clause_analysis
from clause_analysis import pipeline as pipeline_module
from clause_analysis.config import AnalysisSettings, ConfigurationManager
from clause_analysis.exceptions import CacheUnavailable
from clause_analysis.models.enums import DocumentType
from clause_analysis.parsers.serialization import AnalysisSerializer
from clause_analysis.performance import AnalysisCache
from clause_analysis.pipeline import ClauseAnalysisPipeline, PipelineConfig


BEST_CLAUSE = (
    "The Client shall pay the Contractor a fee of $5,000 within 30 days. "
    "This Agreement is governed by the laws of California. "
    "Either party may terminate upon 30 days notice."
)
VAGUE_CLAUSE = "maybe something"


@pytest.fixture
def pipeline():
    """Create a pipeline with default configuration."""
    return ClauseAnalysisPipeline()


@pytest.fixture
def uncached_pipeline():
    """Create a pipeline with caching disabled."""
    return ClauseAnalysisPipeline(PipelineConfig(enable_caching=False))


class TestScenarios:
    """End-to-end results for representative clauses."""

    def test_well_drafted_clause(self, uncached_pipeline):
        """Test a clause with every essential element."""
        result = uncached_pipeline.analyze(BEST_CLAUSE)

        assert result.token_count == 30
        assert result.clarity.score == pytest.approx(0.66)
        assert result.enforceability.score == pytest.approx(0.8)
        assert result.risk.score == 0.0
        assert result.completeness.score == 1.0
        assert result.overall_quality == pytest.approx(0.865)
        assert result.state.index == 7
        assert result.state.label == "Sound"

    def test_well_drafted_clause_entities(self, uncached_pipeline):
        """Test the entities found in a full clause."""
        entities = uncached_pipeline.analyze(BEST_CLAUSE).entities

        assert "Client" in entities.parties
        assert "Contractor" in entities.parties
        assert "$5,000" in entities.amounts
        assert "shall pay the Contractor a fee" in entities.obligations

    def test_well_drafted_clause_lexical_profile(self, uncached_pipeline):
        """Test modal families, vagueness, agent-action-patient and tone."""
        result = uncached_pipeline.analyze(BEST_CLAUSE)

        assert result.modal_profile.obligation == 1
        assert result.modal_profile.permission == 1
        assert result.modal_profile.recommendation == 0
        assert result.vagueness.score == 1.0
        assert result.agent_action_patient.agent == "The Client shall"
        assert result.agent_action_patient.action == "pay"
        assert result.agent_action_patient.patient.startswith("the Contractor a fee of")
        assert result.logic.tone == "Preposition wiring: of×2, within×1, by×1, upon×1"

    def test_vague_clause_lexical_profile(self, uncached_pipeline):
        """Test the lexical profile of a clause made of vague words."""
        result = uncached_pipeline.analyze(VAGUE_CLAUSE)

        assert result.vagueness.score == pytest.approx(0.84)
        assert result.vagueness.hits == ("maybe", "something")
        assert result.modal_profile.total == 0
        assert not result.agent_action_patient.found
        assert result.logic.tone == "No preposition wiring detected."

    def test_vague_clause(self, uncached_pipeline):
        """Test a clause with no binding language."""
        result = uncached_pipeline.analyze(VAGUE_CLAUSE)

        assert result.enforceability.score == 0.0
        assert result.risk.score == pytest.approx(0.47)
        assert result.completeness.score == 0.0
        assert result.overall_quality == pytest.approx(0.1458, abs=1e-4)
        assert result.state.index == 4
        assert result.state.label == "Balanced Only"
        assert result.document_type == DocumentType.GENERAL

    def test_empty_clause(self, uncached_pipeline):
        """Test that an empty clause is analysed, not rejected."""
        result = uncached_pipeline.analyze("   ")

        assert result.text == ""
        assert result.token_count == 0
        assert result.clarity.score == 0.0
        assert result.enforceability.score == 0.0
        assert result.risk.score == 0.0
        assert result.completeness.score == 0.0
        assert result.logic.formula == ""
        assert result.entities.total_count == 0
        assert result.rewrite is None

    def test_whitespace_is_normalized(self, uncached_pipeline):
        """Test that runs of whitespace do not change the result."""
        spaced = uncached_pipeline.analyze("The  Client\nshall\tpay.")
        assert spaced.text == "The Client shall pay."

    def test_logic_formula(self, uncached_pipeline):
        """Test that the compiled formula is part of the result."""
        result = uncached_pipeline.analyze("The Client shall pay the fee of the Contractor.")
        assert result.logic.formula == "Of(fee, contractor)"
        assert result.logic.existential_form.startswith("∃ ")

    def test_scores_are_bounded(self, uncached_pipeline):
        """Test that every score lies within [0, 1]."""
        for clause in (BEST_CLAUSE, VAGUE_CLAUSE, "not not not", "§§ ¶ --"):
            result = uncached_pipeline.analyze(clause)
            for score in (result.clarity, result.enforceability,
                          result.risk, result.completeness):
                assert 0.0 <= score.score <= 1.0
            assert 0.0 <= result.overall_quality <= 1.0


class TestRewrite:
    """Tests for rewrite and diff output."""

    def test_without_rewrite(self, uncached_pipeline):
        """Test that rewrite output is omitted by default."""
        result = uncached_pipeline.analyze(BEST_CLAUSE)
        assert result.rewrite is None
        assert result.diff is None
        assert result.diff_html is None

    def test_with_rewrite(self, uncached_pipeline):
        """Test the rewrite, diff and HTML for a permissive modal."""
        result = uncached_pipeline.analyze(BEST_CLAUSE, with_rewrite=True)

        assert result.rewrite.changed
        assert "Either party shall terminate" in result.rewrite.rewritten_text
        assert [t.rule_id for t in result.rewrite.transformations] == ["may_to_shall"]
        assert result.diff.deletions == 1
        assert result.diff.insertions == 1
        assert "<del>may</del> <ins>shall</ins>" in result.diff_html

    def test_diff_reconstructs_both_texts(self, uncached_pipeline):
        """Test that the diff yields the original and the rewrite."""
        result = uncached_pipeline.analyze(
            "The Vendor may use best efforts and unlimited resources.", with_rewrite=True
        )
        assert result.diff.original_text() == result.text
        assert result.diff.rewritten_text() == result.rewrite.rewritten_text

    def test_rules_from_configuration(self):
        """Test that the pipeline rewrites with the configured rules."""
        manager = ConfigurationManager()
        manager.load_rewrite_rules([{
            "id": "forthwith", "pattern": "forthwith",
            "replacement": "within five days", "category": "precision",
            "strength": 0.8,
        }])
        pipeline = ClauseAnalysisPipeline(
            PipelineConfig(enable_caching=False), config_manager=manager
        )

        result = pipeline.analyze("The Buyer may pay forthwith.", with_rewrite=True)

        assert result.rewrite.rewritten_text == "The Buyer may pay within five days."


class TestCaching:
    """Tests for the result cache in front of the pipeline."""

    def test_repeat_is_served_from_cache(self, pipeline):
        """Test that a repeated clause returns the cached result."""
        first = pipeline.analyze(BEST_CLAUSE)
        second = pipeline.analyze(BEST_CLAUSE)

        assert second is first
        stats = pipeline.cache_stats()
        assert stats.hits == 1
        assert stats.misses == 1
        assert stats.size == 1

    def test_normalized_text_shares_key(self, pipeline):
        """Test that whitespace variants hit the same entry."""
        first = pipeline.analyze("The Client shall pay.")
        assert pipeline.analyze("  The Client   shall pay. ") is first

    def test_rewrite_flag_is_part_of_key(self, pipeline):
        """Test that rewrite and plain analyses are cached separately."""
        plain = pipeline.analyze(BEST_CLAUSE)
        rewritten = pipeline.analyze(BEST_CLAUSE, with_rewrite=True)

        assert plain.rewrite is None
        assert rewritten.rewrite is not None
        assert pipeline.cache_stats().size == 2

    def test_cached_result_cannot_be_modified(self, pipeline):
        """Test that callers cannot change a result later served from the cache."""
        first = pipeline.analyze(BEST_CLAUSE, with_rewrite=True)

        with pytest.raises(AttributeError):
            first.rewrite.metrics.clear()
        with pytest.raises(TypeError):
            first.rewrite.metrics["precision"] = None
        with pytest.raises(TypeError):
            first.clarity.breakdown["readability"] = 0.0

        second = pipeline.analyze(BEST_CLAUSE, with_rewrite=True)
        assert second.rewrite.metrics["precision"].count == 1
        assert second.clarity.breakdown["readability"] == 1.0

    def test_cache_bounded_by_settings(self):
        """Test that the cache is sized from the settings."""
        settings = AnalysisSettings(cache_max_size=2)
        pipeline = ClauseAnalysisPipeline(PipelineConfig(settings=settings))

        for clause in ("one", "two", "three"):
            pipeline.analyze(clause)

        stats = pipeline.cache_stats()
        assert stats.size == 2
        assert stats.max_size == 2

    def test_fallback_when_lock_is_held(self):
        """Test that a busy cache falls back to computing the result."""
        cache = AnalysisCache(max_size=10, lock_timeout=0.01)
        pipeline = ClauseAnalysisPipeline(cache=cache)

        cache._lock.acquire()
        try:
            result = pipeline.analyze(BEST_CLAUSE)
        finally:
            cache._lock.release()

        assert result.state.label == "Sound"
        assert cache.size() == 0

    def test_fallback_when_cache_fails(self, monkeypatch):
        """Test that cache errors never reach the caller."""
        pipeline = ClauseAnalysisPipeline()

        def broken(*args, **kwargs):
            raise CacheUnavailable("broken", operation="get")

        monkeypatch.setattr(pipeline.cache, "get", broken)
        monkeypatch.setattr(pipeline.cache, "set", broken)

        assert pipeline.analyze(VAGUE_CLAUSE).state.index == 4

    def test_caching_disabled(self, uncached_pipeline):
        """Test that a pipeline without a cache reports zero counters."""
        uncached_pipeline.analyze(BEST_CLAUSE)
        stats = uncached_pipeline.cache_stats()
        assert stats.total_requests == 0
        assert stats.max_size == 0
        assert uncached_pipeline.warm_cache([BEST_CLAUSE]) == 0

    def test_warm_cache(self, pipeline):
        """Test that warmed clauses are hits on first analysis."""
        added = pipeline.warm_cache([BEST_CLAUSE, VAGUE_CLAUSE, BEST_CLAUSE])
        assert added == 2

        pipeline.analyze(VAGUE_CLAUSE)

        stats = pipeline.cache_stats()
        assert stats.hits == 1
        assert stats.misses == 0

    def test_clear_cache(self, pipeline):
        """Test that clearing empties the cache and its counters."""
        pipeline.analyze(BEST_CLAUSE)
        pipeline.clear_cache()
        stats = pipeline.cache_stats()
        assert stats.size == 0
        assert stats.total_requests == 0


class TestConfiguration:
    """Tests for configuring the pipeline."""

    def test_config_dir(self):
        """Test that settings are read from a configuration directory."""
        with tempfile.TemporaryDirectory() as tmp:
            with open(Path(tmp) / "settings.json", "w", encoding="utf-8") as f:
                json.dump({"state_bit_threshold": 0.9, "cache_max_size": 3}, f)
            pipeline = ClauseAnalysisPipeline(PipelineConfig(config_dir=tmp))

        assert pipeline.settings.state_bit_threshold == 0.9
        assert pipeline.cache_stats().max_size == 3
        assert pipeline.analyze(BEST_CLAUSE).state.label == "Balanced Only"

    def test_invalid_config_dir_keeps_defaults(self):
        """Test that a bad settings file leaves the defaults in place."""
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "settings.json").write_text("{", encoding="utf-8")
            pipeline = ClauseAnalysisPipeline(PipelineConfig(config_dir=tmp))

        assert pipeline.settings == AnalysisSettings()

    def test_settings_override(self):
        """Test that explicit settings take precedence."""
        settings = AnalysisSettings(high_band=0.9, low_band=0.1)
        pipeline = ClauseAnalysisPipeline(PipelineConfig(settings=settings))

        result = pipeline.analyze(BEST_CLAUSE)

        assert result.clarity.label == "Moderate"
        assert result.risk.label == "Low Risk"


class TestModuleLevel:
    """Tests for the module-level convenience functions."""

    @pytest.fixture(autouse=True)
    def fresh_default(self, monkeypatch):
        monkeypatch.setattr(pipeline_module, "_default_pipeline", None)

    def test_analyze_and_stats(self):
        """Test the default pipeline behind analyze and cache_stats."""
        first = clause_analysis.analyze(BEST_CLAUSE)
        second = clause_analysis.analyze(BEST_CLAUSE)

        assert second is first
        assert clause_analysis.cache_stats().hits == 1

    def test_default_pipeline_is_shared(self):
        """Test that the default pipeline is created once."""
        assert clause_analysis.get_default_pipeline() is clause_analysis.get_default_pipeline()


class TestSerialization:
    """Tests for serializing analysis results."""

    def test_serialize(self, uncached_pipeline):
        """Test that a full result serializes to JSON."""
        result = uncached_pipeline.analyze(BEST_CLAUSE, with_rewrite=True)

        data = json.loads(AnalysisSerializer.serialize(result))

        assert data["text"] == BEST_CLAUSE
        assert data["token_count"] == 30
        assert data["scores"]["risk"]["label"] == "Low Risk"
        assert data["state"]["index"] == 7
        assert data["state"]["bits"] == {"q": 1, "l": 1, "k": 1}
        assert data["rewrite"]["rewritten_text"].endswith("30 days notice.")
        assert data["diff"]["deletions"] == 1

    def test_serialize_keeps_logic_symbols(self, uncached_pipeline):
        """Test that non-ASCII logic symbols are written as is."""
        result = uncached_pipeline.analyze("The fee of the Client is due to the Contractor.")
        assert "∧" in AnalysisSerializer.serialize(result)

    def test_serialize_lexical_profile(self, uncached_pipeline):
        """Test the serialized vagueness, modal and agent-action-patient fields."""
        result = uncached_pipeline.analyze("The Client shall pay the fee promptly.")

        data = json.loads(AnalysisSerializer.serialize(result))

        assert data["vagueness"]["hits"] == ["promptly"]
        assert data["vagueness"]["score"] == pytest.approx(0.92)
        assert data["modal_profile"]["counts"]["obligation"] == 1
        assert data["modal_profile"]["summary"] == (
            "Obligation: 1 · Permission: 0 · Recommendation: 0"
        )
        assert data["agent_action_patient"] == {
            "agent": "The Client shall",
            "action": "pay",
            "patient": "the fee promptly",
        }
        assert data["logic"]["tone"] == "No preposition wiring detected."
