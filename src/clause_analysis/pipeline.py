"""End-to-end analysis pipeline for a single legal clause.

This module wires the tokenizer, classifier, scorers, extractors, logic
compiler, rewrite and diff engines and state mapper together behind one
call, with a bounded result cache in front.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Optional

from .analyzers.clarity import ClarityScorer
from .analyzers.completeness import CompletenessScorer
from .analyzers.document_type import DocumentTypeClassifier
from .analyzers.enforceability import EnforceabilityScorer
from .analyzers.modal_profile import modal_profile
from .analyzers.quality import overall_quality
from .analyzers.risk import RiskScorer
from .analyzers.state_mapper import StateMapper
from .analyzers.vagueness import VaguenessAnalyzer
from .config.config_manager import ConfigurationManager
from .config.models import AnalysisSettings
from .exceptions import CacheUnavailable
from .extractors.entity_extractor import EntityExtractor
from .generators.rewrite_engine import RewriteEngine
from .interfaces.extractor import IEntityExtractor
from .interfaces.rewriter import IDiffEngine, IRewriter
from .logic.compiler import LogicCompiler
from .models.analysis import AnalysisResult
from .parsers.classifier import TokenClassifier
from .parsers.tokenizer import normalize_clause, tokenize
from .performance import AnalysisCache, CacheStats, timed_operation
from .review.diff_engine import DiffEngine


logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for the analysis pipeline."""

    # Performance configuration
    enable_caching: bool = True

    # Directory holding settings.json and rewrite_rules.json
    config_dir: Optional[str] = None

    # Overrides the settings loaded by the configuration manager
    settings: Optional[AnalysisSettings] = None


class ClauseAnalysisPipeline:
    """
    Main analysis pipeline.

    Stateless per call apart from the result cache, so a single instance
    can serve concurrent callers.
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        config_manager: Optional[ConfigurationManager] = None,
        extractor: Optional[IEntityExtractor] = None,
        rewriter: Optional[IRewriter] = None,
        diff_engine: Optional[IDiffEngine] = None,
        cache: Optional[AnalysisCache] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Pipeline configuration.
            config_manager: Source of settings and rewrite rules.
            extractor: Entity extractor implementation.
            rewriter: Rewrite engine implementation.
            diff_engine: Diff engine implementation.
            cache: Result cache; built from settings when caching is enabled.
        """
        self.config = config or PipelineConfig()
        self.config_manager = config_manager or ConfigurationManager()

        if self.config.config_dir:
            result = self.config_manager.load_from_directory(self.config.config_dir)
            if not result.is_valid:
                logger.warning(
                    f"Configuration in {self.config.config_dir} has errors; "
                    f"using defaults where loading failed: {result.errors}"
                )
            for warning in result.warnings:
                logger.warning(f"Configuration warning: {warning}")

        self.settings = self.config.settings or self.config_manager.settings

        self.classifier = TokenClassifier()
        self.clarity_scorer = ClarityScorer(self.settings)
        self.enforceability_scorer = EnforceabilityScorer(self.settings)
        self.risk_scorer = RiskScorer(self.settings)
        self.completeness_scorer = CompletenessScorer(self.settings)
        self.vagueness_analyzer = VaguenessAnalyzer()
        self.extractor = extractor or EntityExtractor()
        self.document_classifier = DocumentTypeClassifier()
        self.logic_compiler = LogicCompiler()
        self.rewriter = rewriter or RewriteEngine(self.config_manager.get_enabled_rules())
        self.diff_engine = diff_engine or DiffEngine()
        self.state_mapper = StateMapper(self.settings)

        if cache is not None:
            self.cache: Optional[AnalysisCache] = cache
        elif self.config.enable_caching:
            self.cache = AnalysisCache(
                max_size=self.settings.cache_max_size,
                lock_timeout=self.settings.cache_lock_timeout,
            )
        else:
            self.cache = None

        logger.info(
            f"Clause analysis pipeline ready "
            f"(caching {'on' if self.cache is not None else 'off'})"
        )

    @timed_operation("analyze_clause")
    def analyze(self, clause: str, with_rewrite: bool = False) -> AnalysisResult:
        """
        Analyse one clause.

        The clause is expected to be validated already; any string,
        including an empty one, is accepted.

        Args:
            clause: Clause text.
            with_rewrite: Also produce a rewrite and a diff against it.

        Returns:
            The AnalysisResult, possibly served from the cache.
        """
        normalized = normalize_clause(clause)

        key = None
        if self.cache is not None:
            key = AnalysisCache.make_key(normalized, with_rewrite)
            cached = self._cache_get(key)
            if cached is not None:
                logger.debug("Cache hit for clause analysis")
                return cached

        result = self._compute(normalized, with_rewrite)

        if key is not None:
            self._cache_set(key, result)
        return result

    def _compute(self, normalized: str, with_rewrite: bool) -> AnalysisResult:
        tokens, stats = self.classifier.classify(tokenize(normalized))

        clarity = self.clarity_scorer.score(stats, tokens)
        enforceability = self.enforceability_scorer.score(stats, tokens)
        risk = self.risk_scorer.score(stats, tokens)
        completeness = self.completeness_scorer.score(stats, tokens)

        rewrite = diff = diff_html = None
        if with_rewrite:
            rewrite = self.rewriter.rewrite(normalized)
            diff = self.diff_engine.diff(normalized, rewrite.rewritten_text)
            diff_html = diff.to_html()

        return AnalysisResult(
            text=normalized,
            tokens=tokens,
            stats=stats,
            clarity=clarity,
            enforceability=enforceability,
            risk=risk,
            completeness=completeness,
            overall_quality=overall_quality(clarity, enforceability, risk, completeness),
            vagueness=self.vagueness_analyzer.analyze(tokens),
            modal_profile=modal_profile(tokens),
            entities=self.extractor.extract(tokens),
            agent_action_patient=self.extractor.extract_aap(tokens),
            document_type=self.document_classifier.classify(tokens),
            logic=self.logic_compiler.compile(tokens),
            state=self.state_mapper.map(clarity, enforceability, risk),
            rewrite=rewrite,
            diff=diff,
            diff_html=diff_html,
        )

    def _cache_get(self, key: str) -> Optional[AnalysisResult]:
        try:
            return self.cache.get(key)
        except CacheUnavailable as e:
            logger.warning(f"Result cache unavailable on read, recomputing: {e}")
            return None

    def _cache_set(self, key: str, result: AnalysisResult) -> None:
        try:
            self.cache.set(key, result)
        except CacheUnavailable as e:
            logger.warning(f"Result cache unavailable on write, result not cached: {e}")

    def cache_stats(self) -> CacheStats:
        """Current cache counters; all zero when caching is disabled."""
        if self.cache is None:
            return CacheStats(hits=0, misses=0, size=0, max_size=0)
        return self.cache.stats()

    def warm_cache(self, clauses: Iterable[str], with_rewrite: bool = False) -> int:
        """
        Analyse clauses ahead of time so later calls hit the cache.

        Returns:
            Number of clauses added to the cache.
        """
        if self.cache is None:
            return 0
        return self.cache.warm(
            clauses,
            lambda normalized: self._compute(normalized, with_rewrite),
            with_rewrite=with_rewrite,
        )

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()


_default_pipeline: Optional[ClauseAnalysisPipeline] = None
_default_lock = threading.Lock()


def get_default_pipeline() -> ClauseAnalysisPipeline:
    """Process-wide pipeline used by the module-level functions."""
    global _default_pipeline
    if _default_pipeline is None:
        with _default_lock:
            if _default_pipeline is None:
                _default_pipeline = ClauseAnalysisPipeline()
    return _default_pipeline


def analyze(clause: str, with_rewrite: bool = False) -> AnalysisResult:
    """Analyse a clause with the default pipeline."""
    return get_default_pipeline().analyze(clause, with_rewrite=with_rewrite)


def cache_stats() -> CacheStats:
    """Cache counters of the default pipeline."""
    return get_default_pipeline().cache_stats()
