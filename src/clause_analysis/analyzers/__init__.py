"""Scorers and classifiers for clause analysis."""

from .base import BandedScorer, find_terms
from .clarity import ClarityScorer
from .completeness import CompletenessScorer
from .document_type import DocumentSignature, DocumentTypeClassifier
from .enforceability import EnforceabilityScorer
from .modal_profile import modal_profile
from .quality import overall_quality
from .risk import RiskScorer
from .state_mapper import STATE_LABELS, StateMapper
from .vagueness import VaguenessAnalyzer

__all__ = [
    "BandedScorer",
    "ClarityScorer",
    "CompletenessScorer",
    "DocumentSignature",
    "DocumentTypeClassifier",
    "EnforceabilityScorer",
    "RiskScorer",
    "STATE_LABELS",
    "StateMapper",
    "VaguenessAnalyzer",
    "find_terms",
    "modal_profile",
    "overall_quality",
]
