"""Keyword-signature classification of the document a clause belongs to."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..models.enums import DocumentType
from ..models.token import Token
from .base import distinct, find_terms


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentSignature:
    """Keyword signature for one document type."""
    document_type: DocumentType
    keywords: Tuple[str, ...]
    min_hits: int = 1
    priority: int = 0  # Breaks ties between equal hit counts; higher wins


class DocumentTypeClassifier:
    """
    Classifies a clause by the keyword signature it matches best.

    A signature matches when at least ``min_hits`` of its distinct keywords
    appear. The winner has the most distinct hits, then the highest
    priority. With no match the clause is a generic contract.
    """

    def __init__(self):
        self._signatures = self._build_signatures()

    def _build_signatures(self) -> List[DocumentSignature]:
        """Build the list of document signatures."""
        return [
            DocumentSignature(
                DocumentType.NDA,
                ("confidential", "confidentiality", "disclosure", "disclose",
                 "disclosing party", "receiving party", "proprietary",
                 "trade secret", "trade secrets", "non-disclosure"),
                min_hits=1, priority=9,
            ),
            DocumentSignature(
                DocumentType.LICENSE,
                ("license", "licensed", "licensor", "licensee", "royalty",
                 "royalties", "sublicense"),
                min_hits=2, priority=8,
            ),
            DocumentSignature(
                DocumentType.EMPLOYMENT,
                ("employee", "employer", "employment", "salary", "wages",
                 "benefits", "position"),
                min_hits=2, priority=8,
            ),
            DocumentSignature(
                DocumentType.LEASE,
                ("lease", "lessor", "lessee", "premises", "rent", "tenant",
                 "landlord"),
                min_hits=2, priority=8,
            ),
            DocumentSignature(
                DocumentType.PURCHASE,
                ("purchase", "purchaser", "buyer", "seller", "goods",
                 "purchase price", "delivery"),
                min_hits=2, priority=7,
            ),
            DocumentSignature(
                DocumentType.PARTNERSHIP,
                ("partnership", "partner", "partners", "profit sharing",
                 "capital contribution", "joint venture"),
                min_hits=2, priority=7,
            ),
            DocumentSignature(
                DocumentType.SERVICE,
                ("services", "service", "deliverables", "statement of work",
                 "scope of work", "perform", "performance"),
                min_hits=2, priority=6,
            ),
            DocumentSignature(
                DocumentType.INDEMNIFICATION,
                ("indemnify", "indemnifies", "indemnification", "hold harmless",
                 "defend", "losses"),
                min_hits=1, priority=5,
            ),
            DocumentSignature(
                DocumentType.TERMINATION,
                ("terminate", "terminated", "termination", "cancel",
                 "cancellation", "notice"),
                min_hits=1, priority=4,
            ),
            DocumentSignature(
                DocumentType.GOVERNING_LAW,
                ("governed", "governing", "jurisdiction", "law", "laws",
                 "venue", "courts"),
                min_hits=1, priority=3,
            ),
            DocumentSignature(
                DocumentType.PAYMENT_TERMS,
                ("payment", "pay", "paid", "fee", "fees", "invoice",
                 "invoices", "due"),
                min_hits=1, priority=2,
            ),
        ]

    def score_types(self, tokens: Sequence[Token]) -> Dict[DocumentType, int]:
        """Distinct keyword hits for every signature that meets its minimum."""
        scores = {}
        for signature in self._signatures:
            hits = len(distinct(find_terms(tokens, signature.keywords)))
            if hits >= signature.min_hits:
                scores[signature.document_type] = hits
        return scores

    def classify(self, tokens: Sequence[Token]) -> DocumentType:
        """
        Classify a clause.

        Args:
            tokens: Clause tokens.

        Returns:
            The best matching DocumentType, or DocumentType.GENERAL.
        """
        scores = self.score_types(tokens)
        if not scores:
            return DocumentType.GENERAL

        priorities = {s.document_type: s.priority for s in self._signatures}
        best = max(scores, key=lambda t: (scores[t], priorities[t]))
        logger.debug(f"Document type {best.value} ({scores[best]} keyword hits)")
        return best

    def get_keywords(self, document_type: DocumentType) -> List[str]:
        """Get the signature keywords for a document type."""
        for signature in self._signatures:
            if signature.document_type == document_type:
                return list(signature.keywords)
        return []
