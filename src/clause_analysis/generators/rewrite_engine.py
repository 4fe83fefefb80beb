"""Rule-based rewriting of vague, permissive or one-sided wording."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Pattern, Tuple

from ..config.defaults import default_rewrite_rules
from ..config.models import RewriteRule
from ..extractors.entity_patterns import DATE_PATTERN, MONTH_DAY_PATTERN
from ..interfaces.rewriter import IRewriter
from ..models.enums import TransformationCategory
from ..models.rewrite import CategoryMetrics, RewriteResult, Transformation


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Claim:
    """A span of the input claimed by one rule."""
    start: int
    end: int
    matched: str
    rule: RewriteRule


def match_case(original: str, replacement: str) -> str:
    """Carry a leading capital from the original onto the replacement."""
    if original[:1].isupper() and replacement:
        return replacement[0].upper() + replacement[1:]
    return replacement


class RewriteEngine(IRewriter):
    """
    Applies rewrite rules to a clause in a single pass.

    Rules claim spans of the original text in declaration order; a match
    overlapping an earlier claim is dropped. Dates such as "May 1, 2024"
    are claimed up front and never rewritten. The claimed spans are then
    replaced left to right, so replacement text is never matched again.
    """

    def __init__(self, rules: Optional[List[RewriteRule]] = None):
        """
        Initialize the rewrite engine.

        Args:
            rules: Rules in priority order. Defaults to the built-in rules.
        """
        rules = default_rewrite_rules() if rules is None else rules
        self._rules: List[Tuple[RewriteRule, Pattern[str]]] = [
            (rule, rule.compile()) for rule in rules if rule.enabled
        ]

    @property
    def rules(self) -> List[RewriteRule]:
        return [rule for rule, _ in self._rules]

    def rewrite(self, text: str) -> RewriteResult:
        claims = self._claim_spans(text)

        pieces: List[str] = []
        transformations: List[Transformation] = []
        cursor = 0
        for claim in claims:
            suggestion = match_case(claim.matched, claim.rule.replacement)
            pieces.append(text[cursor:claim.start])
            pieces.append(suggestion)
            cursor = claim.end
            transformations.append(Transformation(
                original=claim.matched,
                suggestion=suggestion,
                category=TransformationCategory(claim.rule.category),
                strength=claim.rule.strength,
                rule_id=claim.rule.id,
                position=claim.start,
            ))
        pieces.append(text[cursor:])

        if transformations:
            logger.debug(f"Applied {len(transformations)} rewrite rules")

        return RewriteResult(
            original_text=text,
            rewritten_text="".join(pieces),
            transformations=tuple(transformations),
            metrics=self.compute_metrics(transformations),
        )

    def _claim_spans(self, text: str) -> List[_Claim]:
        protected = [
            m.span() for p in (DATE_PATTERN, MONTH_DAY_PATTERN) for m in p.finditer(text)
        ]
        claims: List[_Claim] = []
        for rule, pattern in self._rules:
            for match in pattern.finditer(text):
                start, end = match.span()
                if any(start < p_end and p_start < end for p_start, p_end in protected):
                    continue
                if any(start < c.end and c.start < end for c in claims):
                    continue
                claims.append(_Claim(start, end, match.group(0), rule))
        claims.sort(key=lambda c: c.start)
        return claims

    @staticmethod
    def compute_metrics(transformations: List[Transformation]) -> Dict[str, CategoryMetrics]:
        """Count, mean strength and summed strength per category."""
        grouped: Dict[str, List[float]] = {}
        for t in transformations:
            grouped.setdefault(t.category.value, []).append(t.strength)
        return {
            category: CategoryMetrics(
                count=len(strengths),
                avg_strength=round(sum(strengths) / len(strengths), 4),
                total_impact=round(sum(strengths), 4),
            )
            for category, strengths in grouped.items()
        }
