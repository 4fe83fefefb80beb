"""Built-in rewrite rules, in application order."""

from typing import List

from .models import RewriteRule


def _rule(rule_id: str, pattern: str, replacement: str, category: str, strength: float) -> RewriteRule:
    return RewriteRule(
        id=rule_id,
        pattern=pattern,
        replacement=replacement,
        category=category,
        strength=strength,
    )


def default_rewrite_rules() -> List[RewriteRule]:
    """Return a fresh copy of the built-in rewrite rules."""
    return [
        # Precision
        _rule("may_to_shall", "may", "shall", "precision", 0.9),
        _rule("might_to_will", "might", "will", "precision", 0.8),
        _rule("reasonable_to_agreed", "reasonable", "mutually agreed upon", "precision", 0.7),
        _rule("appropriate_to_exhibit", "appropriate", "as specified in Exhibit A", "precision", 0.7),
        _rule("substantial_to_threshold", "substantial", "exceeding [specific threshold]", "precision", 0.6),
        _rule("approximately_to_tolerance", "approximately", "within [±X%]", "precision", 0.8),
        # Enforceability
        _rule("should_to_shall", "should", "shall", "enforceability", 0.9),
        _rule("could_to_will", "could", "will", "enforceability", 0.8),
        _rule("endeavor_to_shall", "endeavor to", "shall", "enforceability", 0.85),
        _rule(
            "best_efforts_to_commercial", "use best efforts",
            "shall use commercially reasonable efforts", "enforceability", 0.7,
        ),
        # Risk reduction
        _rule("sole_to_reasonable_discretion", "sole discretion", "reasonable discretion", "risk-reduction", 0.9),
        _rule("absolute_to_limited", "absolute", "subject to [specified limits]", "risk-reduction", 0.85),
        _rule("unlimited_to_capped", "unlimited", "limited to [maximum amount]", "risk-reduction", 0.95),
        _rule("irrevocable_to_conditional", "irrevocable", "revocable upon [specified conditions]", "risk-reduction", 0.8),
        _rule("perpetual_to_term", "perpetual", "for a term of [specified duration]", "risk-reduction", 0.9),
        _rule("liable_to_limited", "liable", "liable, subject to limitations in Section [X]", "risk-reduction", 0.7),
        _rule("indemnify_to_lawful", "indemnify", "indemnify to the extent permitted by law", "risk-reduction", 0.75),
        _rule("waive_to_statutory", "waive", "waive, except as required by applicable law", "risk-reduction", 0.8),
    ]
