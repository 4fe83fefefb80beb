"""Data models for configuration management."""

import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Pattern


@dataclass
class AnalysisSettings:
    """
    Numeric thresholds and limits used across the engine.

    Attributes:
        state_bit_threshold: A score at or above this sets its state bit.
        high_band: Scores at or above this get the high band label.
        low_band: Scores at or below this get the low band label.
        readability_min_tokens: Lower edge of the ideal clause length.
        readability_max_tokens: Upper edge of the ideal clause length.
        cache_max_size: Capacity of the result cache.
        cache_lock_timeout: Seconds to wait for the cache lock.
        max_clause_length: Longest clause accepted by input validation.
        max_history_items: Capacity of the analysis history.
    """
    state_bit_threshold: float = 0.5
    high_band: float = 0.7
    low_band: float = 0.3
    readability_min_tokens: int = 15
    readability_max_tokens: int = 40
    cache_max_size: int = 100
    cache_lock_timeout: float = 1.0
    max_clause_length: int = 10000
    max_history_items: int = 50

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class RewriteRule:
    """
    Rule for rewriting vague or one-sided wording.

    Matching is whole-word and case-insensitive.
    """
    id: str
    pattern: str  # Word or phrase to match
    replacement: str
    category: str  # TransformationCategory value
    strength: float  # 0.0 - 1.0
    enabled: bool = True
    description: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def compile(self) -> Pattern[str]:
        """Compile the word-boundary regex for this rule."""
        return re.compile(r"\b" + re.escape(self.pattern) + r"\b", re.IGNORECASE)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "pattern": self.pattern,
            "replacement": self.replacement,
            "category": self.category,
            "strength": self.strength,
            "enabled": self.enabled,
            "description": self.description,
            "metadata": self.metadata,
        }


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


@dataclass
class SystemConfiguration:
    """Complete engine configuration."""
    settings: AnalysisSettings = field(default_factory=AnalysisSettings)
    rewrite_rules: List[RewriteRule] = field(default_factory=list)
    version: int = 1
    metadata: Dict[str, Any] = field(default_factory=dict)

    def get_enabled_rules(self) -> List[RewriteRule]:
        """Rewrite rules in declaration order, disabled ones removed."""
        return [r for r in self.rewrite_rules if r.enabled]

    def get_rules_by_category(self, category: str) -> List[RewriteRule]:
        return [r for r in self.rewrite_rules if r.category == category and r.enabled]
