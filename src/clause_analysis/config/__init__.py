"""Configuration management for the clause analysis engine."""

from .config_manager import ConfigurationManager
from .defaults import default_rewrite_rules
from .models import (
    AnalysisSettings,
    ConfigurationError,
    RewriteRule,
    SystemConfiguration,
    ValidationResult,
)

__all__ = [
    "AnalysisSettings",
    "ConfigurationError",
    "ConfigurationManager",
    "RewriteRule",
    "SystemConfiguration",
    "ValidationResult",
    "default_rewrite_rules",
]
