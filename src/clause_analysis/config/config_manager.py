"""Configuration Manager implementation for the clause analysis engine.

This module provides functionality to load, validate, and manage the
engine's numeric settings and its rewrite rules.
"""

import json
import logging
import re
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..models.enums import TransformationCategory
from .defaults import default_rewrite_rules
from .models import (
    AnalysisSettings,
    ConfigurationError,
    RewriteRule,
    SystemConfiguration,
    ValidationResult,
)


logger = logging.getLogger(__name__)

Source = Union[str, Path, Dict[str, Any], List[Dict[str, Any]]]

SETTINGS_FILE = "settings.json"
REWRITE_RULES_FILE = "rewrite_rules.json"


class ConfigurationManager:
    """
    Manager for engine configuration.

    Starts from the built-in settings and rewrite rules; either can be
    replaced from a JSON file, a dictionary or a list.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional directory path for configuration files.
        """
        self._config_dir = Path(config_dir) if config_dir else None
        self._configuration = SystemConfiguration(rewrite_rules=default_rewrite_rules())
        self._is_loaded = False

    @property
    def configuration(self) -> SystemConfiguration:
        """Get the current configuration."""
        return self._configuration

    @property
    def settings(self) -> AnalysisSettings:
        return self._configuration.settings

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded from a source."""
        return self._is_loaded

    # =========================================================================
    # Settings
    # =========================================================================

    def load_settings(self, source: Union[str, Path, Dict[str, Any]]) -> ValidationResult:
        """
        Load and validate analysis settings.

        Keys not present in the source keep their defaults; unknown keys
        produce a warning.

        Args:
            source: File path or dictionary.

        Returns:
            ValidationResult indicating success, with any warnings.

        Raises:
            ConfigurationError: If any value is invalid.
        """
        raw_data = self._parse_source(source)
        result = ValidationResult(is_valid=True)

        if not isinstance(raw_data, dict):
            result.add_error("Settings must be a JSON object")
            raise ConfigurationError("Settings validation failed", validation_result=result)

        if "settings" in raw_data and isinstance(raw_data["settings"], dict):
            raw_data = raw_data["settings"]

        known = {f.name: f for f in fields(AnalysisSettings)}
        values: Dict[str, Any] = {}
        for key, value in raw_data.items():
            if key not in known:
                result.add_warning(f"Settings: Unknown key '{key}' ignored")
                continue
            expected = int if known[key].type in (int, "int") else float
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                result.add_error(f"Settings: '{key}' must be a number")
                continue
            if expected is int and not isinstance(value, int):
                result.add_error(f"Settings: '{key}' must be an integer")
                continue
            values[key] = expected(value)

        settings = AnalysisSettings(**values) if result.is_valid else None
        if settings is not None:
            result = result.merge(self._validate_settings(settings))

        if not result.is_valid:
            raise ConfigurationError("Settings validation failed", validation_result=result)

        self._configuration.settings = settings
        self._is_loaded = True
        logger.info(f"Loaded analysis settings ({len(values)} overrides)")
        return result

    def _validate_settings(self, settings: AnalysisSettings) -> ValidationResult:
        """Check ranges and relationships between settings."""
        result = ValidationResult(is_valid=True)

        for name in ("state_bit_threshold", "high_band", "low_band"):
            value = getattr(settings, name)
            if not 0.0 <= value <= 1.0:
                result.add_error(f"Settings: '{name}' must be between 0 and 1")

        if settings.low_band >= settings.high_band:
            result.add_error("Settings: 'low_band' must be below 'high_band'")

        if settings.readability_min_tokens < 1:
            result.add_error("Settings: 'readability_min_tokens' must be at least 1")
        if settings.readability_max_tokens < settings.readability_min_tokens:
            result.add_error(
                "Settings: 'readability_max_tokens' must not be below 'readability_min_tokens'"
            )

        for name in ("cache_max_size", "max_clause_length", "max_history_items"):
            if getattr(settings, name) < 1:
                result.add_error(f"Settings: '{name}' must be at least 1")

        if settings.cache_lock_timeout <= 0:
            result.add_error("Settings: 'cache_lock_timeout' must be positive")

        return result

    # =========================================================================
    # Rewrite rules
    # =========================================================================

    def load_rewrite_rules(self, source: Source) -> ValidationResult:
        """
        Load and validate rewrite rules, replacing the current ones.

        Rule order in the source is preserved; it is the order in which
        rules claim text during a rewrite.

        Args:
            source: File path, dictionary with a "rules" key, or list of rules.

        Returns:
            ValidationResult indicating success or failure with details.

        Raises:
            ConfigurationError: If validation fails.
        """
        raw_data = self._parse_source(source)

        if isinstance(raw_data, dict):
            if "rules" in raw_data:
                rules_data = raw_data["rules"]
            else:
                rules_data = [raw_data]
        else:
            rules_data = raw_data

        result = ValidationResult(is_valid=True)
        rules: List[RewriteRule] = []

        for i, rule_dict in enumerate(rules_data):
            rule_result, rule = self._validate_rewrite_rule(rule_dict, index=i)
            result = result.merge(rule_result)
            if rule:
                rules.append(rule)

        ids = [r.id for r in rules]
        duplicates = [rule_id for rule_id in ids if ids.count(rule_id) > 1]
        if duplicates:
            result.add_error(f"Duplicate rewrite rule IDs found: {set(duplicates)}")

        if not result.is_valid:
            raise ConfigurationError(
                "Rewrite rule validation failed",
                validation_result=result
            )

        self._configuration.rewrite_rules = rules
        self._is_loaded = True
        logger.info(f"Loaded {len(rules)} rewrite rules")
        return result

    def _validate_rewrite_rule(
        self,
        data: Dict[str, Any],
        index: int = 0
    ) -> tuple[ValidationResult, Optional[RewriteRule]]:
        """Validate a single rewrite rule dictionary."""
        result = ValidationResult(is_valid=True)
        prefix = f"Rewrite rule [{index}]"

        if not isinstance(data, dict):
            result.add_error(f"{prefix}: Must be an object")
            return result, None

        required_fields = ["id", "pattern", "replacement", "category", "strength"]
        for field_name in required_fields:
            if field_name not in data:
                result.add_error(f"{prefix}: Missing required field '{field_name}'")

        if not result.is_valid:
            return result, None

        for field_name in ("id", "pattern"):
            if not isinstance(data[field_name], str) or not data[field_name].strip():
                result.add_error(f"{prefix}: '{field_name}' must be a non-empty string")

        if not isinstance(data["replacement"], str):
            result.add_error(f"{prefix}: 'replacement' must be a string")

        valid_categories = [c.value for c in TransformationCategory]
        if data["category"] not in valid_categories:
            result.add_error(f"{prefix}: 'category' must be one of {valid_categories}")

        strength = data["strength"]
        if isinstance(strength, bool) or not isinstance(strength, (int, float)):
            result.add_error(f"{prefix}: 'strength' must be a number")
        elif not 0.0 <= strength <= 1.0:
            result.add_error(f"{prefix}: 'strength' must be between 0 and 1")

        if not result.is_valid:
            return result, None

        rule = RewriteRule(
            id=data["id"].strip(),
            pattern=data["pattern"].strip(),
            replacement=data["replacement"],
            category=data["category"],
            strength=float(strength),
            enabled=data.get("enabled", True),
            description=data.get("description"),
            metadata=data.get("metadata", {})
        )

        try:
            rule.compile()
        except re.error as e:
            result.add_error(f"{prefix}: Invalid pattern: {e}")
            return result, None

        return result, rule

    def get_rewrite_rule(self, rule_id: str) -> Optional[RewriteRule]:
        """Get a rewrite rule by ID."""
        for rule in self._configuration.rewrite_rules:
            if rule.id == rule_id:
                return rule
        return None

    def get_enabled_rules(self) -> List[RewriteRule]:
        return self._configuration.get_enabled_rules()

    # =========================================================================
    # Whole-configuration operations
    # =========================================================================

    def validate_configuration(self) -> ValidationResult:
        """Validate the current configuration as a whole."""
        result = self._validate_settings(self._configuration.settings)

        if not self._configuration.get_enabled_rules():
            result.add_warning("No enabled rewrite rules; rewrites will never change text")

        patterns: Dict[str, str] = {}
        for rule in self._configuration.rewrite_rules:
            key = rule.pattern.lower()
            if key in patterns:
                result.add_warning(
                    f"Rewrite rule '{rule.id}' can never match: "
                    f"pattern '{rule.pattern}' is claimed first by '{patterns[key]}'"
                )
            else:
                patterns[key] = rule.id

        return result

    def _parse_source(self, source: Source) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                try:
                    return json.load(f)
                except json.JSONDecodeError as e:
                    raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

        return source

    def load_from_directory(self, config_dir: Union[str, Path]) -> ValidationResult:
        """
        Load all configuration files from a directory.

        Expects files named:
        - settings.json
        - rewrite_rules.json

        Missing files leave the corresponding defaults in place.

        Args:
            config_dir: Directory containing configuration files.

        Returns:
            Combined ValidationResult for all loaded configurations.
        """
        config_dir = Path(config_dir)
        result = ValidationResult(is_valid=True)

        settings_file = config_dir / SETTINGS_FILE
        if settings_file.exists():
            try:
                result = result.merge(self.load_settings(settings_file))
            except ConfigurationError as e:
                result.add_error(f"Settings loading failed: {e.message}")
                if e.validation_result:
                    result = result.merge(e.validation_result)

        rules_file = config_dir / REWRITE_RULES_FILE
        if rules_file.exists():
            try:
                result = result.merge(self.load_rewrite_rules(rules_file))
            except ConfigurationError as e:
                result.add_error(f"Rewrite rules loading failed: {e.message}")
                if e.validation_result:
                    result = result.merge(e.validation_result)

        self._config_dir = config_dir
        return result

    def save_to_directory(self, config_dir: Optional[Union[str, Path]] = None) -> None:
        """
        Save current configuration to a directory.

        Args:
            config_dir: Directory to save to. Uses current config_dir if None.
        """
        config_dir = Path(config_dir) if config_dir else self._config_dir
        if not config_dir:
            raise ConfigurationError("No configuration directory specified")

        config_dir.mkdir(parents=True, exist_ok=True)

        with open(config_dir / SETTINGS_FILE, "w", encoding="utf-8") as f:
            json.dump(self._configuration.settings.to_dict(), f, indent=2)

        rules_data = {"rules": [r.to_dict() for r in self._configuration.rewrite_rules]}
        with open(config_dir / REWRITE_RULES_FILE, "w", encoding="utf-8") as f:
            json.dump(rules_data, f, indent=2, ensure_ascii=False)

    def reset(self) -> None:
        """Reset configuration to the built-in defaults."""
        self._configuration = SystemConfiguration(rewrite_rules=default_rewrite_rules())
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as a dictionary."""
        return {
            "version": self._configuration.version,
            "settings": self._configuration.settings.to_dict(),
            "rewrite_rules": [r.to_dict() for r in self._configuration.rewrite_rules],
            "metadata": self._configuration.metadata,
        }
