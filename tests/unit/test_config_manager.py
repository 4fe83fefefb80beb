"""Unit tests for the Configuration Manager."""

import json
import tempfile
from pathlib import Path

import pytest

from clause_analysis.config import (
    AnalysisSettings,
    ConfigurationError,
    ConfigurationManager,
    RewriteRule,
    ValidationResult,
    default_rewrite_rules,
)


class TestDefaults:
    """Tests for the built-in configuration."""

    def test_default_settings(self):
        """Test the documented default thresholds and limits."""
        settings = ConfigurationManager().settings

        assert settings.state_bit_threshold == 0.5
        assert settings.high_band == 0.7
        assert settings.low_band == 0.3
        assert settings.cache_max_size == 100
        assert settings.max_clause_length == 10000
        assert settings.max_history_items == 50

    def test_default_rewrite_rules(self):
        """Test that the built-in rules are loaded in order."""
        manager = ConfigurationManager()
        rules = manager.configuration.rewrite_rules

        assert len(rules) == 18
        assert rules[0].id == "may_to_shall"
        assert rules[-1].id == "waive_to_statutory"
        assert not manager.is_loaded

    def test_rules_by_category(self):
        """Test grouping the built-in rules by category."""
        configuration = ConfigurationManager().configuration
        ids = [r.id for r in configuration.get_rules_by_category("enforceability")]
        assert ids[:2] == ["should_to_shall", "could_to_will"]
        assert all(
            r.category == "risk-reduction"
            for r in configuration.get_rules_by_category("risk-reduction")
        )

    def test_default_rules_are_fresh_copies(self):
        """Test that editing one copy does not change another."""
        first = default_rewrite_rules()
        first[0].replacement = "changed"
        assert default_rewrite_rules()[0].replacement == "shall"


class TestSettings:
    """Tests for loading analysis settings."""

    def test_load_settings_from_dict(self):
        """Test overriding some settings from a dictionary."""
        manager = ConfigurationManager()

        result = manager.load_settings({"state_bit_threshold": 0.6, "cache_max_size": 10})

        assert result.is_valid
        assert manager.settings.state_bit_threshold == 0.6
        assert manager.settings.cache_max_size == 10
        assert manager.settings.high_band == 0.7
        assert manager.is_loaded

    def test_nested_settings_key(self):
        """Test that settings may be wrapped in a 'settings' object."""
        manager = ConfigurationManager()
        manager.load_settings({"settings": {"low_band": 0.2}})
        assert manager.settings.low_band == 0.2

    def test_unknown_key_warns(self):
        """Test that unknown keys are ignored with a warning."""
        result = ConfigurationManager().load_settings({"colour": "blue"})
        assert result.is_valid
        assert any("colour" in w for w in result.warnings)

    def test_band_order_is_validated(self):
        """Test that the low band must sit below the high band."""
        manager = ConfigurationManager()
        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_settings({"low_band": 0.8, "high_band": 0.7})
        assert any("low_band" in e for e in exc_info.value.validation_result.errors)
        assert manager.settings.low_band == 0.3

    def test_out_of_range_threshold(self):
        """Test that thresholds must be within [0, 1]."""
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_settings({"state_bit_threshold": 1.5})

    def test_wrong_types(self):
        """Test that non-numeric and non-integer values are rejected."""
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_settings({"high_band": "high"})
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_settings({"cache_max_size": 2.5})
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_settings({"cache_max_size": True})

    def test_integer_for_float_setting(self):
        """Test that an integer is accepted for a float setting."""
        manager = ConfigurationManager()
        manager.load_settings({"cache_lock_timeout": 2})
        assert manager.settings.cache_lock_timeout == 2.0
        assert isinstance(manager.settings.cache_lock_timeout, float)


class TestRewriteRules:
    """Tests for rewrite rule configuration."""

    def test_load_rules_from_list(self):
        """Test loading rewrite rules from a list."""
        manager = ConfigurationManager()
        rules = [
            {
                "id": "rule_001",
                "pattern": "forthwith",
                "replacement": "within [X] days",
                "category": "precision",
                "strength": 0.8,
            },
            {
                "id": "rule_002",
                "pattern": "shall endeavour",
                "replacement": "shall",
                "category": "enforceability",
                "strength": 0.7,
                "enabled": False,
            },
        ]

        result = manager.load_rewrite_rules(rules)

        assert result.is_valid
        assert [r.id for r in manager.configuration.rewrite_rules] == ["rule_001", "rule_002"]
        assert [r.id for r in manager.get_enabled_rules()] == ["rule_001"]
        assert manager.get_rewrite_rule("rule_002").enabled is False
        assert manager.get_rewrite_rule("missing") is None

    def test_load_rules_from_dict(self):
        """Test loading rewrite rules wrapped in a 'rules' object."""
        manager = ConfigurationManager()
        manager.load_rewrite_rules({"rules": [{
            "id": "r", "pattern": "forthwith", "replacement": "now",
            "category": "precision", "strength": 1,
        }]})
        assert manager.configuration.rewrite_rules[0].strength == 1.0

    def test_missing_required_field(self):
        """Test that required fields are enforced."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load_rewrite_rules([{"id": "r", "pattern": "x"}])
        errors = exc_info.value.validation_result.errors
        assert any("replacement" in e for e in errors)

    def test_invalid_category_and_strength(self):
        """Test category and strength validation."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load_rewrite_rules([{
                "id": "r", "pattern": "x", "replacement": "y",
                "category": "style", "strength": 1.5,
            }])
        errors = exc_info.value.validation_result.errors
        assert any("category" in e for e in errors)
        assert any("strength" in e for e in errors)

    def test_duplicate_ids(self):
        """Test that rule IDs must be unique."""
        rule = {"id": "r", "pattern": "x", "replacement": "y",
                "category": "precision", "strength": 0.5}
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_rewrite_rules([rule, dict(rule)])

    def test_failed_load_keeps_previous_rules(self):
        """Test that an invalid load does not replace the current rules."""
        manager = ConfigurationManager()
        with pytest.raises(ConfigurationError):
            manager.load_rewrite_rules([{"id": ""}])
        assert len(manager.configuration.rewrite_rules) == 18

    def test_rule_compiles_to_word_boundary_regex(self):
        """Test the compiled pattern of a rule."""
        rule = RewriteRule("r", "may", "shall", "precision", 0.9)
        assert rule.compile().search("The Vendor MAY act")
        assert not rule.compile().search("mayor")


class TestFilesAndDirectories:
    """Tests for file based configuration."""

    def test_file_not_found(self):
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_settings("/nonexistent/settings.json")

    def test_invalid_json(self):
        """Test that malformed JSON raises ConfigurationError."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "settings.json"
            path.write_text("{not json", encoding="utf-8")
            with pytest.raises(ConfigurationError):
                ConfigurationManager().load_settings(path)

    def test_save_and_load_directory(self):
        """Test that saved configuration loads back identically."""
        manager = ConfigurationManager()
        manager.load_settings({"max_history_items": 7})

        with tempfile.TemporaryDirectory() as tmp:
            manager.save_to_directory(tmp)
            assert (Path(tmp) / "settings.json").exists()
            assert (Path(tmp) / "rewrite_rules.json").exists()

            other = ConfigurationManager()
            result = other.load_from_directory(tmp)

        assert result.is_valid
        assert other.settings.max_history_items == 7
        assert other.to_dict() == manager.to_dict()

    def test_load_directory_collects_errors(self):
        """Test that loading errors are reported, not raised."""
        with tempfile.TemporaryDirectory() as tmp:
            with open(Path(tmp) / "settings.json", "w", encoding="utf-8") as f:
                json.dump({"low_band": 0.9}, f)
            result = ConfigurationManager().load_from_directory(tmp)

        assert not result.is_valid
        assert any("Settings loading failed" in e for e in result.errors)

    def test_empty_directory_keeps_defaults(self):
        """Test that a directory without files changes nothing."""
        with tempfile.TemporaryDirectory() as tmp:
            manager = ConfigurationManager()
            result = manager.load_from_directory(tmp)
        assert result.is_valid
        assert manager.settings == AnalysisSettings()

    def test_save_without_directory(self):
        """Test that saving needs a directory."""
        with pytest.raises(ConfigurationError):
            ConfigurationManager().save_to_directory()


class TestWholeConfiguration:
    """Tests for validation, reset and export."""

    def test_validate_defaults(self):
        """Test that the built-in configuration is valid."""
        result = ConfigurationManager().validate_configuration()
        assert result.is_valid
        assert result.warnings == []

    def test_shadowed_rule_warning(self):
        """Test the warning for a rule whose pattern is already claimed."""
        manager = ConfigurationManager()
        manager.load_rewrite_rules([
            {"id": "a", "pattern": "may", "replacement": "shall",
             "category": "precision", "strength": 0.9},
            {"id": "b", "pattern": "May", "replacement": "must",
             "category": "precision", "strength": 0.5},
        ])
        result = manager.validate_configuration()
        assert result.is_valid
        assert any("'b'" in w for w in result.warnings)

    def test_reset(self):
        """Test that reset restores the defaults."""
        manager = ConfigurationManager()
        manager.load_settings({"cache_max_size": 3})
        manager.load_rewrite_rules([])

        manager.reset()

        assert manager.settings.cache_max_size == 100
        assert len(manager.configuration.rewrite_rules) == 18
        assert not manager.is_loaded

    def test_to_dict(self):
        """Test the exported dictionary layout."""
        data = ConfigurationManager().to_dict()
        assert set(data) == {"version", "settings", "rewrite_rules", "metadata"}
        assert data["rewrite_rules"][0]["pattern"] == "may"


class TestValidationResult:
    """Tests for validation result merging."""

    def test_merge(self):
        """Test that merging combines validity and messages."""
        ok = ValidationResult(is_valid=True, warnings=["w"])
        bad = ValidationResult(is_valid=True)
        bad.add_error("e")

        merged = ok.merge(bad)

        assert not merged.is_valid
        assert merged.errors == ["e"]
        assert merged.warnings == ["w"]
