# =============================================================================
# test_config.py - Scanner Options Tests
# =============================================================================
# Tests for ScannerOptions defaults, value coercion and environment loading.
# =============================================================================

import pytest
from lexscan.config import ScannerOptions, TypeContextRule, WhitespaceMode
from lexscan.errors import ConfigError, LexScanError


class TestDefaults:
    """Defaults reproduce the reference tokenizer."""

    def test_defaults(self):
        options = ScannerOptions()
        assert options.type_context_rule is TypeContextRule.ANY_KEYWORD
        assert options.whitespace is WhitespaceMode.NORMALIZED
        assert options.escape_aware is False


class TestCoercion:
    """String values are converted to their enums."""

    def test_string_values(self):
        options = ScannerOptions(type_context_rule="type-keyword", whitespace="verbatim")
        assert options.type_context_rule is TypeContextRule.TYPE_KEYWORD
        assert options.whitespace is WhitespaceMode.VERBATIM

    def test_invalid_rule(self):
        with pytest.raises(ConfigError) as exc_info:
            ScannerOptions(type_context_rule="sometimes")
        assert exc_info.value.field == "type_context_rule"
        assert "any-keyword" in exc_info.value.allowed

    def test_invalid_whitespace(self):
        with pytest.raises(ConfigError, match="invalid value 'tabs' for whitespace"):
            ScannerOptions(whitespace="tabs")

    @pytest.mark.parametrize("word,expected", [("no", False), ("yes", True), ("OFF", False)])
    def test_escape_words(self, word, expected):
        """String flags are parsed, not taken as truthy."""
        assert ScannerOptions(escape_aware=word).escape_aware is expected

    def test_invalid_escape_value(self):
        with pytest.raises(ConfigError) as exc_info:
            ScannerOptions(escape_aware="sometimes")
        assert exc_info.value.field == "escape_aware"

    def test_non_bool_escape_value(self):
        with pytest.raises(ConfigError, match="escape_aware"):
            ScannerOptions(escape_aware=1)

    def test_error_message_has_hint(self):
        with pytest.raises(LexScanError) as exc_info:
            ScannerOptions(whitespace="tabs")
        message = str(exc_info.value)
        assert message.startswith("error: ")
        assert "hint: expected one of: normalized, verbatim" in message


class TestFromEnv:
    """Loading options from environment variables."""

    def test_empty_environment(self):
        assert ScannerOptions.from_env({}) == ScannerOptions()

    def test_all_variables(self):
        options = ScannerOptions.from_env({
            "LEXSCAN_TYPE_CONTEXT": "type-keyword",
            "LEXSCAN_WHITESPACE": "verbatim",
            "LEXSCAN_ESCAPES": "yes",
        })
        assert options.type_context_rule is TypeContextRule.TYPE_KEYWORD
        assert options.whitespace is WhitespaceMode.VERBATIM
        assert options.escape_aware is True

    def test_values_are_case_insensitive(self):
        options = ScannerOptions.from_env({"LEXSCAN_WHITESPACE": " VERBATIM "})
        assert options.whitespace is WhitespaceMode.VERBATIM

    @pytest.mark.parametrize("word,expected", [
        ("1", True), ("true", True), ("On", True),
        ("0", False), ("false", False), ("off", False), ("NO", False),
    ])
    def test_escape_flag_words(self, word, expected):
        options = ScannerOptions.from_env({"LEXSCAN_ESCAPES": word})
        assert options.escape_aware is expected

    def test_invalid_escape_flag(self):
        with pytest.raises(ConfigError) as exc_info:
            ScannerOptions.from_env({"LEXSCAN_ESCAPES": "maybe"})
        assert exc_info.value.field == "LEXSCAN_ESCAPES"

    def test_invalid_rule_names_variable(self):
        with pytest.raises(ConfigError, match="LEXSCAN_TYPE_CONTEXT"):
            ScannerOptions.from_env({"LEXSCAN_TYPE_CONTEXT": "never"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("LEXSCAN_TYPE_CONTEXT", "type-keyword")
        options = ScannerOptions.from_env()
        assert options.type_context_rule is TypeContextRule.TYPE_KEYWORD
