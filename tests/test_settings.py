"""Tests for settings and logging configuration."""

import pytest
import structlog
from pydantic import ValidationError

from code_analyzer.engine import Analyzer, RuleRegistry
from code_analyzer.logging_config import configure_logging
from code_analyzer.models import SyntaxKind as K
from code_analyzer.rules import rule
from code_analyzer.settings import AnalyzerSettings


@rule("TST200", "Exploding", K.IDENTIFIER_NAME)
def exploding_identifier_rule(node, tree):
    """Always raises."""
    raise RuntimeError("boom")


class TestAnalyzerSettings:
    """Tests for AnalyzerSettings."""

    def test_defaults(self, monkeypatch):
        """Test defaults with a clean environment."""
        for name in ("CODE_ANALYZER_LOG_LEVEL", "CODE_ANALYZER_LOG_JSON", "CODE_ANALYZER_MAX_WORKERS"):
            monkeypatch.delenv(name, raising=False)

        settings = AnalyzerSettings()

        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.max_workers == 4

    def test_environment_overrides(self, monkeypatch):
        """Test that CODE_ANALYZER_* variables are read."""
        monkeypatch.setenv("CODE_ANALYZER_LOG_LEVEL", "debug")
        monkeypatch.setenv("CODE_ANALYZER_LOG_JSON", "true")
        monkeypatch.setenv("CODE_ANALYZER_MAX_WORKERS", "8")

        settings = AnalyzerSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.max_workers == 8

    def test_unknown_log_level_rejected(self):
        """Test that only standard level names are accepted."""
        with pytest.raises(ValidationError):
            AnalyzerSettings(log_level="LOUD")

    def test_worker_count_must_be_positive(self):
        """Test the lower bound on max_workers."""
        with pytest.raises(ValidationError):
            AnalyzerSettings(max_workers=0)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_structlog(self, settings):
        """Test that configuration applies and loggers still work."""
        configure_logging(settings)

        assert structlog.is_configured()
        structlog.get_logger().info("Configured", component="test")

        structlog.reset_defaults()

    def test_json_renderer(self):
        """Test that log_json selects the JSON renderer."""
        configure_logging(AnalyzerSettings(log_level="ERROR", log_json=True))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

        structlog.reset_defaults()

    def test_configuration_after_construction_applies(self, settings, kitchen_sink_tree):
        """Test that engine objects built before configure() log through the new config."""
        analyzer = Analyzer(RuleRegistry([exploding_identifier_rule]), settings)
        events = []

        def collect(logger, method_name, event_dict):
            events.append(event_dict)
            raise structlog.DropEvent

        structlog.reset_defaults()
        structlog.configure(processors=[collect])
        try:
            analyzer.analyze_unit(kitchen_sink_tree)
        finally:
            structlog.reset_defaults()

        components = {(e.get("component"), e["event"]) for e in events}
        assert ("Analyzer", "Analysis complete") in components
        assert ("Dispatcher", "Rule evaluation failed") in components
