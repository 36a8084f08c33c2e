"""structlog setup for hosts embedding the analyzer."""

import logging

import structlog

from code_analyzer.settings import AnalyzerSettings, get_settings


def configure_logging(settings: AnalyzerSettings | None = None) -> None:
    """Configure structlog level filtering and rendering from settings."""
    settings = settings or get_settings()

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, settings.log_level)),
        cache_logger_on_first_use=False,
    )
