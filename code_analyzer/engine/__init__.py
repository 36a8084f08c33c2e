"""Rule engine: registry, dispatcher, sink and the host-facing analyzer."""

from .registry import RuleRegistry
from .sink import DiagnosticSink
from .dispatcher import (
    CancellationSignal,
    DispatchOutcome,
    Dispatcher,
)
from .analyzer import (
    Analyzer,
    TreeInput,
    UnitResult,
    analyze,
)

__all__ = [
    # Registry
    "RuleRegistry",
    # Sink
    "DiagnosticSink",
    # Dispatcher
    "CancellationSignal",
    "DispatchOutcome",
    "Dispatcher",
    # Analyzer
    "Analyzer",
    "TreeInput",
    "UnitResult",
    "analyze",
]
