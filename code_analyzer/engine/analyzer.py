"""Analyzer - the host-facing entry point.

Turns one analyzed unit (a SyntaxTree or an interchange document) into its
diagnostics. A malformed tree is a unit-level failure: ``analyze`` raises
``TreeProviderError`` and ``analyze_unit`` returns a failed ``UnitResult``;
neither ever returns partial diagnostics for it.
"""

from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

import structlog

from code_analyzer.engine.dispatcher import CancellationSignal, Dispatcher
from code_analyzer.engine.registry import RuleRegistry
from code_analyzer.engine.sink import DiagnosticSink
from code_analyzer.errors import TreeProviderError
from code_analyzer.models.diagnostic import Diagnostic, RuleFailure
from code_analyzer.models.syntax import SyntaxTree
from code_analyzer.models.tree_schema import load_tree
from code_analyzer.settings import AnalyzerSettings, get_settings

TreeInput = SyntaxTree | Mapping[str, Any] | str | bytes


@dataclass
class UnitResult:
    """Outcome of analyzing one unit."""

    path: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    failures: list[RuleFailure] = field(default_factory=list)
    error: TreeProviderError | None = None
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        """True if the tree was accepted and the pass ran."""
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "ok": self.ok,
            "cancelled": self.cancelled,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "failures": [f.to_dict() for f in self.failures],
            "error": self.error.to_dict() if self.error else None,
        }


class Analyzer:
    """Runs the registered rules over syntax trees."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        settings: AnalyzerSettings | None = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry if registry is not None else RuleRegistry.default()
        self.dispatcher = Dispatcher(self.registry)
        self._logger = structlog.get_logger(component="Analyzer")

    def analyze(
        self,
        tree: TreeInput,
        cancel: CancellationSignal | None = None,
    ) -> list[Diagnostic]:
        """Analyze one unit and return its diagnostics in visit order.

        Raises:
            TreeProviderError: If the tree is malformed
        """
        unit = self._coerce(tree)
        sink = DiagnosticSink()
        self.dispatcher.dispatch(unit, sink, cancel)
        return sink.drain()

    def analyze_unit(
        self,
        tree: TreeInput,
        cancel: CancellationSignal | None = None,
    ) -> UnitResult:
        """Analyze one unit, reporting provider faults in the result instead of raising."""
        try:
            unit = self._coerce(tree)
        except TreeProviderError as e:
            self._logger.error(
                "Syntax tree rejected",
                path=e.path,
                error=str(e),
            )
            return UnitResult(path=e.path, error=e)

        sink = DiagnosticSink()
        outcome = self.dispatcher.dispatch(unit, sink, cancel)

        self._logger.info(
            "Analysis complete",
            path=unit.path,
            nodes=outcome.nodes_visited,
            diagnostics=len(sink),
            failures=len(sink.failures),
            cancelled=outcome.cancelled,
        )

        return UnitResult(
            path=unit.path,
            diagnostics=list(sink.diagnostics),
            failures=list(sink.failures),
            cancelled=outcome.cancelled,
        )

    def analyze_many(
        self,
        trees: Iterable[TreeInput],
        cancel: CancellationSignal | None = None,
    ) -> list[UnitResult]:
        """Analyze independent units in parallel.

        Each unit gets its own sink; results come back in input order.
        """
        units = list(trees)
        if not units:
            return []

        workers = min(self.settings.max_workers, len(units))
        self._logger.info("Analyzing units", count=len(units), workers=workers)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lambda unit: self.analyze_unit(unit, cancel), units))

    @staticmethod
    def _coerce(tree: TreeInput) -> SyntaxTree:
        if isinstance(tree, SyntaxTree):
            return tree
        if isinstance(tree, (Mapping, str, bytes)):
            return load_tree(tree)
        raise TreeProviderError(f"Unsupported tree input: {type(tree).__name__}")


def analyze(tree: TreeInput) -> list[Diagnostic]:
    """Analyze one unit with the built-in rules."""
    return Analyzer().analyze(tree)
