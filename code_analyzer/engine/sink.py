"""Diagnostic Sink - append-only collector owned by one dispatch pass."""

from collections.abc import Iterator

from code_analyzer.models.diagnostic import Diagnostic, RuleFailure


class DiagnosticSink:
    """Collects diagnostics in report order.

    No deduplication or suppression happens here; that is left to whoever
    consumes the results. Not shared across concurrent passes.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []
        self._failures: list[RuleFailure] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def record_failure(self, failure: RuleFailure) -> None:
        self._failures.append(failure)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    @property
    def failures(self) -> tuple[RuleFailure, ...]:
        return tuple(self._failures)

    def drain(self) -> list[Diagnostic]:
        """Hand the collected diagnostics to the caller and start empty."""
        drained, self._diagnostics = self._diagnostics, []
        return drained

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._diagnostics))
