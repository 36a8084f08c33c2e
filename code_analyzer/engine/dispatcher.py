"""Dispatcher - walks a tree and fans each node out to interested rules.

The walk is a pre-order traversal, so diagnostics come out in source order
for any given rule. Every rule invocation is isolated: a rule that raises
loses only that one opportunity to report, and the fault is recorded on the
sink as a ``RuleFailure``.
"""

from dataclasses import dataclass
from typing import Protocol

import structlog

from code_analyzer.engine.registry import RuleRegistry
from code_analyzer.engine.sink import DiagnosticSink
from code_analyzer.models.diagnostic import Finding, RuleFailure
from code_analyzer.models.syntax import SyntaxNode, SyntaxTree
from code_analyzer.rules.base import RuleDescriptor


class CancellationSignal(Protocol):
    """Anything with ``is_set()``; ``threading.Event`` fits."""

    def is_set(self) -> bool:
        ...


@dataclass
class DispatchOutcome:
    """Bookkeeping for one pass."""

    nodes_visited: int = 0
    rule_invocations: int = 0
    diagnostics_reported: int = 0
    rule_failures: int = 0
    cancelled: bool = False


class Dispatcher:
    """Routes visited nodes to the rules registered for their kind."""

    def __init__(self, registry: RuleRegistry):
        self.registry = registry
        self._logger = structlog.get_logger(component="Dispatcher")

    def dispatch(
        self,
        tree: SyntaxTree,
        sink: DiagnosticSink,
        cancel: CancellationSignal | None = None,
    ) -> DispatchOutcome:
        """Visit every node once and run the rules for its kind.

        Args:
            tree: The validated tree to walk
            sink: Receives diagnostics and rule failures
            cancel: Checked between node visits; when set the walk stops and
                already-reported diagnostics are kept

        Returns:
            DispatchOutcome with visit counters and the cancelled flag
        """
        outcome = DispatchOutcome()

        for node in tree.walk():
            if cancel is not None and cancel.is_set():
                outcome.cancelled = True
                self._logger.info(
                    "Dispatch cancelled",
                    path=tree.path,
                    nodes_visited=outcome.nodes_visited,
                )
                break

            outcome.nodes_visited += 1
            for rule in self.registry.rules_for(node.kind):
                outcome.rule_invocations += 1
                self._invoke(rule, node, tree, sink, outcome)

        self._logger.debug(
            "Dispatch complete",
            path=tree.path,
            nodes_visited=outcome.nodes_visited,
            rule_invocations=outcome.rule_invocations,
            diagnostics=outcome.diagnostics_reported,
            failures=outcome.rule_failures,
        )
        return outcome

    def _invoke(
        self,
        rule: RuleDescriptor,
        node: SyntaxNode,
        tree: SyntaxTree,
        sink: DiagnosticSink,
        outcome: DispatchOutcome,
    ) -> None:
        try:
            finding = rule.evaluate(node, tree)
            if finding is None:
                return
            if not isinstance(finding, Finding):
                raise TypeError(f"rule returned {type(finding).__name__}, expected Finding or None")
            diagnostic = rule.to_diagnostic(finding, tree.path)
        except Exception as e:
            outcome.rule_failures += 1
            self._logger.warning(
                "Rule evaluation failed",
                rule_id=rule.id,
                node_kind=node.kind.value,
                path=tree.path,
                line=node.span.line,
                error=str(e),
            )
            sink.record_failure(RuleFailure(
                rule_id=rule.id,
                node_kind=node.kind,
                location=node.span,
                error_type=type(e).__name__,
                error=str(e),
            ))
            return

        sink.report(diagnostic)
        outcome.diagnostics_reported += 1
