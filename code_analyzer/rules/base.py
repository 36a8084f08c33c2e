"""Rule descriptors and the helpers rules share.

A rule is a pure function ``(node, tree) -> Finding | None`` pinned to one or
more node kinds. It must not mutate the tree and must abstain (return
``None``) when the node does not have the shape it expects.
"""

from dataclasses import dataclass, field
from typing import Callable

from code_analyzer.models.diagnostic import (
    DIAGNOSTIC_CATEGORY,
    Diagnostic,
    DiagnosticSeverity,
    Finding,
)
from code_analyzer.models.syntax import SyntaxKind, SyntaxNode, SyntaxTree

Evaluator = Callable[[SyntaxNode, SyntaxTree], Finding | None]


@dataclass(frozen=True)
class RuleDescriptor:
    """Immutable description of one rule and the kinds it listens to."""

    id: str
    name: str
    interested_kinds: frozenset[SyntaxKind]
    evaluate: Evaluator = field(compare=False, repr=False)
    description: str = ""
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    category: str = DIAGNOSTIC_CATEGORY

    def to_diagnostic(self, finding: Finding, path: str) -> Diagnostic:
        return Diagnostic(
            rule_id=self.id,
            category=self.category,
            severity=self.severity,
            location=finding.location,
            message=finding.message,
            path=path,
        )


def rule(
    rule_id: str,
    name: str,
    *kinds: SyntaxKind,
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING,
) -> Callable[[Evaluator], RuleDescriptor]:
    """Turn an evaluator function into a RuleDescriptor.

    The first docstring line becomes the rule description.
    """

    def decorator(fn: Evaluator) -> RuleDescriptor:
        doc = (fn.__doc__ or "").strip()
        return RuleDescriptor(
            id=rule_id,
            name=name,
            interested_kinds=frozenset(kinds),
            evaluate=fn,
            description=doc.splitlines()[0] if doc else "",
            severity=severity,
        )

    return decorator


def parent_is(node: SyntaxNode, kinds: frozenset[SyntaxKind] | set[SyntaxKind]) -> bool:
    parent = node.parent
    return parent is not None and parent.kind in kinds


def grandparent_is(node: SyntaxNode, kinds: frozenset[SyntaxKind] | set[SyntaxKind]) -> bool:
    parent = node.parent
    return parent is not None and parent_is(parent, kinds)


def has_ancestor(node: SyntaxNode, kind: SyntaxKind) -> bool:
    return any(a.kind == kind for a in node.ancestors())


def type_text(node: SyntaxNode) -> str | None:
    """Verbatim text of the node's ``type`` child, if it has one."""
    type_node = node.child("type")
    if type_node is None:
        return None
    return type_node.text.strip()


def parameters_of(parameter_list: SyntaxNode) -> list[SyntaxNode]:
    return parameter_list.children_of(SyntaxKind.PARAMETER)
