"""Data models: the syntax tree the engine consumes and the diagnostics it emits."""

from .syntax import (
    SourceSpan,
    SyntaxKind,
    SyntaxNode,
    SyntaxTree,
)
from .diagnostic import (
    DIAGNOSTIC_CATEGORY,
    Diagnostic,
    DiagnosticSeverity,
    Finding,
    RuleFailure,
)
from .tree_schema import (
    NodeModel,
    SpanModel,
    TreeDocument,
    load_tree,
)

__all__ = [
    # Syntax
    "SourceSpan",
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxTree",
    # Diagnostics
    "DIAGNOSTIC_CATEGORY",
    "Diagnostic",
    "DiagnosticSeverity",
    "Finding",
    "RuleFailure",
    # Interchange
    "NodeModel",
    "SpanModel",
    "TreeDocument",
    "load_tree",
]
