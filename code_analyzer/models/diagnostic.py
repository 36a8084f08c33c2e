"""Diagnostic records produced by a dispatch pass."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from code_analyzer.models.syntax import SourceSpan, SyntaxKind, SyntaxNode

# Every built-in rule reports under this one category.
DIAGNOSTIC_CATEGORY = "Severes"


class DiagnosticSeverity(str, Enum):
    """Severity attached to a rule's diagnostics."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Finding:
    """What a rule hands back when it fires.

    Kept separate from ``Diagnostic`` so rules stay unaware of their own id,
    severity and category; the dispatcher stamps those in.
    """

    location: SourceSpan
    message: str

    @classmethod
    def at(cls, node: SyntaxNode, message: str) -> "Finding":
        return cls(location=node.span, message=message)


@dataclass(frozen=True)
class Diagnostic:
    """A reported code-quality finding."""

    rule_id: str
    category: str
    severity: DiagnosticSeverity
    location: SourceSpan
    message: str
    path: str = "<tree>"

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "category": self.category,
            "severity": self.severity.value,
            "location": {
                "start": self.location.start,
                "end": self.location.end,
                "line": self.location.line,
                "column": self.location.column,
            },
            "message": self.message,
            "path": self.path,
        }

    def __str__(self) -> str:
        return f"{self.path}:{self.location} {self.rule_id} [{self.severity.value}] {self.message}"


@dataclass(frozen=True)
class RuleFailure:
    """A rule invocation that raised instead of abstaining or reporting."""

    rule_id: str
    node_kind: SyntaxKind
    location: SourceSpan
    error_type: str
    error: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "node_kind": self.node_kind.value,
            "line": self.location.line,
            "column": self.location.column,
            "error_type": self.error_type,
            "error": self.error,
        }
