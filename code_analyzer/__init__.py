"""code-analyzer - rule dispatch engine for code-quality diagnostics.

Takes an already-parsed syntax tree from a front-end, routes every node to
the rules interested in its kind and returns the diagnostics in a
deterministic order.
"""

from code_analyzer.engine import Analyzer, RuleRegistry, UnitResult, analyze
from code_analyzer.errors import (
    CodeAnalyzerError,
    MalformedTreeError,
    RuleRegistrationError,
    TreeProviderError,
)
from code_analyzer.models import Diagnostic, SyntaxKind, SyntaxNode, SyntaxTree, load_tree
from code_analyzer.rules import BUILTIN_RULES

__version__ = "0.1.0"

__all__ = [
    "Analyzer",
    "BUILTIN_RULES",
    "CodeAnalyzerError",
    "Diagnostic",
    "MalformedTreeError",
    "RuleRegistrationError",
    "RuleRegistry",
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxTree",
    "TreeProviderError",
    "UnitResult",
    "analyze",
    "load_tree",
]
