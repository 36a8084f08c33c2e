"""Exception taxonomy for the analyzer.

Rule abstention is never an error. Only two conditions leave the engine as
exceptions:

- Tree-provider faults: the syntax tree handed in by the front-end is not a
  well-formed tree. Fatal for that unit only.
- Registration faults: a rule descriptor that cannot be wired into the
  registry. Raised at startup, never during a pass.

Faults raised *inside* a rule are caught by the dispatcher and surfaced as
``RuleFailure`` records instead.
"""

from typing import Any


class CodeAnalyzerError(Exception):
    """Base class for all analyzer errors."""


class TreeProviderError(CodeAnalyzerError):
    """The front-end supplied a tree the engine cannot analyze."""

    def __init__(self, message: str, path: str = "<unknown>", details: list[Any] | None = None):
        super().__init__(message)
        self.path = path
        self.details = details or []

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "path": self.path,
            "details": self.details,
        }


class MalformedTreeError(TreeProviderError):
    """The node structure is not a tree (shared nodes, broken parent links, bad kinds)."""


class RuleRegistrationError(CodeAnalyzerError):
    """A rule descriptor could not be registered."""
