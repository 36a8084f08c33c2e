"""Naming rules."""

from code_analyzer.models.diagnostic import Finding
from code_analyzer.models.syntax import SyntaxKind, SyntaxNode, SyntaxTree
from code_analyzer.rules.base import grandparent_is, has_ancestor, parent_is, rule
from code_analyzer.rules.tables import (
    CONTEXTUAL_KEYWORDS,
    KEYWORD_EXEMPT_PARENTS,
    SETTER_VALUE_KEYWORD,
)

CONTEXTUAL_KEYWORD_MESSAGE = (
    "This code uses the contextual keyword as a variable or member name. "
    "An important improvement would be to rename this variable so that it is not named after a keyword"
)


@rule("SEV002", "ContextualKeywordAsName", SyntaxKind.IDENTIFIER_NAME)
def contextual_keyword(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Identifiers named after a contextual keyword.

    Only plain name usages count: identifiers sitting in an invocation,
    declaration header, loop or switch header, typeof, parameter or generic
    argument are skipped, and so is ``value`` inside a property setter.
    """
    name = node.name
    if name not in CONTEXTUAL_KEYWORDS:
        return None
    if parent_is(node, KEYWORD_EXEMPT_PARENTS):
        return None
    if grandparent_is(node, {SyntaxKind.GENERIC_NAME}):
        return None
    if name == SETTER_VALUE_KEYWORD and has_ancestor(node, SyntaxKind.SET_ACCESSOR_DECLARATION):
        return None
    return Finding.at(node, CONTEXTUAL_KEYWORD_MESSAGE)
