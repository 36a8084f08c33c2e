"""Rules about how collections are exposed and iterated."""

from code_analyzer.models.diagnostic import Finding
from code_analyzer.models.syntax import SyntaxKind, SyntaxNode, SyntaxTree
from code_analyzer.rules.base import parent_is, rule, type_text
from code_analyzer.rules.tables import (
    COLLECTION_TYPE_PREFIXES,
    MATERIALIZING_CALLS,
    NON_SURFACE_TYPE_PARENTS,
)

LISKOV_MESSAGE = "This member publicly exposes a concrete collection type"
MATERIALIZE_IN_FOREACH_MESSAGE = (
    "ToArray/ToList inside foreach declaration. Remove the `ToArray()` or `ToList()` call "
    "and use the `IEnumerable` instance directly"
)


@rule(
    "SEV005",
    "LiskovSubstitutionPrinciple",
    SyntaxKind.PARAMETER,
    SyntaxKind.GENERIC_NAME,
    SyntaxKind.PREDEFINED_TYPE,
)
def liskov_substitution(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Concrete collection types named in a signature or declaration.

    Matching is textual: the last dotted segment of the type name is compared
    against the collection prefixes.
    """
    if parent_is(node, NON_SURFACE_TYPE_PARENTS):
        return None

    type_name = _type_name(node)
    if not type_name:
        return None
    type_name = type_name.split(".")[-1]

    if not type_name.startswith(COLLECTION_TYPE_PREFIXES):
        return None
    return Finding.at(node, LISKOV_MESSAGE)


def _type_name(node: SyntaxNode) -> str | None:
    match node.kind:
        case SyntaxKind.PREDEFINED_TYPE:
            return node.text.strip()
        case SyntaxKind.PARAMETER:
            return type_text(node)
        case SyntaxKind.GENERIC_NAME:
            return node.identifier or node.text.split("<", 1)[0].strip()
        case _:
            return None


@rule("SEV006", "ToArrayToListInsideForeach", SyntaxKind.FOREACH_STATEMENT)
def to_array_in_foreach(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """``foreach`` over an expression that calls ToArray() or ToList()."""
    expression = node.child("expression")
    if expression is None:
        return None
    if not any(call in expression.text for call in MATERIALIZING_CALLS):
        return None
    return Finding.at(expression, MATERIALIZE_IN_FOREACH_MESSAGE)
