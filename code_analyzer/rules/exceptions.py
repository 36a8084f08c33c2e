"""Rules about thrown exceptions."""

from code_analyzer.models.diagnostic import Finding
from code_analyzer.models.syntax import SyntaxKind, SyntaxNode, SyntaxTree
from code_analyzer.rules.base import grandparent_is, parent_is, rule
from code_analyzer.rules.tables import RESERVED_EXCEPTION_TYPES

GENERIC_EXCEPTION_MESSAGE = (
    "A method raises an exception type that is too general or that is reserved by the runtime. "
    "Use specific or Aggregation Exception"
)
EXCEPTION_WITHOUT_CONTEXT_MESSAGE = "This exception message does not provide context description."

_THROW = frozenset({SyntaxKind.THROW_STATEMENT})
_OBJECT_CREATION = frozenset({SyntaxKind.OBJECT_CREATION_EXPRESSION})


@rule("SEV008", "GenericExceptionType", SyntaxKind.IDENTIFIER_NAME)
def generic_exception_type(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """``throw new Exception(...)`` and the other reserved exception types."""
    if node.name not in RESERVED_EXCEPTION_TYPES:
        return None
    if not (parent_is(node, _OBJECT_CREATION) and grandparent_is(node, _THROW)):
        return None
    return Finding.at(node, GENERIC_EXCEPTION_MESSAGE)


@rule("SEV009", "ExceptionWithoutContext", SyntaxKind.OBJECT_CREATION_EXPRESSION)
def exception_without_context(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Exceptions thrown with an empty constructor call."""
    if not parent_is(node, _THROW):
        return None
    arguments = node.children_of(SyntaxKind.ARGUMENT_LIST)
    if not arguments:
        # Initializer-only creation, no argument list to inspect.
        return None
    if arguments[0].children_of(SyntaxKind.ARGUMENT):
        return None
    return Finding.at(node, EXCEPTION_WITHOUT_CONTEXT_MESSAGE)
