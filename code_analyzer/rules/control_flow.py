"""Control-flow rules: empty blocks and switches without a default."""

from code_analyzer.models.diagnostic import Finding
from code_analyzer.models.syntax import SyntaxKind, SyntaxNode, SyntaxTree
from code_analyzer.rules.base import parent_is, rule
from code_analyzer.rules.tables import LAMBDA_KINDS

BLANK_BLOCK_MESSAGE = (
    "This code has a blank block to do nothing. Sometimes this means the code missed to implement here"
)
EMPTY_IF_MESSAGE = "This method contains an unnecessary empty if statement"
SWALLOWED_EXCEPTION_MESSAGE = 'The exception is ignored ("swallowed") by the try-catch block.'
SWITCH_WITHOUT_DEFAULT_MESSAGE = "Missing default case for switch"


@rule("SEV004", "BlankCode", SyntaxKind.BLOCK)
def blank_code(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Blocks with nothing in them, outside of lambda bodies."""
    if node.children or parent_is(node, LAMBDA_KINDS):
        return None

    parent = node.parent
    match parent.kind if parent is not None else None:
        case SyntaxKind.IF_STATEMENT:
            message = EMPTY_IF_MESSAGE
        case SyntaxKind.CATCH_CLAUSE:
            message = SWALLOWED_EXCEPTION_MESSAGE
        case _:
            message = BLANK_BLOCK_MESSAGE
    return Finding.at(node, message)


@rule("SEV007", "SwitchWithoutDefaultCase", SyntaxKind.SWITCH_STATEMENT)
def switch_without_default(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Switch statements with no default label anywhere beneath them."""
    if any(d.kind == SyntaxKind.DEFAULT_SWITCH_LABEL for d in node.descendants()):
        return None
    return Finding.at(node, SWITCH_WITHOUT_DEFAULT_MESSAGE)
