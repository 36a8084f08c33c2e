"""Static configuration tables shared by the built-in rules.

Everything here is immutable and module-level so the lists can be tested and
extended independently of the rule logic that consults them.
"""

from code_analyzer.models.syntax import SyntaxKind

# Contextual keywords that should not be reused as names.
CONTEXTUAL_KEYWORDS: frozenset[str] = frozenset({
    "add",
    "alias",
    "ascending",
    "async",
    "await",
    "by",
    "descending",
    "dynamic",
    "equals",
    "from",
    "get",
    "global",
    "group",
    "into",
    "join",
    "let",
    "nameof",
    "on",
    "orderby",
    "partial",
    "remove",
    "select",
    "set",
    "value",
    "var",
    "when",
    "where",
    "yield",
})

# Implicit parameter name of a property setter.
SETTER_VALUE_KEYWORD = "value"

# Parents under which an identifier is not being used as a plain name.
KEYWORD_EXEMPT_PARENTS: frozenset[SyntaxKind] = frozenset({
    SyntaxKind.INVOCATION_EXPRESSION,
    SyntaxKind.VARIABLE_DECLARATION,
    SyntaxKind.FOREACH_STATEMENT,
    SyntaxKind.FOR_STATEMENT,
    SyntaxKind.WHILE_STATEMENT,
    SyntaxKind.SWITCH_STATEMENT,
    SyntaxKind.DECLARATION_EXPRESSION,
    SyntaxKind.TYPE_OF_EXPRESSION,
    SyntaxKind.METHOD_DECLARATION,
    SyntaxKind.PARAMETER,
})

# Exception types that are too general or reserved by the runtime.
RESERVED_EXCEPTION_TYPES: frozenset[str] = frozenset({
    "Exception",
    "ApplicationException",
    "SystemException",
    "ExecutionEngineException",
    "IndexOutOfRangeException",
    "NullReferenceException",
    "OutOfMemoryException",
})

# Prefixes of concrete collection types that should not be exposed.
COLLECTION_TYPE_PREFIXES: tuple[str, ...] = (
    "Enumerable",
    "ReadOnlyCollection",
    "Collection",
    "ReadOnlyList",
    "Dictionary",
    "List",
)

# Class name suffixes that describe a role rather than a noun.
NON_NOUN_CLASS_SUFFIXES: tuple[str, ...] = (
    "Manager",
    "Processor",
    "Data",
    "Info",
)

BOOLEAN_TYPE_NAMES: frozenset[str] = frozenset({"bool", "Boolean"})

EXPOSING_MODIFIERS: frozenset[str] = frozenset({"public", "protected"})
RESTRICTING_FIELD_MODIFIERS: frozenset[str] = frozenset({"private", "internal", "const", "static"})

# Calls that materialize a sequence before iterating it.
MATERIALIZING_CALLS: tuple[str, ...] = (".ToArray()", ".ToList()")

# Parameter count at which a signature is considered too long.
MAX_PARAMETERS_THRESHOLD = 5

ZERO_LITERAL = "0"

LAMBDA_KINDS: frozenset[SyntaxKind] = frozenset({
    SyntaxKind.SIMPLE_LAMBDA_EXPRESSION,
    SyntaxKind.PARENTHESIZED_LAMBDA_EXPRESSION,
})

ANONYMOUS_FUNCTION_KINDS: frozenset[SyntaxKind] = LAMBDA_KINDS | {SyntaxKind.ANONYMOUS_METHOD_EXPRESSION}

# Contexts where naming a collection type is construction or reflection, not API surface.
NON_SURFACE_TYPE_PARENTS: frozenset[SyntaxKind] = frozenset({
    SyntaxKind.OBJECT_CREATION_EXPRESSION,
    SyntaxKind.TYPE_OF_EXPRESSION,
})
