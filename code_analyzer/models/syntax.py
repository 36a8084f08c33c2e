"""Syntax tree model consumed by the rule engine.

The tree is produced by an external front-end and is read-only for the
engine. Nodes are kind-tagged (``SyntaxKind`` is a closed enumeration),
own their children and hold only a weak reference to their parent.

Declarations that carry a name token (classes, enum members, parameters,
variable declarators, ...) expose it as ``identifier``; it is *not* a child
node, so it is never visited as an identifier name. Each child may carry a
``role`` naming its slot in the parent (``type``, ``expression``,
``arguments``, ``value``, ``body``, ...).
"""

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from code_analyzer.errors import MalformedTreeError


class SyntaxKind(str, Enum):
    """Closed set of node kinds the front-end may emit."""

    # Declarations
    COMPILATION_UNIT = "compilation_unit"
    NAMESPACE_DECLARATION = "namespace_declaration"
    USING_DIRECTIVE = "using_directive"
    CLASS_DECLARATION = "class_declaration"
    STRUCT_DECLARATION = "struct_declaration"
    ENUM_DECLARATION = "enum_declaration"
    ENUM_MEMBER_DECLARATION = "enum_member_declaration"
    EQUALS_VALUE_CLAUSE = "equals_value_clause"
    FIELD_DECLARATION = "field_declaration"
    PROPERTY_DECLARATION = "property_declaration"
    ACCESSOR_LIST = "accessor_list"
    GET_ACCESSOR_DECLARATION = "get_accessor_declaration"
    SET_ACCESSOR_DECLARATION = "set_accessor_declaration"
    METHOD_DECLARATION = "method_declaration"
    CONSTRUCTOR_DECLARATION = "constructor_declaration"
    MODIFIER = "modifier"
    VARIABLE_DECLARATION = "variable_declaration"
    VARIABLE_DECLARATOR = "variable_declarator"
    PARAMETER_LIST = "parameter_list"
    PARAMETER = "parameter"

    # Names and types
    IDENTIFIER_NAME = "identifier_name"
    GENERIC_NAME = "generic_name"
    TYPE_ARGUMENT_LIST = "type_argument_list"
    PREDEFINED_TYPE = "predefined_type"
    QUALIFIED_NAME = "qualified_name"

    # Statements
    BLOCK = "block"
    IF_STATEMENT = "if_statement"
    ELSE_CLAUSE = "else_clause"
    TRY_STATEMENT = "try_statement"
    CATCH_CLAUSE = "catch_clause"
    CATCH_DECLARATION = "catch_declaration"
    FINALLY_CLAUSE = "finally_clause"
    FOREACH_STATEMENT = "foreach_statement"
    FOR_STATEMENT = "for_statement"
    WHILE_STATEMENT = "while_statement"
    SWITCH_STATEMENT = "switch_statement"
    SWITCH_SECTION = "switch_section"
    CASE_SWITCH_LABEL = "case_switch_label"
    DEFAULT_SWITCH_LABEL = "default_switch_label"
    BREAK_STATEMENT = "break_statement"
    RETURN_STATEMENT = "return_statement"
    THROW_STATEMENT = "throw_statement"
    EXPRESSION_STATEMENT = "expression_statement"
    LOCAL_DECLARATION_STATEMENT = "local_declaration_statement"

    # Expressions
    INVOCATION_EXPRESSION = "invocation_expression"
    MEMBER_ACCESS_EXPRESSION = "member_access_expression"
    OBJECT_CREATION_EXPRESSION = "object_creation_expression"
    ARGUMENT_LIST = "argument_list"
    ARGUMENT = "argument"
    LITERAL_EXPRESSION = "literal_expression"
    TYPE_OF_EXPRESSION = "type_of_expression"
    DECLARATION_EXPRESSION = "declaration_expression"
    ASSIGNMENT_EXPRESSION = "assignment_expression"
    BINARY_EXPRESSION = "binary_expression"
    SIMPLE_LAMBDA_EXPRESSION = "simple_lambda_expression"
    PARENTHESIZED_LAMBDA_EXPRESSION = "parenthesized_lambda_expression"
    ANONYMOUS_METHOD_EXPRESSION = "anonymous_method_expression"


@dataclass(frozen=True, order=True)
class SourceSpan:
    """Character range of a node plus the line/column where it starts."""

    start: int
    end: int
    line: int = 1
    column: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, eq=False, repr=False)
class SyntaxNode:
    """A single immutable node of the syntax tree."""

    kind: SyntaxKind
    span: SourceSpan
    text: str = ""
    identifier: str | None = None
    role: str | None = None
    children: tuple["SyntaxNode", ...] = ()
    _parent: "weakref.ReferenceType[SyntaxNode] | None" = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for child in self.children:
            # A child already claimed by a live node keeps its first parent;
            # SyntaxTree validation reports the sharing. A child whose former
            # parent has been collected is free to be adopted.
            if isinstance(child, SyntaxNode) and child.parent is None:
                object.__setattr__(child, "_parent", weakref.ref(self))

    @classmethod
    def create(
        cls,
        kind: SyntaxKind,
        *children: "SyntaxNode",
        text: str | None = None,
        identifier: str | None = None,
        role: str | None = None,
        span: SourceSpan | None = None,
    ) -> "SyntaxNode":
        """Build a node, deriving text and span from the children when omitted."""
        if text is None:
            text = " ".join(c.text for c in children if c.text)
        if span is None:
            if children:
                first, last = children[0].span, children[-1].span
                span = SourceSpan(first.start, last.end, first.line, first.column)
            else:
                span = SourceSpan(0, len(text))
        return cls(
            kind=kind,
            span=span,
            text=text,
            identifier=identifier,
            role=role,
            children=tuple(children),
        )

    @property
    def parent(self) -> "SyntaxNode | None":
        return self._parent() if self._parent is not None else None

    @property
    def name(self) -> str:
        """Identifier token if the node has one, else its trimmed text."""
        return self.identifier if self.identifier is not None else self.text.strip()

    def is_kind(self, *kinds: SyntaxKind) -> bool:
        return self.kind in kinds

    def child(self, role: str) -> "SyntaxNode | None":
        """First child filling the given role."""
        for c in self.children:
            if c.role == role:
                return c
        return None

    def children_of(self, *kinds: SyntaxKind) -> list["SyntaxNode"]:
        return [c for c in self.children if c.kind in kinds]

    def ancestors(self) -> Iterator["SyntaxNode"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator["SyntaxNode"]:
        """Pre-order traversal starting with this node."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def descendants(self) -> Iterator["SyntaxNode"]:
        walker = self.walk()
        next(walker)
        yield from walker

    def __repr__(self) -> str:
        text = self.text if len(self.text) <= 40 else self.text[:37] + "..."
        kind = getattr(self.kind, "value", self.kind)
        return f"SyntaxNode({kind}, {self.span}, {text!r})"


class SyntaxTree:
    """One analyzed unit: a validated root node and the path it came from.

    Construction fails with ``MalformedTreeError`` when the structure is not a
    proper tree. That is a tree-provider fault and is fatal for the unit.
    """

    def __init__(self, root: SyntaxNode, path: str = "<tree>"):
        self.root = root
        self.path = path
        self.node_count = self._validate()

    def _validate(self) -> int:
        if not isinstance(self.root, SyntaxNode):
            raise MalformedTreeError(
                f"Tree root must be a SyntaxNode, got {type(self.root).__name__}",
                path=self.path,
            )
        if self.root.parent is not None:
            raise MalformedTreeError("Tree root must not have a parent", path=self.path)

        seen: set[int] = set()
        stack = [self.root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                raise MalformedTreeError(
                    f"Node {node!r} appears more than once in the tree",
                    path=self.path,
                )
            seen.add(id(node))

            if not isinstance(node.kind, SyntaxKind):
                raise MalformedTreeError(f"Unknown node kind {node.kind!r}", path=self.path)
            if node.span.end < node.span.start:
                raise MalformedTreeError(f"Node {node!r} has an inverted span", path=self.path)

            for child in node.children:
                if not isinstance(child, SyntaxNode):
                    raise MalformedTreeError(
                        f"Child of {node!r} is not a SyntaxNode: {child!r}",
                        path=self.path,
                    )
                if child.parent is not node:
                    raise MalformedTreeError(
                        f"Parent link of {child!r} does not point at {node!r}",
                        path=self.path,
                    )
                stack.append(child)

        return len(seen)

    def walk(self) -> Iterator[SyntaxNode]:
        return self.root.walk()

    def nodes_of(self, *kinds: SyntaxKind) -> Iterator[SyntaxNode]:
        return (n for n in self.walk() if n.kind in kinds)

    def __repr__(self) -> str:
        return f"SyntaxTree({self.path!r}, nodes={self.node_count})"
