"""Declaration-shape rules: fields, type names, enums, structs and signatures."""

from code_analyzer.models.diagnostic import Finding
from code_analyzer.models.syntax import SyntaxKind, SyntaxNode, SyntaxTree
from code_analyzer.rules.base import parameters_of, parent_is, rule, type_text
from code_analyzer.rules.tables import (
    ANONYMOUS_FUNCTION_KINDS,
    BOOLEAN_TYPE_NAMES,
    EXPOSING_MODIFIERS,
    MAX_PARAMETERS_THRESHOLD,
    NON_NOUN_CLASS_SUFFIXES,
    RESTRICTING_FIELD_MODIFIERS,
    ZERO_LITERAL,
)

ENCAPSULATE_FIELD_MESSAGE = (
    "This code exposes a field as public or protected. Encapsulate this field into a property"
)
CLASSES_ARE_NOUNS_MESSAGE = (
    'Classes are nouns. Rename this class in order to eliminate "Processor", "Data" or "Info" word and '
    "keep a high level of expressiveness and meaningfulness."
)
ENUM_DEFAULT_VALUE_MESSAGE = "This enumeration does not contain a value for 0 (zero)."
TOO_MANY_PARAMETERS_MESSAGE = "This method receives too many parameters (>= 5)"
BOOL_PARAMETER_MESSAGE = "This method receives a bool argument. This is prone to be against SRP from SOLID"
PREFER_CLASS_MESSAGE = "This code defines a `struct` that should be a `class`"


@rule("SEV001", "EncapsulateField", SyntaxKind.FIELD_DECLARATION)
def encapsulate_field(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Public or protected fields should be properties."""
    modifiers = {m.text.strip() for m in node.children_of(SyntaxKind.MODIFIER)}
    if not modifiers & EXPOSING_MODIFIERS or modifiers & RESTRICTING_FIELD_MODIFIERS:
        return None

    declaration = node.children_of(SyntaxKind.VARIABLE_DECLARATION)
    if not declaration:
        return None
    if len(declaration[0].children_of(SyntaxKind.VARIABLE_DECLARATOR)) != 1:
        return None

    return Finding.at(node, ENCAPSULATE_FIELD_MESSAGE)


@rule("SEV003", "ClassesAreNouns", SyntaxKind.CLASS_DECLARATION)
def classes_are_nouns(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Class names should not end in role words such as Manager or Data."""
    if not node.identifier or not node.identifier.endswith(NON_NOUN_CLASS_SUFFIXES):
        return None
    return Finding.at(node, CLASSES_ARE_NOUNS_MESSAGE)


@rule("SEV010", "EnumDefaultValue", SyntaxKind.ENUM_DECLARATION)
def enum_default_value(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Enumerations should define a member equal to zero."""
    for member in node.children_of(SyntaxKind.ENUM_MEMBER_DECLARATION):
        value = _initializer_value(member)
        if value is None:
            # Implicitly numbered member: nothing to compare against.
            return None
        if value.text.strip() == ZERO_LITERAL:
            return None
    return Finding.at(node, ENUM_DEFAULT_VALUE_MESSAGE)


@rule("SEV011", "MethodWithMoreThanFourParameters", SyntaxKind.PARAMETER_LIST)
def too_many_parameters(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Signatures with five or more parameters."""
    if parent_is(node, ANONYMOUS_FUNCTION_KINDS):
        return None
    if len(parameters_of(node)) < MAX_PARAMETERS_THRESHOLD:
        return None
    return Finding.at(node, TOO_MANY_PARAMETERS_MESSAGE)


@rule("SEV012", "MethodWithBoolAsParameter", SyntaxKind.PARAMETER_LIST)
def bool_parameter(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Signatures taking a boolean flag."""
    if parent_is(node, ANONYMOUS_FUNCTION_KINDS):
        return None
    parameters = parameters_of(node)
    if not any(type_text(p) in BOOLEAN_TYPE_NAMES for p in parameters):
        return None
    return Finding.at(node, BOOL_PARAMETER_MESSAGE)


@rule("SEV013", "PreferClassOverStruct", SyntaxKind.STRUCT_DECLARATION)
def prefer_class_over_struct(node: SyntaxNode, tree: SyntaxTree) -> Finding | None:
    """Every struct declaration."""
    return Finding.at(node, PREFER_CLASS_MESSAGE)


def _initializer_value(member: SyntaxNode) -> SyntaxNode | None:
    for clause in member.children_of(SyntaxKind.EQUALS_VALUE_CLAUSE):
        value = clause.child("value")
        if value is None and clause.children:
            value = clause.children[0]
        return value
    return None
