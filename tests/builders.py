"""Builders for C#-shaped syntax fragments used across the tests.

Each helper mirrors the node layout a front-end would hand over for the
corresponding construct. Text is spelled out wherever a rule matches on it.
"""

from code_analyzer.models import SyntaxKind as K
from code_analyzer.models import SyntaxNode, SyntaxTree

create = SyntaxNode.create


def ident(name: str, role: str | None = None) -> SyntaxNode:
    return create(K.IDENTIFIER_NAME, text=name, identifier=name, role=role)


def predefined(name: str, role: str | None = "type") -> SyntaxNode:
    return create(K.PREDEFINED_TYPE, text=name, role=role)


def generic(name: str, *type_args: SyntaxNode, role: str | None = "type") -> SyntaxNode:
    args_text = ", ".join(a.text for a in type_args)
    return create(
        K.GENERIC_NAME,
        create(K.TYPE_ARGUMENT_LIST, *type_args, text=f"<{args_text}>"),
        text=f"{name}<{args_text}>",
        identifier=name,
        role=role,
    )


def literal(text: str, role: str | None = None) -> SyntaxNode:
    return create(K.LITERAL_EXPRESSION, text=text, role=role)


def modifier(word: str) -> SyntaxNode:
    return create(K.MODIFIER, text=word)


def field_decl(modifiers: tuple[str, ...], type_node: SyntaxNode, *names: str) -> SyntaxNode:
    declarators = [create(K.VARIABLE_DECLARATOR, text=n, identifier=n) for n in names]
    return create(
        K.FIELD_DECLARATION,
        *[modifier(m) for m in modifiers],
        create(K.VARIABLE_DECLARATION, type_node, *declarators),
    )


def parameter(type_node: SyntaxNode | None, name: str) -> SyntaxNode:
    if type_node is None:
        return create(K.PARAMETER, text=name, identifier=name)
    return create(K.PARAMETER, type_node, text=f"{type_node.text} {name}", identifier=name)


def parameter_list(*params: SyntaxNode) -> SyntaxNode:
    inner = ", ".join(p.text for p in params)
    return create(K.PARAMETER_LIST, *params, text=f"({inner})")


def block(*statements: SyntaxNode, role: str | None = "body") -> SyntaxNode:
    return create(K.BLOCK, *statements, text="{ }" if not statements else None, role=role)


def method(
    name: str,
    params: SyntaxNode | None = None,
    body: SyntaxNode | None = None,
    modifiers: tuple[str, ...] = ("public",),
    return_type: SyntaxNode | None = None,
) -> SyntaxNode:
    return create(
        K.METHOD_DECLARATION,
        *[modifier(m) for m in modifiers],
        return_type or predefined("void"),
        params or parameter_list(),
        body or block(create(K.RETURN_STATEMENT, text="return;")),
        identifier=name,
    )


def class_decl(name: str, *members: SyntaxNode) -> SyntaxNode:
    return create(K.CLASS_DECLARATION, *members, identifier=name, text=f"class {name}")


def struct_decl(name: str, *members: SyntaxNode) -> SyntaxNode:
    return create(K.STRUCT_DECLARATION, *members, identifier=name, text=f"struct {name}")


def enum_member(name: str, value: str | None = None) -> SyntaxNode:
    if value is None:
        return create(K.ENUM_MEMBER_DECLARATION, text=name, identifier=name)
    return create(
        K.ENUM_MEMBER_DECLARATION,
        create(K.EQUALS_VALUE_CLAUSE, literal(value, role="value"), text=f"= {value}"),
        text=f"{name} = {value}",
        identifier=name,
    )


def enum_decl(name: str, *members: SyntaxNode) -> SyntaxNode:
    return create(K.ENUM_DECLARATION, *members, identifier=name, text=f"enum {name}")


def arguments(*values: SyntaxNode) -> SyntaxNode:
    inner = ", ".join(v.text for v in values)
    return create(
        K.ARGUMENT_LIST,
        *[create(K.ARGUMENT, v) for v in values],
        text=f"({inner})",
        role="arguments",
    )


def new(type_node: SyntaxNode, *args: SyntaxNode) -> SyntaxNode:
    arg_list = arguments(*args)
    return create(
        K.OBJECT_CREATION_EXPRESSION,
        type_node,
        arg_list,
        text=f"new {type_node.text}{arg_list.text}",
    )


def throw_new(type_name: str, *args: SyntaxNode) -> SyntaxNode:
    creation = new(ident(type_name, role="type"), *args)
    return create(K.THROW_STATEMENT, creation, text=f"throw {creation.text};")


def call(target: str, method_name: str, *args: SyntaxNode, role: str | None = None) -> SyntaxNode:
    access = create(
        K.MEMBER_ACCESS_EXPRESSION,
        ident(target),
        ident(method_name),
        text=f"{target}.{method_name}",
    )
    arg_list = arguments(*args)
    return create(
        K.INVOCATION_EXPRESSION,
        access,
        arg_list,
        text=f"{access.text}{arg_list.text}",
        role=role,
    )


def foreach(
    variable: str,
    source: str,
    materialize: str | None = None,
    body: SyntaxNode | None = None,
) -> SyntaxNode:
    """``foreach (var <variable> in <source>[.<materialize>()])``."""
    if materialize is None:
        expression = ident(source, role="expression")
    else:
        expression = call(source, materialize, role="expression")
    return create(
        K.FOREACH_STATEMENT,
        ident("var"),
        expression,
        body or block(create(K.BREAK_STATEMENT, text="break;")),
        text=f"foreach (var {variable} in {expression.text})",
        identifier=variable,
    )


def switch(expression: SyntaxNode, *sections: SyntaxNode) -> SyntaxNode:
    return create(K.SWITCH_STATEMENT, expression, *sections, text=f"switch ({expression.text})")


def case_section(value: str) -> SyntaxNode:
    return create(
        K.SWITCH_SECTION,
        create(K.CASE_SWITCH_LABEL, literal(value), text=f"case {value}:"),
        create(K.BREAK_STATEMENT, text="break;"),
    )


def default_section() -> SyntaxNode:
    return create(
        K.SWITCH_SECTION,
        create(K.DEFAULT_SWITCH_LABEL, text="default:"),
        create(K.BREAK_STATEMENT, text="break;"),
    )


def if_stmt(condition: SyntaxNode, body: SyntaxNode) -> SyntaxNode:
    return create(K.IF_STATEMENT, condition, body)


def try_catch(body: SyntaxNode, handler: SyntaxNode) -> SyntaxNode:
    return create(K.TRY_STATEMENT, body, create(K.CATCH_CLAUSE, handler))


def expression_statement(expression: SyntaxNode) -> SyntaxNode:
    return create(K.EXPRESSION_STATEMENT, expression, text=f"{expression.text};")


def lambda_(params: SyntaxNode, body: SyntaxNode) -> SyntaxNode:
    return create(
        K.PARENTHESIZED_LAMBDA_EXPRESSION,
        params,
        body,
        text=f"{params.text} => {body.text}",
    )


def setter_property(name: str, *setter_statements: SyntaxNode) -> SyntaxNode:
    return create(
        K.PROPERTY_DECLARATION,
        modifier("public"),
        predefined("int"),
        create(
            K.ACCESSOR_LIST,
            create(K.GET_ACCESSOR_DECLARATION, text="get;"),
            create(K.SET_ACCESSOR_DECLARATION, block(*setter_statements)),
        ),
        identifier=name,
    )


def unit(*members: SyntaxNode, path: str = "Sample.cs") -> SyntaxTree:
    return SyntaxTree(create(K.COMPILATION_UNIT, *members), path)


def run_rule(rule, tree: SyntaxTree) -> list:
    """Evaluate one rule against every node of its kinds, keeping the findings."""
    findings = (rule.evaluate(n, tree) for n in tree.nodes_of(*rule.interested_kinds))
    return [f for f in findings if f is not None]
