"""Pytest configuration and shared fixtures."""

import pytest

from code_analyzer.engine import Analyzer, RuleRegistry
from code_analyzer.models import SyntaxKind as K
from code_analyzer.models import SyntaxTree
from code_analyzer.settings import AnalyzerSettings

from builders import (
    block,
    case_section,
    class_decl,
    enum_decl,
    enum_member,
    expression_statement,
    field_decl,
    foreach,
    generic,
    ident,
    if_stmt,
    method,
    parameter,
    parameter_list,
    predefined,
    struct_decl,
    switch,
    throw_new,
    try_catch,
    unit,
)


@pytest.fixture
def settings() -> AnalyzerSettings:
    """Settings independent of the host environment."""
    return AnalyzerSettings(log_level="WARNING", log_json=False, max_workers=2)


@pytest.fixture
def registry() -> RuleRegistry:
    return RuleRegistry.default()


@pytest.fixture
def analyzer(registry: RuleRegistry, settings: AnalyzerSettings) -> Analyzer:
    return Analyzer(registry, settings)


@pytest.fixture
def kitchen_sink_tree() -> SyntaxTree:
    """A unit containing at least one instance of every rule trigger kind."""
    process = method(
        "Process",
        params=parameter_list(
            parameter(generic("List", predefined("int", role=None)), "items"),
            parameter(predefined("bool"), "force"),
            parameter(predefined("int"), "a"),
            parameter(predefined("int"), "b"),
            parameter(predefined("int"), "c"),
        ),
        body=block(
            foreach("item", "items", materialize="ToList"),
            switch(ident("a", role="expression"), case_section("1")),
            if_stmt(ident("force", role="condition"), block()),
            try_catch(
                block(expression_statement(ident("value"))),
                block(),
            ),
            throw_new("Exception"),
        ),
    )

    return unit(
        class_decl(
            "OrderManager",
            field_decl(("public",), predefined("int"), "Count"),
            process,
        ),
        struct_decl("Point"),
        enum_decl("Color", enum_member("Red", "1"), enum_member("Green", "2")),
        path="Kitchen.cs",
    )


@pytest.fixture
def trigger_kinds() -> frozenset[K]:
    """Every kind at least one built-in rule listens to."""
    return frozenset({
        K.FIELD_DECLARATION,
        K.IDENTIFIER_NAME,
        K.CLASS_DECLARATION,
        K.BLOCK,
        K.PARAMETER,
        K.GENERIC_NAME,
        K.PREDEFINED_TYPE,
        K.FOREACH_STATEMENT,
        K.SWITCH_STATEMENT,
        K.OBJECT_CREATION_EXPRESSION,
        K.ENUM_DECLARATION,
        K.PARAMETER_LIST,
        K.STRUCT_DECLARATION,
    })
