"""Built-in rule catalogue.

``BUILTIN_RULES`` is ordered: rules listening to the same node kind are
invoked in this order, which fixes the order of their diagnostics for a
given node.
"""

from .base import RuleDescriptor, rule
from .collection_types import liskov_substitution, to_array_in_foreach
from .control_flow import blank_code, switch_without_default
from .design import (
    bool_parameter,
    classes_are_nouns,
    encapsulate_field,
    enum_default_value,
    prefer_class_over_struct,
    too_many_parameters,
)
from .exceptions import exception_without_context, generic_exception_type
from .naming import contextual_keyword

BUILTIN_RULES: tuple[RuleDescriptor, ...] = (
    encapsulate_field,
    contextual_keyword,
    classes_are_nouns,
    blank_code,
    liskov_substitution,
    to_array_in_foreach,
    switch_without_default,
    generic_exception_type,
    exception_without_context,
    enum_default_value,
    too_many_parameters,
    bool_parameter,
    prefer_class_over_struct,
)

RULES_BY_ID: dict[str, RuleDescriptor] = {r.id: r for r in BUILTIN_RULES}

__all__ = [
    "BUILTIN_RULES",
    "RULES_BY_ID",
    "RuleDescriptor",
    "rule",
    # Rules
    "blank_code",
    "bool_parameter",
    "classes_are_nouns",
    "contextual_keyword",
    "encapsulate_field",
    "enum_default_value",
    "exception_without_context",
    "generic_exception_type",
    "liskov_substitution",
    "prefer_class_over_struct",
    "switch_without_default",
    "to_array_in_foreach",
    "too_many_parameters",
]
