# -*- coding: utf-8 -*-

import pytest
from graphql import parse

from sdl_graph.exc import InvalidValue
from sdl_graph.schema import (
    Argument,
    DeprecatedDirective,
    Directive,
    Int,
    NonNullType,
    String,
)
from sdl_graph.utilities import coerce_argument_values, directive_arguments

LimitDirective = Directive(
    "limit",
    ["FIELD_DEFINITION"],
    [
        Argument("max", NonNullType(Int)),
        Argument("unit", String, default_value="items"),
        Argument("label", String),
    ],
)


def _field_node(source):
    return parse("type Query { %s }" % source).definitions[0].fields[0]


def test_directive_not_present():
    assert directive_arguments(LimitDirective, _field_node("a: Int")) is None


def test_directive_arguments_with_defaults():
    node = _field_node("a: Int @limit(max: 10)")
    assert directive_arguments(LimitDirective, node) == {
        "max": 10,
        "unit": "items",
    }


def test_directive_arguments_all_provided():
    node = _field_node('a: Int @limit(max: 10, unit: "kb", label: null)')
    assert directive_arguments(LimitDirective, node) == {
        "max": 10,
        "unit": "kb",
        "label": None,
    }


def test_first_matching_directive_is_used():
    node = _field_node("a: Int @other @limit(max: 1) @limit(max: 2)")
    assert directive_arguments(LimitDirective, node) == {
        "max": 1,
        "unit": "items",
    }


def test_missing_required_argument():
    with pytest.raises(InvalidValue) as exc_info:
        directive_arguments(LimitDirective, _field_node("a: Int @limit"))
    assert str(exc_info.value) == (
        'Argument "max" of required type "Int!" was not provided'
    )


def test_invalid_argument_value():
    node = _field_node('a: Int @limit(max: "10")')
    with pytest.raises(InvalidValue) as exc_info:
        directive_arguments(LimitDirective, node)
    assert str(exc_info.value).startswith(
        'Argument "max" of type "Int!" was provided invalid value "10"'
    )
    assert exc_info.value.locations == [(1, 21)]


def test_deprecated_directive_default_reason():
    node = _field_node("a: Int @deprecated")
    assert coerce_argument_values(DeprecatedDirective, node.directives[0]) == {
        "reason": "No longer supported"
    }
