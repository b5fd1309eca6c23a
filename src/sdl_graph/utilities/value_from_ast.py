# -*- coding: utf-8 -*-

from typing import Any, Dict

from graphql.language import ast as _ast

from ..exc import InvalidValue
from ..schema.types import (
    EnumType,
    GraphQLType,
    InputObjectType,
    ListType,
    NonNullType,
    ScalarType,
)


def value_from_ast(node: _ast.ValueNode, type_: GraphQLType) -> Any:
    """
    Convert an ast value node into a valid python value while validating
    against a given type.

    This is used for the constant values found in schema definitions, most
    notably argument and input field default values.

    Args:
        node: The value node
        type_: Type to validate against

    Returns:
        Extracted value

    Raises:
        :py:class:`TypeError`:
            when the type is not an input type

        :class:`~sdl_graph.exc.InvalidValue`:
            if the value cannot be converted
    """
    if isinstance(node, _ast.VariableNode):
        raise InvalidValue(
            'Unexpected variable "$%s" in constant value' % node.name.value,
            [node],
        )

    if isinstance(type_, NonNullType):
        if isinstance(node, _ast.NullValueNode):
            raise InvalidValue("Expected non null value.", [node])
        else:
            type_ = type_.type

    if isinstance(node, _ast.NullValueNode):
        return None

    if isinstance(type_, ListType):
        if not isinstance(node, _ast.ListValueNode):
            return [value_from_ast(node, type_.type)]

        return [value_from_ast(item, type_.type) for item in node.values]

    if isinstance(type_, InputObjectType):
        if not isinstance(node, _ast.ObjectValueNode):
            raise InvalidValue(
                "Expected Object but got %s" % node.__class__.__name__, [node]
            )
        return _extract_input_object(node, type_)

    if isinstance(type_, EnumType):
        if not isinstance(node, _ast.EnumValueNode):
            raise InvalidValue("Expected EnumValue", [node])
        return type_.get_value(node.value)

    if isinstance(type_, ScalarType):
        return type_.parse_literal(node)

    raise TypeError("Invalid type for input coercion %s" % type_)


def _extract_input_object(
    node: _ast.ObjectValueNode, type_: InputObjectType
) -> Dict[str, Any]:
    coerced = {}
    node_fields = {f.name.value: f for f in node.fields}

    unknown = set(node_fields) - set(type_.field_map)
    if unknown:
        raise InvalidValue(
            "Unknown field(s) %s for %s" % (", ".join(sorted(unknown)), type_),
            [node],
        )

    for field in type_.fields:
        name = field.name
        if name not in node_fields:
            if field.has_default_value:
                coerced[name] = field.default_value
            elif isinstance(field.type, NonNullType):
                raise InvalidValue("Missing field %s" % name, [node])
        else:
            coerced[name] = value_from_ast(node_fields[name].value, field.type)

    return coerced
