# -*- coding: utf-8 -*-
from typing import Any

from graphql.language import ast as _ast

from ..exc import InvalidValue


def untyped_value_from_ast(node: _ast.ValueNode) -> Any:
    """
    Convert an ast value node into a valid python value without type validation.

    Args:
        node: The value node

    Returns:
        any: Extracted value

    Raises:
        :class:`~sdl_graph.exc.InvalidValue`:
            when node is a variable as schema definitions only support
            constant values

        :py:class:`TypeError`: when node is not a value node

    >>> from graphql import parse_value
    >>> untyped_value_from_ast(parse_value('{ a: [1, 2.5, "foo", BAR] }'))
    {'a': [1, 2.5, 'foo', 'BAR']}
    """
    if isinstance(node, _ast.NullValueNode):
        return None
    elif isinstance(node, _ast.IntValueNode):
        return int(node.value, 10)
    elif isinstance(node, _ast.FloatValueNode):
        return float(node.value)
    elif isinstance(
        node,
        (_ast.StringValueNode, _ast.EnumValueNode, _ast.BooleanValueNode),
    ):
        return node.value
    elif isinstance(node, _ast.ListValueNode):
        return [untyped_value_from_ast(item) for item in node.values]
    elif isinstance(node, _ast.ObjectValueNode):
        return {
            f.name.value: untyped_value_from_ast(f.value) for f in node.fields
        }
    elif isinstance(node, _ast.VariableNode):
        raise InvalidValue(
            'Unexpected variable "$%s" in constant value' % node.name.value,
            [node],
        )

    raise TypeError("Unexpected node %s" % node.__class__)
