# -*- coding: utf-8 -*-
""" Utilities to validate Python values against a schema / types """

from typing import Any, Dict, Optional, Sequence

from graphql.language import ast as _ast, print_ast

from .._utils import find_one
from ..exc import InvalidValue
from ..schema.types import Directive, NonNullType
from .value_from_ast import value_from_ast


def coerce_argument_values(
    definition: Directive, node: _ast.DirectiveNode
) -> Dict[str, Any]:
    """
    Prepare a dict of argument values given a directive definition and a
    directive node.

    Args:
        definition: Directive definition from which to extract argument
            definitions.

        node: Parse node

    Returns:
        Coerced arguments

    Raises:
        :class:`~sdl_graph.exc.InvalidValue`:
            if any argument value fails to coerce, required argument is
            missing, etc.
    """
    coerced_values = {}

    values = {a.name.value: a for a in node.arguments or []}
    for arg_def in definition.arguments:
        argname = arg_def.name
        argtype = arg_def.type
        if argname not in values:
            if arg_def.has_default_value:
                coerced_values[argname] = arg_def.default_value
            elif isinstance(argtype, NonNullType):
                raise InvalidValue(
                    'Argument "%s" of required type "%s" was not provided'
                    % (argname, argtype),
                    [node],
                )
        else:
            arg = values[argname]
            try:
                coerced_values[argname] = value_from_ast(arg.value, argtype)
            except InvalidValue as err:
                raise InvalidValue(
                    'Argument "%s" of type "%s" was provided invalid value %s '
                    "(%s)"
                    % (argname, argtype, print_ast(arg.value), err),
                    [node],
                ) from err

    return coerced_values


def directive_arguments(
    definition: Directive,
    node: _ast.Node,
) -> Optional[Dict[str, Any]]:
    """
    Extract directive argument given a definition node and a directive
    definition.

    Args:
        definition: Directive definition from which to extract arguments

        node: Parse node supporting directives

    Returns:
        Coerced directive arguments, ``None`` if the directive is not present
        on the node.

    Raises:
        :class:`~sdl_graph.exc.InvalidValue`:
            if any directive argument value fails to coerce, required argument
            is missing, etc.
    """
    directive = find_one(
        _directives(node), lambda d: d.name.value == definition.name
    )

    return (
        coerce_argument_values(definition, directive)
        if directive is not None
        else None
    )


def _directives(node: Any) -> Sequence[_ast.DirectiveNode]:
    return getattr(node, "directives", None) or ()
