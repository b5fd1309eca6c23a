# -*- coding: utf-8 -*-
""" Pre-defined scalar types """

from typing import Any, Callable, List, Optional, Type, TypeVar, Union

from graphql.language import ast as _ast

from .types import ScalarType

T = TypeVar("T")

_ScalarValueNode = Union[
    _ast.IntValueNode,
    _ast.FloatValueNode,
    _ast.StringValueNode,
    _ast.BooleanValueNode,
]


# Shortcut to generate ``parse_literal`` from a simple
# parsing function by adding node type validation.
def _typed_coerce(
    coerce_: Callable[[Any], T], *types: Type[_ScalarValueNode]
) -> Callable[[_ScalarValueNode], T]:
    def _coerce(node: _ScalarValueNode) -> T:
        if type(node) not in types:
            raise TypeError("Invalid literal %s" % node.__class__.__name__)
        return coerce_(node.value)

    return _coerce


Boolean = ScalarType(
    "Boolean",
    description="The `Boolean` scalar type represents `true` or `false`.",
    parse_literal=_typed_coerce(bool, _ast.BooleanValueNode),
)


# GraphQL spec says -2^31 to 2^31 - 1.
MAX_INT = 2147483647
MIN_INT = -2147483648
INVALID_INT = "Int cannot represent non integer value: %s"
INVALID_NUMERIC = "Int cannot represent non 32-bit signed integer: %s"


def coerce_int(maybe_int: Any) -> int:
    """ GraphQL spec compliant int conversion.

    >>> coerce_int("42")
    42
    """
    if isinstance(maybe_int, bool):
        raise ValueError(INVALID_INT % maybe_int)
    elif isinstance(maybe_int, int):
        numeric = maybe_int
    elif isinstance(maybe_int, float):
        numeric = int(maybe_int)
        if numeric != maybe_int:
            raise ValueError(INVALID_INT % maybe_int)
    elif isinstance(maybe_int, str):
        if not maybe_int:
            raise ValueError(INVALID_INT % "(empty string)")
        try:
            numeric = int(maybe_int, 10)
        except ValueError:
            raise ValueError(INVALID_INT % maybe_int)
    else:
        raise ValueError(INVALID_INT % repr(maybe_int))

    if not (MIN_INT <= numeric <= MAX_INT):
        raise ValueError(INVALID_NUMERIC % maybe_int)

    return numeric


def coerce_float(maybe_float: Any) -> float:
    """ GraphQL spec compliant float conversion. """
    if maybe_float == "":
        raise ValueError(
            "Float cannot represent non numeric value: (empty string)"
        )
    if maybe_float is None:
        raise ValueError("Float cannot represent non numeric value: None")

    try:
        return float(maybe_float)
    except ValueError:
        raise ValueError(
            "Float cannot represent non numeric value: %s" % maybe_float
        )


Int = ScalarType(
    "Int",
    description=(
        "The `Int` scalar type represents non-fractional signed whole numeric "
        "values. Int can represent values between -(2^31) and 2^31 - 1."
    ),
    parse_literal=_typed_coerce(coerce_int, _ast.IntValueNode),
)


Float = ScalarType(
    "Float",
    description=(
        "The `Float` scalar type represents signed double-precision "
        "fractional values as specified by "
        "[IEEE 754](http://en.wikipedia.org/wiki/IEEE_floating_point)."
    ),
    parse_literal=_typed_coerce(
        coerce_float, _ast.FloatValueNode, _ast.IntValueNode
    ),
)


String = ScalarType(
    "String",
    description=(
        "The `String` scalar type represents textual data, represented as "
        "UTF-8 character sequences. The String type is most often used by "
        "GraphQL to represent free-form human-readable text."
    ),
    parse_literal=_typed_coerce(str, _ast.StringValueNode),
)


ID = ScalarType(
    "ID",
    description=(
        "The `ID` scalar type represents a unique identifier, often used to "
        "refetch an object or as key for a cache. The ID type appears in a "
        "JSON response as a String; however, it is not intended to be "
        "human-readable. When expected as an input type, any string (such "
        'as `"4"`) or integer (such as `4`) input value will be accepted as '
        "an ID."
    ),
    parse_literal=_typed_coerce(str, _ast.StringValueNode, _ast.IntValueNode),
)


# These are the types which are part of the GraphQL spec and will always be
# available in any compliant GraphQL server.
SPECIFIED_SCALAR_TYPES = (Int, Float, Boolean, String, ID)


def default_scalar(
    name: str,
    description: Optional[str] = None,
    specified_by_url: Optional[str] = None,
    nodes: Optional[
        List[Union[_ast.ScalarTypeDefinitionNode, _ast.ScalarTypeExtensionNode]]
    ] = None,
) -> ScalarType:
    """ Default noop scalar types used when generating scalars from schema
    definitions: literals are returned as their untyped Python value. """
    # Circular import
    from ..utilities import untyped_value_from_ast

    return ScalarType(
        name,
        parse_literal=untyped_value_from_ast,
        description=description,
        specified_by_url=specified_by_url,
        nodes=nodes,
    )
