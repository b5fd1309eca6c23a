# -*- coding: utf-8 -*-
"""
The :mod:`sdl_graph.schema` module exposes the type model making up a linked
type graph, the standard scalars, introspection types and directives, and the
:class:`Schema` container.
"""

# flake8: noqa

from .directives import (
    DEFAULT_DEPRECATION,
    SPECIFIED_DIRECTIVES,
    DeprecatedDirective,
    IncludeDirective,
    SkipDirective,
    SpecifiedByDirective,
)
from .introspection import INTROSPECTION_TYPES, is_introspection_type
from .scalars import ID, SPECIFIED_SCALAR_TYPES, Boolean, Float, Int, String
from .schema import Schema, SchemaConfig
from .types import (
    DIRECTIVE_LOCATIONS,
    Argument,
    Directive,
    EnumType,
    EnumValue,
    Field,
    GraphQLType,
    InputField,
    InputObjectType,
    InputValue,
    InterfaceType,
    ListType,
    NamedType,
    NonNullType,
    ObjectType,
    ScalarType,
    UnionType,
    is_input_type,
    is_output_type,
    nullable_type,
    unwrap_type,
)
