# -*- coding: utf-8 -*-
""" Structural definitions of the introspection types that are part of every
spec compliant schema.

These only describe the shape of the introspection system (fields, arguments,
enum values) so that SDL documents can reference them; they carry no runtime
behaviour.
"""

from .scalars import Boolean, String
from .types import (
    DIRECTIVE_LOCATIONS,
    Argument,
    EnumType,
    EnumValue,
    Field,
    GraphQLType,
    ListType,
    NonNullType,
    ObjectType,
)


def _non_null_list(type_: GraphQLType) -> NonNullType:
    return NonNullType(ListType(NonNullType(type_)))


def _include_deprecated() -> Argument:
    return Argument("includeDeprecated", Boolean, default_value=False)


__Schema__ = ObjectType(
    "__Schema",
    description=(
        "A GraphQL Schema defines the capabilities of a GraphQL server. "
        "It exposes all available types and directives on the server, "
        "as well as the entry points for query, mutation, "
        "and subscription operations."
    ),
    fields=lambda: [
        Field("description", String),
        Field(
            "types",
            _non_null_list(__Type__),
            description="A list of all types supported by this server.",
        ),
        Field(
            "queryType",
            NonNullType(__Type__),
            description="The type that query operations will be rooted at.",
        ),
        Field(
            "mutationType",
            __Type__,
            description=(
                "If this server supports mutation, the type that mutation "
                "operations will be rooted at."
            ),
        ),
        Field(
            "subscriptionType",
            __Type__,
            description=(
                "If this server supports subscription, the type that "
                "subscription operations will be rooted at."
            ),
        ),
        Field(
            "directives",
            _non_null_list(__Directive__),
            description="A list of all directives supported by this server.",
        ),
    ],
)


__Directive__ = ObjectType(
    "__Directive",
    description=(
        "A Directive provides a way to describe alternate runtime execution "
        "and type validation behavior in a GraphQL document."
        "\n\nIn some cases, you need to provide options to alter GraphQL's "
        "execution behavior in ways field arguments will not suffice, such as "
        "conditionally including or skipping a field. Directives provide this "
        "by describing additional information to the executor."
    ),
    fields=lambda: [
        Field("name", NonNullType(String)),
        Field("description", String),
        Field("isRepeatable", NonNullType(Boolean)),
        Field("locations", _non_null_list(__DirectiveLocation__)),
        Field("args", _non_null_list(__InputValue__)),
    ],
)  # type: ObjectType


_LOCATION_DESCRIPTIONS = {
    "QUERY": "a query operation",
    "MUTATION": "a mutation operation",
    "SUBSCRIPTION": "a subscription operation",
    "FIELD": "a field",
    "FRAGMENT_DEFINITION": "a fragment definition",
    "FRAGMENT_SPREAD": "a fragment spread",
    "INLINE_FRAGMENT": "an inline fragment",
    "VARIABLE_DEFINITION": "a variable definition",
    "SCHEMA": "a schema definition",
    "SCALAR": "a scalar definition",
    "OBJECT": "an object type definition",
    "FIELD_DEFINITION": "a field definition",
    "ARGUMENT_DEFINITION": "an argument definition",
    "INTERFACE": "an interface definition",
    "UNION": "a union definition",
    "ENUM": "an enum definition",
    "ENUM_VALUE": "an enum value definition",
    "INPUT_OBJECT": "an input object type definition",
    "INPUT_FIELD_DEFINITION": "an input object field definition",
}


__DirectiveLocation__ = EnumType(
    "__DirectiveLocation",
    [
        EnumValue(
            location,
            description="Location adjacent to %s."
            % _LOCATION_DESCRIPTIONS[location],
        )
        for location in DIRECTIVE_LOCATIONS
    ],
    description=(
        "A Directive can be adjacent to many parts of the GraphQL language, a "
        "__DirectiveLocation describes one such possible adjacencies."
    ),
)  # type: EnumType


__Type__ = ObjectType(
    "__Type",
    description=(
        "The fundamental unit of any GraphQL Schema is the type. There are "
        "many kinds of types in GraphQL as represented by the `__TypeKind` "
        "enum.\n\nDepending on the kind of a type, certain fields describe "
        "information about that type. Scalar types provide no information "
        "beyond a name and description, while Enum types provide their values. "
        "Object and Interface types provide the fields they describe. Abstract "
        "types, Union and Interface, provide the Object types possible "
        "at runtime. List and NonNull types compose other types."
    ),
    fields=lambda: [
        Field("kind", NonNullType(__TypeKind__)),
        Field("name", String),
        Field("description", String),
        Field("specifiedByURL", String),
        Field(
            "fields",
            ListType(NonNullType(__Field__)),
            args=[_include_deprecated()],
        ),
        Field("interfaces", ListType(NonNullType(__Type__))),
        Field("possibleTypes", ListType(NonNullType(__Type__))),
        Field(
            "enumValues",
            ListType(NonNullType(__EnumValue__)),
            args=[_include_deprecated()],
        ),
        Field("inputFields", ListType(NonNullType(__InputValue__))),
        Field("ofType", __Type__),
    ],
)  # type: ObjectType


__EnumValue__ = ObjectType(
    "__EnumValue",
    description=(
        "One possible value for a given Enum. Enum values are unique values, "
        "not a placeholder for a string or numeric value. However an Enum "
        "value is returned in a JSON response as a string."
    ),
    fields=lambda: [
        Field("name", NonNullType(String)),
        Field("description", String),
        Field("isDeprecated", NonNullType(Boolean)),
        Field("deprecationReason", String),
    ],
)  # type: ObjectType


__InputValue__ = ObjectType(
    "__InputValue",
    description=(
        "Arguments provided to Fields or Directives and the input fields "
        "of an InputObject are represented as Input Values which describe "
        "their type and optionally a default value."
    ),
    fields=lambda: [
        Field("name", NonNullType(String)),
        Field("description", String),
        Field("type", NonNullType(__Type__)),
        Field(
            "defaultValue",
            String,
            description=(
                "A GraphQL-formatted string representing the "
                "default value for this input value."
            ),
        ),
    ],
)  # type: ObjectType


__Field__ = ObjectType(
    "__Field",
    description=(
        "Object and Interface types are described by a list of Fields, "
        "each of which has a name, potentially a list of arguments, and "
        "a return type."
    ),
    fields=lambda: [
        Field("name", NonNullType(String)),
        Field("description", String),
        Field("args", _non_null_list(__InputValue__)),
        Field("type", NonNullType(__Type__)),
        Field("isDeprecated", NonNullType(Boolean)),
        Field("deprecationReason", String),
    ],
)  # type: ObjectType


__TypeKind__ = EnumType(
    "__TypeKind",
    [
        EnumValue("SCALAR", description="Indicates this type is a scalar."),
        EnumValue(
            "OBJECT",
            description=(
                "Indicates this type is an object. `fields` and "
                "`interfaces` are valid fields."
            ),
        ),
        EnumValue(
            "INTERFACE",
            description=(
                "Indicates this type is an interface. `fields`, `interfaces` "
                "and `possibleTypes` are valid fields."
            ),
        ),
        EnumValue(
            "UNION",
            description=(
                "Indicates this type is a union. `possibleTypes` is "
                "a valid field."
            ),
        ),
        EnumValue(
            "ENUM",
            description=(
                "Indicates this type is an enum. `enumValues` is a "
                "valid field."
            ),
        ),
        EnumValue(
            "INPUT_OBJECT",
            description=(
                "Indicates this type is an input object. `inputFields` "
                "is a valid field."
            ),
        ),
        EnumValue(
            "LIST",
            description="Indicates this type is a list. `ofType` is a valid "
            "field.",
        ),
        EnumValue(
            "NON_NULL",
            description=(
                "Indicates this type is a non-null. `ofType` is a "
                "valid field."
            ),
        ),
    ],
    description="An enum describing what kind of type a given `__Type` is.",
)  # type: EnumType


INTROSPECTION_TYPES = (
    __Schema__,
    __Directive__,
    __DirectiveLocation__,
    __Type__,
    __Field__,
    __InputValue__,
    __EnumValue__,
    __TypeKind__,
)


def is_introspection_type(type_: GraphQLType) -> bool:
    return type_ in INTROSPECTION_TYPES
