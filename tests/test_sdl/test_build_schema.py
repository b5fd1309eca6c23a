# -*- coding: utf-8 -*-

import pytest
from graphql import parse
from graphql.language import DocumentNode, ObjectTypeDefinitionNode

from sdl_graph import build_ast_schema, build_schema, build_schema_config
from sdl_graph.exc import (
    DuplicateDefinition,
    GraphQLSyntaxError,
    InvalidDocument,
    SchemaValidationError,
    SDLError,
    TypeCastFailure,
    UnionMemberNotObject,
    UnknownType,
)
from sdl_graph.schema import (
    ID,
    INTROSPECTION_TYPES,
    SPECIFIED_DIRECTIVES,
    Boolean,
    EnumType,
    Float,
    InputObjectType,
    Int,
    InterfaceType,
    ListType,
    NonNullType,
    ObjectType,
    ScalarType,
    String,
    UnionType,
)
from sdl_graph.schema.introspection import __EnumValue__, __Schema__


def test_simple_types():
    schema = build_schema(
        """
        type Query {
            str: String
            int: Int
            float: Float
            id: ID
            bool: Boolean
        }
        """
    )

    assert schema.get_type("Int") is Int
    assert schema.get_type("Float") is Float
    assert schema.get_type("String") is String
    assert schema.get_type("Boolean") is Boolean
    assert schema.get_type("ID") is ID
    assert schema.query_type is not None
    assert len(schema.types) == 6 + len(INTROSPECTION_TYPES)


def test_unreferenced_standard_scalars_are_excluded():
    schema = build_schema("type Query { str: String }")

    assert not schema.has_type("Int")
    assert not schema.has_type("Float")
    assert not schema.has_type("ID")
    # Referenced by the introspection types.
    assert schema.has_type("Boolean")


def test_accepts_parsed_documents():
    schema = build_schema(parse("type Query { str: String }"))
    assert schema.query_type.field_map["str"].type is String


def test_build_ast_schema():
    schema = build_ast_schema(parse("type Query { str: String }"))
    assert schema.query_type.name == "Query"


def test_descriptions():
    config = build_schema_config(
        parse(
            '''
            """The root"""
            type Query {
                """A string"""
                str(
                    """An argument"""
                    arg: Int
                ): String
                other: Int
            }
            '''
        )
    )

    query = config.query_type
    assert query.description == "The root"
    assert query.field_map["str"].description == "A string"
    assert query.field_map["str"].arguments[0].description == "An argument"
    assert query.field_map["other"].description is None


def test_type_modifiers():
    schema = build_schema(
        """
        type Query {
            nonNullStr: String!
            listOfStrings: [String]
            listOfNonNullStrings: [String!]
            nonNullListOfStrings: [String]!
            nonNullListOfNonNullStrings: [String!]!
        }
        """
    )
    fields = schema.query_type.field_map

    assert fields["nonNullStr"].type == NonNullType(String)
    assert fields["listOfStrings"].type == ListType(String)
    assert fields["listOfNonNullStrings"].type == ListType(NonNullType(String))
    assert fields["nonNullListOfStrings"].type == NonNullType(ListType(String))
    assert fields["nonNullListOfNonNullStrings"].type == NonNullType(
        ListType(NonNullType(String))
    )


def test_recursive_type():
    schema = build_schema(
        """
        type Query {
            str: String
            recurse: Query
        }
        """
    )
    assert schema.query_type.field_map["recurse"].type is schema.query_type


def test_two_types_circular():
    schema = build_schema(
        """
        schema {
            query: TypeOne
        }

        type TypeOne {
            str: String
            typeTwo: TypeTwo
        }

        type TypeTwo {
            str: String
            typeOne: TypeOne
        }
        """
    )
    one = schema.get_type("TypeOne")
    two = schema.get_type("TypeTwo")

    assert one.field_map["typeTwo"].type is two
    assert two.field_map["typeOne"].type is one


def test_forward_references():
    config = build_schema_config(
        parse(
            """
            type Query {
                later: Later
            }

            type Later {
                str: String
            }
            """
        )
    )
    later = config.types[1]
    assert later.name == "Later"
    assert config.query_type.field_map["later"].type is later


def test_simple_type_with_interface():
    schema = build_schema(
        """
        type Query implements WorldInterface {
            str: String
        }

        interface WorldInterface {
            str: String
        }
        """
    )
    interface = schema.get_type("WorldInterface")

    assert isinstance(interface, InterfaceType)
    assert schema.query_type.interfaces == [interface]
    assert schema.implementations["WorldInterface"] == [schema.query_type]


def test_unreferenced_type_implementing_referenced_interface():
    schema = build_schema(
        """
        type Concrete implements Interface {
            key: String
        }

        interface Interface {
            key: String
        }

        type Query {
            interface: Interface
        }
        """
    )
    concrete = schema.get_type("Concrete")
    assert [i.name for i in concrete.interfaces] == ["Interface"]


def test_interface_hierarchy():
    config = build_schema_config(
        parse(
            """
            interface Child implements Parent {
                str: String
            }

            type Hello implements Parent & Child {
                str: String
            }

            interface Parent {
                str: String
            }

            type Query {
                hello: Hello
            }
            """
        )
    )
    child, hello, parent = config.types[:3]

    assert child.interfaces == [parent]
    assert hello.interfaces == [parent, child]


def test_single_value_enum():
    schema = build_schema(
        """
        enum Hello {
            WORLD
        }

        type Query {
            hello: Hello
        }
        """
    )
    enum = schema.get_type("Hello")

    assert isinstance(enum, EnumType)
    assert [v.name for v in enum.values] == ["WORLD"]
    assert enum.get_value("WORLD") == "WORLD"


def test_multi_value_enum():
    schema = build_schema(
        """
        enum Hello {
            WO
            RLD
        }

        type Query {
            hello: Hello
        }
        """
    )
    assert [v.name for v in schema.get_type("Hello").values] == ["WO", "RLD"]


def test_simple_union():
    schema = build_schema(
        """
        union Hello = World

        type Query {
            hello: Hello
        }

        type World {
            str: String
        }
        """
    )
    union = schema.get_type("Hello")

    assert isinstance(union, UnionType)
    assert union.types == [schema.get_type("World")]


def test_multiple_union():
    schema = build_schema(
        """
        union Hello = WorldOne | WorldTwo

        type Query {
            hello: Hello
        }

        type WorldOne {
            str: String
        }

        type WorldTwo {
            str: String
        }
        """
    )
    assert [t.name for t in schema.get_type("Hello").types] == [
        "WorldOne",
        "WorldTwo",
    ]


def test_unions_are_registered_after_other_types():
    config = build_schema_config(
        parse(
            """
            union U = A
            type A { a: Int }
            type Query { u: U }
            """
        )
    )
    assert [t.name for t in config.types] == ["A", "Query", "U"]


def test_union_member_must_be_an_object_type():
    with pytest.raises(UnionMemberNotObject) as exc_info:
        build_schema_config(
            parse(
                """
                union U = I
                interface I { a: Int }
                type Query { u: U }
                """
            )
        )

    assert exc_info.value.type_name == "I"
    assert str(exc_info.value) == 'Union member "I" is not an object type'


def test_custom_scalar():
    schema = build_schema(
        """
        scalar CustomScalar

        type Query {
            customScalar: CustomScalar
        }
        """
    )
    scalar = schema.get_type("CustomScalar")

    assert isinstance(scalar, ScalarType)
    assert scalar.description is None
    assert scalar.specified_by_url is None


def test_simple_input_object():
    schema = build_schema(
        """
        input Input {
            "The input field"
            int: Int
        }

        type Query {
            field(in: Input): String
        }
        """
    )
    input_type = schema.get_type("Input")

    assert isinstance(input_type, InputObjectType)
    assert input_type.field_map["int"].type is Int
    assert input_type.field_map["int"].description == "The input field"


def test_input_with_enum_list():
    schema = build_schema(
        """
        enum Color { RED GREEN }

        input Filter {
            colors: [Color!]
        }

        type Query {
            field(filter: Filter): String
        }
        """
    )
    colors = schema.get_type("Filter").field_map["colors"]
    assert colors.type == ListType(NonNullType(schema.get_type("Color")))


def test_simple_type_with_mutation():
    schema = build_schema(
        """
        schema {
            query: HelloScalars
            mutation: Mutation
        }

        type HelloScalars {
            str: String
            int: Int
            bool: Boolean
        }

        type Mutation {
            addHelloScalars(str: String, int: Int, bool: Boolean): HelloScalars
        }
        """
    )
    assert schema.query_type.name == "HelloScalars"
    assert schema.mutation_type.name == "Mutation"

    args = schema.mutation_type.field_map["addHelloScalars"].arguments
    assert [(a.name, a.type) for a in args] == [
        ("str", String),
        ("int", Int),
        ("bool", Boolean),
    ]


def test_custom_root_operation_names():
    schema = build_schema(
        """
        schema {
            query: SomeQuery
            mutation: SomeMutation
            subscription: SomeSubscription
        }

        type SomeQuery { str: String }
        type SomeMutation { str: String }
        type SomeSubscription { str: String }
        """
    )
    assert schema.query_type.name == "SomeQuery"
    assert schema.mutation_type.name == "SomeMutation"
    assert schema.subscription_type.name == "SomeSubscription"


def test_default_root_operation_names():
    schema = build_schema(
        """
        type Query { str: String }
        type Mutation { str: String }
        type Subscription { str: String }
        """
    )
    assert schema.query_type.name == "Query"
    assert schema.mutation_type.name == "Mutation"
    assert schema.subscription_type.name == "Subscription"


def test_schema_definition_only_overrides_listed_operations():
    schema = build_schema(
        """
        schema {
            query: Root
        }

        type Root { str: String }
        type Query { str: String }
        type Mutation { str: String }
        """
    )
    assert schema.query_type.name == "Root"
    assert schema.mutation_type.name == "Mutation"


def test_convention_names_must_be_object_types():
    config = build_schema_config(
        parse(
            """
            input Query { str: String }
            """
        )
    )
    assert config.query_type is None


def test_unknown_root_type():
    with pytest.raises(UnknownType) as exc_info:
        build_schema_config(parse("schema { query: Missing }"))

    assert exc_info.value.type_name == "Missing"


def test_root_type_must_be_an_object_type():
    with pytest.raises(SDLError):
        build_schema_config(
            parse(
                """
                schema { query: Child }
                interface Child { str: String }
                """
            )
        )


def test_duplicate_root_operation():
    with pytest.raises(SDLError):
        build_schema_config(
            parse(
                """
                schema { query: A query: B }
                type A { str: String }
                type B { str: String }
                """
            )
        )


def test_duplicate_schema_definition():
    with pytest.raises(SDLError):
        build_schema_config(
            parse(
                """
                schema { query: A }
                schema { query: A }
                type A { str: String }
                """
            )
        )


def test_does_not_override_standard_types():
    schema = build_schema(
        """
        type Query {
            id: ID
        }

        scalar ID

        scalar __Schema
        """
    )
    assert schema.get_type("ID") is ID
    assert schema.get_type("__Schema") is __Schema__


def test_standard_type_redefinitions_are_not_user_types():
    config = build_schema_config(
        parse(
            """
            scalar ID
            type Query { id: ID }
            """
        )
    )
    assert [t.name for t in config.types] == ["Query"]


def test_reference_introspection_types():
    schema = build_schema(
        """
        type Query {
            introspectionField: __EnumValue
        }
        """
    )
    field = schema.query_type.field_map["introspectionField"]

    assert field.type is __EnumValue__
    assert schema.get_type("__EnumValue") is __EnumValue__


def test_unknown_types_fail_the_build():
    with pytest.raises(UnknownType) as exc_info:
        build_schema(
            """
            type Query {
                unknown: UnknownType
            }
            """
        )

    assert exc_info.value.type_name == "UnknownType"
    assert isinstance(exc_info.value, KeyError)


def test_unknown_type_error_locations():
    with pytest.raises(UnknownType) as exc_info:
        build_schema("type Query { unknown: UnknownType }")

    assert exc_info.value.locations == [(1, 23)]
    assert exc_info.value.to_dict() == {
        "message": 'Unknown type "UnknownType"',
        "locations": [{"line": 1, "column": 23}],
    }


def test_unknown_argument_type_fails_the_build():
    with pytest.raises(UnknownType):
        build_schema_config(
            parse("type Query { field(arg: Missing): String }")
        )


@pytest.mark.parametrize("document", [None, {}, "type Query { a: Int }"])
def test_rejects_invalid_documents(document):
    with pytest.raises(InvalidDocument):
        build_schema_config(document)


def test_rejects_document_without_definitions():
    with pytest.raises(InvalidDocument):
        build_schema_config(DocumentNode())


def test_empty_document():
    config = build_schema_config(DocumentNode(definitions=[]))

    assert config.query_type is None
    assert config.mutation_type is None
    assert config.subscription_type is None
    assert config.types == []
    assert config.directives == []


def test_executable_definitions_are_ignored():
    config = build_schema_config(parse("query { field }"))
    assert config.types == []
    assert config.directives == []


def test_specified_directives_are_included():
    config = build_schema_config(parse("type Query { str: String }"))
    assert config.directives == list(SPECIFIED_DIRECTIVES)


def test_syntax_errors():
    with pytest.raises(GraphQLSyntaxError) as exc_info:
        build_schema("type Query {")

    assert len(exc_info.value.locations) == 1
    assert exc_info.value.locations[0][0] == 1


def test_duplicate_type_definitions():
    with pytest.raises(DuplicateDefinition):
        build_schema_config(
            parse(
                """
                type Query { str: String }
                type Query { int: Int }
                """
            )
        )


def test_duplicate_fields_in_definition():
    with pytest.raises(DuplicateDefinition):
        build_schema_config(
            parse(
                """
                type Query {
                    str: String
                    str: Int
                }
                """
            )
        )


def test_field_type_must_be_an_output_type():
    with pytest.raises(TypeCastFailure):
        build_schema_config(
            parse(
                """
                input In { str: String }
                type Query { field: In }
                """
            )
        )


def test_missing_query_type_fails_validation():
    with pytest.raises(SchemaValidationError) as exc_info:
        build_schema("type Mutation { str: String }")

    assert str(exc_info.value) == "Must provide Query type"


def test_missing_query_type_is_fine_in_config():
    config = build_schema_config(parse("type Mutation { str: String }"))
    assert config.query_type is None
    assert config.mutation_type.name == "Mutation"


def test_ast_nodes_are_kept():
    document = parse(
        """
        type Query {
            field(arg: Int): String
        }
        """
    )
    config = build_schema_config(document)
    query = config.query_type
    field = query.field_map["field"]

    assert query.nodes == [document.definitions[0]]
    assert isinstance(query.nodes[0], ObjectTypeDefinitionNode)
    assert field.node is document.definitions[0].fields[0]
    assert field.arguments[0].node is field.node.arguments[0]


def test_every_lazy_attribute_is_resolved_before_returning():
    config = build_schema_config(
        parse(
            """
            type Query { a: A }
            type A implements I { a: [A!] }
            interface I { a: [A!] }
            """
        )
    )
    for type_ in config.types:
        if isinstance(type_, ObjectType):
            assert type_._fields is not None
            assert type_._interfaces is not None


def test_starwars(starwars_schema):
    droid = starwars_schema.get_type("Droid")

    assert starwars_schema.query_type.name == "Query"
    assert starwars_schema.mutation_type.name == "Mutation"
    assert [f.name for f in droid.fields] == [
        "id",
        "name",
        "friends",
        "appearsIn",
        "primaryFunction",
        "function",
    ]
    assert droid.field_map["primaryFunction"].deprecated
    assert [
        t.name for t in starwars_schema.implementations["Character"]
    ] == ["Human", "Droid"]
    assert starwars_schema.get_type("Episode").description == (
        "One of the films in the Star Wars Trilogy"
    )


def test_long_chain_of_type_references():
    depth = 1500
    sdl = "\n".join(
        ["type Query { t: T0 }"]
        + ["type T%d { n: T%d }" % (i, i + 1) for i in range(depth)]
        + ["type T%d { s: String }" % depth]
    )
    schema = build_schema(sdl)

    # User types, plus String and Boolean from the introspection types.
    assert len(schema.types) == depth + 4 + len(INTROSPECTION_TYPES)
    assert schema.get_type("T0").field_map["n"].type is schema.get_type("T1")
    assert schema.get_type("T%d" % depth).field_map["s"].type is String


def test_building_twice_gives_equivalent_independent_graphs():
    sdl = """
    scalar String

    type Query {
        a: String
        b: Foo
    }

    type Foo {
        c: Int
    }

    extend type Foo {
        d: [Foo]
    }
    """

    def _shape(schema):
        return {
            name: sorted(f.name for f in type_.fields)
            for name, type_ in schema.types.items()
            if isinstance(type_, ObjectType)
        }

    first = build_schema(sdl)
    second = build_schema(sdl)

    assert _shape(first) == _shape(second)
    assert _shape(first)["Foo"] == ["c", "d"]
    assert first.get_type("String") is second.get_type("String") is String

    user_types = ("Query", "Foo")
    assert not {id(first.get_type(n)) for n in user_types} & {
        id(second.get_type(n)) for n in user_types
    }
