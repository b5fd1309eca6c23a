# -*- coding: utf-8 -*-

import logging

import pytest
from graphql import parse

from sdl_graph import build_schema, build_schema_config
from sdl_graph.exc import ExtensionError
from sdl_graph.schema import Float, Int, String


def _build(sdl, **kwargs):
    return build_schema_config(parse(sdl), **kwargs)


def _type(config, name):
    return next(t for t in config.types if t.name == name)


def test_extend_object_type_with_fields_and_interfaces():
    schema = build_schema(
        """
        type Query {
            obj: SomeObject
        }

        type SomeObject implements Foo {
            first: String
        }

        extend type SomeObject implements Bar {
            second: Int
        }

        extend type SomeObject implements Baz {
            third: Float
        }

        interface Foo {
            first: String
        }

        interface Bar {
            second: Int
        }

        interface Baz {
            third: Float
        }
        """
    )
    some_object = schema.get_type("SomeObject")

    assert [(f.name, f.type) for f in some_object.fields] == [
        ("first", String),
        ("second", Int),
        ("third", Float),
    ]
    assert [i.name for i in some_object.interfaces] == ["Foo", "Bar", "Baz"]
    assert len(some_object.nodes) == 3


def test_extend_interface():
    config = _build(
        """
        interface SomeInterface {
            first: String
        }

        extend interface SomeInterface {
            second: Int
        }

        extend interface SomeInterface {
            third: Float
        }
        """
    )
    interface = _type(config, "SomeInterface")
    assert [f.name for f in interface.fields] == ["first", "second", "third"]


def test_extend_union():
    config = _build(
        """
        union SomeUnion = FirstType

        extend union SomeUnion = SecondType

        extend union SomeUnion = ThirdType

        type FirstType {
            first: String
        }

        type SecondType {
            second: Int
        }

        type ThirdType {
            third: Float
        }
        """
    )
    union = _type(config, "SomeUnion")
    assert [t.name for t in union.types] == [
        "FirstType",
        "SecondType",
        "ThirdType",
    ]


def test_extend_enum():
    config = _build(
        """
        enum SomeEnum {
            FIRST
        }

        extend enum SomeEnum {
            SECOND
        }

        extend enum SomeEnum {
            THIRD
        }
        """
    )
    enum = _type(config, "SomeEnum")
    assert [v.name for v in enum.values] == ["FIRST", "SECOND", "THIRD"]


def test_extend_input_type():
    config = _build(
        """
        input SomeInput {
            first: String
        }

        extend input SomeInput {
            second: Int = 2
        }

        extend input SomeInput {
            third: Float
        }
        """
    )
    input_type = _type(config, "SomeInput")

    assert [f.name for f in input_type.fields] == ["first", "second", "third"]
    assert input_type.field_map["second"].default_value == 2


def test_extend_scalar():
    config = _build(
        """
        scalar SomeScalar

        extend scalar SomeScalar @foo

        extend scalar SomeScalar @bar

        directive @foo on SCALAR
        directive @bar on SCALAR
        """
    )
    scalar = _type(config, "SomeScalar")
    assert len(scalar.nodes) == 3


def test_extension_declared_before_definition():
    config = _build(
        """
        extend type Query {
            second: Int
        }

        type Query {
            first: String
        }
        """
    )
    assert [f.name for f in config.query_type.fields] == ["first", "second"]


def test_extension_kind_must_match_definition():
    with pytest.raises(ExtensionError) as exc_info:
        _build(
            """
            type Foo {
                a: Int
            }

            extend interface Foo {
                b: Int
            }
            """
        )

    assert str(exc_info.value) == (
        "Expected ObjectTypeExtensionNode when extending ObjectType "
        "but got InterfaceTypeExtensionNode"
    )


def test_duplicate_field_in_extension():
    with pytest.raises(ExtensionError):
        _build(
            """
            type Query {
                a: Int
            }

            extend type Query {
                a: String
            }
            """
        )


def test_duplicate_interface_in_extension():
    with pytest.raises(ExtensionError):
        _build(
            """
            interface I { a: Int }

            type Query implements I {
                a: Int
            }

            extend type Query implements I
            """
        )


def test_duplicate_enum_value_in_extension():
    with pytest.raises(ExtensionError):
        _build(
            """
            enum E { A }

            extend enum E { A }
            """
        )


def test_duplicate_union_member_in_extension():
    with pytest.raises(ExtensionError):
        _build(
            """
            type A { a: Int }

            union U = A

            extend union U = A
            """
        )


def test_extending_unknown_type_is_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="sdl_graph"):
        config = _build(
            """
            type Query { a: Int }

            extend type Unknown { b: Int }
            """
        )

    assert [t.name for t in config.types] == ["Query"]
    assert 'Cannot extend undefined type "Unknown"' in caplog.text


def test_extending_unknown_type_fails_in_strict_mode():
    with pytest.raises(ExtensionError):
        _build(
            """
            type Query { a: Int }

            extend type Unknown { b: Int }
            """,
            strict=True,
        )


def test_extending_standard_types_is_ignored():
    config = _build(
        """
        type Query { a: String }

        extend scalar String @specifiedBy(url: "https://example.com")
        """,
        strict=True,
    )
    assert config.query_type.field_map["a"].type is String
    assert String.specified_by_url is None
