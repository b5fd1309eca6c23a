# -*- coding: utf-8 -*-

from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
    cast,
)

from graphql.language import ast as _ast

from .._utils import Lazy, lazy
from ..exc import InvalidValue, UnknownEnumValue

T = TypeVar("T")

LazySeq = Lazy[Sequence[T]]

_UNSET = object()

DIRECTIVE_LOCATIONS = (
    "QUERY",
    "MUTATION",
    "SUBSCRIPTION",
    "FIELD",
    "FRAGMENT_DEFINITION",
    "FRAGMENT_SPREAD",
    "INLINE_FRAGMENT",
    "VARIABLE_DEFINITION",
    "SCHEMA",
    "SCALAR",
    "OBJECT",
    "FIELD_DEFINITION",
    "ARGUMENT_DEFINITION",
    "INTERFACE",
    "UNION",
    "ENUM",
    "ENUM_VALUE",
    "INPUT_OBJECT",
    "INPUT_FIELD_DEFINITION",
)


class GraphQLType:
    """
    Base type class.

    All types part of a type graph should be instances of this class.
    """

    def __eq__(self, lhs: Any) -> bool:
        return self is lhs or (
            isinstance(self, (ListType, NonNullType))
            and self.__class__ == lhs.__class__
            and self.type == lhs.type
        )

    def __hash__(self) -> int:
        # Consistent with __eq__: wrapping types hash on their wrapped type.
        if isinstance(self, (ListType, NonNullType)):
            return hash((self.__class__, self.type))
        return id(self)


class NamedType(GraphQLType):
    """
    Named type base class.

    Warning:
        Named types must be unique across a single
        :class:`~sdl_graph.schema.Schema` instance.

    Attributes:
        name (str): Type name.
    """

    name = NotImplemented  # type: str

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return "%s(%s at %d)" % (self.__class__.__name__, self.name, id(self))


class NonNullType(GraphQLType):
    """
    Non nullable wrapping type.

    A non-null type is a wrapping type which points to another type and
    signals that values of this type are never null.

    Args:
        type_: Wrapped type
        node: Source node used when building type from the SDL

    Attributes:
        type (GraphQLType): Wrapped type
        node (Optional[graphql.language.NonNullTypeNode]):
            Source node used when building type from the SDL
    """

    __slots__ = ("node", "_ltype", "_type")

    def __init__(
        self,
        type_: Lazy[GraphQLType],
        node: Optional[_ast.NonNullTypeNode] = None,
    ):
        if isinstance(type_, NonNullType):
            raise ValueError("Cannot wrap NonNullType twice")

        self._ltype = type_
        self._type = None  # type: Optional[GraphQLType]
        self.node = node

    def __str__(self) -> str:
        return "%s!" % self.type

    @property
    def type(self) -> GraphQLType:
        if self._type is None:
            self._type = lazy(self._ltype)
        return self._type


class ListType(GraphQLType):
    """
    List wrapping type.

    A list type is a wrapping type which points to another type.

    Args:
        type_: Wrapped type
        node: Source node used when building type from the SDL

    Attributes:
        type (GraphQLType): Wrapped type
        node (Optional[graphql.language.ListTypeNode]):
            Source node used when building type from the SDL
    """

    __slots__ = ("node", "_ltype", "_type")

    def __init__(
        self,
        type_: Lazy[GraphQLType],
        node: Optional[_ast.ListTypeNode] = None,
    ):
        self._ltype = type_
        self._type = None  # type: Optional[GraphQLType]
        self.node = node

    def __str__(self) -> str:
        return "[%s]" % self.type

    @property
    def type(self) -> GraphQLType:
        if self._type is None:
            self._type = lazy(self._ltype)
        return self._type


class InputValue:
    def __init__(
        self,
        name: str,
        type_: GraphQLType,
        default_value: Any = _UNSET,
        description: Optional[str] = None,
        node: Optional[_ast.InputValueDefinitionNode] = None,
    ):
        self.name = name
        self.type = type_
        self.description = description
        self.has_default_value = default_value is not _UNSET
        self.node = node
        self._default_value = default_value

    @property
    def default_value(self) -> Any:
        if self._default_value is _UNSET:
            raise AttributeError("No default value")
        return self._default_value

    @default_value.setter
    def default_value(self, value: Any) -> None:
        self._default_value = value
        self.has_default_value = True

    @default_value.deleter
    def default_value(self) -> None:
        self._default_value = _UNSET
        self.has_default_value = False

    @property
    def required(self) -> bool:
        return (
            isinstance(self.type, NonNullType) and self._default_value is _UNSET
        )


class InputField(InputValue):
    """
    Member of an :class:`sdl_graph.schema.InputObjectType`.

    Warning:
        As ``None`` is a valid default value, in order to define a field
        without any default value, the ``default_value`` argument **must** be
        omitted.

    Args:
        name: Field name
        type_: Field type (must be input type)
        default_value: Default value
        description: Field description
        node: Source node used when building type from the SDL

    Attributes:
        name (str): Field name

        description (Optional[str]): Field description

        has_default_value (bool): ``True`` if default value is set

        default_value (Any):
            Default value if it was set. Accessing this attribute raises an
            :py:class:`AttributeError` if default value wasn't set.

        type (GraphQLType): Value type.

        required (bool):
            Whether this field is required (non nullable and does not have
            any default value)

        node (Optional[graphql.language.InputValueDefinitionNode]):
            Source node used when building type from the SDL
    """

    def __str__(self) -> str:
        return "InputField(%s: %s)" % (self.name, self.type)

    def __repr__(self) -> str:
        return "InputField(%s: %s at %d)" % (self.name, self.type, id(self))


class Argument(InputValue):
    """
    Argument definition for use in fields or directives.

    Warning:
        As ``None`` is a valid default value, in order to define an argument
        without any default value, the ``default_value`` argument **must** be
        omitted.

    Args:
        name: Argument name
        type_: Argument type (must be input type)
        default_value: Default value
        description: Argument description
        node: Source node used when building type from the SDL

    Attributes:
        name (str): Argument name

        description (Optional[str]): Argument description

        has_default_value (bool): ``True`` if default value is set

        default_value (Any):
            Default value if it was set. Accessing this attribute raises an
            :py:class:`AttributeError` if default value wasn't set.

        type (GraphQLType): Value type.

        required (bool):
            Whether this argument is required (non nullable and does not have
            any default value)

        node (Optional[graphql.language.InputValueDefinitionNode]):
            Source node used when building type from the SDL
    """

    def __str__(self) -> str:
        return "Argument(%s: %s)" % (self.name, self.type)

    def __repr__(self) -> str:
        return "Argument(%s: %s at %d)" % (self.name, self.type, id(self))


class InputObjectType(NamedType):
    """
    Input Object Type Definition

    An input object defines a structured collection of fields which can be
    supplied as a field or directive argument.

    Args:
        name: Type name
        fields: Fields, can be a zero-argument callable to defer resolution
        description: Type description
        nodes: Source nodes used when building type from the SDL

    Attributes:
        name (str): Type name

        description (Optional[str]): Type description

        nodes (List[\
            Union[\
                graphql.language.InputObjectTypeDefinitionNode,\
                graphql.language.InputObjectTypeExtensionNode,\
            ]\
        ]): Source nodes used when building type from the SDL

        fields (Sequence[InputField]): Object fields.

        field_map (Dict[str, InputField]): Object fields as a map.
    """

    def __init__(
        self,
        name: str,
        fields: LazySeq[InputField],
        description: Optional[str] = None,
        nodes: Optional[
            List[
                Union[
                    _ast.InputObjectTypeDefinitionNode,
                    _ast.InputObjectTypeExtensionNode,
                ]
            ]
        ] = None,
    ):
        self.name = name
        self.description = description
        self._source_fields = fields
        self._fields = None  # type: Optional[Sequence[InputField]]
        self.nodes = [] if nodes is None else nodes

    @property
    def fields(self) -> Sequence[InputField]:
        if self._fields is None:
            self._fields = lazy(self._source_fields) or []
        return self._fields

    @property
    def field_map(self) -> Dict[str, InputField]:
        return {f.name: f for f in self.fields}


_EV = TypeVar("_EV", bound="EnumValue")


class EnumValue:
    """
    Enum value definition.

    Args:
        name: Name of the value

        value: Python value.
            Defaults to ``name`` if omitted.

        deprecation_reason:
            If set, the value will be marked as deprecated.

        description: Enum value description

        node: Source node used when building type from the SDL

    Attributes:
        name (str): Enum value name

        value (Any): Enum value value

        description (Optional[str]): Enum value description

        deprecation_reason (Optional[str]):
            If set, the value will be marked as deprecated.

        deprecated: ``True`` if :attr:`deprecation_reason` is set.

        node (Optional[graphql.language.EnumValueDefinitionNode]):
            Source node used when building type from the SDL
    """

    __slots__ = (
        "deprecated",
        "deprecation_reason",
        "description",
        "name",
        "node",
        "value",
    )

    @classmethod
    def from_def(
        cls: Type[_EV], definition: Union[_EV, str, Tuple[str, Any]]
    ) -> _EV:
        """
        Create an enum value from various source objects.

        This supports existing `EnumValue` instances, strings and
        ``(name, value)`` tuples.
        """
        if isinstance(definition, cls):
            return definition
        elif isinstance(definition, str):
            return cls(definition, definition)
        elif isinstance(definition, tuple):
            name, value = definition
            return cls(name, value)
        else:
            raise TypeError("Invalid enum value definition %s" % definition)

    def __init__(
        self,
        name: str,
        value: Any = _UNSET,
        deprecation_reason: Optional[str] = None,
        description: Optional[str] = None,
        node: Optional[_ast.EnumValueDefinitionNode] = None,
    ):
        if name in ("true", "false", "null"):
            raise ValueError('Invalid name "%s" for enum value' % name)

        self.name = name
        self.value = value if value is not _UNSET else name
        self.description = description
        self.deprecated = deprecation_reason is not None
        self.deprecation_reason = deprecation_reason
        self.node = node

    def __str__(self) -> str:
        return self.name


class EnumType(NamedType):
    """
    Enum Type Definition

    Args:
        name: Enum name
        values: List of enum value definition supported by `EnumValue.from_def`
        description: Enum description
        nodes: Source nodes used when building type from the SDL

    Attributes:
        name (str): Enum name

        values (List[sdl_graph.schema.EnumValue]): Values in definition order

        value_map (Dict[str, sdl_graph.schema.EnumValue]): Values by name

        description (Optional[str]): Enum description

        nodes (List[Union[\
            graphql.language.EnumTypeDefinitionNode, \
            graphql.language.EnumTypeExtensionNode,\
        ]]):
            Source nodes used when building type from the SDL
    """

    def __init__(
        self,
        name: str,
        values: Iterable[Union[EnumValue, str, Tuple[str, Any]]],
        description: Optional[str] = None,
        nodes: Optional[
            List[
                Union[_ast.EnumTypeDefinitionNode, _ast.EnumTypeExtensionNode]
            ]
        ] = None,
    ):
        self.name = name
        self.description = description
        self.nodes = [] if nodes is None else nodes

        self.values = []  # type: List[EnumValue]
        self.value_map = {}  # type: Dict[str, EnumValue]

        for v in values:
            v = EnumValue.from_def(v)

            if v.name in self.value_map:
                raise ValueError("Duplicate enum value %s" % v.name)

            self.values.append(v)
            self.value_map[v.name] = v

    def get_value(self, name: str) -> Any:
        """
        Extract the value for a given name.

        Args:
            name: Name of the value to extract

        Returns:
            The corresponding value

        Raises:
            :class:`~sdl_graph.exc.UnknownEnumValue` when the name is unknown
        """
        try:
            return self.value_map[name].value
        except KeyError:
            raise UnknownEnumValue(
                "Invalid name %s for enum %s" % (name, self.name)
            )


_ScalarValueNode = Union[
    _ast.IntValueNode,
    _ast.FloatValueNode,
    _ast.StringValueNode,
    _ast.BooleanValueNode,
]


class ScalarType(NamedType):
    """
    Scalar Type Definition

    Scalars are structural here: they only know how to turn a literal value
    node into a Python value, which is what default values need.

    Args:
        name: Type name

        parse_literal: Type de-serializer for value nodes.

            This function receives a value node and can output any Python
            value. Raise :py:class:`ValueError` or :py:class:`TypeError` to
            signify that the value cannot be parsed.

            If not provided, the node's raw value is returned.

        description: Type description

        specified_by_url: URL of the scalar's specification

        nodes: Source nodes used when building type from the SDL

    Attributes:
        name (str): Type name

        description (Optional[str]): Type description

        specified_by_url (Optional[str]): URL of the scalar's specification

        nodes (List[Union[\
            graphql.language.ScalarTypeDefinitionNode, \
            graphql.language.ScalarTypeExtensionNode\
        ]]):
            Source nodes used when building type from the SDL
    """

    def __init__(
        self,
        name: str,
        parse_literal: Optional[Callable[[_ScalarValueNode], Any]] = None,
        description: Optional[str] = None,
        specified_by_url: Optional[str] = None,
        nodes: Optional[
            List[
                Union[
                    _ast.ScalarTypeDefinitionNode,
                    _ast.ScalarTypeExtensionNode,
                ]
            ]
        ] = None,
    ):
        self.name = name
        self.description = description
        self.specified_by_url = specified_by_url
        self._parse_literal = parse_literal
        self.nodes = [] if nodes is None else nodes

    def parse_literal(self, node: _ScalarValueNode) -> Any:
        """
        Transform an AST node in a valid Python value

        Raises:
            :class:`~sdl_graph.exc.InvalidValue`:
        """
        try:
            if self._parse_literal is not None:
                return self._parse_literal(node)
            return node.value
        except (ValueError, TypeError) as err:
            raise InvalidValue(str(err), [node]) from err


class Field:
    """
    Member of an :class:`sdl_graph.schema.ObjectType` or
    :class:`sdl_graph.schema.InterfaceType`.

    Args:
        name: Field name
        type_: Field type (must be output type)
        args: Field arguments
        description: Field description
        deprecation_reason: If set, the field will be marked as deprecated.
        node: Source node used when building type from the SDL

    Attributes:
        name (str): Field name

        description (Optional[str]): Field description

        deprecation_reason (Optional[str]):
            If set, the field will be marked as deprecated.

        deprecated: ``True`` if :attr:`deprecation_reason` is set.

        type (GraphQLType): Field type.

        arguments (List[sdl_graph.schema.Argument]): Field arguments.

        argument_map (Dict[str, sdl_graph.schema.Argument]):
            Field arguments in indexed form.

        node (Optional[graphql.language.FieldDefinitionNode]):
            Source node used when building type from the SDL
    """

    def __init__(
        self,
        name: str,
        type_: Lazy[GraphQLType],
        args: Optional[Sequence[Argument]] = None,
        description: Optional[str] = None,
        deprecation_reason: Optional[str] = None,
        node: Optional[_ast.FieldDefinitionNode] = None,
    ):
        self.name = name
        self.description = description
        self.deprecated = bool(deprecation_reason)
        self.deprecation_reason = deprecation_reason
        self.arguments = list(args) if args is not None else []
        self.argument_map = {arg.name: arg for arg in self.arguments}
        self.node = node
        self._ltype = type_
        self._type = None  # type: Optional[GraphQLType]

    @property
    def type(self) -> GraphQLType:
        if self._type is None:
            self._type = lazy(self._ltype)
        return self._type

    def __str__(self) -> str:
        return "Field(%s: %s)" % (self.name, self.type)

    def __repr__(self) -> str:
        return "Field(%s: %s at %d)" % (self.name, self.type, id(self))


class _FieldsAndInterfaces(NamedType):
    """ Shared lazy accessors of object and interface types. """

    _source_fields = None  # type: LazySeq[Field]
    _fields = None  # type: Optional[Sequence[Field]]
    _source_interfaces = None  # type: Optional[LazySeq[InterfaceType]]
    _interfaces = None  # type: Optional[Sequence[InterfaceType]]

    @property
    def fields(self) -> Sequence[Field]:
        if self._fields is None:
            self._fields = lazy(self._source_fields) or []
        return self._fields

    @property
    def field_map(self) -> Dict[str, Field]:
        return {f.name: f for f in self.fields}

    @property
    def interfaces(self) -> Sequence["InterfaceType"]:
        if self._interfaces is None:
            self._interfaces = lazy(self._source_interfaces) or []
        return self._interfaces


class InterfaceType(_FieldsAndInterfaces):
    """
    Interface Type Definition.

    When a field can return one of a heterogeneous set of types, an Interface
    type is used to describe what fields are in common across all types.

    Args:
        name: Type name
        fields: Fields
        interfaces: Implemented interfaces
        description: Type description
        nodes: Source nodes used when building type from the SDL

    Attributes:
        name (str): Type name

        description (Optional[str]): Type description

        fields (Sequence[sdl_graph.schema.Field]): Interface fields.

        field_map (Dict[str, sdl_graph.schema.Field]):
            Interface fields as a map.

        interfaces (Sequence[InterfaceType]): Implemented interfaces.

        nodes (List[Union[\
            graphql.language.InterfaceTypeDefinitionNode,\
            graphql.language.InterfaceTypeExtensionNode,\
        ]]):
            Source nodes used when building type from the SDL
    """

    def __init__(
        self,
        name: str,
        fields: LazySeq[Field],
        interfaces: Optional[LazySeq["InterfaceType"]] = None,
        description: Optional[str] = None,
        nodes: Optional[
            List[
                Union[
                    _ast.InterfaceTypeDefinitionNode,
                    _ast.InterfaceTypeExtensionNode,
                ]
            ]
        ] = None,
    ):
        self.name = name
        self.description = description
        self._source_fields = fields
        self._fields = None
        self._source_interfaces = interfaces
        self._interfaces = None
        self.nodes = [] if nodes is None else nodes


class ObjectType(_FieldsAndInterfaces):
    """
    Object Type Definition

    Almost all of the GraphQL types you define will be object types. Object
    types have a name, but most importantly describe their fields.

    Args:
        name: Type name
        fields: Fields
        interfaces: Implemented interfaces
        description: Type description
        nodes: Source nodes used when building type from the SDL

    Attributes:
        name (str): Type name

        description (Optional[str]): Type description

        interfaces (Sequence[InterfaceType]):
            Implemented interfaces.

        fields (Sequence[sdl_graph.schema.Field]): Object fields.

        field_map (Dict[str, sdl_graph.schema.Field]):
            Object fields as a map.

        nodes (List[Union[\
            graphql.language.ObjectTypeDefinitionNode,\
            graphql.language.ObjectTypeExtensionNode,\
        ]]):
            Source nodes used when building type from the SDL
    """

    def __init__(
        self,
        name: str,
        fields: LazySeq[Field],
        interfaces: Optional[LazySeq[InterfaceType]] = None,
        description: Optional[str] = None,
        nodes: Optional[
            List[
                Union[
                    _ast.ObjectTypeDefinitionNode,
                    _ast.ObjectTypeExtensionNode,
                ]
            ]
        ] = None,
    ):
        self.name = name
        self.description = description
        self._source_fields = fields
        self._fields = None
        self._source_interfaces = interfaces
        self._interfaces = None
        self.nodes = [] if nodes is None else nodes


class UnionType(NamedType):
    """
    Union Type Definition

    When a field can return one of a heterogeneous set of types, a Union type
    is used to describe what types are possible.

    Args:
        name: Type name
        types: Member types
        description: Type description
        nodes: Source nodes used when building type from the SDL

    Attributes:
        name (str): Type name

        description (Optional[str]): Type description

        types (Sequence[ObjectType]): Member types.

        nodes (List[Union[\
            graphql.language.UnionTypeDefinitionNode,\
            graphql.language.UnionTypeExtensionNode,\
        ]]):
            Source nodes used when building type from the SDL
    """

    def __init__(
        self,
        name: str,
        types: LazySeq[ObjectType],
        description: Optional[str] = None,
        nodes: Optional[
            List[
                Union[
                    _ast.UnionTypeDefinitionNode, _ast.UnionTypeExtensionNode
                ]
            ]
        ] = None,
    ):
        self.name = name
        self.description = description
        self._source_types = types
        self._types = None  # type: Optional[Sequence[ObjectType]]
        self.nodes = [] if nodes is None else nodes

    @property
    def types(self) -> Sequence[ObjectType]:
        if self._types is None:
            self._types = lazy(self._source_types) or []
        return self._types


class Directive:
    """
    Directive definition

    Args:
        name: Directive name
        locations: Possible locations for that directive
        args: Argument definitions
        description: Directive description
        node: Source node used when building type from the SDL.

    Attributes:
        name (str): Directive name

        description (Optional[str]): Directive description

        locations (List[str]): Possible locations for that directive

        arguments (List[sdl_graph.schema.Argument]): Directive arguments.

        argument_map (Dict[str, sdl_graph.schema.Argument]):
            Directive arguments in indexed form.

        node (Optional[graphql.language.DirectiveDefinitionNode]):
            Source node used when building type from the SDL
    """

    def __init__(
        self,
        name: str,
        locations: Sequence[str],
        args: Optional[Sequence[Argument]] = None,
        description: Optional[str] = None,
        node: Optional[_ast.DirectiveDefinitionNode] = None,
    ):
        if not locations:
            raise ValueError("Expected at least one location")

        if any(loc not in DIRECTIVE_LOCATIONS for loc in locations):
            raise ValueError(
                "Locations must be one of %s but received %r"
                % (DIRECTIVE_LOCATIONS, locations)
            )

        self.name = name
        self.description = description
        self.locations = list(locations)
        self.arguments = list(args) if args is not None else []
        self.argument_map = {arg.name: arg for arg in self.arguments}
        self.node = node

    def __str__(self) -> str:
        return "@%s" % self.name

    def __repr__(self) -> str:
        return "Directive(%s at %d)" % (self.name, id(self))


def is_input_type(type_: GraphQLType) -> bool:
    """ These types may be used as input types for arguments and directives. """
    return isinstance(
        unwrap_type(type_), (ScalarType, EnumType, InputObjectType)
    )


def is_output_type(type_: GraphQLType) -> bool:
    """ These types may be used as output types as the result of fields. """
    return isinstance(
        unwrap_type(type_),
        (ScalarType, EnumType, ObjectType, InterfaceType, UnionType),
    )


def unwrap_type(type_: GraphQLType) -> NamedType:
    """ Recursively extract type for a potentially wrapping type like
    :class:`ListType` or :class:`NonNullType`.

    >>> from sdl_graph.schema import Int, NonNullType, ListType
    >>> unwrap_type(NonNullType(ListType(NonNullType(Int)))) is Int
    True
    """
    if isinstance(type_, (ListType, NonNullType)):
        return unwrap_type(type_.type)
    return cast(NamedType, type_)


def nullable_type(type_: GraphQLType) -> GraphQLType:
    """ Extract nullable type from a potentially non nulllable one.

    >>> from sdl_graph.schema import Int, NonNullType
    >>> nullable_type(NonNullType(Int)) is Int
    True

    >>> nullable_type(Int) is Int
    True
    """
    if isinstance(type_, NonNullType):
        return type_.type
    return type_


TypeMap = Mapping[str, NamedType]
