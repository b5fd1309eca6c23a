# -*- coding: utf-8 -*-
""" Schema definition. """

from collections import defaultdict, deque
from typing import Deque, Dict, Iterable, List, Optional, Sequence

from ..exc import SchemaError, UnknownType
from .directives import SPECIFIED_DIRECTIVES
from .introspection import INTROSPECTION_TYPES
from .types import (
    Directive,
    GraphQLType,
    InputObjectType,
    InterfaceType,
    NamedType,
    ObjectType,
    UnionType,
    unwrap_type,
)
from .validation import validate_schema


class SchemaConfig:
    """ Result of building a type graph from a schema definition document.

    This is the plain collection of root types, user types and directives
    which :class:`Schema` is built from.

    Attributes:
        query_type (Optional[ObjectType]): The root query type.

        mutation_type (Optional[ObjectType]): The root mutation type.

        subscription_type (Optional[ObjectType]): The root subscription type.

        types (List[NamedType]): User defined types, in definition order.

        directives (List[sdl_graph.schema.Directive]):
            Declared directives followed by the specified directives which
            were not redeclared.
    """

    __slots__ = (
        "query_type",
        "mutation_type",
        "subscription_type",
        "types",
        "directives",
    )

    def __init__(
        self,
        query_type: Optional[ObjectType] = None,
        mutation_type: Optional[ObjectType] = None,
        subscription_type: Optional[ObjectType] = None,
        types: Optional[Sequence[NamedType]] = None,
        directives: Optional[Sequence[Directive]] = None,
    ):
        self.query_type = query_type
        self.mutation_type = mutation_type
        self.subscription_type = subscription_type
        self.types = list(types or [])
        self.directives = list(directives or [])

    def __repr__(self) -> str:
        return (
            "SchemaConfig(query=%s, mutation=%s, subscription=%s, "
            "types=%d, directives=%d)"
            % (
                self.query_type,
                self.mutation_type,
                self.subscription_type,
                len(self.types),
                len(self.directives),
            )
        )


class Schema:
    """ A GraphQL schema definition.

    This is the main container for a linked type graph.

    Args:
        query_type: The root query type for the schema
        mutation_type: The root mutation type for the schema
        subscription_type: The root subscription type for the schema

        directives: List of possible directives to use.
            Defaults to the specified directives (``@include``, ``@skip``,
            ``@deprecated`` and ``@specifiedBy``) when omitted.

        types: List of additional supported types.
            This only necessary for types that cannot be inferred by traversing
            the root types.

    Attributes:
        query_type (Optional[ObjectType]):
            The root query type for the schema (required).

        mutation_type (Optional[ObjectType]):
            The root mutation type for the schema (optional).

        subscription_type (Optional[ObjectType]):
            The root subscription type for the schema (optional).

        types (Dict[str, NamedType]):
            Mapping ``type name -> Type instance`` of all types used in the
            schema, excluding directives.

        directives (Dict[str, sdl_graph.schema.Directive]):
            Mapping ``directive name -> Directive instance`` of all directives
            used in the schema.

        implementations (Dict[str, List[ObjectType]]):
            Mapping of ``interface name -> [implementing object types]``.
    """

    __slots__ = (
        "query_type",
        "mutation_type",
        "subscription_type",
        "types",
        "directives",
        "implementations",
        "_is_valid",
    )

    def __init__(
        self,
        query_type: Optional[ObjectType] = None,
        mutation_type: Optional[ObjectType] = None,
        subscription_type: Optional[ObjectType] = None,
        directives: Optional[Sequence[Directive]] = None,
        types: Optional[Sequence[NamedType]] = None,
    ):
        self.query_type = query_type
        self.mutation_type = mutation_type
        self.subscription_type = subscription_type

        self.directives = _build_directive_map(
            SPECIFIED_DIRECTIVES if directives is None else directives
        )

        self.types = _build_type_map(
            [
                *INTROSPECTION_TYPES,
                *(types or []),
                query_type,
                mutation_type,
                subscription_type,
            ],
            self.directives.values(),
        )  # type: Dict[str, NamedType]

        self.implementations = defaultdict(
            list
        )  # type: Dict[str, List[ObjectType]]

        for type_ in self.types.values():
            if isinstance(type_, ObjectType):
                for i in type_.interfaces:
                    self.implementations[i.name].append(type_)

        self._is_valid = None  # type: Optional[bool]

    @classmethod
    def from_config(cls, config: SchemaConfig) -> "Schema":
        return cls(
            config.query_type,
            config.mutation_type,
            config.subscription_type,
            directives=config.directives,
            types=config.types,
        )

    def __repr__(self) -> str:
        return "<Schema (%s) at %d>" % (
            ", ".join(
                "%s: %s" % (op, t)
                for op, t in (
                    ("query", self.query_type),
                    ("mutation", self.mutation_type),
                    ("subscription", self.subscription_type),
                )
                if t is not None
            ),
            id(self),
        )

    def validate(self) -> None:
        """ Check that the schema is valid.

        Raises:
            :class:`~sdl_graph.exc.SchemaValidationError` if the schema is
            invalid.
        """
        if self._is_valid is None:
            validate_schema(self)
            self._is_valid = True

    def get_type(self, name: str) -> NamedType:
        """
        Get a type by name.

        Raises:
            :class:`~sdl_graph.exc.UnknownType`: if the type is not found
        """
        try:
            return self.types[name]
        except KeyError:
            raise UnknownType(name)

    def has_type(self, name: str) -> bool:
        """
        Check if the schema contains a type with the given name.
        """
        return name in self.types

    def get_directive(self, name: str) -> Optional[Directive]:
        return self.directives.get(name)


def _build_directive_map(
    maybe_directives: Iterable[Directive],
) -> Dict[str, Directive]:
    directives = {}  # type: Dict[str, Directive]

    for value in maybe_directives:
        if not isinstance(value, Directive):
            raise SchemaError(
                'Expected directive but got "%r" of type "%s"'
                % (value, type(value))
            )

        if value.name in directives:
            raise SchemaError('Duplicate directive "@%s"' % value.name)

        directives[value.name] = value

    return directives


def _build_type_map(
    types: Iterable[Optional[GraphQLType]],
    directives: Optional[Iterable[Directive]] = None,
) -> Dict[str, NamedType]:
    """
    Build a mapping name <> Type from a list of types to include all
    referenced types.

    Types are visited breadth first from a work queue: the depth of the type
    graph is not bounded by the recursion limit.

    Warning:
        This will flatten all lazy type definitions and attributes.

    Args:
        types: List of types
        directives: Directives whose argument types should be included
    """
    type_map = {}  # type: Dict[str, NamedType]

    pending = deque(types)  # type: Deque[Optional[GraphQLType]]
    for directive in directives or ():
        pending.extend(arg.type for arg in directive.arguments)

    while pending:
        type_ = pending.popleft()

        if type_ is None:
            continue

        type_ = unwrap_type(type_)

        if not isinstance(type_, NamedType):
            raise SchemaError(
                'Expected NamedType but got "%s" of type %s'
                % (type_, type(type_))
            )

        name = type_.name

        if name in type_map:
            if type_ is not type_map[name]:
                raise SchemaError('Duplicate type "%s"' % name)
            continue

        type_map[name] = type_

        if isinstance(type_, UnionType):
            pending.extend(type_.types)

        if isinstance(type_, (ObjectType, InterfaceType)):
            pending.extend(type_.interfaces)
            for field in type_.fields:
                pending.append(field.type)
                pending.extend(arg.type for arg in field.arguments)

        if isinstance(type_, InputObjectType):
            pending.extend(input_field.type for input_field in type_.fields)

    return type_map
