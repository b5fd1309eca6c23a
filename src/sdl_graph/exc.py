# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from graphql.language import Node, get_location


class GraphQLError(Exception):
    """
    Base exception from which all other inherit. You should prefer using one
    of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class GraphQLSyntaxError(GraphQLError):
    """
    Syntax error while parsing a schema definition document.

    Args:
        message: Explanatory message
        locations: ``(line, column)`` pairs locating the syntax error

    Attributes:
        message (str): Explanatory message
        locations (List[Tuple[int, int]]): ``(line, column)`` pairs locating
            the syntax error
    """

    def __init__(
        self,
        message: str,
        locations: Optional[Sequence[Tuple[int, int]]] = None,
    ):
        super().__init__(message)
        self.locations = list(locations or [])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": str(self),
            "locations": [
                {"line": line, "column": col} for line, col in self.locations
            ],
        }


class GraphQLLocatedError(GraphQLError):
    """
    Error that can be traced back to specific position(s) and parse node(s)
    in the source document.

    Args:
        message: Explanatory message
        nodes: Nodes relevant to the exception

    Attributes:
        message (str): Explanatory message
        nodes (List[graphql.language.Node]): Nodes relevant to the exception
    """

    def __init__(self, message: str, nodes: Optional[Sequence[Node]] = None):
        super().__init__(message)
        self.nodes = list(nodes[:]) if nodes else []  # type: List[Node]

    @property
    def locations(self) -> List[Tuple[int, int]]:
        """
        List[Tuple[int, int]]: ``(line, column)`` pairs for all nodes that
        carry source location information.
        """
        locations = []
        for node in self.nodes:
            loc = getattr(node, "loc", None)
            if loc is None or loc.source is None:
                continue
            source_location = get_location(loc.source, loc.start)
            locations.append((source_location.line, source_location.column))
        return locations

    def to_dict(self) -> Dict[str, Any]:
        kv = (
            ("message", str(self)),
            (
                "locations",
                [
                    {"line": line, "column": col}
                    for line, col in self.locations
                ],
            ),
        )
        return {k: v for k, v in kv if v}


class InvalidValue(GraphQLLocatedError, ValueError):
    pass


class UnknownEnumValue(InvalidValue):
    pass


class SDLError(GraphQLLocatedError):
    """
    Error that occured when building a type graph from a schema definition
    document (SDL).
    """


class InvalidDocument(SDLError, TypeError):
    """ The builder was not given a well formed document node. """


class UnknownType(SDLError, KeyError):
    """
    A named type reference cannot be resolved.

    Attributes:
        type_name (str): The unresolved name
    """

    def __init__(self, type_name: str, nodes: Optional[Sequence[Node]] = None):
        super().__init__('Unknown type "%s"' % type_name, nodes)
        self.type_name = type_name


class UnionMemberNotObject(SDLError):
    """
    A union lists a member that is not an object type.

    Attributes:
        type_name (str): The offending member name
    """

    def __init__(self, type_name: str, nodes: Optional[Sequence[Node]] = None):
        super().__init__(
            'Union member "%s" is not an object type' % type_name, nodes
        )
        self.type_name = type_name


class TypeCastFailure(SDLError):
    """
    A constructed type does not satisfy the capability expected where it is
    used (e.g. an input object used as a field type).
    """


class UnsupportedDefinition(SDLError):
    """ A definition node the builder does not know how to convert. """


class MalformedTypeReference(SDLError):
    """ A type reference that is neither named, list nor non-null. """


class DuplicateDefinition(SDLError):
    """ The same name is defined more than once in a single document. """


class ExtensionError(SDLError):
    """
    Error that occured when applying a type extension node to its base
    definition.
    """


class SchemaError(GraphQLError):
    pass


class SchemaValidationError(SchemaError):
    """
    Collection of multiple :class:`SchemaError`.

    Args:
        errors: Wrapped errors

    Attributes:
        errors (Sequence[SchemaError]): Wrapped errors
    """

    def __init__(self, errors: Sequence[SchemaError]):
        super().__init__("Invalid schema: %d errors" % len(errors))
        self.errors = errors

    def __str__(self) -> str:
        if len(self.errors) == 1:
            return str(self.errors[0])
        return ",\n".join([str(err) for err in self.errors])
