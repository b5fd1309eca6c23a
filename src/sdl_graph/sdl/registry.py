# -*- coding: utf-8 -*-
""" Name -> type table used while building a type graph. """

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from graphql.language import Node

from ..exc import DuplicateDefinition, UnknownType
from ..schema.introspection import INTROSPECTION_TYPES
from ..schema.scalars import SPECIFIED_SCALAR_TYPES
from ..schema.types import NamedType

logger = logging.getLogger(__name__)

STANDARD_TYPES = SPECIFIED_SCALAR_TYPES + INTROSPECTION_TYPES


class TypeRegistry:
    """ Two tier mapping of type names to named types.

    The ``standard`` tier holds the specified scalars and introspection types
    and is never modified: registering a type under one of these names is a
    no-op. The user tier holds every type built from the document, in
    registration order.

    Args:
        standard_types: Types making up the standard tier, defaults to the
            specified scalars and introspection types.

    >>> from sdl_graph.schema import Int, ObjectType
    >>> registry = TypeRegistry()
    >>> registry.resolve("Int") is Int
    True
    >>> registry.register("Int", ObjectType("Int", []))
    False
    >>> registry.resolve("Int") is Int
    True
    """

    __slots__ = ("standard", "_user")

    def __init__(self, standard_types: Optional[Iterable[NamedType]] = None):
        self.standard = MappingProxyType(
            {
                t.name: t
                for t in (
                    STANDARD_TYPES if standard_types is None else standard_types
                )
            }
        )  # type: Mapping[str, NamedType]
        self._user = {}  # type: Dict[str, NamedType]

    def __contains__(self, name: object) -> bool:
        return name in self.standard or name in self._user

    def __len__(self) -> int:
        return len(self.standard) + len(self._user)

    def is_standard(self, name: str) -> bool:
        return name in self.standard

    def register(
        self, name: str, type_: NamedType, node: Optional[Node] = None
    ) -> bool:
        """ Add a type to the user tier.

        Returns:
            ``False`` if the name belongs to the standard tier and the type
            was ignored, ``True`` otherwise.

        Raises:
            :class:`~sdl_graph.exc.DuplicateDefinition`: if the name was
            already registered in the user tier.
        """
        if name in self.standard:
            logger.debug('Ignoring redefinition of standard type "%s"', name)
            return False

        if name in self._user:
            raise DuplicateDefinition(
                'Duplicate type "%s"' % name, [node] if node else None
            )

        self._user[name] = type_
        return True

    def resolve(self, name: str, node: Optional[Node] = None) -> NamedType:
        """ Find a type by name, looking in the standard tier first.

        Raises:
            :class:`~sdl_graph.exc.UnknownType`: if no type is registered
            under that name.
        """
        try:
            return self.standard[name]
        except KeyError:
            pass

        try:
            return self._user[name]
        except KeyError:
            raise UnknownType(name, [node] if node else None)

    def user_types(self) -> List[NamedType]:
        """ User tier types in registration order. """
        return list(self._user.values())
