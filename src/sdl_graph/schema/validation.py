# -*- coding: utf-8 -*-
""" Schema validation utility """

import re
from typing import TYPE_CHECKING, List, Optional, Union

from ..exc import SchemaError, SchemaValidationError
from .introspection import is_introspection_type
from .scalars import SPECIFIED_SCALAR_TYPES
from .types import (
    EnumType,
    InputObjectType,
    InterfaceType,
    NamedType,
    ObjectType,
    UnionType,
)

if TYPE_CHECKING:  # Fix import cycles of types needed for Mypy checking
    from .schema import Schema

VALID_NAME_RE = re.compile(r"^(?!__)[_a-zA-Z][_a-zA-Z0-9]*$")


def validate_schema(schema: "Schema") -> bool:
    """ Validate a provided GraphQL schema.

    This covers the global structure of the type graph (root types and
    non-empty named types), not the full set of schema validation rules.

    Raises:
        :class:`~sdl_graph.exc.SchemaValidationError` if the schema is invalid.
    """
    validator = SchemaValidator(schema)
    validator()

    if validator:
        return True

    raise SchemaValidationError(validator.errors)


def _is_valid_name(name: str) -> bool:
    """
    >>> _is_valid_name('fooBar')
    True

    >>> _is_valid_name('_foo_bar')
    True

    >>> _is_valid_name('foo-bar')
    False

    >>> _is_valid_name('__foo_bar')
    False

    >>> _is_valid_name('42')
    False
    """
    return bool(VALID_NAME_RE.match(name))


class SchemaValidator:
    def __init__(self, schema: "Schema"):
        self.schema = schema
        self.errors = []  # type: List[SchemaError]

    def __bool__(self) -> bool:
        return not self.errors

    def add_error(self, msg: str) -> None:
        self.errors.append(SchemaError(msg))

    def __call__(self) -> None:
        self.validate_root_types()

        for type_ in self.schema.types.values():
            if is_introspection_type(type_) or type_ in SPECIFIED_SCALAR_TYPES:
                continue

            if not _is_valid_name(type_.name):
                self.add_error('Invalid type name "%s"' % type_.name)
                continue

            if isinstance(type_, (ObjectType, InterfaceType)):
                self.validate_fields(type_)
            elif isinstance(type_, UnionType):
                if not type_.types:
                    self.add_error(
                        'UnionType "%s" must at least define one member'
                        % type_
                    )
            elif isinstance(type_, EnumType):
                if not type_.values:
                    self.add_error(
                        'Enum "%s" must at least define one value' % type_
                    )
            elif isinstance(type_, InputObjectType):
                if not type_.fields:
                    self.add_error(
                        'Type "%s" must define at least one field' % type_
                    )

    def _check_root(self, operation: str, type_: Optional[NamedType]) -> None:
        if type_ is not None and not isinstance(type_, ObjectType):
            self.add_error(
                '%s must be ObjectType but got "%s"' % (operation, type_)
            )

    def validate_root_types(self) -> None:
        if self.schema.query_type is None:
            self.add_error("Must provide Query type")

        self._check_root("Query", self.schema.query_type)
        self._check_root("Mutation", self.schema.mutation_type)
        self._check_root("Subscription", self.schema.subscription_type)

    def validate_fields(
        self, composite_type: Union[ObjectType, InterfaceType]
    ) -> None:
        if not composite_type.fields:
            self.add_error(
                'Type "%s" must define at least one field' % composite_type
            )

        for field in composite_type.fields:
            if field.name.startswith("__"):
                self.add_error(
                    'Invalid field name "%s" on "%s"'
                    % (field.name, composite_type)
                )
