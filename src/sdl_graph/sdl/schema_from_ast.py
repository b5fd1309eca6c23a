# -*- coding: utf-8 -*-

import logging
from typing import Dict, List, Optional, Sequence, Tuple, Union

import graphql
from graphql.language import ast as _ast

from ..exc import (
    DuplicateDefinition,
    ExtensionError,
    GraphQLSyntaxError,
    InvalidDocument,
    SDLError,
)
from ..schema import (
    SPECIFIED_DIRECTIVES,
    Directive,
    NamedType,
    ObjectType,
    Schema,
    SchemaConfig,
)
from .ast_type_builder import ASTTypeBuilder
from .registry import TypeRegistry

logger = logging.getLogger(__name__)

__all__ = ("build_schema", "build_ast_schema", "build_schema_config")

_CONVENTION_NAMES = {
    "Query": "query",
    "Mutation": "mutation",
    "Subscription": "subscription",
}


def build_schema(
    source: Union[str, _ast.DocumentNode], *, strict: bool = False
) -> Schema:
    """ Build a validated schema from an SDL string or document.

    Args:
        source: SDL source or parsed document

        strict: Fail instead of ignoring arguments, input fields and
            interfaces of the wrong kind as well as extensions of unknown
            types.

    Returns:
        Validated schema

    Raises:
        sdl_graph.exc.GraphQLSyntaxError: if the source cannot be parsed
        sdl_graph.exc.SDLError: if the type graph cannot be built
        sdl_graph.exc.SchemaValidationError: if the schema is invalid
    """
    return build_ast_schema(_document_ast(source), strict=strict)


def build_ast_schema(
    document: _ast.DocumentNode, *, strict: bool = False
) -> Schema:
    """ Build a validated schema from a parsed SDL document.

    See :func:`build_schema_config` for details.

    Raises:
        sdl_graph.exc.SDLError: if the type graph cannot be built
        sdl_graph.exc.SchemaValidationError: if the schema is invalid
    """
    schema = Schema.from_config(build_schema_config(document, strict=strict))
    schema.validate()
    return schema


def build_schema_config(
    document: _ast.DocumentNode,
    *,
    strict: bool = False,
    standard_types: Optional[Sequence[NamedType]] = None
) -> SchemaConfig:
    """ Convert a parsed SDL document into a fully linked type graph.

    This includes:

        - Building every type definition, with forward and cyclic references
        - Merging type extensions into the types they extend
        - Building directive definitions and coercing default values
        - Selecting root operation types

    Definitions of standard types (specified scalars and introspection types)
    are ignored: references to these names always resolve to the standard
    types.

    Args:
        document: SDL document

        strict: Fail instead of ignoring arguments, input fields and
            interfaces of the wrong kind as well as extensions of unknown
            types.

        standard_types: Override the standard types, defaults to the specified
            scalars and introspection types.

    Returns:
        Root types, user types in definition order and directives.

    Raises:
        sdl_graph.exc.InvalidDocument: if document is not a document node
        sdl_graph.exc.SDLError:
    """
    if not isinstance(document, _ast.DocumentNode):
        raise InvalidDocument(
            "Expected DocumentNode but got %s" % type(document).__name__
        )

    if document.definitions is None:
        raise InvalidDocument("Document has no definitions", [document])

    (
        schema_def,
        type_extensions,
        directive_defs,
        type_defs,
    ) = _collect_definitions(document)

    if schema_def is None and not (
        type_extensions or directive_defs or type_defs
    ):
        logger.debug("Empty schema definition document")
        return SchemaConfig()

    logger.debug(
        "Building schema from %d type definition(s), %d extended type(s) and "
        "%d directive definition(s)",
        len(type_defs),
        len(type_extensions),
        len(directive_defs),
    )

    registry = TypeRegistry(standard_types)
    builder = ASTTypeBuilder(registry, type_extensions, strict=strict)

    for type_def in type_defs:
        builder.build_type_definition(type_def)

    _check_extension_targets(registry, type_extensions, strict)

    directives = _build_directives(builder, directive_defs)

    builder.resolve_lazy_types()

    operations = _root_types(registry, schema_def)
    types = registry.user_types()

    logger.debug(
        "Built %d type(s) and %d directive(s)", len(types), len(directives)
    )

    return SchemaConfig(
        query_type=operations.get("query"),
        mutation_type=operations.get("mutation"),
        subscription_type=operations.get("subscription"),
        types=types,
        directives=directives,
    )


def _collect_definitions(
    document: _ast.DocumentNode,
) -> Tuple[
    Optional[_ast.SchemaDefinitionNode],
    Dict[str, List[_ast.TypeExtensionNode]],
    List[_ast.DirectiveDefinitionNode],
    List[_ast.TypeDefinitionNode],
]:
    schema_definition = None
    type_extensions = {}  # type: Dict[str, List[_ast.TypeExtensionNode]]
    directives = []  # type: List[_ast.DirectiveDefinitionNode]
    types = []  # type: List[_ast.TypeDefinitionNode]
    unions = []  # type: List[_ast.TypeDefinitionNode]

    for node in document.definitions:
        if isinstance(node, _ast.SchemaDefinitionNode):
            if schema_definition is not None:
                raise SDLError(
                    "More than one schema definition in document", [node]
                )
            schema_definition = node

        elif isinstance(node, _ast.TypeExtensionNode):
            type_extensions.setdefault(node.name.value, []).append(node)

        elif isinstance(node, _ast.DirectiveDefinitionNode):
            directives.append(node)

        # Union members are resolved when building the union so they must
        # come after every other type.
        elif isinstance(node, _ast.UnionTypeDefinitionNode):
            unions.append(node)

        elif isinstance(node, _ast.TypeDefinitionNode):
            types.append(node)

    return schema_definition, type_extensions, directives, types + unions


def _check_extension_targets(
    registry: TypeRegistry,
    type_extensions: Dict[str, List[_ast.TypeExtensionNode]],
    strict: bool,
) -> None:
    for name, nodes in type_extensions.items():
        if registry.is_standard(name):
            logger.debug('Ignoring extension of standard type "%s"', name)
        elif name not in registry:
            msg = 'Cannot extend undefined type "%s"' % name
            if strict:
                raise ExtensionError(msg, nodes)
            logger.warning("%s, ignoring it", msg)


def _build_directives(
    builder: ASTTypeBuilder,
    directive_defs: List[_ast.DirectiveDefinitionNode],
) -> List[Directive]:
    directives = {}  # type: Dict[str, Directive]

    for directive_def in directive_defs:
        name = directive_def.name.value
        if name in directives:
            raise DuplicateDefinition(
                "Duplicate directive @%s" % name, [directive_def]
            )
        directives[name] = builder.build_directive(directive_def)

    for directive in SPECIFIED_DIRECTIVES:
        if directive.name not in directives:
            directives[directive.name] = directive

    return list(directives.values())


def _root_types(
    registry: TypeRegistry, schema_def: Optional[_ast.SchemaDefinitionNode]
) -> Dict[str, ObjectType]:
    operations = {
        _CONVENTION_NAMES[t.name]: t
        for t in registry.user_types()
        if isinstance(t, ObjectType) and t.name in _CONVENTION_NAMES
    }  # type: Dict[str, ObjectType]

    if schema_def is None:
        return operations

    defined = set()
    for op_def in schema_def.operation_types or ():
        op = op_def.operation.value
        if op in defined:
            raise SDLError(
                "Schema must only define a single %s operation" % op,
                [schema_def, op_def],
            )
        defined.add(op)

        type_ = registry.resolve(op_def.type.name.value, op_def.type)
        if not isinstance(type_, ObjectType):
            raise SDLError(
                '%s operation type must be an object type but got "%s"'
                % (op.capitalize(), type_),
                [op_def],
            )
        operations[op] = type_

    return operations


def _document_ast(
    document: Union[str, _ast.DocumentNode]
) -> _ast.DocumentNode:
    if isinstance(document, str):
        try:
            return graphql.parse(document)
        except graphql.GraphQLSyntaxError as err:
            raise GraphQLSyntaxError(
                err.message,
                [(loc.line, loc.column) for loc in err.locations or ()],
            ) from err
    elif isinstance(document, _ast.DocumentNode):
        return document
    raise InvalidDocument(
        "Expected str or DocumentNode but got %s" % type(document).__name__
    )
