# -*- coding: utf-8 -*-

import functools as ft
import logging
from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Set,
    Type,
    TypeVar,
    Union,
    cast,
)

from graphql.language import ast as _ast

from ..exc import (
    DuplicateDefinition,
    ExtensionError,
    InvalidValue,
    MalformedTypeReference,
    TypeCastFailure,
    UnionMemberNotObject,
    UnsupportedDefinition,
)
from ..schema import (
    Argument,
    DeprecatedDirective,
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
    SpecifiedByDirective,
    UnionType,
    is_input_type,
    is_output_type,
    unwrap_type,
)
from ..schema.scalars import default_scalar
from ..utilities import directive_arguments, value_from_ast
from .registry import TypeRegistry

logger = logging.getLogger(__name__)

TTypeExtension = TypeVar("TTypeExtension", bound=_ast.TypeExtensionNode)

ExtensionMap = Mapping[str, List[_ast.TypeExtensionNode]]

_InputValueNodes = Optional[Sequence[_ast.InputValueDefinitionNode]]


class ASTTypeBuilder:
    """ Build type definitions from AST nodes into a :class:`TypeRegistry`.

    Building is split in two phases:

    1.  :meth:`build_type_definition` registers one placeholder per type
        definition. Fields, interfaces and input fields are captured as
        thunks so they can refer to types defined later in the document.
        Union members are resolved straight away which requires unions to be
        built after every other definition.

    2.  :meth:`resolve_lazy_types` forces every thunk of every registered
        type and coerces the collected default values, surfacing any
        unresolved reference as a build error.

    Warning:
        Standard types (specified scalars and introspection types) are never
        built or extended: definitions using their names are ignored.

    Args:
        registry: Registry to build into
        type_extensions: Extension nodes by extended type name
        strict: Fail instead of dropping arguments, input fields and
            interfaces of the wrong kind
    """

    __slots__ = ("_registry", "_extensions", "_strict", "_pending_defaults")

    def __init__(
        self,
        registry: TypeRegistry,
        type_extensions: Optional[ExtensionMap] = None,
        strict: bool = False,
    ):
        self._registry = registry
        self._extensions = type_extensions or {}
        self._strict = strict
        self._pending_defaults = {}  # type: Dict[InputValue, _ast.ValueNode]

    def build_type(self, type_node: _ast.TypeNode) -> GraphQLType:
        """ Convert a type reference to a type, resolving named types through
        the registry.

        Raises:
            :class:`~sdl_graph.exc.UnknownType`:
                if a named type has not been registered.

            :class:`~sdl_graph.exc.MalformedTypeReference`:
                if the node is not a type reference.
        """
        if isinstance(type_node, _ast.NonNullTypeNode):
            return NonNullType(self.build_type(type_node.type), node=type_node)
        elif isinstance(type_node, _ast.ListTypeNode):
            return ListType(self.build_type(type_node.type), node=type_node)
        elif isinstance(type_node, _ast.NamedTypeNode):
            return self._registry.resolve(type_node.name.value, type_node)
        raise MalformedTypeReference(
            "Invalid type reference %r" % (type_node,),
            [type_node] if isinstance(type_node, _ast.Node) else None,
        )

    def build_type_definition(
        self, type_def: _ast.TypeDefinitionNode
    ) -> NamedType:
        """ Build and register the type for a definition node.

        Returns:
            The built type, or the standard type of the same name in which
            case the definition has been ignored.
        """
        name = type_def.name.value

        if self._registry.is_standard(name):
            logger.debug('Skipping definition of standard type "%s"', name)
            return self._registry.resolve(name)

        if isinstance(type_def, _ast.ObjectTypeDefinitionNode):
            built = self._build_object_type(type_def)  # type: NamedType
        elif isinstance(type_def, _ast.InterfaceTypeDefinitionNode):
            built = self._build_interface_type(type_def)
        elif isinstance(type_def, _ast.EnumTypeDefinitionNode):
            built = self._build_enum_type(type_def)
        elif isinstance(type_def, _ast.UnionTypeDefinitionNode):
            built = self._build_union_type(type_def)
        elif isinstance(type_def, _ast.ScalarTypeDefinitionNode):
            built = self._build_scalar_type(type_def)
        elif isinstance(type_def, _ast.InputObjectTypeDefinitionNode):
            built = self._build_input_object_type(type_def)
        else:
            raise UnsupportedDefinition(
                "Unsupported definition %s" % type(type_def).__name__,
                [type_def],
            )

        self._registry.register(name, built, type_def)
        return built

    def build_directive(
        self, directive_def: _ast.DirectiveDefinitionNode
    ) -> Directive:
        args = self.build_arguments(directive_def.arguments)
        try:
            return Directive(
                name=directive_def.name.value,
                description=_desc(directive_def),
                locations=[loc.value for loc in directive_def.locations],
                args=args,
                node=directive_def,
            )
        except ValueError as err:
            raise UnsupportedDefinition(str(err), [directive_def]) from err

    def build_arguments(self, nodes: _InputValueNodes) -> List[Argument]:
        """ Build arguments, dropping (or rejecting in strict mode) the ones
        whose type is not an input type. """
        args = []  # type: List[Argument]
        seen = set()  # type: Set[str]
        for node in nodes or ():
            name = node.name.value
            if name in seen:
                raise DuplicateDefinition(
                    'Duplicate argument "%s"' % name, [node]
                )
            seen.add(name)

            type_ = self.build_type(node.type)
            if not is_input_type(type_):
                self._drop(
                    'Expected input type for argument "%s" but got "%s"'
                    % (name, type_),
                    node,
                )
                continue

            arg = Argument(name, type_, description=_desc(node), node=node)
            self._defer_default(arg, node)
            args.append(arg)

        return args

    def resolve_lazy_types(self) -> None:
        """ Force every lazy attribute of the user types and coerce pending
        default values. """
        resolved = 0
        for type_ in self._registry.user_types():
            if isinstance(type_, (ObjectType, InterfaceType)):
                resolved += len([field.type for field in type_.fields])
                resolved += len(type_.interfaces)
            elif isinstance(type_, InputObjectType):
                resolved += len(type_.fields)

        logger.debug("Resolved %d lazy references", resolved)

        while self._pending_defaults:
            self._coerce_default(next(iter(self._pending_defaults)))

    def _drop(self, msg: str, node: _ast.Node) -> None:
        if self._strict:
            raise TypeCastFailure(msg, [node])
        logger.warning("%s, ignoring it", msg)

    def _defer_default(
        self, input_value: InputValue, node: _ast.InputValueDefinitionNode
    ) -> None:
        # Coercion needs all input object fields which are only available
        # once all thunks have been forced.
        if node.default_value is not None:
            self._pending_defaults[input_value] = node.default_value

    def _coerce_default(self, input_value: InputValue) -> None:
        value_node = self._pending_defaults.pop(input_value, None)
        if value_node is None:
            return

        # Nested input objects fall back on their own fields' defaults.
        named_type = unwrap_type(input_value.type)
        if isinstance(named_type, InputObjectType):
            for field in named_type.fields:
                self._coerce_default(field)

        try:
            input_value.default_value = value_from_ast(
                value_node, input_value.type
            )
        except InvalidValue as err:
            logger.debug(
                'Ignoring invalid default value for "%s": %s',
                input_value.name,
                err,
            )

    def _collect_extensions(
        self, target_name: str, ext_type: Type[TTypeExtension]
    ) -> List[TTypeExtension]:
        res = []
        for ext in self._extensions.get(target_name) or []:
            if not isinstance(ext, ext_type):
                raise ExtensionError(
                    "Expected %s when extending %s but got %s"
                    % (
                        ext_type.__name__,
                        ext_type.__name__.replace("ExtensionNode", ""),
                        type(ext).__name__,
                    ),
                    [ext],
                )

            res.append(cast(TTypeExtension, ext))

        return res

    def _build_object_type(
        self, type_def: _ast.ObjectTypeDefinitionNode
    ) -> ObjectType:
        extensions = self._collect_extensions(
            type_def.name.value, _ast.ObjectTypeExtensionNode
        )
        nodes = [type_def, *extensions]
        return ObjectType(
            name=type_def.name.value,
            description=_desc(type_def),
            # Lazy to support forward references and cycles.
            fields=ft.partial(self._build_fields, nodes),
            interfaces=ft.partial(self._build_interfaces, nodes),
            nodes=nodes,
        )

    def _build_interface_type(
        self, type_def: _ast.InterfaceTypeDefinitionNode
    ) -> InterfaceType:
        extensions = self._collect_extensions(
            type_def.name.value, _ast.InterfaceTypeExtensionNode
        )
        nodes = [type_def, *extensions]
        return InterfaceType(
            name=type_def.name.value,
            description=_desc(type_def),
            fields=ft.partial(self._build_fields, nodes),
            interfaces=ft.partial(self._build_interfaces, nodes),
            nodes=nodes,
        )

    def _build_fields(self, nodes: Sequence[Any]) -> List[Field]:
        return [
            self._build_field(field_def)
            for field_def in _unique_members(
                nodes, "fields", "field", lambda f: f.name.value
            )
        ]

    def _build_field(self, field_def: _ast.FieldDefinitionNode) -> Field:
        type_ = self.build_type(field_def.type)
        if not is_output_type(type_):
            raise TypeCastFailure(
                'Expected output type for field "%s" but got "%s"'
                % (field_def.name.value, type_),
                [field_def.type],
            )

        return Field(
            field_def.name.value,
            type_,
            description=_desc(field_def),
            args=self.build_arguments(field_def.arguments),
            deprecation_reason=_deprecation_reason(field_def),
            node=field_def,
        )

    def _build_interfaces(self, nodes: Sequence[Any]) -> List[InterfaceType]:
        interfaces = []  # type: List[InterfaceType]
        for named_type in _unique_members(
            nodes, "interfaces", "interface", lambda i: i.name.value
        ):
            type_ = self.build_type(named_type)
            if not isinstance(type_, InterfaceType):
                self._drop(
                    'Type "%s" cannot implement non interface type "%s"'
                    % (nodes[0].name.value, type_),
                    named_type,
                )
                continue
            interfaces.append(type_)
        return interfaces

    def _build_enum_type(
        self, type_def: _ast.EnumTypeDefinitionNode
    ) -> EnumType:
        extensions = self._collect_extensions(
            type_def.name.value, _ast.EnumTypeExtensionNode
        )
        nodes = [type_def, *extensions]
        deprecation_reason = _enum_value_deprecation_reason(type_def)
        return EnumType(
            name=type_def.name.value,
            description=_desc(type_def),
            values=[
                EnumValue(
                    name=value_def.name.value,
                    value=value_def.name.value,
                    description=_desc(value_def),
                    deprecation_reason=deprecation_reason,
                    node=value_def,
                )
                for value_def in _unique_members(
                    nodes, "values", "enum value", lambda v: v.name.value
                )
            ],
            nodes=nodes,
        )

    def _build_union_type(
        self, type_def: _ast.UnionTypeDefinitionNode
    ) -> UnionType:
        extensions = self._collect_extensions(
            type_def.name.value, _ast.UnionTypeExtensionNode
        )
        nodes = [type_def, *extensions]
        members = []  # type: List[ObjectType]
        for named_type in _unique_members(
            nodes, "types", "member type", lambda t: t.name.value
        ):
            member = self.build_type(named_type)
            if not isinstance(member, ObjectType):
                raise UnionMemberNotObject(named_type.name.value, [named_type])
            members.append(member)

        return UnionType(
            name=type_def.name.value,
            description=_desc(type_def),
            types=members,
            nodes=nodes,
        )

    def _build_scalar_type(
        self, type_def: _ast.ScalarTypeDefinitionNode
    ) -> ScalarType:
        extensions = self._collect_extensions(
            type_def.name.value, _ast.ScalarTypeExtensionNode
        )
        nodes = [type_def, *extensions]
        return default_scalar(
            name=type_def.name.value,
            description=_desc(type_def),
            specified_by_url=_specified_by_url(nodes),
            nodes=nodes,
        )

    def _build_input_object_type(
        self, type_def: _ast.InputObjectTypeDefinitionNode
    ) -> InputObjectType:
        extensions = self._collect_extensions(
            type_def.name.value, _ast.InputObjectTypeExtensionNode
        )
        nodes = [type_def, *extensions]
        return InputObjectType(
            name=type_def.name.value,
            description=_desc(type_def),
            fields=ft.partial(self._build_input_fields, nodes),
            nodes=nodes,
        )

    def _build_input_fields(self, nodes: Sequence[Any]) -> List[InputField]:
        fields = []  # type: List[InputField]
        for node in _unique_members(
            nodes, "fields", "field", lambda f: f.name.value
        ):
            type_ = self.build_type(node.type)
            if not is_input_type(type_):
                self._drop(
                    'Expected input type for field "%s" of input object "%s" '
                    'but got "%s"'
                    % (node.name.value, nodes[0].name.value, type_),
                    node,
                )
                continue

            field = InputField(
                node.name.value, type_, description=_desc(node), node=node
            )
            self._defer_default(field, node)
            fields.append(field)

        return fields


def _unique_members(
    nodes: Sequence[Any], attr: str, kind: str, key: Any
) -> Iterator[Any]:
    """ Iterate over the members (fields, values, etc.) of a definition node
    followed by the members of its extension nodes, rejecting duplicates. """
    type_name = nodes[0].name.value
    seen = set()  # type: Set[str]
    for node in nodes:
        for member in getattr(node, attr, None) or ():
            name = key(member)
            if name in seen:
                if isinstance(node, _ast.TypeExtensionNode):
                    raise ExtensionError(
                        'Found duplicate %s "%s" when extending "%s"'
                        % (kind, name, type_name),
                        [member],
                    )
                raise DuplicateDefinition(
                    'Duplicate %s "%s" on "%s"' % (kind, name, type_name),
                    [member],
                )
            seen.add(name)
            yield member


def _directive_arguments(
    definition: Directive, node: _ast.Node
) -> Optional[Dict[str, Any]]:
    try:
        return directive_arguments(definition, node)
    except InvalidValue as err:
        raise TypeCastFailure(
            "Invalid @%s directive: %s" % (definition.name, err), err.nodes
        ) from err


def _deprecation_reason(
    node: Union[_ast.FieldDefinitionNode, _ast.EnumTypeDefinitionNode]
) -> Optional[str]:
    args = _directive_arguments(DeprecatedDirective, node)
    return args.get("reason", None) if args else None


def _enum_value_deprecation_reason(
    type_def: _ast.EnumTypeDefinitionNode,
) -> Optional[str]:
    # Enum values are deprecated through the directive applied to the enum
    # definition, not to individual values.
    return _deprecation_reason(type_def)


def _specified_by_url(
    nodes: Sequence[
        Union[_ast.ScalarTypeDefinitionNode, _ast.ScalarTypeExtensionNode]
    ]
) -> Optional[str]:
    url = None
    for node in nodes:
        args = _directive_arguments(SpecifiedByDirective, node)
        if args:
            url = args["url"]
    return url


def _desc(node: Any) -> Optional[str]:
    description = getattr(node, "description", None)
    return description.value if description else None
