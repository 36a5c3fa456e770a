from collections.abc import Callable, Iterable

from graphql import (
    DefinitionNode,
    DirectiveDefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    NamedTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
)

from sdlgen import log
from sdlgen.codegen.field_resolver import resolve_field_shape
from sdlgen.exporters.utils.directive import get_directive_names
from sdlgen.model import ItemKind, TypeField, TypeItem


class UnsupportedDefinitionError(TypeError):
    """Raised when a document contains a definition the visitor cannot dispatch on."""

    def __init__(self, node: object) -> None:
        self.kind = getattr(node, "kind", type(node).__name__)
        super().__init__(f"Unsupported definition: {self.kind}")


class DocumentVisitor:
    """
    Walk the definitions of a parsed GraphQL document and collect a flat list of type items.

    Interfaces, object types, enums and object/enum extensions each produce one item.
    Schema, directive, scalar, union and input object definitions (and the remaining
    extension forms) are walked but do not produce items.
    """

    def __init__(self) -> None:
        self.visited_items: list[TypeItem] = []
        self._dispatch: dict[type, Callable[[DefinitionNode], None]] = {
            SchemaDefinitionNode: self._visit_schema,
            SchemaExtensionNode: self._visit_schema,
            DirectiveDefinitionNode: self._visit_directive_definition,
            ScalarTypeDefinitionNode: self._visit_scalar,
            ScalarTypeExtensionNode: self._visit_scalar,
            ObjectTypeDefinitionNode: self._visit_object_type,
            ObjectTypeExtensionNode: self._visit_object_type_extension,
            InterfaceTypeDefinitionNode: self._visit_interface_type,
            InterfaceTypeExtensionNode: self._visit_interface_type_extension,
            UnionTypeDefinitionNode: self._visit_union,
            UnionTypeExtensionNode: self._visit_union,
            EnumTypeDefinitionNode: self._visit_enum_type,
            EnumTypeExtensionNode: self._visit_enum_type_extension,
            InputObjectTypeDefinitionNode: self._visit_input_object,
            InputObjectTypeExtensionNode: self._visit_input_object,
        }

    def visit(self, document: DocumentNode | None) -> list[TypeItem]:
        """
        Visit every definition of the document.

        Args:
            document: The parsed GraphQL document

        Returns:
            list[TypeItem]: The items in document order

        Raises:
            UnsupportedDefinitionError: If a definition is neither a type system definition nor extension
        """
        self.visited_items = []
        if document is None:
            return self.visited_items

        for definition in document.definitions or ():
            self.visit_definition(definition)

        log.info(f"Visited {len(document.definitions or ())} definitions, collected {len(self.visited_items)} items")
        return self.visited_items

    def visit_definition(self, node: DefinitionNode) -> None:
        visit_method = self._dispatch.get(type(node))
        if visit_method is None:
            raise UnsupportedDefinitionError(node)
        visit_method(node)

    # Modelled definitions

    def _visit_object_type(self, node: ObjectTypeDefinitionNode) -> None:
        self.visited_items.append(self._build_object_item(node, ItemKind.OBJECT))

    def _visit_object_type_extension(self, node: ObjectTypeExtensionNode) -> None:
        self.visited_items.append(self._build_object_item(node, ItemKind.EXTENSION))

    def _visit_interface_type(self, node: InterfaceTypeDefinitionNode) -> None:
        item = TypeItem(name=node.name.value, kind=ItemKind.INTERFACE, tags=get_directive_names(node))
        item.fields.extend(self._visit_fields(node.fields))
        self.visited_items.append(item)

    def _visit_enum_type(self, node: EnumTypeDefinitionNode) -> None:
        self.visited_items.append(self._build_enum_item(node, ItemKind.ENUM))

    def _visit_enum_type_extension(self, node: EnumTypeExtensionNode) -> None:
        self.visited_items.append(self._build_enum_item(node, ItemKind.EXTENSION))

    def _build_object_item(self, node: ObjectTypeDefinitionNode | ObjectTypeExtensionNode, kind: ItemKind) -> TypeItem:
        item = TypeItem(
            name=node.name.value,
            kind=kind,
            implemented_interfaces=[interface.name.value for interface in node.interfaces or ()],
            tags=get_directive_names(node),
        )
        item.fields.extend(self._visit_fields(node.fields))
        return item

    def _build_enum_item(self, node: EnumTypeDefinitionNode | EnumTypeExtensionNode, kind: ItemKind) -> TypeItem:
        return TypeItem(
            name=node.name.value,
            kind=kind,
            fields=[TypeField(name=value.name.value) for value in node.values or ()],
            tags=get_directive_names(node),
        )

    def _visit_fields(self, fields: Iterable[FieldDefinitionNode] | None) -> list[TypeField]:
        visited_fields = []
        for field in fields or ():
            self._visit_input_values(field.arguments)
            visited_fields.append(TypeField(name=field.name.value, shape=resolve_field_shape(field.type)))
        return visited_fields

    # Walked only

    def _visit_schema(self, node: SchemaDefinitionNode | SchemaExtensionNode) -> None:
        for operation_type in node.operation_types or ():
            self._visit_named_type(operation_type.type)

    def _visit_directive_definition(self, node: DirectiveDefinitionNode) -> None:
        log.debug(f"Skipping directive definition @{node.name.value}")
        self._visit_input_values(node.arguments)

    def _visit_scalar(self, node: ScalarTypeDefinitionNode | ScalarTypeExtensionNode) -> None:
        log.debug(f"Skipping scalar {node.name.value}")

    def _visit_interface_type_extension(self, node: InterfaceTypeExtensionNode) -> None:
        log.debug(f"Skipping interface extension {node.name.value}")
        self._visit_fields(node.fields)

    def _visit_union(self, node: UnionTypeDefinitionNode | UnionTypeExtensionNode) -> None:
        log.debug(f"Skipping union {node.name.value}")
        for member_type in node.types or ():
            self._visit_named_type(member_type)

    def _visit_input_object(self, node: InputObjectTypeDefinitionNode | InputObjectTypeExtensionNode) -> None:
        log.debug(f"Skipping input object {node.name.value}")
        self._visit_input_values(node.fields)

    def _visit_input_values(self, input_values: Iterable[InputValueDefinitionNode] | None) -> None:
        for input_value in input_values or ():
            resolve_field_shape(input_value.type)

    def _visit_named_type(self, node: NamedTypeNode) -> None:
        resolve_field_shape(node)
