from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from sdlgen.model import FieldShape


def resolve_field_shape(type_node: TypeNode, is_not_null: bool = False) -> FieldShape:
    """
    Unwrap a GraphQL type reference into a FieldShape.

    Non-null marks the current level; a list opens a new level for its element
    type. `[String!]!` becomes a non-null list whose element is a non-null String.

    Args:
        type_node: The type reference of a field definition
        is_not_null: Whether an enclosing NonNullTypeNode was already stripped

    Returns:
        FieldShape: The resolved shape

    Raises:
        TypeError: If the node is not a type reference
    """
    if isinstance(type_node, NonNullTypeNode):
        return resolve_field_shape(type_node.type, is_not_null=True)

    if isinstance(type_node, ListTypeNode):
        return FieldShape(
            is_not_null=is_not_null,
            is_list=True,
            element_shape=resolve_field_shape(type_node.type),
        )

    if isinstance(type_node, NamedTypeNode):
        return FieldShape(is_not_null=is_not_null, scalar_name=type_node.name.value)

    raise TypeError(f"Unexpected type reference node: {type(type_node).__name__}")


def get_leaf_name(shape: FieldShape) -> str:
    """Return the leaf type name of a (possibly nested) list shape."""
    while shape.is_list and shape.element_shape is not None:
        shape = shape.element_shape
    return shape.scalar_name or ""
