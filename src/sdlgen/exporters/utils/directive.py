from graphql import (
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
)

TaggedNode = (
    ObjectTypeDefinitionNode
    | ObjectTypeExtensionNode
    | InterfaceTypeDefinitionNode
    | EnumTypeDefinitionNode
    | EnumTypeExtensionNode
)


def get_directive_names(node: TaggedNode) -> list[str]:
    """Return the names of the directives applied to a definition node, in order and without duplicates."""
    names: list[str] = []
    for directive in node.directives or ():
        if directive.name.value not in names:
            names.append(directive.name.value)
    return names