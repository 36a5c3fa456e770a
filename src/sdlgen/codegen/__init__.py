"""Building the merged type model from a parsed GraphQL document."""

from graphql import DocumentNode

from sdlgen.model import TypeItem

from .merge import resolve_items
from .visitor import DocumentVisitor, UnsupportedDefinitionError


def build_type_model(document: DocumentNode) -> list[TypeItem]:
    """
    Visit a GraphQL document and merge interface fields and extensions into the resulting items.

    Args:
        document: The parsed GraphQL document

    Returns:
        list[TypeItem]: The merged items in document order

    Raises:
        UnsupportedDefinitionError: If the document contains an unsupported definition
    """
    items = DocumentVisitor().visit(document)
    return resolve_items(items)


__all__ = ["DocumentVisitor", "UnsupportedDefinitionError", "build_type_model", "resolve_items"]
