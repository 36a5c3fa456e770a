from graphql import DocumentNode

from sdlgen import log
from sdlgen.codegen import build_type_model
from sdlgen.config import CodegenConfig

from .renderer import render_items


def transform(document: DocumentNode, config: CodegenConfig | None = None) -> str:
    """
    Transform a parsed GraphQL document to C# declarations.

    Args:
        document: The parsed GraphQL document
        config: Optional code generation configuration

    Returns:
        str: C# source text

    Raises:
        UnsupportedDefinitionError: If the document contains an unsupported definition
    """
    log.info(f"Transforming GraphQL document with {len(document.definitions or ())} definitions to C#")

    items = build_type_model(document)
    csharp_content = render_items(items, config)

    log.info("Successfully converted GraphQL document to C#")

    return csharp_content


def translate_to_csharp(document: DocumentNode, config: CodegenConfig | None = None) -> str:
    """
    Translate a parsed GraphQL document to C# declarations.

    Args:
        document: The parsed GraphQL document
        config: Optional code generation configuration

    Returns:
        str: C# source text
    """
    return transform(document, config)
