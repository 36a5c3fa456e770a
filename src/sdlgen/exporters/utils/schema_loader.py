from pathlib import Path

from ariadne import load_schema_from_path
from graphql import DocumentNode, parse

from sdlgen import log

GRAPHQL_FILE_SUFFIXES = (".graphql", ".graphqls", ".gql")


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve a list of paths (files and directories) into a flat list of unique GraphQL files.

    Directories are searched recursively. Definition order matters for the generated
    output, so the result is sorted.

    Args:
        paths: List of file or directory paths

    Returns:
        Sorted list of unique GraphQL file paths
    """
    resolved_files: set[Path] = set()

    for path in paths:
        if path.is_file():
            resolved_files.add(path)
        elif path.is_dir():
            for suffix in GRAPHQL_FILE_SUFFIXES:
                resolved_files.update(path.rglob(f"*{suffix}"))

    return sorted(resolved_files)


def load_schema_as_str(graphql_schema_paths: list[Path]) -> str:
    """Concatenate the SDL of the given files; each file is syntax checked while loading."""
    schema_str = ""
    for graphql_file in resolve_graphql_files(graphql_schema_paths):
        schema_str += load_schema_from_path(graphql_file) + "\n"
    return schema_str


def load_document(graphql_schema_paths: Path | list[Path]) -> DocumentNode:
    """Load GraphQL files or folders and parse them into a single document."""
    if isinstance(graphql_schema_paths, Path):
        graphql_schema_paths = [graphql_schema_paths]

    schema_str = load_schema_as_str(graphql_schema_paths)
    if not schema_str.strip():
        raise ValueError(f"No GraphQL definitions found in: {', '.join(str(path) for path in graphql_schema_paths)}")

    document = parse(schema_str, no_location=True)
    log.info(f"Parsed {len(document.definitions)} definitions from {len(graphql_schema_paths)} path(s)")
    return document
