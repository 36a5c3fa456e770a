import json
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Any

import rich_click as click
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import DocumentNode, GraphQLError
from rich.traceback import install

from sdlgen import __version__, log
from sdlgen.codegen import UnsupportedDefinitionError, build_type_model
from sdlgen.codegen.field_resolver import get_leaf_name
from sdlgen.config import CodegenConfig, load_codegen_config
from sdlgen.exporters.csharp import render_items
from sdlgen.exporters.utils.schema_loader import load_document, resolve_graphql_files
from sdlgen.model import ItemKind, TypeItem


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        return resolve_graphql_files(list(set(value)))


schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    required=True,
    multiple=True,
    help="The GraphQL schema file or directory containing schema files. Can be specified multiple times.",
)


output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=True,
    help="Output file",
)


optional_output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=False,
    help="Output file",
)


config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file containing code generation configuration",
)


def load_document_or_exit(schemas: list[Path]) -> DocumentNode:
    try:
        return load_document(schemas)
    except (GraphQLError, GraphQLFileSyntaxError, ValueError) as e:
        raise click.ClickException(f"Failed to load schema: {e}") from e


def build_type_model_or_exit(document: DocumentNode) -> list[TypeItem]:
    try:
        return build_type_model(document)
    except UnsupportedDefinitionError as e:
        log.error(f"{e}. Only type system definitions and extensions are supported.")
        sys.exit(1)


@click.group(context_settings={"auto_envvar_prefix": "sdlgen"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


@click.group()
def export() -> None:
    """Export commands for multiple output types."""
    pass


@click.group()
def stats() -> None:
    """Stats commands for multiple input types."""
    pass


# Export -> csharp
# ----------
@export.command
@schema_option
@output_option
@config_option
@click.option(
    "--namespace",
    "-n",
    type=str,
    help="C# namespace for the generated declarations (overrides the config file)",
)
@click.option(
    "--aggregator-name",
    type=str,
    help="Name of the class exposing the @entity collections (overrides the config file)",
)
def csharp(
    schemas: list[Path],
    output: Path,
    config_path: Path | None,
    namespace: str | None,
    aggregator_name: str | None,
) -> None:
    """Generate C# declarations from a given GraphQL schema."""
    config: CodegenConfig = load_codegen_config(config_path)
    overrides = {
        key: value for key, value in {"namespace": namespace, "aggregator_name": aggregator_name}.items() if value
    }
    if overrides:
        config = config.model_copy(update=overrides)

    items = build_type_model_or_exit(load_document_or_exit(schemas))
    result = render_items(items, config)

    output.parent.mkdir(parents=True, exist_ok=True)
    _ = output.write_text(result)
    log.success(f"C# declarations written to {output}")


# Export -> model
# ----------
@export.command
@schema_option
@optional_output_option
def model(schemas: list[Path], output: Path | None) -> None:
    """Dump the merged type model of a given GraphQL schema as JSON."""
    items = build_type_model_or_exit(load_document_or_exit(schemas))
    result: dict[str, Any] = {"items": [item.model_dump(mode="json") for item in items]}

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        _ = output.write_text(json.dumps(result, indent=2))
        log.success(f"Type model written to {output}")
    else:
        log.print_dict(result)


# Stats -> model
# ----------
@stats.command(name="model")
@schema_option
@config_option
def stats_model(schemas: list[Path], config_path: Path | None) -> None:
    """Count the items of the merged type model by kind."""
    config = load_codegen_config(config_path)
    items = build_type_model_or_exit(load_document_or_exit(schemas))

    counts = Counter(item.kind.value for item in items)
    log.rule("Type Model Item Counts")
    for kind in ItemKind:
        log.key_value(kind.value, counts.get(kind.value, 0))

    unresolved = get_unresolved_references(items, config)
    if unresolved:
        log.warning(f"Types referenced but not declared or mapped: {', '.join(unresolved)}")
        log.hint("They are rendered by name; add a 'scalars' entry to the codegen config to map them.")


def get_unresolved_references(items: list[TypeItem], config: CodegenConfig | None = None) -> list[str]:
    """Leaf type names used by fields that are neither declared items nor mapped scalars."""
    known = set((config or CodegenConfig()).scalar_map()) | {item.name for item in items}
    unresolved: list[str] = []
    for item in items:
        for field in item.fields:
            if field.shape is None:
                continue
            leaf_name = get_leaf_name(field.shape)
            if leaf_name not in known and leaf_name not in unresolved:
                unresolved.append(leaf_name)
    return unresolved


cli.add_command(export)
cli.add_command(stats)

if __name__ == "__main__":
    cli()
