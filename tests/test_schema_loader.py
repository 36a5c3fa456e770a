from pathlib import Path

import pytest
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import ObjectTypeDefinitionNode, ObjectTypeExtensionNode

from sdlgen.exporters.utils.schema_loader import load_document, resolve_graphql_files
from tests.conftest import TestSchemaData as TSD


class TestResolveGraphqlFiles:
    """Test resolution of schema paths into GraphQL files."""

    def test_directory_is_searched_and_sorted(self) -> None:
        files = resolve_graphql_files([TSD.SPLIT_SCHEMA_DIR])

        assert [file.name for file in files] == ["a_types.graphql", "b_extensions.graphql"]

    def test_duplicates_are_removed(self) -> None:
        files = resolve_graphql_files([TSD.SCHEMA1, TSD.SCHEMA1, TSD.SPLIT_SCHEMA_DIR / "a_types.graphql"])

        assert files == sorted({TSD.SCHEMA1, TSD.SPLIT_SCHEMA_DIR / "a_types.graphql"})

    def test_other_suffixes(self, tmp_path: Path) -> None:
        (tmp_path / "one.gql").write_text("type A { a: Int }")
        (tmp_path / "two.graphqls").write_text("type B { b: Int }")
        (tmp_path / "notes.txt").write_text("type C { c: Int }")

        assert [file.name for file in resolve_graphql_files([tmp_path])] == ["one.gql", "two.graphqls"]


class TestLoadDocument:
    """Test loading GraphQL files into a single document."""

    def test_single_file(self) -> None:
        document = load_document(TSD.SCHEMA1)

        assert any(isinstance(definition, ObjectTypeDefinitionNode) for definition in document.definitions)

    def test_directory_keeps_file_order(self) -> None:
        document = load_document([TSD.SPLIT_SCHEMA_DIR])
        names = [definition.name.value for definition in document.definitions]  # type: ignore[attr-defined]

        assert names == ["Node", "Vehicle", "Vehicle"]
        assert isinstance(document.definitions[-1], ObjectTypeExtensionNode)

    def test_syntax_error(self) -> None:
        with pytest.raises(GraphQLFileSyntaxError):
            load_document(TSD.INVALID_SCHEMA)

    def test_no_definitions(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="No GraphQL definitions"):
            load_document([tmp_path])
