from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from graphql import parse
from hypothesis import strategies as st
from hypothesis.strategies import composite

from sdlgen.codegen import DocumentVisitor, build_type_model
from sdlgen.model import FieldShape, TypeItem

SCALAR_TYPES = ["ID", "String", "Int", "Float", "Boolean", "Money", "Vehicle"]


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    SCHEMA1: Path = TESTS_DATA_DIR / "schema1.graphql"
    SPLIT_SCHEMA_DIR: Path = TESTS_DATA_DIR / "split"
    OPERATION_SCHEMA: Path = TESTS_DATA_DIR / "operation.graphql"
    INVALID_SCHEMA: Path = TESTS_DATA_DIR / "invalid.graphql"
    CODEGEN_CONFIG: Path = TESTS_DATA_DIR / "codegen_config.yaml"


@pytest.fixture
def visit_sdl() -> Callable[[str], list[TypeItem]]:
    """Parse SDL and return the visited (unmerged) items."""

    def _visit(sdl: str) -> list[TypeItem]:
        return DocumentVisitor().visit(parse(sdl))

    return _visit


@pytest.fixture
def model_from_sdl() -> Callable[[str], list[TypeItem]]:
    """Parse SDL and return the merged type model."""

    def _build(sdl: str) -> list[TypeItem]:
        return build_type_model(parse(sdl))

    return _build


def get_item(items: list[TypeItem], name: str, index: int = 0) -> TypeItem:
    return [item for item in items if item.name == name][index]


def field_names(item: TypeItem) -> list[str]:
    return [field.name for field in item.fields]


def shape_to_sdl(shape: FieldShape) -> str:
    """Write a resolved shape back as a GraphQL type reference."""
    if shape.is_list:
        assert shape.element_shape is not None
        type_str = f"[{shape_to_sdl(shape.element_shape)}]"
    else:
        assert shape.scalar_name is not None
        type_str = shape.scalar_name
    return f"{type_str}!" if shape.is_not_null else type_str


@composite
def type_reference_strategy(draw: Callable[[st.SearchStrategy[Any]], Any]) -> str:
    """Generate a GraphQL type reference with random list and non-null wrappers."""
    type_str = draw(st.sampled_from(SCALAR_TYPES))
    for _ in range(draw(st.integers(min_value=0, max_value=4))):
        if draw(st.booleans()):
            type_str = f"[{type_str}]"
        if draw(st.booleans()) and not type_str.endswith("!"):
            type_str = f"{type_str}!"
    return type_str
