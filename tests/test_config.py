import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from sdlgen.config import DEFAULT_SCALAR_MAP, CodegenConfig, load_codegen_config
from tests.conftest import TestSchemaData as TSD


class TestCodegenConfig:
    """Test the code generation configuration model."""

    def test_defaults(self) -> None:
        config = CodegenConfig()

        assert config.namespace is None
        assert config.usings == []
        assert config.indent == "    "
        assert config.enum_separator == ","
        assert config.enum_member_style == "pascal"
        assert config.accessors == "{ get; set; }"
        assert config.entity_directive == "entity"
        assert config.aggregator_name == "EntityContext"
        assert config.scalar_map() == DEFAULT_SCALAR_MAP

    def test_scalar_overrides_keep_defaults(self) -> None:
        config = CodegenConfig(scalars={"Money": "decimal", "Float": "double"})
        scalar_map = config.scalar_map()

        assert scalar_map["Money"] == "decimal"
        assert scalar_map["Float"] == "double"
        assert scalar_map["ID"] == "Guid"
        assert DEFAULT_SCALAR_MAP["Float"] == "float"

    def test_unknown_keys_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CodegenConfig.model_validate({"indentation": 2})


class TestLoadCodegenConfig:
    """Test loading the configuration from YAML."""

    def test_no_path_gives_defaults(self) -> None:
        assert load_codegen_config(None) == CodegenConfig()

    def test_load_file(self) -> None:
        config = load_codegen_config(TSD.CODEGEN_CONFIG)

        assert config.namespace == "Fleet.Models"
        assert config.usings == ["System", "System.Collections.Generic"]
        assert config.aggregator_name == "FleetContext"
        assert config.scalar_map()["Money"] == "decimal"

    def test_load_file_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sdlgen"):
            load_codegen_config(TSD.CODEGEN_CONFIG)

        assert f"Loaded codegen config from {TSD.CODEGEN_CONFIG}" in caplog.messages

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        assert load_codegen_config(config_path) == CodegenConfig()

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- namespace\n- usings\n")

        with pytest.raises(TypeError, match="must be a mapping"):
            load_codegen_config(config_path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        config_path = tmp_path / "invalid.yaml"
        config_path.write_text("usings: System\n")

        with pytest.raises(ValidationError):
            load_codegen_config(config_path)
