from pathlib import Path
from typing import Any, Literal, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field

from sdlgen import log

DEFAULT_SCALAR_MAP: dict[str, str] = {
    "ID": "Guid",
    "String": "string",
    "Boolean": "bool",
    "Int": "int",
    "Float": "float",
    "Byte": "byte",
    "Short": "short",
    "Long": "long",
    "Decimal": "decimal",
    "Url": "Uri",
    "DateTime": "DateTime",
    "Date": "DateTime",
    "Uuid": "Guid",
    "Any": "object",
}


class CodegenConfig(BaseModel):
    """Settings for the C# declaration output."""

    model_config = ConfigDict(extra="forbid")

    namespace: str | None = None
    usings: list[str] = Field(default_factory=list)
    indent: str = "    "
    enum_separator: str = ","
    enum_member_style: Literal["pascal", "capitalize"] = "pascal"
    accessors: str = "{ get; set; }"
    list_type: str = "List"
    scalars: dict[str, str] = Field(default_factory=dict)
    entity_directive: str = "entity"
    aggregator_name: str = "EntityContext"
    collection_type: str = "DbSet"

    def scalar_map(self) -> dict[str, str]:
        """The default scalar mapping with the configured entries applied on top."""
        return {**DEFAULT_SCALAR_MAP, **self.scalars}


def load_codegen_config(config_path: Path | None) -> CodegenConfig:
    """
    Load and validate a code generation configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file, or None for defaults.

    Returns:
        A validated CodegenConfig.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against CodegenConfig fails.
    """
    if config_path is None:
        log.debug("No codegen config provided")
        return CodegenConfig()

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug(f"Loaded codegen config from {config_path}")

    # Empty file or explicit YAML null means defaults
    if raw is None:
        return CodegenConfig()

    if not isinstance(raw, dict):
        raise TypeError(f"Codegen config root must be a mapping (YAML object), got {type(raw).__name__}")

    return CodegenConfig.model_validate(cast(dict[str, Any], raw))
