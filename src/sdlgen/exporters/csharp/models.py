"""Pydantic models for C# declarations."""

from pydantic import BaseModel, Field


class CSharpProperty(BaseModel):
    """Represents an auto-property of a C# class or interface."""

    name: str
    type: str


class CSharpEnum(BaseModel):
    """Represents a C# enum."""

    name: str
    values: list[str]


class CSharpInterface(BaseModel):
    """Represents a C# interface."""

    name: str
    properties: list[CSharpProperty] = Field(default_factory=list)


class CSharpClass(BaseModel):
    """Represents a C# class, optionally implementing interfaces."""

    name: str
    base_types: list[str] = Field(default_factory=list)
    properties: list[CSharpProperty] = Field(default_factory=list)
