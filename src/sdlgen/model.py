"""Pydantic models for the flattened type model built from a GraphQL document."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class ItemKind(str, Enum):
    INTERFACE = "interface"
    OBJECT = "object"
    ENUM = "enum"
    EXTENSION = "extension"


class FieldShape(BaseModel):
    """
    Resolved type of a field after unwrapping non-null and list wrappers.

    A list shape owns the shape of its elements; any other shape names a leaf
    type (a scalar or a reference to an interface, object type or enum).
    """

    is_not_null: bool = False
    is_list: bool = False
    element_shape: "FieldShape | None" = None
    scalar_name: str | None = None

    @model_validator(mode="after")
    def validate_list_or_scalar(self) -> "FieldShape":
        if self.is_list:
            if self.element_shape is None or self.scalar_name is not None:
                raise ValueError("A list shape needs an element shape and no scalar name")
        elif self.scalar_name is None or self.element_shape is not None:
            raise ValueError("A non-list shape needs a scalar name and no element shape")
        return self


class TypeField(BaseModel):
    """A named field of a type item. Enum values carry no shape."""

    name: str
    shape: FieldShape | None = None


class TypeItem(BaseModel):
    """One interface, object type, enum or extension declared in the document."""

    name: str
    kind: ItemKind
    fields: list[TypeField] = Field(default_factory=list)
    implemented_interfaces: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    def has_field(self, field_name: str) -> bool:
        return any(field.name == field_name for field in self.fields)

    def add_tag(self, tag: str) -> None:
        if tag not in self.tags:
            self.tags.append(tag)
