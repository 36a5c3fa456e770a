import inflect
from jinja2 import Environment, PackageLoader, select_autoescape

from sdlgen import log
from sdlgen.config import CodegenConfig
from sdlgen.exporters.csharp.models import CSharpClass, CSharpEnum, CSharpInterface, CSharpProperty
from sdlgen.model import FieldShape, ItemKind, TypeItem

_inflect_engine = inflect.engine()


def to_property_name(field_name: str) -> str:
    """Capitalize the first character of a field name (`firstName` -> `FirstName`)."""
    return field_name[:1].upper() + field_name[1:]


def to_enum_member_name(value_name: str, style: str = "pascal") -> str:
    """
    Convert a GraphQL enum value to a C# enumerant.

    With the `pascal` style (the `enum_member_style` default), MACRO_CASE values become
    PascalCase (`DARK_RED` -> `DarkRed`) and any other value only gets its first character
    capitalized. The `capitalize` style always only capitalizes the first character
    (`DARK_RED` stays `DARK_RED`).
    """
    if style == "capitalize" or not value_name.isupper():
        return to_property_name(value_name)
    return "".join(word.capitalize() for word in value_name.split("_"))


def pluralize(name: str) -> str:
    return str(_inflect_engine.plural_noun(name))


class CSharpRenderer:
    """
    Renderer converting merged type items into C# declarations.

    Enums, interfaces and object types become one declaration each, in item order.
    Extension items are skipped. Object types tagged with the entity directive are
    additionally exposed through a single aggregator class.
    """

    def __init__(self, config: CodegenConfig | None = None):
        self.config = config or CodegenConfig()
        self.scalar_map = self.config.scalar_map()

        self.env = Environment(
            loader=PackageLoader("sdlgen.exporters.csharp", "templates"),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, items: list[TypeItem]) -> str:
        """
        Render the items to C# source text.

        Returns:
            str: Declarations separated by a blank line, ending with a newline
        """
        declarations: list[str] = []
        for item in items:
            declaration = self.render_item(item)
            if declaration is not None:
                declarations.append(declaration)

        aggregator = self.render_aggregator(items)
        if aggregator is not None:
            declarations.append(aggregator)

        log.info(f"Rendered {len(declarations)} C# declarations")

        result = self.env.get_template("file.j2").render(
            usings=self.config.usings,
            namespace=self.config.namespace,
            body="\n\n".join(declarations),
        )
        return result.rstrip("\n") + "\n" if result else ""

    def render_item(self, item: TypeItem) -> str | None:
        if item.kind == ItemKind.ENUM:
            return self.render_enum(item)
        if item.kind == ItemKind.INTERFACE:
            return self.render_interface(item)
        if item.kind == ItemKind.OBJECT:
            return self.render_class(item)
        log.debug(f"Skipping {item.kind.value} item {item.name}")
        return None

    def render_type(self, shape: FieldShape) -> str:
        """Map a field shape to a C# type. Nullability is not reflected."""
        if shape.is_list and shape.element_shape is not None:
            return f"{self.config.list_type}<{self.render_type(shape.element_shape)}>"
        scalar_name = shape.scalar_name or ""
        return self.scalar_map.get(scalar_name, scalar_name)

    def render_enum(self, item: TypeItem) -> str:
        csharp_enum = CSharpEnum(
            name=item.name,
            values=[to_enum_member_name(field.name, self.config.enum_member_style) for field in item.fields],
        )
        return self.env.get_template("enum.j2").render(
            **csharp_enum.model_dump(),
            indent=self.config.indent,
            separator=self.config.enum_separator,
        )

    def render_interface(self, item: TypeItem) -> str:
        csharp_interface = CSharpInterface(name=item.name, properties=self._build_properties(item))
        return self.env.get_template("interface.j2").render(
            **csharp_interface.model_dump(),
            indent=self.config.indent,
            accessors=self.config.accessors,
        )

    def render_class(self, item: TypeItem) -> str:
        csharp_class = CSharpClass(
            name=item.name,
            base_types=item.implemented_interfaces,
            properties=self._build_properties(item),
        )
        return self._render_class_model(csharp_class)

    def render_aggregator(self, items: list[TypeItem]) -> str | None:
        """Render the aggregator class exposing one collection per entity, or None without entities."""
        entities = [
            item for item in items if item.kind == ItemKind.OBJECT and self.config.entity_directive in item.tags
        ]
        if not entities:
            return None

        log.debug(f"Found {len(entities)} entities: {', '.join(entity.name for entity in entities)}")
        aggregator = CSharpClass(
            name=self.config.aggregator_name,
            properties=[
                CSharpProperty(name=pluralize(entity.name), type=f"{self.config.collection_type}<{entity.name}>")
                for entity in entities
            ],
        )
        return self._render_class_model(aggregator)

    def _build_properties(self, item: TypeItem) -> list[CSharpProperty]:
        return [
            CSharpProperty(name=to_property_name(field.name), type=self.render_type(field.shape))
            for field in item.fields
            if field.shape is not None
        ]

    def _render_class_model(self, csharp_class: CSharpClass) -> str:
        return self.env.get_template("class.j2").render(
            **csharp_class.model_dump(),
            indent=self.config.indent,
            accessors=self.config.accessors,
        )


def render_items(items: list[TypeItem], config: CodegenConfig | None = None) -> str:
    """Render merged type items to C# declarations."""
    return CSharpRenderer(config).render(items)
