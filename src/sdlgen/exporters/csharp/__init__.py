"""C# exporter module for sdlgen."""

from sdlgen.codegen import build_type_model

from .csharp import translate_to_csharp
from .renderer import CSharpRenderer, render_items

__all__ = ["CSharpRenderer", "build_type_model", "render_items", "translate_to_csharp"]
