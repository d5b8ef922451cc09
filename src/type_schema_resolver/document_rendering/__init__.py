"""Document rendering exports."""

from .definitions_renderer import (
    OutputFormat,
    RenderError,
    dump_document,
    render_definitions,
    render_property,
    render_schema,
)

__all__ = [
    "OutputFormat",
    "RenderError",
    "dump_document",
    "render_definitions",
    "render_property",
    "render_schema",
]
