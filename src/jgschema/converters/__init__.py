"""Converters from record types to output formats."""

from jgschema.converters.sdl_writer import RenderError, SDLWriter, render, render_type

__all__ = ["RenderError", "SDLWriter", "render", "render_type"]
