"""diagram-options: validated option registry for UML diagram generation."""

from diagram_options.config import DEFAULT_PREFIX, DiagramConfig
from diagram_options.errors import DiagramOptionsError, DuplicateOptionError, UnmappedOptionValueError
from diagram_options.option import DiagramOption
from diagram_options.registry import DiagramOptions
from diagram_options.types import LineType, Orientation, Visibility

__all__ = [
    "DEFAULT_PREFIX",
    "DiagramConfig",
    "DiagramOption",
    "DiagramOptions",
    "DiagramOptionsError",
    "DuplicateOptionError",
    "LineType",
    "Orientation",
    "UnmappedOptionValueError",
    "Visibility",
]
