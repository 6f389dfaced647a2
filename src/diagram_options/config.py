"""Resolved diagram settings handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass

from diagram_options.types import LineType, Orientation, Visibility

# Marker in front of every externally supplied option name (``-linetype``).
DEFAULT_PREFIX = "-"


@dataclass(frozen=True)
class DiagramConfig:
    """Typed snapshot of the diagram options."""

    line_type: LineType = LineType.ORTHO
    dependencies_visibility: Visibility = Visibility.PUBLIC
    package_orientation: Orientation = Orientation.TOP_TO_BOTTOM

    def as_dict(self) -> dict[str, str]:
        """Map option names to the selected variant names, for display."""
        return {
            "linetype": self.line_type.name,
            "dependencies": self.dependencies_visibility.name,
            "package-orientation": self.package_orientation.name,
        }
