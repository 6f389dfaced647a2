"""Option registry — validates, stores and resolves the diagram options.

External callers (a doclet, a CLI front end) hand over options as
``[name, value]`` pairs where ``name`` carries a one-character marker in front
of the registered option name, e.g. ``["-linetype", "spline"]``.

Two validation policies coexist:

* ``check_option`` / ``check_options`` are strict and report unknown names and
  out-of-range values as error strings.
* ``set`` is permissive: unknown names are skipped and values are stored as
  given. Callers validate with ``check_option`` before calling ``set``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TypeVar

from diagram_options.config import DEFAULT_PREFIX, DiagramConfig
from diagram_options.errors import DuplicateOptionError, UnmappedOptionValueError
from diagram_options.option import DiagramOption
from diagram_options.types import LineType, Orientation, Visibility

logger = logging.getLogger(__name__)

LINETYPE = "linetype"
DEPENDENCIES = "dependencies"
PACKAGE_ORIENTATION = "package-orientation"

# name, valid values, default, length
BUILTIN_OPTIONS: list[tuple[str, str, str, int]] = [
    (LINETYPE, "polyline,spline,ortho", "ortho", 2),
    (DEPENDENCIES, "public,protected,package,private", "public", 2),
    (PACKAGE_ORIENTATION, "left-to-right,top-to-bottom", "top-to-bottom", 2),
]

_E = TypeVar("_E")


class DiagramOptions:
    """The options recognized by the diagram generator, keyed by name."""

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        if len(prefix) != 1:
            raise ValueError(f"Option prefix must be a single character, got '{prefix}'")
        self.prefix = prefix
        self._options: dict[str, DiagramOption] = {}
        for name, valid_values, default, length in BUILTIN_OPTIONS:
            self.register_option(name, valid_values, default, length)

    def register_option(self, name: str, valid_values: str, default_value: str, length: int) -> DiagramOption:
        """Register a new option from a comma-separated list of legal values."""
        if name in self._options:
            raise DuplicateOptionError(f"Option '{name}' is already registered")
        values = tuple(v.strip() for v in valid_values.split(","))
        option = DiagramOption(name=name, valid_values=values, default=default_value, length=length)
        self._options[name] = option
        return option

    # -- lookup ------------------------------------------------------------

    def resolve_name(self, raw_name: str) -> DiagramOption | None:
        """Return the option named by ``raw_name`` (marker included), or None."""
        if not raw_name.startswith(self.prefix):
            return None
        name = raw_name[len(self.prefix) :]
        if not name:
            return None
        return self._options.get(name)

    def get_option(self, name: str) -> DiagramOption | None:
        return self._options.get(name)

    def get_value(self, name: str) -> str | None:
        option = self._options.get(name)
        return option.value if option is not None else None

    def option_names(self) -> list[str]:
        return list(self._options)

    def __iter__(self) -> Iterator[DiagramOption]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __repr__(self) -> str:
        return f"DiagramOptions(options={list(self._options.values())!r})"

    # -- front-end integration ---------------------------------------------

    def set(self, pairs: Iterable[Sequence[str]]) -> None:
        """Apply ``[name, value]`` pairs. Unknown names are ignored, values are not checked."""
        for pair in pairs:
            raw_name, value = pair[0], pair[1]
            option = self.resolve_name(raw_name)
            if option is None:
                logger.debug("Ignoring unknown option %s", raw_name)
                continue
            option.set_value(value)
            logger.debug("Set option %s to %s", option.name, value)

    def is_valid_option(self, raw_name: str) -> bool:
        return self.resolve_name(raw_name) is not None

    def get_option_length(self, raw_name: str) -> int:
        """Number of tokens the option consumes, or 0 if it is not recognized."""
        option = self.resolve_name(raw_name)
        return option.get_length() if option is not None else 0

    def check_option(self, setting: Sequence[str]) -> str | None:
        """Validate one ``[name, value]`` pair.

        Returns:
            A human-readable error message, or None if the setting is valid.
        """
        raw_name = setting[0]
        option = self.resolve_name(raw_name)
        if option is None:
            return f"Invalid option {raw_name}"
        value = setting[1]
        if not option.is_valid_value(value):
            return f"Invalid value {value} for option {raw_name}; valid values are {option.get_valid_values()}"
        return None

    def check_options(self, settings: Iterable[Sequence[str]]) -> list[str]:
        """Validate every pair and collect the error messages in input order."""
        errors = []
        for setting in settings:
            error = self.check_option(setting)
            if error is not None:
                errors.append(error)
        return errors

    # -- typed getters -----------------------------------------------------

    def get_line_type(self) -> LineType:
        return self._enum_value(LINETYPE, LineType.from_option_value)

    def get_dependencies_visibility(self) -> Visibility:
        return self._enum_value(DEPENDENCIES, Visibility.from_option_value)

    def get_package_orientation(self) -> Orientation:
        return self._enum_value(PACKAGE_ORIENTATION, Orientation.from_option_value)

    def resolve(self) -> DiagramConfig:
        """Snapshot the current values as typed settings."""
        return DiagramConfig(
            line_type=self.get_line_type(),
            dependencies_visibility=self.get_dependencies_visibility(),
            package_orientation=self.get_package_orientation(),
        )

    def _enum_value(self, name: str, lookup: Callable[[str], _E | None]) -> _E:
        value = self._options[name].value
        variant = lookup(value)
        if variant is None:
            raise UnmappedOptionValueError(name, value)
        return variant
