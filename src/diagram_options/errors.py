from __future__ import annotations


class DiagramOptionsError(Exception):
    """Base error for the diagram option registry."""


class DuplicateOptionError(DiagramOptionsError, ValueError):
    """Raised when two options are registered under the same name."""


class UnmappedOptionValueError(DiagramOptionsError, RuntimeError):
    """Raised when a stored option value has no enumerated counterpart.

    Values reach the registry unchecked through ``DiagramOptions.set``; callers
    are expected to run them through ``check_option`` first. Hitting this error
    means that step was skipped.
    """

    def __init__(self, option: str, value: str) -> None:
        super().__init__(f"Internal error: value '{value}' of option '{option}' does not map to a known setting")
        self.option = option
        self.value = value
