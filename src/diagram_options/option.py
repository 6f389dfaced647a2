"""A single named diagram option."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DiagramOption:
    """One recognized setting: a name, its legal values, a default and an arity.

    ``length`` is the number of tokens the option consumes on the command line,
    counting the flag itself. Writes through ``set_value`` are not validated;
    use ``is_valid_value`` first.
    """

    name: str
    valid_values: tuple[str, ...]
    default: str
    length: int
    value: str = field(init=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Option name must not be empty")
        if not self.valid_values:
            raise ValueError(f"Option '{self.name}' declares no valid values")
        if self.default not in self.valid_values:
            raise ValueError(
                f"Default '{self.default}' for option '{self.name}' is not one of {self.get_valid_values()}"
            )
        if self.length < 1:
            raise ValueError(f"Option '{self.name}' must consume at least one token, got {self.length}")
        self.value = self.default

    def is_valid_value(self, value: str) -> bool:
        return value in self.valid_values

    def set_value(self, value: str) -> None:
        self.value = value

    def get_value(self) -> str:
        return self.value

    def get_length(self) -> int:
        return self.length

    def get_valid_values(self) -> str:
        """Return the legal values joined by commas, in declaration order."""
        return ",".join(self.valid_values)
