from dataclasses import dataclass

from ..utils.constants import MIN_INDENTATION


@dataclass(frozen=True)
class Indentation:
    """Number of spaces that make up one nesting level of a YAML document."""

    spaces: int

    def __post_init__(self):
        if self.spaces < MIN_INDENTATION:
            raise ValueError(
                f"Indentation must be at least {MIN_INDENTATION} space, got {self.spaces}."
            )
