"""Named constants and run settings for the elimination calculator."""

from __future__ import annotations

from dataclasses import dataclass

# Absolute tolerance for "is effectively zero" and "is effectively one".
EPSILON = 1e-15

# Width of a single rendered matrix cell.
FIELD_WIDTH = 25

# Number of fractional digits printed for every element.
PRECISION = 10

EMPTY_NOTICE = "The matrix is empty!"

BANNER_LINES = (
    "*************************************************************",
    "*                                                           *",
    "*   Welcome to the Gauss-Jordan Elimination Calculator!     *",
    "*                                                           *",
    "*************************************************************",
)


@dataclass(frozen=True)
class Settings:
    """Options threaded from the command line into the core."""

    epsilon: float = EPSILON
    field_width: int = FIELD_WIDTH
    progress: bool = False

    def __post_init__(self) -> None:
        if not self.epsilon >= 0.0:
            raise ValueError("epsilon must be non-negative")
        if self.field_width <= 0:
            raise ValueError("field width must be positive")

    @classmethod
    def from_args(cls, args: object) -> "Settings":
        return cls(
            epsilon=float(getattr(args, "epsilon", EPSILON)),
            field_width=int(getattr(args, "width", FIELD_WIDTH)),
            progress=bool(getattr(args, "progress", False)),
        )
