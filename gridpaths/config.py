"""Configuration classes for gridpaths components."""

from dataclasses import dataclass
from typing import Optional

from gridpaths.types.base import PreconditionViolation


def validate_identity_separator(separator: str) -> str:
    """Return ``separator`` if it cannot be confused with a ``row,col`` cell.

    Raises:
        ValueError: If the separator is empty or holds a digit or a comma.
    """
    if not isinstance(separator, str) or not separator:
        raise ValueError("identity_separator must be a non-empty string")
    if any(ch.isdigit() or ch == "," for ch in separator):
        raise ValueError(
            f"identity_separator must not contain digits or commas, got {separator!r}"
        )
    return separator


@dataclass
class SearchConfig:
    """Defaults and limits for path searches and grid loading."""

    # Number of paths requested when the caller does not say
    default_max_paths: int = 5

    # Separator placed between cells in a canonical path identity
    identity_separator: str = "->"

    # Run PathRepository.check_invariants() after every mutation
    check_invariants: bool = False

    # Largest grid (rows * cols) the loaders accept
    max_grid_cells: int = 1_000_000

    def __post_init__(self) -> None:
        validate_identity_separator(self.identity_separator)

    def resolve_max_paths(self, value: Optional[int]) -> int:
        """Return ``value`` or the default, validated to be at least 1."""
        resolved = self.default_max_paths if value is None else value
        if isinstance(resolved, bool) or not isinstance(resolved, int):
            raise PreconditionViolation(
                f"max_paths must be an integer, got {type(resolved).__name__}"
            )
        if resolved < 1:
            raise PreconditionViolation(f"max_paths must be >= 1, got {resolved}")
        return resolved


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
