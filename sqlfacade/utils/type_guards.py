"""Type guard functions for runtime type checking in SQLFacade.

These checks help the type checker narrow parameter sets and rows without
scattering ``isinstance`` chains across the driver code.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from sqlfacade.typing import NamedParameters, PositionalParameters

__all__ = (
    "is_named_parameters",
    "is_positional_parameters",
)


def is_positional_parameters(obj: Any) -> "TypeGuard[PositionalParameters]":
    """Check if an object is an ordered parameter set.

    Strings and bytes are sequences too but never count as parameter sets.

    Args:
        obj: The object to check

    Returns:
        True if the object is a list, tuple or other non-text sequence
    """
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def is_named_parameters(obj: Any) -> "TypeGuard[NamedParameters]":
    """Check if an object is a named parameter set.

    Args:
        obj: The object to check

    Returns:
        True if the object is a mapping
    """
    return isinstance(obj, Mapping)
