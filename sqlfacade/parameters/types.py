"""Core parameter types used throughout SQLFacade."""

from enum import Enum

__all__ = ("ParameterStyle",)


class ParameterStyle(str, Enum):
    """Parameter set style enumeration with string values."""

    POSITIONAL = "positional"
    NAMED = "named"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value
