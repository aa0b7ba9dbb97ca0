from collections.abc import Mapping, Sequence
from typing import Any, Union

from typing_extensions import TypeAlias

__all__ = (
    "DictRow",
    "NamedParameters",
    "PositionalParameters",
    "SqlParameters",
)


DictRow: TypeAlias = "dict[str, Any]"
"""Type alias for result rows.

Keys follow the column order reported by the engine.
"""
PositionalParameters: TypeAlias = "Union[list[Any], tuple[Any, ...]]"
"""Type alias for positional parameters bound to ``$1``, ``$2``, ... placeholders."""
NamedParameters: TypeAlias = "Mapping[str, Any]"
"""Type alias for named parameters."""
SqlParameters: TypeAlias = "Union[Sequence[Any], Mapping[str, Any]]"
"""Type alias for statement parameters.

Represents:
- :type:`list[Any]` | :type:`tuple[Any, ...]`
- :type:`Mapping[str, Any]`
"""
