"""Merging and wire conversion of statement parameters.

A parameter set is either positional (a list or tuple matched to ``$1``,
``$2``, ...) or named (a mapping). The two styles never mix within one set.
"""

from typing import TYPE_CHECKING, Any, Optional

from sqlfacade.exceptions import NamedParametersNotImplementedError, ParameterStyleMismatchError
from sqlfacade.parameters.types import ParameterStyle
from sqlfacade.utils.type_guards import is_named_parameters, is_positional_parameters

if TYPE_CHECKING:
    from sqlfacade.typing import SqlParameters

__all__ = ("detect_parameter_style", "merge_parameters", "to_positional_parameters")


def detect_parameter_style(params: "SqlParameters") -> ParameterStyle:
    """Return the style of a parameter set.

    Raises:
        TypeError: If ``params`` is neither a sequence nor a mapping.
    """
    if is_named_parameters(params):
        return ParameterStyle.NAMED
    if is_positional_parameters(params):
        return ParameterStyle.POSITIONAL
    msg = f"Unsupported parameter set type: {type(params).__name__}"
    raise TypeError(msg)


def merge_parameters(
    base: "Optional[SqlParameters]", override: "Optional[SqlParameters]"
) -> "Optional[SqlParameters]":
    """Merge two parameter sets, ``override`` taking precedence.

    Positional sets are merged index by index: every position present in
    ``override`` replaces the one in ``base``, other positions are kept. Named sets
    are merged as a union.

    Args:
        base: Parameters bound beforehand, or None.
        override: Call-site parameters, or None.

    Raises:
        ParameterStyleMismatchError: If one set is positional and the other named.

    Returns:
        The merged parameters, or whichever side is present when the other is None.
    """
    if base is None:
        return override
    if override is None:
        return base
    style = detect_parameter_style(base)
    if style is not detect_parameter_style(override):
        raise ParameterStyleMismatchError
    if style is ParameterStyle.POSITIONAL:
        merged: list[Any] = list(base)  # type: ignore[arg-type]
        for index, value in enumerate(override):  # type: ignore[arg-type]
            if index < len(merged):
                merged[index] = value
            else:
                merged.append(value)
        return merged
    return {**base, **override}  # type: ignore[dict-item]


def to_positional_parameters(params: "Optional[SqlParameters]") -> "Optional[list[Any]]":
    """Convert parameters to the positional values sent over the wire.

    Raises:
        NamedParametersNotImplementedError: For named parameter sets.
    """
    if params is None:
        return None
    if detect_parameter_style(params) is ParameterStyle.NAMED:
        raise NamedParametersNotImplementedError
    return list(params)  # type: ignore[arg-type]
