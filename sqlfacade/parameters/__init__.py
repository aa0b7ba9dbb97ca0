"""Parameter handling for SQLFacade."""

from sqlfacade.parameters.core import detect_parameter_style, merge_parameters, to_positional_parameters
from sqlfacade.parameters.types import ParameterStyle

__all__ = ("ParameterStyle", "detect_parameter_style", "merge_parameters", "to_positional_parameters")
