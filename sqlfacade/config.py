from collections.abc import Mapping
from typing import Any, Optional, TypedDict

from typing_extensions import NotRequired

from sqlfacade.exceptions import ImproperConfigurationError
from sqlfacade.utils.logging import get_logger

__all__ = ("AdapterOptions", "normalize_options")

logger = get_logger("config")


class AdapterOptions(TypedDict, total=False):
    """TypedDict for the options that shape how statements are adapted to the engine.

    Attributes:
        autoinc_mapping: Table name to identifier column, appended as ``RETURNING <column>`` on inserts.
        use_returning_all: Append ``RETURNING *`` to inserts into tables missing from ``autoinc_mapping``.
        in_memory_cursor: Enable ``cursor()`` as an iterator over the fully fetched result.
    """

    autoinc_mapping: NotRequired[Mapping[str, str]]
    use_returning_all: NotRequired[bool]
    in_memory_cursor: NotRequired[bool]


_BOOL_OPTIONS = ("use_returning_all", "in_memory_cursor")


def normalize_options(options: "Optional[Mapping[str, Any]]" = None) -> AdapterOptions:
    """Validate adapter options and return a detached copy.

    Args:
        options: Raw options, typically an :class:`AdapterOptions` dict.

    Raises:
        ImproperConfigurationError: On unknown keys or values of the wrong type.

    Returns:
        Normalized options with every key present.
    """
    raw = dict(options or {})
    unknown = set(raw) - set(AdapterOptions.__annotations__)
    if unknown:
        msg = f"Unknown adapter options: {', '.join(sorted(unknown))}"
        raise ImproperConfigurationError(msg)

    mapping = raw.get("autoinc_mapping") or {}
    if not isinstance(mapping, Mapping) or not all(
        isinstance(table, str) and isinstance(column, str) for table, column in mapping.items()
    ):
        msg = "Option 'autoinc_mapping' must map table names to column names"
        raise ImproperConfigurationError(msg)

    for name in _BOOL_OPTIONS:
        if not isinstance(raw.get(name, False), bool):
            msg = f"Option {name!r} must be a boolean"
            raise ImproperConfigurationError(msg)

    normalized = AdapterOptions(
        autoinc_mapping=dict(mapping),
        use_returning_all=raw.get("use_returning_all", False),
        in_memory_cursor=raw.get("in_memory_cursor", False),
    )
    logger.debug(
        "Adapter options: %d autoinc mappings, use_returning_all=%s, in_memory_cursor=%s",
        len(normalized["autoinc_mapping"]),
        normalized["use_returning_all"],
        normalized["in_memory_cursor"],
    )
    return normalized
