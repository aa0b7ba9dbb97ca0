"""Unit tests for adapter option normalization."""

import pytest

from sqlfacade.config import normalize_options
from sqlfacade.exceptions import ImproperConfigurationError


def test_defaults() -> None:
    assert normalize_options() == {"autoinc_mapping": {}, "use_returning_all": False, "in_memory_cursor": False}


def test_options_are_copied() -> None:
    mapping = {"users": "id"}
    options = normalize_options({"autoinc_mapping": mapping, "in_memory_cursor": True})
    mapping["posts"] = "post_id"
    assert options["autoinc_mapping"] == {"users": "id"}
    assert options["in_memory_cursor"] is True


def test_unknown_option_rejected() -> None:
    with pytest.raises(ImproperConfigurationError, match="inMemoryCursor"):
        normalize_options({"inMemoryCursor": True})


@pytest.mark.parametrize(
    "options",
    [
        {"autoinc_mapping": ["users"]},
        {"autoinc_mapping": {"users": 1}},
        {"use_returning_all": "yes"},
        {"in_memory_cursor": 1},
    ],
)
def test_wrong_types_rejected(options: dict) -> None:
    with pytest.raises(ImproperConfigurationError):
        normalize_options(options)
