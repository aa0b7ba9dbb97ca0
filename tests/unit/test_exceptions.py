from sqlfacade.exceptions import (
    AmbiguousOrMissingRowError,
    FeatureDisabledError,
    ImproperConfigurationError,
    InsertedIdError,
    NamedParametersNotImplementedError,
    ParameterStyleMismatchError,
    SQLFacadeError,
    UnknownColumnError,
    UnresolvedInsertedIdError,
)


def test_exception_hierarchy() -> None:
    assert issubclass(AmbiguousOrMissingRowError, InsertedIdError)
    assert issubclass(UnknownColumnError, InsertedIdError)
    assert issubclass(UnresolvedInsertedIdError, InsertedIdError)
    assert issubclass(InsertedIdError, SQLFacadeError)
    assert issubclass(FeatureDisabledError, ImproperConfigurationError)
    assert issubclass(NamedParametersNotImplementedError, NotImplementedError)
    assert issubclass(ParameterStyleMismatchError, SQLFacadeError)


def test_missing_row_message_mentions_returning() -> None:
    exc = AmbiguousOrMissingRowError(0)
    assert "RETURNING" in str(exc)
    assert exc.row_count == 0


def test_multiple_rows_message_states_count() -> None:
    assert "(3)" in str(AmbiguousOrMissingRowError(3))


def test_unknown_column_lists_available_columns() -> None:
    exc = UnknownColumnError("uid", ["id", "name"])
    assert "'uid'" in str(exc)
    assert "id, name" in str(exc)
    assert exc.available == ("id", "name")


def test_feature_disabled_names_option() -> None:
    exc = FeatureDisabledError("Cursor", "in_memory_cursor")
    assert "in_memory_cursor" in str(exc)
    assert exc.option == "in_memory_cursor"


def test_repr_includes_detail() -> None:
    assert repr(SQLFacadeError("boom")) == "SQLFacadeError - boom"
    assert str(SQLFacadeError()) == ""


def test_exception_chaining() -> None:
    try:
        try:
            raise KeyError("id")
        except KeyError as e:
            raise UnresolvedInsertedIdError(["name"]) from e
    except UnresolvedInsertedIdError as exc:
        assert isinstance(exc.__cause__, KeyError)
