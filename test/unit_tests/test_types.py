import pytest

from gridsort import types
from gridsort.types import SortDirection


def test_types_exports_only_sort_types():
    assert sorted(types.__all__) == [
        "Comparer",
        "ErrorDict",
        "FieldType",
        "Row",
        "SortDirection",
        "SortMode",
        "SortSource",
    ]
    assert not hasattr(types, "ErrorState")


@pytest.mark.parametrize("value", ["asc", "ASC", "Asc", SortDirection.ASC])
def test_sort_direction_from_value(value):
    assert SortDirection.from_value(value) is SortDirection.ASC


def test_sort_direction_from_unknown_value():
    with pytest.raises(ValueError):
        SortDirection.from_value("up")
