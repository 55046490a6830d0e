from gridsort.sorting.comparator import compare_rows, make_comparer
from gridsort.sorting.presets import reconcile_presets
from gridsort.sorting.sorters import (
    SORTERS_BY_FIELD_TYPE,
    Sorter,
    boolean_sorter,
    date_sorter,
    numeric_sorter,
    sort_by_field_type,
    string_sorter,
)

__all__ = [
    "SORTERS_BY_FIELD_TYPE",
    "Sorter",
    "boolean_sorter",
    "compare_rows",
    "date_sorter",
    "make_comparer",
    "numeric_sorter",
    "reconcile_presets",
    "sort_by_field_type",
    "string_sorter",
]
