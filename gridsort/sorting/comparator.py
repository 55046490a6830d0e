# Copyright 2019-2025 SURF.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from collections.abc import Iterable, Sequence

from gridsort.schemas.column import Column
from gridsort.schemas.sorter import SortColumn
from gridsort.settings import sort_settings
from gridsort.sorting.sorters import sort_by_field_type
from gridsort.types import Comparer, Row


def _compare_on_column(row1: Row, row2: Row, column: Column, sort_asc: bool) -> int:
    sort_direction = 1 if sort_asc else -1
    sort_field = column.sort_field
    field_type = column.type or sort_settings.SORT_DEFAULT_FIELD_TYPE
    return sort_by_field_type(row1.get(sort_field), row2.get(sort_field), field_type, sort_direction)


def compare_rows(row1: Row, row2: Row, sort_columns: Iterable[SortColumn], tie_break: bool | None = None) -> int:
    """Compare two rows on the given sort columns.

    By default only the first sort column bound to a real column decides the order, even when it considers
    both rows equal. Pass `tie_break=True` (or enable `SORT_MULTI_COLUMN_TIE_BREAK`) to fall through to the
    next sort column on ties.

    Args:
        row1: left row
        row2: right row
        sort_columns: sort columns in priority order, entries without a column are skipped
        tie_break: cascade through ties, defaults to the `SORT_MULTI_COLUMN_TIE_BREAK` setting

    Returns:
        -1, 0 or 1

    """
    if tie_break is None:
        tie_break = sort_settings.SORT_MULTI_COLUMN_TIE_BREAK

    for sort_column in sort_columns:
        if sort_column is None or sort_column.sort_col is None:
            continue
        result = _compare_on_column(row1, row2, sort_column.sort_col, sort_column.sort_asc)
        if result or not tie_break:
            return result
    return 0


def make_comparer(sort_columns: Sequence[SortColumn], tie_break: bool | None = None) -> Comparer:
    """Bind the sort columns into a two argument compare function, usable with `functools.cmp_to_key`."""
    frozen = list(sort_columns)

    def comparer(row1: Row, row2: Row) -> int:
        return compare_rows(row1, row2, frozen, tie_break=tie_break)

    return comparer
