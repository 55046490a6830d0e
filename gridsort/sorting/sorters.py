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

"""Value sorters per column field type.

Every sorter takes two cell values and a sort direction (1 for ascending, -1 for descending) and returns
-1, 0 or 1. Missing values (None) always rank lowest, so they come first when sorting ascending and last
when sorting descending.
"""

import math
from collections.abc import Callable
from datetime import date, datetime, time, timezone
from functools import partial
from typing import Any

from gridsort.types import FieldType

Sorter = Callable[[Any, Any, int], int]

DATE_FORMATS_BY_FIELD_TYPE = {
    FieldType.DATE_US: "%m/%d/%Y",
    FieldType.DATE_US_SHORT: "%m/%d/%y",
}


def _position(value1: Any, value2: Any) -> int:
    if value1 == value2:
        return 0
    return -1 if value1 < value2 else 1


def _compare_nullable(value1: Any, value2: Any) -> int:
    if value1 is None and value2 is None:
        return 0
    if value1 is None:
        return -1
    if value2 is None:
        return 1
    return _position(value1, value2)


def string_sorter(value1: Any, value2: Any, sort_direction: int) -> int:
    """Compare values lexicographically, mixed or unorderable types compare on their string form.

    >>> string_sorter("a", "b", 1)
    -1
    >>> string_sorter("a", "b", -1)
    1
    >>> string_sorter(None, "a", 1)
    -1
    """
    if value1 is not None and value2 is not None and type(value1) is not type(value2):
        value1, value2 = str(value1), str(value2)
    try:
        position = _compare_nullable(value1, value2)
    except TypeError:
        position = _compare_nullable(str(value1), str(value2))
    return sort_direction * position


def to_number(value: Any) -> float:
    """Convert a cell value to a float, anything that is not a number becomes negative infinity.

    >>> to_number("4.5")
    4.5
    >>> to_number("")
    -inf
    >>> to_number(None)
    -inf
    """
    if value is None or value == "":
        return -math.inf
    try:
        number = float(value)
    except (TypeError, ValueError):
        return -math.inf
    return -math.inf if math.isnan(number) else number


def numeric_sorter(value1: Any, value2: Any, sort_direction: int) -> int:
    return sort_direction * _position(to_number(value1), to_number(value2))


def to_boolean(value: Any) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        return None
    if isinstance(value, int | float):
        return bool(value)
    return None


def boolean_sorter(value1: Any, value2: Any, sort_direction: int) -> int:
    return sort_direction * _compare_nullable(to_boolean(value1), to_boolean(value2))


def to_datetime(value: Any, field_type: FieldType = FieldType.DATE) -> datetime | None:
    """Parse a cell value into a naive UTC datetime, None when it can't be parsed.

    >>> to_datetime("12/31/2020", FieldType.DATE_US)
    datetime.datetime(2020, 12, 31, 0, 0)
    >>> to_datetime("2020-12-31", FieldType.DATE_ISO)
    datetime.datetime(2020, 12, 31, 0, 0)
    >>> to_datetime("not a date") is None
    True
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value:
        date_format = DATE_FORMATS_BY_FIELD_TYPE.get(field_type)
        try:
            parsed = datetime.strptime(value, date_format) if date_format else datetime.fromisoformat(value)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def date_sorter(value1: Any, value2: Any, sort_direction: int, field_type: FieldType = FieldType.DATE) -> int:
    return sort_direction * _compare_nullable(to_datetime(value1, field_type), to_datetime(value2, field_type))


SORTERS_BY_FIELD_TYPE: dict[FieldType, Sorter] = {
    FieldType.STRING: string_sorter,
    FieldType.NUMBER: numeric_sorter,
    FieldType.BOOLEAN: boolean_sorter,
    FieldType.DATE: partial(date_sorter, field_type=FieldType.DATE),
    FieldType.DATE_ISO: partial(date_sorter, field_type=FieldType.DATE_ISO),
    FieldType.DATE_UTC: partial(date_sorter, field_type=FieldType.DATE_UTC),
    FieldType.DATE_US: partial(date_sorter, field_type=FieldType.DATE_US),
    FieldType.DATE_US_SHORT: partial(date_sorter, field_type=FieldType.DATE_US_SHORT),
}


def sort_by_field_type(value1: Any, value2: Any, field_type: FieldType, sort_direction: int) -> int:
    sorter = SORTERS_BY_FIELD_TYPE.get(field_type, string_sorter)
    return sorter(value1, value2, sort_direction)
