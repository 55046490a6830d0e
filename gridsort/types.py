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
from collections.abc import Callable, Mapping
from typing import Any

from pydantic_forms.types import strEnum

__all__ = [
    "Comparer",
    "ErrorDict",
    "FieldType",
    "Row",
    "SortDirection",
    "SortMode",
    "SortSource",
]


class SortDirection(strEnum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_value(cls, value: "str | SortDirection") -> "SortDirection":
        """Return the direction for a case-insensitive value.

        >>> SortDirection.from_value("desc") is SortDirection.DESC
        True
        >>> SortDirection.from_value("Asc") is SortDirection.ASC
        True
        """
        if isinstance(value, cls):
            return value
        return cls(value.upper())


class FieldType(strEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    DATE_ISO = "dateIso"
    DATE_UTC = "dateUtc"
    DATE_US = "dateUs"
    DATE_US_SHORT = "dateUsShort"


class SortSource(strEnum):
    LOCAL = "local"
    REMOTE = "remote"


class SortMode(strEnum):
    LOCAL = "local"
    BACKEND = "backend"


# Rows are untyped keyed records, only ever read through the resolved sort field
Row = Mapping[str, Any]
Comparer = Callable[[Row, Row], int]

# An ErrorDict should have the following keys:
# error: str  # A message describing the error
# class: str[Optional]  # The exception class name (type)
# details: Optional  # Extra information attached to the error
# traceback: Optional[str]  # A python traceback as a string formatted by nwastdlib.ex.show_ex
ErrorDict = dict[str, Any]
