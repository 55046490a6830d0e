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
from typing import Any

from pydantic import Field, field_validator

from gridsort.schemas.base import SortBaseModel
from gridsort.schemas.column import Column
from gridsort.types import SortDirection, SortSource


class CurrentSorter(SortBaseModel):
    column_id: str
    direction: SortDirection

    @field_validator("column_id", mode="before")
    @classmethod
    def stringify_column_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @field_validator("direction", mode="before")
    @classmethod
    def normalize_direction(cls, value: Any) -> Any:
        return SortDirection.from_value(value) if isinstance(value, str) else value

    @property
    def sort_asc(self) -> bool:
        return self.direction == SortDirection.ASC


CurrentSorters = list[CurrentSorter]


class SortColumn(SortBaseModel):
    """One column of a sort gesture, or of a reconciled preset."""

    column_id: str | int | None = None
    sort_col: Column | None = None
    sort_asc: bool = True

    def to_current_sorter(self) -> CurrentSorter | None:
        if self.sort_col is None:
            return None
        return CurrentSorter(
            column_id=self.sort_col.id,
            direction=SortDirection.ASC if self.sort_asc else SortDirection.DESC,
        )


class SortChangedEvent(SortBaseModel):
    source: SortSource
    sorters: CurrentSorters = Field(default_factory=list)
