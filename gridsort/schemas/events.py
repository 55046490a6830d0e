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

from pydantic import Field

from gridsort.schemas.base import SortBaseModel
from gridsort.schemas.column import Column
from gridsort.schemas.sorter import SortColumn


class SortEventArgs(SortBaseModel):
    """Payload of the grid's sort event.

    A single column sort fills `sort_col`/`sort_asc`, a multi column sort sets `multi_column_sort` and fills
    `sort_cols` in priority order.
    """

    grid: Any = None
    multi_column_sort: bool = False
    sort_col: Column | None = None
    sort_asc: bool = True
    sort_cols: list[SortColumn] = Field(default_factory=list)


class RowCountChangedArgs(SortBaseModel):
    previous: int | None = None
    current: int = 0
