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

from gridsort.schemas.base import SortBaseModel
from gridsort.types import FieldType


class Column(SortBaseModel):
    id: str | int
    field: str
    name: str | None = None
    query_field: str | None = None
    query_field_filter: str | None = None
    type: FieldType | None = None
    sortable: bool = True

    @property
    def sort_field(self) -> str:
        """Row key used when sorting on this column: the query field wins over the filter field and the base field."""
        return self.query_field or self.query_field_filter or self.field


ColumnDefinitions = list[Column]
