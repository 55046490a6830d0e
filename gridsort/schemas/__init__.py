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

from gridsort.schemas.column import Column, ColumnDefinitions
from gridsort.schemas.events import RowCountChangedArgs, SortEventArgs
from gridsort.schemas.grid_option import BackendServiceApi, GridOption, GridPresets, as_grid_option
from gridsort.schemas.sorter import CurrentSorter, CurrentSorters, SortChangedEvent, SortColumn

__all__ = [
    "BackendServiceApi",
    "Column",
    "ColumnDefinitions",
    "CurrentSorter",
    "CurrentSorters",
    "GridOption",
    "GridPresets",
    "RowCountChangedArgs",
    "SortChangedEvent",
    "SortColumn",
    "SortEventArgs",
    "as_grid_option",
]
