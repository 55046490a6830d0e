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

"""Sort coordination for data grids: in-memory sorting or sorting delegated to a backend service."""

__version__ = "1.0.0"

from gridsort.schemas import Column, CurrentSorter, GridOption, SortChangedEvent, SortColumn, SortEventArgs
from gridsort.services import BackendSortService, ChangeNotifier, LocalSortService, create_sort_service
from gridsort.settings import sort_settings
from gridsort.types import FieldType, SortDirection, SortMode, SortSource

__all__ = [
    "BackendSortService",
    "ChangeNotifier",
    "Column",
    "CurrentSorter",
    "FieldType",
    "GridOption",
    "LocalSortService",
    "SortChangedEvent",
    "SortColumn",
    "SortDirection",
    "SortEventArgs",
    "SortMode",
    "SortSource",
    "create_sort_service",
    "sort_settings",
]
