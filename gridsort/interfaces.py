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

"""Contracts of the collaborators the sort services talk to.

The grid widget, its data view and the backend service all live outside this package. The sort services
only rely on the narrow capabilities below.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from gridsort.schemas.sorter import CurrentSorters, SortColumn
from gridsort.types import Comparer

if TYPE_CHECKING:
    from gridsort.schemas.grid_option import GridOption

EventCallback = Callable[..., Any]


@runtime_checkable
class EventChannel(Protocol):
    def subscribe(self, handler: EventCallback) -> None: ...

    def unsubscribe(self, handler: EventCallback | None = None) -> None: ...


@runtime_checkable
class Grid(Protocol):
    on_sort: EventChannel

    def get_options(self) -> "GridOption | dict | None": ...

    def set_sort_columns(self, sort_columns: Sequence[SortColumn]) -> None: ...

    def invalidate(self) -> None: ...

    def render(self) -> None: ...


@runtime_checkable
class DataView(Protocol):
    on_row_count_changed: EventChannel

    def sort(self, comparer: Comparer) -> None: ...


@runtime_checkable
class BackendService(Protocol):
    def on_sort_changed(self, event: Any, args: Any) -> Any: ...

    def get_current_sorters(self) -> CurrentSorters: ...
