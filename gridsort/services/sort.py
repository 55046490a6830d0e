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
import asyncio
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

import anyio
import structlog
from pydantic import ValidationError

from gridsort.events import EventHandler
from gridsort.interfaces import DataView, Grid
from gridsort.schemas.column import Column
from gridsort.schemas.events import RowCountChangedArgs, SortEventArgs
from gridsort.schemas.grid_option import BackendServiceApi, GridOption, as_grid_option
from gridsort.schemas.sorter import CurrentSorters, SortChangedEvent, SortColumn
from gridsort.services.notifier import ChangeNotifier
from gridsort.settings import sort_settings
from gridsort.sorting.comparator import make_comparer
from gridsort.sorting.presets import reconcile_presets
from gridsort.types import SortMode, SortSource
from gridsort.utils.awaitables import resolve_process_result
from gridsort.utils.errors import InvalidGestureEvent, MisconfiguredBackend, error_state_to_dict

logger = structlog.get_logger(__name__)


def normalize_sort_columns(args: Any) -> list[SortColumn]:
    """Bring single and multi column sort gestures into the same shape: a list of sort columns.

    Malformed payloads result in an empty list, which leaves the rows in their current order.
    """
    if args is None:
        return []
    if not isinstance(args, SortEventArgs):
        try:
            args = SortEventArgs.model_validate(args, from_attributes=not isinstance(args, dict))
        except ValidationError as e:
            logger.warning("Ignoring malformed sort event", errors=e.errors(include_url=False))
            return []

    if args.multi_column_sort:
        return list(args.sort_cols)
    return [SortColumn(sort_col=args.sort_col, sort_asc=args.sort_asc)]


class SortService(ABC):
    """Shared state of the local and backend sort services.

    Which kind of sorting a grid uses is decided by the service class that is constructed, see
    `create_sort_service`. A service only ever attaches in its own mode.
    """

    mode: ClassVar[SortMode]

    def __init__(self, notifier: ChangeNotifier | None = None) -> None:
        self._owns_notifier = notifier is None
        self.on_sort_changed = notifier or ChangeNotifier()
        self._current_local_sorters: CurrentSorters = []
        self._event_handler = EventHandler()
        self._grid: Grid | None = None
        self._grid_options: GridOption | None = None

    @abstractmethod
    def get_current_sorters(self) -> CurrentSorters: ...

    def emit_sort_changed(
        self, source: SortSource, backend_api: BackendServiceApi | None = None
    ) -> SortChangedEvent | None:
        """Tell subscribers, like pagination, that the sorting changed.

        For a remote sort the backend service is asked for its current sorters, since a stateful service may
        report something else than the gesture that was just submitted.
        """
        if source == SortSource.REMOTE:
            if backend_api is None and self._grid_options is not None:
                backend_api = self._grid_options.backend_api
            if backend_api is None:
                return None
            get_current_sorters = getattr(backend_api.service, "get_current_sorters", None)
            current_sorters = get_current_sorters() if callable(get_current_sorters) else []
            return self.on_sort_changed.emit(current_sorters or [], SortSource.REMOTE)

        return self.on_sort_changed.emit(list(self._current_local_sorters), SortSource.LOCAL)

    def dispose(self) -> None:
        self._event_handler.unsubscribe_all()
        if self._owns_notifier:
            self.on_sort_changed.unsubscribe_all()
        logger.debug("Disposed sort service", mode=self.mode)


class LocalSortService(SortService):
    """Sorts the rows of the data view in memory whenever the grid asks for a sort."""

    mode = SortMode.LOCAL

    def __init__(self, notifier: ChangeNotifier | None = None) -> None:
        super().__init__(notifier)
        self._data_view: DataView | None = None
        self._column_definitions: list[Column] = []
        self._last_row_count = 0

    def attach(
        self, grid: Grid, grid_options: GridOption | dict | None, data_view: DataView, column_definitions: Sequence[Column]
    ) -> None:
        self._event_handler.unsubscribe_all()
        self._grid = grid
        self._grid_options = as_grid_option(grid_options)
        self._data_view = data_view
        self._column_definitions = list(column_definitions)
        self._current_local_sorters = []
        self._last_row_count = 0

        self._event_handler.subscribe(grid.on_sort, self.on_local_sort)
        self._event_handler.subscribe(data_view.on_row_count_changed, self.on_row_count_changed)
        logger.info("Attached local sort", columns=len(self._column_definitions))

    def get_current_sorters(self) -> CurrentSorters:
        return list(self._current_local_sorters)

    def get_current_local_sorters(self) -> CurrentSorters:
        return self.get_current_sorters()

    def on_local_sort(self, event: Any, args: SortEventArgs | dict | None) -> None:
        sort_columns = normalize_sort_columns(args)

        self._current_local_sorters = []
        for sort_column in sort_columns:
            if current_sorter := sort_column.to_current_sorter():
                self._current_local_sorters.append(current_sorter)

        logger.debug("Local sort", sorters=[s.model_dump() for s in self._current_local_sorters])
        self.on_local_sort_changed(self._grid, self._data_view, sort_columns)
        self.emit_sort_changed(SortSource.LOCAL)

    def on_row_count_changed(self, event: Any, args: RowCountChangedArgs | dict | None) -> None:
        if isinstance(args, dict):
            try:
                args = RowCountChangedArgs.model_validate(args)
            except ValidationError as e:
                logger.warning("Ignoring malformed row count event", errors=e.errors(include_url=False))
                return
        current = getattr(args, "current", 0) or 0
        previous = getattr(args, "previous", None)
        if previous is None:
            previous = self._last_row_count
        self._last_row_count = current

        # Rows just arrived, apply the preset sorters once for this load
        if previous == 0 and current > 0:
            self.load_local_presets(self._grid, self._grid_options, self._data_view, self._column_definitions)

    def load_local_presets(
        self,
        grid: Grid | None,
        grid_options: GridOption | dict | None,
        data_view: DataView | None,
        column_definitions: Sequence[Column],
    ) -> list[SortColumn]:
        """Sort the rows on the preset sorters of the grid options, if there are any.

        Args:
            grid: the grid, its sort indicators are updated to reflect the presets
            grid_options: grid options carrying `presets.sorters`
            data_view: the rows to sort
            column_definitions: the grid's columns, their order decides the sort priority

        Returns:
            The sort columns that were applied, empty when no preset matched a column.

        """
        sort_columns = reconcile_presets(column_definitions, as_grid_option(grid_options).preset_sorters)
        if not sort_columns:
            return []

        self._current_local_sorters = [
            current_sorter for sort_column in sort_columns if (current_sorter := sort_column.to_current_sorter())
        ]
        self.on_local_sort_changed(grid, data_view, sort_columns)
        if grid is not None:
            grid.set_sort_columns(sort_columns)
        logger.info("Applied preset sorters", sorters=[s.model_dump() for s in self._current_local_sorters])
        return sort_columns

    def on_local_sort_changed(
        self, grid: Grid | None, data_view: DataView | None, sort_columns: Sequence[SortColumn]
    ) -> None:
        if data_view is not None:
            data_view.sort(make_comparer(sort_columns))
        # invalidate only marks the rows dirty, render repaints them
        if grid is not None:
            grid.invalidate()
            grid.render()


class BackendSortService(SortService):
    """Hands sort gestures to a backend service, the rows are never sorted in memory.

    Grids dispatch their sort event synchronously. The gesture checks, the pre process hook, the query and the
    remote broadcast run during that dispatch. The backend round trip then runs as a task on the running event loop,
    or to completion on a fresh loop when none is running.
    """

    mode = SortMode.BACKEND

    def __init__(self, notifier: ChangeNotifier | None = None) -> None:
        super().__init__(notifier)
        self.pending_requests = 0
        self.round_trips: set[asyncio.Task] = set()

    def attach(self, grid: Grid, grid_options: GridOption | dict | None) -> None:
        self._event_handler.unsubscribe_all()
        self._grid = grid
        self._grid_options = as_grid_option(grid_options)
        self._event_handler.subscribe(grid.on_sort, self.on_grid_sort)
        logger.info("Attached backend sort")

    def get_current_sorters(self) -> CurrentSorters:
        backend_api = self._grid_options.backend_api if self._grid_options else None
        get_current_sorters = getattr(backend_api.service, "get_current_sorters", None) if backend_api else None
        return list(get_current_sorters() or []) if callable(get_current_sorters) else []

    def _get_backend_api(self, args: Any) -> BackendServiceApi:
        grid = args.get("grid") if isinstance(args, dict) else getattr(args, "grid", None)
        if grid is None:
            raise InvalidGestureEvent(
                "Something went wrong when handling the backend sort event, "
                'it seems that "args" is not populated correctly',
                details={"args": repr(args)},
            )
        try:
            grid_options = as_grid_option(grid.get_options())
        except ValidationError as e:
            raise MisconfiguredBackend("Grid options could not be read", details=e.errors(include_url=False)) from e

        backend_api = grid_options.backend_api
        if backend_api is None or not backend_api.is_configured:
            raise MisconfiguredBackend('BackendServiceApi requires at least a "process" function and a "service" defined')
        return backend_api

    def _start_backend_sort(self, event: Any, args: Any, backend_api: BackendServiceApi) -> Any:
        if backend_api.pre_process:
            backend_api.pre_process()

        query = backend_api.service.on_sort_changed(event, args)  # type: ignore[union-attr]
        self.emit_sort_changed(SortSource.REMOTE, backend_api)
        return query

    async def _finish_backend_sort(self, backend_api: BackendServiceApi, query: Any) -> Any:
        self.pending_requests += 1
        if self.pending_requests > 1 and sort_settings.SORT_WARN_OVERLAPPING_REQUESTS:
            logger.warning("Backend sort started while an earlier one is still pending", pending=self.pending_requests)
        try:
            process_result = await resolve_process_result(backend_api.process(query))  # type: ignore[misc]
        finally:
            self.pending_requests -= 1

        # internal post process updates the dataset and pagination, post process is the caller's callback
        if process_result and backend_api.internal_post_process:
            backend_api.internal_post_process(process_result)
        if backend_api.post_process:
            backend_api.post_process(process_result)
        return process_result

    def on_grid_sort(self, event: Any, args: SortEventArgs | dict | None) -> Any:
        """Handle the sort event as the grid dispatches it.

        Returns:
            The task running the backend round trip, or the process result when no event loop is running.

        Raises:
            InvalidGestureEvent: the event has no payload or no grid
            MisconfiguredBackend: the grid options have no usable backend service api

        """
        backend_api = self._get_backend_api(args)
        query = self._start_backend_sort(event, args, backend_api)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return anyio.run(self._finish_backend_sort, backend_api, query)

        task = loop.create_task(self._finish_backend_sort(backend_api, query))
        self.round_trips.add(task)
        task.add_done_callback(self._round_trip_done)
        return task

    def _round_trip_done(self, task: asyncio.Task) -> None:
        self.round_trips.discard(task)
        if task.cancelled():
            logger.debug("Backend sort cancelled")
        elif error := task.exception():
            logger.error("Backend sort failed", error=error_state_to_dict(error))

    async def on_backend_sort(self, event: Any, args: SortEventArgs | dict | None) -> Any:
        """Let the backend service sort, then feed the result to the post process hooks.

        The remote sort change is broadcast as soon as the query is built, before the backend answers.
        Overlapping calls are not serialized: every call runs its own round trip and its own hooks.

        Raises:
            InvalidGestureEvent: the event has no payload or no grid
            MisconfiguredBackend: the grid options have no usable backend service api

        """
        backend_api = self._get_backend_api(args)
        query = self._start_backend_sort(event, args, backend_api)
        return await self._finish_backend_sort(backend_api, query)

    def sync_on_backend_sort(self, event: Any, args: SortEventArgs | dict | None) -> Any:
        return anyio.run(self.on_backend_sort, event, args)


SORT_SERVICES_BY_MODE: dict[SortMode, type[LocalSortService] | type[BackendSortService]] = {
    SortMode.LOCAL: LocalSortService,
    SortMode.BACKEND: BackendSortService,
}


def create_sort_service(
    mode: SortMode | str, notifier: ChangeNotifier | None = None
) -> LocalSortService | BackendSortService:
    service_class = SORT_SERVICES_BY_MODE[SortMode(mode)]
    return service_class(notifier)
