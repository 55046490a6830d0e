from functools import cmp_to_key

import pytest

from gridsort.events import Event
from gridsort.schemas import BackendServiceApi, Column, CurrentSorter, GridOption, RowCountChangedArgs, SortColumn
from gridsort.services import BackendSortService, ChangeNotifier, LocalSortService
from gridsort.types import FieldType


class FakeGrid:
    """Stand-in for a grid widget, records the calls the sort services make."""

    def __init__(self, options: GridOption | dict | None = None) -> None:
        self.on_sort = Event("onSort")
        self.options = options if options is not None else GridOption()
        self.sort_columns: list = []
        self.calls: list[str] = []

    def get_options(self):
        return self.options

    def set_sort_columns(self, sort_columns):
        self.sort_columns = list(sort_columns)
        self.calls.append("set_sort_columns")

    def invalidate(self):
        self.calls.append("invalidate")

    def render(self):
        self.calls.append("render")


class FakeDataView:
    def __init__(self, rows: list[dict] | None = None) -> None:
        self.on_row_count_changed = Event("onRowCountChanged")
        self.rows: list[dict] = list(rows or [])
        self.sort_calls = 0

    def sort(self, comparer):
        self.sort_calls += 1
        self.rows.sort(key=cmp_to_key(comparer))

    def set_items(self, rows: list[dict]) -> None:
        previous = len(self.rows)
        self.rows = list(rows)
        if previous != len(self.rows):
            self.on_row_count_changed.notify(None, RowCountChangedArgs(previous=previous, current=len(self.rows)))


class FakeBackendService:
    def __init__(self) -> None:
        self.current_sorters: list[CurrentSorter] = []
        self.queries: list[str] = []

    def on_sort_changed(self, event, args):
        if args.multi_column_sort:
            sort_cols = args.sort_cols
        else:
            sort_cols = [SortColumn(sort_col=args.sort_col, sort_asc=args.sort_asc)]
        self.current_sorters = [
            CurrentSorter(column_id=sort_col.sort_col.id, direction="ASC" if sort_col.sort_asc else "DESC")
            for sort_col in sort_cols
            if sort_col.sort_col
        ]
        query = "sort:" + ",".join(f"{s.column_id}:{s.direction.value}" for s in self.current_sorters)
        self.queries.append(query)
        return query

    def get_current_sorters(self):
        return self.current_sorters


@pytest.fixture
def columns() -> list[Column]:
    return [
        Column(id="name", field="name"),
        Column(id="age", field="age", type=FieldType.NUMBER),
        Column(id="joined", field="joined", type=FieldType.DATE_ISO),
    ]


@pytest.fixture
def rows() -> list[dict]:
    return [
        {"name": "Carol", "age": 41, "joined": "2019-03-01"},
        {"name": "alice", "age": 5, "joined": "2021-07-15"},
        {"name": "Bob", "age": 33, "joined": "2015-11-30"},
    ]


@pytest.fixture
def make_grid():
    return FakeGrid


@pytest.fixture
def grid() -> FakeGrid:
    return FakeGrid()


@pytest.fixture
def make_data_view():
    return FakeDataView


@pytest.fixture
def data_view(rows) -> FakeDataView:
    return FakeDataView(rows)


@pytest.fixture
def notifier() -> ChangeNotifier:
    return ChangeNotifier()


@pytest.fixture
def local_sort_service(grid, data_view, columns, notifier) -> LocalSortService:
    service = LocalSortService(notifier)
    service.attach(grid, grid.get_options(), data_view, columns)
    yield service
    service.dispose()


@pytest.fixture
def backend_service() -> FakeBackendService:
    return FakeBackendService()


@pytest.fixture
def backend_calls() -> list[tuple]:
    return []


@pytest.fixture
def backend_api(backend_service, backend_calls) -> BackendServiceApi:
    async def process(query):
        backend_calls.append(("process", query))
        return {"query": query, "rows": []}

    return BackendServiceApi(
        service=backend_service,
        process=process,
        pre_process=lambda: backend_calls.append(("pre_process",)),
        internal_post_process=lambda result: backend_calls.append(("internal_post_process", result)),
        post_process=lambda result: backend_calls.append(("post_process", result)),
    )


@pytest.fixture
def backend_grid(backend_api) -> FakeGrid:
    return FakeGrid(GridOption(backend_service_api=backend_api))


@pytest.fixture
def backend_sort_service(backend_grid, notifier) -> BackendSortService:
    service = BackendSortService(notifier)
    service.attach(backend_grid, backend_grid.get_options())
    yield service
    service.dispose()
