from types import SimpleNamespace
from unittest import mock

import pytest

from gridsort.schemas import CurrentSorter, GridOption, GridPresets, RowCountChangedArgs, SortColumn, SortEventArgs
from gridsort.services import LocalSortService
from gridsort.types import SortDirection, SortSource


def names(data_view):
    return [row["name"] for row in data_view.rows]


def test_single_column_sort(local_sort_service, grid, data_view, columns, notifier):
    callback = mock.Mock()
    notifier.subscribe(callback)

    grid.on_sort.notify(None, SortEventArgs(grid=grid, sort_col=columns[1], sort_asc=True))

    assert [row["age"] for row in data_view.rows] == [5, 33, 41]
    assert local_sort_service.get_current_sorters() == [CurrentSorter(column_id="age", direction=SortDirection.ASC)]
    assert grid.calls == ["invalidate", "render"]
    event = callback.call_args.args[0]
    assert event.source == SortSource.LOCAL
    assert event.sorters == local_sort_service.get_current_sorters()


def test_single_column_sort_descending(local_sort_service, grid, data_view, columns):
    grid.on_sort.notify(None, SortEventArgs(grid=grid, sort_col=columns[2], sort_asc=False))

    assert [row["joined"] for row in data_view.rows] == ["2021-07-15", "2019-03-01", "2015-11-30"]
    assert local_sort_service.get_current_local_sorters() == [CurrentSorter(column_id="joined", direction="DESC")]


def test_multi_column_sort_keeps_priority_order(local_sort_service, grid, data_view, columns):
    args = SortEventArgs(
        grid=grid,
        multi_column_sort=True,
        sort_cols=[SortColumn(sort_col=columns[1], sort_asc=False), SortColumn(sort_col=columns[0], sort_asc=True)],
    )

    grid.on_sort.notify(None, args)

    assert local_sort_service.get_current_sorters() == [
        CurrentSorter(column_id="age", direction="DESC"),
        CurrentSorter(column_id="name", direction="ASC"),
    ]
    assert [row["age"] for row in data_view.rows] == [41, 33, 5]


def test_sort_event_as_dict(local_sort_service, grid, data_view, columns):
    grid.on_sort.notify(None, {"grid": grid, "sortCol": columns[0].model_dump(), "sortAsc": True})

    # case sensitive string ordering
    assert names(data_view) == ["Bob", "Carol", "alice"]


def test_gesture_without_columns_gives_empty_state_and_still_renders(local_sort_service, grid, data_view, notifier):
    callback = mock.Mock()
    notifier.subscribe(callback)
    original_order = names(data_view)

    grid.on_sort.notify(None, SortEventArgs(grid=grid, multi_column_sort=True, sort_cols=[SortColumn(column_id="gone")]))

    assert local_sort_service.get_current_sorters() == []
    assert names(data_view) == original_order
    assert data_view.sort_calls == 1
    assert grid.calls == ["invalidate", "render"]
    assert callback.call_args.args[0].sorters == []


def test_gesture_payload_object_with_plain_dicts(local_sort_service, grid, data_view):
    args = SimpleNamespace(
        grid=grid,
        multi_column_sort=True,
        sort_cols=[{"sortCol": {"id": "age", "field": "age", "type": "number"}, "sortAsc": False}],
    )

    grid.on_sort.notify(None, args)

    assert [row["age"] for row in data_view.rows] == [41, 33, 5]
    assert local_sort_service.get_current_sorters() == [CurrentSorter(column_id="age", direction="DESC")]


def test_single_column_payload_object_with_plain_dict(local_sort_service, grid, data_view):
    grid.on_sort.notify(None, SimpleNamespace(sort_col={"id": "name", "field": "name"}, sort_asc=True))

    assert names(data_view) == ["Bob", "Carol", "alice"]
    assert local_sort_service.get_current_sorters() == [CurrentSorter(column_id="name", direction="ASC")]


@pytest.mark.parametrize("args", [None, {"sortCols": "not a list", "multiColumnSort": True}, object()])
def test_malformed_gesture_does_not_raise(local_sort_service, grid, data_view, args):
    grid.on_sort.notify(None, args)

    assert local_sort_service.get_current_sorters() == []
    assert grid.calls == ["invalidate", "render"]


def test_new_gesture_replaces_state(local_sort_service, grid, columns):
    grid.on_sort.notify(None, SortEventArgs(grid=grid, sort_col=columns[0]))
    grid.on_sort.notify(None, SortEventArgs(grid=grid, sort_col=columns[1], sort_asc=False))

    assert local_sort_service.get_current_sorters() == [CurrentSorter(column_id="age", direction="DESC")]


def test_current_sorters_accessor_returns_copy(local_sort_service, grid, columns):
    grid.on_sort.notify(None, SortEventArgs(grid=grid, sort_col=columns[0]))

    local_sort_service.get_current_sorters().clear()

    assert len(local_sort_service.get_current_sorters()) == 1


@pytest.fixture
def preset_options():
    return GridOption(
        presets=GridPresets(
            sorters=[CurrentSorter(column_id="age", direction="desc"), CurrentSorter(column_id="name", direction="asc")]
        )
    )


def test_load_local_presets(preset_options, make_grid, data_view, columns, notifier):
    grid = make_grid(preset_options)
    service = LocalSortService(notifier)
    callback = mock.Mock()
    notifier.subscribe(callback)

    sort_columns = service.load_local_presets(grid, preset_options, data_view, columns)

    # column definition order: name before age
    assert [(s.column_id, s.sort_asc) for s in sort_columns] == [("name", True), ("age", False)]
    assert service.get_current_sorters() == [
        CurrentSorter(column_id="name", direction="ASC"),
        CurrentSorter(column_id="age", direction="DESC"),
    ]
    assert grid.sort_columns == sort_columns
    assert grid.calls == ["invalidate", "render", "set_sort_columns"]
    assert names(data_view) == ["Bob", "Carol", "alice"]
    callback.assert_not_called()


def test_load_local_presets_without_match_does_nothing(make_grid, data_view, columns):
    options = GridOption(presets=GridPresets(sorters=[CurrentSorter(column_id="unknown", direction="ASC")]))
    grid = make_grid(options)
    service = LocalSortService()

    assert service.load_local_presets(grid, options, data_view, columns) == []
    assert service.load_local_presets(grid, None, data_view, columns) == []
    assert grid.calls == []
    assert data_view.sort_calls == 0


def test_presets_load_once_per_zero_to_positive_transition(preset_options, make_grid, make_data_view, columns, rows):
    grid = make_grid(preset_options)
    data_view = make_data_view()
    service = LocalSortService()
    service.attach(grid, preset_options, data_view, columns)

    with mock.patch.object(service, "load_local_presets", wraps=service.load_local_presets) as load_presets:
        data_view.set_items(rows)  # 0 -> 3
        assert load_presets.call_count == 1

        data_view.set_items(rows + [{"name": "Dave", "age": 12, "joined": "2020-01-01"}])  # 3 -> 4
        data_view.set_items(rows[:1])  # 4 -> 1
        assert load_presets.call_count == 1

        data_view.set_items([])  # 1 -> 0
        assert load_presets.call_count == 1

        data_view.set_items(rows)  # 0 -> 3
        assert load_presets.call_count == 2

    service.dispose()


def test_row_count_without_previous_uses_tracked_count(preset_options, make_grid, make_data_view, columns):
    grid = make_grid(preset_options)
    data_view = make_data_view()
    service = LocalSortService()
    service.attach(grid, preset_options, data_view, columns)

    with mock.patch.object(service, "load_local_presets") as load_presets:
        data_view.on_row_count_changed.notify(None, {"current": 2})
        data_view.on_row_count_changed.notify(None, {"current": 5})
        data_view.on_row_count_changed.notify(None, RowCountChangedArgs(current=0))
        data_view.on_row_count_changed.notify(None, {"current": 1})

    assert load_presets.call_count == 2


def test_dispose_releases_subscriptions(local_sort_service, grid, data_view, notifier):
    local_sort_service.dispose()
    local_sort_service.dispose()

    assert grid.on_sort.handlers == []
    assert data_view.on_row_count_changed.handlers == []


def test_dispose_without_attach():
    LocalSortService().dispose()


def test_attach_twice_replaces_subscriptions(grid, data_view, columns):
    service = LocalSortService()
    service.attach(grid, None, data_view, columns)
    service.attach(grid, None, data_view, columns)

    assert grid.on_sort.handlers == [service.on_local_sort]
    assert data_view.on_row_count_changed.handlers == [service.on_row_count_changed]
