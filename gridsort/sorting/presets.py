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
from collections.abc import Iterable, Sequence

import structlog
from more_itertools import first

from gridsort.schemas.column import Column
from gridsort.schemas.sorter import CurrentSorter, SortColumn
from gridsort.types import SortDirection

logger = structlog.get_logger(__name__)


def reconcile_presets(column_definitions: Sequence[Column], presets: Iterable[CurrentSorter]) -> list[SortColumn]:
    """Turn preset sorters into sort columns, ordered like the column definitions.

    The order in which presets are given does not matter: a grid with columns [A, B, C] and presets
    {B: DESC, A: ASC} sorts on A first, then B. Presets for unknown columns are dropped.

    Args:
        column_definitions: the grid's columns in display order
        presets: preset sorters, keyed by column id

    Returns:
        The sort columns for all columns that have a preset.

    """
    presets = list(presets)
    sort_columns: list[SortColumn] = []
    for column in column_definitions:
        preset = first((p for p in presets if p.column_id == str(column.id)), None)
        if preset is None:
            continue
        sort_columns.append(
            SortColumn(
                column_id=column.id,
                sort_col=column,
                sort_asc=SortDirection.from_value(preset.direction) == SortDirection.ASC,
            )
        )

    known_ids = {str(column.id) for column in column_definitions}
    if unknown := [preset.column_id for preset in presets if preset.column_id not in known_ids]:
        logger.debug("Dropped presets for unknown columns", columns=unknown)
    return sort_columns
