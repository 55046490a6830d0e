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
from collections.abc import Callable
from typing import Any

from pydantic import Field

from gridsort.interfaces import BackendService
from gridsort.schemas.base import SortBaseModel
from gridsort.schemas.sorter import CurrentSorters


class BackendServiceApi(SortBaseModel):
    service: BackendService | None = None
    process: Callable[[Any], Any] | None = None
    pre_process: Callable[[], Any] | None = None
    post_process: Callable[[Any], Any] | None = None
    internal_post_process: Callable[[Any], Any] | None = None

    @property
    def is_configured(self) -> bool:
        return self.process is not None and self.service is not None


class GridPresets(SortBaseModel):
    sorters: CurrentSorters = Field(default_factory=list)


class GridOption(SortBaseModel):
    enable_sorting: bool = True
    multi_column_sort: bool = True
    backend_service_api: BackendServiceApi | None = None
    # Older grids configure the backend under this name
    on_backend_event_api: BackendServiceApi | None = None
    presets: GridPresets | None = None

    @property
    def backend_api(self) -> BackendServiceApi | None:
        return self.backend_service_api or self.on_backend_event_api

    @property
    def preset_sorters(self) -> CurrentSorters:
        return self.presets.sorters if self.presets else []


def as_grid_option(options: GridOption | dict | None) -> GridOption:
    if options is None:
        return GridOption()
    if isinstance(options, GridOption):
        return options
    return GridOption.model_validate(options)
