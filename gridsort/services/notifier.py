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
from collections.abc import Callable, Iterable

import structlog

from gridsort.schemas.sorter import CurrentSorter, SortChangedEvent
from gridsort.types import SortSource
from gridsort.utils.errors import error_state_to_dict

logger = structlog.get_logger(__name__)

SortChangedCallback = Callable[[SortChangedEvent], None]


class ChangeNotifier:
    """Broadcast channel for sorter changes, used by pagination and state persistence to follow the sort."""

    def __init__(self) -> None:
        self.subscribers: list[SortChangedCallback] = []

    def subscribe(self, callback: SortChangedCallback) -> Callable[[], None]:
        self.subscribers.append(callback)

        def unsubscribe() -> None:
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: SortChangedCallback) -> None:
        if callback in self.subscribers:
            self.subscribers.remove(callback)

    def unsubscribe_all(self) -> None:
        self.subscribers.clear()

    def emit(self, sorters: Iterable[CurrentSorter], source: SortSource) -> SortChangedEvent:
        event = SortChangedEvent(source=source, sorters=list(sorters))
        logger.debug("Broadcast sort change", source=source, sorters=len(event.sorters), subscribers=len(self.subscribers))
        for callback in list(self.subscribers):
            try:
                callback(event)
            except Exception as e:
                logger.exception("Sort change subscriber failed", source=source, error=error_state_to_dict(e))
        return event
