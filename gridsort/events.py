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
from typing import Any

from structlog import get_logger

from gridsort.interfaces import EventCallback, EventChannel

logger = get_logger(__name__)


class Event:
    """In-process event channel, as exposed by grids (`on_sort`) and data views (`on_row_count_changed`)."""

    def __init__(self, name: str = "event") -> None:
        self.name = name
        self.handlers: list[EventCallback] = []

    def subscribe(self, handler: EventCallback) -> None:
        self.handlers.append(handler)

    def unsubscribe(self, handler: EventCallback | None = None) -> None:
        """Remove one handler, or all of them when no handler is given."""
        if handler is None:
            self.handlers.clear()
            return
        if handler in self.handlers:
            self.handlers.remove(handler)

    def notify(self, *args: Any) -> Any:
        """Call every handler in subscription order and return the value of the last one.

        Handlers that are coroutine functions hand back their coroutine unawaited, so services subscribe
        synchronous handlers and schedule their own async work.
        """
        return_value = None
        for handler in list(self.handlers):
            return_value = handler(*args)
        return return_value


class EventHandler:
    """Keeps track of subscriptions so they can all be released at once."""

    def __init__(self) -> None:
        self.subscriptions: list[tuple[EventChannel, EventCallback]] = []

    def subscribe(self, event: EventChannel, handler: EventCallback) -> "EventHandler":
        event.subscribe(handler)
        self.subscriptions.append((event, handler))
        return self

    def unsubscribe(self, event: EventChannel, handler: EventCallback) -> "EventHandler":
        if (event, handler) in self.subscriptions:
            self.subscriptions.remove((event, handler))
            event.unsubscribe(handler)
        return self

    def unsubscribe_all(self) -> "EventHandler":
        while self.subscriptions:
            event, handler = self.subscriptions.pop()
            event.unsubscribe(handler)
        logger.debug("Released all event subscriptions")
        return self
