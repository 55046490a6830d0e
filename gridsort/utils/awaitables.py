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
import inspect
from collections.abc import AsyncIterator, Awaitable
from typing import Any, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def is_stream(value: Any) -> bool:
    return hasattr(value, "__aiter__") and not inspect.isawaitable(value)


async def first_from_stream(stream: AsyncIterator[T]) -> T | None:
    iterator = stream.__aiter__()
    try:
        value = await iterator.__anext__()
    except StopAsyncIteration:
        return None
    finally:
        aclose = getattr(iterator, "aclose", None)
        if aclose is not None:
            await aclose()
    return value


async def resolve_process_result(value: Awaitable[T] | AsyncIterator[T]) -> T | None:
    """Wait for the outcome of a backend `process` call.

    A backend process may hand back a coroutine/future, or a stream (async iterator) of which only
    the first emitted item is of interest. Either way the caller gets a single awaited result.

    Args:
        value: the object returned by the backend process function

    Returns:
        The awaited result, or None when a stream completes without emitting.

    Raises:
        TypeError: when the value is neither awaitable nor a stream.

    """
    if inspect.isawaitable(value):
        return await value
    if is_stream(value):
        logger.debug("Resolving backend result from stream", stream=type(value).__name__)
        return await first_from_stream(value)  # type: ignore[arg-type]
    raise TypeError(f"Backend process must return an awaitable or an async iterator, got {type(value).__name__}")
