# Copyright 2019-2025 SURF, GÉANT.
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

from functools import singledispatch
from typing import Any

import structlog

from nwastdlib.ex import show_ex
from gridsort.types import ErrorDict

logger = structlog.get_logger(__name__)


class SortServiceError(Exception):
    message: str
    details: Any

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, details)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class InvalidGestureEvent(SortServiceError):  # noqa: N818
    """The sort event payload coming from the grid is missing or has no grid attached."""


class MisconfiguredBackend(SortServiceError):  # noqa: N818
    """The grid options lack a backend service api with both a `process` and a `service`."""


@singledispatch
def error_state_to_dict(err: Any) -> ErrorDict:
    """Return an ErrorDict based on the passed error object.

    Args:
        err: An error object like an Exception or ErrorDict
    Returns:
        An ErrorDict containing the error message and a traceback if available

    """
    raise NotImplementedError(f"Unsupported error state type: {type(err)}")


@error_state_to_dict.register(dict)
def _(err: ErrorDict) -> ErrorDict:
    return err


@error_state_to_dict.register
def _(err: SortServiceError) -> ErrorDict:
    return {"class": type(err).__name__, "error": err.message, "traceback": show_ex(err), "details": err.details}


@error_state_to_dict.register
def _(err: Exception) -> ErrorDict:
    return {"class": type(err).__name__, "error": str(err), "traceback": show_ex(err)}
