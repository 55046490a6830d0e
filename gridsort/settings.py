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

from pydantic_settings import BaseSettings

from gridsort.types import FieldType


class SortSettings(BaseSettings):
    SORT_DEFAULT_FIELD_TYPE: FieldType = FieldType.STRING
    # Cascade through ties to the next sort column instead of stopping at the first resolvable one
    SORT_MULTI_COLUMN_TIE_BREAK: bool = False
    SORT_WARN_OVERLAPPING_REQUESTS: bool = True
    LOG_LEVEL: str = "INFO"


sort_settings = SortSettings()
