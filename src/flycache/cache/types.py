# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Value types exchanged through the cache."""

from __future__ import annotations

from typing import TypeAlias

# Anything JSON can represent. Tuples are accepted on write and come back as lists.
StructuredValue: TypeAlias = (
    None | str | int | float | bool | list["StructuredValue"] | tuple["StructuredValue", ...] | dict[str, "StructuredValue"]
)

# A string payload, or None when the store holds no value for the key.
RemoteReply: TypeAlias = str | None
