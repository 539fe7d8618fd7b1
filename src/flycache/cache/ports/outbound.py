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
"""Cache adapter and command executor protocols."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from flycache.cache.types import RemoteReply, StructuredValue


@runtime_checkable
class CacheAdapter(Protocol):
    """Abstract cache interface.

    All cache backends must implement this protocol. Every operation may
    raise :class:`~flycache.kernel.exceptions.CacheConnectionError`.
    """

    def get(self, key: str) -> StructuredValue | None: ...

    def set(self, key: str, value: StructuredValue) -> None: ...

    def delete(self, key: str) -> None: ...


@runtime_checkable
class CommandExecutor(Protocol):
    """Runs one named command against a key-value store.

    Calls are synchronous and blocking. Implementations must support
    ``GET [key]``, ``SET [key, value]`` and ``DEL [key]``, return the string
    reply or ``None`` when the store has no value, and raise
    :class:`~flycache.kernel.exceptions.CacheConnectionError` on any failure.
    They are not required to be safe for concurrent use.
    """

    def execute(self, command: str, params: Sequence[str]) -> RemoteReply: ...
