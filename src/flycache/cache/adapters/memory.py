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
"""In-process command executor."""

from __future__ import annotations

from collections.abc import Sequence

from flycache.cache.types import RemoteReply
from flycache.kernel.exceptions import CacheConnectionError

_ARITY = {"GET": 1, "SET": 2, "DEL": 1}


class InMemoryCommandExecutor:
    """Dict-backed executor speaking the GET/SET/DEL subset of the Redis protocol.

    Suitable for development, testing, and single-process applications.
    Unsupported commands and wrong argument counts fail the way a store
    reports a command error.
    """

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def execute(self, command: str, params: Sequence[str]) -> RemoteReply:
        name = command.upper()
        arity = _ARITY.get(name)
        if arity is None:
            raise CacheConnectionError(
                f"ERR unknown command '{command}'",
                code="CACHE_COMMAND",
                context={"command": command},
            )
        if len(params) != arity:
            raise CacheConnectionError(
                f"ERR wrong number of arguments for '{command}' command",
                code="CACHE_COMMAND",
                context={"command": command},
            )

        if name == "GET":
            return self._store.get(params[0])
        if name == "SET":
            self._store[params[0]] = params[1]
            return "OK"
        return "1" if self._store.pop(params[0], None) is not None else "0"

    def __len__(self) -> int:
        return len(self._store)
