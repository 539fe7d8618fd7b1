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
"""Redis-backed cache adapter."""

from __future__ import annotations

import threading
from collections.abc import Sequence

import structlog

from flycache.cache.adapters.redis_executor import RedisCommandExecutor
from flycache.cache.codec import decode_value, encode_value
from flycache.cache.ports.outbound import CommandExecutor
from flycache.cache.types import RemoteReply, StructuredValue
from flycache.kernel.exceptions import CacheConnectionError

logger = structlog.get_logger("flycache.cache")


class RedisCacheAdapter:
    """Cache adapter that forwards GET/SET/DEL to a single store connection.

    Strings are stored verbatim and other values as JSON; reads parse JSON
    when they can and otherwise return the raw string (see
    :mod:`flycache.cache.codec`).

    The executor is assumed unsafe for concurrent use, so one lock serializes
    every command issued through this adapter. Encoding and decoding run
    outside the lock.
    """

    def __init__(self, executor: CommandExecutor) -> None:
        self._executor = executor
        self._lock = threading.Lock()

    @classmethod
    def connect(
        cls,
        address: str,
        port: int,
        password: str | None = None,
        *,
        socket_timeout: float | None = None,
    ) -> RedisCacheAdapter:
        """Open a dedicated connection to ``address:port`` and wrap it.

        Raises:
            CacheConnectionError: If the store is unreachable or rejects *password*.
            ValidationException: If *port* is outside 0-65535.
        """
        executor = RedisCommandExecutor.connect(
            address,
            port,
            password=password,
            socket_timeout=socket_timeout,
        )
        return cls(executor)

    def get(self, key: str) -> StructuredValue | None:
        """Fetch *key* with GET; ``None`` when the store has no value."""
        raw = self._execute("GET", [key])
        if raw is None:
            return None
        return decode_value(raw)

    def set(self, key: str, value: StructuredValue) -> None:
        """Store *value* under *key* with SET."""
        self._execute("SET", [key, encode_value(value)])

    def delete(self, key: str) -> None:
        """Remove *key* with DEL. Absent keys are not an error."""
        self._execute("DEL", [key])

    def _execute(self, command: str, params: Sequence[str]) -> RemoteReply:
        try:
            with self._lock:
                reply = self._executor.execute(command, params)
        except CacheConnectionError as exc:
            logger.warning("cache_command_failed", command=command, key=params[0], error=str(exc))
            raise
        except OSError as exc:
            logger.warning("cache_command_failed", command=command, key=params[0], error=str(exc))
            raise CacheConnectionError(
                f"{command} failed: {exc}",
                code="CACHE_CONNECTION",
                context={"command": command},
            ) from exc
        logger.debug("cache_command", command=command, key=params[0], has_reply=reply is not None)
        return reply
