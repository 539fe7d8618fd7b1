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
"""Command executor backed by a single redis-py connection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import redis
from redis.exceptions import RedisError

from flycache.cache.types import RemoteReply
from flycache.kernel.exceptions import CacheConnectionError, ValidationException

_logger = logging.getLogger(__name__)


class RedisCommandExecutor:
    """Runs raw commands on a ``redis.Redis`` client.

    Replies are normalized to ``str | None`` and every redis-py error is
    re-raised as :class:`CacheConnectionError`. Not safe for concurrent use
    on its own; :class:`~flycache.cache.adapters.redis.RedisCacheAdapter`
    provides the locking.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def connect(
        cls,
        address: str,
        port: int,
        password: str | None = None,
        *,
        socket_timeout: float | None = None,
    ) -> RedisCommandExecutor:
        """Connect to ``address:port`` on one dedicated connection and PING it."""
        if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= 65535:
            raise ValidationException(
                f"Port must be an integer in 0-65535, got {port!r}",
                code="CACHE_PORT",
                context={"port": port},
            )

        try:
            # single_connection_client may connect eagerly in the constructor
            client = redis.Redis(
                host=address,
                port=port,
                password=password,
                socket_timeout=socket_timeout,
                decode_responses=True,
                single_connection_client=True,
            )
            client.ping()
        except RedisError as exc:
            raise CacheConnectionError(
                f"Cannot connect to Redis at {address}:{port}: {exc}",
                code="CACHE_CONNECTION",
                context={"address": address, "port": port},
            ) from exc

        _logger.info("Connected to Redis at %s:%s", address, port)
        return cls(client)

    def execute(self, command: str, params: Sequence[str]) -> RemoteReply:
        """Run *command* with *params* and return the normalized reply."""
        try:
            return _normalize_reply(self._client.execute_command(command, *params))
        except RedisError as exc:
            raise CacheConnectionError(
                f"{command} failed: {exc}",
                code="CACHE_CONNECTION",
                context={"command": command},
            ) from exc
        except UnicodeDecodeError as exc:
            # Raised by redis-py with decode_responses=True or by _normalize_reply
            raise CacheConnectionError(
                f"{command} reply is not valid UTF-8: {exc}",
                code="CACHE_DECODE",
                context={"command": command},
            ) from exc


def _normalize_reply(reply: Any) -> RemoteReply:
    if reply is None:
        return None
    if isinstance(reply, bytes):
        return reply.decode("utf-8")
    # redis-py turns the SET status reply into a bool
    if isinstance(reply, bool):
        return "OK" if reply else "0"
    return str(reply)
