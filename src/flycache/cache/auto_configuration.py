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
"""Cache subsystem auto-configuration."""

from __future__ import annotations

import structlog

from flycache.cache.adapters.memory import InMemoryCommandExecutor
from flycache.cache.adapters.redis import RedisCacheAdapter
from flycache.config.auto import AutoConfiguration
from flycache.config.properties.cache import CacheProperties, RedisProperties
from flycache.core.config import Config
from flycache.kernel.exceptions import ValidationException
from flycache.logging.port import LoggingPort
from flycache.logging.structlog_adapter import StructlogAdapter

logger = structlog.get_logger("flycache.cache.auto")


class CacheAutoConfiguration:
    """Builds a cache adapter from configuration, detecting the provider.

    Logging is configured from the same ``Config`` before the adapter is
    built. Pass *logging_port* to use something other than structlog, or
    set ``flycache.logging.enabled: false`` to leave logging untouched.
    """

    def __init__(self, logging_port: LoggingPort | None = None) -> None:
        self._logging = logging_port if logging_port is not None else StructlogAdapter()

    @staticmethod
    def detect_provider() -> str:
        """Detect the best available cache provider.

        ``redis`` is a required dependency, so in an installed package this
        is always ``"redis"``; ``auto`` only resolves to ``memory`` where the
        redis client has been removed. Select ``memory`` explicitly otherwise.
        """
        return AutoConfiguration.detect_cache_provider()

    def cache_adapter(self, config: Config) -> RedisCacheAdapter:
        if _as_bool(config.get("flycache.logging.enabled", True)):
            self._logging.configure(config)

        configured = config.bind(CacheProperties).provider.lower()
        provider = configured if configured != "auto" else self.detect_provider()

        if provider == "redis":
            props = config.bind(RedisProperties)
            adapter = RedisCacheAdapter.connect(
                props.host,
                props.port,
                props.password,
                socket_timeout=props.socket_timeout,
            )
            logger.info("auto_configured", subsystem="cache", provider=provider, host=props.host, port=props.port)
            return adapter

        if provider == "memory":
            logger.info("auto_configured", subsystem="cache", provider=provider)
            return RedisCacheAdapter(InMemoryCommandExecutor())

        raise ValidationException(
            f"Unknown cache provider '{configured}' (expected auto, redis or memory)",
            code="CACHE_PROVIDER",
            context={"provider": configured},
        )


def _as_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)
