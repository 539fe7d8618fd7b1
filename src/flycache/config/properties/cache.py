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
"""Cache subsystem configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from flycache.core.config import config_properties


@config_properties(prefix="flycache.cache")
@dataclass
class CacheProperties:
    """Configuration for the cache subsystem (flycache.cache.*)."""

    provider: str = "auto"


@config_properties(prefix="flycache.cache.redis")
@dataclass
class RedisProperties:
    """Connection settings for the Redis provider (flycache.cache.redis.*)."""

    host: str = "localhost"
    port: int = 6379
    password: str | None = None
    socket_timeout: float | None = None
