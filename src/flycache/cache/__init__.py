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
"""flycache cache — structured values over a Redis GET/SET/DEL connection."""

from flycache.cache.adapters.memory import InMemoryCommandExecutor
from flycache.cache.adapters.redis import RedisCacheAdapter
from flycache.cache.adapters.redis_executor import RedisCommandExecutor
from flycache.cache.codec import decode_value, encode_value
from flycache.cache.decorators import cache_evict, cache_put, cacheable
from flycache.cache.ports.outbound import CacheAdapter, CommandExecutor
from flycache.cache.types import RemoteReply, StructuredValue

__all__ = [
    "CacheAdapter",
    "CommandExecutor",
    "InMemoryCommandExecutor",
    "RedisCacheAdapter",
    "RedisCommandExecutor",
    "RemoteReply",
    "StructuredValue",
    "cache_evict",
    "cache_put",
    "cacheable",
    "decode_value",
    "encode_value",
]
