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
"""Declarative caching decorators."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from flycache.cache.ports.outbound import CacheAdapter

F = TypeVar("F", bound=Callable[..., Any])


def _resolve_key(func: Callable[..., Any], key: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    return key.format(**bound.arguments)


def cacheable(backend: CacheAdapter, key: str) -> Callable[[F], F]:
    """Cache the return value, skip execution on cache hit.

    The `key` parameter supports format-string interpolation with function
    argument names. For example, `key="user:{user_id}"` will expand
    `{user_id}` from the function's arguments.

    A cached ``None`` cannot be told apart from a miss, so functions
    returning ``None`` are executed on every call.

    Args:
        backend: Cache adapter to use.
        key: Key template with {param} placeholders.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            resolved_key = _resolve_key(func, key, args, kwargs)

            cached = backend.get(resolved_key)
            if cached is not None:
                return cached

            result = func(*args, **kwargs)
            backend.set(resolved_key, result)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_put(backend: CacheAdapter, key: str) -> Callable[[F], F]:
    """Always execute the function and cache the result.

    Useful for update operations that should refresh the cached value.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = func(*args, **kwargs)
            backend.set(_resolve_key(func, key, args, kwargs), result)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_evict(backend: CacheAdapter, key: str) -> Callable[[F], F]:
    """Delete a cache entry after the function returns."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = func(*args, **kwargs)
            backend.delete(_resolve_key(func, key, args, kwargs))
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
