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
"""Unified exception hierarchy for flycache.

All library exceptions inherit from FlyCacheException, so callers can catch
one base type or target a specific category.

Categories:
- BusinessException: validation of inputs, values and configuration
- InfrastructureException: failures talking to the remote store
"""

from __future__ import annotations


class FlyCacheException(Exception):
    """Base exception for all flycache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_CONNECTION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class BusinessException(FlyCacheException):
    """Caller-side errors: bad input, bad configuration."""


class ValidationException(BusinessException, ValueError):
    """Input validation failures (invalid port, unencodable value, bad config)."""


class InfrastructureException(FlyCacheException):
    """Infrastructure failures: network, protocol, remote store."""


class CacheConnectionError(InfrastructureException, ConnectionError):
    """The remote store could not execute a command.

    Raised for network failures, protocol errors, command errors reported by
    the store and rejected credentials at connect time.
    """
