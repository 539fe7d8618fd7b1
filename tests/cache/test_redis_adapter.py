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
"""Tests for RedisCacheAdapter against in-process executors."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from flycache.cache.adapters.memory import InMemoryCommandExecutor
from flycache.cache.adapters.redis import RedisCacheAdapter
from flycache.cache.codec import decode_value, encode_value
from flycache.cache.ports.outbound import CacheAdapter, CommandExecutor
from flycache.kernel.exceptions import CacheConnectionError, ValidationException


class RecordingExecutor:
    """Delegates to an in-memory store and records every command issued."""

    def __init__(self) -> None:
        self._inner = InMemoryCommandExecutor()
        self.calls: list[tuple[str, list[str]]] = []

    def execute(self, command: str, params: Sequence[str]) -> str | None:
        self.calls.append((command, list(params)))
        return self._inner.execute(command, params)


class FailingExecutor:
    """Fails the first *failures* commands, then behaves like a store."""

    def __init__(self, failures: int = 1, error: Exception | None = None) -> None:
        self._inner = InMemoryCommandExecutor()
        self._failures = failures
        self._error = error or CacheConnectionError("connection reset by peer")

    def execute(self, command: str, params: Sequence[str]) -> str | None:
        if self._failures > 0:
            self._failures -= 1
            raise self._error
        return self._inner.execute(command, params)


class TestProtocolCompliance:
    def test_adapter_satisfies_cache_protocol(self):
        adapter: CacheAdapter = RedisCacheAdapter(InMemoryCommandExecutor())
        assert isinstance(adapter, CacheAdapter)

    def test_executors_satisfy_executor_protocol(self):
        assert isinstance(InMemoryCommandExecutor(), CommandExecutor)
        assert isinstance(RecordingExecutor(), CommandExecutor)


class TestGetSetDelete:
    def test_string_round_trip(self):
        adapter = RedisCacheAdapter(InMemoryCommandExecutor())
        adapter.set("a", "hello")
        assert adapter.get("a") == "hello"

    def test_number_round_trip(self):
        adapter = RedisCacheAdapter(InMemoryCommandExecutor())
        adapter.set("b", 42)
        result = adapter.get("b")
        assert result == 42
        assert isinstance(result, int)

    def test_structured_round_trip(self):
        adapter = RedisCacheAdapter(InMemoryCommandExecutor())
        value = {"name": "Alice", "age": 30, "tags": ["a", "b"], "active": True, "manager": None}
        adapter.set("user:1", value)
        assert adapter.get("user:1") == value

    def test_get_missing_key_returns_none(self):
        adapter = RedisCacheAdapter(InMemoryCommandExecutor())
        assert adapter.get("never-set") is None

    def test_delete_then_get_returns_none(self):
        adapter = RedisCacheAdapter(InMemoryCommandExecutor())
        adapter.set("a", "hello")
        adapter.delete("a")
        assert adapter.get("a") is None

    def test_delete_missing_key_is_not_an_error(self):
        adapter = RedisCacheAdapter(InMemoryCommandExecutor())
        adapter.delete("missing")
        adapter.delete("missing")
        assert adapter.get("missing") is None

    def test_overwrite_replaces_value(self):
        adapter = RedisCacheAdapter(InMemoryCommandExecutor())
        adapter.set("k", 1)
        adapter.set("k", [1, 2])
        assert adapter.get("k") == [1, 2]

    def test_json_looking_string_is_read_back_parsed(self):
        adapter = RedisCacheAdapter(InMemoryCommandExecutor())
        adapter.set("c", '{"x":1}')
        assert adapter.get("c") == {"x": 1}

    def test_value_written_by_another_client_is_returned_verbatim(self):
        executor = InMemoryCommandExecutor()
        executor.execute("SET", ["legacy", "not json at all"])
        adapter = RedisCacheAdapter(executor)
        assert adapter.get("legacy") == "not json at all"

    def test_deeply_nested_opaque_value_is_returned_verbatim(self):
        executor = InMemoryCommandExecutor()
        executor.execute("SET", ["deep", "[" * 200000])
        assert RedisCacheAdapter(executor).get("deep") == "[" * 200000


class TestCommandsIssued:
    def test_set_string_is_sent_verbatim(self):
        executor = RecordingExecutor()
        RedisCacheAdapter(executor).set("a", "hello")
        assert executor.calls == [("SET", ["a", "hello"])]

    def test_set_structured_value_is_sent_as_json(self):
        executor = RecordingExecutor()
        RedisCacheAdapter(executor).set("b", {"x": 1})
        assert executor.calls == [("SET", ["b", '{"x":1}'])]

    def test_get_and_delete_commands(self):
        executor = RecordingExecutor()
        adapter = RedisCacheAdapter(executor)
        adapter.get("a")
        adapter.delete("a")
        assert executor.calls == [("GET", ["a"]), ("DEL", ["a"])]

    def test_unencodable_value_sends_nothing(self):
        executor = RecordingExecutor()
        adapter = RedisCacheAdapter(executor)
        with pytest.raises(ValidationException):
            adapter.set("bad", object())  # type: ignore[arg-type]
        assert executor.calls == []


class TestErrorPropagation:
    @pytest.mark.parametrize("operation", ["get", "set", "delete"])
    def test_failure_surfaces_connection_error_and_releases_lock(self, operation):
        adapter = RedisCacheAdapter(FailingExecutor(failures=1))
        args = ("k", "v") if operation == "set" else ("k",)

        with pytest.raises(CacheConnectionError):
            getattr(adapter, operation)(*args)

        # Lock was released: the next call goes through
        adapter.set("k", "v")
        assert adapter.get("k") == "v"

    def test_connection_error_is_a_builtin_connection_error(self):
        adapter = RedisCacheAdapter(FailingExecutor(failures=1))
        with pytest.raises(ConnectionError):
            adapter.get("k")

    def test_os_error_from_executor_is_wrapped(self):
        cause = OSError("broken pipe")
        adapter = RedisCacheAdapter(FailingExecutor(failures=1, error=cause))
        with pytest.raises(CacheConnectionError) as exc_info:
            adapter.delete("k")
        assert exc_info.value.__cause__ is cause
        assert exc_info.value.context == {"command": "DEL"}

    def test_connection_error_propagates_unchanged(self):
        error = CacheConnectionError("gone")
        adapter = RedisCacheAdapter(FailingExecutor(failures=1, error=error))
        with pytest.raises(CacheConnectionError) as exc_info:
            adapter.get("k")
        assert exc_info.value is error

    def test_no_retry_on_failure(self):
        executor = FailingExecutor(failures=1)
        adapter = RedisCacheAdapter(executor)
        with pytest.raises(CacheConnectionError):
            adapter.set("k", "v")
        assert adapter.get("k") is None


class TestLockScope:
    def test_encoding_and_decoding_run_outside_the_lock(self, monkeypatch):
        from flycache.cache.adapters import redis as redis_adapter_module

        adapter = RedisCacheAdapter(InMemoryCommandExecutor())
        lock_held: list[tuple[str, bool]] = []

        def encode(value):
            lock_held.append(("encode", adapter._lock.locked()))
            return encode_value(value)

        def decode(raw):
            lock_held.append(("decode", adapter._lock.locked()))
            return decode_value(raw)

        monkeypatch.setattr(redis_adapter_module, "encode_value", encode)
        monkeypatch.setattr(redis_adapter_module, "decode_value", decode)

        adapter.set("k", {"x": 1})
        assert adapter.get("k") == {"x": 1}
        assert lock_held == [("encode", False), ("decode", False)]

    def test_lock_is_held_while_the_command_runs(self):
        observed: list[bool] = []

        class LockObservingExecutor(InMemoryCommandExecutor):
            def execute(self, command, params):
                observed.append(adapter._lock.locked())
                return super().execute(command, params)

        adapter = RedisCacheAdapter(LockObservingExecutor())
        adapter.set("k", 1)
        adapter.get("k")
        adapter.delete("k")
        assert observed == [True, True, True]
        assert not adapter._lock.locked()
