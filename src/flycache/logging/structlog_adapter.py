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
"""StructlogAdapter — LoggingPort implementation that owns the ``flycache`` logger tree."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from flycache.core.config import Config

LIBRARY_LOGGER = "flycache"


class StructlogAdapter:
    """Routes flycache's structlog events to a handler on the ``flycache`` logger.

    Only the library's own logger tree is touched: the root logger and its
    handlers are left to the application. ``configure`` may be called again
    with a new ``Config``; the previous handler is replaced, and structlog
    loggers are not cached, so format changes apply to existing loggers.

    Config keys:
        flycache.logging.format: ``console`` (default) or ``json``.
        flycache.logging.level.root: level of the ``flycache`` logger.
        flycache.logging.level.<logger>: level of any ``flycache.*`` logger.
    """

    def __init__(self, stream: Any = None) -> None:
        self._stream = stream
        self._handler: logging.Handler | None = None
        self.root_level = "INFO"
        self.format = "console"
        self.module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        levels = {str(k): str(v).upper() for k, v in config.get_section("flycache.logging.level").items()}
        self.root_level = levels.pop("root", "INFO")
        self.module_levels = levels
        self.format = str(config.get("flycache.logging.format", "console")).lower()

        structlog.configure(
            processors=self._processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        self._install_handler()

        self.set_level(LIBRARY_LOGGER, self.root_level)
        for name, level in self.module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the stdlib level of *name*; unknown level names mean INFO."""
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    def _processors(self) -> list[structlog.types.Processor]:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer() if self.format == "json" else structlog.dev.ConsoleRenderer()
        )
        return [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ]

    def _install_handler(self) -> None:
        library_logger = logging.getLogger(LIBRARY_LOGGER)
        for handler in list(library_logger.handlers):
            if getattr(handler, "_flycache_owned", False):
                library_logger.removeHandler(handler)

        handler = logging.StreamHandler(self._stream if self._stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._flycache_owned = True  # type: ignore[attr-defined]
        library_logger.addHandler(handler)
        library_logger.propagate = False
        self._handler = handler
