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

"""Structured logging helpers for :mod:`memtree`."""

from __future__ import annotations

import json
import logging
import logging.config
import os
from collections.abc import Mapping, MutableMapping
from typing import Any, cast, override

__all__ = [
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]

_LOG_LEVEL_ENV = "MEMTREE_LOG_LEVEL"
_LOG_FORMAT_ENV = "MEMTREE_LOG_FORMAT"
_TEXT_FORMAT = "%(levelname)s %(name)s %(event)s: %(message)s %(context)s"


class StructuredLogger(logging.LoggerAdapter[logging.Logger]):
    """Adapter that turns ``event=`` and ``context=`` keywords into record fields.

    The fixed context given at construction is merged under each call's own
    ``context`` mapping. Calls without an ``event`` are rejected.
    """

    def __init__(
        self,
        logger: logging.Logger,
        *,
        context: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(logger, dict(context or {}))

    @override
    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        event = kwargs.pop("event", None)
        if not isinstance(event, str):
            raise TypeError("Structured logs require an 'event' field.")
        inline = kwargs.pop("context", None) or {}
        if not isinstance(inline, Mapping):
            raise TypeError("context must be a mapping when provided.")

        fields = {**cast(Mapping[str, object], self.extra), **inline}
        kwargs["extra"] = {"event": event, "context": fields}
        return msg, kwargs


def get_logger(
    name: str, *, context: Mapping[str, object] | None = None
) -> StructuredLogger:
    """Return a :class:`StructuredLogger` for ``name`` carrying ``context``."""
    return StructuredLogger(logging.getLogger(name), context=context)


def configure_logging(
    *,
    level: int | str | None = None,
    json_mode: bool | None = None,
    env: Mapping[str, str] | None = None,
) -> None:
    """Send memtree records to stderr as text or JSON lines.

    Unset arguments fall back to ``MEMTREE_LOG_LEVEL`` and
    ``MEMTREE_LOG_FORMAT`` (``json`` or ``text``). When the root logger
    already has handlers only its level changes.
    """

    env = os.environ if env is None else env
    resolved_level = _coerce_level(level or env.get(_LOG_LEVEL_ENV) or logging.INFO)
    if json_mode is None:
        json_mode = env.get(_LOG_FORMAT_ENV, "text").lower() == "json"

    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(resolved_level)
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {"format": _TEXT_FORMAT},
                "json": {"()": _JsonFormatter},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "json" if json_mode else "text",
                }
            },
            "root": {"handlers": ["stderr"], "level": resolved_level},
        }
    )


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: level, logger, event, message, context."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", None),
            "message": record.getMessage(),
            "context": getattr(record, "context", None) or {},
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=repr, separators=(",", ":"))


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelNamesMapping().get(level.upper())
    if resolved is None:
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved
