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

"""Structured logging helpers for :mod:`leafutils`.

Library modules obtain a :class:`StructuredLogger` through :func:`get_logger`
and emit records carrying an ``event`` name plus a ``context`` mapping. The
library never installs handlers on its own; applications call
:func:`configure_logging` (or their own setup) to see the records.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from collections.abc import Mapping, MutableMapping
from datetime import UTC, datetime
from typing import Any, cast, override

__all__ = [
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]

LOG_LEVEL_ENV = "LEAFUTILS_LOG_LEVEL"
LOG_FORMAT_ENV = "LEAFUTILS_LOG_FORMAT"


class StructuredLogger(logging.LoggerAdapter[logging.Logger]):
    """Logger adapter that requires an ``event`` name on every record."""

    def __init__(
        self,
        logger: logging.Logger,
        *,
        context: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(logger, dict(context) if context is not None else {})

    def bind(self, **context: object) -> StructuredLogger:
        """Return a new adapter with ``context`` merged into the bound payload."""

        bound = cast(Mapping[str, object], self.extra)
        return type(self)(self.logger, context={**dict(bound), **context})

    @override
    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra_obj = kwargs.get("extra")
        if extra_obj is None:
            extra_obj = {}
        if not isinstance(extra_obj, MutableMapping):
            raise TypeError("extra must be a mutable mapping when provided.")
        extra = cast(MutableMapping[str, object], extra_obj)

        payload: dict[str, object] = dict(cast(Mapping[str, object], self.extra))

        inline = kwargs.pop("context", None)
        if inline is not None:
            if not isinstance(inline, Mapping):
                raise TypeError("context must be a mapping when provided.")
            payload.update(cast(Mapping[str, object], inline))

        event = kwargs.pop("event", None)
        if event is None:
            event = extra.pop("event", None)
        if not isinstance(event, str):
            raise TypeError("Structured logs require an 'event' field.")

        payload.update({key: value for key, value in extra.items() if key != "event"})
        kwargs["extra"] = {"event": event, "context": payload}
        return msg, kwargs


def get_logger(
    name: str,
    *,
    logger_override: logging.Logger
    | logging.LoggerAdapter[logging.Logger]
    | None = None,
    context: Mapping[str, object] | None = None,
) -> StructuredLogger:
    """Return a :class:`StructuredLogger` scoped to ``name``.

    ``logger_override`` lets callers route records to a logger of their own.
    When it is an adapter its ``extra`` payload is kept, with ``context``
    layered on top.
    """

    merged: dict[str, object] = {}
    if logger_override is None:
        base = logging.getLogger(name)
    elif isinstance(logger_override, logging.Logger):
        base = logger_override
    else:
        base = _unwrap_logger(logger_override)
        adapter_extra = getattr(logger_override, "extra", None)
        if isinstance(adapter_extra, Mapping):
            merged.update(cast(Mapping[str, object], adapter_extra))
    merged.update(context or {})
    return StructuredLogger(base, context=merged)


def configure_logging(
    *,
    level: int | str | None = None,
    json_mode: bool | None = None,
    env: Mapping[str, str] | None = None,
    force: bool = False,
) -> None:
    """Install a stderr handler on the root logger.

    ``level`` falls back to ``LEAFUTILS_LOG_LEVEL`` and then ``INFO``.
    ``json_mode`` falls back to ``LEAFUTILS_LOG_FORMAT`` (``json`` selects the
    JSON formatter, anything else the text one).

    When the root logger already has handlers only its level is adjusted,
    unless ``force=True``.
    """

    env = os.environ if env is None else env
    resolved_level = _coerce_level(level or env.get(LOG_LEVEL_ENV) or logging.INFO)
    if json_mode is None:
        json_mode = env.get(LOG_FORMAT_ENV, "").strip().lower() == "json"

    root = logging.getLogger()
    if root.handlers and not force:
        root.setLevel(resolved_level)
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {
                    "()": "leafutils.logging._TextFormatter",
                    "fmt": "%(asctime)s %(levelname)s %(name)s %(event)s %(message)s %(context)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {"()": "leafutils.logging._JsonFormatter"},
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


class _TextFormatter(logging.Formatter):
    """Plain formatter tolerating records emitted without an adapter."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "event"):
            record.event = "-"
        if not hasattr(record, "context"):
            record.context = {}
        return super().format(record)


class _JsonFormatter(logging.Formatter):
    """Formatter that renders structured records as compact JSON."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            payload["event"] = event
        context = getattr(record, "context", None)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=repr, separators=(",", ":"))


def _unwrap_logger(adapter: logging.LoggerAdapter[Any]) -> logging.Logger:
    logger_obj = adapter.logger
    while isinstance(logger_obj, logging.LoggerAdapter):
        logger_obj = cast(logging.LoggerAdapter[Any], logger_obj).logger
    if not isinstance(logger_obj, logging.Logger):
        raise TypeError("LoggerAdapter.logger must be a logging.Logger instance.")
    return logger_obj


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelNamesMapping().get(level.strip().upper())
    if resolved is None:
        raise TypeError(f"Unknown log level: {level!r}")
    return resolved
