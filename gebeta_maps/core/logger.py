"""
SDK logging
===========

Thin, debug-gated facade over the stdlib ``gebeta_maps`` logger.

``info`` and ``debug`` entries are dropped unless the logger was created
with ``debug=True``; ``error`` entries always pass through.  Each entry is a
message plus a metadata mapping, which is rendered into the message and also
attached to the record as ``sdk_meta`` for handlers that want it raw.

The SDK never installs handlers or changes logger levels; configuring output
is left to the application.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

SDK_LOGGER_NAME = "gebeta_maps"


class LoggerProtocol(Protocol):
    """Capability the request client logs through."""

    def info(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        ...

    def error(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        ...

    def debug(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        ...


def _render(meta: Mapping[str, Any]) -> str:
    return " ".join(f"{key}={value!r}" for key, value in meta.items())


class SDKLogger:
    """Leveled structured logger with an on/off switch for verbose output."""

    def __init__(self, debug: bool = False, name: str = SDK_LOGGER_NAME) -> None:
        self.debug_mode = bool(debug)
        self._logger = logging.getLogger(name)

    def _emit(self, level: int, message: str, meta: Mapping[str, Any] | None) -> None:
        meta = dict(meta or {})
        if meta:
            self._logger.log(level, "%s %s", message, _render(meta), extra={"sdk_meta": meta})
        else:
            self._logger.log(level, "%s", message, extra={"sdk_meta": meta})

    def info(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        if self.debug_mode:
            self._emit(logging.INFO, message, meta)

    def error(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        self._emit(logging.ERROR, message, meta)

    def debug(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        if self.debug_mode:
            self._emit(logging.DEBUG, message, meta)


class NullLogger:
    """Logger that discards everything."""

    def info(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        pass

    def error(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        pass

    def debug(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        pass


__all__ = ["LoggerProtocol", "SDKLogger", "NullLogger", "SDK_LOGGER_NAME"]
