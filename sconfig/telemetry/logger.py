"""Structured parse logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level parse events through `loguru`.
- Keep values out of failure events; only error types and line numbers are logged.

The package disables its `loguru` logger on import. Each `ParseLogger` given a
sink enables it while attached; the logger is disabled again once the last such
sink is closed, so a caller enabling ``sconfig`` directly should do so after
closing its parse loggers.
"""

from __future__ import annotations

from typing import TextIO

from loguru import logger


_LOGGER_NAME = "sconfig"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class ParseLogger:
    """Emit deterministic stage events for one or more parse invocations."""

    _attached_sinks = 0

    def __init__(self, sink: TextIO | None = None, level: str = "DEBUG") -> None:
        """Attach `sink` (if given) and enable this package's log records."""

        self._handler_id: int | None = None
        if sink is not None:
            if ParseLogger._attached_sinks == 0:
                logger.enable(_LOGGER_NAME)
            ParseLogger._attached_sinks += 1
            self._handler_id = logger.add(
                sink,
                format="{message}",
                level=level,
                colorize=False,
                filter=_LOGGER_NAME,
            )

    def close(self) -> None:
        """Detach this logger's sink; the last detached sink disables the package logger."""

        if self._handler_id is None:
            return
        logger.remove(self._handler_id)
        self._handler_id = None
        ParseLogger._attached_sinks -= 1
        if ParseLogger._attached_sinks == 0:
            logger.disable(_LOGGER_NAME)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured parse log line."""

        line = f"[parse] level={level} stage={stage} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start event."""

        self._emit("DEBUG", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event."""

        self._emit("DEBUG", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str, **context: object) -> None:
        """Emit a stage-failure event without sensitive value details."""

        self._emit("WARNING", "failure", stage, error_type=error_type, **context)
