"""Parse driver populating a configuration target from a config file.

Responsibilities:
- Normalize the file into logical lines before touching the target.
- Resolve each line's key to a field and dispatch its values.
- Stop at the first failing line and annotate the error with file and line.

Fields set by earlier lines stay set when a later line fails, and fields
without a matching line keep whatever value the caller gave them.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from pathlib import Path

from .dispatch import FieldHandlers, set_field
from .errors import AnnotationError, HandlerError, ParseError, SconfigError
from .fields import fields
from .lines import LogicalLine, normalize
from .naming import Naming, resolve_field
from .telemetry.logger import ParseLogger


_DEFAULT_LOGGER = ParseLogger()

ConfigError = OSError | UnicodeDecodeError | SconfigError


def _apply_mapping_line(
    target: MutableMapping[str, list[str]],
    line: LogicalLine,
    field_handlers: FieldHandlers | None,
) -> None:
    """Append a line's values to a mapping target under its verbatim key."""

    if field_handlers and line.key in field_handlers:
        try:
            field_handlers[line.key](line.values)
        except Exception as exc:
            raise HandlerError(field_name=line.key, detail=str(exc)) from exc
        return
    target.setdefault(line.key, []).extend(line.values)


def parse(
    target: object,
    path: Path | str,
    field_handlers: FieldHandlers | None = None,
    *,
    naming: Naming = "snake",
    run_logger: ParseLogger | None = None,
) -> ConfigError | None:
    """Read `path` and populate `target` from it.

    Args:
        target: Object with annotated attributes, or a mutable mapping of lists.
        path: Config file to read.
        field_handlers: Callables keyed by resolved field name that replace type
            conversion for that field; they receive the line's value tokens.
        naming: Attribute naming convention option keys are transformed into.
        run_logger: Destination for stage events; defaults to the package logger.

    Returns:
        `None` on success. Otherwise the error: the read or structural error
        unchanged, an `AnnotationError` when the target's fields cannot be
        resolved, or a `ParseError` naming the file and line for any failure
        while applying a line.
    """

    events = run_logger or _DEFAULT_LOGGER
    source = Path(path)

    events.log_stage_start("normalize", path=source)
    try:
        lines = normalize(source)
    except (OSError, UnicodeDecodeError, SconfigError) as exc:
        events.log_stage_failure("normalize", type(exc).__name__, path=source)
        return exc
    events.log_stage_complete("normalize", path=source, lines=len(lines))

    events.log_stage_start("dispatch", path=source)
    try:
        slots = None if isinstance(target, MutableMapping) else fields(target)
    except AnnotationError as exc:
        events.log_stage_failure("dispatch", type(exc).__name__, path=source)
        return exc
    for line in lines:
        try:
            if slots is None:
                _apply_mapping_line(target, line, field_handlers)  # type: ignore[arg-type]
                continue
            field_name = resolve_field(line.key, slots, naming)
            set_field(slots[field_name], line.values, field_handlers)
        except Exception as exc:
            events.log_stage_failure(
                "dispatch",
                type(exc).__name__,
                path=line.source,
                line=line.lineno,
            )
            error = ParseError(
                source=line.source,
                line=line.lineno,
                key=line.key,
                detail=str(exc),
            )
            error.__cause__ = exc
            return error
    events.log_stage_complete("dispatch", path=source, lines=len(lines))
    return None


def must_parse(
    target: object,
    path: Path | str,
    field_handlers: FieldHandlers | None = None,
    *,
    naming: Naming = "snake",
    run_logger: ParseLogger | None = None,
) -> None:
    """Behave like `parse`, but raise the error instead of returning it."""

    error = parse(
        target,
        path,
        field_handlers,
        naming=naming,
        run_logger=run_logger,
    )
    if error is not None:
        raise error
