"""Line normalization for sconfig files.

Responsibilities:
- Read a UTF-8 config file and drop blank lines and comments.
- Collapse unescaped whitespace runs into token boundaries.
- Merge indented continuation lines into the preceding logical line.
- Expand ``source <path>`` directives in place, recursively.

Key types:
- `LogicalLine`: one assembled option statement with its origin line number.

Escapes:
- ``\\#`` is a literal ``#``; the first unescaped ``#`` starts a comment.
- A backslash before whitespace keeps that whitespace inside the token.
- ``\\\\`` is a literal backslash; a backslash before anything else is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import StructureError


_COMMENT = "#"
_ESCAPE = "\\"
_SOURCE_DIRECTIVE = "source"


@dataclass(frozen=True, slots=True)
class LogicalLine:
    """One normalized configuration statement.

    Attributes:
        lineno: 1-based line number in `source` where the statement starts.
        tokens: Key followed by its value tokens; escaped whitespace stays inside a token.
        source: File the statement was read from.
    """

    lineno: int
    tokens: tuple[str, ...]
    source: Path

    @property
    def key(self) -> str:
        """Return the option key (first token)."""

        return self.tokens[0]

    @property
    def values(self) -> list[str]:
        """Return the value tokens following the key."""

        return list(self.tokens[1:])

    @property
    def text(self) -> str:
        """Return the statement with tokens joined by single spaces."""

        return " ".join(self.tokens)


def tokenize(line: str) -> list[str]:
    """Split one trimmed physical line into tokens, honoring escapes and comments."""

    tokens: list[str] = []
    current: list[str] = []
    in_token = False
    index = 0
    while index < len(line):
        char = line[index]
        if char == _ESCAPE:
            following = line[index + 1] if index + 1 < len(line) else ""
            if following and (following in (_COMMENT, _ESCAPE) or following.isspace()):
                current.append(following)
                in_token = True
                index += 2
                continue
            index += 1
            continue
        if char == _COMMENT:
            break
        if char.isspace():
            if in_token:
                tokens.append("".join(current))
                current = []
                in_token = False
        else:
            current.append(char)
            in_token = True
        index += 1

    if in_token:
        tokens.append("".join(current))
    return tokens


def normalize(path: Path | str) -> list[LogicalLine]:
    """Read `path` and return its logical lines in file order.

    Raises:
        OSError: If the file or a sourced file cannot be read.
        UnicodeDecodeError: If a file is not valid UTF-8.
        StructureError: If the first retained line is indented or files source each other.
    """

    return _normalize(Path(path), ())


def _normalize(path: Path, sourcing: tuple[Path, ...]) -> list[LogicalLine]:
    """Normalize one file; `sourcing` holds the files currently being expanded."""

    resolved = path.resolve()
    if resolved in sourcing:
        raise StructureError(f"source loop: {path} is already being sourced")

    content = path.read_text(encoding="utf-8")

    lines: list[LogicalLine] = []
    for lineno, raw in enumerate(content.split("\n"), start=1):
        is_indented = bool(raw) and raw[0].isspace()
        stripped = raw.strip()
        if not stripped or stripped.startswith(_COMMENT):
            continue

        tokens = tokenize(stripped)
        if is_indented:
            if not lines:
                raise StructureError("first line can't be indented")
            if tokens:
                previous = lines[-1]
                lines[-1] = LogicalLine(
                    lineno=previous.lineno,
                    tokens=previous.tokens + tuple(tokens),
                    source=previous.source,
                )
            continue

        if not tokens:
            continue

        if tokens[0] == _SOURCE_DIRECTIVE and len(tokens) > 1:
            sourced_path = Path(" ".join(tokens[1:]))
            lines.extend(_normalize(sourced_path, (*sourcing, resolved)))
            continue

        lines.append(LogicalLine(lineno=lineno, tokens=tuple(tokens), source=path))

    return lines
