"""A small streaming XML writer with optional pretty printing."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum, auto
from typing import IO
from xml.sax.saxutils import escape

_ATTR_ENTITIES = {'"': "&quot;"}


class _Kind(Enum):
    TAG = auto()
    COMMENT = auto()


class XmlWriter:
    """Writes XML elements, text and comments to a stream or file.

    ``out`` is a writable text stream or a file path; a path is opened
    for writing and closed again by :meth:`close_tags`. Attributes are
    written sorted by name. With ``pretty``, every tag and comment starts
    on its own line, indented by ``indent`` spaces per nesting level.
    """

    def __init__(
        self,
        out: IO[str] | str | os.PathLike[str],
        pretty: bool = False,
        indent: int = 4,
    ) -> None:
        if indent < 0:
            raise ValueError("indent must not be negative")
        if isinstance(out, (str, os.PathLike)):
            self._out: IO[str] = open(out, "w", encoding="utf-8")
            self._owned = True
        else:
            self._out = out
            self._owned = False
        self._pretty = pretty
        self._indent = indent
        self._stack: list[tuple[_Kind, str]] = []
        self._hanging = False
        self._text_last = False
        self._line_start = True

    def _write(self, text: str) -> None:
        if text:
            self._out.write(text)
            self._line_start = text.endswith("\n")

    def _close_hanging(self) -> None:
        if self._hanging:
            self._write(">")
            self._hanging = False

    def _break(self) -> None:
        if not self._pretty:
            return
        if not self._line_start:
            self._write("\n")
        self._write(" " * (self._indent * len(self._stack)))

    def _in_comment(self) -> bool:
        return bool(self._stack) and self._stack[-1][0] is _Kind.COMMENT

    def put(self, text: str) -> None:
        """Write text as it is, without escaping."""
        self._close_hanging()
        self._write(text)

    def open_tag(self, name: str, attrs: Mapping[str, str] | None = None) -> None:
        """Open an element with the given attributes."""
        if self._in_comment():
            raise ValueError("cannot open a tag inside a comment")
        self._close_hanging()
        self._break()
        parts = [f"<{name}"]
        for key, value in sorted((attrs or {}).items()):
            parts.append(f' {key}="{escape(str(value), _ATTR_ENTITIES)}"')
        self._write("".join(parts))
        self._stack.append((_Kind.TAG, name))
        self._hanging = True
        self._text_last = False

    def open_comment(self) -> None:
        """Open a comment; text written until the next close_tag goes into it."""
        if self._in_comment():
            raise ValueError("comments cannot be nested")
        self._close_hanging()
        self._break()
        self._write("<!--")
        self._stack.append((_Kind.COMMENT, ""))
        self._text_last = False

    def write_text(self, text: str) -> None:
        """Write character data, escaped unless inside a comment."""
        self._close_hanging()
        self._write(text if self._in_comment() else escape(text))
        self._text_last = True

    def close_tag(self) -> None:
        """Close the innermost open element or comment."""
        if not self._stack:
            raise ValueError("no open tag to close")
        kind, name = self._stack.pop()
        if kind is _Kind.COMMENT:
            self._write("-->")
        elif self._hanging:
            self._write("/>")
            self._hanging = False
        else:
            if not self._text_last:
                self._break()
            self._write(f"</{name}>")
        self._text_last = False

    def close_tags(self) -> None:
        """Close everything still open and finish the output."""
        while self._stack:
            self.close_tag()
        if self._pretty and not self._line_start:
            self._write("\n")
        self._out.flush()
        if self._owned:
            self._out.close()