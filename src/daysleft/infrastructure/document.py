"""HTML rendering targets.

A target is anything with ``set_text``. :class:`HtmlDocument` resolves
targets by element ``id`` inside an HTML file parsed with BeautifulSoup.

BeautifulSoup only locates the element. Writes splice the new text into
the original markup between the element's start and end tags, so every
byte outside the element is kept as written.

INVARIANT: A write is all-or-nothing. Targets are resolved before any text
is produced, and documents are saved through a temp file + ``os.replace``
that keeps the file's permission bits.
"""

from __future__ import annotations

import html
import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

_ATTRS = r"""(?:[^>"']|"[^"]*"|'[^']*')*"""
_START_TAG = re.compile(rf"<[^\s/>]+{_ATTRS}>")


class TargetNotFound(LookupError):
    """No writable element with the requested id exists in the document."""

    def __init__(
        self, element_id: str, source: str | None = None, reason: str | None = None
    ) -> None:
        self.element_id = element_id
        self.source = source
        where = f" in {source}" if source else ""
        if reason:
            message = f"Element {element_id!r}{where} {reason}"
        else:
            message = f"No element with id {element_id!r}{where}"
        super().__init__(message)


@runtime_checkable
class TextSink(Protocol):
    """Anything that can display a line of text."""

    def set_text(self, text: str) -> None: ...


class ElementTarget:
    """One element of an :class:`HtmlDocument`, addressed by id."""

    def __init__(self, document: HtmlDocument, element_id: str) -> None:
        self._document = document
        self.element_id = element_id

    @property
    def text(self) -> str:
        return self._document.text_of(self.element_id)

    def set_text(self, text: str) -> None:
        """Replace the element's contents with *text* and persist the document."""
        self._document.replace_text(self.element_id, text)


class HtmlDocument:
    """An HTML file whose elements can receive rendered text."""

    def __init__(self, path: Path, markup: str) -> None:
        self.path = path
        self._markup = markup
        self._soup = BeautifulSoup(markup, "html.parser")

    @classmethod
    def load(cls, path: Path) -> HtmlDocument:
        """Read the HTML file at *path*, line endings untouched."""
        with path.open(encoding="utf-8", newline="") as fh:
            return cls(path, fh.read())

    def target(self, element_id: str) -> ElementTarget:
        """Resolve the element with ``id=element_id``.

        Raises:
            TargetNotFound: if the document holds no such element, or the
                element has no closing tag to write between.
        """
        self._content_span(element_id)
        return ElementTarget(self, element_id)

    def text_of(self, element_id: str) -> str:
        return self._find(element_id).get_text()

    def replace_text(self, element_id: str, text: str) -> None:
        """Swap the contents of *element_id* for escaped *text* and save."""
        start, end = self._content_span(element_id)
        markup = self._markup[:start] + html.escape(text, quote=False) + self._markup[end:]
        self._write(markup)
        self._markup = markup
        self._soup = BeautifulSoup(markup, "html.parser")

    def render(self) -> str:
        return self._markup

    # ── Internals ────────────────────────────────────────────────────

    def _find(self, element_id: str) -> Tag:
        element = self._soup.find(id=element_id)
        if not isinstance(element, Tag):
            raise TargetNotFound(element_id, str(self.path))
        return element

    def _offset(self, line: int, column: int) -> int:
        """Turn the parser's 1-based line and 0-based column into an index."""
        offset = 0
        for _ in range(line - 1):
            offset = self._markup.index("\n", offset) + 1
        return offset + column

    def _content_span(self, element_id: str) -> tuple[int, int]:
        """Indices of the text between the element's start and end tags."""
        element = self._find(element_id)
        if element.sourceline is None or element.sourcepos is None:
            raise TargetNotFound(element_id, str(self.path), "has no source position")

        begin = self._offset(element.sourceline, element.sourcepos)
        start_tag = _START_TAG.match(self._markup, begin)
        if start_tag is None or start_tag.group().endswith("/>"):
            raise TargetNotFound(element_id, str(self.path), "has no closing tag")

        tags = re.compile(rf"<(/?){re.escape(element.name)}(?=[\s/>]){_ATTRS}>", re.IGNORECASE)
        depth = 1
        for match in tags.finditer(self._markup, start_tag.end()):
            if match.group(1):
                depth -= 1
                if depth == 0:
                    return start_tag.end(), match.start()
            elif not match.group().endswith("/>"):
                depth += 1
        raise TargetNotFound(element_id, str(self.path), "has no closing tag")

    def _write(self, markup: str) -> None:
        """Atomically replace the file with *markup*, keeping its mode."""
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(markup)
            shutil.copymode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("Saved document %s", self.path)
