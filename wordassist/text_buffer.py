# wordassist/text_buffer.py
from __future__ import annotations
import re
from typing import List, Optional

from .context_extractor import Position, Span

WORD_RE = re.compile(r"\w+(?:['\-]\w+)*")


class TextBuffer:
    """
    Plain-string editor surface: selection, cursor, word lookup and range
    replacement. Used by the HTTP app and in tests in place of a real editor.
    """

    def __init__(self, text: str = "", cursor: Optional[Position] = None,
                 anchor: Optional[Position] = None) -> None:
        self.text = text
        self.head = self._clip(cursor or Position(0, 0))
        self.anchor = self._clip(anchor) if anchor is not None else self.head

    # ---- geometry ----

    @property
    def lines(self) -> List[str]:
        return self.text.split("\n")

    def _clip(self, pos: Position) -> Position:
        lines = self.lines
        line = min(max(pos.line, 0), len(lines) - 1)
        ch = min(max(pos.ch, 0), len(lines[line]))
        return Position(line, ch)

    def _offset(self, pos: Position) -> int:
        pos = self._clip(pos)
        lines = self.lines
        return sum(len(l) + 1 for l in lines[:pos.line]) + pos.ch

    def _position(self, offset: int) -> Position:
        line = 0
        for text in self.lines:
            if offset <= len(text):
                return Position(line, offset)
            offset -= len(text) + 1
            line += 1
        return self._clip(Position(line, offset))

    # ---- editor surface ----

    def set_selection(self, anchor: Position, head: Optional[Position] = None) -> None:
        self.anchor = self._clip(anchor)
        self.head = self._clip(head) if head is not None else self.anchor

    def get_cursor(self, which: str = "head") -> Position:
        if which == "from":
            return min(self.anchor, self.head)
        if which == "to":
            return max(self.anchor, self.head)
        if which == "anchor":
            return self.anchor
        return self.head

    def get_selection(self) -> str:
        return self.get_range(self.get_cursor("from"), self.get_cursor("to"))

    def get_line(self, line: int) -> str:
        lines = self.lines
        if 0 <= line < len(lines):
            return lines[line]
        return ""

    def get_range(self, start: Position, end: Position) -> str:
        a, b = sorted((self._offset(start), self._offset(end)))
        return self.text[a:b]

    def word_at(self, pos: Position) -> Optional[Span]:
        pos = self._clip(pos)
        for m in WORD_RE.finditer(self.get_line(pos.line)):
            # a cursor touching either edge of a word counts as on it
            if m.start() <= pos.ch <= m.end():
                return Span(Position(pos.line, m.start()), Position(pos.line, m.end()))
        return None

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        a, b = sorted((self._offset(start), self._offset(end)))
        self.text = self.text[:a] + text + self.text[b:]
        self.head = self.anchor = self._position(a + len(text))

    def replace_selection(self, text: str) -> None:
        self.replace_range(text, self.get_cursor("from"), self.get_cursor("to"))
