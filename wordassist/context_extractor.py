# wordassist/context_extractor.py
from __future__ import annotations
import re
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Protocol

SENTENCE_ENDINGS = (".", "!", "?")
MAX_CONTEXT_WORDS = 5

_TRIM_RE = re.compile(r"^[.!?\s]+|[.!?\s]+$")


@dataclass(frozen=True, order=True)
class Position:
    line: int
    ch: int


@dataclass(frozen=True)
class Span:
    start: Position
    end: Position


@dataclass(frozen=True)
class WordContext:
    word: str
    start: Position
    end: Position
    sentence: str

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "from": asdict(self.start),
            "to": asdict(self.end),
            "sentence": self.sentence,
        }


EMPTY_CONTEXT = WordContext(word="", start=Position(0, 0), end=Position(0, 0), sentence="")


class Editor(Protocol):
    """What the host text surface has to provide."""

    def get_selection(self) -> str: ...

    def get_cursor(self, which: str = "head") -> Position: ...

    def word_at(self, pos: Position) -> Optional[Span]: ...

    def get_line(self, line: int) -> str: ...

    def get_range(self, start: Position, end: Position) -> str: ...

    def replace_range(self, text: str, start: Position, end: Position) -> None: ...

    def replace_selection(self, text: str) -> None: ...


# -------------------- Sentence scan --------------------

def find_word_boundary(text: str, start: int, direction: int) -> int:
    """
    Walk from `start` in `direction` (-1 or 1) until a sentence ending,
    MAX_CONTEXT_WORDS whitespace boundaries, or the edge of `text`.
    """
    count = 0
    index = start
    while count < MAX_CONTEXT_WORDS and 0 <= index < len(text):
        if text[index] in SENTENCE_ENDINGS:
            return index
        if text[index].isspace():
            count += 1
        index += direction
    return index + 1 if direction == -1 else index


def trim_sentence(text: str) -> str:
    return _TRIM_RE.sub("", text)


def sentence_in_line(line: str, start_ch: int, end_ch: int) -> str:
    start = find_word_boundary(line, start_ch, -1)
    end = find_word_boundary(line, end_ch, 1)
    start = min(max(start, 0), len(line))
    end = min(max(end, 0), len(line))
    if start > end:
        start, end = end, start
    return trim_sentence(line[start:end])


def get_sentence_under_cursor(editor: Editor, start: Position, end: Position) -> str:
    """Bounded context around a span; never looks past the span's own line."""
    line = editor.get_line(start.line)
    end_ch = end.ch if end.line == start.line else len(line)
    return sentence_in_line(line, start.ch, end_ch)


# -------------------- Word resolution --------------------

def get_root_selection(editor: Editor) -> WordContext:
    selection = editor.get_selection()
    if selection:
        start = editor.get_cursor("from")
        end = editor.get_cursor("to")
        sentence = get_sentence_under_cursor(editor, start, end)
        return WordContext(word=selection, start=start, end=end, sentence=sentence)

    word_range = editor.word_at(editor.get_cursor())
    if word_range is None:
        return EMPTY_CONTEXT

    word = editor.get_range(word_range.start, word_range.end)
    sentence = get_sentence_under_cursor(editor, word_range.start, word_range.end)
    return WordContext(word=word, start=word_range.start, end=word_range.end, sentence=sentence)
