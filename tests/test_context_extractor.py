import pytest

from wordassist.context_extractor import (
    EMPTY_CONTEXT,
    Position,
    get_root_selection,
    sentence_in_line,
    trim_sentence,
)
from wordassist.text_buffer import TextBuffer

LINE = "The quick brown fox jumps. Over the lazy dog."


def test_cursor_inside_word_stops_at_period():
    ctx = get_root_selection(TextBuffer(LINE, cursor=Position(0, 22)))
    assert ctx.word == "jumps"
    assert ctx.start == Position(0, 20)
    assert ctx.end == Position(0, 25)
    assert ctx.sentence == "The quick brown fox jumps"


def test_word_after_period_starts_new_sentence():
    ctx = get_root_selection(TextBuffer(LINE, cursor=Position(0, 37)))
    assert ctx.word == "lazy"
    assert ctx.sentence == "Over the lazy dog"


def test_selection_is_used_verbatim():
    buf = TextBuffer("Hello there world")
    buf.set_selection(Position(0, 6), Position(0, 11))
    ctx = get_root_selection(buf)
    assert ctx.word == "there"
    assert (ctx.start, ctx.end) == (Position(0, 6), Position(0, 11))
    assert ctx.sentence == "Hello there world"


def test_backwards_selection_is_normalised():
    buf = TextBuffer("Hello there world")
    buf.set_selection(Position(0, 11), Position(0, 6))
    ctx = get_root_selection(buf)
    assert ctx.word == "there"
    assert ctx.start == Position(0, 6)


def test_cursor_over_whitespace_gives_empty_context():
    ctx = get_root_selection(TextBuffer("a   b", cursor=Position(0, 2)))
    assert ctx == EMPTY_CONTEXT
    assert ctx.word == ""
    assert ctx.sentence == ""
    assert ctx.start == ctx.end == Position(0, 0)


def test_context_is_bounded_to_five_boundaries():
    line = "one two three four five six seven eight nine ten eleven twelve"
    start = line.index("seven")
    assert sentence_in_line(line, start, start + 5) == "three four five six seven eight nine ten eleven"


def test_exclamation_and_question_marks_end_sentences():
    assert sentence_in_line("Wow! This is great", 13, 18) == "This is great"
    assert sentence_in_line("Is it? Yes it is", 3, 5) == "Is it"


def test_word_at_line_start():
    ctx = get_root_selection(TextBuffer("Hi there", cursor=Position(0, 0)))
    assert ctx.word == "Hi"
    assert ctx.sentence == "Hi there"


def test_only_the_cursor_line_is_scanned():
    buf = TextBuffer("first line here\nsecond line", cursor=Position(1, 2))
    ctx = get_root_selection(buf)
    assert ctx.word == "second"
    assert ctx.start == Position(1, 0)
    assert ctx.sentence == "second line"


@pytest.mark.parametrize("start,end", [(0, 0), (-3, -1), (3, 3), (10, 12), (2, 50)])
def test_scan_stays_inside_line(start, end):
    for line in ("", "abc", "a.", ". ! ?"):
        result = sentence_in_line(line, start, end)
        assert isinstance(result, str)
        assert len(result) <= len(line)


@pytest.mark.parametrize("text,cursor", [
    (LINE, 22),
    ("one two three four five six seven eight nine ten eleven twelve", 30),
    ("Wow! This is great", 15),
])
def test_sentence_extraction_is_idempotent(text, cursor):
    first = get_root_selection(TextBuffer(text, cursor=Position(0, cursor))).sentence
    word = get_root_selection(TextBuffer(text, cursor=Position(0, cursor))).word
    again = get_root_selection(TextBuffer(first, cursor=Position(0, first.index(word) + 1))).sentence
    assert again == first


def test_trim_removes_punctuation_runs():
    assert trim_sentence(" ..! hello world?! ") == "hello world"
    assert trim_sentence("...") == ""
