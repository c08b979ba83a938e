from typing import Dict, List

import pytest


class FakeLexicon:
    """In-memory lexical client that records every call."""

    def __init__(self, results: Dict[str, Dict[str, List[str]]] = None, error: Exception = None):
        self.results = results or {}
        self.error = error
        self.calls = []

    def _answer(self, kind: str, word: str) -> List[str]:
        self.calls.append((kind, word))
        if self.error is not None:
            raise self.error
        return list(self.results.get(kind, {}).get(word, []))

    async def words_similar_to(self, word):
        return self._answer("syn", word)

    async def words_opposite_to(self, word, strict=True):
        return self._answer("ant" if strict else "ant-loose", word)

    async def words_that_rhyme_with(self, word):
        return self._answer("rhy", word)

    async def alliterative_synonyms(self, prior_word, root_word):
        return self._answer("asyn", f"{prior_word} {root_word}")


@pytest.fixture
def lexicon():
    return FakeLexicon({
        "syn": {"happy": ["glad", "cheerful", "content"], "jumps": ["leaps", "springs"]},
        "ant": {"happy": ["sad", "unhappy"]},
        "rhy": {"happy": ["snappy", "sappy"]},
        "asyn": {"big brave": ["bold", "brash"]},
    })


class ScriptedPicker:
    """Records what it was offered and answers with a fixed choice."""

    def __init__(self, choice=None):
        self.choice = choice
        self.offered = []

    async def choose(self, words):
        self.offered.append(list(words))
        return self.choice


@pytest.fixture
def make_picker():
    return ScriptedPicker
