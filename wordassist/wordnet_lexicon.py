# wordassist/wordnet_lexicon.py
from __future__ import annotations
import logging
import os
from typing import Dict, List, Optional

import nltk
import nltk.corpus

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "nltk_data")


def _ensure_corpus(name: str, packages: List[str]):
    """Import an NLTK corpus, downloading it into the local data dir on first use."""
    os.makedirs(_DATA_DIR, exist_ok=True)
    if _DATA_DIR not in nltk.data.path:
        nltk.data.path.insert(0, _DATA_DIR)
    corpus = getattr(nltk.corpus, name)
    try:
        corpus.fileids()
    except LookupError:
        logger.info("Downloading NLTK data %s into %s", packages, _DATA_DIR)
        for pkg in packages:
            nltk.download(pkg, download_dir=_DATA_DIR, quiet=True)
        corpus = getattr(nltk.corpus, name)
        corpus.fileids()
    return corpus


def _dedupe(words, exclude: str = "") -> List[str]:
    seen: set[str] = set()
    out: List[str] = []
    for w in words:
        if w and w != exclude and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def _lemma_text(lemma) -> str:
    return lemma.name().replace("_", " ").lower()


def rhyme_part(phones: List[str]) -> str:
    """Phones from the last stressed vowel to the end (CMU dict notation)."""
    for i in range(len(phones) - 1, -1, -1):
        if phones[i][-1] in "12":
            return " ".join(phones[i:])
    for i in range(len(phones) - 1, -1, -1):
        if phones[i][-1].isdigit():
            return " ".join(phones[i:])
    return " ".join(phones)


class WordNetLexicon:
    """
    Offline lexical client: WordNet for synonyms/antonyms and the CMU
    pronouncing dictionary for rhymes. Same async surface as DatamuseApi.
    """

    def __init__(self, wordnet=None, cmudict=None) -> None:
        self._wn = wordnet
        self._cmu = cmudict
        self._pron: Optional[Dict[str, List[List[str]]]] = None
        self._rhymes: Optional[Dict[str, List[str]]] = None

    @property
    def wn(self):
        if self._wn is None:
            self._wn = _ensure_corpus("wordnet", ["wordnet", "omw-1.4"])
        return self._wn

    def _pronunciations(self) -> Dict[str, List[List[str]]]:
        if self._pron is None:
            cmu = self._cmu if self._cmu is not None else _ensure_corpus("cmudict", ["cmudict"])
            self._pron = cmu.dict()
            index: Dict[str, List[str]] = {}
            for word, prons in self._pron.items():
                for phones in prons:
                    index.setdefault(rhyme_part(phones), []).append(word)
            self._rhymes = index
        return self._pron

    # ---- lookups ----

    def _synonyms(self, word: str) -> List[str]:
        out: List[str] = []
        for s in self.wn.synsets(word):
            out.extend(_lemma_text(l) for l in s.lemmas())
        return _dedupe(out, exclude=word.lower())

    async def words_similar_to(self, word: str) -> List[str]:
        return self._synonyms(word)

    async def words_opposite_to(self, word: str, strict: bool = True) -> List[str]:
        key = word.lower().replace(" ", "_")
        out: List[str] = []
        for s in self.wn.synsets(word):
            for l in s.lemmas():
                if l.name().lower() == key:
                    out.extend(_lemma_text(a) for a in l.antonyms())
            if not strict:
                # indirect antonyms through "similar to" satellites
                for sim in s.similar_tos():
                    for l in sim.lemmas():
                        out.extend(_lemma_text(a) for a in l.antonyms())
        return _dedupe(out, exclude=word.lower())

    async def words_that_rhyme_with(self, word: str) -> List[str]:
        key = word.lower()
        prons = self._pronunciations().get(key, [])
        out: List[str] = []
        for phones in prons:
            out.extend(self._rhymes.get(rhyme_part(phones), []))
        return _dedupe(out, exclude=key)

    async def alliterative_synonyms(self, prior_word: str, root_word: str) -> List[str]:
        prior = prior_word.strip().lower()
        synonyms = self._synonyms(root_word)
        if not prior:
            return synonyms
        return [w for w in synonyms if w.startswith(prior[0])]
