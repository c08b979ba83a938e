# wordassist/datamuse_api.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Protocol

import aiohttp

logger = logging.getLogger(__name__)

DATAMUSE_URL = "https://api.datamuse.com/words"
_DEFAULT_MAX = 100
# how many synonyms are expanded when a non-strict antonym lookup widens the search
_LOOSE_ANTONYM_SEEDS = 3


class LexicalClient(Protocol):
    async def words_similar_to(self, word: str) -> List[str]: ...

    async def words_opposite_to(self, word: str, strict: bool = True) -> List[str]: ...

    async def words_that_rhyme_with(self, word: str) -> List[str]: ...

    async def alliterative_synonyms(self, prior_word: str, root_word: str) -> List[str]: ...


def _dedupe(words: List[str]) -> List[str]:
    seen: set[str] = set()
    out: List[str] = []
    for w in words:
        if w and w not in seen:
            seen.add(w)
            out.append(w)
    return out


class DatamuseApi:
    """
    Async client for the Datamuse word-finding API. Network and HTTP errors
    are raised as aiohttp exceptions; callers decide how to surface them.
    """

    def __init__(self, base_url: str = DATAMUSE_URL, max_results: int = _DEFAULT_MAX,
                 timeout: float = 15.0, session: Optional[aiohttp.ClientSession] = None) -> None:
        self.base_url = base_url
        self.max_results = max_results
        self.timeout = timeout
        self._session = session

    async def _query(self, params: Dict[str, str]) -> List[str]:
        params = {**params, "max": str(self.max_results)}
        logger.info("Datamuse query %s", params)
        if self._session is not None:
            return await self._fetch(self._session, params)
        # one short-lived session per call keeps the client usable across event loops
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
            return await self._fetch(session, params)

    async def _fetch(self, session: aiohttp.ClientSession, params: Dict[str, str]) -> List[str]:
        async with session.get(self.base_url, params=params) as resp:
            resp.raise_for_status()
            data = await resp.json(content_type=None)
        if not isinstance(data, list):
            return []
        return _dedupe([
            item.get("word", "")
            for item in data
            if isinstance(item, dict) and isinstance(item.get("word"), str)
        ])

    async def words_similar_to(self, word: str) -> List[str]:
        return await self._query({"ml": word})

    async def words_opposite_to(self, word: str, strict: bool = True) -> List[str]:
        antonyms = await self._query({"rel_ant": word})
        if strict:
            return antonyms
        # loose mode: also take antonyms of the closest synonyms
        for syn in (await self._query({"rel_syn": word}))[:_LOOSE_ANTONYM_SEEDS]:
            antonyms.extend(await self._query({"rel_ant": syn}))
        return _dedupe([w for w in antonyms if w != word])

    async def words_that_rhyme_with(self, word: str) -> List[str]:
        return await self._query({"rel_rhy": word})

    async def alliterative_synonyms(self, prior_word: str, root_word: str) -> List[str]:
        """Words meaning like `root_word` that start with `prior_word`'s first letter."""
        prior = prior_word.strip()
        if not prior:
            return await self.words_similar_to(root_word)
        return await self._query({"ml": root_word, "sp": f"{prior[0].lower()}*"})
