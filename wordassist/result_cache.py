# wordassist/result_cache.py
from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, List, Protocol, Sequence

logger = logging.getLogger(__name__)


class Category(str, Enum):
    SYNONYM = "synonym"
    ANTONYM = "antonym"
    RHYME = "rhyme"


class ResultCache(Protocol):
    def get(self, key: Sequence[str]) -> List[str]: ...

    def set(self, key: Sequence[str], results: List[str]) -> None: ...


class SimpleWordCache:
    """
    Word -> results memo. Keys are sequences so compound terms can be added
    later, but only key[0] is consulted: matching is single-word only.
    """

    def __init__(self) -> None:
        self.map: Dict[str, List[str]] = {}

    def get(self, key: Sequence[str]) -> List[str]:
        # an empty list doubles as "not fetched yet"
        return list(self.map.get(key[0]) or [])

    def set(self, key: Sequence[str], results: List[str]) -> None:
        self.map[key[0]] = list(results)

    def __len__(self) -> int:
        return len(self.map)


def _fresh_caches() -> Dict[Category, ResultCache]:
    return {category: SimpleWordCache() for category in Category}


class CacheSet:
    """One independent cache per category. clear() swaps them all at once."""

    def __init__(self) -> None:
        self._caches: Dict[Category, ResultCache] = _fresh_caches()

    def __getitem__(self, category: Category | str) -> ResultCache:
        return self._caches[Category(category)]

    def clear(self) -> None:
        # single assignment; holders of an old cache keep writing into it
        self._caches = _fresh_caches()
        logger.info("Result caches cleared")
