# wordassist/lookup_coordinator.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Optional

from .context_extractor import Editor, Position, get_root_selection
from .datamuse_api import LexicalClient
from .result_cache import CacheSet, Category
from .settings import Settings
from .ui import Menu, Notifier, Picker

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], Awaitable[List[str]]]
ProcessFn = Callable[..., Awaitable[List[str]]]

NO_WORD_NOTICE = "Oops! Select a word first."
NO_RESULTS_NOTICE = "Oops! No results found."
NO_ALLITERATIONS_NOTICE = "Oops! No alliterative synonyms found."
CACHE_CLEARED_NOTICE = "Cache cleared."
NO_RESULTS_ITEM = "No results found."
NO_WORD_ITEM = "No word under cursor."


@dataclass(frozen=True)
class MenuSection:
    category: Category
    title: str
    icon: str
    setting: str


# editor context menu layout
MENU_SECTIONS = [
    MenuSection(Category.SYNONYM, "Synonyms", "book-plus", "toggle_synonym_editor_menu"),
    MenuSection(Category.ANTONYM, "Antonyms", "book-minus", "toggle_antonym_editor_menu"),
    MenuSection(Category.RHYME, "Rhymes", "book-headphones", "toggle_rhyme_editor_menu"),
]

# command id -> (display name, category or None for alliterative synonyms)
COMMANDS: Dict[str, tuple] = {
    "wordy-syn": ("Synonyms", Category.SYNONYM),
    "wordy-ant": ("Antonyms", Category.ANTONYM),
    "wordy-rhy": ("Rhymes", Category.RHYME),
    "wordy-asyn": ("Alliterative Synonyms", None),
}


def cache_key(word: str) -> List[str]:
    # single-word keys only; the list shape leaves room for compound terms
    return [word.lower()]


def split_alliterative_selection(selection: str) -> tuple:
    """'big brave' -> ('big', 'brave'); a lone word has no root: ('brave', '')."""
    parts = selection.split(" ")
    prior_word = parts[0]
    root_word = parts[1] if len(parts) > 1 else ""
    return prior_word, root_word


class LookupCoordinator:
    def __init__(self, client: LexicalClient, settings: Optional[Settings] = None,
                 caches: Optional[CacheSet] = None) -> None:
        self.client = client
        self.settings = settings or Settings()
        self.caches = caches or CacheSet()

    # -------------------- cache-or-fetch --------------------

    async def get_cache_or_fetch(self, category: Category, word: str, fetch: FetchFn) -> List[str]:
        # bind the cache once so a concurrent clear() cannot redirect the write
        cache = self.caches[category]
        key = cache_key(word)
        cached = cache.get(key)
        if cached:
            logger.debug("Cache hit for %s '%s'", category.value, word)
            return cached

        logger.info("Fetching %s for '%s'", category.value, word)
        results = await fetch(word)
        cache.set(key, results)
        return results

    async def process_synonyms(self, word: str, sentence: str = "") -> List[str]:
        return await self.get_cache_or_fetch(Category.SYNONYM, word, self.client.words_similar_to)

    async def process_antonyms(self, word: str, sentence: str = "") -> List[str]:
        return await self.get_cache_or_fetch(
            Category.ANTONYM, word, lambda w: self.client.words_opposite_to(w, True)
        )

    async def process_rhymes(self, word: str, sentence: str = "") -> List[str]:
        return await self.get_cache_or_fetch(Category.RHYME, word, self.client.words_that_rhyme_with)

    def processor_for(self, category: Category | str) -> ProcessFn:
        return {
            Category.SYNONYM: self.process_synonyms,
            Category.ANTONYM: self.process_antonyms,
            Category.RHYME: self.process_rhymes,
        }[Category(category)]

    def clear_cache(self, notifier: Optional[Notifier] = None) -> None:
        self.caches.clear()
        if notifier is not None:
            notifier.notify(CACHE_CLEARED_NOTICE)

    # -------------------- editor context menu --------------------

    async def populate_editor_menu(self, menu: Menu, editor: Editor, picker: Optional[Picker] = None) -> None:
        """One submenu per enabled category, each filled by create_word_menu."""
        if not self.settings.toggle_editor_menu:
            return
        for section in MENU_SECTIONS:
            if not getattr(self.settings, section.setting):
                continue
            submenu = menu.add_submenu(section.title, icon=section.icon)
            await self.create_word_menu(submenu, editor, self.processor_for(section.category), picker)

    async def create_word_menu(self, menu: Menu, editor: Editor, process: ProcessFn,
                               picker: Optional[Picker] = None) -> None:
        ctx = get_root_selection(editor)
        if not ctx.word:
            menu.add_item(NO_WORD_ITEM)
            return
        results = await process(ctx.word, ctx.sentence)
        self.create_menu_for_words(menu, results, editor, ctx.start, ctx.end, picker)

    def create_menu_for_words(self, menu: Menu, words: List[str], editor: Editor,
                              start: Position, end: Position, picker: Optional[Picker] = None) -> None:
        limit = self.settings.editor_menu_max_results
        if not words:
            menu.add_item(NO_RESULTS_ITEM)
            return

        for word in words[:limit]:
            menu.add_item(word, on_click=_replace_action(editor, word, start, end))

        if len(words) > limit:
            menu.add_separator()
            menu.add_item(
                f"More... ({len(words) - limit})",
                on_click=(lambda: self._pick_and_replace(picker, words, editor, start, end)) if picker else None,
            )

    async def _pick_and_replace(self, picker: Picker, words: List[str], editor: Editor,
                                start: Position, end: Position) -> Optional[str]:
        chosen = await picker.choose(words)
        if chosen is not None:
            editor.replace_range(chosen, start, end)
        return chosen

    # -------------------- command palette --------------------

    async def create_command_modal(self, editor: Editor, process: ProcessFn,
                                   picker: Picker, notifier: Notifier) -> Optional[str]:
        ctx = get_root_selection(editor)
        if not ctx.word:
            notifier.notify(NO_WORD_NOTICE)
            return None
        results = await process(ctx.word, ctx.sentence)
        if not results:
            notifier.notify(NO_RESULTS_NOTICE)
            return None
        return await self._pick_and_replace(picker, results, editor, ctx.start, ctx.end)

    async def alliterative_synonyms(self, editor: Editor, picker: Picker,
                                    notifier: Notifier) -> Optional[str]:
        """Uncached; the pick replaces whatever is selected when it lands."""
        prior_word, root_word = split_alliterative_selection(editor.get_selection())
        if not root_word:
            notifier.notify(NO_WORD_NOTICE)
            return None
        results = await self.client.alliterative_synonyms(prior_word, root_word)
        if not results:
            notifier.notify(NO_ALLITERATIONS_NOTICE)
            return None
        chosen = await picker.choose(results)
        if chosen is not None:
            editor.replace_selection(chosen)
        return chosen

    async def run_command(self, command_id: str, editor: Editor, picker: Picker,
                          notifier: Notifier) -> Optional[str]:
        _, category = COMMANDS[command_id]
        if category is None:
            return await self.alliterative_synonyms(editor, picker, notifier)
        return await self.create_command_modal(editor, self.processor_for(category), picker, notifier)


def _replace_action(editor: Editor, word: str, start: Position, end: Position) -> Callable[[], None]:
    def apply() -> None:
        editor.replace_range(word, start, end)
    return apply
