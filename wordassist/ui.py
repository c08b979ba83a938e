# wordassist/ui.py
from __future__ import annotations
import inspect
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional, Protocol, Union

# plain actions replace text directly; "More..." returns a coroutine that opens the picker
Action = Callable[[], Union[None, Awaitable[None]]]


class Menu(Protocol):
    def add_item(self, title: str, on_click: Optional[Action] = None, icon: Optional[str] = None) -> None: ...

    def add_separator(self) -> None: ...

    def add_submenu(self, title: str, icon: Optional[str] = None) -> "Menu": ...


class Picker(Protocol):
    async def choose(self, words: List[str]) -> Optional[str]:
        """Show a searchable list; return the picked word or None if dismissed."""
        ...


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


def filter_suggestions(words: List[str], query: str) -> List[str]:
    """Case-insensitive substring match, order preserved."""
    q = (query or "").lower()
    return [w for w in words if q in w.lower()]


# -------------------- Recorders (HTTP surface / tests) --------------------

@dataclass
class MenuEntry:
    title: str
    on_click: Optional[Action] = None
    icon: Optional[str] = None
    separator: bool = False
    submenu: Optional["MenuRecorder"] = None

    async def click(self) -> None:
        if self.on_click is None:
            return
        result = self.on_click()
        if inspect.isawaitable(result):
            await result

    def to_dict(self) -> Dict:
        if self.separator:
            return {"separator": True}
        out: Dict = {"title": self.title, "actionable": self.on_click is not None}
        if self.icon:
            out["icon"] = self.icon
        if self.submenu is not None:
            out["items"] = self.submenu.to_list()
        return out


@dataclass
class MenuRecorder:
    entries: List[MenuEntry] = field(default_factory=list)

    def add_item(self, title: str, on_click: Optional[Action] = None, icon: Optional[str] = None) -> None:
        self.entries.append(MenuEntry(title=title, on_click=on_click, icon=icon))

    def add_separator(self) -> None:
        self.entries.append(MenuEntry(title="", separator=True))

    def add_submenu(self, title: str, icon: Optional[str] = None) -> "MenuRecorder":
        sub = MenuRecorder()
        self.entries.append(MenuEntry(title=title, icon=icon, submenu=sub))
        return sub

    @property
    def items(self) -> List[MenuEntry]:
        return [e for e in self.entries if not e.separator]

    def titles(self) -> List[str]:
        return [e.title for e in self.items]

    def find(self, title: str) -> MenuEntry:
        for e in self.items:
            if e.title == title:
                return e
        raise KeyError(title)

    def to_list(self) -> List[Dict]:
        return [e.to_dict() for e in self.entries]


@dataclass
class NoticeLog:
    messages: List[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        self.messages.append(message)

