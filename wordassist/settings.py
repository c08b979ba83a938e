# wordassist/settings.py
from __future__ import annotations
import os
import re
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, Mapping, Optional


def _snake(name: str) -> str:
    # stored plugin data uses camelCase keys
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass
class Settings:
    toggle_editor_menu: bool = True
    toggle_synonym_editor_menu: bool = True
    toggle_antonym_editor_menu: bool = True
    toggle_rhyme_editor_menu: bool = True
    toggle_suggestions_editor_menu: bool = True
    editor_menu_max_results: int = 15
    suggestions_max_results: int = 10
    lexicon: str = "datamuse"

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Settings":
        """Stored values over defaults; unknown keys are ignored."""
        settings = cls()
        known = {f.name: f for f in fields(cls)}
        for key, value in (data or {}).items():
            name = _snake(key)
            if name not in known or value is None:
                continue
            default = getattr(settings, name)
            if isinstance(default, bool):
                value = _as_bool(value)
            elif isinstance(default, int):
                # int settings are counts
                value = max(0, int(value))
            else:
                value = str(value)
            setattr(settings, name, value)
        return settings

    @classmethod
    def load(cls, data: Optional[Mapping[str, Any]] = None) -> "Settings":
        """from_mapping(data), then WORDY_<FIELD> environment overrides."""
        merged: Dict[str, Any] = dict(data or {})
        for f in fields(cls):
            env = os.environ.get(f"WORDY_{f.name.upper()}")
            if env is not None:
                merged[f.name] = env
        return cls.from_mapping(merged)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
