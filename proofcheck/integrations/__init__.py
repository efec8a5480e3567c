"""Optional external candidate sources."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .language_tool import LanguageToolManager, LanguageToolSource

__all__ = ["LanguageToolManager", "LanguageToolSource"]

_LAZY_EXPORTS = {
    "LanguageToolManager": (".language_tool", "LanguageToolManager"),
    "LanguageToolSource": (".language_tool", "LanguageToolSource"),
}


def __getattr__(name: str):
    """Import ``language_tool_python`` only when a source is requested."""

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"proofcheck.integrations{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)
