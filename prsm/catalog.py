# Declarative way to put a menu together before freezing it into a ScriptManager.

from __future__ import annotations

from typing import Any, Callable, Dict

from prsm.errors import RegistrationConflict
from prsm.manager import ScriptManager, check_id
from prsm.script import Script, script


def _describe(fn: Callable[..., Any]) -> str:
    doc = (fn.__doc__ or "").strip()
    if doc:
        return doc.splitlines()[0].strip()
    return getattr(fn, "__name__", repr(fn))


class Catalog:
    """Collects (id -> Script) entries; `build()` snapshots them into a ScriptManager."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._entries: Dict[int, Script] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _put(self, script_id: int, sc: Script) -> None:
        script_id = check_id(script_id)
        if script_id in self._entries:
            raise RegistrationConflict(script_id)
        self._entries[script_id] = sc

    def add(self, script_id: int, description: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> "Catalog":
        """Register fn(*args, **kwargs) under script_id. Chainable."""
        self._put(script_id, script(description, fn, *args, **kwargs))
        return self

    def register(self, script_id: int, description: str | None = None):
        """
        Decorator used above a zero-argument function.
        If description is omitted, the first docstring line (or the function name) is used.
        """
        def _wrap(fn: Callable[[], Any]):
            self._put(script_id, Script(description or _describe(fn), fn))
            return fn
        return _wrap

    def build(self, name: str | None = None) -> ScriptManager:
        return ScriptManager(dict(self._entries), name=name or self.name)
