from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple

from prsm.errors import RegistrationConflict, ScriptFailure, UnknownScript
from prsm.script import Script

DEFAULT_NAME = "ScriptManager"

# (id, Script) or (id, description, callable)
Entry = Tuple[int, Script] | Tuple[int, str, Any]


def check_id(script_id: Any) -> int:
    # bool is an int subclass; True/False are not ids
    if isinstance(script_id, bool) or not isinstance(script_id, int):
        raise ValueError(f"script id must be an int, got {script_id!r}")
    if script_id < 1:
        raise ValueError(f"script id must be positive, got {script_id}")
    return script_id


def _to_script(entry: Tuple[Any, ...]) -> Tuple[int, Script]:
    if len(entry) == 2:
        script_id, sc = entry
        if not isinstance(sc, Script):
            raise TypeError(f"entry {script_id!r}: expected Script, got {type(sc).__name__}")
        return check_id(script_id), sc
    if len(entry) == 3:
        script_id, description, func = entry
        return check_id(script_id), Script(description, func)
    raise ValueError(f"entry must be (id, script) or (id, description, callable), got {entry!r}")


class ScriptManager:
    """
    Fixed menu of scripts keyed by positive ints.
    Built once; there is no way to add or remove scripts afterwards.
    Duplicate ids are rejected with RegistrationConflict.
    """

    def __init__(self, scripts: Mapping[int, Script] | Iterable[Entry] = (), name: str | None = None) -> None:
        items = scripts.items() if isinstance(scripts, Mapping) else scripts
        collected: Dict[int, Script] = {}
        for entry in items:
            script_id, sc = _to_script(tuple(entry))
            if script_id in collected:
                raise RegistrationConflict(script_id)
            collected[script_id] = sc
        self._name = str(name) if name else DEFAULT_NAME
        self._scripts = MappingProxyType(dict(sorted(collected.items())))

    @property
    def name(self) -> str:
        return self._name

    @property
    def scripts(self) -> Mapping[int, Script]:
        return self._scripts

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(self._scripts)

    def __len__(self) -> int:
        return len(self._scripts)

    def __contains__(self, script_id: object) -> bool:
        try:
            return script_id in self._scripts
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Tuple[int, Script]]:
        return iter(self._scripts.items())

    def __getitem__(self, script_id: int) -> Script:
        try:
            return self._scripts[script_id]
        except (KeyError, TypeError):
            # TypeError: unhashable id
            raise UnknownScript(script_id, self.ids) from None

    def get(self, script_id: int) -> Script | None:
        return self._scripts.get(script_id) if script_id in self else None

    def render(self) -> str:
        """Menu text: header with the name, `[id] description` lines, footer as wide as the header."""
        header = f"========== {self._name} =========="
        lines = [header]
        lines.extend(f"[{i}] {sc.description}" for i, sc in self._scripts.items())
        lines.append("=" * len(header))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ScriptManager(name={self._name!r}, ids={list(self._scripts)})"

    def run_script(self, script_id: int) -> str | None:
        """
        Run one script. Returns None on success, otherwise the failure text.
        An unknown id is a caller error and raises UnknownScript; ids should be
        checked against `ids` (or `in`) first.
        """
        sc = self[script_id]
        try:
            sc.run()
        except ScriptFailure as failure:
            return str(failure)
        return None
