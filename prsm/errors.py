from __future__ import annotations

from typing import Any, Iterable, Tuple


class ManagerError(Exception):
    """Base class for everything the script manager raises."""


class RegistrationConflict(ManagerError, ValueError):
    """Two scripts were registered under the same id."""

    def __init__(self, script_id: int):
        super().__init__(f"script id {script_id} is already registered")
        self.script_id = script_id


class UnknownScript(ManagerError, LookupError):
    """A script id was requested that the manager does not hold."""

    def __init__(self, script_id: Any, available: Iterable[int] = ()):
        self.script_id = script_id
        self.available: Tuple[int, ...] = tuple(available)
        super().__init__(f"no script with id {script_id!r} (available: {list(self.available)})")


class ScriptFailure(ManagerError):
    """
    Uniform failure channel for scripts.
    Whatever the script failed with (an exception, an int, a string...) is kept on `.error`;
    the failure renders exactly like that value.
    """

    def __init__(self, error: Any):
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"ScriptFailure({self.error!r})"


class InvalidSelection(ManagerError, ValueError):
    """Operator input that is not the id of a script in the menu."""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw
