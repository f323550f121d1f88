"""Name bindings used while evaluating a program."""

from __future__ import annotations

from crowlang.objects import Object


class Environment:
    """A mapping from names to runtime values."""

    def __init__(self) -> None:
        self._bindings: dict[str, Object] = {}

    def get(self, name: str) -> Object | None:
        """Return the value bound to ``name``, or None if it is unbound."""
        return self._bindings.get(name)

    def set(self, name: str, value: Object) -> None:
        """Bind ``name`` to ``value``, replacing any earlier binding."""
        self._bindings[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._bindings