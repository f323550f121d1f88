"""A process-wide collector of log messages."""

from __future__ import annotations


class Logger:
    """Keeps log messages in the order they were recorded."""

    def __init__(self) -> None:
        self._mode = False
        self._messages: list[str] = []

    def log(self, message: str) -> None:
        """Record ``message``."""
        self._messages.append(message)

    def logs(self) -> list[str]:
        """Return the recorded messages, oldest first."""
        return list(self._messages)

    def _set_mode(self, mode: bool) -> None:
        self._mode = mode


_instance: Logger | None = None


def get_instance() -> Logger:
    """Return the shared logger, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Logger()
    return _instance