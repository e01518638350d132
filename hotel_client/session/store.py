"""
Session credential storage.

The credential is a bearer token plus a JSON-serialized user profile kept in
a small key-value store. Both entries are written and removed together.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class SessionStore(ABC):
    """Key-value session storage with token/user pair semantics."""

    @abstractmethod
    def _read(self) -> dict[str, str]:
        """Return a snapshot of all stored entries."""

    @abstractmethod
    def _write(self, entries: dict[str, str]) -> None:
        """Replace all stored entries in one step."""

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def remove_item(self, key: str) -> None:
        entries = self._read()
        if key in entries:
            del entries[key]
            self._write(entries)

    def get_token(self) -> str | None:
        return self.get_item(TOKEN_KEY)

    def get_user(self) -> dict[str, Any] | None:
        """Return the stored user profile, discarding it if unreadable."""
        raw = self.get_item(USER_KEY)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.error(f"Error parsing user data: {e}")
            self.remove_item(USER_KEY)
            return None

    def set_session(self, token: str, user: dict[str, Any]) -> None:
        entries = self._read()
        entries[TOKEN_KEY] = token
        entries[USER_KEY] = json.dumps(user)
        self._write(entries)

    def clear(self) -> None:
        """Remove token and user. Safe to call when no session exists."""
        entries = self._read()
        entries.pop(TOKEN_KEY, None)
        entries.pop(USER_KEY, None)
        self._write(entries)

    def is_authenticated(self) -> bool:
        entries = self._read()
        return bool(entries.get(TOKEN_KEY) and entries.get(USER_KEY))


class MemorySessionStore(SessionStore):
    """Process-local session storage."""

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries = dict(entries or {})

    def _read(self) -> dict[str, str]:
        return dict(self._entries)

    def _write(self, entries: dict[str, str]) -> None:
        self._entries = dict(entries)


class FileSessionStore(SessionStore):
    """Session storage persisted as a JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, entries: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(entries, fh)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
