"""Session credential storage and client location."""

from pathlib import Path

from hotel_client.config.settings import Settings
from hotel_client.session.navigator import Navigator
from hotel_client.session.store import (
    FileSessionStore,
    MemorySessionStore,
    SessionStore,
)


def create_session_store(settings: Settings) -> SessionStore:
    """Create the session store selected by the settings."""
    if settings.persist_session:
        return FileSessionStore(Path(settings.get_session_file()))
    return MemorySessionStore()


__all__ = [
    "FileSessionStore",
    "MemorySessionStore",
    "Navigator",
    "SessionStore",
    "create_session_store",
]
