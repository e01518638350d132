"""
Unit tests for session storage and the navigator.
"""

import json

import pytest

from hotel_client.config.settings import Settings
from hotel_client.session import (
    FileSessionStore,
    MemorySessionStore,
    Navigator,
    create_session_store,
)

USER = {"_id": "u1", "name": "Ann", "role": "admin"}


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemorySessionStore()
    return FileSessionStore(tmp_path / "session.json")


class TestSessionStore:
    """Behaviour shared by every store."""

    def test_empty(self, store):
        assert store.get_token() is None
        assert store.get_user() is None
        assert not store.is_authenticated()

    def test_set_session(self, store):
        store.set_session("tok", USER)

        assert store.get_token() == "tok"
        assert store.get_user() == USER
        assert store.get_item("user") == json.dumps(USER)
        assert store.is_authenticated()

    def test_clear_is_idempotent(self, store):
        store.set_session("tok", USER)

        store.clear()
        store.clear()

        assert store.get_token() is None
        assert store.get_user() is None

    def test_clear_keeps_unrelated_entries(self):
        store = MemorySessionStore({"theme": "dark", "token": "tok"})

        store.clear()

        assert store.get_item("theme") == "dark"

    def test_corrupt_user_is_discarded(self):
        store = MemorySessionStore({"token": "tok", "user": "{not json"})

        assert store.get_user() is None
        assert store.get_item("user") is None
        assert store.get_token() == "tok"

    def test_token_without_user_is_not_authenticated(self):
        store = MemorySessionStore({"token": "tok"})

        assert not store.is_authenticated()


class TestFileSessionStore:
    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "session.json"
        FileSessionStore(path).set_session("tok", USER)

        reopened = FileSessionStore(path)

        assert reopened.get_token() == "tok"
        assert reopened.get_user() == USER

    def test_unreadable_file_is_empty(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("garbage", encoding="utf-8")

        assert FileSessionStore(path).get_token() is None

    def test_leaves_no_temp_files(self, tmp_path):
        store = FileSessionStore(tmp_path / "session.json")
        store.set_session("tok", USER)
        store.clear()

        assert [p.name for p in tmp_path.iterdir()] == ["session.json"]


class TestCreateSessionStore:
    def test_memory_when_not_persisted(self):
        store = create_session_store(Settings(persist_session=False))

        assert isinstance(store, MemorySessionStore)

    def test_file_store_uses_configured_path(self, tmp_path):
        path = tmp_path / "s.json"
        store = create_session_store(
            Settings(persist_session=True, session_file=str(path))
        )

        assert isinstance(store, FileSessionStore)
        assert store.path == path


class TestNavigator:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [("/auth", True), ("/auth/register", True), ("/login", True), ("/rooms", False)],
    )
    def test_is_auth_page(self, path, expected):
        assert Navigator(current_path=path).is_auth_page() is expected

    def test_redirect_updates_path_and_notifies(self):
        seen = []
        navigator = Navigator(current_path="/bookings", on_redirect=seen.append)

        navigator.redirect("/auth")

        assert navigator.current_path == "/auth"
        assert navigator.is_auth_page()
        assert seen == ["/auth"]
        assert navigator.redirect_count == 1

    def test_navigate_is_not_a_redirect(self):
        navigator = Navigator()

        navigator.navigate("/rooms")

        assert navigator.current_path == "/rooms"
        assert navigator.history == []
