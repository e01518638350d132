"""
Client location tracking.

Stands in for the browser location: it knows the current path and performs
redirects, optionally notifying a callback so a host application can react.
"""

import logging
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)


class Navigator:
    """Current client path plus redirect side effect."""

    def __init__(
        self,
        current_path: str = "/",
        auth_paths: Iterable[str] = ("/auth", "/login"),
        on_redirect: Callable[[str], None] | None = None,
    ) -> None:
        self.current_path = current_path
        self.auth_paths = tuple(auth_paths)
        self.on_redirect = on_redirect
        self.history: list[str] = []

    def is_auth_page(self) -> bool:
        return any(path in self.current_path for path in self.auth_paths)

    def navigate(self, path: str) -> None:
        self.current_path = path

    def redirect(self, path: str) -> None:
        # Path is updated before the callback runs so later 401s see it
        self.current_path = path
        self.history.append(path)
        logger.info(f"Redirecting to {path}", extra={"redirect_path": path})
        if self.on_redirect:
            self.on_redirect(path)

    @property
    def redirect_count(self) -> int:
        return len(self.history)
