# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0
"""Per-path cache of live screen instances for shared routes.

Entries are added with ``put`` and leave only through ``evict``. The router
never evicts on its own: ``track`` registers a teardown listener on the
screen, and the screen's own teardown removes the entry.
"""

from __future__ import annotations

import logging
from typing import Any

from genro_toolbox.typeutils import safe_is_instance

__all__ = ["ScreenCache"]


class ScreenCache:
    """Path → screen mapping with teardown-driven eviction."""

    __slots__ = ("_screens", "_logger")

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._screens: dict[str, Any] = {}
        self._logger = logger or logging.getLogger("genro_screens")

    def get(self, path: str) -> Any | None:
        return self._screens.get(path)

    def put(self, path: str, screen: Any) -> None:
        self._screens[path] = screen

    def evict(self, path: str) -> Any | None:
        """Remove and return the screen cached for ``path`` (None if absent)."""
        screen = self._screens.pop(path, None)
        if screen is not None:
            self._logger.debug("evicted shared screen for %r", path)
        return screen

    def track(self, path: str, screen: Any) -> None:
        """Cache ``screen`` under ``path`` until the screen tears down.

        Raises:
            TypeError: if ``screen`` does not provide the teardown observer API.
        """
        if not safe_is_instance(screen, "genro_screens.core.screen.Screen"):
            raise TypeError(
                f"Shared route '{path}' requires a Screen instance, got {type(screen).__name__}. "
                "Inherit from Screen to receive teardown notifications."
            )

        def _evict_on_teardown(torn_down: Any) -> None:
            # A newer instance may already own the slot.
            if self._screens.get(path) is torn_down:
                self.evict(path)

        self.put(path, screen)
        screen.add_teardown_listener(_evict_on_teardown)

    def __contains__(self, path: object) -> bool:
        return path in self._screens

    def __len__(self) -> int:
        return len(self._screens)
