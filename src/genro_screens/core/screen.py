# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0
"""Screen mixin with an explicit teardown observer API.

Screens are produced by the factories given to ``map``. Any object can be a
screen for plain push/modal routes; shared routes additionally need the
teardown notification provided here, so the instance cache can forget a
screen when its lifecycle ends.

Screen
------
- ``add_teardown_listener(fn)``: register a one-shot ``fn(screen)`` callback.
- ``remove_teardown_listener(fn)``: unregister before teardown happens.
- ``teardown()``: run the listeners (in registration order), then the
  screen's own ``did_teardown()``. Later calls are no-ops.
- ``did_teardown()``: hook for subclasses; listeners never replace it.
- ``transition_style`` / ``presentation_style``: styles applied by the
  router from route options; copied onto modal wrappers.

Example::

    class ProfileScreen(Screen):
        def __init__(self, user_id=None):
            self.user_id = user_id

        @classmethod
        def from_params(cls, params):
            return cls(user_id=params.get("user_id"))

        def did_teardown(self):
            release_resources(self)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = ["Screen", "TeardownListener"]

TeardownListener = Callable[["Screen"], Any]


class Screen:
    """Mixin providing teardown notification and modal style attributes."""

    transition_style: Any = None
    presentation_style: Any = None

    @property
    def _teardown_listeners(self) -> list[TeardownListener]:
        """Lazy-initialized listener list."""
        listeners = self.__dict__.get("_genro_screens_teardown_listeners")
        if listeners is None:
            listeners = []
            self.__dict__["_genro_screens_teardown_listeners"] = listeners
        return listeners

    @property
    def is_torn_down(self) -> bool:
        return bool(self.__dict__.get("_genro_screens_torn_down", False))

    def add_teardown_listener(self, listener: TeardownListener) -> TeardownListener:
        """Register ``listener`` to run once when this screen tears down.

        Returns:
            The listener itself, so it can be passed to
            ``remove_teardown_listener`` later.
        """
        if not callable(listener):
            raise TypeError("Teardown listener must be callable")
        self._teardown_listeners.append(listener)
        return listener

    def remove_teardown_listener(self, listener: TeardownListener) -> None:
        listeners = self._teardown_listeners
        if listener in listeners:
            listeners.remove(listener)

    def teardown(self) -> None:
        """End this screen's lifecycle.

        Listeners run first and are discarded; ``did_teardown()`` runs after
        them, and still run if a listener raises. A second call does nothing.
        """
        if self.is_torn_down:
            return
        self.__dict__["_genro_screens_torn_down"] = True
        listeners = list(self._teardown_listeners)
        self._teardown_listeners.clear()
        try:
            for listener in listeners:
                listener(self)
        finally:
            self.did_teardown()

    def did_teardown(self) -> None:
        """Override to release resources when the screen goes away."""
        return None
