# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""StackHost - Abstract navigation/presentation stack.

Defines the commands the transition controller issues. UI toolkits adapt
their own navigation widgets to this interface; ``NavigationStack`` is the
in-memory implementation used for headless runs, tests, and as the default
container wrapping screens presented modally.

Required members:
    - screens -> ordered stack contents, bottom first
    - presented -> screen currently presented modally, or None
    - push / pop / pop_to / replace_all
    - present / dismiss_presented

Commands are fire-and-forget: ``animated`` is a hint for the host and no
completion is reported back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from .screen import Screen

__all__ = ["NavigationStack", "StackHost"]


class StackHost(ABC):
    """Minimal interface for navigation stacks driven by the router."""

    @property
    @abstractmethod
    def screens(self) -> Sequence[Any]:
        """Current stack contents, bottom first."""
        ...

    @property
    @abstractmethod
    def presented(self) -> Any | None:
        """Screen currently presented modally, or None."""
        ...

    @abstractmethod
    def push(self, screen: Any, animated: bool = True) -> None: ...

    @abstractmethod
    def pop(self, animated: bool = True) -> Any | None:
        """Remove the top screen. Behavior on an empty stack is host-defined."""
        ...

    @abstractmethod
    def pop_to(self, screen: Any, animated: bool = True) -> list[Any]:
        """Pop every screen above ``screen``; return the removed screens."""
        ...

    @abstractmethod
    def replace_all(self, screens: Sequence[Any], animated: bool = True) -> None: ...

    @abstractmethod
    def present(self, screen: Any, animated: bool = True) -> None: ...

    @abstractmethod
    def dismiss_presented(self, animated: bool = True) -> Any | None: ...

    @property
    def is_presenting(self) -> bool:
        return self.presented is not None

    @property
    def top(self) -> Any | None:
        screens = self.screens
        return screens[-1] if screens else None


class NavigationStack(Screen, StackHost):
    """In-memory stack host that is itself a screen.

    Being a ``Screen`` lets a stack be pushed, presented, or mapped as a
    route target; the router presents such targets directly instead of
    wrapping them.
    """

    def __init__(self, screens: Sequence[Any] | None = None) -> None:
        self._screens: list[Any] = list(screens or [])
        self._presented: Any | None = None

    @property
    def screens(self) -> list[Any]:
        return list(self._screens)

    @property
    def presented(self) -> Any | None:
        return self._presented

    def push(self, screen: Any, animated: bool = True) -> None:
        self._screens.append(screen)

    def pop(self, animated: bool = True) -> Any | None:
        if not self._screens:
            return None
        return self._screens.pop()

    def pop_to(self, screen: Any, animated: bool = True) -> list[Any]:
        index = self._index_of(screen)
        if index is None:
            raise ValueError(f"{screen!r} is not in the navigation stack")
        removed = self._screens[index + 1 :]
        del self._screens[index + 1 :]
        return removed

    def replace_all(self, screens: Sequence[Any], animated: bool = True) -> None:
        self._screens = list(screens)

    def present(self, screen: Any, animated: bool = True) -> None:
        self._presented = screen

    def dismiss_presented(self, animated: bool = True) -> Any | None:
        dismissed, self._presented = self._presented, None
        return dismissed

    def _index_of(self, screen: Any) -> int | None:
        for index, candidate in enumerate(self._screens):
            if candidate is screen:
                return index
        return None

    def __contains__(self, screen: object) -> bool:
        return self._index_of(screen) is not None

    def __len__(self) -> int:
        return len(self._screens)

    def __repr__(self) -> str:
        return f"NavigationStack(depth={len(self._screens)}, presenting={self.is_presenting})"
