# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0
"""Stack transition policy.

``StackTransitionController`` turns a resolved route into commands on the
attached ``StackHost``. The host is observed in two states, with or without
a modal presented, and every ``open`` runs the same sequence:

1. Callback routes run their callback and stop; the host is untouched.
2. The screen is obtained from the screen provider (fresh or shared) and the
   caller's ``configure`` hook runs on it.
3. A presented modal is dismissed. When the new screen is itself going to be
   presented modally with animation, the dismissal is not animated, since
   the host cannot run both animations at once.
4. ``resets`` replaces the stack with the screen alone; otherwise ``modal``
   presents it (wrapped in a fresh container unless it already is one);
   otherwise the screen is pushed, or popped back to if it is already in
   the stack.

Animations are fire-and-forget. A re-entrant lock serializes whole command
sequences so a host shared between threads never sees interleaved
dismiss/present pairs; re-entrancy lets ``configure`` hooks and callbacks
open other paths.
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from .host import NavigationStack, StackHost
from .options import RouteOptions
from .resolver import ResolvedRoute

__all__ = ["StackTransitionController", "invoke_callback"]


def invoke_callback(callback: Callable[..., Any], params: Mapping[str, str]) -> Any:
    """Call ``callback`` with ``params`` only if it takes a positional argument."""
    try:
        sig = inspect.signature(callback)
    except (TypeError, ValueError):  # pragma: no cover - builtins without signature
        return callback(params)
    accepts_positional = any(
        p.kind
        in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        )
        for p in sig.parameters.values()
    )
    if accepts_positional:
        return callback(params)
    return callback()


class StackTransitionController:
    """Issue push/pop/present/dismiss commands for resolved routes."""

    __slots__ = ("host", "_screen_provider", "_container_factory", "_lock", "_logger")

    def __init__(
        self,
        screen_provider: Callable[[ResolvedRoute], Any],
        *,
        host: StackHost | None = None,
        container_factory: Callable[[], StackHost] = NavigationStack,
        logger: logging.Logger | None = None,
    ) -> None:
        self.host = host
        self._screen_provider = screen_provider
        self._container_factory = container_factory
        self._lock = threading.RLock()
        self._logger = logger or logging.getLogger("genro_screens")

    def _require_host(self) -> StackHost:
        if self.host is None:
            raise RuntimeError("No stack host attached to the router")
        return self.host

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def open(
        self,
        resolved: ResolvedRoute,
        animated: bool = True,
        configure: Callable[[Any], Any] | None = None,
    ) -> Any:
        """Navigate to ``resolved``.

        Returns:
            The screen navigated to, or the callback's return value for
            callback routes.
        """
        descriptor = resolved.descriptor
        if descriptor.callback is not None:
            self._logger.debug("running callback for %r", resolved.path)
            return invoke_callback(descriptor.callback, dict(resolved.params))

        with self._lock:
            host = self._require_host()
            screen = self._screen_provider(resolved)
            if configure is not None:
                configure(screen)
            self.transition(host, screen, descriptor.options, animated)
            return screen

    def transition(
        self, host: StackHost, screen: Any, options: RouteOptions, animated: bool
    ) -> None:
        """Apply the stack policy for ``screen`` on ``host``."""
        presents_modally = options.modal and not options.resets
        with self._lock:
            if host.is_presenting:
                dismiss_animated = animated and not presents_modally
                self._logger.debug("dismiss_presented(animated=%s)", dismiss_animated)
                host.dismiss_presented(dismiss_animated)

            if options.resets:
                self._logger.debug("replace_all(%r, animated=%s)", screen, animated)
                host.replace_all([screen], animated)
            elif options.modal:
                target = screen if isinstance(screen, StackHost) else self._wrap(screen)
                if options.transition is not None:
                    target.transition_style = options.transition
                if options.presentation is not None:
                    target.presentation_style = options.presentation
                self._logger.debug("present(%r, animated=%s)", target, animated)
                host.present(target, animated)
            elif any(candidate is screen for candidate in host.screens):
                self._logger.debug("pop_to(%r, animated=%s)", screen, animated)
                host.pop_to(screen, animated)
            else:
                self._logger.debug("push(%r, animated=%s)", screen, animated)
                host.push(screen, animated)

    def pop(self, animated: bool = True) -> None:
        """Dismiss the presented modal, or pop the top screen."""
        with self._lock:
            host = self._require_host()
            if host.is_presenting:
                self._logger.debug("dismiss_presented(animated=%s)", animated)
                host.dismiss_presented(animated)
            else:
                self._logger.debug("pop(animated=%s)", animated)
                host.pop(animated)

    def _wrap(self, screen: Any) -> StackHost:
        """Return a fresh container holding only ``screen``."""
        container = self._container_factory()
        container.push(screen, False)
        container.transition_style = getattr(screen, "transition_style", None)
        container.presentation_style = getattr(screen, "presentation_style", None)
        return container
