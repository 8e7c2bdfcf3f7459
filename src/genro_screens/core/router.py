# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0
"""Router facade for Genro Screens.

``ScreenRouter`` composes the route table, the resolver memo, the shared
screen cache and the transition controller behind a small surface.

Constructor
-----------
Constructor signature::

    ScreenRouter(host=None, *, opener=None, container_factory=NavigationStack,
                 logger=None)

- ``host``: the ``StackHost`` driven by ``open``/``pop``. It can be attached,
  replaced or detached at any time through the ``host`` property.
- ``opener``: callable receiving absolute URLs from ``open_external``
  (default: ``webbrowser.open``).
- ``container_factory``: builds the container wrapping screens presented
  modally.
- ``logger``: ``logging.Logger`` for debug records (default
  ``logging.getLogger("genro_screens")``).

Mapping
-------
``map(template, factory=None, options=None, callback=None, **kwargs)``

- ``options`` (dict or ``RouteOptions``) and ``kwargs`` are merged, then
  validated; unknown styles raise ``InvalidOption`` before storage.
- ``meta_*`` kwargs are grouped under ``metadata`` with the prefix removed.
- ``action(template, **kwargs)`` is the decorator form for callback routes.

Opening
-------
- ``open(path, animated=True, configure=None)`` resolves ``path``, builds or
  reuses the screen, runs ``configure(screen)`` and applies the stack policy.
- ``pop(animated=True)`` dismisses the modal or pops the top screen.
- ``open_external(url)`` hands ``url`` to the opener.

Introspection
-------------
``routes``, ``resolve(path)``, ``options_for_path(path)``,
``screen_for_path(path)`` and ``nodes()``.

Default router
--------------
``default_router()`` lazily creates one process-wide router.
``set_default_router(router)`` installs a specific instance and
``reset_default_router()`` drops it.

Example::

    from genro_screens import NavigationStack, ScreenRouter

    router = ScreenRouter(NavigationStack())
    router.map("users/:user_id", UserScreen)
    router.map("login", LoginScreen, modal=True, transition="flip")
    router.open("users/42")
"""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable, Mapping
from typing import Any

from genro_toolbox import dictExtract

from .host import NavigationStack, StackHost
from .options import RouteOptions
from .resolver import OptionsResolver, ResolvedRoute
from .route_table import RouteDescriptor, RouteTable
from .screen_cache import ScreenCache
from .transitions import StackTransitionController

__all__ = [
    "ScreenRouter",
    "default_router",
    "reset_default_router",
    "set_default_router",
]


class ScreenRouter:
    """Map path templates to screens and drive a navigation stack."""

    __slots__ = ("table", "resolver", "screen_cache", "_controller", "_opener", "_logger")

    def __init__(
        self,
        host: StackHost | None = None,
        *,
        opener: Callable[[str], Any] | None = None,
        container_factory: Callable[[], StackHost] = NavigationStack,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("genro_screens")
        self._opener = opener or webbrowser.open
        self.table = RouteTable()
        self.resolver = OptionsResolver(self.table, logger=self._logger)
        self.screen_cache = ScreenCache(logger=self._logger)
        self._controller = StackTransitionController(
            self._screen_for_resolved,
            host=host,
            container_factory=container_factory,
            logger=self._logger,
        )

    # ------------------------------------------------------------------
    # Host accessor
    # ------------------------------------------------------------------
    @property
    def host(self) -> StackHost | None:
        return self._controller.host

    @host.setter
    def host(self, value: StackHost | None) -> None:
        self._controller.host = value

    def detach_host(self) -> StackHost | None:
        """Detach and return the current host."""
        previous, self._controller.host = self._controller.host, None
        return previous

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------
    def map(
        self,
        template: str,
        factory: Callable[..., Any] | None = None,
        options: RouteOptions | dict[str, Any] | None = None,
        callback: Callable[..., Any] | None = None,
        **kwargs: Any,
    ) -> RouteDescriptor:
        """Map ``template`` to a screen factory or an inline callback.

        Args:
            template: Path template such as ``"users/:user_id"``.
            factory: Callable producing the screen. If it has a callable
                ``from_params`` attribute, that is called with the params.
            options: Base options (dict or ``RouteOptions``).
            callback: Run instead of navigating; receives the params when it
                accepts a positional argument.
            **kwargs: Option overrides (``modal``, ``shared``, ``resets``,
                ``transition``, ``presentation``) and ``meta_*`` metadata.

        Returns:
            The stored descriptor.

        Raises:
            InvalidOption: on an unknown option or style (nothing is stored).
        """
        metadata = dictExtract(kwargs, "meta_", slice_prefix=True, pop=True)
        merged: dict[str, Any] = {}
        if isinstance(options, RouteOptions):
            merged.update(options.model_dump())
        elif options:
            merged.update(options)
        merged.update(kwargs)
        descriptor = self.table.define(
            template,
            factory,
            RouteOptions.build(**merged),
            callback,
            metadata=metadata,
        )
        self._logger.debug("mapped %r (%s)", template, descriptor.options.as_dict())
        return descriptor

    def action(self, template: str, **kwargs: Any) -> Callable[[Callable], Callable]:
        """Decorator form of ``map`` for callback routes.

        Example::

            @router.action("logout/:user_id")
            def logout(params):
                session.end(params["user_id"])
        """

        def decorator(func: Callable) -> Callable:
            self.map(template, callback=func, **kwargs)
            return func

        return decorator

    @property
    def routes(self) -> dict[str, RouteDescriptor]:
        """Template → descriptor, in mapping order."""
        return dict(self.table.items())

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def resolve(self, path: str) -> ResolvedRoute:
        """Resolve ``path`` (memoized). Raises ``RouteNotFound``."""
        return self.resolver.resolve(path)

    def options_for_path(self, path: str) -> RouteOptions:
        return self.resolve(path).options

    def screen_for_path(self, path: str) -> Any:
        """Return the screen ``open(path)`` would navigate to.

        Shared routes return (and populate) the cached instance.
        """
        cached = self.screen_cache.get(path)
        if cached is not None:
            return cached
        return self._screen_for_resolved(self.resolve(path))

    def _screen_for_resolved(self, resolved: ResolvedRoute) -> Any:
        cached = self.screen_cache.get(resolved.path)
        if cached is not None:
            self._logger.debug("reusing shared screen for %r", resolved.path)
            return cached
        descriptor = resolved.descriptor
        if descriptor.factory is None:
            raise ValueError(f"Route '{descriptor.template}' has no screen factory")
        screen = self._build_screen(descriptor.factory, resolved.params)
        options = descriptor.options
        if options.shared:
            self.screen_cache.track(resolved.path, screen)
        if options.transition is not None:
            screen.transition_style = options.transition
        if options.presentation is not None:
            screen.presentation_style = options.presentation
        return screen

    def _build_screen(self, factory: Callable[..., Any], params: Mapping[str, str]) -> Any:
        from_params = getattr(factory, "from_params", None)
        if callable(from_params):
            return from_params(dict(params))
        return factory()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def open(
        self,
        path: str,
        animated: bool = True,
        configure: Callable[[Any], Any] | None = None,
    ) -> Any:
        """Navigate to ``path``.

        Args:
            path: Concrete path, e.g. ``"users/42"``.
            animated: Animate the transition.
            configure: Called with the screen after construction and before
                any stack command.

        Returns:
            The screen navigated to, or the callback result for callback
            routes.

        Raises:
            RouteNotFound: if no template matches ``path``.
            RuntimeError: if a screen route is opened with no host attached.
        """
        resolved = self.resolve(path)
        return self._controller.open(resolved, animated, configure)

    def pop(self, animated: bool = True) -> None:
        self._controller.pop(animated)

    def open_external(self, url: str) -> None:
        """Hand ``url`` to the external opener; the result is ignored."""
        self._logger.debug("opening external url %r", url)
        self._opener(url)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def nodes(self) -> dict[str, Any]:
        """Return a description of the mapped routes.

        Returns:
            ``{}`` when nothing is mapped, otherwise a dict with:

            - ``routes``: template → ``{template, params, factory, callback,
              options, metadata, doc}`` in mapping order
            - ``cached_paths``: paths memoized by the resolver
            - ``shared_screens``: number of live shared screens
        """
        routes: dict[str, Any] = {}
        for template, descriptor in self.table.items():
            target = descriptor.callback or descriptor.factory
            routes[template] = {
                "template": template,
                "params": descriptor.template.param_names,
                "factory": descriptor.factory,
                "callback": descriptor.callback,
                "options": descriptor.options.as_dict(),
                "metadata": dict(descriptor.metadata),
                "doc": (getattr(target, "__doc__", None) or "").strip(),
            }
        if not routes:
            return {}
        return {
            "routes": routes,
            "cached_paths": self.resolver.cached_paths,
            "shared_screens": len(self.screen_cache),
        }


_DEFAULT_ROUTER: ScreenRouter | None = None


def default_router() -> ScreenRouter:
    """Return the process-wide router, creating it on first use."""
    global _DEFAULT_ROUTER
    if _DEFAULT_ROUTER is None:
        _DEFAULT_ROUTER = ScreenRouter()
    return _DEFAULT_ROUTER


def set_default_router(router: ScreenRouter | None) -> ScreenRouter | None:
    """Install ``router`` as the process-wide router; return the previous one."""
    global _DEFAULT_ROUTER
    if router is not None and not isinstance(router, ScreenRouter):
        raise TypeError("default router must be a ScreenRouter instance")
    previous, _DEFAULT_ROUTER = _DEFAULT_ROUTER, router
    return previous


def reset_default_router() -> None:
    """Drop the process-wide router; the next ``default_router()`` builds a new one."""
    set_default_router(None)
