"""Genro Screens - URL-pattern routing for navigation stacks.

Maps path templates such as ``users/:user_id`` to screen factories and
drives a push/pop and modal present/dismiss stack.

Public exports:
    - ``ScreenRouter``: map templates, open paths, pop, open external URLs
    - ``Screen``: mixin with teardown notification, required by shared routes
    - ``StackHost``: abstract navigation stack the router drives
    - ``NavigationStack``: in-memory ``StackHost`` (also the modal wrapper)
    - ``RouteOptions``, ``TransitionStyle``, ``PresentationStyle``: options
    - ``RouteNotFound``, ``InvalidOption``: routing errors
    - ``default_router``: lazily created process-wide router

Example::

    from genro_screens import NavigationStack, Screen, ScreenRouter

    class UserScreen(Screen):
        @classmethod
        def from_params(cls, params):
            screen = cls()
            screen.user_id = params["user_id"]
            return screen

    router = ScreenRouter(NavigationStack())
    router.map("users/:user_id", UserScreen)
    router.open("users/42")
"""

__version__ = "0.1.0"

from .core import (
    NavigationStack,
    PresentationStyle,
    ResolvedRoute,
    RouteDescriptor,
    RouteOptions,
    RouteTemplate,
    Screen,
    ScreenRouter,
    StackHost,
    TransitionStyle,
    default_router,
    matches,
    reset_default_router,
    set_default_router,
)
from .exceptions import InvalidOption, RouteNotFound

__all__ = [
    "InvalidOption",
    "NavigationStack",
    "PresentationStyle",
    "ResolvedRoute",
    "RouteDescriptor",
    "RouteNotFound",
    "RouteOptions",
    "RouteTemplate",
    "Screen",
    "ScreenRouter",
    "StackHost",
    "TransitionStyle",
    "default_router",
    "matches",
    "reset_default_router",
    "set_default_router",
]
