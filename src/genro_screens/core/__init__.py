"""Core runtime aggregator for Genro Screens.

Exposes the runtime building blocks from a single module:

Public API:
    - ``RouteTemplate`` / ``matches``: template compilation and matching
    - ``RouteOptions``: validated route options and their style enums
    - ``RouteTable`` / ``RouteDescriptor``: ordered route registry
    - ``OptionsResolver`` / ``ResolvedRoute``: memoized path resolution
    - ``Screen`` / ``ScreenCache``: teardown-aware screens and shared cache
    - ``StackHost`` / ``NavigationStack``: navigation stack contract
    - ``StackTransitionController``: push/pop/present/dismiss policy
    - ``ScreenRouter``: facade composing all of the above

Importing this module performs only imports; it does not create routers.
"""

from .host import NavigationStack, StackHost
from .options import PresentationStyle, RouteOptions, TransitionStyle
from .resolver import OptionsResolver, ResolvedRoute
from .route_table import RouteDescriptor, RouteTable
from .router import ScreenRouter, default_router, reset_default_router, set_default_router
from .screen import Screen
from .screen_cache import ScreenCache
from .template import MatchResult, RouteTemplate, matches
from .transitions import StackTransitionController

__all__ = [
    "MatchResult",
    "NavigationStack",
    "OptionsResolver",
    "PresentationStyle",
    "ResolvedRoute",
    "RouteDescriptor",
    "RouteOptions",
    "RouteTable",
    "RouteTemplate",
    "Screen",
    "ScreenCache",
    "ScreenRouter",
    "StackHost",
    "StackTransitionController",
    "TransitionStyle",
    "default_router",
    "matches",
    "reset_default_router",
    "set_default_router",
]
