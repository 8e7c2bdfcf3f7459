# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0
"""Path resolution with a per-path memo.

``OptionsResolver.resolve(path)`` walks the route table in insertion order
and returns the first template that matches. Successful resolutions are
memoized by exact path string; failures are not, so a later ``map`` can make
a previously unknown path resolvable.

The memo is never invalidated by table changes. Re-mapping a template after
a path resolved against it keeps the old resolution until ``clear()`` is
called explicitly.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from genro_screens.exceptions import RouteNotFound

from .options import RouteOptions
from .route_table import RouteDescriptor, RouteTable

__all__ = ["OptionsResolver", "ResolvedRoute"]


@dataclass(frozen=True)
class ResolvedRoute:
    """A path bound to the descriptor that matched it.

    ``params`` is a read-only view: the same instance is served from the
    memo to every caller.
    """

    descriptor: RouteDescriptor
    path: str
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def options(self) -> RouteOptions:
        return self.descriptor.options


class OptionsResolver:
    """Resolve paths against a ``RouteTable``, memoizing hits."""

    __slots__ = ("_table", "_cache", "_logger")

    def __init__(self, table: RouteTable, *, logger: logging.Logger | None = None) -> None:
        self._table = table
        self._cache: dict[str, ResolvedRoute] = {}
        self._logger = logger or logging.getLogger("genro_screens")

    def resolve(self, path: str) -> ResolvedRoute:
        """Return the resolution for ``path``.

        Raises:
            RouteNotFound: if no template matches.
        """
        cached = self._cache.get(path)
        if cached is not None:
            return cached
        for descriptor in self._table:
            result = descriptor.template.match(path)
            if not result:
                continue
            resolved = ResolvedRoute(descriptor=descriptor, path=path, params=result.params)
            self._cache[path] = resolved
            self._logger.debug("resolved %r -> %r %s", path, descriptor.template.text, result.params)
            return resolved
        raise RouteNotFound(path)

    def clear(self) -> None:
        """Drop every memoized resolution."""
        self._cache.clear()

    @property
    def cached_paths(self) -> list[str]:
        return list(self._cache)
