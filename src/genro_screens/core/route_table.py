# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0
"""Route table: insertion-ordered template registry.

Objects
-------
``RouteDescriptor``
    Dataclass capturing a route at definition time. Fields:
        - ``template``: compiled ``RouteTemplate``
        - ``factory``: callable producing the screen (None for callback routes)
        - ``options``: validated ``RouteOptions``
        - ``callback``: inline callable run instead of a transition
        - ``metadata``: free-form values given as ``meta_*`` kwargs to ``map``

``RouteTable``
    Mapping of template text to descriptor. Iteration follows insertion
    order, which decides precedence among templates that match the same
    path. Re-defining a template replaces its descriptor in place.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from .options import RouteOptions
from .template import RouteTemplate

__all__ = ["RouteDescriptor", "RouteTable"]


@dataclass
class RouteDescriptor:
    """Everything the router knows about one mapped template."""

    template: RouteTemplate
    factory: Callable[..., Any] | None = None
    options: RouteOptions = field(default_factory=RouteOptions)
    callback: Callable[..., Any] | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_callback(self) -> bool:
        return self.callback is not None


class RouteTable:
    """Ordered template registry; entries are only added or replaced."""

    __slots__ = ("_descriptors",)

    def __init__(self) -> None:
        self._descriptors: dict[str, RouteDescriptor] = {}

    def define(
        self,
        template: str,
        factory: Callable[..., Any] | None = None,
        options: RouteOptions | dict[str, Any] | None = None,
        callback: Callable[..., Any] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> RouteDescriptor:
        """Validate and store a route, returning its descriptor.

        Raises:
            InvalidOption: if ``options`` contains an unknown key or style.
            ValueError: if neither ``factory`` nor ``callback`` is given.
            TypeError: if ``factory`` or ``callback`` is not callable.
        """
        if not isinstance(options, RouteOptions):
            options = RouteOptions.build(**(options or {}))
        if factory is None and callback is None:
            raise ValueError(f"Route '{template}' needs a screen factory or a callback")
        if factory is not None and not callable(factory):
            raise TypeError(f"Screen factory for '{template}' must be callable")
        if callback is not None and not callable(callback):
            raise TypeError(f"Callback for '{template}' must be callable")
        descriptor = RouteDescriptor(
            template=RouteTemplate.compile(template),
            factory=factory,
            options=options,
            callback=callback,
            metadata=dict(metadata or {}),
        )
        self._descriptors[template] = descriptor
        return descriptor

    def get(self, template: str) -> RouteDescriptor | None:
        return self._descriptors.get(template)

    def items(self) -> list[tuple[str, RouteDescriptor]]:
        return list(self._descriptors.items())

    def __iter__(self) -> Iterator[RouteDescriptor]:
        return iter(list(self._descriptors.values()))

    def __contains__(self, template: object) -> bool:
        return template in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)
