# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0
"""Exceptions for Genro Screens.

This module defines the two failures the routing engine raises on its own.
Everything else (screen construction errors, stack host errors) propagates
unchanged from the collaborator that raised it.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "InvalidOption",
    "RouteNotFound",
]


class InvalidOption(ValueError):
    """Raised by ``map`` when a route option is not acceptable.

    Raised at definition time, before the route is stored, so a bad
    ``transition`` or ``presentation`` never reaches ``open``.

    Attributes:
        option: Name of the offending option.
        value: The rejected value.
        allowed: Accepted values, when the option is enumerated.
    """

    def __init__(self, option: str, value: Any, allowed: list[str] | None = None) -> None:
        self.option = option
        self.value = value
        self.allowed = allowed or []
        message = f"Invalid value {value!r} for option '{option}'"
        if self.allowed:
            message += f": must be one of {self.allowed}"
        super().__init__(message)


class RouteNotFound(LookupError):
    """Raised when no registered template matches a path.

    Attributes:
        path: The path that could not be resolved.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No route found for path '{path}'")
