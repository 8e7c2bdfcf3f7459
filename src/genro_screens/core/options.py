# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0
"""Typed route options.

``RouteOptions`` replaces an open-ended options dict with a frozen pydantic
model. Validation happens when the model is built, which ``map`` does before
storing anything, so an unknown style fails at definition time.

Options
-------
- ``modal``: present the screen modally instead of pushing it.
- ``shared``: cache one screen instance per path until it tears down.
- ``resets``: replace the whole navigation stack with the screen.
- ``transition``: one of ``TransitionStyle`` (``cover``, ``flip``,
  ``dissolve``, ``curl``).
- ``presentation``: one of ``PresentationStyle`` (``full_screen``,
  ``page_sheet``, ``form_sheet``, ``current``).

Example::

    options = RouteOptions.build(modal=True, transition="flip")
    assert options.transition is TransitionStyle.FLIP
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from genro_screens.exceptions import InvalidOption

__all__ = ["PresentationStyle", "RouteOptions", "TransitionStyle"]


class TransitionStyle(str, Enum):
    """Animation used when a screen is presented modally."""

    COVER = "cover"
    FLIP = "flip"
    DISSOLVE = "dissolve"
    CURL = "curl"


class PresentationStyle(str, Enum):
    """How a modally presented screen occupies the host."""

    FULL_SCREEN = "full_screen"
    PAGE_SHEET = "page_sheet"
    FORM_SHEET = "form_sheet"
    CURRENT = "current"


_ENUMERATED: dict[str, type[Enum]] = {
    "transition": TransitionStyle,
    "presentation": PresentationStyle,
}


class RouteOptions(BaseModel):
    """Validated, immutable transition directives for a route."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    modal: bool = False
    shared: bool = False
    resets: bool = False
    transition: TransitionStyle | None = None
    presentation: PresentationStyle | None = None

    @classmethod
    def build(cls, **options: Any) -> RouteOptions:
        """Build options from keyword arguments.

        Raises:
            InvalidOption: on an unknown option name or a rejected value.
        """
        try:
            return cls(**options)
        except ValidationError as exc:
            error = exc.errors()[0]
            loc = error.get("loc") or ("options",)
            option = str(loc[0])
            enum_cls = _ENUMERATED.get(option)
            allowed = [member.value for member in enum_cls] if enum_cls else None
            raise InvalidOption(option, error.get("input"), allowed) from exc

    def as_dict(self) -> dict[str, Any]:
        """Return options as plain values (enum members as strings)."""
        return self.model_dump(mode="json")
