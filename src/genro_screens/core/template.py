# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0
"""Route templates and segment matching.

A template is split on ``/`` once, at registration time. Each segment is
either a literal (compared verbatim against the path segment) or a
parameter written as ``:name`` (binds the path segment to ``name``).

Matching rules
--------------
- The path is split on ``/`` the same way; no stripping, no normalization.
- Different segment counts never match.
- Literals are compared case-sensitively; any mismatch fails the whole match.
- Parameters accept any value, including the empty string.
- No wildcard or catch-all segments.

Example::

    template = RouteTemplate.compile("users/:user_id/posts")
    result = template.match("users/42/posts")
    assert result.matched and result.params == {"user_id": "42"}
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["MatchResult", "RouteTemplate", "matches"]

PARAM_MARKER = ":"
SEPARATOR = "/"


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching a path against a template.

    Evaluates to ``matched`` in boolean context.
    """

    matched: bool
    params: dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.matched


_NO_MATCH = MatchResult(False)


@dataclass(frozen=True)
class RouteTemplate:
    """Compiled, immutable route template."""

    text: str
    segments: tuple[str, ...]

    @classmethod
    def compile(cls, text: str) -> RouteTemplate:
        if not isinstance(text, str):
            raise TypeError(f"Route template must be a string, got {type(text).__name__}")
        return cls(text=text, segments=tuple(text.split(SEPARATOR)))

    @property
    def param_names(self) -> list[str]:
        """Parameter names in segment order."""
        return [seg[1:] for seg in self.segments if seg.startswith(PARAM_MARKER)]

    def __len__(self) -> int:
        return len(self.segments)

    def match(self, path: str) -> MatchResult:
        """Match ``path`` against this template."""
        parts = path.split(SEPARATOR)
        if len(parts) != len(self.segments):
            return _NO_MATCH
        params: dict[str, str] = {}
        for template_part, path_part in zip(self.segments, parts):
            if template_part.startswith(PARAM_MARKER):
                params[template_part[1:]] = path_part
                continue
            if template_part != path_part:
                return _NO_MATCH
        return MatchResult(True, params)

    def __str__(self) -> str:
        return self.text


def matches(template: RouteTemplate | str, path: str) -> MatchResult:
    """Match ``path`` against ``template`` (compiled or raw text)."""
    if not isinstance(template, RouteTemplate):
        template = RouteTemplate.compile(template)
    return template.match(path)
