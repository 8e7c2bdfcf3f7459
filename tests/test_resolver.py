# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for path resolution and the resolution memo."""

from __future__ import annotations

import pytest

from genro_screens import RouteNotFound, ScreenRouter


class UsersScreen:
    pass


class OtherScreen:
    pass


@pytest.fixture
def router():
    return ScreenRouter()


class TestResolve:
    def test_params_and_descriptor(self, router):
        router.map("users/:id", UsersScreen)
        resolved = router.resolve("users/42")
        assert resolved.params == {"id": "42"}
        assert resolved.descriptor is router.routes["users/:id"]
        assert resolved.path == "users/42"

    def test_first_registered_wins_ties(self, router):
        router.map("users/:id", UsersScreen)
        router.map("users/:name", OtherScreen)
        resolved = router.resolve("users/bob")
        assert resolved.descriptor.factory is UsersScreen
        assert resolved.params == {"id": "bob"}

    def test_literal_preferred_only_by_order(self, router):
        router.map("users/:id", UsersScreen)
        router.map("users/me", OtherScreen)
        assert router.resolve("users/me").descriptor.factory is UsersScreen

    def test_segment_count_selects_template(self, router):
        router.map("users", OtherScreen)
        router.map("users/:id", UsersScreen)
        assert router.resolve("users").descriptor.factory is OtherScreen
        assert router.resolve("users/3").descriptor.factory is UsersScreen

    def test_options_for_path(self, router):
        router.map("login", UsersScreen, modal=True)
        assert router.options_for_path("login").modal is True


class TestNotFound:
    def test_raises_route_not_found(self, router):
        router.map("users/:id", UsersScreen)
        with pytest.raises(RouteNotFound) as exc_info:
            router.resolve("posts/1")
        assert exc_info.value.path == "posts/1"

    def test_lookup_error_subclass(self, router):
        with pytest.raises(LookupError):
            router.resolve("anything")

    def test_failure_is_not_cached(self, router):
        with pytest.raises(RouteNotFound):
            router.resolve("posts/1")
        assert router.resolver.cached_paths == []
        router.map("posts/:id", OtherScreen)
        assert router.resolve("posts/1").params == {"id": "1"}


class TestCache:
    def test_hit_returns_same_resolution(self, router):
        router.map("users/:id", UsersScreen)
        first = router.resolve("users/1")
        assert router.resolve("users/1") is first
        assert router.resolver.cached_paths == ["users/1"]

    def test_remap_keeps_stale_resolution(self, router):
        router.map("users/:id", UsersScreen)
        stale = router.resolve("users/1")
        router.map("users/:id", OtherScreen)
        assert router.resolve("users/1") is stale
        assert router.resolve("users/1").descriptor.factory is UsersScreen
        # Paths never resolved before see the new descriptor.
        assert router.resolve("users/2").descriptor.factory is OtherScreen

    def test_clear_drops_memo(self, router):
        router.map("users/:id", UsersScreen)
        router.resolve("users/1")
        router.map("users/:id", OtherScreen)
        router.resolver.clear()
        assert router.resolve("users/1").descriptor.factory is OtherScreen

    def test_cached_params_are_read_only(self, router):
        router.map("users/:id", UsersScreen)
        resolved = router.resolve("users/1")
        with pytest.raises(TypeError):
            resolved.params["id"] = "changed"  # type: ignore[index]
        assert router.resolve("users/1").params == {"id": "1"}

    def test_callback_receives_unaltered_params(self, router):
        received = []
        router.map("users/:id", callback=received.append)
        params = router.resolve("users/1").params
        with pytest.raises(TypeError):
            params["id"] = "changed"  # type: ignore[index]
        router.open("users/1")
        router.open("users/1")
        assert received == [{"id": "1"}, {"id": "1"}]
        received[0]["id"] = "mutated"
        assert received[1] == {"id": "1"}
        assert router.resolve("users/1").params == {"id": "1"}
