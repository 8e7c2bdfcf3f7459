# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for Screen teardown notification and the shared screen cache."""

from __future__ import annotations

import pytest

from genro_screens import NavigationStack, Screen, ScreenRouter
from genro_screens.core.screen_cache import ScreenCache


class TrackedScreen(Screen):
    def __init__(self, log=None):
        self.log = log if log is not None else []

    def did_teardown(self):
        self.log.append("did_teardown")


class PlainScreen:
    pass


class TestScreenTeardown:
    def test_listeners_run_before_did_teardown(self):
        screen = TrackedScreen()
        screen.add_teardown_listener(lambda s: screen.log.append("listener"))
        screen.teardown()
        assert screen.log == ["listener", "did_teardown"]

    def test_listener_receives_screen(self):
        screen = TrackedScreen()
        seen = []
        screen.add_teardown_listener(seen.append)
        screen.teardown()
        assert seen == [screen]

    def test_teardown_runs_once(self):
        screen = TrackedScreen()
        calls = []
        screen.add_teardown_listener(lambda s: calls.append(1))
        screen.teardown()
        screen.teardown()
        assert calls == [1]
        assert screen.log == ["did_teardown"]
        assert screen.is_torn_down

    def test_removed_listener_not_called(self):
        screen = TrackedScreen()
        calls = []
        listener = screen.add_teardown_listener(lambda s: calls.append(1))
        screen.remove_teardown_listener(listener)
        screen.teardown()
        assert calls == []

    def test_listener_must_be_callable(self):
        with pytest.raises(TypeError):
            TrackedScreen().add_teardown_listener("nope")  # type: ignore[arg-type]

    def test_failing_listener_still_runs_did_teardown(self):
        screen = TrackedScreen()

        def failing(s):
            raise RuntimeError("listener failed")

        screen.add_teardown_listener(failing)
        with pytest.raises(RuntimeError):
            screen.teardown()
        screen.teardown()
        assert screen.log == ["did_teardown"]
        assert screen.is_torn_down

    def test_failing_listener_propagates_after_eviction(self):
        cache = ScreenCache()
        screen = TrackedScreen()
        cache.track("users", screen)
        screen.add_teardown_listener(lambda s: 1 / 0)
        with pytest.raises(ZeroDivisionError):
            screen.teardown()
        assert "users" not in cache
        assert screen.log == ["did_teardown"]


class TestScreenCache:
    def test_put_get_evict(self):
        cache = ScreenCache()
        screen = TrackedScreen()
        cache.put("users", screen)
        assert cache.get("users") is screen
        assert "users" in cache
        assert cache.evict("users") is screen
        assert cache.get("users") is None
        assert cache.evict("users") is None

    def test_track_evicts_on_teardown(self):
        cache = ScreenCache()
        screen = TrackedScreen()
        cache.track("users", screen)
        assert len(cache) == 1
        screen.teardown()
        assert len(cache) == 0
        assert screen.log == ["did_teardown"]

    def test_teardown_of_replaced_screen_keeps_newer(self):
        cache = ScreenCache()
        old, new = TrackedScreen(), TrackedScreen()
        cache.track("users", old)
        cache.put("users", new)
        old.teardown()
        assert cache.get("users") is new

    def test_track_requires_screen(self):
        with pytest.raises(TypeError):
            ScreenCache().track("users", PlainScreen())


class TestSharedRoutes:
    @pytest.fixture
    def router(self):
        router = ScreenRouter(NavigationStack())
        router.map("profile", TrackedScreen, shared=True)
        return router

    def test_same_instance_until_teardown(self, router):
        first = router.screen_for_path("profile")
        assert router.screen_for_path("profile") is first
        first.teardown()
        second = router.screen_for_path("profile")
        assert second is not first
        assert first.log == ["did_teardown"]

    def test_open_twice_returns_identical_instance(self, router):
        first = router.open("profile")
        second = router.open("profile")
        assert first is second
        assert len(router.host) == 1

    def test_non_shared_always_fresh(self):
        router = ScreenRouter(NavigationStack())
        router.map("feed", TrackedScreen)
        assert router.screen_for_path("feed") is not router.screen_for_path("feed")
        assert len(router.screen_cache) == 0

    def test_shared_route_requires_screen_subclass(self):
        router = ScreenRouter(NavigationStack())
        router.map("plain", PlainScreen, shared=True)
        with pytest.raises(TypeError):
            router.open("plain")
