from __future__ import annotations

import logging

from genro_screens import NavigationStack, Screen, ScreenRouter


class HomeScreen(Screen):
    """Landing screen."""


class UserScreen(Screen):
    """Profile of a single user."""

    def __init__(self, user_id: str):
        self.user_id = user_id

    @classmethod
    def from_params(cls, params):
        return cls(params["user_id"])

    def __repr__(self):
        return f"UserScreen({self.user_id})"


class InboxScreen(Screen):
    """Shared inbox, reused until it tears down."""

    def did_teardown(self):
        print("inbox released")


class LoginScreen(Screen):
    """Modal login form."""


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    nav = NavigationStack()
    router = ScreenRouter(nav)

    router.map("home", HomeScreen, resets=True, meta_title="Home")
    router.map("users/:user_id", UserScreen)
    router.map("inbox", InboxScreen, shared=True)
    router.map("login", LoginScreen, modal=True, transition="flip", presentation="form_sheet")

    @router.action("logout/:user_id")
    def logout(params):
        print(f"logging out {params['user_id']}")

    print("--- Navigation Demo ---")
    router.open("home")
    router.open("users/1")
    inbox = router.open("inbox")
    router.open("users/2")
    print(f"Stack: {nav.screens}")

    # Shared screens already in the stack are popped back to
    router.open("inbox")
    print(f"Back to inbox: {nav.screens}")

    router.open("login")
    print(f"Presented: {nav.presented.screens} ({nav.presented.transition_style.value})")
    router.pop()

    router.open("logout/2")
    inbox.teardown()
    print(f"Shared screens cached: {len(router.screen_cache)}")

    print("\nRoutes:")
    for template, info in router.nodes()["routes"].items():
        print(f" - {template}: {info['doc'] or 'callback'}")
