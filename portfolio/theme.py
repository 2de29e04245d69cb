"""Light/dark theme resolution and persistence.

The controller runs in two phases. Until :meth:`ThemeController.resolve`
has completed once, nothing is written back to storage, so a visitor's
saved choice is never clobbered by the pre-resolution default. After
that, every change toggles the root presentation flag and persists the
new value.

Storage and the environment are injected; the Streamlit bindings at the
bottom of this module wire them to the browser.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Mapping, Optional, Protocol

import streamlit as st

from portfolio.browser import (
    ScriptQueue,
    root_flag_script,
    session_queue,
    storage_script,
    theme_sync_script,
)

logger = logging.getLogger(__name__)

THEME_KEY = "akshar_theme"
LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)

# Shown before resolution; differs from the "query unavailable" default on purpose.
INITIAL_THEME = DARK

SESSION_KEY = "theme_controller"


class PreferenceStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


def system_theme(query: Callable[[], Optional[bool]]) -> Optional[str]:
    """Map the environment's dark-scheme query to a theme.

    ``True`` means dark, ``False`` light. A query that raises because the
    mechanism is unavailable also means light. ``None`` means the
    environment has not reported yet; the caller should ask again later.
    """
    try:
        prefers_dark = query()
    except Exception as exc:
        logger.debug("color-scheme query unavailable: %s", exc)
        return LIGHT
    if prefers_dark is None:
        return None
    return DARK if prefers_dark else LIGHT


class ThemeController:
    def __init__(
        self,
        store: PreferenceStore,
        prefers_dark: Callable[[], Optional[bool]],
        set_flag: Callable[[bool], None],
        key: str = THEME_KEY,
    ) -> None:
        self.store = store
        self.prefers_dark = prefers_dark
        self.set_flag = set_flag
        self.key = key
        self.theme = INITIAL_THEME
        self.mounted = False

    @property
    def is_dark(self) -> bool:
        return self.theme == DARK

    def _saved(self) -> Optional[str]:
        try:
            return self.store.get(self.key)
        except Exception as exc:
            logger.debug("could not read %s: %s", self.key, exc)
            return None

    def resolve(self) -> str:
        """Pick the session's theme. Only the first successful call has any effect.

        With no saved value and an environment that has not reported its
        color scheme yet, resolution is deferred: nothing is written and
        the controller stays unmounted.
        """
        if self.mounted:
            return self.theme
        saved = self._saved()
        if saved in THEMES:
            theme = saved
        else:
            theme = system_theme(self.prefers_dark)
            if theme is None:
                logger.debug("color scheme not reported yet; deferring resolution")
                return self.theme
        self.mounted = True
        self.theme = theme
        logger.debug("resolved theme %s (saved=%r)", self.theme, saved)
        self.apply()
        return self.theme

    def apply(self, theme: Optional[str] = None) -> None:
        if theme is not None:
            if theme not in THEMES:
                raise ValueError(f"unknown theme {theme!r}; expected one of {THEMES}")
            self.theme = theme
        if not self.mounted:
            return
        self.set_flag(self.is_dark)
        try:
            self.store.set(self.key, self.theme)
        except Exception as exc:
            logger.debug("could not persist %s=%s: %s", self.key, self.theme, exc)

    def toggle(self) -> str:
        # An explicit choice ends any deferred resolution.
        if not self.mounted:
            self.resolve()
            self.mounted = True
        self.apply(LIGHT if self.is_dark else DARK)
        return self.theme


# -----------------------------
# Streamlit bindings
# -----------------------------
class BrowserStore:
    """Per-origin storage as seen from a Streamlit session.

    Reads come from the cookies the browser sent when the session opened;
    writes are queued as a script that updates localStorage and the cookie.
    """

    def __init__(self, cookies: Mapping[str, str], queue: ScriptQueue) -> None:
        self.values: Dict[str, str] = dict(cookies)
        self.queue = queue

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.queue.push(storage_script(key, value))
        self.values[key] = value


def streamlit_prefers_dark() -> Optional[bool]:
    # AttributeError on Streamlit without st.context.theme -> light.
    # None on a session's first run -> not known yet.
    kind = st.context.theme.type
    if kind is None:
        return None
    return kind == DARK


def session_theme() -> ThemeController:
    """Return this session's controller, resolving it once the signals are in.

    Streamlit may not report the color scheme on a session's first run;
    resolution then waits for a later rerun.
    """
    controller = st.session_state.get(SESSION_KEY)
    if controller is None:
        queue = session_queue()
        try:
            cookies = dict(st.context.cookies)
        except Exception as exc:
            logger.debug("request cookies unavailable: %s", exc)
            cookies = {}
        controller = ThemeController(
            store=BrowserStore(cookies, queue),
            prefers_dark=streamlit_prefers_dark,
            set_flag=lambda dark: queue.push(root_flag_script(dark)),
        )
        st.session_state[SESSION_KEY] = controller
    controller.resolve()
    if not controller.mounted:
        # Until the server knows, the browser shows its own answer.
        session_queue().push(theme_sync_script(controller.key))
    return controller
