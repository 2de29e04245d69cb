# portfolio/navigation.py · in-page section scrolling
# ----------------------------------------------------------
# Anchors land below the fixed header: the target offset is
#   element top + current scroll - header height - HEADER_PADDING
# The same formula runs in the browser (portfolio.browser.SCROLL_FUNCTION).
# ----------------------------------------------------------

from __future__ import annotations
import logging
from typing import Iterable, Optional

import streamlit as st

from portfolio.browser import (
    HEADER_SELECTOR,
    SCROLL_FUNCTION,
    ScriptQueue,
    js_str,
    scroll_script,
)

logger = logging.getLogger(__name__)

HEADER_PADDING = 12
PENDING_KEY = "pending_jump"


def section_offset(
    element_top: float,
    scroll_y: float,
    header_height: Optional[float] = None,
    padding: float = HEADER_PADDING,
) -> float:
    """Scroll target for a section; a missing header counts as zero height."""
    return element_top + scroll_y - (header_height or 0) - padding


class SectionScroller:
    def __init__(self, queue: ScriptQueue, section_ids: Iterable[str], padding: float = HEADER_PADDING):
        self.queue = queue
        self.section_ids = frozenset(section_ids)
        self.padding = padding

    def scroll_to_section(self, target_id: str) -> bool:
        if target_id not in self.section_ids:
            logger.debug("no section %r; ignoring", target_id)
            return False
        self.queue.push(scroll_script(target_id, self.padding))
        return True

    # Button clicks rerun the script; the jump is parked until the page is drawn.
    def request(self, target_id: str) -> None:
        st.session_state[PENDING_KEY] = target_id

    def consume(self) -> bool:
        target_id = st.session_state.pop(PENDING_KEY, None)
        if target_id is None:
            return False
        return self.scroll_to_section(target_id)


def smooth_scroll_script(padding: float = HEADER_PADDING) -> str:
    """Page-wide smooth scrolling for as long as the hosting frame lives.

    Saves the root's previous ``scroll-behavior``, switches it to smooth,
    routes header ``#anchor`` clicks through the offset formula and puts
    the previous value back when the frame is torn down.
    """
    return "<script>\n" + SCROLL_FUNCTION + (
        "(function(){\n"
        "  const win = window.parent;\n"
        "  const root = win.document.documentElement;\n"
        "  const prev = root.style.scrollBehavior;\n"
        "  root.style.scrollBehavior = 'smooth';\n"
        "  function onClick(e) {\n"
        "    const a = e.target.closest ? e.target.closest('a[href^=\"#\"]') : null;\n"
        "    if (!a || !a.closest(%(header)s)) return;\n"
        "    const id = a.getAttribute('href').slice(1);\n"
        "    if (!id) return;\n"
        "    e.preventDefault();\n"
        "    portfolioScrollTo(id, %(padding)s);\n"
        "  }\n"
        "  win.document.addEventListener('click', onClick);\n"
        "  window.addEventListener('pagehide', function(){\n"
        "    root.style.scrollBehavior = prev;\n"
        "    win.document.removeEventListener('click', onClick);\n"
        "  });\n"
        "})();\n"
        "</script>"
    ) % {"header": js_str(HEADER_SELECTOR), "padding": padding}
