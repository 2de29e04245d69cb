# portfolio/browser.py · scripts for the parent document
# ----------------------------------------------------------
# Streamlit renders components in sandboxed iframes; every snippet here
# reaches the page through window.parent. Python never touches the DOM
# directly: it queues script text and flushes it once per run.
# ----------------------------------------------------------

from __future__ import annotations
import json
import logging
from typing import Callable, List, Optional

import streamlit as st
from streamlit.components.v1 import html as st_html

logger = logging.getLogger(__name__)

QUEUE_KEY = "page_scripts"
HEADER_SELECTOR = "header.site-header"
DARK_CLASS = "dark"

# Streamlit's own scroller moved between releases; first match wins.
SCROLLER_SELECTORS = [
    '[data-testid="stMain"]',
    'section[data-testid="stAppViewContainer"] .main',
    "section.main",
    '[data-testid="stAppViewContainer"]',
]

SCROLL_FUNCTION = """
function portfolioScroller(doc, win) {
  const sels = %(selectors)s;
  for (const s of sels) {
    const el = doc.querySelector(s);
    if (el && el.scrollHeight > el.clientHeight) return el;
  }
  return win;
}
function portfolioScrollTo(targetId, padding) {
  const win = window.parent;
  const doc = win.document;
  const el = doc.getElementById(targetId);
  if (!el) return false;
  const header = doc.querySelector(%(header)s);
  const headerHeight = header ? header.getBoundingClientRect().height : 0;
  const scroller = portfolioScroller(doc, win);
  const isWin = scroller === win;
  const origin = isWin ? 0 : scroller.getBoundingClientRect().top;
  const current = isWin ? win.scrollY : scroller.scrollTop;
  const top = (el.getBoundingClientRect().top - origin) + current - headerHeight - padding;
  scroller.scrollTo({top: top, behavior: 'smooth'});
  return true;
}
""" % {"selectors": json.dumps(SCROLLER_SELECTORS), "header": json.dumps(HEADER_SELECTOR)}


def js_str(value: str) -> str:
    """JSON-encode a Python string for safe embedding in a script body."""
    return json.dumps(value).replace("</", "<\\/")


def root_flag_script(dark: bool) -> str:
    return (
        "try { window.parent.document.documentElement.classList.toggle(%s, %s); } catch(e) {}"
        % (js_str(DARK_CLASS), "true" if dark else "false")
    )


def theme_sync_script(key: str) -> str:
    """Show the browser's own theme answer while the server has none.

    A saved ``light``/``dark`` in localStorage wins, else
    ``prefers-color-scheme`` (light when ``matchMedia`` is missing). Only
    the class is set; nothing is persisted. A saved value the server could
    not see is copied to the cookie and the page reloads once so the next
    session reads it; when cookies are blocked the copy does not stick and
    no reload happens.
    """
    return (
        "(function(){\n"
        "  const win = window.parent;\n"
        "  const key = %(key)s;\n"
        "  let saved = null;\n"
        "  try { saved = win.localStorage.getItem(key); } catch(e) {}\n"
        "  const valid = saved === 'light' || saved === 'dark';\n"
        "  let theme = 'light';\n"
        "  if (valid) theme = saved;\n"
        "  else { try { if (win.matchMedia && win.matchMedia('(prefers-color-scheme: dark)').matches) theme = 'dark'; } catch(e) {} }\n"
        "  try { win.document.documentElement.classList.toggle(%(cls)s, theme === 'dark'); } catch(e) {}\n"
        "  if (!valid) return;\n"
        "  try {\n"
        "    win.document.cookie = key + '=' + saved + '; path=/; max-age=31536000; SameSite=Lax';\n"
        "    if (win.document.cookie.split('; ').indexOf(key + '=' + saved) !== -1) win.location.reload();\n"
        "  } catch(e) {}\n"
        "})();"
        % {"key": js_str(key), "cls": js_str(DARK_CLASS)}
    )


def storage_script(key: str, value: str, max_age: int = 60 * 60 * 24 * 365) -> str:
    """Write ``key=value`` to localStorage and mirror it into a cookie.

    The cookie is what the server sees on the next session; localStorage is
    the browser-side copy. Either write may fail (private mode, quota,
    cookies blocked) and is dropped silently.
    """
    cookie = "%s=%s; path=/; max-age=%d; SameSite=Lax" % (key, value, max_age)
    return (
        "try { window.parent.localStorage.setItem(%s, %s); } catch(e) {}\n"
        "try { window.parent.document.cookie = %s; } catch(e) {}"
        % (js_str(key), js_str(value), js_str(cookie))
    )


def scroll_script(target_id: str, padding: float) -> str:
    # Retry briefly: on a rerun the target may not be in the DOM yet.
    return SCROLL_FUNCTION + (
        "(function(){\n"
        "  const id = %s;\n"
        "  if (portfolioScrollTo(id, %s)) return;\n"
        "  [80, 250, 600].forEach(t => setTimeout(() => portfolioScrollTo(id, %s), t));\n"
        "})();"
        % (js_str(target_id), _num(padding), _num(padding))
    )


def _num(value: float) -> str:
    return repr(int(value)) if float(value).is_integer() else repr(float(value))


class ScriptQueue:
    """Collects snippets during one Streamlit run and emits them together."""

    def __init__(self) -> None:
        self.pending: List[str] = []
        self.flushes = 0

    def push(self, js: str) -> None:
        self.pending.append(js)

    def __len__(self) -> int:
        return len(self.pending)

    def flush(self, render: Optional[Callable[..., object]] = None) -> Optional[str]:
        if not self.pending:
            return None
        body = "\n".join(self.pending)
        self.pending = []
        self.flushes += 1
        # Identical markup would reuse the old frame and never run again.
        markup = f"<script>\n// flush {self.flushes}\n{body}\n</script>"
        logger.debug("flushing %d bytes of page script", len(markup))
        (render or st_html)(markup, height=0)
        return markup


def session_queue() -> ScriptQueue:
    """The queue for this Streamlit session; callbacks push, the page flushes."""
    if QUEUE_KEY not in st.session_state:
        st.session_state[QUEUE_KEY] = ScriptQueue()
    return st.session_state[QUEUE_KEY]
