from __future__ import annotations

import pytest

from portfolio.content import SECTION_IDS
from portfolio.navigation import (
    HEADER_PADDING,
    PENDING_KEY,
    SectionScroller,
    section_offset,
    smooth_scroll_script,
)


@pytest.mark.parametrize(
    "element_top, scroll_y, header, expected",
    [
        (800, 0, 64, 724),
        (800, 300, 64, 1024),
        (800, 0, None, 788),
        (800, 0, 0, 788),
        (-200, 1500, 72.5, 1215.5),
    ],
)
def test_section_offset(element_top, scroll_y, header, expected):
    assert section_offset(element_top, scroll_y, header) == expected


def test_padding_constant():
    assert HEADER_PADDING == 12


@pytest.fixture
def scroller(queue):
    return SectionScroller(queue, SECTION_IDS.values())


def test_unknown_section_is_a_noop(scroller, queue):
    assert scroller.scroll_to_section("nope") is False
    assert queue.pending == []


def test_known_section_queues_scroll(scroller, queue):
    assert scroller.scroll_to_section("projects") is True
    assert len(queue) == 1
    js = queue.pending[0]
    assert 'const id = "projects";' in js
    assert "portfolioScrollTo(id, 12)" in js
    assert "- headerHeight - padding" in js
    assert "if (!el) return false;" in js


def test_repeated_scroll_renders_a_fresh_frame(scroller, queue):
    rendered = []
    scroller.scroll_to_section("about")
    first = queue.flush(lambda markup, **kw: rendered.append(markup))
    scroller.scroll_to_section("about")
    second = queue.flush(lambda markup, **kw: rendered.append(markup))
    assert first != second
    assert rendered == [first, second]
    assert first.count('const id = "about";') == second.count('const id = "about";') == 1


def test_pending_jump_survives_until_consumed(scroller, queue, session_state):
    scroller.request("contact")
    assert session_state[PENDING_KEY] == "contact"
    assert scroller.consume() is True
    assert PENDING_KEY not in session_state
    assert len(queue) == 1
    assert scroller.consume() is False
    assert len(queue) == 1


def test_pending_jump_to_unknown_section(scroller, queue, session_state):
    scroller.request("gone")
    assert scroller.consume() is False
    assert queue.pending == []


def test_smooth_scroll_restores_previous_behaviour():
    js = smooth_scroll_script()
    assert js.startswith("<script>") and js.endswith("</script>")
    assert "const prev = root.style.scrollBehavior;" in js
    assert "root.style.scrollBehavior = 'smooth';" in js
    assert "'pagehide'" in js
    assert "root.style.scrollBehavior = prev;" in js
    assert "portfolioScrollTo(id, 12)" in js
    assert '"header.site-header"' in js
