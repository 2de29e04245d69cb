# sections/hero.py · greeting, stats, portrait
# ----------------------------------------------------------

from __future__ import annotations
from html import escape

import streamlit as st

from portfolio import content as c
from portfolio.assets import PROFILE_IMAGE, image_with_fallback, initial_badge, resume_bytes
from portfolio.navigation import SectionScroller


def stats_markup(stats=c.STATS) -> str:
    cells = "".join(
        f'<div class="stat"><div class="stat-value">{escape(s.value)}</div>'
        f'<div class="stat-label">{escape(s.label)}</div></div>'
        for s in stats
    )
    return f'<div class="stat-grid">{cells}</div>'


def hero_section(scroller: SectionScroller):
    st.markdown(f"<div id='{c.SECTION_IDS['home']}' class='section'></div>", unsafe_allow_html=True)
    col_text, col_img = st.columns([1.3, 1.0], vertical_alignment="center")
    with col_text:
        st.markdown(
            f'<div class="pill"><span class="pulse"></span>{escape(c.AVAILABILITY)}</div>'
            f'<h1 class="hero">Hi, I\'m <span class="accent">{escape(c.FIRST_NAME)}</span><br/>'
            f'<span class="hero-role">{escape(c.ROLE)}</span></h1>'
            f'<div class="hero-sub">{escape(c.TAGLINE)}</div>',
            unsafe_allow_html=True,
        )
        b1, b2 = st.columns(2)
        with b1:
            data = resume_bytes()
            if data is not None:
                st.download_button("⬇️  Download Resume", data=data, file_name="resume.pdf",
                                   mime="application/pdf", width="stretch")
            else:
                st.caption("Resume coming soon.")
        with b2:
            st.button("View Projects", key="hero_projects", width="stretch",
                      on_click=scroller.request, args=(c.SECTION_IDS["projects"],))
        st.markdown(stats_markup(), unsafe_allow_html=True)
    with col_img:
        st.markdown(
            '<div class="portrait">'
            + image_with_fallback(PROFILE_IMAGE, c.NAME, initial_badge(c.NAME), "portrait-img")
            + "</div>",
            unsafe_allow_html=True,
        )
