# sections/about.py · about text, tech grid, stack radar
# ----------------------------------------------------------

from __future__ import annotations
from html import escape

import streamlit as st

from portfolio import content as c
from portfolio.assets import tech_icon
from portfolio.charts import radar_figure


def tech_grid_markup(stack=c.TECH_STACK) -> str:
    cards = "".join(
        f'<div class="tech-card"><div class="tech-icon-box">{tech_icon(t.name, t.icon)}</div>'
        f'<span class="tech-name">{escape(t.name)}</span></div>'
        for t in stack
    )
    return f'<div class="tech-grid">{cards}</div>'


def about_section(dark: bool, show_radar: bool = True):
    st.markdown(f"<div id='{c.SECTION_IDS['about']}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">About</div>', unsafe_allow_html=True)
    st.markdown(
        '<div class="about">' + "<br/>".join(escape(p) for p in c.ABOUT) + "</div>",
        unsafe_allow_html=True,
    )
    st.markdown('<div class="section-sub">Tech Stack</div>', unsafe_allow_html=True)
    st.markdown(tech_grid_markup(), unsafe_allow_html=True)

    if show_radar:
        _, mid, _ = st.columns([1, 1.2, 1])
        with mid:
            fig = radar_figure("Stack Radar", {t.name: t.level for t in c.TECH_STACK}, dark=dark)
            st.pyplot(fig, use_container_width=False, transparent=True, bbox_inches="tight")
