# sections/projects.py · project cards
# ----------------------------------------------------------

from __future__ import annotations
from html import escape

import streamlit as st

from portfolio import content as c
from portfolio.assets import project_screenshot


def project_card_markup(p: c.Project) -> str:
    badges = "".join(f"<span class='badge'>{escape(t)}</span>" for t in p.tech)
    return (
        f'<article class="project-card" id="project-{escape(p.slug)}">'
        f'<div class="shot-box">{project_screenshot(p.name, p.image)}</div>'
        f'<div class="project-body"><h3>{escape(p.name)}</h3>'
        f"<p>{escape(p.description)}</p>"
        f'<div class="badges">{badges}</div>'
        f'<div class="project-links"><a href="{escape(p.demo)}">Live demo ↗</a>'
        f'<a href="{escape(p.github)}">GitHub</a></div>'
        "</div></article>"
    )


def projects_section():
    st.markdown(f"<div id='{c.SECTION_IDS['projects']}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Projects</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="section-blurb">{escape(c.PROJECTS_BLURB)}</div>', unsafe_allow_html=True)
    cols = st.columns(3)
    for i, p in enumerate(c.PROJECTS):
        with cols[i % 3]:
            st.markdown(project_card_markup(p), unsafe_allow_html=True)
