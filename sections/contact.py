# sections/contact.py · form (presentation only), links, resume preview
# ----------------------------------------------------------

from __future__ import annotations
from html import escape

import streamlit as st

from portfolio import content as c
from portfolio.assets import RESUME, resume_page_count, resume_page_jpeg

LINK_ICONS = {"mail": "✉️", "linkedin": "💼", "x": "𝕏", "web": "🔗"}


def links_markup(links=c.CONTACT_LINKS) -> str:
    rows = "".join(
        f'<a class="contact-link" href="{escape(link.href)}">'
        f'{LINK_ICONS.get(link.kind, LINK_ICONS["web"])} <span>{escape(link.label)}</span></a>'
        for link in links
    )
    return f'<div class="card"><h4>Connect with me</h4>{rows}</div>'


def contact_form():
    # No submission handler: the form is layout only.
    with st.form("contact", clear_on_submit=False, border=True):
        st.text_input("Your name", placeholder="Enter your full name")
        st.text_input("Email", placeholder="your.email@example.com")
        st.text_area("Message", placeholder="Tell me about your project or idea...", height=120)
        st.form_submit_button("✉️  Send Message")
    st.markdown(
        f'<div class="muted">Or reach me directly at <a href="mailto:{escape(c.EMAIL)}">email</a></div>',
        unsafe_allow_html=True,
    )


def resume_preview(max_pages: int = 2):
    n_pages = resume_page_count(RESUME)
    if not n_pages:
        return
    with st.expander("Preview resume", expanded=False):
        for i in range(min(max_pages, n_pages)):
            st.image(resume_page_jpeg(str(RESUME), i), caption=f"Page {i+1}/{n_pages}",
                     width="stretch")


def contact_section(show_resume_preview: bool = True):
    st.markdown(f"<div id='{c.SECTION_IDS['contact']}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Get in touch</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="section-blurb">{escape(c.CONTACT_BLURB)}</div>', unsafe_allow_html=True)
    cL, cR = st.columns([1, 1])
    with cL:
        contact_form()
    with cR:
        st.markdown(links_markup(), unsafe_allow_html=True)
        st.markdown(
            '<div class="card"><h5>Location & Availability</h5><p class="muted">'
            + "<br/>".join(escape(line) for line in c.LOCATION_LINES)
            + "</p></div>",
            unsafe_allow_html=True,
        )
        if show_resume_preview:
            resume_preview()
