# app.py · Akshar Bhakare · single-page portfolio
# ----------------------------------------------------------------
# Hero, about/tech stack, projects, contact. Two pieces of behaviour:
#  • light/dark theme, resolved once per session and persisted per origin
#  • header anchors that land below the fixed header
# Run:  streamlit run streamlit_repo/app.py
# ----------------------------------------------------------------

from __future__ import annotations
import logging
from html import escape

import streamlit as st
from streamlit.components.v1 import html as st_html

from portfolio import content as c
from portfolio.assets import RESUME_URL
from portfolio.browser import session_queue
from portfolio.navigation import SectionScroller, smooth_scroll_script
from portfolio.theme import session_theme
from sections.about import about_section
from sections.contact import contact_section
from sections.hero import hero_section
from sections.projects import projects_section

# -----------------------------
# Page config + CSS
# -----------------------------
st.set_page_config(
    page_title="Akshar — Portfolio",
    page_icon="✨",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown("""
<style>
/* light is the base; html.dark (toggled by the theme controller) overrides */
.stApp { background: linear-gradient(180deg, #f9fafb, #f3f4f6); color: #1f2937; }
html.dark .stApp { background: linear-gradient(180deg, #0F1117, #0B0D12); color: #f3f4f6; }
.block-container { padding-top: 6.5rem; max-width: 72rem; }

/* --- fixed header --- */
header.site-header {
  position: fixed; top: 1rem; left: 0; right: 0; z-index: 999990;
  max-width: 72rem; margin: 0 auto; padding: .75rem 1.5rem;
  display: flex; align-items: center; justify-content: space-between;
  border-radius: 1rem; backdrop-filter: blur(12px);
  background: rgba(243,244,246,.8); border: 1px solid rgba(229,231,235,.5);
}
html.dark header.site-header { background: rgba(15,17,23,.6); border-color: #262626; }
header.site-header .brand {
  font-weight: 700; font-size: 1.1rem; text-decoration: none;
  background: linear-gradient(90deg, #10b981, #06b6d4); -webkit-background-clip: text; color: transparent;
}
header.site-header nav a { margin-left: 1.5rem; font-size: .9rem; font-weight: 500; color: inherit; text-decoration: none; }
header.site-header nav a:hover { color: #10b981; }
html.dark header.site-header nav a:hover { color: #22d3ee; }
header.site-header .resume { padding: .4rem .8rem; border-radius: .75rem; background: #34d399; color: #111827 !important; }

/* --- hero --- */
.pill { display: inline-flex; align-items: center; gap: .5rem; padding: .4rem 1rem; border-radius: 999px;
        background: rgba(229,231,235,.8); font-size: .85rem; font-weight: 500; }
html.dark .pill { background: rgba(255,255,255,.1); }
.pill .pulse { width: .5rem; height: .5rem; border-radius: 999px; background: #22c55e; }
.hero { font-weight: 900; line-height: 1.1; font-size: clamp(32px, 4vw, 52px); margin: 1rem 0 .5rem; }
.hero .accent { background: linear-gradient(90deg, #10b981, #06b6d4, #10b981); -webkit-background-clip: text; color: transparent; }
html.dark .hero .accent { background: linear-gradient(90deg, #22D3EE, #6EE7B7, #22D3EE); -webkit-background-clip: text; }
.hero-role { color: #374151; }
html.dark .hero-role { color: #e5e7eb; }
.hero-sub { font-size: clamp(15px, 1.3vw, 20px); line-height: 1.6; opacity: .85; max-width: 40rem; margin-bottom: 1rem; }
.stat-grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 1rem; max-width: 28rem; padding-top: 1rem; }
.stat { text-align: center; padding: .8rem; border-radius: .75rem; background: rgba(255,255,255,.6); }
html.dark .stat { background: rgba(255,255,255,.05); border: 1px solid #262626; }
.stat-value { font-size: 1.5rem; font-weight: 700; }
.stat-label { font-size: .8rem; opacity: .7; }
.portrait { display: flex; justify-content: center; }
.portrait-img, .portrait-img-fallback { width: 20rem; height: 20rem; border-radius: 1.5rem; object-fit: cover; }

/* --- sections --- */
.section { position: relative; top: 0; }
.section-title { font-size: clamp(32px, 4vw, 56px); font-weight: 700; text-align: center; margin: 4rem 0 1rem; }
.section-sub { font-size: 1.4rem; font-weight: 600; text-align: center; margin: 2.5rem 0 1.5rem; }
.section-blurb, .about { text-align: center; opacity: .8; max-width: 48rem; margin: 0 auto 2rem; line-height: 1.7; }
.tech-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(7.5rem, 1fr)); gap: 1rem; max-width: 56rem; margin: 0 auto; }
.tech-card { display: flex; flex-direction: column; align-items: center; padding: 1rem; border-radius: .75rem;
             background: rgba(255,255,255,.6); transition: transform .3s ease-out; }
.tech-card:hover { transform: translateY(-8px) scale(1.05); }
html.dark .tech-card { background: rgba(255,255,255,.05); border: 1px solid #262626; }
.tech-icon-box { width: 3rem; height: 3rem; display: flex; align-items: center; justify-content: center; margin-bottom: .5rem; }
.tech-icon { width: 2.5rem; height: 2.5rem; object-fit: contain; }
.tech-name { font-size: .85rem; font-weight: 500; text-align: center; }

/* image fallbacks: initial badge / preview panel */
.img-fallback { align-items: center; justify-content: center; font-weight: 700; }
.tech-icon-fallback { width: 2.5rem; height: 2.5rem; border-radius: .5rem; color: #fff; font-size: .8rem;
                      background: linear-gradient(135deg, #3b82f6, #9333ea); }
.portrait-img-fallback { font-size: 5rem; color: #fff; background: linear-gradient(135deg, #34d399, #22d3ee); }
.shot-fallback { width: 100%; height: 100%; font-size: .9rem; opacity: .7;
                 background: linear-gradient(135deg, rgba(52,211,153,.2), rgba(34,211,238,.2)); }

/* --- projects --- */
.project-card { border-radius: 1rem; overflow: hidden; background: rgba(255,255,255,.8);
                border: 1px solid rgba(255,255,255,.2); transition: transform .3s ease-out; margin-bottom: 1.5rem; }
.project-card:hover { transform: translateY(-8px) scale(1.02); }
html.dark .project-card { background: rgba(255,255,255,.1); border-color: #404040; }
.shot-box { aspect-ratio: 16 / 9; display: flex; align-items: center; justify-content: center;
            background: linear-gradient(135deg, #f3f4f6, #e5e7eb); }
html.dark .shot-box { background: linear-gradient(135deg, #1f2937, #111827); }
.shot { width: 100%; height: 100%; object-fit: cover; }
.project-body { padding: 1.5rem; }
.project-body h3 { font-weight: 700; font-size: 1.25rem; margin: 0 0 .75rem; }
.badge { display: inline-block; padding: .2rem .6rem; margin: 0 .4rem .4rem 0; border-radius: 999px;
         font-size: .75rem; background: rgba(16,185,129,.12); }
.project-links a { margin-right: 1rem; font-weight: 600; }

/* --- contact --- */
.card { padding: 1.5rem; border-radius: .75rem; margin-bottom: 1rem; border: 1px solid rgba(209,213,219,.5);
        background: linear-gradient(135deg, rgba(243,244,246,.6), rgba(229,231,235,.4)); }
html.dark .card { border-color: #262626; background: linear-gradient(135deg, rgba(255,255,255,.05), transparent); }
.contact-link { display: flex; gap: .6rem; align-items: center; padding: .6rem; margin-bottom: .6rem;
                border-radius: .5rem; border: 1px solid #d1d5db; color: inherit !important; text-decoration: none; }
html.dark .contact-link { border-color: #404040; }
.muted { opacity: .7; font-size: .9rem; }
</style>
""", unsafe_allow_html=True)

# -----------------------------
# Feature flags
# -----------------------------
SHOW_STACK_RADAR = True
SHOW_RESUME_PREVIEW = True
LOG_LEVEL = logging.INFO

logging.getLogger("portfolio").setLevel(LOG_LEVEL)

# -----------------------------
# Session wiring
# -----------------------------
queue = session_queue()
theme = session_theme()
scroller = SectionScroller(queue, c.SECTION_IDS.values())

# Same markup every run, so the frame (and its smooth-scroll state) stays mounted.
st_html(smooth_scroll_script(), height=0)


def header_markup() -> str:
    links = "".join(f'<a href="#{escape(anchor)}">{escape(label)}</a>' for label, anchor in c.NAV_LINKS)
    return (
        '<header class="site-header">'
        f'<a class="brand" href="#{c.SECTION_IDS["home"]}">{escape(c.NAME)}</a>'
        f'<nav>{links}<a class="resume" href="{RESUME_URL}" target="_blank">⬇ Resume</a></nav>'
        "</header>"
    )


st.markdown(header_markup(), unsafe_allow_html=True)

_, toggle_col = st.columns([12, 1])
with toggle_col:
    st.button("🌙" if not theme.is_dark else "☀️", key="theme_toggle", help="Toggle theme",
              on_click=theme.toggle)

# -----------------------------
# Sidebar
# -----------------------------
st.sidebar.title("Navigate")
for label, anchor in [("Home", c.SECTION_IDS["home"])] + c.NAV_LINKS:
    st.sidebar.button(label, key=f"nav_{anchor}", width="stretch",
                      on_click=scroller.request, args=(anchor,))

# -----------------------------
# Page
# -----------------------------
scroller.consume()

hero_section(scroller)
st.markdown("---")
about_section(dark=theme.is_dark, show_radar=SHOW_STACK_RADAR)
st.markdown("---")
projects_section()
st.markdown("---")
contact_section(show_resume_preview=SHOW_RESUME_PREVIEW)

queue.flush()
