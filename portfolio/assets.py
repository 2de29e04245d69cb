"""Static assets and their fallbacks.

Missing or broken images never raise: the caller gets a badge instead.
"""

from __future__ import annotations
import base64
import io
import logging
from html import escape
from pathlib import Path
from typing import Optional, Tuple

import streamlit as st
from PIL import Image

logger = logging.getLogger(__name__)

ASSETS = Path(__file__).resolve().parents[1] / "streamlit_repo" / "assets"
# served by Streamlit static file serving (see .streamlit/config.toml)
STATIC = Path(__file__).resolve().parents[1] / "streamlit_repo" / "static"
RESUME = STATIC / "resume.pdf"
RESUME_URL = "app/static/resume.pdf"
PROFILE_IMAGE = ASSETS / "profile-placeholder.png"
TECH_ICONS = ASSETS / "tech-icons"
SCREENSHOTS = ASSETS / "project-screenshots"


def initial_badge(name: str) -> str:
    name = name.strip()
    return name[0].upper() if name else "?"


def read_image(path: Path) -> Optional[Tuple[bytes, str]]:
    """Return (bytes, mime) for a decodable image, else None."""
    try:
        data = Path(path).read_bytes()
        with Image.open(io.BytesIO(data)) as img:
            mime = Image.MIME.get(img.format or "", "image/png")
            img.verify()
    except Exception as exc:
        logger.debug("image %s unusable: %s", path, exc)
        return None
    return data, mime


def image_with_fallback(path: Path, alt: str, fallback: str, css_class: str = "") -> str:
    """Markup for an image, or its fallback badge when it cannot load.

    With a usable file the ``<img>`` is shown and the badge sits hidden
    next to it; the browser swaps them if decoding still fails there.
    Without one, only the visible badge is emitted.
    """
    badge_cls = f"img-fallback {css_class}-fallback".strip() if css_class else "img-fallback"
    loaded = read_image(path)
    if loaded is None:
        return f'<div class="{badge_cls}" style="display:flex">{escape(fallback)}</div>'
    data, mime = loaded
    uri = f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"
    return (
        f'<img class="{escape(css_class)}" src="{uri}" alt="{escape(alt)}" '
        "onerror=\"this.style.display='none';this.nextElementSibling.style.display='flex';\"/>"
        f'<div class="{badge_cls}" style="display:none">{escape(fallback)}</div>'
    )


def tech_icon(name: str, icon: str, base: Path = TECH_ICONS) -> str:
    return image_with_fallback(base / icon, name, initial_badge(name), "tech-icon")


def project_screenshot(name: str, image: str, base: Path = SCREENSHOTS) -> str:
    return image_with_fallback(base / image, f"{name} screenshot", f"{name} Preview", "shot")


def resume_bytes(path: Path = RESUME) -> Optional[bytes]:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        logger.debug("resume unavailable at %s: %s", path, exc)
        return None


# -----------------------------
# Resume preview (PyMuPDF)
# -----------------------------
def resume_page_count(path: Path = RESUME) -> int:
    import fitz  # PyMuPDF
    try:
        with fitz.open(str(path)) as doc:
            return doc.page_count
    except Exception as exc:
        logger.debug("cannot open resume %s: %s", path, exc)
        return 0


@st.cache_data(show_spinner=False)
def resume_page_jpeg(pdf_path_str: str, page_index: int, dpi: int = 110, quality: int = 75) -> bytes:
    import fitz
    doc = fitz.open(pdf_path_str)
    try:
        mat = fitz.Matrix(dpi / 72, dpi / 72)
        page = doc.load_page(page_index)
        pix = page.get_pixmap(matrix=mat, colorspace=fitz.csRGB, alpha=False)
        return pix.tobytes("jpeg", jpg_quality=quality)
    finally:
        doc.close()
