from __future__ import annotations

import pytest
from PIL import Image

from portfolio.assets import (
    RESUME,
    RESUME_URL,
    STATIC,
    image_with_fallback,
    initial_badge,
    project_screenshot,
    read_image,
    resume_bytes,
    resume_page_count,
    tech_icon,
)


@pytest.fixture
def png(tmp_path):
    path = tmp_path / "react.png"
    Image.new("RGB", (4, 4), (34, 211, 238)).save(path)
    return path


@pytest.mark.parametrize("name, expected", [("React", "R"), ("next.js", "N"), ("  git", "G"), ("", "?")])
def test_initial_badge(name, expected):
    assert initial_badge(name) == expected


def test_read_image(png):
    data, mime = read_image(png)
    assert mime == "image/png"
    assert data == png.read_bytes()


def test_missing_image_shows_badge(tmp_path):
    markup = image_with_fallback(tmp_path / "nope.png", "Docker", "D", "tech-icon")
    assert "<img" not in markup
    assert 'style="display:flex"' in markup
    assert ">D</div>" in markup
    assert "tech-icon-fallback" in markup


def test_corrupt_image_shows_badge(tmp_path):
    bad = tmp_path / "broken.png"
    bad.write_bytes(b"\x89PNG not really")
    assert read_image(bad) is None
    assert "<img" not in image_with_fallback(bad, "x", "X")


def test_good_image_hides_badge(png):
    markup = image_with_fallback(png, "React", "R", "tech-icon")
    assert markup.startswith('<img class="tech-icon" src="data:image/png;base64,')
    assert "onerror=" in markup
    assert 'style="display:none">R</div>' in markup


def test_fallback_text_is_escaped(tmp_path):
    markup = image_with_fallback(tmp_path / "x.png", "a", "<b>&</b>")
    assert "&lt;b&gt;&amp;&lt;/b&gt;" in markup


def test_tech_icon_and_screenshot_fallbacks(tmp_path):
    assert ">T</div>" in tech_icon("TypeScript", "typescript.png", base=tmp_path)
    assert ">PassOP Preview</div>" in project_screenshot("PassOP", "passop.png", base=tmp_path)


def test_tech_icon_found(tmp_path, png):
    assert "<img" in tech_icon("React", png.name, base=png.parent)


def test_missing_resume(tmp_path):
    assert resume_bytes(tmp_path / "resume.pdf") is None
    assert resume_page_count(tmp_path / "resume.pdf") == 0


def test_resume_bytes(tmp_path):
    pdf = tmp_path / "resume.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    assert resume_bytes(pdf) == b"%PDF-1.4"


def test_resume_is_served_from_static():
    assert RESUME == STATIC / "resume.pdf"
    assert STATIC.name == "static" and STATIC.parent.name == "streamlit_repo"
    assert RESUME_URL == "app/static/resume.pdf"
