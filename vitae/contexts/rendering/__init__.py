"""
Rendering Context

Responsibilities:
- Formats résumés as fixed-width plain text (cv.txt)
- Renders résumés as a standalone HTML page (cv.html)
- Writes output documents and reports what was rendered

Owns: Output layout, text styles, HTML templates
Never: Decides how input documents are read
"""

from vitae.contexts.rendering.cv_renderer import RenderResult, render_cv_file
from vitae.contexts.rendering.html_renderer import render_html
from vitae.contexts.rendering.style_config import TextStyle, load_text_style
from vitae.contexts.rendering.text_renderer import has_content, included_sections, render_text

__all__ = [
    "render_cv_file",
    "RenderResult",
    "render_text",
    "render_html",
    "included_sections",
    "has_content",
    "TextStyle",
    "load_text_style",
]
