"""
HTML Résumé Renderer

Renders the résumé web page (cv.html) from a Jinja2 template with the
stylesheet inlined. Free-text fields go through Markdown and are flattened to
inline HTML so they can sit inside the template's own block elements.

Template filters:
    date      - "2020-05" -> <time datetime="2020-05-01T00:00:00.000Z">2020</time>
    markdown  - Markdown to inline HTML
    link      - URL -> <a href="URL">host</a> with any leading "www." dropped
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

import markdown as markdown_lib
from markupsafe import Markup, escape

from vitae.contexts.intake.resume_data_structure import Resume
from vitae.contexts.rendering.defaults import PRESENT_LABEL
from vitae.contexts.rendering.template_registry import TemplateRegistry

CV_TEMPLATE = "cv.html.jinja"
CV_STYLESHEET = "style.css"

DATE_FORMATS = ("%Y-%m-%d", "%Y-%m", "%Y")

# Block-level tags dropped when flattening Markdown output to inline HTML
BLOCK_TAGS = re.compile(r"</?(?:p|ul|ol|li|h[1-6])(?:\s[^>]*)?>|<hr\s*/?>|<br\s*/?>")

X_TWITTER_NETWORKS = {"x", "twitter"}
X_HANDLE_FROM_URL = re.compile(r"https?://.+?/(\w{1,15})")


# =========================================================================
# TEMPLATE FILTERS
# =========================================================================


def parse_date(value: str) -> datetime:
    """
    Parse a JSON Resume date (YYYY, YYYY-MM, YYYY-MM-DD or a full ISO 8601 timestamp).

    Timestamps with an offset are converted to UTC and returned naive.

    Raises:
        ValueError: If value matches none of the accepted formats
    """
    value = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    try:
        # fromisoformat() only accepts a trailing "Z" from Python 3.11
        parsed = datetime.fromisoformat(re.sub(r"[Zz]$", "+00:00", value))
    except ValueError:
        raise ValueError(
            f"Unrecognized date: {value!r}. Expected one of {DATE_FORMATS} or an ISO 8601 timestamp"
        ) from None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def date_filter(value: Optional[str]) -> Markup:
    """Render a date as a <time> element showing the year; empty means ongoing."""
    if not value:
        return Markup(escape(PRESENT_LABEL))

    parsed = parse_date(value)
    iso = parsed.strftime("%Y-%m-%dT%H:%M:%S.000Z")
    return Markup(f'<time datetime="{iso}">{parsed.year}</time>')


def markdown_filter(value: Optional[str]) -> Markup:
    """Convert Markdown to inline HTML (paragraph, list and heading tags removed)."""
    if not value:
        return Markup("")

    html = markdown_lib.markdown(value)
    return Markup(BLOCK_TAGS.sub("", html).strip())


def link_filter(value: Optional[str]) -> Markup:
    """Render a URL as a link labelled with its host name."""
    if not value:
        return Markup("")

    host = urlparse(value).netloc
    if host.startswith("www."):
        host = host[4:]
    return Markup(f'<a href="{escape(value)}">{escape(host)}</a>')


TEMPLATE_FILTERS = {
    "date": date_filter,
    "markdown": markdown_filter,
    "link": link_filter,
}


# =========================================================================
# RENDERING
# =========================================================================


def find_x_twitter_handle(resume: Resume) -> Optional[str]:
    """
    Derive an @handle from an X/Twitter profile.

    Uses the profile's username, or the first path segment of its URL when no
    username is given. Returns None when there is no such profile or no handle
    can be derived.
    """
    profile = next(
        (p for p in resume.basics.profiles if p.network.lower() in X_TWITTER_NETWORKS),
        None,
    )
    if profile is None:
        return None

    username = profile.username
    if not username and profile.url:
        match = X_HANDLE_FROM_URL.match(profile.url)
        if match:
            username = match.group(1)

    if username and not username.startswith("@"):
        username = f"@{username}"

    return username or None


def render_html(
    resume: Union[Resume, Dict[str, Any]],
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render a résumé as a standalone HTML page.

    Args:
        resume: Normalized Resume, or a raw mapping to normalize first
        registry: Template registry (defaults to the package templates)

    Returns:
        HTML document

    Raises:
        InvalidResumeStructureError: If a raw mapping has the wrong shape
        ValueError: If a date field cannot be parsed
    """
    if not isinstance(resume, Resume):
        resume = Resume.from_dict(resume)
    if registry is None:
        registry = TemplateRegistry(filters=TEMPLATE_FILTERS)

    template = registry.get_template(CV_TEMPLATE)
    return template.render(
        css=Markup(registry.read_asset(CV_STYLESHEET)),
        resume=resume,
        custom={"x_twitter_handle": find_x_twitter_handle(resume)},
    )
