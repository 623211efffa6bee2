"""
Plain-Text Résumé Renderer

Formats a Resume as a fixed-width text document (cv.txt).

The document is a fixed sequence of sections. Each section is gated by a single
predicate, has_content(), applied to the data backing it: a section whose data is
absent or empty contributes nothing at all (no heading, no rule, no blank line).
Section order is fixed and never depends on the input.

Layout of a list section:

    WORK EXPERIENCE
    ===============

    Engineer at Acme (2020-2022)
    ----------------------------

      - Did a thing
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from vitae.contexts.intake.resume_data_structure import Resume
from vitae.contexts.rendering.style_config import TextStyle
from vitae.utils.text_processing import underline, wrap

HEADINGS = {
    "profiles": "PROFILES",
    "work": "WORK EXPERIENCE",
    "education": "EDUCATION",
    "awards": "AWARDS",
    "skills": "SKILLS",
    "languages": "LANGUAGES",
    "projects": "PROJECTS",
    "interests": "INTERESTS",
    "references": "REFERENCES",
}


def has_content(value: Any) -> bool:
    """
    Decide whether a section's backing data should be rendered.

    None, empty lists and empty strings are absent; anything else is present.
    """
    if value is None:
        return False
    if isinstance(value, (list, tuple, str)):
        return len(value) > 0
    return True


# =========================================================================
# LAYOUT HELPERS
# =========================================================================


def _heading(key: str, style: TextStyle) -> str:
    title = HEADINGS[key]
    return f"\n{title}\n{underline(title, style.heading_rule)}\n\n"


def _item_header(line: str, style: TextStyle) -> str:
    return f"{line}\n{underline(line, style.item_rule)}\n"


def _bullets(items: List[str], style: TextStyle) -> str:
    return "".join(
        f"{wrap(item, style.width, style.bullet_indent, style.continuation_indent)}\n"
        for item in items
    )


def _date_range(start: Optional[str], end: Optional[str], style: TextStyle) -> str:
    """'(start-end)' with an open end shown as the present label; '' without a start."""
    if not start:
        return ""
    return f"({start}{style.range_dash}{end or style.present_label})"


# =========================================================================
# SECTION FORMATTERS
# =========================================================================


def format_header(resume: Resume, style: TextStyle) -> str:
    """Name/label title and the contact line. Always rendered."""
    basics = resume.basics
    title = f"{basics.name} {style.dash} {basics.label}" if basics.label else basics.name

    out = f"{title}\n{underline(title, style.heading_rule)}\n\n"
    out += f"Email: {basics.email or ''} | Website: {basics.url or ''}\n\n"
    return out


def format_summary(resume: Resume, style: TextStyle) -> str:
    return f"{wrap(resume.basics.summary, style.width)}\n\n"


def format_profiles(resume: Resume, style: TextStyle) -> str:
    out = _heading("profiles", style)
    for profile in resume.basics.profiles:
        left = f"{profile.network}: {profile.username}" if profile.username else profile.network
        out += f"{style.bullet} {left} {style.dash} {profile.url or ''}\n"
    return out + "\n"


def format_work(resume: Resume, style: TextStyle) -> str:
    out = _heading("work", style)
    for item in resume.work:
        dates = _date_range(item.start_date, item.end_date, style)
        line = f"{item.position} at {item.company} {dates}".strip()
        out += _item_header(line, style) + "\n"

        if item.summary:
            out += f"{wrap(item.summary, style.width)}\n\n"
        if item.highlights:
            out += _bullets(item.highlights, style) + "\n"
    return out


def format_education(resume: Resume, style: TextStyle) -> str:
    out = _heading("education", style)
    for item in resume.education:
        if item.study_type and item.area:
            qualification = f"{item.study_type} in {item.area}"
        else:
            qualification = item.study_type or item.area or ""

        line = ", ".join(part for part in (qualification, item.institution) if part)
        dates = _date_range(item.start_date, item.end_date, style)
        if dates:
            line = f"{line} {dates}".strip()

        out += _item_header(line, style)
        if item.score:
            out += f"Score: {item.score}\n"
        out += "\n"
    return out


def format_awards(resume: Resume, style: TextStyle) -> str:
    out = _heading("awards", style)
    for award in resume.awards:
        line = award.title
        if award.awarder:
            line += f" {style.dash} {award.awarder}"
        if award.date:
            line += f" ({award.date})"

        out += _item_header(line, style)
        if award.url:
            out += f"Website: {award.url}\n"
        if award.summary:
            out += f"{wrap(award.summary, style.width)}\n"
        out += "\n"
    return out


def format_skills(resume: Resume, style: TextStyle) -> str:
    out = _heading("skills", style)
    for skill in resume.skills:
        name = skill.name or style.default_skill_name
        out += _item_header(name, style)

        keywords = ", ".join(skill.keywords)
        if keywords:
            out += f"{wrap(keywords, style.width)}\n"
        out += "\n"
    return out


def format_languages(resume: Resume, style: TextStyle) -> str:
    out = _heading("languages", style)
    for entry in resume.languages:
        if not entry.language:
            continue
        if entry.fluency:
            out += f"{entry.language} {style.dash} {entry.fluency}\n"
        else:
            out += f"{entry.language}\n"
    return out + "\n"


def format_projects(resume: Resume, style: TextStyle) -> str:
    out = _heading("projects", style)
    for project in resume.projects:
        line = f"{project.name} {style.dash} {project.url}" if project.url else project.name
        out += _item_header(line, style)
        if project.description:
            out += f"{wrap(project.description, style.width)}\n"
        out += "\n"
    return out


def format_interests(resume: Resume, style: TextStyle) -> str:
    out = _heading("interests", style)
    for interest in resume.interests:
        out += _item_header(interest.name, style)
        out += _bullets(interest.keywords, style)
        out += "\n"
    return out


def format_references(resume: Resume, style: TextStyle) -> str:
    out = _heading("references", style)
    for entry in resume.references:
        if entry.reference:
            out += f"{entry.reference}\n"
    return out + "\n"


# =========================================================================
# DOCUMENT ASSEMBLY
# =========================================================================


@dataclass(frozen=True)
class TextSection:
    """
    One section of the text document.

    Attributes:
        name: Section identifier (e.g., "work")
        select: Returns the data that backs the section
        format: Renders the section fragment
    """

    name: str
    select: Callable[[Resume], Any]
    format: Callable[[Resume, TextStyle], str]

    def is_included(self, resume: Resume) -> bool:
        return has_content(self.select(resume))


# Canonical output order
TEXT_SECTIONS = [
    TextSection("header", lambda r: r.basics, format_header),
    TextSection("summary", lambda r: r.basics.summary, format_summary),
    TextSection("profiles", lambda r: r.basics.profiles, format_profiles),
    TextSection("work", lambda r: r.work, format_work),
    TextSection("education", lambda r: r.education, format_education),
    TextSection("awards", lambda r: r.awards, format_awards),
    TextSection("skills", lambda r: r.skills, format_skills),
    TextSection("languages", lambda r: r.languages, format_languages),
    TextSection("projects", lambda r: r.projects, format_projects),
    TextSection("interests", lambda r: r.interests, format_interests),
    TextSection("references", lambda r: r.references, format_references),
]


def _as_resume(resume: Union[Resume, Dict[str, Any]]) -> Resume:
    if isinstance(resume, Resume):
        return resume
    return Resume.from_dict(resume)


def included_sections(resume: Union[Resume, Dict[str, Any]]) -> List[str]:
    """Names of the sections that render_text() will emit, in output order."""
    resume = _as_resume(resume)
    return [section.name for section in TEXT_SECTIONS if section.is_included(resume)]


def render_text(
    resume: Union[Resume, Dict[str, Any]], style: Optional[TextStyle] = None
) -> str:
    """
    Render a résumé as a plain-text document.

    Sections are concatenated in canonical order; trailing whitespace is stripped
    from the whole document and exactly one newline is appended.

    Args:
        resume: Normalized Resume, or a raw mapping to normalize first
        style: Layout settings (defaults to TextStyle())

    Returns:
        Text document ending in a single newline

    Raises:
        InvalidResumeStructureError: If a raw mapping has the wrong shape
    """
    resume = _as_resume(resume)
    style = style or TextStyle()

    out = "".join(
        section.format(resume, style) for section in TEXT_SECTIONS if section.is_included(resume)
    )
    return out.rstrip() + "\n"
