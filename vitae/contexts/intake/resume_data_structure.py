"""
Resume Document Structure

Defines the normalized representation of a JSON Resume style document.

Raw documents are loose: optional fields may be missing, some records accept
alternate field names (work entries use either "name" or "company"), and numbers
show up where strings are expected. All of that is resolved once here, in the
from_dict() factories, so renderers only ever see explicit Optional fields.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from vitae.contexts.intake.exceptions import InvalidResumeStructureError
from vitae.contexts.intake.logger import _log_debug

SCALAR_TYPES = (str, int, float)


# =========================================================================
# FIELD ACCESS HELPERS
# =========================================================================


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _require_mapping(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise InvalidResumeStructureError(
            f"Expected an object, got {type(value).__name__}", path=path, expected="object"
        )
    return value


def _scalar_to_str(value: Any, path: str) -> str:
    if isinstance(value, bool) or not isinstance(value, SCALAR_TYPES):
        raise InvalidResumeStructureError(
            f"Expected text, got {type(value).__name__}", path=path, expected="string"
        )
    return str(value)


def _get_str(data: Dict[str, Any], key: str, path: str) -> Optional[str]:
    """Read an optional text field, stringifying numbers. Missing or null yields None."""
    value = data.get(key)
    if value is None:
        return None
    return _scalar_to_str(value, _join(path, key))


def _get_first_str(data: Dict[str, Any], keys: List[str], path: str) -> Optional[str]:
    """
    Read the first non-empty text field among alternate names.

    Keys are tried in order of precedence; returns None when none has content.
    """
    for key in keys:
        value = _get_str(data, key, path)
        if value:
            if key != keys[0]:
                _log_debug(f"{path}: using '{key}' in place of '{keys[0]}'")
            return value
    return None


def _get_list(data: Dict[str, Any], key: str, path: str) -> List[Any]:
    """Read an optional list field. Missing or null yields an empty list."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidResumeStructureError(
            f"Expected a list, got {type(value).__name__}",
            path=_join(path, key),
            expected="list",
        )
    return value


def _get_str_list(data: Dict[str, Any], key: str, path: str) -> List[str]:
    return [
        _scalar_to_str(item, f"{_join(path, key)}[{i}]")
        for i, item in enumerate(_get_list(data, key, path))
    ]


def _get_records(data: Dict[str, Any], key: str, path: str, record_cls) -> list:
    """Normalize a list of nested records, tagging each with its index path."""
    return [
        record_cls.from_dict(item, f"{_join(path, key)}[{i}]")
        for i, item in enumerate(_get_list(data, key, path))
    ]


# =========================================================================
# RECORD TYPES
# =========================================================================


@dataclass
class Profile:
    """Social or professional profile link (basics.profiles[])."""

    network: str = ""
    username: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "profile") -> "Profile":
        data = _require_mapping(data, path)
        return cls(
            network=_get_str(data, "network", path) or "",
            username=_get_str(data, "username", path),
            url=_get_str(data, "url", path),
        )


@dataclass
class Basics:
    """
    Core biographical information.

    Attributes:
        name: Full name
        label: Professional title
        email: Contact email
        url: Personal website ("url", falling back to "website")
        summary: Free-text summary, may contain several paragraphs
        profiles: Ordered profile links
    """

    name: str = ""
    label: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None
    profiles: List[Profile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: str = "basics") -> "Basics":
        data = _require_mapping(data, path)
        return cls(
            name=_get_str(data, "name", path) or "",
            label=_get_str(data, "label", path),
            email=_get_str(data, "email", path),
            url=_get_first_str(data, ["url", "website"], path),
            summary=_get_str(data, "summary", path),
            profiles=_get_records(data, "profiles", path, Profile),
        )


@dataclass
class WorkItem:
    """
    Work experience entry.

    Company is read from "name", falling back to "company", then "".
    """

    company: str = ""
    position: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    summary: Optional[str] = None
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: str = "work") -> "WorkItem":
        data = _require_mapping(data, path)
        return cls(
            company=_get_first_str(data, ["name", "company"], path) or "",
            position=_get_str(data, "position", path) or "",
            start_date=_get_str(data, "startDate", path),
            end_date=_get_str(data, "endDate", path),
            summary=_get_str(data, "summary", path),
            highlights=_get_str_list(data, "highlights", path),
        )


@dataclass
class EducationItem:
    """Education entry."""

    institution: str = ""
    study_type: Optional[str] = None
    area: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    score: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "education") -> "EducationItem":
        data = _require_mapping(data, path)
        return cls(
            institution=_get_str(data, "institution", path) or "",
            study_type=_get_str(data, "studyType", path),
            area=_get_str(data, "area", path),
            start_date=_get_str(data, "startDate", path),
            end_date=_get_str(data, "endDate", path),
            score=_get_str(data, "score", path),
        )


@dataclass
class Award:
    """Award or honor."""

    title: str = ""
    awarder: Optional[str] = None
    date: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "awards") -> "Award":
        data = _require_mapping(data, path)
        return cls(
            title=_get_str(data, "title", path) or "",
            awarder=_get_str(data, "awarder", path),
            date=_get_str(data, "date", path),
            url=_get_str(data, "url", path),
            summary=_get_str(data, "summary", path),
        )


@dataclass
class Skill:
    """Skill group with keywords."""

    name: Optional[str] = None
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: str = "skills") -> "Skill":
        data = _require_mapping(data, path)
        return cls(
            name=_get_str(data, "name", path),
            keywords=_get_str_list(data, "keywords", path),
        )


@dataclass
class Language:
    """Spoken language and fluency."""

    language: Optional[str] = None
    fluency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "languages") -> "Language":
        data = _require_mapping(data, path)
        return cls(
            language=_get_str(data, "language", path),
            fluency=_get_str(data, "fluency", path),
        )


@dataclass
class Project:
    """Side project or publication."""

    name: str = ""
    url: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "projects") -> "Project":
        data = _require_mapping(data, path)
        return cls(
            name=_get_str(data, "name", path) or "",
            url=_get_str(data, "url", path),
            description=_get_str(data, "description", path),
        )


@dataclass
class Interest:
    """Interest with keywords."""

    name: str = ""
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: str = "interests") -> "Interest":
        data = _require_mapping(data, path)
        return cls(
            name=_get_str(data, "name", path) or "",
            keywords=_get_str_list(data, "keywords", path),
        )


@dataclass
class Reference:
    """Free-text reference. Accepts {"name": ..., "reference": ...} or a bare string."""

    reference: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "references") -> "Reference":
        if isinstance(data, str):
            return cls(reference=data)
        data = _require_mapping(data, path)
        return cls(
            reference=_get_str(data, "reference", path),
            name=_get_str(data, "name", path),
        )


# =========================================================================
# DOCUMENT
# =========================================================================


@dataclass
class Resume:
    """
    Normalized résumé document.

    Only "basics" is required. Every list section defaults to an empty list,
    which renderers treat the same as an absent section.
    """

    basics: Basics
    work: List[WorkItem] = field(default_factory=list)
    education: List[EducationItem] = field(default_factory=list)
    awards: List[Award] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    interests: List[Interest] = field(default_factory=list)
    references: List[Reference] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Resume":
        """
        Normalize a raw résumé mapping (as decoded from JSON or YAML).

        Unknown keys are ignored.

        Raises:
            InvalidResumeStructureError: If "basics" is missing or a field has the wrong type
        """
        data = _require_mapping(data, "resume")
        if data.get("basics") is None:
            raise InvalidResumeStructureError(
                "Resume is missing the 'basics' object", path="basics", expected="object"
            )

        return cls(
            basics=Basics.from_dict(data["basics"]),
            work=_get_records(data, "work", "", WorkItem),
            education=_get_records(data, "education", "", EducationItem),
            awards=_get_records(data, "awards", "", Award),
            skills=_get_records(data, "skills", "", Skill),
            languages=_get_records(data, "languages", "", Language),
            projects=_get_records(data, "projects", "", Project),
            interests=_get_records(data, "interests", "", Interest),
            references=_get_records(data, "references", "", Reference),
        )
