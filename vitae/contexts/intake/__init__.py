"""
Intake Context

Responsibilities:
- Reads résumé documents (JSON or YAML) from disk
- Normalizes loose JSON Resume fields into explicit dataclasses
- Rejects documents whose shape cannot be rendered

Owns: Résumé data model, input decoding
Never: Formats output
"""

from vitae.contexts.intake.exceptions import InvalidResumeStructureError
from vitae.contexts.intake.loader import load_resume, load_resume_dict
from vitae.contexts.intake.resume_data_structure import (
    Award,
    Basics,
    EducationItem,
    Interest,
    Language,
    Profile,
    Project,
    Reference,
    Resume,
    Skill,
    WorkItem,
)

__all__ = [
    "load_resume",
    "load_resume_dict",
    "InvalidResumeStructureError",
    "Resume",
    "Basics",
    "Profile",
    "WorkItem",
    "EducationItem",
    "Award",
    "Skill",
    "Language",
    "Project",
    "Interest",
    "Reference",
]
