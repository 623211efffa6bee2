"""
Résumé document loading.

Reads a single résumé document from disk. JSON is the canonical format; YAML is
accepted as well and read through OmegaConf without interpolation. Read and
decode errors are not caught here: a missing file or malformed JSON propagates
to the caller.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from omegaconf import OmegaConf

from vitae.contexts.intake.exceptions import InvalidResumeStructureError
from vitae.contexts.intake.logger import _log_debug, _log_info
from vitae.contexts.intake.resume_data_structure import Resume

YAML_SUFFIXES = (".yaml", ".yml")


def load_resume_dict(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a résumé document into a plain dict without normalizing it.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        Decoded document

    Raises:
        FileNotFoundError: If path does not exist
        json.JSONDecodeError: If a JSON file is malformed
        InvalidResumeStructureError: If the top-level value is not an object
    """
    path = Path(path)

    if path.suffix.lower() in YAML_SUFFIXES:
        # Free text may contain "${...}"; keep it literal
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    else:
        data = json.loads(path.read_text(encoding="utf-8"))

    if not isinstance(data, dict):
        raise InvalidResumeStructureError(
            f"Top-level value in {path} must be an object", path="resume", expected="object"
        )

    _log_debug(f"Loaded {path} ({len(data)} top-level keys)")
    return data


def load_resume(path: Union[str, Path]) -> Resume:
    """
    Read and normalize a résumé document.

    Raises:
        FileNotFoundError: If path does not exist
        json.JSONDecodeError: If a JSON file is malformed
        InvalidResumeStructureError: If the document has the wrong shape
    """
    resume = Resume.from_dict(load_resume_dict(path))
    _log_info(f"Loaded résumé for {resume.basics.name or '(unnamed)'} from {Path(path).name}")
    return resume
