"""
Résumé Render Orchestration

Reads one résumé document, renders it, and writes one output document.

Read and decode failures are not caught: they propagate to the caller and no
output file is written.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from vitae.contexts.intake.loader import load_resume
from vitae.contexts.rendering.html_renderer import render_html
from vitae.contexts.rendering.logger import log_render_result, log_render_start
from vitae.contexts.rendering.style_config import TextStyle
from vitae.contexts.rendering.text_renderer import included_sections, render_text

OUTPUT_FORMATS = ("text", "html")


@dataclass
class RenderResult:
    """
    Result of rendering a résumé to disk.

    Attributes:
        output_path: Path of the written document
        output_format: "text" or "html"
        sections: Sections included in the output, in order
        characters: Length of the written document
    """

    output_path: Path
    output_format: str
    sections: List[str] = field(default_factory=list)
    characters: int = 0


def render_cv_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    output_format: str = "text",
    style: Optional[TextStyle] = None,
) -> RenderResult:
    """
    Render a résumé file to a text or HTML file.

    Args:
        input_path: Résumé document (.json, .yaml or .yml)
        output_path: Destination file, written as UTF-8
        output_format: "text" or "html"
        style: Layout settings for text output (ignored for HTML)

    Returns:
        RenderResult describing the written file

    Raises:
        ValueError: If output_format is unknown
        FileNotFoundError: If input_path does not exist
        json.JSONDecodeError: If the input is malformed JSON
        InvalidResumeStructureError: If the input has the wrong shape
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Invalid output format: {output_format}. Must be one of {OUTPUT_FORMATS}")

    input_path = Path(input_path)
    output_path = Path(output_path)

    start_time = time.time()
    log_render_start(input_path, output_path, output_format)

    resume = load_resume(input_path)
    if output_format == "text":
        document = render_text(resume, style)
    else:
        document = render_html(resume)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8")

    result = RenderResult(
        output_path=output_path,
        output_format=output_format,
        sections=included_sections(resume),
        characters=len(document),
    )
    log_render_result(result, time.time() - start_time)

    return result
