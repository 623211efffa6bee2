#!/usr/bin/env python3
"""
Résumé Rendering CLI

Renders the site's résumé document to plain text or HTML.

Input and output paths are resolved relative to CV_DIR (default: cv/).

Commands:
    text - Render cv.json to fixed-width plain text (cv.txt)
    html - Render cv.json to a standalone HTML page (cv.html)

Examples:\n

    render_cv.py text                              # cv/cv.json -> cv/cv.txt

    render_cv.py text resume.json resume.txt       # Custom file names

    render_cv.py text --style text_style.yaml      # Custom width/punctuation

    render_cv.py html                              # cv/cv.json -> cv/cv.html
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.rendering import render_cv_file
from vitae.contexts.rendering.defaults import (
    DEFAULT_HTML_OUTPUT_NAME,
    DEFAULT_INPUT_NAME,
    DEFAULT_TEXT_OUTPUT_NAME,
)
from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.contexts.rendering.style_config import resolve_text_style

load_dotenv()
CV_DIR = Path(os.getenv("CV_DIR", "cv"))


def display_path(path: Path) -> str:
    """Return path relative to the working directory for cleaner display."""
    return os.path.relpath(path, Path.cwd())


def _style_source(style_path: Optional[Path]) -> Optional[str]:
    if style_path is not None:
        return str(style_path)
    return os.getenv("TEXT_STYLE_PATH") or None


app = typer.Typer(
    help="Render the résumé document to plain text or HTML",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("text")
def text_command(
    input_name: Annotated[
        str,
        typer.Argument(help="Résumé document, relative to CV_DIR"),
    ] = DEFAULT_INPUT_NAME,
    output_name: Annotated[
        str,
        typer.Argument(help="Output text file, relative to CV_DIR"),
    ] = DEFAULT_TEXT_OUTPUT_NAME,
    style_path: Annotated[
        Optional[Path],
        typer.Option(
            "--style",
            "-s",
            help="YAML file overriding width, bullet and label settings (default: TEXT_STYLE_PATH)",
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Also write a DEBUG log to LOG_DIR/render.log (default: stdout only)"),
    ] = None,
):
    """
    Render the résumé as fixed-width plain text.

    Read or parse failures are not caught: the command exits non-zero with the
    underlying error.

    Examples:\n

        $ render_cv.py text                          # cv/cv.json -> cv/cv.txt

        $ render_cv.py text cv.yaml cv.txt           # YAML input
    """
    input_path, output_path = CV_DIR / input_name, CV_DIR / output_name
    setup_rendering_logger(
        input_path, output_path, output_format="text", style_source=_style_source(style_path), log_dir=log_dir
    )

    result = render_cv_file(
        input_path,
        output_path,
        output_format="text",
        style=resolve_text_style(style_path),
    )

    typer.echo(f"Wrote {display_path(result.output_path)}")


@app.command("html")
def html_command(
    input_name: Annotated[
        str,
        typer.Argument(help="Résumé document, relative to CV_DIR"),
    ] = DEFAULT_INPUT_NAME,
    output_name: Annotated[
        str,
        typer.Argument(help="Output HTML file, relative to CV_DIR"),
    ] = DEFAULT_HTML_OUTPUT_NAME,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Also write a DEBUG log to LOG_DIR/render.log (default: stdout only)"),
    ] = None,
):
    """
    Render the résumé as a standalone HTML page.

    Examples:\n

        $ render_cv.py html                          # cv/cv.json -> cv/cv.html
    """
    input_path, output_path = CV_DIR / input_name, CV_DIR / output_name
    setup_rendering_logger(input_path, output_path, output_format="html", log_dir=log_dir)

    result = render_cv_file(input_path, output_path, output_format="html")

    typer.echo(f"Wrote {display_path(result.output_path)}")


if __name__ == "__main__":
    app()
