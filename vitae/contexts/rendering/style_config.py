"""
Text Style Configuration

Named layout and punctuation settings for the plain-text renderer. A style file
is a flat YAML mapping whose keys match TextStyle fields; any key it omits keeps
its default.

Examples:
    # text_style.yaml
    width: 72
    bullet: "*"
    present_label: "now"

    >>> style = load_text_style(Path("text_style.yaml"))
    >>> style.width
    72
"""

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.rendering.defaults import (
    BULLET,
    DASH,
    DEFAULT_SKILL_NAME,
    DEFAULT_WIDTH,
    HEADING_RULE,
    ITEM_RULE,
    PRESENT_LABEL,
    RANGE_DASH,
)

load_dotenv()


@dataclass(frozen=True)
class TextStyle:
    """
    Layout settings for the plain-text renderer.

    Attributes:
        width: Target line width for wrapped text
        bullet: Glyph for list items ("  - item")
        dash: Separator in headers ("name - label", "title - awarder")
        range_dash: Separator in date ranges ("2020-2022")
        present_label: End date shown for ongoing entries
        heading_rule: Underline char for document and section headings
        item_rule: Underline char for per-item headers
        default_skill_name: Heading for skill groups without a name
    """

    width: int = DEFAULT_WIDTH
    bullet: str = BULLET
    dash: str = DASH
    range_dash: str = RANGE_DASH
    present_label: str = PRESENT_LABEL
    heading_rule: str = HEADING_RULE
    item_rule: str = ITEM_RULE
    default_skill_name: str = DEFAULT_SKILL_NAME

    @property
    def bullet_indent(self) -> str:
        """First-line prefix for bulleted items."""
        return f"  {self.bullet} "

    @property
    def continuation_indent(self) -> str:
        """Prefix for wrapped continuation lines of bulleted items."""
        return " " * len(self.bullet_indent)


def load_text_style(config_path: Path) -> TextStyle:
    """
    Load a TextStyle from a YAML file, merged over the defaults.

    Args:
        config_path: Path to style YAML

    Returns:
        TextStyle with overrides applied

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the file has unknown keys or an invalid width
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Style file not found: {config_path}")

    overrides = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}
    if not isinstance(overrides, dict):
        raise ValueError(f"Style file must contain a mapping: {config_path}")

    known = {f.name for f in fields(TextStyle)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"Unknown style keys {unknown} in {config_path}. Available keys: {sorted(known)}")

    style = TextStyle(**{**asdict(TextStyle()), **overrides})

    if isinstance(style.width, bool) or not isinstance(style.width, int) or style.width <= 0:
        raise ValueError(f"Style width must be a positive integer, got {style.width!r}")

    return style


def resolve_text_style(config_path: Optional[Path] = None) -> TextStyle:
    """
    Pick the text style for a render.

    Uses config_path when given, otherwise TEXT_STYLE_PATH from the environment,
    otherwise the defaults.
    """
    if config_path is None and os.getenv("TEXT_STYLE_PATH"):
        config_path = Path(os.getenv("TEXT_STYLE_PATH"))

    if config_path is None:
        return TextStyle()

    return load_text_style(config_path)
