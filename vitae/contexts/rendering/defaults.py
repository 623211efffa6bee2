"""
Default values for vitae rendering.

Provides the layout and punctuation defaults shared by:
- style_config.py (base values that style files override)
- text_renderer.py (fallback when no style is passed)
- html_renderer.py (label for open-ended date ranges)
"""

# Plain-text layout
DEFAULT_WIDTH = 80
HEADING_RULE = "="
ITEM_RULE = "-"

# Punctuation. All dashes render as ASCII hyphens in the text output.
BULLET = "-"
DASH = "-"
RANGE_DASH = "-"

# Labels
PRESENT_LABEL = "Present"
DEFAULT_SKILL_NAME = "Skills"

# Default file names, relative to the CV directory
DEFAULT_INPUT_NAME = "cv.json"
DEFAULT_TEXT_OUTPUT_NAME = "cv.txt"
DEFAULT_HTML_OUTPUT_NAME = "cv.html"
