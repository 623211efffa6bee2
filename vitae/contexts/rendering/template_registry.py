from pathlib import Path
from typing import Callable, Dict, Optional

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, select_autoescape

TEMPLATES_PATH = Path(__file__).parent / "templates"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates live in vitae/contexts/rendering/templates/ and use the standard
    Jinja2 delimiters with HTML autoescaping. Static assets (style.css) in the
    same directory are read through read_asset().
    """

    def __init__(
        self,
        templates_path: Optional[Path] = None,
        filters: Optional[Dict[str, Callable]] = None,
    ):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding templates. Defaults to the
                           package's templates/ directory
            filters: Extra Jinja2 filters to register (name -> callable)
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(filters or {})

    def get_template(self, name: str) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found in {self.templates_path}"
            ) from e

        self._cache[name] = template
        return template

    def read_asset(self, name: str) -> str:
        """Read a static asset (e.g., style.css) from the templates directory."""
        return (self.templates_path / name).read_text(encoding="utf-8")

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
