"""
Jinja2 rendering for the language back-ends.

Each back-end ships its templates in a ``templates/`` directory next to its
generator module. Context variables are strict: a template referring to a
name the generator did not provide fails instead of rendering blank.
"""

import json
from typing import Any, Dict, Optional
from pathlib import Path

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    TemplateError as Jinja2TemplateError,
    select_autoescape,
)

from ..logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """Raised when a back-end template is missing or fails to render."""

    pass


def java_string(value: Any) -> str:
    """Quote a value as a Java string literal."""
    return json.dumps(str(value), ensure_ascii=False)


FILTERS = {"java_string": java_string}


class TemplateEngine:
    """Loads and renders the templates of one back-end."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Args:
            template_dir: Directory holding ``*.j2`` files; no template can be
                loaded when it is omitted or missing
        """
        self.template_dir = template_dir

        if template_dir and template_dir.is_dir():
            loader = FileSystemLoader(str(template_dir))
        else:
            if template_dir:
                logger.debug("Template directory %s not found", template_dir)
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters.update(FILTERS)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render ``template_name`` with ``context``.

        Raises:
            TemplateError: If the template is missing, invalid or refers to
                a variable absent from the context
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except TemplateSyntaxError as e:
            raise TemplateError(
                f"Invalid template {template_name} (line {e.lineno}): {e.message}"
            ) from e

        try:
            return template.render(**context)
        except Jinja2TemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


def templates_for(module_file: str) -> Path:
    """Return the ``templates/`` directory beside a back-end module."""
    return Path(module_file).parent / "templates"


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, from a directory or in-memory."""
    return TemplateEngine(template_dir)
