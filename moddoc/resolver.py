"""Template resolution backed by Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from .logging import get_logger

RenderFunction = Callable[[Any], str]

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")

_AUTOESCAPED_FORMATS = frozenset({"html"})


class TemplateResolutionError(LookupError):
    """Raised when no template exists for a name and output format."""

    def __init__(self, name: str, format_tag: str) -> None:
        super().__init__(f"No template '{name}' for format '{format_tag}'")
        self.name = name
        self.format_tag = format_tag


class TemplateResolver:
    """Loads ``<format>/<name>.j2`` templates and exposes them as render functions."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        globals: Mapping[str, Any] | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self._globals = dict(globals or {})
        self._envs: Dict[bool, Environment] = {}
        self.logger = get_logger("resolver")

    def resolve(self, name: str, format_tag: str) -> RenderFunction:
        """Return a function rendering ``name`` in ``format_tag`` for a single document."""
        env = self._env_for(format_tag)
        template_name = f"{format_tag}/{name}.j2"
        try:
            template = env.get_template(template_name)
        except TemplateNotFound as exc:
            raise TemplateResolutionError(name, format_tag) from exc
        self.logger.debug("Resolved template %s from %s", template_name, template.filename)

        def render(doc: Any) -> str:
            return template.render(doc=doc, format_tag=format_tag)

        return render

    def search_path(self) -> Tuple[str, ...]:
        directories = []
        if self.templates_dir:
            directories.append(str(self.templates_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        # ensure uniqueness preserving order
        return tuple(dict.fromkeys(directories))

    def _env_for(self, format_tag: str) -> Environment:
        autoescape = format_tag in _AUTOESCAPED_FORMATS
        env = self._envs.get(autoescape)
        if env is None:
            env = Environment(
                loader=FileSystemLoader(list(self.search_path())),
                autoescape=autoescape,
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=True,
                undefined=StrictUndefined,
            )
            env.globals.update(self._globals)
            self._envs[autoescape] = env
        return env


__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "RenderFunction",
    "TemplateResolutionError",
    "TemplateResolver",
]
