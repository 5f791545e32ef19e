"""Processor contract and the render support shared by output formats."""

from __future__ import annotations

import posixpath
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Dict, Mapping, Optional, Tuple

from ..fileio import write_text
from ..index import DocIndex
from ..logging import get_logger
from ..models import ModuleDocumentation
from ..resolver import RenderFunction, TemplateResolver


class RenderSupport:
    """Target folder, output paths, template cache and index rendering for one format."""

    def __init__(
        self,
        format_tag: str,
        *,
        templates_dir: Path | None = None,
        resolver: TemplateResolver | None = None,
        index: DocIndex | None = None,
    ) -> None:
        self.format_tag = format_tag
        self.index = index or DocIndex()
        self.resolver = resolver or TemplateResolver(
            templates_dir,
            globals={"link_to": self.link_to, "index": self.index},
        )
        self._target_folder: Optional[Path] = None
        self._template_cache: Dict[Tuple[str, str], RenderFunction] = {}
        self.logger = get_logger("processors.support")

    @property
    def target_folder(self) -> Path:
        if self._target_folder is None:
            raise RuntimeError("Target folder has not been set")
        return self._target_folder

    def set_target_folder(self, target_folder: Path) -> None:
        self._target_folder = Path(target_folder)

    def output_file(self, name: str) -> Path:
        """Map a module name such as ``a.b`` to ``<target>/a/b.<format>``."""
        target = self.target_folder
        path = target / self._relative_output(name)
        if not path.resolve().is_relative_to(target.resolve()):
            raise ValueError(f"Module name {name!r} escapes the target folder")
        return path

    def template(self, name: str, format_tag: str) -> RenderFunction:
        key = (name, format_tag)
        if key not in self._template_cache:
            self._template_cache[key] = self.resolver.resolve(name, format_tag)
        return self._template_cache[key]

    def add_module(self, module: ModuleDocumentation) -> None:
        self.index.update(module)

    def render_index(self, name: str) -> Path:
        """Render the ``name`` template with the module index and write it out."""
        template = self.template(name, self.format_tag)
        path = self.output_file(name)
        write_text(template(self.index), path)
        self.logger.debug("Wrote index %s (%d modules)", path, len(self.index))
        return path

    def link_to(self, module_name: str, from_module: str | None = None) -> str:
        """Relative link from the page of ``from_module`` (or the root) to ``module_name``."""
        target = self._relative_output(module_name)
        if from_module is None:
            return target.as_posix()
        origin = self._relative_output(from_module).parent
        return posixpath.relpath(target.as_posix(), origin.as_posix())

    def _relative_output(self, name: str) -> PurePosixPath:
        segments = name.split(".")
        if not name or any(
            not segment or "/" in segment or "\\" in segment for segment in segments
        ):
            raise ValueError(f"Invalid module name {name!r}")
        return PurePosixPath(*segments[:-1], f"{segments[-1]}.{self.format_tag}")


class Processor(ABC):
    """Renders module documentation to one file per module plus an index file.

    Output formats only name their format tag; the tag selects the templates
    and the file extension.
    """

    INDEX_NAME = "index"

    def __init__(
        self,
        support: RenderSupport | None = None,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        self.support = support or RenderSupport(
            self.output_format_tag(), templates_dir=templates_dir
        )
        self.logger = get_logger(f"processors.{self.output_format_tag()}")

    @abstractmethod
    def output_format_tag(self) -> str:
        """Return the format tag selecting templates and the file extension."""

    def render(self, documentation: ModuleDocumentation) -> str:
        template = self.support.template("template", self.output_format_tag())
        self.support.add_module(documentation)
        return template(documentation)

    def process(
        self, modules: Mapping[str, ModuleDocumentation], target_folder: Path
    ) -> None:
        """Render every module and then the index into ``target_folder``."""
        if self.INDEX_NAME in modules:
            raise ValueError(f"Module name {self.INDEX_NAME!r} is reserved for the index page")
        self.support.set_target_folder(target_folder)
        self.logger.info("Rendering %d module(s) to %s", len(modules), target_folder)
        # Every module is linkable before the first page renders.
        for documentation in modules.values():
            self.support.add_module(documentation)
        for name, documentation in modules.items():
            path = self.support.output_file(name)
            write_text(self.render(documentation), path)
            self.logger.debug("Wrote %s", path)
        self.support.render_index(self.INDEX_NAME)


__all__ = ["Processor", "RenderSupport"]
