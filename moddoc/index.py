"""Shared rendering context used for cross references and the index page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .models import ModuleDocumentation


@dataclass(frozen=True)
class IndexEntry:
    """A single symbol listed on the index page."""

    name: str
    kind: str
    module: str


class DocIndex:
    """Collects registered modules and derives an alphabetical symbol index."""

    def __init__(self) -> None:
        self._modules: Dict[str, ModuleDocumentation] = {}

    def update(self, module: ModuleDocumentation) -> None:
        """Register ``module``, replacing any earlier registration of the same name."""
        self._modules[module.module_name] = module

    def get(self, name: str) -> Optional[ModuleDocumentation]:
        return self._modules.get(name)

    @property
    def modules(self) -> List[ModuleDocumentation]:
        return [self._modules[name] for name in sorted(self._modules)]

    def entries(self) -> List[IndexEntry]:
        """Return public symbols of every module sorted by name, kind, module."""
        collected: List[IndexEntry] = []
        for module in self._modules.values():
            name = module.module_name
            collected.extend(IndexEntry(fn.name, "function", name) for fn in module.public_functions)
            collected.extend(IndexEntry(struct.name, "struct", name) for struct in module.structs)
            collected.extend(IndexEntry(union.name, "union", name) for union in module.unions)
            collected.extend(
                IndexEntry(augmentation.target, "augmentation", name)
                for augmentation in module.augmentations
            )
        return sorted(collected, key=lambda entry: (entry.name.lower(), entry.kind, entry.module))

    def __contains__(self, name: object) -> bool:
        return name in self._modules

    def __iter__(self) -> Iterator[ModuleDocumentation]:
        return iter(self.modules)

    def __len__(self) -> int:
        return len(self._modules)


__all__ = ["DocIndex", "IndexEntry"]
