"""Load module documentation from YAML or JSON description files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

import yaml

from .logging import get_logger
from .models import AugmentationDoc, FunctionDoc, ModuleDocumentation, StructDoc, UnionDoc

DESCRIPTION_SUFFIXES = (".yml", ".yaml", ".json")

logger = get_logger("loader")


class DocumentationLoadError(RuntimeError):
    """Raised when a description file cannot be turned into module documentation."""


def load_documentation(paths: Iterable[Path]) -> Dict[str, ModuleDocumentation]:
    """Return module documentation keyed by module name.

    Each path is either a description file or a directory searched recursively
    for ``*.yml``, ``*.yaml`` and ``*.json`` files. When two files describe the
    same module, the one loaded last wins.
    """
    modules: Dict[str, ModuleDocumentation] = {}
    for file_path in _iter_description_files(paths):
        for module in load_file(file_path):
            if module.module_name in modules:
                logger.warning(
                    "Module %s described more than once; using %s",
                    module.module_name,
                    file_path,
                )
            modules[module.module_name] = module
    logger.debug("Loaded %d module description(s)", len(modules))
    return modules


def load_file(path: Path) -> List[ModuleDocumentation]:
    """Parse one description file holding a module or a ``modules`` list."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise DocumentationLoadError(f"Failed to parse {path}: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, dict):
        raise DocumentationLoadError(f"{path} must contain a mapping at the root")

    if "modules" in data:
        entries = data["modules"]
        if not isinstance(entries, list):
            raise DocumentationLoadError(f"{path}: 'modules' must be a list")
    else:
        entries = [data]

    return [_build_module(entry, path) for entry in entries]


def _iter_description_files(paths: Iterable[Path]) -> Iterable[Path]:
    for raw in paths:
        path = Path(raw).expanduser()
        if path.is_dir():
            for candidate in sorted(path.rglob("*")):
                if candidate.is_file() and candidate.suffix.lower() in DESCRIPTION_SUFFIXES:
                    yield candidate
        elif path.is_file():
            yield path
        else:
            raise DocumentationLoadError(f"No such description file or directory: {path}")


def _build_module(entry: Any, source: Path) -> ModuleDocumentation:
    if not isinstance(entry, dict):
        raise DocumentationLoadError(f"{source}: module entries must be mappings")
    name = _as_str(entry.get("module"))
    if not name:
        raise DocumentationLoadError(f"{source}: module entry is missing 'module'")
    return ModuleDocumentation(
        module_name=name,
        documentation=_as_str(entry.get("documentation")),
        imports=_as_str_tuple(entry.get("imports")),
        functions=tuple(_build_function(item, source) for item in _as_list(entry.get("functions"), source, "functions")),
        structs=tuple(
            StructDoc(
                name=_require_name(item, source, "struct"),
                members=_as_str_tuple(item.get("members")),
                documentation=_as_str(item.get("documentation")),
                line=_as_int(item.get("line")),
            )
            for item in _as_list(entry.get("structs"), source, "structs")
        ),
        unions=tuple(
            UnionDoc(
                name=_require_name(item, source, "union"),
                values=_as_str_tuple(item.get("values")),
                documentation=_as_str(item.get("documentation")),
                line=_as_int(item.get("line")),
            )
            for item in _as_list(entry.get("unions"), source, "unions")
        ),
        augmentations=tuple(
            _build_augmentation(item, source) for item in _as_list(entry.get("augmentations"), source, "augmentations")
        ),
        module_state=_as_str_tuple(entry.get("module_state")),
    )


def _build_function(item: Mapping[str, Any], source: Path) -> FunctionDoc:
    return FunctionDoc(
        name=_require_name(item, source, "function"),
        arguments=_as_str_tuple(item.get("arguments")),
        documentation=_as_str(item.get("documentation")),
        varargs=bool(item.get("varargs", False)),
        local=bool(item.get("local", False)),
        line=_as_int(item.get("line")),
    )


def _build_augmentation(item: Mapping[str, Any], source: Path) -> AugmentationDoc:
    target = _as_str(item.get("target"))
    if not target:
        raise DocumentationLoadError(f"{source}: augmentation entry is missing 'target'")
    return AugmentationDoc(
        target=target,
        functions=tuple(_build_function(fn, source) for fn in _as_list(item.get("functions"), source, "functions")),
        documentation=_as_str(item.get("documentation")),
        line=_as_int(item.get("line")),
    )


def _require_name(item: Mapping[str, Any], source: Path, kind: str) -> str:
    name = _as_str(item.get("name"))
    if not name:
        raise DocumentationLoadError(f"{source}: {kind} entry is missing 'name'")
    return name


def _as_list(value: Any, source: Path, key: str) -> List[Dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise DocumentationLoadError(f"{source}: '{key}' must be a list of mappings")
    return value


def _as_str(value: Any) -> str:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else ""


def _as_int(value: Any) -> int:
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def _as_str_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(str(item) for item in value if isinstance(item, (str, int, float)))
    return ()


__all__ = ["DESCRIPTION_SUFFIXES", "DocumentationLoadError", "load_documentation", "load_file"]
