"""Configuration loading for moddoc (.moddoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".moddoc.yml"
DEFAULT_FORMAT = "markdown"
DEFAULT_OUTPUT_DIR = "docs/api"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Where and in which format documentation is written."""

    format: str = DEFAULT_FORMAT
    directory: Optional[Path] = None


@dataclass
class ModDocConfig:
    """Represents the settings defined in .moddoc.yml."""

    root: Path
    output: OutputConfig = field(default_factory=OutputConfig)
    templates_dir: Optional[Path] = None
    sources: List[Path] = field(default_factory=list)

    @property
    def output_dir(self) -> Path:
        return self.output.directory or (self.root / DEFAULT_OUTPUT_DIR)


def load_config(config_path: Path) -> ModDocConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ModDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output_data = _as_dict(data.get("output"))
    output = OutputConfig()
    if output_data:
        output.format = (_as_str(output_data.get("format")) or DEFAULT_FORMAT).lower()
        directory = _as_str(output_data.get("directory"))
        output.directory = root / directory if directory else None

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    sources = [root / source for source in _as_str_list(data.get("sources"))]

    return ModDocConfig(
        root=root,
        output=output,
        templates_dir=templates_dir,
        sources=sources,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "ModDocConfig", "OutputConfig", "load_config"]
