"""Output-format processors."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Type

from .base import Processor, RenderSupport
from .html import HtmlProcessor
from .markdown import MarkdownProcessor

_PROCESSORS: Dict[str, Type[Processor]] = {
    "markdown": MarkdownProcessor,
    "html": HtmlProcessor,
}


def available_formats() -> List[str]:
    return sorted(_PROCESSORS)


def get_processor(format_tag: str, *, templates_dir: Path | None = None) -> Processor:
    """Instantiate the processor registered for ``format_tag``."""
    try:
        processor_cls = _PROCESSORS[format_tag.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown output format '{format_tag}' (expected one of: {', '.join(available_formats())})"
        ) from None
    return processor_cls(templates_dir=templates_dir)


__all__ = [
    "HtmlProcessor",
    "MarkdownProcessor",
    "Processor",
    "RenderSupport",
    "available_formats",
    "get_processor",
]
