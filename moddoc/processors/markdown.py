"""Markdown output for module documentation."""

from __future__ import annotations

from .base import Processor


class MarkdownProcessor(Processor):
    """Writes one markdown page per module plus an index page."""

    def output_format_tag(self) -> str:
        return "markdown"


__all__ = ["MarkdownProcessor"]
