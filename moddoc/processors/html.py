"""HTML output for module documentation."""

from __future__ import annotations

from .base import Processor


class HtmlProcessor(Processor):
    """Writes one autoescaped HTML page per module plus an index page."""

    def output_format_tag(self) -> str:
        return "html"


__all__ = ["HtmlProcessor"]
