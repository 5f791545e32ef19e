"""Render per-module API documentation with Jinja2 templates."""

from .models import AugmentationDoc, FunctionDoc, ModuleDocumentation, StructDoc, UnionDoc
from .processors import HtmlProcessor, MarkdownProcessor, get_processor

__all__ = [
    "AugmentationDoc",
    "FunctionDoc",
    "HtmlProcessor",
    "MarkdownProcessor",
    "ModuleDocumentation",
    "StructDoc",
    "UnionDoc",
    "get_processor",
]
