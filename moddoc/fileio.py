"""Text persistence helpers."""

from __future__ import annotations

from pathlib import Path


def write_text(content: str, path: Path) -> None:
    """Write ``content`` to ``path``, creating parent folders and overwriting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


__all__ = ["write_text"]
