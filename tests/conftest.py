from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping

import pytest


@pytest.fixture
def write_templates(tmp_path: Path) -> Callable[[Mapping[str, str]], Path]:
    """Write `relative path -> template source` entries into a templates directory."""
    root = tmp_path / "templates"

    def _write(templates: Mapping[str, str]) -> Path:
        for relative, content in templates.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _write
