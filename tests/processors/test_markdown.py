"""Tests for moddoc.processors.markdown."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from moddoc.processors.markdown import MarkdownProcessor
from moddoc.resolver import TemplateResolutionError
from tests._fixtures.modules import sample_module


def _written_files(root: Path) -> list[Path]:
    if not root.exists():
        return []
    return sorted(path.relative_to(root) for path in root.rglob("*") if path.is_file())


class UnknownFormatProcessor(MarkdownProcessor):
    """Processor whose format has no templates at all."""

    def output_format_tag(self) -> str:
        return "rst"


def test_output_format_tag_is_markdown() -> None:
    assert MarkdownProcessor().output_format_tag() == "markdown"


def test_process_writes_one_file_per_module_plus_index(tmp_path: Path) -> None:
    target = tmp_path / "out"
    modules = {"a.b": sample_module("a.b"), "c.d": sample_module("c.d")}

    MarkdownProcessor().process(modules, target)

    assert _written_files(target) == [
        Path("a/b.markdown"),
        Path("c/d.markdown"),
        Path("index.markdown"),
    ]
    for path in _written_files(target):
        assert (target / path).read_text(encoding="utf-8").strip()


def test_process_with_no_modules_still_writes_index(tmp_path: Path) -> None:
    target = tmp_path / "out"

    MarkdownProcessor().process({}, target)

    assert _written_files(target) == [Path("index.markdown")]
    assert "No modules documented" in (target / "index.markdown").read_text(encoding="utf-8")


def test_render_is_idempotent() -> None:
    processor = MarkdownProcessor()
    doc = sample_module("a.b")

    assert processor.render(doc) == processor.render(doc)


def test_render_lists_public_surface() -> None:
    rendered = MarkdownProcessor().render(sample_module("demo.tools"))

    assert rendered.startswith("# Documentation for `demo.tools`")
    assert "### `greet(name)`" in rendered
    assert "### `join(sep, parts...)`" in rendered
    assert "Say hello." in rendered
    assert "_helper" not in rendered
    assert "### `Point`" in rendered
    assert "`x`, `y`" in rendered
    assert "### `Shape`" in rendered
    assert "### `java.lang.String`" in rendered
    assert "#### `shout(this)`" in rendered


def test_render_links_imports_regardless_of_module_order(tmp_path: Path) -> None:
    target = tmp_path / "out"
    modules = {
        "a.b": sample_module("a.b", imports=("c.d", "java.util.List")),
        "c.d": sample_module("c.d"),
    }

    MarkdownProcessor().process(modules, target)

    page = (target / "a" / "b.markdown").read_text(encoding="utf-8")
    assert "- [`c.d`](../c/d.markdown)" in page
    assert "- `java.util.List`" in page


def test_index_lists_modules_and_symbols(tmp_path: Path) -> None:
    target = tmp_path / "out"
    modules = {"a.b": sample_module("a.b"), "c.d": sample_module("c.d")}

    MarkdownProcessor().process(modules, target)

    index = (target / "index.markdown").read_text(encoding="utf-8")
    assert "- [`a.b`](a/b.markdown): Helpers provided by a.b." in index
    assert "- [`c.d`](c/d.markdown)" in index
    assert "| `greet` | function | [`a.b`](a/b.markdown) |" in index
    assert "_helper" not in index


def test_missing_template_writes_nothing(tmp_path: Path) -> None:
    target = tmp_path / "out"
    modules = {"a.b": sample_module("a.b")}

    with pytest.raises(TemplateResolutionError):
        UnknownFormatProcessor().process(modules, target)

    assert _written_files(target) == []


def test_failure_keeps_earlier_modules_and_skips_the_rest(tmp_path: Path, write_templates) -> None:
    templates = write_templates(
        {
            "markdown/template.j2": (
                "{% if doc.module_name == 'broken' %}{{ doc.no_such_field }}{% endif %}"
                "{{ doc.module_name }}\n"
            ),
        }
    )
    target = tmp_path / "out"
    modules = {
        "first": sample_module("first"),
        "broken": sample_module("broken"),
        "last": sample_module("last"),
    }

    with pytest.raises(UndefinedError):
        MarkdownProcessor(templates_dir=templates).process(modules, target)

    assert _written_files(target) == [Path("first.markdown")]


def test_user_templates_override_packaged_ones(tmp_path: Path, write_templates) -> None:
    templates = write_templates({"markdown/template.j2": "custom {{ doc.module_name }}\n"})
    target = tmp_path / "out"

    MarkdownProcessor(templates_dir=templates).process({"a.b": sample_module("a.b")}, target)

    assert (target / "a" / "b.markdown").read_text(encoding="utf-8") == "custom a.b\n"
    assert (target / "index.markdown").read_text(encoding="utf-8").startswith("# Modules")


def test_process_overwrites_existing_files(tmp_path: Path) -> None:
    target = tmp_path / "out"
    stale = target / "a" / "b.markdown"
    stale.parent.mkdir(parents=True)
    stale.write_text("stale", encoding="utf-8")

    MarkdownProcessor().process({"a.b": sample_module("a.b")}, target)

    assert "stale" not in stale.read_text(encoding="utf-8")


def test_write_failure_stops_the_run_before_the_index(tmp_path: Path) -> None:
    target = tmp_path / "out"
    target.mkdir()
    (target / "b").write_text("not a folder", encoding="utf-8")
    modules = {"first": sample_module("first"), "b.c": sample_module("b.c")}

    with pytest.raises(OSError):
        MarkdownProcessor().process(modules, target)

    assert (target / "first.markdown").is_file()
    assert not (target / "index.markdown").exists()


def test_module_named_like_the_index_is_rejected(tmp_path: Path) -> None:
    target = tmp_path / "out"
    modules = {"c": sample_module("c"), "index": sample_module("index")}

    with pytest.raises(ValueError):
        MarkdownProcessor().process(modules, target)

    assert _written_files(target) == []
