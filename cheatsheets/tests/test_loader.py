"""Tests for the filesystem cheatsheet loader."""

import itertools
import logging

import pytest

from cheatsheets.config import Config, ContentConfig, RenderConfig
from cheatsheets.content.frontmatter import MetadataDefaults
from cheatsheets.content.loader import CheatsheetLoader
from cheatsheets.render.renderer import MarkdownRenderer
from cheatsheets.tests.conftest import SAMPLE_FILES, write_corpus


class TestListCheatsheets:
    """Test listing and sorting."""

    def test_lists_markdown_files_sorted_by_title(self, content_dir):
        (content_dir / "notes.txt").write_text("not a cheatsheet", encoding="utf-8")
        (content_dir / "drafts.md").mkdir()

        loader = CheatsheetLoader(content_dir)
        titles = [sheet.title for sheet in loader.list_cheatsheets()]

        # Case-insensitive collation: "bash" sorts between "Awk" and "Rust".
        assert titles == ["Awk", "bash", "Rust", "untitled"]

    def test_fallbacks_are_applied(self, content_dir):
        loader = CheatsheetLoader(content_dir)
        by_slug = {sheet.slug: sheet for sheet in loader.list_cheatsheets()}

        assert by_slug["untitled"].title == "untitled"
        assert by_slug["untitled"].description == "Cheatsheet"
        assert by_slug["untitled"].category == "Programming Language"
        assert by_slug["awk"].description == "Cheatsheet"
        assert by_slug["awk"].category == "Tool"

    def test_every_field_is_non_empty(self, content_dir):
        loader = CheatsheetLoader(content_dir)

        for sheet in loader.list_cheatsheets():
            assert sheet.slug and sheet.title and sheet.description and sheet.category

    @pytest.mark.parametrize(
        "order", list(itertools.permutations(sorted(SAMPLE_FILES)))[:6]
    )
    def test_sorting_is_independent_of_file_order(self, tmp_path, order):
        files = {name: SAMPLE_FILES[name] for name in order}
        directory = write_corpus(tmp_path / "corpus", files)

        titles = [sheet.title for sheet in CheatsheetLoader(directory).list_cheatsheets()]

        assert titles == ["Awk", "bash", "Rust", "untitled"]

    def test_accented_titles_sort_with_base_letters(self, tmp_path):
        directory = write_corpus(
            tmp_path / "corpus",
            {
                "zeta.md": "---\ntitle: Zeta\n---\n",
                "eclair.md": "---\ntitle: Éclair\n---\n",
                "apple.md": "---\ntitle: apple\n---\n",
            },
        )

        titles = [sheet.title for sheet in CheatsheetLoader(directory).list_cheatsheets()]

        assert titles == ["apple", "Éclair", "Zeta"]

    def test_equal_titles_fall_back_to_slug(self, tmp_path):
        directory = write_corpus(
            tmp_path / "corpus",
            {"b.md": "---\ntitle: Same\n---\n", "a.md": "---\ntitle: Same\n---\n"},
        )

        slugs = [sheet.slug for sheet in CheatsheetLoader(directory).list_cheatsheets()]

        assert slugs == ["a", "b"]

    def test_missing_directory_returns_empty_list(self, tmp_path, caplog):
        loader = CheatsheetLoader(tmp_path / "does-not-exist")

        with caplog.at_level(logging.ERROR):
            assert loader.list_cheatsheets() == []

        assert "Error reading cheatsheets" in caplog.text

    def test_empty_directory_returns_empty_list(self, tmp_path):
        assert CheatsheetLoader(tmp_path).list_cheatsheets() == []

    def test_undecodable_file_is_skipped(self, content_dir, caplog):
        (content_dir / "binary.md").write_bytes(b"\xff\xfe\x00garbage")

        with caplog.at_level(logging.WARNING):
            slugs = [sheet.slug for sheet in CheatsheetLoader(content_dir).list_cheatsheets()]

        assert "binary" not in slugs
        assert len(slugs) == 4
        assert "binary.md" in caplog.text

    def test_custom_defaults(self, content_dir):
        loader = CheatsheetLoader(
            content_dir, defaults=MetadataDefaults(description="Ref", category="Misc")
        )
        untitled = next(s for s in loader.list_cheatsheets() if s.slug == "untitled")

        assert (untitled.description, untitled.category) == ("Ref", "Misc")


class TestGetCheatsheet:
    """Test loading single documents."""

    def test_loads_and_renders(self, content_dir):
        sheet = CheatsheetLoader(content_dir).get_cheatsheet("bash")

        assert sheet is not None
        assert sheet.title == "bash"
        assert sheet.description == "Shell scripting basics"
        assert sheet.category == "Tool"
        assert sheet.content.startswith("Use `set -euo pipefail`")
        assert "<code>set -euo pipefail</code>" in sheet.content_html
        assert "<strong>every</strong>" in sheet.content_html
        assert sheet.frontmatter["title"] == "bash"

    def test_missing_slug_returns_none(self, content_dir):
        assert CheatsheetLoader(content_dir).get_cheatsheet("does-not-exist") is None

    def test_missing_directory_returns_none(self, tmp_path):
        assert CheatsheetLoader(tmp_path / "nope").get_cheatsheet("bash") is None

    @pytest.mark.parametrize("slug", ["", "../secret", "..", ".hidden", "a/b", "a\\b"])
    def test_invalid_slugs_are_not_found(self, content_dir, slug):
        (content_dir.parent / "secret.md").write_text("top secret", encoding="utf-8")

        assert CheatsheetLoader(content_dir).get_cheatsheet(slug) is None

    def test_document_without_header_uses_defaults(self, content_dir):
        sheet = CheatsheetLoader(content_dir).get_cheatsheet("untitled")

        assert sheet.title == "untitled"
        assert sheet.description == "Cheatsheet"
        assert sheet.category == "Programming Language"
        assert sheet.content_html == "<p>No header here, just a body.</p>"

    def test_malformed_header_renders_whole_file(self, content_dir):
        (content_dir / "broken.md").write_text("---\ntitle: [oops\n---\nBody", encoding="utf-8")

        sheet = CheatsheetLoader(content_dir).get_cheatsheet("broken")

        assert sheet.title == "broken"
        assert sheet.frontmatter == {}
        assert sheet.content.startswith("---")

    def test_reads_fresh_on_every_call(self, content_dir):
        loader = CheatsheetLoader(content_dir)
        first = loader.get_cheatsheet("awk")

        (content_dir / "awk.md").write_text("---\ntitle: Awk 2\n---\nNew body", encoding="utf-8")
        second = loader.get_cheatsheet("awk")

        assert first.title == "Awk"
        assert second.title == "Awk 2"
        assert second.content_html == "<p>New body</p>"


class TestRenderCache:
    """Test the optional body-keyed render cache."""

    def test_cache_reuses_render_for_same_body(self, content_dir):
        calls = []

        class CountingRenderer(MarkdownRenderer):
            def render(self, markdown):
                calls.append(markdown)
                return super().render(markdown)

        loader = CheatsheetLoader(content_dir, renderer=CountingRenderer(), cache_size=8)
        loader.get_cheatsheet("awk")
        loader.get_cheatsheet("awk")

        assert len(calls) == 1

    def test_cache_invalidated_when_source_changes(self, content_dir):
        loader = CheatsheetLoader(content_dir, cache_size=8)
        loader.get_cheatsheet("awk")

        (content_dir / "awk.md").write_text("---\ntitle: Awk\n---\nChanged", encoding="utf-8")

        assert loader.get_cheatsheet("awk").content_html == "<p>Changed</p>"


class TestFromConfig:
    """Test building a loader from configuration."""

    def test_from_config(self, content_dir):
        config = Config(
            content=ContentConfig(
                content_dir=str(content_dir),
                default_description="Ref",
                default_category="Misc",
            ),
            render=RenderConfig(highlight=False, default_language="python"),
        )

        loader = CheatsheetLoader.from_config(config)
        sheet = loader.get_cheatsheet("untitled")

        assert loader.content_dir == content_dir
        assert sheet.description == "Ref"
        assert sheet.category == "Misc"

    def test_from_config_highlights_code(self, config):
        sheet = CheatsheetLoader.from_config(config).get_cheatsheet("rust")

        assert "shiki-wrapper" in sheet.content_html
        assert "<span" in sheet.content_html
