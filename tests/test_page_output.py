"""
Tests for page target resolution, writing and the default renderer.
"""

import logging

import pytest

from conftest import raw_submission
from gbhwdb.components.site.page_output_comp import resolve_page_target, write_page, write_pages
from gbhwdb.components.site.page_renderer_comp import SITE_NAME, render_page
from gbhwdb.helpers.dto.config_dto import MapperId
from gbhwdb.helpers.dto.page_dto import GameEntry, IndexPageProps, MapperPageProps, PageDeclaration
from gbhwdb.helpers.dto.submission_dto import CartridgeSubmission


def _page(path, page_type="mapper-detail", title="mbc1"):
    return PageDeclaration(
        type=page_type,
        path=tuple(path),
        title=title,
        props=MapperPageProps(mapper=MapperId.MBC1, submissions=()),
    )


@pytest.mark.unit
class TestResolvePageTarget:
    def test_nested_path(self, tmp_path):
        """Test leading segments are directories and the last is the file name."""
        target = resolve_page_target(_page(["cartridges", "mbc1"]), tmp_path)
        assert target == tmp_path.resolve() / "cartridges" / "mbc1.html"

    def test_single_segment(self, tmp_path):
        """Test a one-segment path lands in the root."""
        assert resolve_page_target(_page(["about"]), tmp_path) == tmp_path.resolve() / "about.html"

    def test_empty_path_uses_type(self, tmp_path):
        """Test an empty path falls back to the page type as file name."""
        target = resolve_page_target(_page([], page_type="index"), tmp_path)
        assert target == tmp_path.resolve() / "index.html"

    def test_relative_root_is_absolute(self, tmp_path, monkeypatch):
        """Test a relative output root is resolved against the cwd."""
        monkeypatch.chdir(tmp_path)
        target = resolve_page_target(_page(["cartridges", "mbc1"]), "site")
        assert target.is_absolute()
        assert target == tmp_path.resolve() / "site" / "cartridges" / "mbc1.html"


@pytest.mark.unit
class TestWritePage:
    def test_doctype_prefix(self, tmp_path):
        """Test the written file is the doctype followed by the rendered body."""
        target = write_page(_page(["cartridges", "mbc1"]), lambda page: "<html></html>", tmp_path)
        assert target.read_text(encoding="utf-8") == "<!DOCTYPE html>\n<html></html>"

    def test_overwrites_existing(self, tmp_path):
        """Test a second write replaces the first."""
        page = _page(["cartridges", "mbc1"])
        write_page(page, lambda p: "one", tmp_path)
        target = write_page(page, lambda p: "two", tmp_path)
        assert target.read_text(encoding="utf-8").endswith("two")


@pytest.mark.unit
class TestWritePages:
    def test_all_pages_written(self, tmp_path):
        """Test every page produces one file, reported in page order."""
        pages = [_page(["cartridges", name], title=name) for name in ("index", "mbc1", "mbc3", "no-mapper")]
        report = write_pages(pages, lambda page: page.title, tmp_path, max_workers=3)
        assert report.ok
        assert [p.name for p in report.written] == ["index.html", "mbc1.html", "mbc3.html", "no-mapper.html"]

    def test_failing_page_does_not_stop_others(self, tmp_path, caplog):
        """Test one renderer failure is recorded and logged while the rest are written."""

        def render(page):
            if page.title == "mbc3":
                raise RuntimeError("template exploded")
            return page.title

        pages = [_page(["cartridges", name], title=name) for name in ("mbc1", "mbc3", "mbc5")]
        with caplog.at_level(logging.ERROR):
            report = write_pages(pages, render, tmp_path, max_workers=2)

        assert not report.ok
        assert len(report.failures) == 1
        assert report.failures[0].path == ("cartridges", "mbc3")
        assert "template exploded" in report.failures[0].error
        assert [p.name for p in report.written] == ["mbc1.html", "mbc5.html"]
        assert not (tmp_path / "cartridges" / "mbc3.html").exists()
        assert "cartridges/mbc3" in caplog.text

    def test_no_pages(self, tmp_path):
        """Test an empty job list is a successful no-op."""
        report = write_pages([], lambda page: "", tmp_path)
        assert report.ok
        assert report.written == []


@pytest.mark.unit
class TestDefaultRenderer:
    def test_index_lists_games_and_mappers(self, store, make_submission):
        """Test the index page links populated mappers and shows game names."""
        entry = GameEntry(type="tetris", cfg=store.game_config("tetris"), submissions=(make_submission("tetris"),))
        page = PageDeclaration(
            type="index",
            path=("cartridges", "index"),
            title="Game Boy cartridges",
            props=IndexPageProps(games=(entry,), mappers=(MapperId.NO_MAPPER,)),
        )
        html = render_page(page)
        assert f"<title>Game Boy cartridges - {SITE_NAME}</title>" in html
        assert 'href="no-mapper.html"' in html
        assert "Tetris" in html

    def test_mapper_page_escapes_text(self):
        """Test submission text is HTML escaped."""
        raw = raw_submission("tetris", kind="MBC1")
        raw["title"] = "<script>alert(1)</script>"
        submission = CartridgeSubmission.from_raw(raw, 0)
        page = PageDeclaration(
            type="mapper-detail",
            path=("cartridges", "mbc1"),
            title="mbc1",
            props=MapperPageProps(mapper=MapperId.MBC1, submissions=(submission,)),
        )
        html = render_page(page)
        assert "<h1>mbc1</h1>" in html
        assert "MBC1" in html
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
