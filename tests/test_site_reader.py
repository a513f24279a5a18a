"""Tests for SiteReader — artifact access, sizes and asset listing."""

from pathlib import Path

import pytest

from perfaudit.shared.site_reader import SiteReader


class TestSiteReader:

    def test_init_requires_directory(self, tmp_path: Path) -> None:
        f = tmp_path / "not-a-dir.txt"
        f.write_text("hi")
        with pytest.raises(ValueError, match="not a directory"):
            SiteReader(f)

    def test_read_text_and_size(self, sample_site: Path) -> None:
        reader = SiteReader(sample_site)
        assert "<script>" in reader.read_text("index.html")
        assert reader.size_kb("assets/hero.png") == 2.0

    def test_missing_file(self, sample_site: Path) -> None:
        reader = SiteReader(sample_site)
        assert not reader.is_file("integration-test.html")
        with pytest.raises(FileNotFoundError):
            reader.read_text("integration-test.html")

    def test_path_escape_rejected(self, sample_site: Path) -> None:
        reader = SiteReader(sample_site)
        with pytest.raises(ValueError, match="escapes"):
            reader.read_text("../outside.txt")

    def test_list_assets_sorted_files_only(self, sample_site: Path) -> None:
        (sample_site / "assets" / "icons").mkdir()
        (sample_site / "assets" / ".DS_Store").write_bytes(b"x")
        reader = SiteReader(sample_site)
        assert reader.list_assets("assets") == ["hero.png", "logo.gif"]

    def test_list_assets_respects_gitignore_and_extra_patterns(self, sample_site: Path) -> None:
        (sample_site / ".gitignore").write_text("*.gif\n")
        (sample_site / "assets" / "draft.psd").write_bytes(b"x")
        reader = SiteReader(sample_site, ignore=["*.psd"])
        assert reader.list_assets("assets") == ["hero.png"]

    def test_list_assets_missing_dir(self, sample_site: Path) -> None:
        reader = SiteReader(sample_site)
        with pytest.raises(NotADirectoryError):
            reader.list_assets("images")
