"""Tests for the asset inventory analyzer."""

import pytest
from pydantic import ValidationError

from perfaudit.analyzers.assets import analyze_assets, asset_extension
from perfaudit.schemas.metrics import AssetInventory, SizeVerdict


class TestAssetExtension:
    def test_lower_cased_with_dot(self) -> None:
        assert asset_extension("Hero.PNG") == ".png"

    def test_last_suffix_only(self) -> None:
        assert asset_extension("bundle.min.webp") == ".webp"

    def test_no_extension(self) -> None:
        assert asset_extension("LICENSE") == ""
        assert asset_extension(".htaccess") == ""

    def test_trailing_dot(self) -> None:
        assert asset_extension("photo.") == "."
        assert asset_extension("assets/Photo.JPG") == ".jpg"


class TestAnalyzeAssets:

    def test_empty_inventory(self) -> None:
        inv = analyze_assets([], lambda name: 0.0)
        assert inv.records == []
        assert inv.total_count == 0
        assert inv.total_size_kb == 0

    def test_records_follow_listing_order(self) -> None:
        sizes = {"b.png": 100.0, "a.jpg": 350.0, "c.webp": 10.0}
        inv = analyze_assets(["b.png", "a.jpg", "c.webp"], sizes.__getitem__)
        assert [r.name for r in inv.records] == ["b.png", "a.jpg", "c.webp"]
        assert [r.extension for r in inv.records] == [".png", ".jpg", ".webp"]
        assert [r.verdict for r in inv.records] == [
            SizeVerdict.GOOD,
            SizeVerdict.WARNING,
            SizeVerdict.GOOD,
        ]
        assert inv.total_count == 3

    def test_total_rounded_once(self) -> None:
        sizes = {"a.png": 0.1, "b.png": 0.2, "c.png": 100.25}
        inv = analyze_assets(list(sizes), sizes.__getitem__)
        assert inv.total_size_kb == 100.55

    def test_per_extension_thresholds(self) -> None:
        sizes = {"anim.gif": 2000.0, "photo.jpeg": 451.0, "icon.svg": 751.0}
        inv = analyze_assets(list(sizes), sizes.__getitem__)
        verdicts = {r.name: r.verdict for r in inv.records}
        assert verdicts["anim.gif"] == SizeVerdict.GOOD
        assert verdicts["photo.jpeg"] == SizeVerdict.NEEDS_IMPROVEMENT
        assert verdicts["icon.svg"] == SizeVerdict.NEEDS_IMPROVEMENT

    def test_extra_thresholds(self) -> None:
        inv = analyze_assets(["icon.svg"], lambda name: 30.0, {".svg": 20})
        assert inv.records[0].verdict == SizeVerdict.WARNING


class TestAssetInventoryModel:
    def test_count_must_match_records(self) -> None:
        with pytest.raises(ValidationError, match="total_count"):
            AssetInventory(records=[], total_count=2, total_size_kb=0)

    def test_frozen(self) -> None:
        inv = AssetInventory()
        with pytest.raises(ValidationError):
            inv.total_count = 4  # type: ignore[misc]
