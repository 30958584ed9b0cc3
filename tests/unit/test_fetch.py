"""
Unit tests for the local fetcher (dialect_ingest.fetch).
"""

from __future__ import annotations

import pytest

from dialect_ingest.fetch import LocalFetcher


class TestLocalFetcher:
    """Tests for LocalFetcher."""

    def test_fetch_text(self, tmp_path):
        f = tmp_path / "data.csv"
        f.write_text("a,b,c\n1,2,3\n", encoding="utf-8")
        assert LocalFetcher().fetch_text(str(f)) == "a,b,c\n1,2,3\n"

    def test_bom_is_stripped(self, tmp_path):
        f = tmp_path / "data.csv"
        f.write_bytes("\ufeffgeo;year\n".encode("utf-8"))
        assert LocalFetcher().fetch_text(str(f)) == "geo;year\n"

    def test_line_endings_untouched(self, tmp_path):
        f = tmp_path / "data.csv"
        f.write_bytes(b"a,b\r\n1,2\r\n")
        assert LocalFetcher().fetch_text(str(f)) == "a,b\r\n1,2\r\n"

    def test_missing_text_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LocalFetcher().fetch_text(str(tmp_path / "missing.csv"))

    def test_json_asset(self, tmp_path):
        f = tmp_path / "meta.json"
        f.write_text('{"name": "population"}', encoding="utf-8")
        assert LocalFetcher().fetch_asset(str(f)) == {"name": "population"}

    def test_yaml_asset(self, tmp_path):
        f = tmp_path / "units.yml"
        f.write_text("area: km2\n", encoding="utf-8")
        assert LocalFetcher().fetch_asset(str(f)) == {"area": "km2"}

    def test_invalid_json_raises_value_error(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            LocalFetcher().fetch_asset(str(f))

    def test_invalid_yaml_raises_value_error(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("a: [1, 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            LocalFetcher().fetch_asset(str(f))

    def test_missing_asset_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LocalFetcher().fetch_asset(str(tmp_path / "missing.json"))
