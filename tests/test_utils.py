"""Tests for shared utilities."""

import pytest
from pathlib import Path

from datetools.shared_utils import load_yaml_file, normalize_locale_identifier
from datetools.utils.dataloader import (
    find_data_file,
    format_not_found_error,
)


class TestFindDataFile:
    """Test data file finding utility"""

    def test_find_module_local_data(self):
        """Test finding the shipped English string table"""
        from datetools.timeago import timeagolocale
        path = find_data_file(
            module_file=timeagolocale.__file__,
            filenames=["en.yaml"],
        )
        assert path is not None
        assert path.exists()
        assert path.name == "en.yaml"

    def test_candidates_in_order(self):
        """Test the first existing candidate wins"""
        from datetools.timeago import timeagolocale
        path = find_data_file(
            module_file=timeagolocale.__file__,
            filenames=["ru-RU.yaml", "ru.yaml"],
        )
        assert path is not None
        assert path.name == "ru.yaml"

    def test_override_dir_first(self, tmp_path):
        """Test the override directory is searched before package data"""
        from datetools.timeago import timeagolocale
        (tmp_path / "en.yaml").write_text("{}\n", encoding="utf-8")
        path = find_data_file(
            module_file=timeagolocale.__file__,
            filenames=["en.yaml"],
            override_dir=str(tmp_path),
        )
        assert path == tmp_path / "en.yaml"

    def test_find_nonexistent_file(self):
        """Test that None is returned when file not found"""
        from datetools.timeago import timeagolocale
        path = find_data_file(
            module_file=timeagolocale.__file__,
            filenames=["xx.yaml"],
        )
        assert path is None


class TestFormatNotFoundError:
    """Test error message formatting"""

    def test_format_error_message(self):
        """Test error message formatting"""
        msg = format_not_found_error(
            what="string table",
            searched_locations=[
                ("Environment variable", Path("/override")),
                ("Package data", Path("/pkg/timeago/data")),
            ],
            fix_instructions=[
                "Reinstall datetools",
                "Set DATETOOLS_STRINGS_PATH",
            ],
        )

        assert "No string table found" in msg
        assert "Searched:" in msg
        assert "1. Environment variable: /override" in msg
        assert "2. Package data: /pkg/timeago/data" in msg
        assert "To fix:" in msg
        assert "Reinstall datetools" in msg


class TestLoadYamlFile:
    """Test YAML loading"""

    def test_load(self, tmp_path):
        path = tmp_path / "table.yaml"
        path.write_text('"Yesterday": "Вчера"\n', encoding="utf-8")
        assert load_yaml_file(path) == {"Yesterday": "Вчера"}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml_file(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Required file not found"):
            load_yaml_file(tmp_path / "missing.yaml")

    def test_shipped_tables_parse(self):
        """Test the shipped tables load and agree on phrase keys"""
        from datetools.timeago import timeagolocale
        data_dir = Path(timeagolocale.__file__).parent / "data"
        en = load_yaml_file(data_dir / "en.yaml")
        ru = load_yaml_file(data_dir / "ru.yaml")
        uk = load_yaml_file(data_dir / "uk.yaml")
        assert en["%d years ago"] == "%d years ago"
        assert set(en) <= set(ru)
        assert set(ru) == set(uk)


class TestNormalizeLocaleIdentifier:
    """Test locale identifier normalization"""

    @pytest.mark.parametrize("raw,expected", [
        ("ru_RU.UTF-8", "ru-RU"),
        ("en", "en"),
        ("EN-us", "en-US"),
        ("uk_UA@euro", "uk-UA"),
        ("  de_DE  ", "de-DE"),
        ("C", ""),
        ("POSIX", ""),
        ("C.UTF-8", ""),
        ("", ""),
        (None, ""),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_locale_identifier(raw) == expected
