"""Tests for the YAML settings parser."""

from pathlib import Path

import pytest

from stencil_validator.exceptions import PreconditionError, SettingsParseError
from stencil_validator.parsing import YamlParser, lookup_source


class TestLoadWithSource:
    def test_returns_data_and_locations(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yml"
        path.write_text("id: svc\nfiles:\n  - a.txt\n  - b.txt\n", encoding="utf-8")

        data, source_map = YamlParser().load_with_source(path)

        assert data == {"id": "svc", "files": ["a.txt", "b.txt"]}
        assert source_map["/id"] == {"line": 1, "column": 1}
        assert source_map["/files"] == {"line": 2, "column": 1}
        assert source_map["/files/1"] == {"line": 4, "column": 5}

    def test_empty_document_is_none(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yml"
        path.write_text("", encoding="utf-8")

        data, source_map = YamlParser().load_with_source(path)

        assert data is None
        assert source_map == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(PreconditionError):
            YamlParser().load_with_source(tmp_path / "missing.yml")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(PreconditionError):
            YamlParser().load_with_source(tmp_path)

    def test_malformed_yaml(self) -> None:
        with pytest.raises(SettingsParseError) as exc_info:
            YamlParser().load_from_string_with_source("id: [unclosed\n")
        assert str(exc_info.value)


class TestLookupSource:
    def test_known_path(self) -> None:
        loc = lookup_source({"/id": {"line": 3, "column": 1}}, "/id")
        assert (loc.line, loc.column, loc.yaml_path) == (3, 1, "/id")

    def test_unknown_path_keeps_yaml_path(self) -> None:
        loc = lookup_source({}, "/name")
        assert loc.line is None
        assert loc.yaml_path == "/name"


class TestCoreScalars:
    @pytest.mark.parametrize("text", ["no", "yes", "on", "off", "No", "OFF", "y", "n"])
    def test_yaml11_booleans_stay_strings(self, text: str) -> None:
        data, _ = YamlParser().load_from_string_with_source(f"name: {text}\n")
        assert data == {"name": text}

    @pytest.mark.parametrize("text, expected", [("true", True), ("False", False), ("TRUE", True)])
    def test_true_false_are_booleans(self, text: str, expected: bool) -> None:
        data, _ = YamlParser().load_from_string_with_source(f"flag: {text}\n")
        assert data["flag"] is expected

    def test_dates_stay_strings(self) -> None:
        data, _ = YamlParser().load_from_string_with_source("version: 2024-01-01\nat: 2024-01-01 10:00:00\n")
        assert data == {"version": "2024-01-01", "at": "2024-01-01 10:00:00"}

    def test_other_scalars_unchanged(self) -> None:
        data, _ = YamlParser().load_from_string_with_source("port: 8080\nratio: 0.5\nnothing: ~\n")
        assert data == {"port": 8080, "ratio": 0.5, "nothing": None}

    def test_safe_loader_is_not_modified(self) -> None:
        import yaml

        assert yaml.safe_load("name: no\n") == {"name": False}
