"""Tests for the settings loader preconditions."""

from pathlib import Path

from stencil_validator.exceptions import PreconditionError
from stencil_validator.validator.report import FindingCollector, Severity
from stencil_validator.validator.settings_loader import SettingsLoader


def _load(root: Path):
    result = FindingCollector()
    loaded = SettingsLoader().load(root, result)
    return loaded, result.findings


def test_missing_root(tmp_path: Path) -> None:
    loaded, findings = _load(tmp_path / "nope")

    assert loaded is None
    assert [(f.severity, f.message) for f in findings] == [(Severity.ERROR, "Path does not exist")]


def test_root_is_a_file(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")

    loaded, findings = _load(target)

    assert loaded is None
    assert [f.message for f in findings] == ["Path must be a directory"]


def test_missing_settings_document(stencil_dir: Path) -> None:
    loaded, findings = _load(stencil_dir)

    assert loaded is None
    assert len(findings) == 1
    assert findings[0].message == "Required file stencil-settings.yml not found"
    assert findings[0].path == str(stencil_dir / "stencil-settings.yml")


def test_custom_settings_file_name(stencil_dir: Path) -> None:
    (stencil_dir / "custom.yml").write_text("id: svc\n", encoding="utf-8")
    result = FindingCollector()

    loaded = SettingsLoader("custom.yml").load(stencil_dir, result)

    assert loaded is not None
    assert loaded.data == {"id": "svc"}
    assert result.findings == ()


def test_parse_failure_carries_details(stencil_dir: Path, write_settings) -> None:
    write_settings(text="id: svc\nname: [broken\n")

    loaded, findings = _load(stencil_dir)

    assert loaded is None
    assert len(findings) == 1
    assert findings[0].severity is Severity.ERROR
    assert findings[0].message == "Invalid YAML format"
    assert findings[0].details


def test_undecodable_document(stencil_dir: Path) -> None:
    (stencil_dir / "stencil-settings.yml").write_bytes(b"id: \xff\xfe\n")

    loaded, findings = _load(stencil_dir)

    assert loaded is None
    assert [f.message for f in findings] == ["Failed to read stencil settings file"]
    assert findings[0].details


def test_success_returns_raw_document(stencil_dir: Path, write_settings) -> None:
    settings_file = write_settings()

    loaded, findings = _load(stencil_dir)

    assert findings == ()
    assert loaded.settings_file == settings_file
    assert loaded.data["id"] == "svc"
    assert "/id" in loaded.source_map


class _VanishingParser:
    def load_with_source(self, file_path):
        raise PreconditionError(f"Configuration file not found: {file_path}")


def test_settings_document_removed_before_read(stencil_dir: Path, write_settings) -> None:
    settings_file = write_settings()
    result = FindingCollector()

    loaded = SettingsLoader(parser=_VanishingParser()).load(stencil_dir, result)

    assert loaded is None
    (finding,) = result.findings
    assert finding.severity is Severity.ERROR
    assert finding.message == "Required file stencil-settings.yml not found"
    assert finding.path == str(settings_file)
    assert "Configuration file not found" in finding.details


def test_overlong_root_path(tmp_path: Path) -> None:
    loaded, findings = _load(tmp_path / ("r" * 300))

    assert loaded is None
    assert [f.message for f in findings] == ["Path does not exist"]
