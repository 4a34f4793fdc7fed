"""Tests for report rendering."""

import json
from pathlib import Path

import jsonschema

from stencil_validator.models.json_schema_loader import load_failure_schema, load_report_schema
from stencil_validator.validator import validate_stencil
from stencil_validator.validator.render import render_failure_json, render_json, render_text
from stencil_validator.validator.report import Finding, Severity, ValidationReport

from .conftest import REQUIRED_SETTINGS


def _sample_report() -> ValidationReport:
    return ValidationReport(
        root_path="/stencil",
        findings=(
            Finding(path="/stencil/a.txt", severity=Severity.INFO, message="Referenced file exists: a.txt"),
            Finding(
                path="/stencil/stencil-settings.yml",
                severity=Severity.ERROR,
                message="Invalid YAML format",
                details="mapping values are not allowed here",
            ),
            Finding(
                path="/stencil/stencil-settings.yml",
                severity=Severity.WARNING,
                message="Extend reference found: base",
                line=3,
                column=1,
                yaml_path="/extend",
            ),
        ),
        total_files=4,
        validated_at="2026-01-01T00:00:00.000Z",
    )


class TestRenderJson:
    def test_partitions_and_stable_keys(self) -> None:
        data = json.loads(render_json(_sample_report()))

        assert list(data) == ["success", "path", "errors", "warnings", "info", "totalFiles", "validatedAt"]
        assert data["success"] is False
        assert data["totalFiles"] == 4
        assert data["errors"] == [
            {
                "path": "/stencil/stencil-settings.yml",
                "type": "error",
                "message": "Invalid YAML format",
                "details": "mapping values are not allowed here",
            }
        ]
        assert data["warnings"][0]["line"] == 3
        assert data["warnings"][0]["yamlPath"] == "/extend"
        assert "details" not in data["info"][0]

    def test_matches_published_schema(self) -> None:
        jsonschema.validate(json.loads(render_json(_sample_report())), load_report_schema())

    def test_fatal_report_matches_published_schema(self, tmp_path: Path) -> None:
        data = json.loads(render_json(validate_stencil(tmp_path / "missing")))

        jsonschema.validate(data, load_report_schema())
        assert len(data["errors"]) == 1
        assert data["warnings"] == []
        assert data["info"] == []

    def test_real_report_matches_published_schema(self, stencil_dir: Path, write_settings) -> None:
        write_settings(dict(REQUIRED_SETTINGS, version=[1], include=["x"]))

        data = json.loads(render_json(validate_stencil(stencil_dir)))

        jsonschema.validate(data, load_report_schema())

    def test_failure_document(self) -> None:
        data = json.loads(render_failure_json("boom"))

        jsonschema.validate(data, load_failure_schema())
        assert data["success"] is False
        assert data["error"] == "boom"


class TestRenderText:
    def test_sections_in_severity_order(self) -> None:
        text = render_text(_sample_report())

        assert text.index("Errors (1):") < text.index("Warnings (1):") < text.index("Information (1):")
        assert "    mapping values are not allowed here" in text
        assert "Location: /stencil/stencil-settings.yml:3:1" in text
        assert "Files: 4" in text
        assert "Validation failed" in text
        assert text.endswith("Summary: 1 errors, 1 warnings, 1 info")

    def test_success_banner_and_empty_sections_omitted(self) -> None:
        report = ValidationReport(root_path="/stencil", total_files=0)

        text = render_text(report)

        assert "Validation successful!" in text
        assert "Errors" not in text
        assert "Warnings" not in text
