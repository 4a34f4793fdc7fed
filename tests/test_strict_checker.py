"""Tests for strict-mode convention checks."""

from pathlib import Path

import pytest

from stencil_validator.models import StencilSettings
from stencil_validator.validator.report import FindingCollector, Severity
from stencil_validator.validator.strict_checker import StrictChecker

SETTINGS_FILE = Path("/stencil/stencil-settings.yml")


def _check(**overrides):
    fields = dict(id="svc", name="Service", version="1.0.0", type="service", description="desc")
    fields.update(overrides)
    result = FindingCollector()
    StrictChecker().check(SETTINGS_FILE, StencilSettings(**fields), result)
    return result.findings


def test_conforming_settings_have_no_warnings() -> None:
    assert _check() == ()


@pytest.mark.parametrize("stencil_id", ["svc", "my-service_2", "a"])
def test_valid_ids(stencil_id: str) -> None:
    assert _check(id=stencil_id) == ()


@pytest.mark.parametrize("stencil_id", ["Bad ID!", "Service", "svc.v2", "svc\n"])
def test_invalid_id(stencil_id: str) -> None:
    (finding,) = _check(id=stencil_id)
    assert finding.severity is Severity.WARNING
    assert "Stencil ID should only contain" in finding.message


@pytest.mark.parametrize("version", ["1.0.0", "10.20.30", "1.0.0-beta.1"])
def test_valid_versions(version: str) -> None:
    assert _check(version=version) == ()


@pytest.mark.parametrize("version", ["1.0", "v1.0.0", "latest"])
def test_invalid_version(version: str) -> None:
    (finding,) = _check(version=version)
    assert finding.message == "Version should follow semantic versioning format (x.y.z)"


@pytest.mark.parametrize("description", [None, ""])
def test_missing_description(description) -> None:
    (finding,) = _check(description=description)
    assert finding.message == "Description is recommended for better documentation"


def test_all_rules_fire_together() -> None:
    findings = _check(id="Bad ID!", version="one", description=None)

    assert len(findings) == 3
    assert all(f.severity is Severity.WARNING for f in findings)
    assert all(f.path == str(SETTINGS_FILE) for f in findings)
