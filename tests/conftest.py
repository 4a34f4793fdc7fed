"""Shared test fixtures."""

from pathlib import Path
from typing import Any, Dict, Optional

import pytest
import yaml

REQUIRED_SETTINGS: Dict[str, Any] = {
    "id": "svc",
    "name": "Service",
    "version": "1.0.0",
    "type": "service",
}


@pytest.fixture
def stencil_dir(tmp_path: Path) -> Path:
    root = tmp_path / "stencil"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def write_settings(stencil_dir: Path):
    """Write stencil-settings.yml from a mapping or raw text."""

    def _write(settings: Optional[Dict[str, Any]] = None, text: Optional[str] = None) -> Path:
        path = stencil_dir / "stencil-settings.yml"
        if text is None:
            text = yaml.safe_dump(settings if settings is not None else REQUIRED_SETTINGS, sort_keys=False)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def touch(stencil_dir: Path):
    """Create a file (and its parents) under the stencil root."""

    def _touch(relative: str, content: str = "") -> Path:
        path = stencil_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _touch
