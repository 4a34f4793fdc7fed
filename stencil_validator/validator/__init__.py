# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Validation engine for stencil definition directories."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from .. import SETTINGS_FILE_NAME
from .cross_reference_reporter import CrossReferenceReporter
from .file_scanner import count_files
from .reference_checker import ReferenceChecker
from .report import FailOn, Finding, FindingCollector, Severity, ValidationReport
from .schema_checker import SchemaChecker
from .settings_loader import SettingsLoader
from .strict_checker import StrictChecker

__all__ = [
    'FailOn',
    'Finding',
    'Severity',
    'ValidateOptions',
    'ValidationReport',
    'validate_stencil',
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidateOptions:
    """Per-run options of the validation engine."""
    strict: bool = False
    # Glob patterns excluded from the file count only
    ignore: Tuple[str, ...] = ()
    fail_on: FailOn = FailOn.ERROR
    settings_file_name: str = SETTINGS_FILE_NAME


def validate_stencil(
    root: Union[str, Path],
    options: Optional[ValidateOptions] = None,
) -> ValidationReport:
    """Validate the stencil directory at *root*.

    Args:
        root: Stencil directory, relative paths resolve against the cwd
        options: Run options; defaults are used when omitted

    Returns:
        ValidationReport with every finding of the run
    """
    options = options or ValidateOptions()
    root_path = Path(root).resolve()
    result = FindingCollector()

    logger.debug(f"Validating stencil at {root_path}")
    loaded = SettingsLoader(options.settings_file_name).load(root_path, result)

    # os.path.isdir is False for unreadable paths instead of raising
    total_files = count_files(root_path, options.ignore) if os.path.isdir(root_path) else 0

    if loaded is not None:
        settings = SchemaChecker().check(loaded, result)
        if settings is not None:
            if options.strict:
                StrictChecker().check(loaded.settings_file, settings, result)
            result.add_info(loaded.settings_file, "Stencil settings file is valid")

            ReferenceChecker().check(root_path, settings, result)
            CrossReferenceReporter().check(loaded.settings_file, settings, result)

    report = ValidationReport(
        root_path=str(root_path),
        findings=result.findings,
        total_files=total_files,
    )
    logger.debug(
        f"Validation of {root_path} finished: {len(report.errors)} errors, "
        f"{len(report.warnings)} warnings, {len(report.info)} info"
    )
    return report
