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

"""Findings and the aggregated validation report."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..parsing.source_location import SourceLocation


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.ERROR: 2, Severity.WARNING: 1, Severity.INFO: 0}


class FailOn(str, Enum):
    """Which severity makes the validator exit non-zero."""
    NONE = "none"
    WARN = "warn"
    ERROR = "error"


# Exit codes of the validate command
EXIT_OK = 0
EXIT_WARNINGS = 1
EXIT_ERRORS = 2


@dataclass(frozen=True)
class Finding:
    """One validation outcome."""

    path: str
    severity: Severity
    message: str
    details: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    yaml_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'path': self.path,
            'type': self.severity.value,
            'message': self.message,
        }
        if self.details is not None:
            data['details'] = self.details
        if self.line is not None:
            data['line'] = self.line
        if self.column is not None:
            data['column'] = self.column
        if self.yaml_path is not None:
            data['yamlPath'] = self.yaml_path
        return data


class FindingCollector:
    """Append-only container the checkers report into."""

    def __init__(self):
        self._findings: List[Finding] = []

    @property
    def findings(self) -> Tuple[Finding, ...]:
        return tuple(self._findings)

    def add(
        self,
        severity: Severity,
        path: Union[str, Path],
        message: str,
        details: Optional[str] = None,
        location: Optional[SourceLocation] = None,
    ) -> Finding:
        """Record a finding.

        Args:
            severity: Severity of the finding
            path: File or directory the finding is about
            message: Human-readable description
            details: Optional secondary text, e.g. a parser message
            location: Optional position inside the settings document
        """
        finding = Finding(
            path=str(path),
            severity=severity,
            message=message,
            details=details,
            line=location.line if location else None,
            column=location.column if location else None,
            yaml_path=location.yaml_path if location else None,
        )
        self._findings.append(finding)
        return finding

    def add_error(self, path, message, details=None, location=None) -> Finding:
        return self.add(Severity.ERROR, path, message, details, location)

    def add_warning(self, path, message, details=None, location=None) -> Finding:
        return self.add(Severity.WARNING, path, message, details, location)

    def add_info(self, path, message, details=None, location=None) -> Finding:
        return self.add(Severity.INFO, path, message, details, location)


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of one validation run."""

    root_path: str
    findings: Tuple[Finding, ...] = ()
    total_files: int = 0
    validated_at: str = field(default_factory=utc_now)

    def by_severity(self, severity: Severity) -> Tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.severity is severity)

    @property
    def errors(self) -> Tuple[Finding, ...]:
        return self.by_severity(Severity.ERROR)

    @property
    def warnings(self) -> Tuple[Finding, ...]:
        return self.by_severity(Severity.WARNING)

    @property
    def info(self) -> Tuple[Finding, ...]:
        return self.by_severity(Severity.INFO)

    @property
    def success(self) -> bool:
        return not self.errors

    def exit_code(self, fail_on: Union[FailOn, str] = FailOn.ERROR) -> int:
        """Exit code for this report.

        Errors always give 2. Warnings give 1 only when *fail_on* is ``warn``.
        """
        if self.errors:
            return EXIT_ERRORS
        if FailOn(fail_on) is FailOn.WARN and self.warnings:
            return EXIT_WARNINGS
        return EXIT_OK

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'path': self.root_path,
            'errors': [f.to_dict() for f in self.errors],
            'warnings': [f.to_dict() for f in self.warnings],
            'info': [f.to_dict() for f in self.info],
            'totalFiles': self.total_files,
            'validatedAt': self.validated_at,
        }
