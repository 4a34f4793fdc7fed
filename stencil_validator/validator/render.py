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

"""Text and JSON rendering of validation reports."""

import json
from typing import List

from ..parsing.source_location import SourceLocation, format_source
from .report import Finding, Severity, ValidationReport, utc_now

_SECTION_TITLES = {
    Severity.ERROR: "Errors",
    Severity.WARNING: "Warnings",
    Severity.INFO: "Information",
}


def render_json(report: ValidationReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


def render_failure_json(message: str) -> str:
    """JSON document for a run that aborted with an unexpected error."""
    return json.dumps(
        {'success': False, 'error': message, 'validatedAt': utc_now()},
        indent=2,
    )


def _render_finding(finding: Finding) -> List[str]:
    lines = [f"  - {finding.message}"]
    if finding.details:
        # PyYAML messages span several lines
        lines.extend(f"    {detail}" for detail in finding.details.splitlines())
    position = format_source(SourceLocation(line=finding.line, column=finding.column))
    location = f"{finding.path}:{position}" if position else finding.path
    lines.append(f"    Location: {location}")
    return lines


def render_text(report: ValidationReport) -> str:
    """Human-readable report, most severe findings first."""
    lines = [
        "",
        "Stencil Validation Report",
        "=========================",
        f"Path: {report.root_path}",
        f"Files: {report.total_files}",
        f"Validated: {report.validated_at}",
        "",
    ]

    for severity in sorted(Severity, key=lambda s: s.rank, reverse=True):
        findings = report.by_severity(severity)
        if not findings:
            continue
        lines.append(f"{_SECTION_TITLES[severity]} ({len(findings)}):")
        for finding in findings:
            lines.extend(_render_finding(finding))
        lines.append("")

    lines.append("Validation successful!" if report.success else "Validation failed")
    lines.append(
        f"Summary: {len(report.errors)} errors, {len(report.warnings)} warnings, "
        f"{len(report.info)} info"
    )
    return "\n".join(lines)
