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

"""Naming and formatting conventions checked in strict mode."""

import re
from pathlib import Path

from ..models.stencil_settings import StencilSettings
from .report import FindingCollector


class StrictChecker:
    """Convention checks for valid settings.

    Each rule adds at most one warning and all rules run independently.
    """

    ID_PATTERN = re.compile(r'[a-z0-9\-_]+')
    VERSION_PATTERN = re.compile(r'^\d+\.\d+\.\d+')

    def check(self, settings_file: Path, settings: StencilSettings, result: FindingCollector):
        """Add convention warnings for *settings*.

        Args:
            settings_file: Path reported on the findings
            settings: Typed settings that passed schema validation
            result: Collector to add warnings to
        """
        if not self._is_valid_id(settings.id):
            result.add_warning(
                settings_file,
                "Stencil ID should only contain lowercase letters, numbers, hyphens, and underscores",
            )

        if not self._is_semver(settings.version):
            result.add_warning(
                settings_file,
                "Version should follow semantic versioning format (x.y.z)",
            )

        if not settings.description:
            result.add_warning(
                settings_file,
                "Description is recommended for better documentation",
            )

    @classmethod
    def _is_valid_id(cls, stencil_id: str) -> bool:
        return bool(cls.ID_PATTERN.fullmatch(stencil_id))

    @classmethod
    def _is_semver(cls, version: str) -> bool:
        """Only the leading x.y.z is checked; pre-release suffixes are allowed."""
        return bool(cls.VERSION_PATTERN.match(version))
