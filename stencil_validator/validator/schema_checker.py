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

"""Schema validation of the settings document."""

import logging
from typing import Optional

from ..models.settings_schema import validate_settings
from ..models.stencil_settings import StencilSettings
from ..parsing.source_location import lookup_source
from .report import FindingCollector
from .settings_loader import LoadedSettings

logger = logging.getLogger(__name__)


class SchemaChecker:
    """Checks the raw document against the settings schema."""

    def check(self, loaded: LoadedSettings, result: FindingCollector) -> Optional[StencilSettings]:
        """Validate the document, reporting one error per violation.

        Returns:
            The typed settings when the document is valid, otherwise None
        """
        issues = validate_settings(loaded.data)

        for issue in issues:
            field_path = issue.dotted_path or "<root>"
            result.add_error(
                loaded.settings_file,
                f"Schema validation failed: {field_path} - {issue.message}",
                location=lookup_source(loaded.source_map, issue.yaml_path),
            )

        if issues:
            logger.debug(f"{len(issues)} schema violation(s) in {loaded.settings_file}")
            return None

        return StencilSettings.from_mapping(loaded.data)
