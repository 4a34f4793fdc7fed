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

"""Reports extend/include declarations without resolving them."""

from pathlib import Path

from ..models.stencil_settings import StencilSettings
from .report import FindingCollector

UNRESOLVED_SUFFIX = "(cannot validate external references in Phase 1)"


class CrossReferenceReporter:
    """Flags cross-stencil references as warnings.

    Targets are never looked up, so the outcome does not depend on whether
    they exist.
    """

    def check(self, settings_file: Path, settings: StencilSettings, result: FindingCollector):
        if settings.extend:
            result.add_warning(
                settings_file,
                f"Extend reference found: {settings.extend} {UNRESOLVED_SUFFIX}",
            )

        for include in settings.include or ():
            result.add_warning(
                settings_file,
                f"Include reference found: {include} {UNRESOLVED_SUFFIX}",
            )
