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

"""Existence checks for files referenced by the settings document."""

import logging
import os
from pathlib import Path

from .. import DEFAULT_FILES_DIR
from ..models.stencil_settings import StencilSettings
from .report import FindingCollector

logger = logging.getLogger(__name__)


def resolve_reference(root: Path, entry: str) -> Path:
    """Resolve a declared file path under *root*.

    Declared paths are always relative to the stencil root, so a leading
    separator does not escape it.
    """
    return Path(os.path.normpath(os.path.join(root, entry.lstrip("/\\"))))


class ReferenceChecker:
    """Checks that declared files, or the default files directory, exist."""

    def __init__(self, files_dir: str = DEFAULT_FILES_DIR):
        self.files_dir = files_dir

    def check(self, root: Path, settings: StencilSettings, result: FindingCollector):
        """Check file references of *settings* against the file system.

        Args:
            root: Absolute path of the stencil directory
            settings: Typed settings that passed schema validation
            result: Collector to add findings to
        """
        if settings.files is None:
            self._check_default_dir(root, result)
            return

        # Findings follow declaration order
        for entry in settings.files:
            file_path = resolve_reference(root, entry)
            try:
                exists = file_path.exists()
            except OSError as e:
                # e.g. ENAMETOOLONG, raised by Path.exists before Python 3.12
                logger.debug(f"Cannot stat referenced file {file_path}: {e}")
                result.add_error(file_path, f"Referenced file does not exist: {entry}", details=str(e))
                continue

            if exists:
                result.add_info(file_path, f"Referenced file exists: {entry}")
            else:
                logger.debug(f"Missing referenced file: {file_path}")
                result.add_error(file_path, f"Referenced file does not exist: {entry}")

    def _check_default_dir(self, root: Path, result: FindingCollector):
        files_dir = root / self.files_dir
        if files_dir.is_dir():
            result.add_info(files_dir, f"Default {self.files_dir}/ directory found")
        else:
            result.add_warning(
                files_dir,
                f"No {self.files_dir}/ directory found and no explicit files list provided",
            )
