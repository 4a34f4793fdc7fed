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

"""Locates and parses the stencil settings document."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .. import SETTINGS_FILE_NAME
from ..exceptions import PreconditionError, SettingsParseError, SettingsReadError
from ..parsing.source_location import SourceMap
from ..parsing.yaml_parser import YamlParser, yaml_parser
from .report import FindingCollector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedSettings:
    """Raw settings document, not yet validated."""
    settings_file: Path
    data: Any
    source_map: SourceMap


class SettingsLoader:
    """Checks the stencil root and loads its settings document.

    Every failure here is fatal for the run: the loader records exactly one
    error finding and returns None.
    """

    def __init__(self, settings_file_name: str = SETTINGS_FILE_NAME, parser: Optional[YamlParser] = None):
        self.settings_file_name = settings_file_name
        self.parser = parser or yaml_parser

    def load(self, root: Path, result: FindingCollector) -> Optional[LoadedSettings]:
        """Load the settings document under *root*.

        Args:
            root: Absolute path of the stencil directory
            result: Collector to add the precondition/parse error to

        Returns:
            The parsed document, or None if the pipeline must stop
        """
        try:
            root_exists = root.exists()
        except OSError as e:
            result.add_error(root, "Path does not exist", details=str(e))
            return None

        if not root_exists:
            result.add_error(root, "Path does not exist")
            return None

        if not root.is_dir():
            result.add_error(root, "Path must be a directory")
            return None

        settings_file = root / self.settings_file_name
        if not settings_file.is_file():
            result.add_error(settings_file, f"Required file {self.settings_file_name} not found")
            return None

        try:
            data, source_map = self.parser.load_with_source(settings_file)
        except SettingsParseError as e:
            logger.debug(f"YAML parse failure in {settings_file}: {e}")
            result.add_error(settings_file, "Invalid YAML format", details=str(e))
            return None
        except SettingsReadError as e:
            logger.debug(f"Cannot read {settings_file}: {e}")
            result.add_error(settings_file, "Failed to read stencil settings file", details=str(e))
            return None
        except PreconditionError as e:
            # Removed or replaced between the existence check and the read
            logger.debug(f"Settings file vanished: {e}")
            result.add_error(settings_file, f"Required file {self.settings_file_name} not found", details=str(e))
            return None

        return LoadedSettings(settings_file=settings_file, data=data, source_map=source_map)
