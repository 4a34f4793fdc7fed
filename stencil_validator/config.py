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

"""Configuration management for the stencil validator."""

import os
import logging
from dataclasses import dataclass

from . import SETTINGS_FILE_NAME
from .utils.logging_utils import DEFAULT_FORMAT, configure_split_stream_logging, resolve_level


@dataclass
class ValidatorConfig:
    """Process-level configuration for the validator CLI."""
    log_level: str = "WARNING"
    print_level: str = "WARNING"
    settings_file_name: str = SETTINGS_FILE_NAME

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('STENCIL_VALIDATOR_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('STENCIL_VALIDATOR_PRINT_LEVEL', 'WARNING'),
            settings_file_name=os.getenv('STENCIL_VALIDATOR_SETTINGS_FILE', SETTINGS_FILE_NAME),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = resolve_level(self.log_level, logging.WARNING)
        stderr_level = resolve_level(self.print_level, logging.WARNING)

        formatter = logging.Formatter(DEFAULT_FORMAT)
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('stencil_validator')
