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

"""Custom exceptions for the stencil validator."""


class StencilValidatorError(Exception):
    """Base exception for stencil-validator related errors."""
    pass


class PreconditionError(StencilValidatorError):
    """Exception raised when the stencil root or settings document is missing."""
    pass


class SettingsReadError(StencilValidatorError):
    """Exception raised when the settings document cannot be read."""
    pass


class SettingsParseError(StencilValidatorError):
    """Exception raised when the settings document is not valid YAML."""
    pass
