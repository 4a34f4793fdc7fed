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

"""JSON Schema loader for the validator's JSON output."""

import json
from pathlib import Path
from typing import Dict


# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}

REPORT_SCHEMA = "validation_report"
FAILURE_SCHEMA = "failure_report"


def get_schema_path(name: str) -> Path:
    """Get the path to a bundled JSON Schema file.

    Args:
        name: Schema name without extension (e.g., "validation_report")
    """
    schema_dir = Path(__file__).parent.parent / "schema"
    return schema_dir / f"{name}.schema.json"


def load_schema(name: str) -> dict:
    """Load a bundled JSON Schema.

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    if name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[name]

    schema_path = get_schema_path(name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found for {name}: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    _SCHEMA_CACHE[name] = schema
    return schema


def load_report_schema() -> dict:
    """Schema of the document printed by ``validate --format json``."""
    return load_schema(REPORT_SCHEMA)


def load_failure_schema() -> dict:
    """Schema of the document printed when validation aborts."""
    return load_schema(FAILURE_SCHEMA)
