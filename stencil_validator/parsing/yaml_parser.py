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

"""YAML loader for stencil settings documents."""

import re
import yaml
import logging
from pathlib import Path
from typing import Any, Tuple, Union

from ..exceptions import PreconditionError, SettingsParseError, SettingsReadError
from .source_location import SourceMap, json_pointer_escape

logger = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class StencilYamlLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 core scalar rules.

    Only true/false are booleans and dates stay strings, so values such as
    `name: no` or `version: 2024-01-01` load as text.
    """


StencilYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
StencilYamlLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class YamlParser:
    """Read-only YAML parser that keeps track of key locations."""

    @staticmethod
    def build_source_map(content: str) -> SourceMap:
        """Build a mapping from YAML JSON-pointer-like paths to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so we can track locations without
        changing the parsed data shapes returned by the loader.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=StencilYamlLoader)
        except yaml.YAMLError:
            # Parsing errors are reported by load_from_string_with_source.
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    child_path = f"{path}/{json_pointer_escape(str(key))}"
                    # Mapping entries point at the key, not the value
                    _record(child_path, key_node)
                    _walk(value_node, child_path)
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    child_path = f"{path}/{idx}"
                    _record(child_path, item_node)
                    _walk(item_node, child_path)

        _record("", root)
        _walk(root, "")
        return source_map

    def load_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a YAML settings document and return (data, source_map).

        Unlike most configuration loaders an empty document is returned as
        ``None`` rather than an empty mapping, so the schema check can report it.

        Raises:
            PreconditionError: If the file does not exist or is not a file
            SettingsReadError: If the file cannot be read or decoded
            SettingsParseError: If the content is not valid YAML
        """
        path = Path(file_path)

        if not path.exists():
            raise PreconditionError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise PreconditionError(f"Path is not a file: {path}")

        logger.debug(f"Loading settings file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SettingsReadError(str(exc)) from exc

        return self.load_from_string_with_source(content)

    def load_from_string_with_source(self, content: str) -> Tuple[Any, SourceMap]:
        """Parse YAML content and return (data, source_map)."""
        try:
            data = yaml.load(content, Loader=StencilYamlLoader)
        except yaml.YAMLError as exc:
            raise SettingsParseError(str(exc)) from exc

        return data, self.build_source_map(content)


# Global parser instance
yaml_parser = YamlParser()
