from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Union

SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class SourceLocation:
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def to_json_pointer(tokens: Sequence[Union[str, int]]) -> str:
    """Build a JSON-pointer-like path ("/files/0") from key/index tokens."""
    return "".join(f"/{json_pointer_escape(str(token))}" for token in tokens)


def lookup_source(source_map: Optional[SourceMap], yaml_path: Optional[str]) -> SourceLocation:
    if source_map is None or yaml_path is None:
        return SourceLocation(yaml_path=yaml_path)

    entry = source_map.get(yaml_path)
    if not entry:
        return SourceLocation(yaml_path=yaml_path)

    return SourceLocation(
        yaml_path=yaml_path,
        line=entry.get("line"),
        column=entry.get("column"),
    )


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc or loc.line is None:
        return ""
    if loc.column is not None:
        return f"{loc.line}:{loc.column}"
    return str(loc.line)
