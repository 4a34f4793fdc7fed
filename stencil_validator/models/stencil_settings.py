from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from .settings_schema import mapping_key


def _frozen_list(value: Any) -> Optional[Tuple[str, ...]]:
    return tuple(value) if value is not None else None


def _frozen_mapping(value: Any) -> Optional[Mapping[str, Any]]:
    if value is None:
        return None
    return MappingProxyType({mapping_key(key): item for key, item in value.items()})


@dataclass(frozen=True)
class StencilSettings:
    """Typed view of a settings document that already passed schema validation."""

    id: str
    name: str
    version: str
    type: str
    description: Optional[str] = None
    files: Optional[Tuple[str, ...]] = None
    include: Optional[Tuple[str, ...]] = None
    extend: Optional[str] = None
    variables: Optional[Mapping[str, Any]] = None
    metadata: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> StencilSettings:
        """Build the record from a mapping accepted by ``validate_settings``."""
        return cls(
            id=data["id"],
            name=data["name"],
            version=data["version"],
            type=data["type"],
            description=data.get("description"),
            files=_frozen_list(data.get("files")),
            include=_frozen_list(data.get("include")),
            extend=data.get("extend"),
            variables=_frozen_mapping(data.get("variables")),
            metadata=_frozen_mapping(data.get("metadata")),
        )
