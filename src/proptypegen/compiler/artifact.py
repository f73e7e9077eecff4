# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading conversion requests and writing converted prop types as JSON.

A request document describes the type groups to convert. Converted props are
stored as compact, versioned JSON so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic import Field as _Field
from pydantic import ValidationError

from proptypegen.model.expressions import PropertyAssignment
from proptypegen.model.types import PropertySignature

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"


class ArtifactError(Exception):
    """Raised when a request or props document cannot be read or is malformed."""


class ConversionRequest(BaseModel):
    """Input document for a conversion.

    Attributes:
        types: Mapping from type name to its property signatures, in declaration order.
        type_names: Names selected for conversion. Empty means "not specified".
        namespace_alias: Local name of the React import, if known.
    """

    types: dict[str, list[PropertySignature]] = _Field(default_factory=dict)
    type_names: list[str] = _Field(default_factory=list)
    namespace_alias: str | None = None


def parse_request(data: str, source_label: str = "<string>") -> ConversionRequest:
    """Parse a JSON request document.

    Raises:
        ArtifactError: If the text is not valid JSON or does not match the schema.
    """
    try:
        return ConversionRequest.model_validate_json(data)
    except ValidationError as exc:
        raise ArtifactError(f"Invalid request in {source_label}: {exc}") from exc


def read_request(path: Path) -> ConversionRequest:
    """Read and parse a request document from *path*.

    Raises:
        ArtifactError: If the file cannot be read or its content is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ArtifactError(f"Request file not found: {path}") from None
    except OSError as exc:
        raise ArtifactError(f"Cannot read request file: {exc}") from exc
    return parse_request(text, source_label=str(path))


def serialize(props: list[PropertyAssignment]) -> str:
    """Serialize converted props to a compact JSON string."""
    obj: dict[str, Any] = {
        "v": ARTIFACT_FORMAT_VERSION,
        "props": _PROPS_ADAPTER.dump_python(props, mode="json"),
    }
    return json.dumps(obj, separators=(",", ":"))


def deserialize(data: str) -> list[PropertyAssignment]:
    """Deserialize props produced by :func:`serialize`.

    Raises:
        ArtifactError: If the document is malformed or its format version is not recognised.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ArtifactError(f"Invalid props document: {exc}") from exc
    if not isinstance(obj, dict):
        raise ArtifactError("Invalid props document: expected a JSON object")
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ArtifactError(f"Unsupported artifact format version: {version!r}")
    try:
        return _PROPS_ADAPTER.validate_python(obj.get("props", []))
    except ValidationError as exc:
        raise ArtifactError(f"Invalid props document: {exc}") from exc


def write_props(props: list[PropertyAssignment], path: Path) -> None:
    """Write converted props to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(props), encoding="utf-8")


def read_props(path: Path) -> list[PropertyAssignment]:
    """Read and deserialize converted props from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################

_PROPS_ADAPTER: TypeAdapter[list[PropertyAssignment]] = TypeAdapter(list[PropertyAssignment])
