# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler from type annotations to PropTypes validators."""

from proptypegen.compiler.artifact import (
    ARTIFACT_FORMAT_VERSION,
    ArtifactError,
    ConversionRequest,
    deserialize,
    parse_request,
    read_props,
    read_request,
    serialize,
    write_props,
)
from proptypegen.compiler.convert import (
    DEFAULT_NAMESPACE_ALIAS,
    convert,
    convert_list_to_props,
    convert_to_prop_types,
    wrap_is_required,
)
from proptypegen.compiler.names import NameResolver, get_type_name
from proptypegen.compiler.references import REFERENCE_RULES, ReferenceRule, convert_reference, is_framework_type_match

__all__ = [
    "convert",
    "convert_list_to_props",
    "convert_to_prop_types",
    "wrap_is_required",
    "DEFAULT_NAMESPACE_ALIAS",
    "get_type_name",
    "NameResolver",
    "REFERENCE_RULES",
    "ReferenceRule",
    "convert_reference",
    "is_framework_type_match",
    "ConversionRequest",
    "ArtifactError",
    "parse_request",
    "read_request",
    "serialize",
    "deserialize",
    "write_props",
    "read_props",
    "ARTIFACT_FORMAT_VERSION",
]
