# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input type trees and output validator trees for PropTypeGen."""

from proptypegen.model.expressions import (
    VALIDATOR_NAMESPACE,
    ArrayElement,
    ArrayLiteral,
    Call,
    CallArgument,
    IsRequired,
    MemberRef,
    ObjectLiteral,
    PropertyAssignment,
    ValidatorExpression,
)
from proptypegen.model.types import (
    ArrayType,
    BooleanKeyword,
    EntityName,
    FunctionType,
    Identifier,
    IndexSignature,
    IntersectionType,
    LiteralType,
    LiteralValue,
    MethodSignature,
    NumberKeyword,
    OtherType,
    ParenthesizedType,
    PropertyKey,
    PropertySignature,
    QualifiedName,
    StringKeyword,
    SymbolKeyword,
    TypeLiteral,
    TypeMember,
    TypeNode,
    TypeReference,
    UnionType,
    property_key_name,
)

__all__ = [
    # Type annotations
    "ArrayType",
    "BooleanKeyword",
    "EntityName",
    "FunctionType",
    "Identifier",
    "IndexSignature",
    "IntersectionType",
    "LiteralType",
    "LiteralValue",
    "MethodSignature",
    "NumberKeyword",
    "OtherType",
    "ParenthesizedType",
    "PropertyKey",
    "PropertySignature",
    "QualifiedName",
    "StringKeyword",
    "SymbolKeyword",
    "TypeLiteral",
    "TypeMember",
    "TypeNode",
    "TypeReference",
    "UnionType",
    "property_key_name",
    # Validator expressions
    "VALIDATOR_NAMESPACE",
    "ArrayElement",
    "ArrayLiteral",
    "Call",
    "CallArgument",
    "IsRequired",
    "MemberRef",
    "ObjectLiteral",
    "PropertyAssignment",
    "ValidatorExpression",
]
