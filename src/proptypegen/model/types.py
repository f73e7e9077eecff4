# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type annotation trees consumed by the prop-types compiler."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class Identifier(_Node):
    """A bare name, used for type-reference names and property keys."""

    kind: Literal["identifier"] = "identifier"
    name: str


class QualifiedName(_Node):
    """A dotted type-reference name such as ``React.ReactNode``."""

    kind: Literal["qualified"] = "qualified"
    left: EntityName
    right: Identifier


class LiteralValue(_Node):
    """A literal value carried verbatim from the annotation (``'a'``, ``1``, ``true``)."""

    kind: Literal["value"] = "value"
    value: bool | int | float | str


EntityName = Annotated[Identifier | QualifiedName, _Field(discriminator="kind")]

# A property key is either an identifier (``foo``) or a quoted literal (``'aria-label'``).
PropertyKey = Annotated[Identifier | LiteralValue, _Field(discriminator="kind")]


class StringKeyword(_Node):
    kind: Literal["string"] = "string"


class NumberKeyword(_Node):
    kind: Literal["number"] = "number"


class BooleanKeyword(_Node):
    kind: Literal["boolean"] = "boolean"


class SymbolKeyword(_Node):
    kind: Literal["symbol"] = "symbol"


class FunctionType(_Node):
    """A function signature type, e.g. ``(event: Event) => void``."""

    kind: Literal["function"] = "function"


class TypeReference(_Node):
    """A reference to a named type, optionally with type arguments."""

    kind: Literal["reference"] = "reference"
    type_name: EntityName
    type_arguments: list[TypeNode] = _Field(default_factory=list)


class ArrayType(_Node):
    """``T[]``."""

    kind: Literal["array"] = "array"
    element_type: TypeNode


class LiteralType(_Node):
    """A literal type such as ``'primary'`` or ``42``."""

    kind: Literal["literal"] = "literal"
    literal: LiteralValue


class PropertySignature(_Node):
    """A named member of an interface or object type literal."""

    kind: Literal["property"] = "property"
    key: PropertyKey
    type_annotation: TypeNode | None = None
    optional: bool | None = None


class IndexSignature(_Node):
    """``[key: string]: T``."""

    kind: Literal["index"] = "index"
    type_annotation: TypeNode | None = None


class MethodSignature(_Node):
    """A method member; stands in for every member kind that is not converted."""

    kind: Literal["method"] = "method"
    key: PropertyKey


TypeMember = Annotated[PropertySignature | IndexSignature | MethodSignature, _Field(discriminator="kind")]


class TypeLiteral(_Node):
    """An inline object type ``{ ... }``."""

    kind: Literal["type_literal"] = "type_literal"
    members: list[TypeMember] = _Field(default_factory=list)


class UnionType(_Node):
    kind: Literal["union"] = "union"
    types: list[TypeNode] = _Field(default_factory=list)


class IntersectionType(_Node):
    kind: Literal["intersection"] = "intersection"
    types: list[TypeNode] = _Field(default_factory=list)


class ParenthesizedType(_Node):
    """``(T)``."""

    kind: Literal["parenthesized"] = "parenthesized"
    type_annotation: TypeNode


class OtherType(_Node):
    """Any annotation kind the compiler does not classify (``any``, tuples, mapped types, ...)."""

    kind: Literal["other"] = "other"
    description: str = ""


# A type annotation node. The `kind` discriminator keeps JSON input unambiguous.
TypeNode = Annotated[
    StringKeyword
    | NumberKeyword
    | BooleanKeyword
    | SymbolKeyword
    | FunctionType
    | TypeReference
    | ArrayType
    | LiteralType
    | TypeLiteral
    | UnionType
    | IntersectionType
    | ParenthesizedType
    | OtherType,
    _Field(discriminator="kind"),
]


def property_key_name(key: Identifier | LiteralValue) -> str:
    """Return the source-level name of a property key."""
    if isinstance(key, Identifier):
        return key.name
    return str(key.value)


# Resolve forward references for recursive models.
QualifiedName.model_rebuild()
TypeReference.model_rebuild()
ArrayType.model_rebuild()
PropertySignature.model_rebuild()
IndexSignature.model_rebuild()
TypeLiteral.model_rebuild()
UnionType.model_rebuild()
IntersectionType.model_rebuild()
ParenthesizedType.model_rebuild()
