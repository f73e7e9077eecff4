# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validator expression trees produced by the prop-types compiler."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from proptypegen.model.types import LiteralValue, PropertyKey

# ###############
# Public Interface
# ###############

# Object every MemberRef is read from in generated code (``PropTypes.string``).
VALIDATOR_NAMESPACE = "PropTypes"


class _Expression(BaseModel):
    model_config = ConfigDict(frozen=True)


class MemberRef(_Expression):
    """A named validator, e.g. ``PropTypes.string``."""

    kind: Literal["member"] = "member"
    name: str


class Call(_Expression):
    """A validator built by a factory, e.g. ``PropTypes.arrayOf(PropTypes.string)``."""

    kind: Literal["call"] = "call"
    factory: str
    args: list[CallArgument] = _Field(default_factory=list)


class IsRequired(_Expression):
    """``<validator>.isRequired``."""

    kind: Literal["required"] = "required"
    validator: ValidatorExpression


class ArrayLiteral(_Expression):
    """An array argument, e.g. the list passed to ``oneOf`` or ``oneOfType``."""

    kind: Literal["array_literal"] = "array_literal"
    elements: list[ArrayElement] = _Field(default_factory=list)


class ObjectLiteral(_Expression):
    """An object argument, e.g. the property map passed to ``shape``."""

    kind: Literal["object_literal"] = "object_literal"
    properties: list[PropertyAssignment] = _Field(default_factory=list)


class PropertyAssignment(_Expression):
    """One ``key: validator`` entry of a generated shape."""

    key: PropertyKey
    value: ValidatorExpression


ValidatorExpression = Annotated[MemberRef | Call | IsRequired, _Field(discriminator="kind")]

CallArgument = Annotated[
    MemberRef | Call | IsRequired | ArrayLiteral | ObjectLiteral,
    _Field(discriminator="kind"),
]

# Array elements are validators, or literal values passed through to ``oneOf``.
ArrayElement = Annotated[MemberRef | Call | IsRequired | LiteralValue, _Field(discriminator="kind")]


# Resolve forward references for recursive models.
Call.model_rebuild()
IsRequired.model_rebuild()
ArrayLiteral.model_rebuild()
ObjectLiteral.model_rebuild()
PropertyAssignment.model_rebuild()
