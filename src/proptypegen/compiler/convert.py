# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of type annotations into PropTypes validator expressions.

Conversion is best effort. A type that cannot be classified yields ``None``
and is dropped at the narrowest scope: a single property, a single union
member, or a single array element type. Nothing in this module raises for
unrecognized input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from proptypegen.compiler.builders import create_call, create_member
from proptypegen.compiler.names import NameResolver, get_type_name
from proptypegen.compiler.references import convert_reference
from proptypegen.model.expressions import (
    ArrayElement,
    ArrayLiteral,
    IsRequired,
    ObjectLiteral,
    PropertyAssignment,
    ValidatorExpression,
)
from proptypegen.model.types import (
    ArrayType,
    BooleanKeyword,
    FunctionType,
    IndexSignature,
    IntersectionType,
    LiteralType,
    NumberKeyword,
    ParenthesizedType,
    PropertySignature,
    StringKeyword,
    SymbolKeyword,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
    property_key_name,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DEFAULT_NAMESPACE_ALIAS = "React"


def convert(
    type_node: TypeNode,
    namespace_alias: str,
    *,
    resolve_name: NameResolver = get_type_name,
) -> ValidatorExpression | None:
    """Convert a single type annotation into a validator expression.

    Args:
        type_node: The annotation to classify.
        namespace_alias: Local name of the React import, so that
            ``<alias>.ReactNode`` is recognized like ``React.ReactNode``.
        resolve_name: Flattens a type-reference name into a dotted string.

    Returns:
        The validator expression, or None when the type is not supported.
    """
    # Only one level of parentheses is removed here; inner nodes are
    # unwrapped again when they are converted recursively.
    if isinstance(type_node, ParenthesizedType):
        type_node = type_node.type_annotation

    if isinstance(type_node, StringKeyword):
        return create_member("string")
    if isinstance(type_node, NumberKeyword):
        return create_member("number")
    if isinstance(type_node, BooleanKeyword):
        return create_member("bool")
    if isinstance(type_node, SymbolKeyword):
        return create_member("symbol")
    if isinstance(type_node, FunctionType):
        return create_member("func")

    if isinstance(type_node, TypeReference):
        return convert_reference(resolve_name(type_node.type_name), namespace_alias)

    if isinstance(type_node, ArrayType):
        args = _convert_all([type_node.element_type], namespace_alias, resolve_name)
        if args:
            return create_call("arrayOf", args)
        return create_member("array")

    if isinstance(type_node, TypeLiteral):
        return _convert_type_literal(type_node, namespace_alias, resolve_name)

    if isinstance(type_node, UnionType | IntersectionType):
        return _convert_union(type_node, namespace_alias, resolve_name)

    return None


def wrap_is_required(validator: ValidatorExpression, optional: bool | None = None) -> ValidatorExpression:
    """Return *validator* unchanged if *optional*, otherwise marked ``.isRequired``."""
    if optional:
        return validator
    return IsRequired(validator=validator)


def convert_list_to_props(
    properties: Iterable[PropertySignature],
    namespace_alias: str,
    *,
    resolve_name: NameResolver = get_type_name,
) -> list[PropertyAssignment]:
    """Convert property signatures into shape entries, skipping unsupported ones.

    Order of *properties* is preserved. A property without a type annotation,
    or whose annotation cannot be converted, produces no entry.
    """
    prop_types: list[PropertyAssignment] = []
    for prop in properties:
        if prop.type_annotation is None:
            logger.debug("Skipping property '%s': no type annotation", property_key_name(prop.key))
            continue

        validator = convert(prop.type_annotation, namespace_alias, resolve_name=resolve_name)
        if validator is None:
            logger.debug(
                "Skipping property '%s': unsupported type '%s'",
                property_key_name(prop.key),
                prop.type_annotation.kind,
            )
            continue

        prop_types.append(PropertyAssignment(key=prop.key, value=wrap_is_required(validator, prop.optional)))
    return prop_types


def convert_to_prop_types(
    types: Mapping[str, Sequence[PropertySignature]],
    type_names: Iterable[str],
    namespace_alias: str = DEFAULT_NAMESPACE_ALIAS,
    *,
    resolve_name: NameResolver = get_type_name,
) -> list[PropertyAssignment]:
    """Convert the selected type groups into one flat list of shape entries.

    Args:
        types: Mapping from type name (interface or alias) to its properties.
        type_names: Names to convert, in output order. Names missing from
            *types* are skipped.
        namespace_alias: Local name of the React import.
        resolve_name: Flattens a type-reference name into a dotted string.

    Returns:
        The concatenated :class:`PropertyAssignment` entries of every selected group.
    """
    properties: list[PropertyAssignment] = []
    for type_name in type_names:
        if type_name not in types:
            logger.debug("Skipping type '%s': not declared", type_name)
            continue
        properties.extend(convert_list_to_props(types[type_name], namespace_alias, resolve_name=resolve_name))
    return properties


# ################
# Implementation
# ################


def _convert_all(
    types: Iterable[TypeNode],
    namespace_alias: str,
    resolve_name: NameResolver,
) -> list[ValidatorExpression]:
    """Convert each type, dropping the ones that cannot be converted."""
    validators: list[ValidatorExpression] = []
    for type_node in types:
        validator = convert(type_node, namespace_alias, resolve_name=resolve_name)
        if validator is not None:
            validators.append(validator)
    return validators


def _convert_type_literal(
    type_node: TypeLiteral,
    namespace_alias: str,
    resolve_name: NameResolver,
) -> ValidatorExpression | None:
    members = type_node.members

    if not members:
        return create_member("object")

    if len(members) == 1 and isinstance(members[0], IndexSignature):
        index = members[0]
        if index.type_annotation is not None:
            value = convert(index.type_annotation, namespace_alias, resolve_name=resolve_name)
            if value is not None:
                return create_call("objectOf", [value])
        # No fallback to a plain object validator for an unconvertible index signature.
        return None

    signatures = [m for m in members if isinstance(m, PropertySignature)]
    shape = ObjectLiteral(properties=convert_list_to_props(signatures, namespace_alias, resolve_name=resolve_name))
    return create_call("shape", [shape])


def _convert_union(
    type_node: UnionType | IntersectionType,
    namespace_alias: str,
    resolve_name: NameResolver,
) -> ValidatorExpression | None:
    args: list[ArrayElement]
    if all(isinstance(t, LiteralType) for t in type_node.types):
        args = [t.literal for t in type_node.types if isinstance(t, LiteralType)]
        factory = "oneOf"
    else:
        args = list(_convert_all(type_node.types, namespace_alias, resolve_name))
        factory = "oneOfType"

    if not args:
        return None
    return create_call(factory, [ArrayLiteral(elements=args)])
