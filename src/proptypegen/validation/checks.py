# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Omission checks for prop-types conversion.

Conversion silently drops whatever it cannot classify. These checks report
what was dropped so that callers can opt into strict behaviour without
changing the conversion output itself.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from proptypegen.compiler.convert import convert
from proptypegen.compiler.names import NameResolver, get_type_name
from proptypegen.model.types import PropertySignature, property_key_name

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Omission:
    """A property or type group that produced no validator.

    Attributes:
        type_name: The selected type group the omission belongs to.
        property_name: The dropped property, or None when the whole group is missing.
        reason: Short description of why nothing was emitted.
    """

    type_name: str
    property_name: str | None
    reason: str

    @property
    def message(self) -> str:
        """Human-readable description of the omission."""
        if self.property_name is None:
            return f"type '{self.type_name}': {self.reason}"
        return f"type '{self.type_name}', property '{self.property_name}': {self.reason}"


def find_omissions(
    types: Mapping[str, Sequence[PropertySignature]],
    type_names: Iterable[str],
    namespace_alias: str,
    *,
    resolve_name: NameResolver = get_type_name,
) -> list[Omission]:
    """Report every selected group and property that conversion would drop.

    Checks performed, in selection order:

    1. **Undeclared type groups**: a selected name absent from *types*.
    2. **Unannotated properties**: a property without a type annotation.
    3. **Unsupported types**: a property whose annotation converts to nothing.

    Returns:
        A list of :class:`Omission` instances. An empty list means every
        selected property produced a validator.
    """
    omissions: list[Omission] = []
    for type_name in type_names:
        if type_name not in types:
            omissions.append(Omission(type_name=type_name, property_name=None, reason="type not declared"))
            continue
        omissions.extend(_check_properties(type_name, types[type_name], namespace_alias, resolve_name))
    return omissions


# ################
# Implementation
# ################


def _check_properties(
    type_name: str,
    properties: Sequence[PropertySignature],
    namespace_alias: str,
    resolve_name: NameResolver,
) -> list[Omission]:
    omissions: list[Omission] = []
    for prop in properties:
        name = property_key_name(prop.key)
        if prop.type_annotation is None:
            omissions.append(Omission(type_name=type_name, property_name=name, reason="missing type annotation"))
        elif convert(prop.type_annotation, namespace_alias, resolve_name=resolve_name) is None:
            omissions.append(
                Omission(
                    type_name=type_name,
                    property_name=name,
                    reason=f"unsupported type '{prop.type_annotation.kind}'",
                )
            )
    return omissions
