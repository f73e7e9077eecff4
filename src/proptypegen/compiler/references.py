# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rules mapping framework type references to validators.

A reference name is matched against :data:`REFERENCE_RULES` top to bottom and
the first matching rule builds the validator. Names are compared as flattened
dotted strings, so ``React.ReactNode``, ``ReactNode`` and ``<alias>.ReactNode``
(where *alias* is the name React was imported as) are all recognized.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from proptypegen.compiler.builders import create_call, create_member
from proptypegen.model.expressions import ArrayLiteral, ValidatorExpression

# ###############
# Public Interface
# ###############


def is_framework_type_match(name: str, type_name: str, namespace_alias: str) -> bool:
    """Return True if *name* refers to *type_name* bare, under ``React`` or under *namespace_alias*."""
    return name == type_name or name == f"React.{type_name}" or name == f"{namespace_alias}.{type_name}"


@dataclass(frozen=True)
class ReferenceRule:
    """One entry of the reference rule table.

    Attributes:
        description: Short label used in diagnostics and test ids.
        matches: Predicate over the flattened name and the namespace alias.
        build: Factory for the validator emitted on a match.
    """

    description: str
    matches: Callable[[str, str], bool]
    build: Callable[[], ValidatorExpression]


NODE_TYPES = ("ReactText", "ReactNode", "ReactType", "ComponentType", "ComponentClass", "StatelessComponent")
ELEMENT_TYPES = ("ReactElement", "SFCElement")

REFERENCE_RULES: tuple[ReferenceRule, ...] = (
    ReferenceRule(
        description="node",
        matches=lambda name, alias: any(is_framework_type_match(name, t, alias) for t in NODE_TYPES),
        build=lambda: create_member("node"),
    ),
    ReferenceRule(
        description="element",
        matches=lambda name, alias: (
            is_framework_type_match(name, "Element", "JSX")
            or any(is_framework_type_match(name, t, alias) for t in ELEMENT_TYPES)
        ),
        build=lambda: create_member("element"),
    ),
    ReferenceRule(
        description="ref",
        matches=lambda name, alias: is_framework_type_match(name, "Ref", alias),
        build=lambda: create_call(
            "oneOfType",
            [ArrayLiteral(elements=[create_member("string"), create_member("func"), create_member("object")])],
        ),
    ),
    ReferenceRule(
        description="handler",
        matches=lambda name, alias: name.endswith("Handler"),
        build=lambda: create_member("func"),
    ),
    ReferenceRule(
        description="event",
        matches=lambda name, alias: name.endswith("Event"),
        build=lambda: create_member("object"),
    ),
)


def convert_reference(name: str, namespace_alias: str) -> ValidatorExpression | None:
    """Return the validator for a flattened reference name, or None if no rule matches."""
    for rule in REFERENCE_RULES:
        if rule.matches(name, namespace_alias):
            return rule.build()
    return None
