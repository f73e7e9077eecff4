# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Default name resolution for type-reference names."""

from __future__ import annotations

from collections.abc import Callable

from proptypegen.model.types import Identifier, QualifiedName

# ###############
# Public Interface
# ###############

# Flattens a type-reference name into its dotted string form.
NameResolver = Callable[[Identifier | QualifiedName], str]


def get_type_name(name: Identifier | QualifiedName) -> str:
    """Flatten a possibly qualified name, e.g. ``React.ReactNode``."""
    if isinstance(name, QualifiedName):
        return f"{get_type_name(name.left)}.{name.right.name}"
    return name.name
