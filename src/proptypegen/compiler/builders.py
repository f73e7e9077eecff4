# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Constructors for validator expressions."""

from __future__ import annotations

from collections.abc import Sequence

from proptypegen.model.expressions import Call, CallArgument, MemberRef

# ###############
# Public Interface
# ###############


def create_member(name: str) -> MemberRef:
    """Return a reference to the named validator, e.g. ``PropTypes.string``."""
    return MemberRef(name=name)


def create_call(factory: str, args: Sequence[CallArgument]) -> Call:
    """Return a call to the named validator factory, e.g. ``PropTypes.arrayOf(...)``."""
    return Call(factory=factory, args=list(args))
