# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reports of properties dropped during prop-types conversion."""

from proptypegen.validation.checks import Omission, find_omissions

__all__ = [
    "Omission",
    "find_omissions",
]
