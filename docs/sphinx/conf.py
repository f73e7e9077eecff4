# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for PropTypeGen documentation."""

project = "PropTypeGen"
author = "PropTypeGen Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
