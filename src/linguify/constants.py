# linguify:header:start
#
#   project      : Linguify
#   file         : constants.py
#   file_relpath : src/linguify/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Linguify Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LINGUIFY_VERSION: str = get_version("linguify")

CONFIG_FILE_NAME: str = "linguify.config.json"
