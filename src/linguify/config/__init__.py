# linguify:header:start
#
#   project      : Linguify
#   file         : __init__.py
#   file_relpath : src/linguify/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Linguify configuration layer.

Submodules:
    * [`linguify.config.model`][linguify.config.model]: the immutable `Config`.
    * [`linguify.config.getters`][linguify.config.getters]: typed value getters.
    * [`linguify.config.io`][linguify.config.io]: JSON load/save helpers.
    * [`linguify.config.logging`][linguify.config.logging]: logging setup.

Nothing is re-exported here: [`linguify.core`][linguify.core] imports
``linguify.config.logging``, and importing the model eagerly would create an
import cycle.
"""
