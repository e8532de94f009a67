# linguify:header:start
#
#   project      : Linguify
#   file         : __init__.py
#   file_relpath : src/linguify/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Click-based command line interface for Linguify."""
