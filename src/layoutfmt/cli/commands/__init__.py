# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __init__.py
#   file_relpath : src/layoutfmt/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click commands of the ``layoutfmt`` group (one module per command)."""
