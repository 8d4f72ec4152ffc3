# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __init__.py
#   file_relpath : src/layoutfmt/render/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node renderers, one module per construct category.

| Module | Category |
|---|---|
| `items` | source files, functions, structs, enums, impls, consts |
| `imports` | ``use`` items (ordering and group layout) |
| `attributes` | attributes and attribute/item fusion |
| `blocks` | blocks, statements, ``if``/``for``/``while`` |
| `matches` | ``match`` and match arms |
| `closures` | closures |
| `collections` | struct literals, arrays, tuples, macro calls |
| `exprs` | paths, literals, operators, calls, method chains |

Shared machinery lives in `base` (render contract) and `lists` (delimited lists).
"""
