# topmark:header:start
#
#   project      : APIStub
#   file         : __init__.py
#   file_relpath : src/apistub/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""APIStub package.

APIStub compiles a declarative manifest of namespaced API methods into a flat
content script: nested namespace objects plus thin proxies that forward every
call, with routing metadata, to a single bridge entry point.
"""

from __future__ import annotations
