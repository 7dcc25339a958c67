# topmark:header:start
#
#   project      : APIStub
#   file         : __main__.py
#   file_relpath : src/apistub/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Module entry point for running APIStub via ``python -m apistub``.

Delegates to :func:`apistub.cli.main.cli`, so ``python -m apistub`` and the
``apistub`` console script behave identically.

Examples:
    Regenerate the content script from the well-known paths::

        python -m apistub
"""

from __future__ import annotations

from apistub.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
