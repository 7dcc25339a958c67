# topmark:header:start
#
#   project      : APIStub
#   file         : __init__.py
#   file_relpath : src/apistub/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""APIStub CLI subcommands."""
