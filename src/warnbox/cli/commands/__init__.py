# topmark:header:start
#
#   project      : WarnBox
#   file         : __init__.py
#   file_relpath : src/warnbox/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WarnBox CLI subcommands."""
