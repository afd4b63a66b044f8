# topmark:header:start
#
#   project      : WarnBox
#   file         : __main__.py
#   file_relpath : src/warnbox/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point for ``python -m warnbox``.

Examples:
    python -m warnbox run app.py
"""

from __future__ import annotations

from warnbox.cli.main import cli

if __name__ == "__main__":
    cli()
