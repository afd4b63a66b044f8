# topmark:header:start
#
#   project      : WarnBox
#   file         : exit_codes.py
#   file_relpath : src/warnbox/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the WarnBox CLI.

WarnBox follows the BSD `sysexits` convention for usage and configuration errors
so other tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the WarnBox CLI.

    Attributes:
        SUCCESS: The script ran and no failure condition was met.
        FAILURE: The script raised, exited non-zero, or warnings were found with
            ``--fail-on-warnings``.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Unreadable or malformed settings. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
