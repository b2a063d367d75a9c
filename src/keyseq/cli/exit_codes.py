# topmark:header:start
#
#   project      : KeySeq
#   file         : exit_codes.py
#   file_relpath : src/keyseq/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the KeySeq CLI.

KeySeq aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the KeySeq CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (unknown operation, bad
            parameters). Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: The input is not valid JSON, or the operation rejected it.
            Mirrors BSD ``EX_DATAERR (65)``.
        INPUT_NOT_FOUND: Input file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        INTERNAL_ERROR: Internal invariant violation. Mirrors BSD ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    INPUT_NOT_FOUND = 66  # EX_NOINPUT
    INTERNAL_ERROR = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG
