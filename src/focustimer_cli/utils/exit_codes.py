"""
Exit codes for the focus timer CLI.

Semantic exit codes so scripts can tell what went wrong.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid command-line option value
ERROR_INVALID_ARGS = 2

# Invalid configuration (unknown key, bad technique, broken catalog)
ERROR_CONFIG = 3

# Command not valid in the current timer state
ERROR_INVALID_STATE = 4


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for log messages."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_CONFIG: "ERROR_CONFIG",
        ERROR_INVALID_STATE: "ERROR_INVALID_STATE",
    }
    return code_names.get(code, f"UNKNOWN({code})")
