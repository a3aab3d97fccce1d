"""Process exit codes for the ``pyaoc`` CLI."""

EXIT_SUCCESS = 0
EXIT_ERROR = 1
