"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~expressgen.exceptions.ExpressgenError` subclass.
Shell wrappers can inspect the exit code to tell a missing project root
from a corrupted router file without parsing stderr.

Example::

    $ expressgen generate-resource user
    $ echo $?
    3   # EXIT_PRECONDITION_FAILURE -- not inside a generated project
"""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (e.g. a bad resource name)."""

EXIT_PRECONDITION_FAILURE = 3
"""The working location is not a generated project root."""

EXIT_STRUCTURAL_PATCH_ERROR = 4
"""The router file is missing an anchor the patcher needs."""

EXIT_PROJECT_EXISTS = 5
"""The target project directory already exists and is not empty."""

EXIT_IO_FAILURE = 6
"""A filesystem read or write failed."""
