"""Exception hierarchy for expressgen.

All exceptions inherit from :class:`ExpressgenError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`expressgen.exit_codes`.
The top-level error handler in :func:`expressgen.app.main` catches
``ExpressgenError`` and exits with the appropriate code. ``OSError`` raised
by file I/O is not wrapped; ``main`` reports it and exits with
:data:`~expressgen.exit_codes.EXIT_IO_FAILURE`.

Subclass hierarchy::

    ExpressgenError (exit 1)
    +-- InvalidUsageError      (exit 2)
    +-- PreconditionError      (exit 3)
    +-- StructuralPatchError   (exit 4)
    +-- ProjectExistsError     (exit 5)
    +-- ConfigError            (exit 1)
"""

from expressgen.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_PRECONDITION_FAILURE,
    EXIT_PROJECT_EXISTS,
    EXIT_STRUCTURAL_PATCH_ERROR,
)


class ExpressgenError(Exception):
    """Base exception for all expressgen errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`expressgen.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(ExpressgenError):
    """Raised for invalid CLI arguments, such as a resource name that is not an identifier."""

    exit_code = EXIT_INVALID_USAGE


class PreconditionError(ExpressgenError):
    """Raised when a command runs outside a generated project root."""

    exit_code = EXIT_PRECONDITION_FAILURE


class StructuralPatchError(ExpressgenError):
    """Raised when the router file lacks an anchor required for patching.

    Carries the name of the missing or misplaced anchor so callers can
    report which part of ``src/routes/index.js`` was edited by hand.
    """

    exit_code = EXIT_STRUCTURAL_PATCH_ERROR

    def __init__(self, message: str, anchor: str | None = None):
        super().__init__(message)
        self.anchor = anchor


class ProjectExistsError(ExpressgenError):
    """Raised when ``new`` would write into a non-empty existing directory."""

    exit_code = EXIT_PROJECT_EXISTS


class ConfigError(ExpressgenError):
    """Raised for configuration problems (invalid JSON, failed validation)."""

    exit_code = EXIT_GENERIC_FAILURE
