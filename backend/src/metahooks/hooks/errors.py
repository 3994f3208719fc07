"""Exceptions raised by the hook registry and dispatcher."""


class HookError(Exception):
    """Base class for all hook system errors."""


class InvalidHookArgument(HookError, ValueError):
    """A hook operation was called without a usable argument.

    Raised by run_hooks() when no hook type or hook list is given, and by
    add_hook() when the supplied hook is not callable.
    """


class HookRestrictionError(HookError):
    """A host-restricted hook type was registered on a record-scoped host."""

    def __init__(self, hook_type: str):
        self.hook_type = hook_type
        super().__init__(
            f"{hook_type} is only applicable on a global host (one without a parent)"
        )


class HookFailure(HookError):
    """Raised by a hook to signal that the lifecycle operation must stop.

    The dispatcher re-raises whatever a hook raises, so hooks are free to
    raise any exception; this class exists for hooks that want to fail
    with a plain message.
    """

    def __init__(self, message: str, hook_type: str | None = None):
        self.hook_type = hook_type
        super().__init__(message)


class HookConfigError(HookError):
    """A hook configuration file is malformed or references a missing callable."""
