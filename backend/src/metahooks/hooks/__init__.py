"""MetaHooks lifecycle hook system.

Lets external code attach named or anonymous callbacks to lifecycle
points of a host (a model type, or the registry that defines it) and
runs them in registration order when the event occurs:
- Synchronous hook types (beforeDefine, afterInit, ...) run inline
- All other hook types run as a sequential async pipeline that stops
  at the first failure
- A record-scoped host also runs its parent's hooks of the same type

Usage:
    from metahooks.hooks import apply_to

    @apply_to
    class Registry:
        def __init__(self, hooks=None):
            self._setup_hooks(hooks)

    registry = Registry()
    registry.add_hook("beforeSave", "audit", audit_fn)
    await registry.run_hooks("beforeCreate", instance, options)
"""

from metahooks.hooks.catalog import (
    HOOK_TYPES,
    get_descriptor,
    is_host_restricted,
    is_synchronous,
    list_hook_types,
    proxied_hook_types,
)
from metahooks.hooks.errors import (
    HookConfigError,
    HookError,
    HookFailure,
    HookRestrictionError,
    InvalidHookArgument,
)
from metahooks.hooks.mixin import apply_to
from metahooks.hooks.registry import add_hook, has_hook, remove_hook, setup_hooks
from metahooks.hooks.service import resolve_hooks, run_hooks
from metahooks.hooks.types import HookDescriptor, HookEntry, HookFn, HookHost

__all__ = [
    "HOOK_TYPES",
    "HookConfigError",
    "HookDescriptor",
    "HookEntry",
    "HookError",
    "HookFailure",
    "HookFn",
    "HookHost",
    "HookRestrictionError",
    "InvalidHookArgument",
    "add_hook",
    "apply_to",
    "get_descriptor",
    "has_hook",
    "is_host_restricted",
    "is_synchronous",
    "list_hook_types",
    "proxied_hook_types",
    "remove_hook",
    "resolve_hooks",
    "run_hooks",
    "setup_hooks",
]
