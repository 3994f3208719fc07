"""Hook registration for MetaHooks.

Adds and removes hook entries in a host's hook store (`host.hooks`),
expanding catalog aliases at registration time. Aliases are written out
as separate entries, so dispatch never has to resolve them.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from metahooks.hooks.catalog import is_host_restricted, proxied_hook_types
from metahooks.hooks.errors import HookRestrictionError, InvalidHookArgument
from metahooks.hooks.types import HookEntry, HookFn

logger = logging.getLogger(__name__)


def get_hooks(host: Any, hook_type: str) -> list[HookEntry]:
    """Return the host's entries for exactly `hook_type` (empty if none)."""
    return (getattr(host, "hooks", None) or {}).get(hook_type) or []


def is_record_scoped(host: Any) -> bool:
    """A host with a parent is record-scoped; otherwise it is global."""
    return getattr(host, "parent", None) is not None


def add_hook(
    host: Any,
    hook_type: str,
    name_or_fn: str | HookFn,
    fn: HookFn | None = None,
) -> Any:
    """Add a hook to a host.

    Args:
        host: Object owning the hook store
        hook_type: Lifecycle point (e.g., "beforeCreate")
        name_or_fn: Hook name, or the hook function when no name is given
        fn: The hook function (only when a name is given)

    Returns:
        The host, so registrations can be chained

    Raises:
        HookRestrictionError: If the hook type is host-restricted and the
            host is record-scoped
        InvalidHookArgument: If the hook is not callable
    """
    if fn is None:
        name, fn = None, name_or_fn
    else:
        # An empty name registers a bare entry
        name = name_or_fn or None

    if not callable(fn):
        raise InvalidHookArgument(f"Hook for {hook_type} must be callable, got {fn!r}")

    if is_host_restricted(hook_type) and is_record_scoped(host):
        raise HookRestrictionError(hook_type)

    logger.debug("adding hook %s", hook_type)

    if getattr(host, "hooks", None) is None:
        host.hooks = {}

    for proxied_type in proxied_hook_types(hook_type):
        host.hooks.setdefault(proxied_type, []).append(HookEntry(fn=fn, name=name))

    return host


def remove_hook(host: Any, hook_type: str, name_or_fn: str | HookFn) -> Any:
    """Remove a hook from a host.

    A callable key removes bare entries holding that callable; a string
    key removes named entries with that name. The other kind of entry is
    never touched.

    Returns:
        The host
    """
    if not has_hook(host, hook_type):
        return host

    logger.debug("removing hook %s", hook_type)

    is_reference = callable(name_or_fn)

    def keep(entry: HookEntry) -> bool:
        if is_reference and not entry.is_named:
            return entry.fn != name_or_fn
        if not is_reference and entry.is_named:
            return entry.name != name_or_fn
        return True

    for proxied_type in proxied_hook_types(hook_type):
        entries = host.hooks.get(proxied_type)
        if entries is None:
            continue
        host.hooks[proxied_type] = [entry for entry in entries if keep(entry)]

    return host


def has_hook(host: Any, hook_type: str) -> bool:
    """Check whether the host has any hooks of exactly this type."""
    return bool(get_hooks(host, hook_type))


def setup_hooks(
    host: Any,
    hooks: Mapping[str, Callable | Iterable[Callable]] | None = None,
) -> None:
    """Reset the host's hook store and bulk-register a hooks definition.

    Each value is a single callable or a sequence of callables,
    registered in order:
        setup_hooks(model, {"beforeSave": [stamp, audit], "afterCreate": notify})
    """
    host.hooks = {}
    for hook_type, hook_fns in (hooks or {}).items():
        if callable(hook_fns):
            hook_fns = [hook_fns]
        for hook_fn in hook_fns:
            add_hook(host, hook_type, hook_fn)
