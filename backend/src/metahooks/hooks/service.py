"""Hook execution service for MetaHooks.

Resolves the effective hook list for a host and runs it, either inline
(synchronous hook types) or as a sequential async pipeline where each
hook is awaited before the next starts and the first failure stops the
chain.
"""

import inspect
import logging
from collections.abc import Sequence
from typing import Any

from metahooks.hooks.catalog import is_synchronous
from metahooks.hooks.errors import InvalidHookArgument
from metahooks.hooks.registry import get_hooks
from metahooks.hooks.types import HookEntry, HookFn

logger = logging.getLogger(__name__)


def resolve_hooks(host: Any, hook_type: str) -> list[HookEntry | HookFn]:
    """Local hooks for `hook_type` followed by the parent's hooks of that type."""
    hooks: list[HookEntry | HookFn] = list(get_hooks(host, hook_type))
    parent = getattr(host, "parent", None)
    if parent is not None:
        hooks.extend(get_hooks(parent, hook_type))
    return hooks


def _unwrap(hook: HookEntry | HookFn) -> HookFn:
    if isinstance(hook, HookEntry):
        return hook.fn
    return hook


def run_hooks(host: Any, hooks: Any = None, *hook_args: Any):
    """Run hooks for a host.

    Args:
        host: Object owning the hook store
        hooks: A hook type name, or an explicit list of hooks (or a single
            hook) to run as-is
        *hook_args: Arguments passed to every hook

    Returns:
        None for synchronous hook types, after all hooks ran. Otherwise a
        coroutine that runs the hooks in order and resolves to None, or
        raises the first hook failure. No hook runs until it is awaited
        (or scheduled as a task); a dropped coroutine runs nothing.

    Raises:
        InvalidHookArgument: If no hooks are given
    """
    if hooks is None or hooks == "":
        raise InvalidHookArgument("run_hooks requires at least 1 argument")

    hook_type: str | None = None

    if isinstance(hooks, str):
        hook_type = hooks
        hooks = resolve_hooks(host, hook_type)
    elif not isinstance(hooks, Sequence):
        hooks = [hooks]

    if is_synchronous(hook_type):
        _run_sync(hook_type, hooks, hook_args)
        return None

    return _run_sequential(hook_type, list(hooks), hook_args)


def _run_sync(hook_type: str | None, hooks: Sequence, hook_args: tuple) -> None:
    for hook in hooks:
        logger.debug("running hook(sync) %s", hook_type)
        result = _unwrap(hook)(*hook_args)
        if inspect.iscoroutine(result):
            # Nothing will ever await it; close to avoid a "never awaited" warning
            result.close()
            logger.warning(
                "Synchronous hook %s returned a coroutine; it was not run", hook_type
            )


async def _run_sequential(
    hook_type: str | None, hooks: list, hook_args: tuple
) -> None:
    for index, hook in enumerate(hooks):
        logger.debug("running hook %s", hook_type)
        try:
            result = _unwrap(hook)(*hook_args)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.debug(
                "hook %s failed at position %d of %d", hook_type, index + 1, len(hooks)
            )
            raise
