"""Attach hook capabilities to arbitrary host types.

apply_to() installs add_hook/remove_hook/has_hook/run_hooks/_setup_hooks
onto a class or object without requiring a shared base class:

    @apply_to
    class Registry:
        def __init__(self, hooks=None):
            self._setup_hooks(hooks)

    @apply_to(class_level=True)
    class Model:
        parent = None

Every host gets its own hook store; nothing is shared between the types
a capability set is applied to, or between a class and its subclasses.
"""

import functools
import types
from collections.abc import Callable
from typing import Any, TypeVar

from metahooks.hooks.registry import add_hook, has_hook, remove_hook, setup_hooks
from metahooks.hooks.service import run_hooks

T = TypeVar("T")

CAPABILITIES: dict[str, Callable[..., Any]] = {
    "add_hook": add_hook,
    "remove_hook": remove_hook,
    "has_hook": has_hook,
    "run_hooks": run_hooks,
    "_setup_hooks": setup_hooks,
}

# Alternate names for the same capabilities
ALIASES = {
    "hook": "add_hook",
    "has_hooks": "has_hook",
}


def _ensure_own_store(host: Any) -> None:
    """Give the host its own hook store if it only sees an inherited one."""
    try:
        own = vars(host)
    except TypeError:
        # __slots__ host: the attribute, if set, is its own
        own = None
    if getattr(host, "hooks", None) is None or (own is not None and "hooks" not in own):
        host.hooks = {}


def _capability(fn: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(fn)
    def capability(host, *args, **kwargs):
        _ensure_own_store(host)
        return fn(host, *args, **kwargs)

    return capability


def apply_to(target: T | None = None, *, class_level: bool = False) -> T:
    """Install hook capabilities onto `target`.

    Args:
        target: A class (its instances become hosts) or any object (it
            becomes the host). Omit to use as a decorator with options.
        class_level: For classes, make the class itself the host by
            installing the capabilities as classmethods.

    Returns:
        The target, so apply_to can be used as a class decorator
    """
    if target is None:
        return lambda t: apply_to(t, class_level=class_level)  # type: ignore[return-value]

    installed = {name: _capability(fn) for name, fn in CAPABILITIES.items()}
    for alias, name in ALIASES.items():
        installed[alias] = installed[name]

    for name, fn in installed.items():
        if isinstance(target, type):
            setattr(target, name, classmethod(fn) if class_level else fn)
        else:
            setattr(target, name, types.MethodType(fn, target))

    return target
