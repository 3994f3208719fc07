"""Hook system types for MetaHooks.

Defines the core data structures shared by the catalog, registry and
dispatcher:
- HookDescriptor: static metadata for one lifecycle point
- HookEntry: a registered callback, optionally named
- HookHost: the structural contract a host object satisfies
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Protocol

# Hook callback signature: called with the dispatch args, may return an awaitable
HookFn = Callable[..., Awaitable[Any] | Any]


@dataclass(frozen=True)
class HookDescriptor:
    """Metadata describing a lifecycle hook type.

    Attributes:
        name: Hook type identifier (e.g., "beforeCreate")
        arity: Number of arguments passed to each callback
        synchronous: Hooks run inline and their results are not awaited
        host_restricted: Only registrable on a global (parent-less) host
        alias_of: Other hook types also registered when this one is
    """

    name: str
    arity: int
    synchronous: bool = False
    host_restricted: bool = False
    alias_of: tuple[str, ...] = ()


@dataclass
class HookEntry:
    """A registered hook callback.

    A bare entry has name=None and can only be removed by passing the
    callback itself; a named entry can only be removed by its name.
    """

    fn: HookFn
    name: str | None = None

    @property
    def is_named(self) -> bool:
        return self.name is not None


class HookHost(Protocol):
    """Structural contract for objects that own hooks.

    Any object with a mutable `hooks` mapping qualifies. A host with a
    non-None `parent` is record-scoped; its parent's hooks of the same
    type run after its own.
    """

    hooks: dict[str, list[HookEntry]]
    parent: Any
