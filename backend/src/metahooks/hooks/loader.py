"""Load hook definitions from YAML files.

A hook file maps hook types to import targets:

    hooks:
      beforeSave:
        - myapp.hooks:audit
        - name: stamp
          fn: myapp.hooks:stamp_updated_at
      afterDefine: myapp.hooks:announce

Targets use "package.module:attribute" notation; the attribute part may
be dotted (e.g. "myapp.hooks:Auditor.record").
"""

import importlib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from metahooks.hooks.errors import HookConfigError
from metahooks.hooks.registry import add_hook


@dataclass
class HookSpec:
    """One hook declared in a hook file."""

    hook_type: str
    target: str
    name: str | None = None

    @classmethod
    def from_value(cls, hook_type: str, value: Any) -> "HookSpec":
        """Create a HookSpec from a YAML list item (string or mapping)."""
        if isinstance(value, str):
            return cls(hook_type=hook_type, target=value)
        if isinstance(value, dict) and isinstance(value.get("fn"), str):
            name = value.get("name")
            return cls(
                hook_type=hook_type,
                target=value["fn"],
                name=str(name) if name is not None else None,
            )
        raise HookConfigError(
            f"Invalid hook entry for {hook_type}: expected 'module:attr' "
            f"or a mapping with 'fn', got {value!r}"
        )


def load_hook_specs(path: Path) -> list[HookSpec]:
    """Parse a hook file into HookSpecs, in file order.

    Raises:
        HookConfigError: If the file is not valid YAML or has the wrong shape
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise HookConfigError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        return []
    if not isinstance(data, dict):
        raise HookConfigError(f"{path}: top level must be a mapping")

    hooks = data.get("hooks") or {}
    if not isinstance(hooks, dict):
        raise HookConfigError(f"{path}: 'hooks' must be a mapping of hook type to entries")

    specs: list[HookSpec] = []
    for hook_type, entries in hooks.items():
        if not isinstance(entries, list):
            entries = [entries]
        specs.extend(HookSpec.from_value(str(hook_type), entry) for entry in entries)
    return specs


def resolve_callable(target: str) -> Callable[..., Any]:
    """Import a "module:attribute" target and return the callable.

    Raises:
        HookConfigError: If the module or attribute is missing, or the
            attribute is not callable
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise HookConfigError(f"Hook target '{target}' must look like 'module:attribute'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise HookConfigError(f"Cannot import module '{module_name}': {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise HookConfigError(f"'{target}' not found: no attribute '{part}'") from e

    if not callable(obj):
        raise HookConfigError(f"Hook target '{target}' is not callable")
    return obj


def load_hooks_file(path: Path) -> dict[str, list[Callable[..., Any]]]:
    """Load a hook file into a definition suitable for _setup_hooks().

    Entry names are dropped; use register_specs() to keep them.
    """
    hooks: dict[str, list[Callable[..., Any]]] = {}
    for spec in load_hook_specs(path):
        hooks.setdefault(spec.hook_type, []).append(resolve_callable(spec.target))
    return hooks


def register_specs(host: Any, specs: list[HookSpec]) -> Any:
    """Register HookSpecs on a host, keeping entry names. Returns the host."""
    for spec in specs:
        fn = resolve_callable(spec.target)
        if spec.name:
            add_hook(host, spec.hook_type, spec.name, fn)
        else:
            add_hook(host, spec.hook_type, fn)
    return host
